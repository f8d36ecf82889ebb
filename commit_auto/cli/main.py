"""CLI Main Entry Point"""

import sys

from commit_auto import RunMode
from commit_auto.config import ConfigurationError, Settings, load_settings
from commit_auto.git import (
    GitRepository,
    GitError,
    PushFailure,
    CommitSequencer,
    SequenceResult,
    get_change_text,
)
from commit_auto.llm import GeminiClient, GenerationFailure, NothingToGenerate, LLMResponse
from commit_auto.output import bold, dim, info, print_error, print_success, print_warning, colorize_commit_type

from commit_auto.cli.args import parse_args
from commit_auto.cli.commands import run_install_completion

NO_STAGED_CHANGES = "No staged changes found. Did you forget to 'git add'?"
NO_LAST_COMMIT_CHANGES = "The last commit has no changes to describe."


def _report_retry(attempt, delay, error):
    """Print a notice before the generator waits and tries again."""
    print_warning(f"API call failed or returned an unexpected response. Retrying in {delay:g}s...")
    print(dim(f"  Attempt {attempt}: {error}"), file=sys.stderr)


def _report_no_changes(mode):
    if mode is RunMode.REGENERATE_LAST:
        print(NO_LAST_COMMIT_CHANGES)
    else:
        print(NO_STAGED_CHANGES)


def _print_verbose_stats(args, change_text, response: LLMResponse):
    """Print verbose size and token statistics."""
    if not args.verbose:
        return
    print(dim(f"  Diff: {len(change_text)} chars, {len(change_text.splitlines())} lines"))
    print(dim(f"  Model: {response.model}"))
    print(dim(f"  Attempts: {response.attempts}"))
    print(dim(f"  Tokens: {response.tokens_used}"))


def _report_result(result: SequenceResult):
    if result.amended:
        print_success("Commit amended!")
        return
    print_success("Commit successful!")
    if result.pushed:
        print_success("Pushed to remote!")


def _generate(args, settings: Settings, change_text: str) -> str:
    """Run the Message Generator and show the message it produced."""
    client = GeminiClient(
        api_key=settings.api_key,
        config=settings.generation,
        retry=settings.retry,
        on_retry=_report_retry,
    )

    print(f"Contacting {info(client.name)} to generate commit message...")
    response = client.generate(change_text)

    _print_verbose_stats(args, change_text, response)
    print(f"Generated Message: {bold(colorize_commit_type(response.content))}")
    return response.content


def _run(args) -> int:
    """Main generation and commit flow.

    Returns:
        int: Exit code
    """
    mode = RunMode.from_argument(args.mode)

    try:
        settings = load_settings()
    except ConfigurationError as e:
        print_error(str(e))
        return 1

    try:
        repo = GitRepository()
        change_text = get_change_text(repo, mode)
    except GitError as e:
        print_error(str(e))
        return 1

    if not change_text.strip():
        _report_no_changes(mode)
        return 0

    try:
        message = _generate(args, settings, change_text)
    except NothingToGenerate:
        _report_no_changes(mode)
        return 0
    except GenerationFailure as e:
        print_error(str(e))
        return 1

    sequencer = CommitSequencer(repo, on_step=print)
    try:
        result = sequencer.run(mode, message)
    except PushFailure as e:
        print_success("Commit successful!")
        print_error(str(e))
        return 1
    except GitError as e:
        print_error(str(e))
        return 1

    _report_result(result)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.install_completion:
        return run_install_completion()

    try:
        return _run(args)
    except KeyboardInterrupt:
        print()
        print(dim("Cancelled."))
        return 130


if __name__ == "__main__":
    sys.exit(main())
