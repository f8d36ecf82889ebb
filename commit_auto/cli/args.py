"""CLI Argument Parsing"""

import argparse
import argcomplete

from commit_auto import RunMode, __version__

MODE_CHOICES = [mode.value for mode in RunMode if mode is not RunMode.NEW_COMMIT]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='git-commit-auto',
        description='Generate a commit message for staged changes with Gemini and commit',
        epilog='Examples: git-commit-auto | git-commit-auto push | git-commit-auto regenerate'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    parser.add_argument(
        'mode', nargs='?', choices=MODE_CHOICES, default=None,
        help="'push' to push after committing, 'regenerate' to reword the last commit"
    )

    parser.add_argument('--verbose', action='store_true', help='Show debug info (diff size, attempts, tokens used)')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
