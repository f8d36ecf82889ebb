"""Commit Sequencer - Apply the generated message to the repository."""

from dataclasses import dataclass

from commit_auto import RunMode
from commit_auto.git.repository import GitError, VersionControl


class CommitFailure(GitError):
    """Creating the commit failed; nothing was changed."""
    pass


class AmendFailure(GitError):
    """Amending the last commit failed; the commit is unchanged."""
    pass


class PushFailure(GitError):
    """The commit was created but could not be pushed.

    The local commit is left in place.
    """

    committed = True


@dataclass
class SequenceResult:
    """What a run did to the repository."""
    mode: RunMode
    message: str
    committed: bool = False
    amended: bool = False
    pushed: bool = False


class CommitSequencer:
    """Runs the git mutations for a mode, stopping at the first failure."""

    def __init__(self, vcs: VersionControl, on_step=None):
        self.vcs = vcs
        self._on_step = on_step

    def _step(self, description: str) -> None:
        if self._on_step:
            self._on_step(description)

    def run(self, mode: RunMode, message: str) -> SequenceResult:
        result = SequenceResult(mode=mode, message=message)

        if mode.amends:
            self._amend(message)
            result.amended = True
            return result

        self._commit(message)
        result.committed = True

        if mode is RunMode.NEW_COMMIT_AND_PUSH:
            self._push()
            result.pushed = True

        return result

    def _commit(self, message: str) -> None:
        self._step("Committing...")
        try:
            self.vcs.commit(message)
        except GitError as e:
            raise CommitFailure(f"Commit failed: {e}") from e

    def _amend(self, message: str) -> None:
        self._step("Amending last commit...")
        try:
            self.vcs.amend_last(message)
        except GitError as e:
            raise AmendFailure(f"Amend failed: {e}") from e

    def _push(self) -> None:
        self._step("Pushing...")
        try:
            self.vcs.push()
        except GitError as e:
            raise PushFailure(
                f"Push failed: {e}\n"
                "The commit was created locally and has not been rolled back."
            ) from e
