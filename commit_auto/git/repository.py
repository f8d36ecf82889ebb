"""Git Repository - Read diffs from and write commits to git."""

import subprocess
from abc import ABC, abstractmethod

from commit_auto import RunMode


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class VersionControl(ABC):
    """The version-control operations a run depends on."""

    @abstractmethod
    def get_staged_diff(self) -> str:
        pass

    @abstractmethod
    def get_last_commit_diff(self) -> str:
        pass

    @abstractmethod
    def commit(self, message: str) -> None:
        pass

    @abstractmethod
    def amend_last(self, message: str) -> None:
        pass

    @abstractmethod
    def push(self) -> None:
        pass


class GitRepository(VersionControl):
    """Runs git in the current working directory."""

    def __init__(self, cwd: str | None = None):
        self.cwd = cwd
        self._verify_git_available()
        self._verify_in_repo()

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            # Show only the subcommand, never the message body
            detail = (e.stderr or e.stdout or "").strip()
            raise GitError(f"Git command failed: git {args[0]}\n{detail}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self._run_git('--version')
        except GitError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError:
            raise GitError("Not inside a git repository")

    def get_staged_diff(self) -> str:
        """Diff of the index against HEAD, i.e. exactly what would be committed."""
        return self._run_git('diff', '--staged')

    def get_last_commit_diff(self) -> str:
        """Diff introduced by HEAD against its first parent (or the empty tree)."""
        try:
            self._run_git('rev-parse', '--verify', 'HEAD')
        except GitError:
            raise GitError("No commit to regenerate a message for")
        if self._has_parent():
            return self._run_git('diff', 'HEAD^', 'HEAD')
        return self._run_git('show', '--format=', '--patch', 'HEAD')

    def _has_parent(self) -> bool:
        try:
            self._run_git('rev-parse', '--verify', '--quiet', 'HEAD^')
        except GitError:
            return False
        return True

    def commit(self, message: str) -> None:
        self._run_git('commit', '-m', message)

    def amend_last(self, message: str) -> None:
        # --only keeps anything currently staged out of the amended commit
        self._run_git('commit', '--amend', '--only', '--allow-empty', '-m', message)

    def push(self) -> None:
        self._run_git('push')


def get_change_text(vcs: VersionControl, mode: RunMode) -> str:
    """Return the diff the message should describe for this mode."""
    if mode is RunMode.REGENERATE_LAST:
        return vcs.get_last_commit_diff()
    return vcs.get_staged_diff()
