"""Git Operations Package"""

from commit_auto.git.repository import GitRepository, GitError, VersionControl, get_change_text
from commit_auto.git.sequencer import (
    CommitSequencer,
    SequenceResult,
    CommitFailure,
    AmendFailure,
    PushFailure,
)

__all__ = [
    "GitRepository",
    "GitError",
    "VersionControl",
    "get_change_text",
    "CommitSequencer",
    "SequenceResult",
    "CommitFailure",
    "AmendFailure",
    "PushFailure",
]
