"""
Gemini Commit Automation

Generate a conventional commit message from staged git changes and commit with it.
"""

from enum import Enum

__version__ = "1.0.0"

# Commit types the model is asked to use (see prompts/builder.py, output coloring)
COMMIT_TYPE_NAMES = ('FEAT', 'FIX', 'REFACTOR', 'DOCS', 'STYLE', 'TEST', 'CHORE')


class RunMode(Enum):
    """What to do with the generated message."""
    NEW_COMMIT = "commit"
    NEW_COMMIT_AND_PUSH = "push"
    REGENERATE_LAST = "regenerate"

    @classmethod
    def from_argument(cls, argument: str | None) -> 'RunMode':
        """Map the positional CLI word (or its absence) to a mode."""
        if argument is None:
            return cls.NEW_COMMIT
        for mode in cls:
            if mode is not cls.NEW_COMMIT and mode.value == argument:
                return mode
        raise ValueError(f"Unknown mode: {argument}")

    @property
    def amends(self) -> bool:
        return self is RunMode.REGENERATE_LAST
