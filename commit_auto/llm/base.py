"""LLM Base Classes and Shared Code"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

FENCE = "```"

# An opening fence line carrying only an info string, e.g. "```text"
_FENCE_INFO_LINE = re.compile(r'^```[\w+-]*[ \t]*\n')


def extract_message(raw_text: str) -> str | None:
    """Reduce a model reply to a single clean commit message line.

    Strips a leading and trailing ``` fence, trims whitespace and keeps the
    first line. Returns None when nothing is left.
    """
    text = raw_text.strip()

    info_line = _FENCE_INFO_LINE.match(text)
    if info_line and text[info_line.end():].strip() not in ("", FENCE):
        text = text[info_line.end():]
    elif text.startswith(FENCE):
        text = text[len(FENCE):]

    if text.endswith(FENCE):
        text = text[:-len(FENCE)]

    text = text.strip()
    if not text:
        return None

    first_line = text.splitlines()[0].strip()
    first_line = first_line.strip('`').strip()
    return first_line or None


@dataclass
class LLMResponse:
    """Structured result of a generation run."""
    content: str
    model: str = ""
    tokens_used: int = 0
    attempts: int = 1


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class FailureReason(Enum):
    EXHAUSTED_RETRIES = "exhausted-retries"
    UNPARSABLE_RESPONSE = "unparsable-response"


class GenerationFailure(LLMError):
    """No usable commit message could be produced."""

    def __init__(self, message: str, reason: FailureReason, raw_response: str = ""):
        super().__init__(message)
        self.reason = reason
        self.raw_response = raw_response


class NothingToGenerate(Exception):
    """The diff was empty; there is nothing to describe."""
    pass


class LLMClient(ABC):
    """Abstract base for LLM clients."""

    @abstractmethod
    def generate(self, change_text: str) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    def generate_message(self, change_text: str) -> str:
        return self.generate(change_text).content
