"""LLM Client Package"""

from commit_auto.llm.base import (
    LLMClient,
    LLMResponse,
    LLMError,
    GenerationFailure,
    FailureReason,
    NothingToGenerate,
    extract_message,
)
from commit_auto.llm.gemini import GeminiClient

__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMError",
    "GenerationFailure",
    "FailureReason",
    "NothingToGenerate",
    "GeminiClient",
    "extract_message",
]
