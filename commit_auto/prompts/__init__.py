"""Prompt Construction Package"""

from commit_auto.prompts.builder import PromptBuilder, SYSTEM_PROMPT, DIFF_PREAMBLE

__all__ = [
    "PromptBuilder",
    "SYSTEM_PROMPT",
    "DIFF_PREAMBLE",
]
