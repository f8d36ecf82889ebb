"""Configuration Management Package"""

import os
import shutil
import sys
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

from commit_auto.prompts import SYSTEM_PROMPT
from commit_auto.retry import RetryPolicy

API_KEY_VAR = "GEMINI_API_KEY"
TIMEOUT_VAR = "GCA_TIMEOUT"

DEFAULT_MODEL = "gemini-2.5-flash-lite"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_TIMEOUT = 30

# Tools that must be on PATH before anything touches the network
REQUIRED_TOOLS = ("git",)


class ConfigurationError(Exception):
    """Raised when the environment cannot support a run."""
    pass


@dataclass(frozen=True)
class GenerationConfig:
    """Fixed request parameters for the model endpoint."""
    model: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE
    system_prompt: str = SYSTEM_PROMPT
    temperature: float = 0.5
    max_output_tokens: int = 100
    timeout: int = DEFAULT_TIMEOUT

    @property
    def endpoint(self) -> str:
        return f"{self.api_base.rstrip('/')}/{self.model}:generateContent"


@dataclass(frozen=True)
class Settings:
    """Everything a run needs, resolved once at startup."""
    api_key: str = field(repr=False)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    retry: RetryPolicy = field(default_factory=RetryPolicy)


def _resolve_timeout(raw: Optional[str]) -> int:
    """Parse the timeout override, warning and falling back on bad input."""
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        timeout = int(raw)
    except ValueError:
        timeout = 0
    if timeout <= 0:
        print(f"Config warning: Invalid {TIMEOUT_VAR} '{raw}', using {DEFAULT_TIMEOUT}", file=sys.stderr)
        return DEFAULT_TIMEOUT
    return timeout


def check_required_tools(which: Optional[Callable[[str], Optional[str]]] = None) -> None:
    which = which or shutil.which
    for tool in REQUIRED_TOOLS:
        if which(tool) is None:
            raise ConfigurationError(f"{tool} is not installed. Please install it to continue.")


def load_settings(environ: Optional[Mapping[str, str]] = None,
                  which: Optional[Callable[[str], Optional[str]]] = None) -> Settings:
    """Build Settings from the environment.

    Raises ConfigurationError if the API key is missing or a required tool
    is not on PATH.
    """
    environ = os.environ if environ is None else environ

    api_key = (environ.get(API_KEY_VAR) or "").strip()
    if not api_key:
        raise ConfigurationError(
            f"{API_KEY_VAR} environment variable is not set.\n"
            "Please set it before running this command:\n"
            f"  export {API_KEY_VAR}='your-key-here'"
        )

    check_required_tools(which)

    generation = GenerationConfig(timeout=_resolve_timeout(environ.get(TIMEOUT_VAR)))
    return Settings(api_key=api_key, generation=generation)


__all__ = [
    "ConfigurationError",
    "GenerationConfig",
    "Settings",
    "load_settings",
    "check_required_tools",
    "API_KEY_VAR",
    "TIMEOUT_VAR",
    "DEFAULT_MODEL",
    "DEFAULT_API_BASE",
    "DEFAULT_TIMEOUT",
    "REQUIRED_TOOLS",
]
