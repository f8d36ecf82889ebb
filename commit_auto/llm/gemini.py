"""Gemini generateContent Client"""

import json
import http.client
import socket
import urllib.error
import urllib.parse
import urllib.request

from commit_auto.config import GenerationConfig
from commit_auto.llm.base import (
    LLMClient,
    LLMResponse,
    GenerationFailure,
    FailureReason,
    NothingToGenerate,
    extract_message,
)
from commit_auto.prompts import PromptBuilder
from commit_auto.retry import AttemptFailed, RetriesExhausted, RetryCallback, RetryPolicy, call_with_retry

# How much of an unexpected response body to echo back in errors
MAX_ERROR_BODY = 300


class GeminiClient(LLMClient):
    """Gemini API client. The key is sent as the `key` query parameter."""

    def __init__(self, api_key: str, config: GenerationConfig | None = None,
                 retry: RetryPolicy | None = None, on_retry: RetryCallback | None = None):
        self.api_key = api_key
        self.config = config or GenerationConfig()
        self.retry = retry or RetryPolicy()
        self._on_retry = on_retry
        self._builder = PromptBuilder()

    @property
    def name(self) -> str:
        return f"Gemini ({self.config.model})"

    @property
    def model(self) -> str:
        return self.config.model

    def _request_url(self) -> str:
        query = urllib.parse.urlencode({"key": self.api_key})
        return f"{self.config.endpoint}?{query}"

    def _redact(self, text: str) -> str:
        return text.replace(self.api_key, "***") if self.api_key else text

    def _excerpt(self, body: str) -> str:
        body = self._redact(body.strip())
        if len(body) > MAX_ERROR_BODY:
            return body[:MAX_ERROR_BODY] + "..."
        return body

    def _call_api(self, payload: dict) -> dict:
        """Make a single API call to Gemini."""
        data = json.dumps(payload).encode('utf-8')
        req = urllib.request.Request(
            self._request_url(),
            data=data,
            headers={"Content-Type": "application/json"},
            method="POST",
        )

        with urllib.request.urlopen(req, timeout=self.config.timeout) as response:
            return json.loads(response.read().decode('utf-8'))

    def _attempt(self, payload: dict) -> tuple[str, dict]:
        """One delivery attempt. Any failure is reported as retryable."""
        try:
            result = self._call_api(payload)
        except urllib.error.HTTPError as e:
            body = ""
            try:
                body = e.read().decode('utf-8', errors='replace')
            except (OSError, http.client.HTTPException):
                pass
            raise AttemptFailed(f"Gemini error ({e.code}): {e.reason}. Response: {self._excerpt(body)}")
        except urllib.error.URLError as e:
            if isinstance(e.reason, socket.timeout):
                raise AttemptFailed(f"Request timed out after {self.config.timeout}s")
            raise AttemptFailed(self._redact(f"Gemini request failed: {e.reason}"))
        except socket.timeout:
            raise AttemptFailed(f"Request timed out after {self.config.timeout}s")
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise AttemptFailed(f"Invalid JSON from Gemini: {e}")
        except http.client.HTTPException as e:
            raise AttemptFailed(f"Incomplete response from Gemini: {e}")
        except OSError as e:
            raise AttemptFailed(self._redact(f"Connection to Gemini lost: {e}"))

        return self._extract_text(result), result

    def _extract_text(self, result) -> str:
        """Pull candidates[0].content.parts[0].text out of a reply."""
        try:
            text = result["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            text = None

        if text is None or text is False:
            raise AttemptFailed(
                "Unexpected response shape. Response: "
                f"{self._excerpt(json.dumps(result))}"
            )
        return text if isinstance(text, str) else json.dumps(text)

    def generate(self, change_text: str) -> LLMResponse:
        """Turn a diff into a single-line commit message.

        Delivery and shape failures are retried per the retry policy. An empty
        message from a well-formed reply fails straight away.
        """
        if not change_text or not change_text.strip():
            raise NothingToGenerate("Nothing to generate a commit message for")

        payload = self._builder.build(change_text, self.config)
        attempts = 0

        def attempt() -> tuple[str, dict]:
            nonlocal attempts
            attempts += 1
            return self._attempt(payload)

        try:
            text, result = call_with_retry(attempt, self.retry, on_retry=self._on_retry)
        except RetriesExhausted as e:
            raise GenerationFailure(
                "Max retries reached. Failed to get a response from Gemini.\n"
                f"Last error: {e.last_error}",
                reason=FailureReason.EXHAUSTED_RETRIES,
            ) from e

        message = extract_message(text)
        if message is None:
            raw = self._excerpt(json.dumps(result))
            raise GenerationFailure(
                "Failed to parse a valid commit message from the AI response.\n"
                f"Raw Response: {raw}",
                reason=FailureReason.UNPARSABLE_RESPONSE,
                raw_response=raw,
            )

        usage = result.get("usageMetadata")
        tokens_used = usage.get("totalTokenCount", 0) if isinstance(usage, dict) else 0
        return LLMResponse(
            content=message,
            model=self.config.model,
            tokens_used=tokens_used,
            attempts=attempts,
        )
