"""Shared fakes for the git layer and the Gemini HTTP endpoint."""

import json

import pytest

from commit_auto.git import GitError, VersionControl

TEST_API_KEY = "test-api-key-123"

SAMPLE_DIFF = (
    "diff --git a/src/parser.py b/src/parser.py\n"
    "--- a/src/parser.py\n"
    "+++ b/src/parser.py\n"
    "@@ -1,3 +1,7 @@\n"
    "+def parse_line(line):\n"
    "+    return line.split(',')\n"
)


def gemini_reply(text, tokens=None) -> dict:
    """Build a generateContent reply carrying the given text."""
    reply = {"candidates": [{"content": {"parts": [{"text": text}]}}]}
    if tokens is not None:
        reply["usageMetadata"] = {"totalTokenCount": tokens}
    return reply


# ---------------------------------------------------------------------------
# Version control
# ---------------------------------------------------------------------------

class FakeVersionControl(VersionControl):
    """In-memory repository. Commits are (message, diff) tuples."""

    def __init__(self, staged="", commits=None, fail_on=()):
        self.staged = staged
        self.commits = list(commits or [])
        self.fail_on = set(fail_on)
        self.calls = []
        self.pushed = []

    def _record(self, op):
        self.calls.append(op)
        if op in self.fail_on:
            raise GitError(f"Git command failed: git {op}\nsimulated {op} failure")

    def get_staged_diff(self):
        self._record("diff")
        return self.staged

    def get_last_commit_diff(self):
        self._record("show")
        if not self.commits:
            raise GitError("No commit to regenerate a message for")
        return self.commits[-1][1]

    def commit(self, message):
        self._record("commit")
        if not self.staged:
            raise GitError("Git command failed: git commit\nnothing to commit")
        self.commits.append((message, self.staged))
        self.staged = ""

    def amend_last(self, message):
        self._record("amend")
        if not self.commits:
            raise GitError("Git command failed: git commit\nno commit to amend")
        _, diff = self.commits[-1]
        self.commits[-1] = (message, diff)

    def push(self):
        self._record("push")
        self.pushed = list(self.commits)

    @property
    def messages(self):
        return [message for message, _ in self.commits]


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

class FakeHTTPResponse:

    def __init__(self, body: bytes):
        self._body = body

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False


class FakeUrlopen:
    """Stands in for urllib.request.urlopen.

    Replies are consumed in order; the last one repeats. A reply may be a
    dict or list (sent as JSON), a str (sent verbatim) or an exception to raise.
    """

    def __init__(self, replies):
        self.replies = list(replies)
        self.requests = []

    def __call__(self, req, timeout=None):
        self.requests.append(req)
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, BaseException):
            raise reply
        if isinstance(reply, (dict, list)):
            reply = json.dumps(reply)
        return FakeHTTPResponse(reply.encode('utf-8'))

    @property
    def call_count(self):
        return len(self.requests)

    def payload(self, index=0):
        return json.loads(self.requests[index].data.decode('utf-8'))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_api(monkeypatch):
    """Return a function that installs a FakeUrlopen with the given replies."""
    def _install(*replies):
        fake = FakeUrlopen(replies)
        monkeypatch.setattr("commit_auto.llm.gemini.urllib.request.urlopen", fake)
        return fake
    return _install


@pytest.fixture(autouse=True)
def sleeps(monkeypatch):
    """Record retry backoff instead of waiting."""
    recorded = []
    monkeypatch.setattr("commit_auto.retry.time.sleep", recorded.append)
    return recorded
