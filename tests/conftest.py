"""Shared fixtures: a fake connection recording calls and canned responses."""

import pytest

from linkedin_v2.core.constants import (
    ENV_ACCESS_TOKEN,
    ENV_API_BASE_URL,
    ENV_TIMEOUT,
    ENV_UPLOAD_TIMEOUT,
    ENV_PERSON_URN,
)


class DummyResponse:
    def __init__(self, status_code=200, text="", headers=None):
        self.status_code = status_code
        self.text = text
        self.content = text.encode("utf-8")
        self.headers = headers or {}


class FakeConnection:
    """Stands in for LinkedInConnection.

    ``responses`` maps a path or URL to a DummyResponse, or to an exception
    that is raised instead. Uploaded streams are read eagerly so tests can
    check the bytes sent, and kept so tests can check they were closed.
    """

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    def post(self, path, data=None, headers=None, timeout=None):
        call = {"path": path, "data": data, "headers": headers, "timeout": timeout}
        if hasattr(data, "read"):
            call["stream"] = data
            call["body"] = data.read()
        self.calls.append(call)

        result = self.responses.get(path, DummyResponse(status_code=201))
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def clean_env(monkeypatch):
    """Remove LinkedIn settings from the environment."""
    for key in [ENV_ACCESS_TOKEN, ENV_API_BASE_URL, ENV_TIMEOUT, ENV_UPLOAD_TIMEOUT, ENV_PERSON_URN]:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
