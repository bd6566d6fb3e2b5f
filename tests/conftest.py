from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from invite_server.main import app
from services.email import adapter


class StubResponse:
    def __init__(self, status_code: int = 202, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


class StubSession:
    """Records outbound posts instead of hitting SendGrid."""

    def __init__(self, response: StubResponse | None = None, error: Exception | None = None) -> None:
        self.response = response or StubResponse()
        self.error = error
        self.calls: list[dict] = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):  # noqa: ANN002
        return False

    def reply(self, status_code: int, text: str = "") -> None:
        self.response = StubResponse(status_code, text)

    def post(self, url, json=None, headers=None, timeout=None):  # noqa: ANN001
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def sendgrid(monkeypatch):
    session = StubSession()
    monkeypatch.setattr(adapter, "_session", lambda: session)
    return session


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def invite_body():
    return {
        "to": "a@b.com",
        "name": "Alice",
        "inviter": "Bob",
        "invite_link": "https://x/y",
    }
