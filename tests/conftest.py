"""Shared test fixtures for ouraclaw."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable
from urllib.parse import parse_qs

import httpx
import pytest

# Keep the developer's real env file out of the test run; settings loads
# it on first import.
os.environ["OURACLAW_ENV_PATH"] = os.path.join(os.path.dirname(__file__), ".env.does-not-exist")

from utils.storage import CredentialPair, CredentialStore  # noqa: E402


class InMemoryCredentialStore(CredentialStore):
    """Credential store double that records writes."""

    def __init__(self, access_token: str | None = None, refresh_token: str | None = None) -> None:
        self.pair = CredentialPair(access_token or None, refresh_token or None)
        self.writes: list[tuple[str, str]] = []

    def read(self) -> CredentialPair:
        return self.pair

    def write(self, access_token: str, refresh_token: str) -> None:
        self.writes.append((access_token, refresh_token))
        self.pair = CredentialPair(access_token or None, refresh_token or None)


def form_body(request: httpx.Request) -> dict[str, str]:
    """Decode a form-encoded request body into a flat dict."""
    return {key: values[0] for key, values in parse_qs(request.content.decode()).items()}


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def client_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIENT_ID", "test-client")
    monkeypatch.setenv("CLIENT_SECRET", "test-secret")


@pytest.fixture
def env_file(tmp_path: Path) -> Path:
    return tmp_path / "config" / "ouraclaw" / ".env"
