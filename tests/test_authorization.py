"""Tests for authorize URL construction and browser launch."""

from __future__ import annotations

import webbrowser
from urllib.parse import parse_qs, urlparse

import pytest

from oauth.authorization import build_authorize_url, open_browser
from settings import AUTHORIZE_ENDPOINT, REDIRECT_URI, SCOPES
from utils.errors import ConfigError


def test_build_authorize_url_parameters(client_env: None) -> None:
    url = build_authorize_url()
    parsed = urlparse(url)

    assert url.startswith(AUTHORIZE_ENDPOINT + "?")
    assert parse_qs(parsed.query) == {
        "client_id": ["test-client"],
        "redirect_uri": [REDIRECT_URI],
        "response_type": ["code"],
        "scope": [SCOPES],
    }


@pytest.mark.parametrize("client_id", ["plain", "client_id=dup&scope=x", "with space"])
def test_build_authorize_url_has_each_parameter_once(client_id: str) -> None:
    query = urlparse(build_authorize_url(client_id)).query
    names = [pair.split("=", 1)[0] for pair in query.split("&")]

    assert sorted(names) == ["client_id", "redirect_uri", "response_type", "scope"]
    assert query.count("response_type=code") == 1
    assert parse_qs(query)["client_id"] == [client_id]


def test_build_authorize_url_requires_client_id(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CLIENT_ID", raising=False)
    with pytest.raises(ConfigError):
        build_authorize_url()


def test_open_browser_success(monkeypatch: pytest.MonkeyPatch) -> None:
    opened = []
    monkeypatch.setattr(webbrowser, "open", lambda url: opened.append(url) or True)

    assert open_browser("https://example.test") is True
    assert opened == ["https://example.test"]


def test_open_browser_failure_is_not_fatal(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(url: str) -> bool:
        raise webbrowser.Error("no browser")

    monkeypatch.setattr(webbrowser, "open", boom)

    assert open_browser("https://example.test") is False
