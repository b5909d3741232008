"""Tests for CLI argument parsing and the error boundary."""

from __future__ import annotations

import importlib
import json

import httpx
import pytest

import cli.handlers
from api import OuraClient
from cli.main import build_parser, main
from conftest import InMemoryCredentialStore, mock_client

# cli/__init__.py re-exports main(), which shadows the submodule attribute
cli_main = importlib.import_module("cli.main")


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli_main, "setup_logging", lambda debug=False: None)


def test_parse_command_only() -> None:
    args = build_parser().parse_args(["auth"])
    assert args.command == "auth"
    assert args.start is None
    assert args.end is None


def test_parse_short_and_long_options() -> None:
    args = build_parser().parse_args(["score", "-s", "2025-01-01", "--end", "2025-01-07"])
    assert args.command == "score"
    assert args.start == "2025-01-01"
    assert args.end == "2025-01-07"


def test_parse_options_before_command() -> None:
    args = build_parser().parse_args(["--start", "2025-01-01", "sleep"])
    assert args.command == "sleep"
    assert args.start == "2025-01-01"


@pytest.mark.parametrize("argv", [[], ["unknown"]])
def test_missing_or_unknown_command_prints_usage(argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    assert main(argv, store=InMemoryCredentialStore()) == 1

    captured = capsys.readouterr()
    assert "Usage: ouraclaw <command>" in captured.err
    assert captured.out == ""


def test_missing_token_reports_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["score"], store=InMemoryCredentialStore()) == 1

    captured = capsys.readouterr()
    assert "Error:" in captured.err
    assert "No access token" in captured.err
    assert captured.out == ""


def test_score_prints_pretty_json(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    payload = {"data": [{"day": "2025-01-01", "score": 82}]}
    captured_requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(request)
        return httpx.Response(200, json=payload)

    monkeypatch.setattr(cli.handlers, "OuraClient", lambda store: OuraClient(store, mock_client(handler)))

    exit_code = main(["score", "-s", "2025-01-01", "-e", "2025-01-02"], store=InMemoryCredentialStore("tok"))

    assert exit_code == 0
    out = capsys.readouterr().out
    assert out == json.dumps(payload, indent=2) + "\n"
    assert captured_requests[0].url.path == "/v2/usercollection/daily_sleep"
    assert captured_requests[0].url.params["start_date"] == "2025-01-01"


def test_sleep_api_error(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="Internal Server Error")

    monkeypatch.setattr(cli.handlers, "OuraClient", lambda store: OuraClient(store, mock_client(handler)))

    assert main(["sleep"], store=InMemoryCredentialStore("tok")) == 1
    assert "API request failed (500)" in capsys.readouterr().err


def test_auth_runs_oauth_flow(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    async def fake_flow(store, console=None):
        calls.append(store)

    monkeypatch.setattr(cli.handlers, "run_oauth_flow", fake_flow)
    store = InMemoryCredentialStore()

    assert main(["auth"], store=store) == 0
    assert calls == [store]
