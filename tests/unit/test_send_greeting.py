"""Unit tests for the demo greeting request client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from app.demo import send_greeting as demo
from app.demo.send_greeting import build_payload
from app.demo.send_greeting import send_greeting


@dataclass
class _FakeResponse:
    status_code: int
    text: str


class _SessionStub:
    def __init__(self, response: _FakeResponse) -> None:
        self._response = response
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def post(self, url: str, *, json: dict[str, Any], timeout: float) -> _FakeResponse:
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        return self._response


def test_build_payload_omits_missing_fields() -> None:
    assert build_payload("Barry", None) == {"addressee": "Barry"}
    assert build_payload(None, None) == {}


def test_build_payload_can_capitalize_keys() -> None:
    assert build_payload("Barry", "Mean", capitalized_keys=True) == {"Addressee": "Barry", "Tone": "Mean"}


def test_send_greeting_posts_json_body_to_root() -> None:
    session = _SessionStub(_FakeResponse(400, "Unknown tone Mean"))

    result = send_greeting(
        "http://localhost:5000/",
        addressee="Barry",
        tone="Mean",
        session=session,
        timeout_seconds=2.5,
    )

    assert result == (400, "Unknown tone Mean")
    assert session.calls == [
        {
            "url": "http://localhost:5000/",
            "json": {"addressee": "Barry", "tone": "Mean"},
            "timeout": 2.5,
        }
    ]


def test_send_greeting_requires_base_url() -> None:
    with pytest.raises(ValueError):
        send_greeting("/", addressee="Barry", tone="Casual", session=_SessionStub(_FakeResponse(200, "")))


def test_cli_prints_reply_and_reports_failure(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    captured: dict[str, Any] = {}

    def fake_send(base_url: str, **kwargs: Any) -> tuple[int, str]:
        captured["base_url"] = base_url
        captured.update(kwargs)
        return 400, "Missing addressee"

    monkeypatch.setattr(demo, "send_greeting", fake_send)

    exit_code = demo._cli(["--base-url", "http://svc:8000", "--no-addressee", "--tone", "Casual"])

    assert exit_code == 1
    assert captured == {
        "base_url": "http://svc:8000",
        "addressee": None,
        "tone": "Casual",
        "capitalized_keys": False,
    }
    assert capsys.readouterr().out == "status: 400\nMissing addressee\n"


class _OwnedSessionStub(_SessionStub):
    instances: list[_OwnedSessionStub] = []

    def __init__(self) -> None:
        super().__init__(_FakeResponse(200, "Hello Barry, from Giraffe!"))
        _OwnedSessionStub.instances.append(self)

    def __enter__(self) -> _OwnedSessionStub:
        return self

    def __exit__(self, *_: Any) -> None:
        self.closed = True


def test_send_greeting_closes_session_it_creates(monkeypatch: pytest.MonkeyPatch) -> None:
    _OwnedSessionStub.instances = []
    monkeypatch.setattr(demo.requests, "Session", _OwnedSessionStub)

    result = send_greeting("http://localhost:5000", addressee="Barry", tone="Casual", capitalized_keys=True)

    assert result == (200, "Hello Barry, from Giraffe!")
    [session] = _OwnedSessionStub.instances
    assert session.closed is True
    assert session.calls[0]["json"] == {"Addressee": "Barry", "Tone": "Casual"}


def test_send_greeting_leaves_injected_session_open() -> None:
    session = _SessionStub(_FakeResponse(200, "ok"))

    send_greeting("http://localhost:5000", addressee="Barry", tone="Casual", session=session)

    assert session.closed is False
