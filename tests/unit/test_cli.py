from __future__ import annotations

import socket
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from foodorder import cli


def _busy_socket() -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(1)
    return sock


def test_requested_port_is_used_as_is() -> None:
    assert cli.select_port("9123") == 9123


def test_invalid_argument_falls_back_to_probe() -> None:
    busy = _busy_socket()
    try:
        busy_port = busy.getsockname()[1]
        port = cli.select_port("not-a-port", candidates=[busy_port], host="127.0.0.1")
    finally:
        busy.close()
    assert port != busy_port
    assert port > 0


def test_first_free_candidate_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "_can_bind", lambda host, port: port == 8083)
    assert cli.select_port(None) == 8083


def test_no_bindable_port_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(host: str) -> int:
        raise OSError("no ports")

    monkeypatch.setattr(cli, "_can_bind", lambda host, port: False)
    monkeypatch.setattr(cli, "_ephemeral_port", _fail)
    with pytest.raises(cli.PortUnavailableError):
        cli.select_port(None)


def test_main_exits_non_zero_when_no_port(monkeypatch: pytest.MonkeyPatch) -> None:
    def _raise(raw_port):
        raise cli.PortUnavailableError("nothing to bind")

    monkeypatch.setattr(cli, "select_port", _raise)
    assert cli.main([]) == 1


def test_main_serves_created_app(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = {}

    def _fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(cli.uvicorn, "run", _fake_run)
    assert cli.main(["8099"]) == 0
    assert calls["port"] == 8099
    assert calls["app"].state.port == 8099
