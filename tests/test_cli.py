"""Tests for cli module."""
import json
import logging

import pytest

from clidle import cli


def _write_catalog(tmp_path) -> str:
    path = tmp_path / "items.json"
    path.write_text(json.dumps([
        {"cps": 0.1, "cost": 10, "name": "intern", "long_name": "Intern"},
        {"cps": 1.0, "cost": 100, "name": "junior", "long_name": "Junior Developer"},
    ]), encoding="utf-8")
    return str(path)


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as info:
        cli.main([])
    assert info.value.code == 0
    assert "clidle" in capsys.readouterr().out


def test_catalog_command(tmp_path, capsys):
    cli.main(["catalog", "--catalog", _write_catalog(tmp_path)])
    out = capsys.readouterr().out
    assert "Junior Developer" in out
    assert "2 item(s)" in out


def test_catalog_command_bundled(capsys):
    cli.main(["catalog"])
    assert "intern" in capsys.readouterr().out


def test_missing_catalog_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        cli.main(["catalog", "--catalog", str(tmp_path / "missing.json")])
    assert info.value.code == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_malformed_catalog_exits(tmp_path, capsys):
    path = tmp_path / "items.json"
    path.write_text('{"not": "a list"}', encoding="utf-8")
    with pytest.raises(SystemExit) as info:
        cli.main(["catalog", "--catalog", str(path)])
    assert info.value.code == 1
    assert "expected a list" in capsys.readouterr().err


def test_play_builds_engine_and_config(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr("clidle.tui.run_curses", lambda engine, config: calls.append((engine, config)))
    cli.main([
        "play",
        "--catalog", _write_catalog(tmp_path),
        "--tick-interval", "0.5",
        "--log-file", str(tmp_path / "clidle.log"),
    ])
    assert len(calls) == 1
    engine, config = calls[0]
    assert config.tick_interval == 0.5
    assert config.poll_timeout == 0.1
    assert engine.catalog.lookup_by_name("junior") is not None


def test_play_rejects_bad_interval(capsys):
    with pytest.raises(SystemExit) as info:
        cli.main(["play", "--tick-interval", "0"])
    assert info.value.code == 1
    assert "tick_interval must be positive" in capsys.readouterr().err


def test_configure_logging_without_file_keeps_propagation():
    logger = logging.getLogger("clidle")
    cli.configure_logging(None, "INFO")
    assert logger.propagate
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
