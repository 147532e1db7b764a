"""Tests for formatting module."""
from clidle.catalog import Catalog
from clidle.errors import UnknownItemError
from clidle.formatting import (
    format_catalog_table,
    format_error,
    format_header,
    format_holdings,
    format_offers,
)
from clidle.item import HoldingStatus, ItemDef
from clidle.state import EngineSnapshot, InputMode


def _make_catalog() -> Catalog:
    return Catalog([
        ItemDef(0, "intern", production_rate=0.1, cost=10, display_name="Intern"),
        ItemDef(1, "junior", production_rate=1.0, cost=100, display_name="Junior Developer"),
    ])


def _snapshot(mode=InputMode.NORMAL, holdings=()) -> EngineSnapshot:
    return EngineSnapshot(
        balance=12.5,
        holdings=tuple(holdings),
        input_mode=mode,
        pending_input="",
        last_error=None,
        production_per_tick=0.0,
        halted=False,
    )


def test_header_normal():
    header = format_header(_snapshot())
    assert header.startswith("Owning 12.50 code lines, Press ")
    assert "q to exit" in header
    assert "b to start buying" in header


def test_header_buying():
    header = format_header(_snapshot(InputMode.BUYING))
    assert "Esc to stop buying" in header
    assert "Enter to place the order" in header


def test_holdings():
    holdings = [HoldingStatus(0, "intern", "Intern", 3, 0.3)]
    lines = format_holdings(_snapshot(holdings=holdings))
    assert lines == ["Owning 3 Intern producing a total of 0.30 code line per second"]


def test_offers():
    lines = format_offers(_make_catalog())
    assert lines[0] == "Buy Intern(as intern) producing 0.10 code lines per second"
    assert len(lines) == 2


def test_error():
    assert format_error(UnknownItemError("cto")) == "Error: Unknown item: 'cto'"


def test_catalog_table():
    table = format_catalog_table(_make_catalog())
    assert "junior" in table
    assert "Junior Developer" in table
    assert table.endswith("2 item(s)")
