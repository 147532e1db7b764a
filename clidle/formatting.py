from __future__ import annotations

from clidle.catalog import Catalog
from clidle.errors import TransactionError
from clidle.keymap import key_help
from clidle.state import EngineSnapshot


def format_header(snapshot: EngineSnapshot) -> str:
    """Balance plus the key help for the current mode."""
    bindings = ", ".join(f"{key} {action}" for key, action in key_help(snapshot.input_mode))
    return f"Owning {snapshot.balance:.2f} code lines, Press {bindings}."


def format_holdings(snapshot: EngineSnapshot) -> list[str]:
    return [
        f"Owning {h.count} {h.display_name} producing a total of "
        f"{h.production:.2f} code line per second"
        for h in snapshot.holdings
    ]


def format_offers(catalog: Catalog) -> list[str]:
    return [
        f"Buy {item.display_name}(as {item.short_name}) producing "
        f"{item.production_rate:.2f} code lines per second"
        for item in catalog
    ]


def format_error(error: TransactionError) -> str:
    return f"Error: {error}"


def format_catalog_table(catalog: Catalog) -> str:
    """Format a catalog for console output."""
    lines: list[str] = []
    lines.append(f"{'ID':>4}  {'NAME':<16} {'COST':>12} {'RATE':>10}  DESCRIPTION")
    for item in catalog:
        lines.append(
            f"{item.id:>4}  {item.short_name:<16} {item.cost:>12} "
            f"{item.production_rate:>10.2f}  {item.display_name}"
        )
    lines.append(f"\n{len(catalog)} item(s)")
    return "\n".join(lines)
