"""MCP server wrapping EconomyEngine for interactive AI playtesting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcp.server.fastmcp import FastMCP

from clidle.catalog import Catalog
from clidle.command import Command, CommandKind
from clidle.config import GameConfig
from clidle.engine import EconomyEngine
from clidle.errors import TransactionError

# Maximum ticks per tick() call
_MAX_TICKS = 86400
# Maximum hand-written lines per code() call
_MAX_CODE = 1000
# Maximum characters per type_text() call
_MAX_TEXT = 256


@dataclass
class _GameHolder:
    """Holds the catalog and the active engine."""

    catalog: Catalog
    engine: EconomyEngine


# ── Tool logic functions (testable without MCP protocol) ────────────


def _tool_get_catalog(holder: _GameHolder) -> dict[str, Any]:
    return {
        "items": [
            {
                "id": item.id,
                "name": item.short_name,
                "display_name": item.display_name,
                "cost": item.cost,
                "production_rate": item.production_rate,
            }
            for item in holder.catalog
        ]
    }


def _tool_get_state(holder: _GameHolder) -> dict[str, Any]:
    snap = holder.engine.snapshot()
    return {
        "balance": round(snap.balance, 2),
        "production_per_tick": round(snap.production_per_tick, 4),
        "holdings": [
            {
                "id": h.item_id,
                "name": h.short_name,
                "count": h.count,
                "production": round(h.production, 4),
            }
            for h in snap.holdings
        ],
        "mode": snap.input_mode.name,
        "pending_input": snap.pending_input,
        "last_error": str(snap.last_error) if snap.last_error else None,
        "halted": snap.halted,
    }


def _tool_send_command(holder: _GameHolder, kind: str, char: str = "") -> dict[str, Any]:
    try:
        command_kind = CommandKind[kind.upper()]
    except KeyError:
        return {
            "error": f"Unknown command: {kind!r}. "
            f"Expected one of {[k.name for k in CommandKind]}"
        }
    try:
        command = Command(command_kind, char)
    except ValueError as e:
        return {"error": str(e)}

    holder.engine.apply_command(command)
    return _tool_get_state(holder)


def _tool_type_text(holder: _GameHolder, text: str) -> dict[str, Any]:
    if len(text) > _MAX_TEXT:
        return {"error": f"Text cannot exceed {_MAX_TEXT} characters"}
    for command in Command.type_text(text):
        holder.engine.apply_command(command)
    return _tool_get_state(holder)


def _tool_buy(holder: _GameHolder, name: str, quantity: int = 1) -> dict[str, Any]:
    if quantity < 1:
        return {"error": "Quantity must be at least 1"}
    try:
        bought = holder.engine.buy(name, quantity)
    except TransactionError as e:
        return {"success": False, "reason": str(e)}
    if not bought:
        return {"success": False, "reason": "Cannot afford"}
    return {
        "success": True,
        "name": name,
        "new_count": holder.engine.state.item_count(holder.catalog.lookup_by_name(name).id),
        "balance": round(holder.engine.state.balance, 2),
    }


def _tool_sell(holder: _GameHolder, name: str, quantity: int = 1) -> dict[str, Any]:
    if quantity < 1:
        return {"error": "Quantity must be at least 1"}
    try:
        holder.engine.sell(name, quantity)
    except TransactionError as e:
        return {"success": False, "reason": str(e)}
    return {"success": True, "name": name}


def _tool_code(holder: _GameHolder, count: int = 1) -> dict[str, Any]:
    if count < 1:
        return {"error": "Count must be at least 1"}
    if count > _MAX_CODE:
        return {"error": f"Count cannot exceed {_MAX_CODE}"}
    for _ in range(count):
        holder.engine.add_resource_unit()
    return {"written": count, "balance": round(holder.engine.state.balance, 2)}


def _tool_tick(holder: _GameHolder, count: int = 1) -> dict[str, Any]:
    if count < 1:
        return {"error": "Count must be at least 1"}
    if count > _MAX_TICKS:
        return {"error": f"Cannot run more than {_MAX_TICKS} ticks per call"}

    earned = 0.0
    for _ in range(count):
        earned += holder.engine.tick()
    return {
        "ticks": count,
        "earned": round(earned, 2),
        "balance": round(holder.engine.state.balance, 2),
    }


def _tool_new_game(holder: _GameHolder) -> dict[str, Any]:
    holder.engine = EconomyEngine(holder.catalog)
    return {"success": True, "message": "Game reset to initial state"}


# ── Server factory ──────────────────────────────────────────────────


def create_server(catalog: Catalog, config: GameConfig | None = None) -> FastMCP:
    """Create an MCP server wrapping an EconomyEngine for the given catalog."""
    config = config or GameConfig()
    holder = _GameHolder(catalog=catalog, engine=EconomyEngine(catalog))

    mcp = FastMCP(name=config.name)

    @mcp.tool()
    def get_catalog() -> dict[str, Any]:
        """List every item for sale: short name, display name, cost, production per tick."""
        return _tool_get_catalog(holder)

    @mcp.tool()
    def get_state() -> dict[str, Any]:
        """Get the current snapshot: balance, holdings, input mode, pending input, last error."""
        return _tool_get_state(holder)

    @mcp.tool()
    def send_command(kind: str, char: str = "") -> dict[str, Any]:
        """Apply one input command (e.g. ENTER_BUY_MODE, APPEND_CHAR with char, SUBMIT)."""
        return _tool_send_command(holder, kind, char)

    @mcp.tool()
    def type_text(text: str) -> dict[str, Any]:
        """Type text into the pending input, one APPEND_CHAR per character."""
        return _tool_type_text(holder, text)

    @mcp.tool()
    def buy(name: str, quantity: int = 1) -> dict[str, Any]:
        """Buy items by short name directly, bypassing the input prompt."""
        return _tool_buy(holder, name, quantity)

    @mcp.tool()
    def sell(name: str, quantity: int = 1) -> dict[str, Any]:
        """Sell items by short name. Currently always reports not implemented."""
        return _tool_sell(holder, name, quantity)

    @mcp.tool()
    def code(count: int = 1) -> dict[str, Any]:
        """Write code lines by hand, one per count (max 1000)."""
        return _tool_code(holder, count)

    @mcp.tool()
    def tick(count: int = 1) -> dict[str, Any]:
        """Apply production for the given number of ticks (max 86400)."""
        return _tool_tick(holder, count)

    @mcp.tool()
    def new_game() -> dict[str, Any]:
        """Reset the game to initial state."""
        return _tool_new_game(holder)

    return mcp
