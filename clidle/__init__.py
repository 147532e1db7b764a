# clidle — Idle Game About Writing Code Lines

from clidle.item import ItemDef, HoldingStatus
from clidle.catalog import Catalog
from clidle.errors import (
    TransactionError,
    UnknownItemError,
    SellNotImplementedError,
    CatalogError,
)
from clidle.command import Command, CommandKind, parse_order
from clidle.state import (
    InputMode,
    NormalMode,
    PromptMode,
    EngineState,
    EngineSnapshot,
)
from clidle.engine import EconomyEngine
from clidle.config import GameConfig
from clidle.loader import load_catalog, parse_catalog
from clidle.frontend import Frontend
from clidle.loop import GameLoop
from clidle.keymap import translate_key
from clidle.formatting import (
    format_header,
    format_holdings,
    format_offers,
    format_error,
    format_catalog_table,
)

__all__ = [
    # Data model
    "ItemDef",
    "HoldingStatus",
    "Catalog",
    # Errors
    "TransactionError",
    "UnknownItemError",
    "SellNotImplementedError",
    "CatalogError",
    # Commands
    "Command",
    "CommandKind",
    "parse_order",
    # State
    "InputMode",
    "NormalMode",
    "PromptMode",
    "EngineState",
    "EngineSnapshot",
    # Engine
    "EconomyEngine",
    # Config and loading
    "GameConfig",
    "load_catalog",
    "parse_catalog",
    # Driver
    "Frontend",
    "GameLoop",
    # Presentation
    "translate_key",
    "format_header",
    "format_holdings",
    "format_offers",
    "format_error",
    "format_catalog_table",
]
