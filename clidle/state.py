from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clidle.errors import TransactionError
    from clidle.item import HoldingStatus


class InputMode(Enum):
    """How incoming commands are interpreted."""

    NORMAL = auto()
    BUYING = auto()
    SELLING = auto()


@dataclass(frozen=True)
class NormalMode:
    """No pending text exists while in normal mode."""

    @property
    def input_mode(self) -> InputMode:
        return InputMode.NORMAL


@dataclass
class PromptMode:
    """Buying or selling, with the text typed so far."""

    kind: InputMode
    buffer: str = ""

    def __post_init__(self) -> None:
        if self.kind is InputMode.NORMAL:
            raise ValueError("PromptMode must be BUYING or SELLING")

    @property
    def input_mode(self) -> InputMode:
        return self.kind


Mode = NormalMode | PromptMode


class EngineState:
    """Mutable runtime container holding all game state."""

    def __init__(self) -> None:
        self.balance: float = 0.0
        self.holdings: dict[int, int] = {}
        self.mode: Mode = NormalMode()
        self.last_error: TransactionError | None = None
        self.halted: bool = False

    @property
    def input_mode(self) -> InputMode:
        return self.mode.input_mode

    @property
    def pending_input(self) -> str:
        if isinstance(self.mode, PromptMode):
            return self.mode.buffer
        return ""

    def item_count(self, item_id: int) -> int:
        return self.holdings.get(item_id, 0)

    def take_error(self) -> TransactionError | None:
        """Return the last error and clear it, so it is surfaced only once."""
        error, self.last_error = self.last_error, None
        return error


@dataclass(frozen=True)
class EngineSnapshot:
    """Read-only view of the engine for front ends."""

    balance: float
    holdings: tuple[HoldingStatus, ...]
    input_mode: InputMode
    pending_input: str
    last_error: TransactionError | None
    production_per_tick: float
    halted: bool
