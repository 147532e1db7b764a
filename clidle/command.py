from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CommandKind(Enum):
    """Discrete inputs the engine understands."""

    ENTER_BUY_MODE = auto()
    ENTER_SELL_MODE = auto()
    ADD_RESOURCE_UNIT = auto()
    QUIT = auto()
    APPEND_CHAR = auto()
    DELETE_CHAR = auto()
    CANCEL = auto()
    SUBMIT = auto()


@dataclass(frozen=True)
class Command:
    """A command pushed into the engine. Only APPEND_CHAR carries a char."""

    kind: CommandKind
    char: str = ""

    def __post_init__(self) -> None:
        if self.kind is CommandKind.APPEND_CHAR and len(self.char) != 1:
            raise ValueError(f"APPEND_CHAR needs exactly one character, got {self.char!r}")

    @classmethod
    def enter_buy_mode(cls) -> Command:
        return cls(CommandKind.ENTER_BUY_MODE)

    @classmethod
    def enter_sell_mode(cls) -> Command:
        return cls(CommandKind.ENTER_SELL_MODE)

    @classmethod
    def add_resource_unit(cls) -> Command:
        return cls(CommandKind.ADD_RESOURCE_UNIT)

    @classmethod
    def quit(cls) -> Command:
        return cls(CommandKind.QUIT)

    @classmethod
    def append_char(cls, char: str) -> Command:
        return cls(CommandKind.APPEND_CHAR, char)

    @classmethod
    def delete_char(cls) -> Command:
        return cls(CommandKind.DELETE_CHAR)

    @classmethod
    def cancel(cls) -> Command:
        return cls(CommandKind.CANCEL)

    @classmethod
    def submit(cls) -> Command:
        return cls(CommandKind.SUBMIT)

    @classmethod
    def type_text(cls, text: str) -> list[Command]:
        """One APPEND_CHAR per character of *text*."""
        return [cls.append_char(c) for c in text]


def parse_order(text: str) -> tuple[str, int]:
    """Split a submitted buffer into ``(short_name, quantity)``.

    The name is the first whitespace-separated token, or ``""`` for a blank
    buffer. The quantity is the second token; a missing, unparsable or
    non-positive token falls back to 1. Further tokens are ignored.
    """
    tokens = text.split()
    if not tokens:
        return "", 1
    quantity = 1
    if len(tokens) > 1:
        try:
            quantity = int(tokens[1])
        except ValueError:
            quantity = 1
        if quantity < 1:
            quantity = 1
    return tokens[0], quantity
