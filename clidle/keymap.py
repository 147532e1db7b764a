from __future__ import annotations

from clidle.command import Command
from clidle.state import InputMode

# Named keys; everything else is a single printable character.
ENTER = "enter"
BACKSPACE = "backspace"
ESCAPE = "escape"

_NORMAL_BINDINGS = {
    "b": Command.enter_buy_mode,
    "s": Command.enter_sell_mode,
    "c": Command.add_resource_unit,
    "q": Command.quit,
}

_PROMPT_BINDINGS = {
    ENTER: Command.submit,
    BACKSPACE: Command.delete_char,
    ESCAPE: Command.cancel,
}


def translate_key(key: str, mode: InputMode) -> Command | None:
    """Map a key to a command for the given input mode, or None if unbound."""
    if mode is InputMode.NORMAL:
        factory = _NORMAL_BINDINGS.get(key)
        return factory() if factory else None

    factory = _PROMPT_BINDINGS.get(key)
    if factory is not None:
        return factory()
    if len(key) == 1 and key.isprintable():
        return Command.append_char(key)
    return None


def key_help(mode: InputMode) -> list[tuple[str, str]]:
    """(key, action) pairs shown in the header for *mode*."""
    if mode is InputMode.NORMAL:
        return [
            ("q", "to exit"),
            ("c", "to code"),
            ("b", "to start buying"),
            ("s", "to start selling"),
        ]
    verb = "buying" if mode is InputMode.BUYING else "selling"
    return [
        ("Esc", f"to stop {verb}"),
        ("Enter", "to place the order"),
    ]
