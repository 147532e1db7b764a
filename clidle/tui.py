"""Curses front end: draws the engine snapshot and reads single keys."""

from __future__ import annotations

import curses

from clidle.catalog import Catalog
from clidle.command import Command
from clidle.config import GameConfig
from clidle.engine import EconomyEngine
from clidle.formatting import format_error, format_header, format_holdings, format_offers
from clidle.frontend import Frontend
from clidle.keymap import BACKSPACE, ENTER, ESCAPE, translate_key
from clidle.loop import GameLoop
from clidle.state import EngineSnapshot, InputMode

_MARGIN = 2

_CHAR_KEYS = {
    "\n": ENTER,
    "\r": ENTER,
    "\x1b": ESCAPE,
    "\x7f": BACKSPACE,
    "\b": BACKSPACE,
}

_SPECIAL_KEYS = {
    curses.KEY_ENTER: ENTER,
    curses.KEY_BACKSPACE: BACKSPACE,
}


def normalize_key(raw: str | int) -> str | None:
    """Turn a get_wch() result into a key name or printable character."""
    if isinstance(raw, int):
        return _SPECIAL_KEYS.get(raw)
    return _CHAR_KEYS.get(raw, raw)


class CursesFrontend(Frontend):
    def __init__(self, stdscr, catalog: Catalog) -> None:
        self.stdscr = stdscr
        self.catalog = catalog
        self.mode = InputMode.NORMAL
        self.error_line: str | None = None

    def render(self, snapshot: EngineSnapshot) -> None:
        self.mode = snapshot.input_mode
        if snapshot.last_error is not None:
            self.error_line = format_error(snapshot.last_error)

        scr = self.stdscr
        scr.erase()
        height, width = scr.getmaxyx()

        header_attr = curses.A_BLINK if self.mode is InputMode.NORMAL else curses.A_NORMAL
        self._put(_MARGIN, _MARGIN, format_header(snapshot), header_attr)

        # Input box
        input_attr = curses.A_NORMAL
        if curses.has_colors():
            if self.mode is InputMode.BUYING:
                input_attr = curses.color_pair(1)
            elif self.mode is InputMode.SELLING:
                input_attr = curses.color_pair(2)
        row = _MARGIN + 1
        self._put(row, _MARGIN, "Input", curses.A_BOLD)
        self._put(row + 1, _MARGIN, "> " + snapshot.pending_input, input_attr)

        # Split the remaining space between owned items and messages
        row += 3
        remaining = max(height - row - _MARGIN, 2)
        owned_rows = remaining // 2

        self._put(row, _MARGIN, "Owned", curses.A_BOLD)
        for i, line in enumerate(format_holdings(snapshot)[: owned_rows - 1]):
            self._put(row + 1 + i, _MARGIN, line)

        row += owned_rows
        messages = format_offers(self.catalog)
        if self.error_line:
            messages.append(self.error_line)
        self._put(row, _MARGIN, "Messages", curses.A_BOLD)
        for i, line in enumerate(messages[: remaining - owned_rows - 1]):
            self._put(row + 1 + i, _MARGIN, line)

        if self.mode is InputMode.NORMAL:
            curses.curs_set(0)
        else:
            curses.curs_set(1)
            if _MARGIN + 2 < height - 1:
                scr.move(_MARGIN + 2, min(_MARGIN + 4 + len(snapshot.pending_input), width - 1))
        scr.refresh()

    def poll(self, timeout: float) -> Command | None:
        self.stdscr.timeout(int(timeout * 1000))
        try:
            raw = self.stdscr.get_wch()
        except curses.error:
            # Timed out with no key
            return None
        key = normalize_key(raw)
        if key is None:
            return None
        command = translate_key(key, self.mode)
        if command is not None:
            self.error_line = None
        return command

    def _put(self, row: int, col: int, text: str, attr: int = curses.A_NORMAL) -> None:
        height, width = self.stdscr.getmaxyx()
        if row >= height - 1 or col >= width - 1:
            return
        self.stdscr.addstr(row, col, text[: width - col - 1], attr)


def _main(stdscr, engine: EconomyEngine, config: GameConfig) -> None:
    curses.set_escdelay(25)
    if curses.has_colors():
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(1, curses.COLOR_GREEN, -1)
        curses.init_pair(2, curses.COLOR_RED, -1)
    frontend = CursesFrontend(stdscr, engine.catalog)
    GameLoop(engine, frontend, config).run()


def run_curses(engine: EconomyEngine, config: GameConfig) -> None:
    """Play in the terminal until the player quits. Restores the terminal on exit."""
    curses.wrapper(_main, engine, config)
