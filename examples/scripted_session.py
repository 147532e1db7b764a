"""Headless session: replays a scripted key sequence through the game loop."""
from __future__ import annotations

from collections import deque

from clidle.catalog import Catalog
from clidle.command import Command
from clidle.config import GameConfig
from clidle.engine import EconomyEngine
from clidle.formatting import format_header, format_holdings
from clidle.frontend import Frontend
from clidle.item import ItemDef
from clidle.keymap import ENTER, translate_key
from clidle.loop import GameLoop
from clidle.state import EngineSnapshot, InputMode


def define_catalog() -> Catalog:
    return Catalog([
        ItemDef(0, "intern", production_rate=0.1, cost=10, display_name="Intern"),
        ItemDef(1, "junior", production_rate=1.0, cost=100, display_name="Junior Developer"),
    ])


class ScriptedFrontend(Frontend):
    """Feeds keys from a list and keeps every rendered frame."""

    def __init__(self, keys: list[str]) -> None:
        self.keys = deque(keys)
        self.frames: list[list[str]] = []
        self.mode = InputMode.NORMAL

    def render(self, snapshot: EngineSnapshot) -> None:
        self.mode = snapshot.input_mode
        self.frames.append([format_header(snapshot), *format_holdings(snapshot)])

    def poll(self, timeout: float) -> Command | None:
        if not self.keys:
            return Command.quit()
        return translate_key(self.keys.popleft(), self.mode)


class FakeClock:
    """Advances by a fixed step every time it is read."""

    def __init__(self, step: float) -> None:
        self.now = 0.0
        self.step = step

    def __call__(self) -> float:
        self.now += self.step
        return self.now


def run_session() -> tuple[EconomyEngine, ScriptedFrontend]:
    # Code 12 lines by hand, hire an intern, then idle for a while
    keys = ["c"] * 12 + ["b", *"intern", ENTER] + [""] * 20
    engine = EconomyEngine(define_catalog())
    frontend = ScriptedFrontend(keys)
    loop = GameLoop(engine, frontend, GameConfig(), clock=FakeClock(0.5))
    loop.run()
    return engine, frontend


if __name__ == "__main__":
    engine, frontend = run_session()
    for line in frontend.frames[-1]:
        print(line)
