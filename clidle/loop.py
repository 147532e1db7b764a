from __future__ import annotations

import logging
import time
from typing import Callable

from clidle.config import GameConfig
from clidle.engine import EconomyEngine
from clidle.frontend import Frontend

logger = logging.getLogger(__name__)


class GameLoop:
    """Drives an engine from wall-clock time and a front end's input."""

    def __init__(
        self,
        engine: EconomyEngine,
        frontend: Frontend,
        config: GameConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        config = config or GameConfig()
        errors = config.validate()
        if errors:
            raise ValueError(
                "Invalid GameConfig:\n" + "\n".join(f"  - {e}" for e in errors)
            )

        self.engine = engine
        self.frontend = frontend
        self.config = config
        self.clock = clock
        self.last_tick = clock()
        self.ticks = 0

    def step(self) -> None:
        """One iteration: tick if due, render, then poll for a command."""
        # 1. Production first so it shows before the next command
        now = self.clock()
        if now - self.last_tick >= self.config.tick_interval:
            self.engine.tick()
            self.ticks += 1
            self.last_tick = self.clock()

        # 2. Render; an error is handed to the front end once
        snapshot = self.engine.snapshot()
        self.frontend.render(snapshot)
        if snapshot.last_error is not None:
            self.engine.state.take_error()

        # 3. Poll input
        command = self.frontend.poll(self.config.poll_timeout)
        if command is not None:
            self.engine.apply_command(command)

    def run(self, max_iterations: int | None = None) -> int:
        """Loop until the engine halts. Returns the number of iterations run."""
        iterations = 0
        while not self.engine.state.halted:
            if max_iterations is not None and iterations >= max_iterations:
                break
            self.step()
            iterations += 1
        logger.debug("Loop finished after %d iterations, %d ticks", iterations, self.ticks)
        return iterations
