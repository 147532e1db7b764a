from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clidle.command import Command
    from clidle.state import EngineSnapshot


class Frontend(ABC):
    """Presentation layer: draws snapshots and turns raw input into commands."""

    @abstractmethod
    def render(self, snapshot: EngineSnapshot) -> None: ...

    @abstractmethod
    def poll(self, timeout: float) -> Command | None:
        """Wait at most *timeout* seconds for one command."""
