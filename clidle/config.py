from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameConfig:
    """Top-level game configuration."""

    name: str = "clidle"
    tick_interval: float = 1.0  # seconds of wall clock per tick
    poll_timeout: float = 0.1  # seconds to wait for input per loop iteration
    catalog_path: str | None = None

    def validate(self) -> list[str]:
        """Check for configuration errors. Returns list of error messages."""
        errors: list[str] = []
        if self.tick_interval <= 0:
            errors.append(f"tick_interval must be positive, got {self.tick_interval}")
        if self.poll_timeout <= 0:
            errors.append(f"poll_timeout must be positive, got {self.poll_timeout}")
        return errors
