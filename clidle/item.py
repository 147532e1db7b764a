from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemDef:
    """Static definition of a purchasable producer item."""

    id: int
    short_name: str
    production_rate: float = 0.0
    cost: int = 0
    display_name: str = ""

    def __post_init__(self) -> None:
        if not self.display_name:
            object.__setattr__(self, "display_name", self.short_name)

    def production(self, count: int) -> float:
        """Code lines produced per tick by *count* owned units."""
        return count * self.production_rate


@dataclass(frozen=True)
class HoldingStatus:
    """Read-only snapshot of one owned item for rendering."""

    item_id: int
    short_name: str
    display_name: str
    count: int
    production: float
