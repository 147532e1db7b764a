from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

from clidle.item import ItemDef


@dataclass
class Catalog:
    """Ordered, read-only collection of purchasable items."""

    items: list[ItemDef] = field(default_factory=list)

    # Lookup dicts built in __post_init__
    _items_by_id: dict[int, ItemDef] = field(
        default_factory=dict, init=False, repr=False
    )
    _items_by_name: dict[str, ItemDef] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self.items = list(self.items)
        self._items_by_id = {i.id: i for i in self.items}
        self._items_by_name = {i.short_name: i for i in self.items}

    def __iter__(self) -> Iterator[ItemDef]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items_by_id

    def lookup_by_name(self, name: str) -> ItemDef | None:
        return self._items_by_name.get(name)

    def lookup_by_id(self, item_id: int) -> ItemDef:
        """Look up an item by id. Raises KeyError if the id is unknown."""
        return self._items_by_id[item_id]

    def validate(self) -> list[str]:
        """Check for catalog authoring errors. Returns list of error messages."""
        errors: list[str] = []

        seen_ids: set[int] = set()
        seen_names: set[str] = set()
        for item in self.items:
            if item.id in seen_ids:
                errors.append(f"Duplicate item ID: {item.id!r}")
            seen_ids.add(item.id)

            if not item.short_name:
                errors.append(f"Item {item.id!r} has an empty short name")
            elif item.short_name.split() != [item.short_name]:
                errors.append(
                    f"Item {item.id!r} short name {item.short_name!r} contains whitespace"
                )
            if item.short_name in seen_names:
                errors.append(f"Duplicate item short name: {item.short_name!r}")
            seen_names.add(item.short_name)

            if item.cost < 0:
                errors.append(f"Item {item.short_name!r} has negative cost {item.cost}")
            if not math.isfinite(item.production_rate):
                errors.append(
                    f"Item {item.short_name!r} has non-finite production rate "
                    f"{item.production_rate}"
                )
            elif item.production_rate < 0:
                errors.append(
                    f"Item {item.short_name!r} has negative production rate "
                    f"{item.production_rate}"
                )

        return errors
