from __future__ import annotations

import json
import logging
import math
from importlib.resources import files as resource_files
from pathlib import Path
from typing import Any

from clidle.catalog import Catalog
from clidle.errors import CatalogError
from clidle.item import ItemDef

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("cps", "cost", "name", "long_name")


def load_catalog(path: str | Path | None = None) -> Catalog:
    """Load a catalog from a JSON file.

    If path is None, loads the catalog bundled with the package at
    clidle/data/items.json.
    """
    if path is None:
        text = resource_files("clidle.data").joinpath("items.json").read_text(encoding="utf-8")
        source = "bundled items.json"
    else:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
        source = str(path)

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogError(f"{source}: invalid JSON: {e}") from e

    catalog = parse_catalog(raw, source)
    logger.info("Loaded %d items from %s", len(catalog), source)
    return catalog


def parse_catalog(raw: Any, source: str = "<catalog>") -> Catalog:
    """Build a Catalog from decoded JSON records.

    Records without an ``id`` get their zero-based position. Authoring
    problems (duplicates, negative values) are reported as CatalogError.
    """
    if not isinstance(raw, list):
        raise CatalogError(f"{source}: expected a list of items, got {type(raw).__name__}")

    items = [_parse_item(record, index, source) for index, record in enumerate(raw)]
    catalog = Catalog(items)

    errors = catalog.validate()
    if errors:
        raise CatalogError(
            f"{source}: invalid catalog:\n" + "\n".join(f"  - {e}" for e in errors)
        )
    return catalog


def _parse_item(record: Any, index: int, source: str) -> ItemDef:
    if not isinstance(record, dict):
        raise CatalogError(f"{source}: item #{index} is not an object")

    missing = [k for k in _REQUIRED_FIELDS if k not in record]
    if missing:
        raise CatalogError(f"{source}: item #{index} is missing {', '.join(missing)}")

    cost = record["cost"]
    item_id = record.get("id", index)
    # bool is an int subclass; reject it explicitly
    for key, value in (("cost", cost), ("id", item_id)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise CatalogError(f"{source}: item #{index} field {key!r} must be an integer")

    cps = record["cps"]
    if isinstance(cps, bool) or not isinstance(cps, (int, float)):
        raise CatalogError(f"{source}: item #{index} field 'cps' must be a number")
    if not math.isfinite(cps):
        raise CatalogError(f"{source}: item #{index} field 'cps' must be finite, got {cps}")

    for key in ("name", "long_name"):
        if not isinstance(record[key], str):
            raise CatalogError(f"{source}: item #{index} field {key!r} must be a string")

    return ItemDef(
        id=item_id,
        short_name=record["name"],
        production_rate=float(cps),
        cost=cost,
        display_name=record["long_name"],
    )
