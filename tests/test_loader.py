"""Tests for loader module."""
import json

import pytest

from clidle.errors import CatalogError
from clidle.loader import load_catalog, parse_catalog


def _write(tmp_path, data) -> str:
    path = tmp_path / "items.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_load_from_file(tmp_path):
    path = _write(tmp_path, [
        {"id": 4, "cps": 0.5, "cost": 20, "name": "bot", "long_name": "Build Bot"},
    ])
    catalog = load_catalog(path)
    item = catalog.lookup_by_id(4)
    assert item.short_name == "bot"
    assert item.display_name == "Build Bot"
    assert item.production_rate == 0.5
    assert item.cost == 20


def test_missing_id_uses_position(tmp_path):
    path = _write(tmp_path, [
        {"cps": 0.1, "cost": 10, "name": "a", "long_name": "A"},
        {"cps": 1, "cost": 100, "name": "b", "long_name": "B"},
    ])
    catalog = load_catalog(path)
    assert catalog.lookup_by_name("a").id == 0
    assert catalog.lookup_by_name("b").id == 1
    assert isinstance(catalog.lookup_by_name("b").production_rate, float)


def test_load_bundled_catalog():
    catalog = load_catalog()
    assert len(catalog) > 0
    assert catalog.validate() == []
    assert catalog.lookup_by_name("intern") is not None


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_catalog(tmp_path / "nope.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "items.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(CatalogError, match="invalid JSON"):
        load_catalog(path)


def test_not_a_list():
    with pytest.raises(CatalogError, match="expected a list"):
        parse_catalog({"name": "a"})


def test_missing_fields():
    with pytest.raises(CatalogError, match="item #0 is missing cost, long_name"):
        parse_catalog([{"cps": 1.0, "name": "a"}])


def test_record_not_object():
    with pytest.raises(CatalogError, match="item #1 is not an object"):
        parse_catalog([{"cps": 1, "cost": 1, "name": "a", "long_name": "A"}, "b"])


def test_bad_field_types():
    base = {"cps": 1.0, "cost": 1, "name": "a", "long_name": "A"}
    with pytest.raises(CatalogError, match="'cost' must be an integer"):
        parse_catalog([{**base, "cost": 1.5}])
    with pytest.raises(CatalogError, match="'id' must be an integer"):
        parse_catalog([{**base, "id": "x"}])
    with pytest.raises(CatalogError, match="'cps' must be a number"):
        parse_catalog([{**base, "cps": "fast"}])
    with pytest.raises(CatalogError, match="'name' must be a string"):
        parse_catalog([{**base, "name": 3}])


def test_duplicate_names_rejected():
    records = [
        {"cps": 1, "cost": 1, "name": "a", "long_name": "A"},
        {"cps": 2, "cost": 2, "name": "a", "long_name": "Also A"},
    ]
    with pytest.raises(CatalogError, match="Duplicate item short name"):
        parse_catalog(records)


def test_catalog_error_is_value_error():
    with pytest.raises(ValueError):
        parse_catalog("nope")


@pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_cps_rejected(tmp_path, value):
    path = tmp_path / "items.json"
    path.write_text(
        '[{"cps": %s, "cost": 10, "name": "bad", "long_name": "Bad"}]' % value,
        encoding="utf-8",
    )
    with pytest.raises(CatalogError, match="'cps' must be finite"):
        load_catalog(path)
