"""
Tests for Rule Catalog Readers — in-memory and JSON file adapters.
"""

import json
from pathlib import Path

import pytest

from severity_bridge.catalog.reader import JsonCatalogReader, StaticCatalogReader
from severity_bridge.core.errors import CatalogUnavailableError
from severity_bridge.models.rule_models import Analyzer, Rule

SAMPLE_CATALOG = Path(__file__).resolve().parent.parent / "rule_catalog.json"


def test_static_reader_returns_copy(spacing_catalog):
    reader = StaticCatalogReader(spacing_catalog)
    catalog = reader.get_analyzer_rule_catalog()
    assert catalog == spacing_catalog

    next(iter(catalog.values())).clear()
    assert reader.get_analyzer_rule_catalog() == spacing_catalog


def test_json_reader_preserves_order(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({
        "analyzers": [
            {"id": "Spacing", "name": "Spacing Rules", "rules": [
                {"rule_id": "SA1001", "name": "AvoidExtraSpace", "description": "desc B"},
                {"rule_id": "SA1000", "name": "AvoidEmptyLine", "description": "desc A"},
            ]},
            {"name": "Naming Rules", "rules": [{"rule_id": "SA1300", "name": "ElementMustBeginWithUpperCaseLetter"}]},
        ]
    }))

    catalog = JsonCatalogReader(path).get_analyzer_rule_catalog()

    analyzers = list(catalog)
    assert analyzers == [
        Analyzer(analyzer_id="Spacing", name="Spacing Rules"),
        Analyzer(analyzer_id="Naming Rules", name="Naming Rules"),
    ]
    assert [r.rule_id for r in catalog[analyzers[0]]] == ["SA1001", "SA1000"]
    assert catalog[analyzers[1]] == [
        Rule(rule_id="SA1300", name="ElementMustBeginWithUpperCaseLetter", description="")
    ]


def test_json_reader_missing_file(tmp_path):
    with pytest.raises(CatalogUnavailableError):
        JsonCatalogReader(tmp_path / "missing.json").get_analyzer_rule_catalog()


def test_json_reader_malformed_json(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text("{not json")
    with pytest.raises(CatalogUnavailableError):
        JsonCatalogReader(path).get_analyzer_rule_catalog()


def test_json_reader_schema_mismatch(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"analyzers": [{"name": "X", "rules": [{"name": "NoId"}]}]}))
    with pytest.raises(CatalogUnavailableError):
        JsonCatalogReader(path).get_analyzer_rule_catalog()


def test_bundled_sample_catalog_loads():
    catalog = JsonCatalogReader(SAMPLE_CATALOG).get_analyzer_rule_catalog()
    assert len(catalog) == 3
    assert sum(len(rules) for rules in catalog.values()) == 6


def test_json_reader_not_utf8(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_bytes(b'{"analyzers": [{"name": "\xff\xfe"}]}')
    with pytest.raises(CatalogUnavailableError):
        JsonCatalogReader(path).get_analyzer_rule_catalog()
