"""
Rule Catalog Readers — adapters that hand the bridge an analyzer -> rules mapping.

The analysis engine owns rule discovery. A reader returns a fully loaded,
insertion-ordered mapping or raises CatalogUnavailableError; it never
returns a partial catalog.

JSON catalog format:
    {
      "analyzers": [
        {"id": "SpacingRules", "name": "Spacing Rules",
         "rules": [{"rule_id": "SA1000", "name": "AvoidEmptyLine", "description": "..."}]}
      ]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, Field, ValidationError

from severity_bridge.core.errors import CatalogUnavailableError
from severity_bridge.models.rule_models import Analyzer, AnalyzerRuleCatalog, Rule

logger = logging.getLogger("severity_bridge.catalog")


class RuleCatalogReader(Protocol):
    def get_analyzer_rule_catalog(self) -> AnalyzerRuleCatalog: ...


class StaticCatalogReader:
    """Serves a catalog that is already in memory."""

    def __init__(self, catalog: AnalyzerRuleCatalog) -> None:
        self._catalog = catalog

    def get_analyzer_rule_catalog(self) -> AnalyzerRuleCatalog:
        return {analyzer: list(rules) for analyzer, rules in self._catalog.items()}


class _AnalyzerEntry(BaseModel):
    id: str | None = None
    name: str
    rules: list[Rule] = Field(default_factory=list)


class _CatalogFile(BaseModel):
    analyzers: list[_AnalyzerEntry] = Field(default_factory=list)


class JsonCatalogReader:
    """Loads a catalog exported by the analysis engine as JSON."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get_analyzer_rule_catalog(self) -> AnalyzerRuleCatalog:
        """
        Read and validate the catalog file.

        Raises:
            CatalogUnavailableError: file missing, unreadable, not UTF-8 JSON, or
                not matching the catalog schema.
        """
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as e:
            raise CatalogUnavailableError(f"Cannot read rule catalog {self.path}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CatalogUnavailableError(f"Rule catalog {self.path} is not valid JSON: {e}") from e

        try:
            parsed = _CatalogFile.model_validate(raw)
        except ValidationError as e:
            raise CatalogUnavailableError(
                f"Rule catalog {self.path} does not match the catalog schema: {e}"
            ) from e

        catalog: AnalyzerRuleCatalog = {}
        for entry in parsed.analyzers:
            analyzer = Analyzer(analyzer_id=entry.id or entry.name, name=entry.name)
            catalog.setdefault(analyzer, []).extend(entry.rules)

        logger.info(
            f"Loaded {sum(len(r) for r in catalog.values())} rules from "
            f"{len(catalog)} analyzers in {self.path}"
        )
        return catalog
