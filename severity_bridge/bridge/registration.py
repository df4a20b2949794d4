"""
Highlighting Registration — registers analyzer rules so their severity can be set.

Pipeline (runs once, at construction):
1. Read the analyzer -> rules catalog (one snapshot, no second read)
2. Synthesize and encode one group declaration per analyzer group
3. Build one configurable severity descriptor per rule
4. Append the group records to the host extension catalog, scoped to the lifetime
5. Publish the (language, descriptor) pairs

Steps 2 and 3 both finish before anything touches the host catalog, so any
failure leaves the host exactly as it was.
"""

from __future__ import annotations

import logging

from severity_bridge.catalog.reader import RuleCatalogReader
from severity_bridge.config import Settings, settings as default_settings
from severity_bridge.core.descriptor_builder import build_severity_descriptors
from severity_bridge.core.errors import CatalogUnavailableError, SeverityBridgeError
from severity_bridge.core.group_synthesizer import (
    decode_metadata,
    synthesize_group_metadata,
)
from severity_bridge.core.identifiers import get_highlight_id
from severity_bridge.host.extension_catalog import ExtensionCatalog
from severity_bridge.host.lifetime import Lifetime
from severity_bridge.models.group_models import GroupDeclaration, SyntheticGroupMetadata
from severity_bridge.models.rule_models import AnalyzerRuleCatalog
from severity_bridge.models.severity_models import SeverityItem

logger = logging.getLogger("severity_bridge.registration")


class HighlightingRegistration:
    """
    Registers rule severities and their groups with the host.

    Usage:
        lifetime = Lifetime()
        registration = HighlightingRegistration(lifetime, reader, extension_catalog)
        items = registration.configurable_severity_items
        ...
        lifetime.terminate()   # groups are retracted
    """

    def __init__(
        self,
        lifetime: Lifetime,
        catalog_reader: RuleCatalogReader,
        extension_catalog: ExtensionCatalog,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.extension_catalog = extension_catalog
        # Attached to the caller's lifetime only once registration succeeds;
        # unregister() retracts without ending the caller's lifetime
        self._lifetime = Lifetime("highlighting-registration")
        self._group_records: tuple[SyntheticGroupMetadata, ...] = ()
        self._items: tuple[SeverityItem, ...] = ()

        self._register(lifetime, catalog_reader)

    @staticmethod
    def get_highlight_id(rule_id: str | None) -> str:
        """Highlight ID for a rule, using the configured template."""
        return get_highlight_id(rule_id, default_settings.highlight_id_template)

    @property
    def configurable_severity_items(self) -> tuple[SeverityItem, ...]:
        return self._items

    @property
    def group_records(self) -> tuple[SyntheticGroupMetadata, ...]:
        return self._group_records

    @property
    def groups(self) -> list[GroupDeclaration]:
        return [decode_metadata(record) for record in self._group_records]

    @property
    def is_registered(self) -> bool:
        return not self._lifetime.is_terminated

    def unregister(self) -> None:
        """Retract this registration's groups from the host catalog."""
        self._lifetime.terminate()

    def _register(self, parent: Lifetime, catalog_reader: RuleCatalogReader) -> None:
        if parent.is_terminated:
            raise ValueError(f"Cannot register into terminated lifetime '{parent.name}'")

        catalog = self._read_catalog(catalog_reader)
        cfg = self.settings

        try:
            group_records = synthesize_group_metadata(
                catalog,
                policy=cfg.duplicate_group_policy,
                group_title_template=cfg.group_title_template,
            )
            items = build_severity_descriptors(
                catalog,
                language=cfg.language,
                default_severity=cfg.default_severity,
                highlight_id_template=cfg.highlight_id_template,
                group_title_template=cfg.group_title_template,
            )
            self.extension_catalog.add(self._lifetime, group_records)
        except SeverityBridgeError as e:
            logger.error(f"Highlighting registration aborted: {e}")
            raise

        parent.add_action(self._lifetime.terminate)
        self._group_records = tuple(group_records)
        self._items = tuple(items)
        logger.info(
            f"Registered {len(self._items)} configurable severity items "
            f"in {len(self._group_records)} groups"
        )

    @staticmethod
    def _read_catalog(catalog_reader: RuleCatalogReader) -> AnalyzerRuleCatalog:
        try:
            return catalog_reader.get_analyzer_rule_catalog()
        except CatalogUnavailableError as e:
            logger.error(f"Rule catalog unavailable: {e}")
            raise
        except Exception as e:
            logger.error(f"Rule catalog reader failed: {e}")
            raise CatalogUnavailableError(f"Rule catalog reader failed: {e}") from e
