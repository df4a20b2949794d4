"""
Extension Catalog — the host's shared registry of discoverable group metadata.

Components append records scoped to a Lifetime. When the lifetime
terminates, its records are retracted. Identical records contributed by
several lifetimes are reference counted, so a group stays visible until the
last contributor goes away and is never listed twice.
"""

from __future__ import annotations

import logging
from typing import Iterable

from severity_bridge.core.errors import DuplicateGroupError
from severity_bridge.core.group_synthesizer import decode_metadata
from severity_bridge.host.lifetime import Lifetime
from severity_bridge.models.group_models import GroupDeclaration, SyntheticGroupMetadata

logger = logging.getLogger("severity_bridge.host.catalog")


class ExtensionCatalog:
    """In-memory extension catalog keyed by group key."""

    def __init__(self) -> None:
        self._records: dict[str, SyntheticGroupMetadata] = {}
        self._owners: dict[str, int] = {}

    def add(
        self, lifetime: Lifetime, records: Iterable[SyntheticGroupMetadata]
    ) -> list[SyntheticGroupMetadata]:
        """
        Bulk-append records for the duration of lifetime.

        The whole batch is checked before anything is stored, so a conflict
        leaves the catalog unchanged.

        Returns:
            Records that were not visible before this call.

        Raises:
            DuplicateGroupError: a record conflicts with one already registered.
            ValueError: lifetime is already terminated.
        """
        if lifetime.is_terminated:
            raise ValueError(f"Cannot register into terminated lifetime '{lifetime.name}'")

        batch = list(records)
        for record in batch:
            existing = self._records.get(record.group_key)
            if existing is not None and existing != record:
                raise DuplicateGroupError(
                    record.group_key, existing.group_title, record.group_title
                )

        added: list[SyntheticGroupMetadata] = []
        for record in batch:
            if record.group_key not in self._records:
                self._records[record.group_key] = record
                added.append(record)
            self._owners[record.group_key] = self._owners.get(record.group_key, 0) + 1

        keys = [record.group_key for record in batch]
        lifetime.add_action(lambda: self._retract(keys))

        logger.info(
            f"Registered {len(batch)} group records ({len(added)} new) for lifetime '{lifetime.name}'"
        )
        return added

    def _retract(self, keys: list[str]) -> None:
        for key in keys:
            remaining = self._owners.get(key, 0) - 1
            if remaining > 0:
                self._owners[key] = remaining
                continue
            self._owners.pop(key, None)
            self._records.pop(key, None)
        logger.info(f"Retracted {len(keys)} group records")

    def records(self) -> list[SyntheticGroupMetadata]:
        """Raw encoded records, in registration order."""
        return list(self._records.values())

    def groups(self) -> list[GroupDeclaration]:
        """Decoded group declarations, in registration order."""
        return [decode_metadata(record) for record in self._records.values()]

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)
