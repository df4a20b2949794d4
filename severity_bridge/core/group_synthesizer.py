"""
Group Metadata Synthesizer — one group declaration per analyzer group.

Builds GroupDeclaration records from the catalog, then encodes them into
SyntheticGroupMetadata the host extension catalog can discover. The encoding
works around the host metadata decoder, which only copes with boxed strings
and cannot reconstruct booleans or enums:

  * False booleans are dropped, the host defaults missing booleans to False
  * strings are wrapped in StringSource
  * True booleans and enum values raise MetadataEncodingError

Adding a declaration property that is True by default, or enum-valued,
needs a different workaround than omission.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Literal

from severity_bridge.core.errors import DuplicateGroupError, MetadataEncodingError
from severity_bridge.core.identifiers import GROUP_TITLE_TEMPLATE, derive_group_name
from severity_bridge.models.group_models import (
    EncodedProperty,
    GroupDeclaration,
    PropertyDisposition,
    StringSource,
    SyntheticGroupMetadata,
)
from severity_bridge.models.rule_models import AnalyzerRuleCatalog

logger = logging.getLogger("severity_bridge.core.groups")

DuplicateGroupPolicy = Literal["first_wins", "reject"]

_CONSTRUCTOR_ARGUMENTS = ("key", "title")


def synthesize_group_declarations(
    catalog: AnalyzerRuleCatalog,
    *,
    policy: DuplicateGroupPolicy = "first_wins",
    group_title_template: str = GROUP_TITLE_TEMPLATE,
) -> list[GroupDeclaration]:
    """
    Declare one group per distinct derived group name, in first-seen order.

    With policy 'first_wins', a later analyzer deriving an already-declared
    group name is folded into the existing group. With 'reject', it raises.
    Either way, a declaration that reuses a key under a different title
    raises DuplicateGroupError.
    """
    declarations: dict[str, GroupDeclaration] = {}

    for analyzer in catalog:
        group_name = derive_group_name(analyzer.name, group_title_template)
        declaration = GroupDeclaration(key=group_name, title=group_name)

        existing = declarations.get(declaration.key)
        if existing is None:
            declarations[declaration.key] = declaration
            continue

        if existing.title != declaration.title or policy == "reject":
            raise DuplicateGroupError(declaration.key, existing.title, declaration.title)

        logger.debug(
            f"Analyzer '{analyzer.analyzer_id}' shares group '{declaration.key}', keeping first declaration"
        )

    return list(declarations.values())


def encode_value(name: str, value: Any) -> Any | None:
    """
    Encode one property value, or return None if it should be omitted.

    Raises:
        MetadataEncodingError: value is True or an enum member.
    """
    if isinstance(value, bool):
        if value:
            raise MetadataEncodingError(name, value)
        return None
    if isinstance(value, Enum):
        raise MetadataEncodingError(name, value)
    if isinstance(value, str):
        return StringSource(value=value)
    return value


def encode_declaration(declaration: GroupDeclaration) -> SyntheticGroupMetadata:
    """Encode a declaration into host-discoverable group metadata."""
    properties: list[EncodedProperty] = []

    for name, value in declaration.model_dump().items():
        encoded = encode_value(name, value)
        if encoded is None:
            continue
        disposition = (
            PropertyDisposition.CONSTRUCTOR_ARGUMENT
            if name in _CONSTRUCTOR_ARGUMENTS
            else PropertyDisposition.NAMED_PROPERTY
        )
        properties.append(EncodedProperty(name=name, value=encoded, disposition=disposition))

    return SyntheticGroupMetadata(
        group_key=declaration.key,
        group_title=declaration.title,
        properties=tuple(properties),
    )


def decode_metadata(metadata: SyntheticGroupMetadata) -> GroupDeclaration:
    """Host-side decode: unbox strings, let missing booleans take their defaults."""
    values = {
        p.name: p.value.value if isinstance(p.value, StringSource) else p.value
        for p in metadata.properties
    }
    return GroupDeclaration.model_validate(values)


def synthesize_group_metadata(
    catalog: AnalyzerRuleCatalog,
    *,
    policy: DuplicateGroupPolicy = "first_wins",
    group_title_template: str = GROUP_TITLE_TEMPLATE,
) -> list[SyntheticGroupMetadata]:
    """Declare and encode every group in the catalog."""
    declarations = synthesize_group_declarations(
        catalog, policy=policy, group_title_template=group_title_template
    )
    return [encode_declaration(d) for d in declarations]
