"""
Configurable Severity Models — the items published to the host settings UI.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from severity_bridge.models.rule_models import Language, Severity


class ConfigurableSeverityDescriptor(BaseModel):
    """One user-configurable severity entry, derived from a single rule."""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., description="Highlight ID, e.g. 'StyleCop.SA1000'")
    compound_item_name: str | None = None
    group_name: str = Field(..., description="Title of the group this item is listed under")
    display_title: str = Field(..., description="e.g. 'SA1000: Avoid Empty Line'")
    description: str = ""
    default_severity: Severity = Severity.WARNING
    solution_specific_only: bool = False
    compound_item_severity: bool = False
    language: Language = Language.CSHARP


# (applicability tag, descriptor) pair as consumed by the host
SeverityItem = tuple[Language, ConfigurableSeverityDescriptor]
