"""
Group Metadata Models — typed group declarations and their encoded form.

The host discovers configurable-severity groups from declarative metadata.
A GroupDeclaration is the typed record; SyntheticGroupMetadata is the same
record encoded into the only value shapes the host's metadata decoder can
carry:

  * strings must be boxed in a StringSource
  * booleans equal to False are omitted (the host treats missing as False)
  * True booleans and enum values cannot be carried at all

A host that accepts typed registration calls directly does not need the
encoded form; register GroupDeclaration records instead.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GroupDeclaration(BaseModel):
    """A named, labelled configurable-severity group."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Registration key")
    title: str = Field(..., description="Human-facing label")
    hidden: bool = Field(default=False, description="Hide the group from the settings UI")


class PropertyDisposition(str, Enum):
    CONSTRUCTOR_ARGUMENT = "constructor_argument"
    NAMED_PROPERTY = "named_property"


class StringSource(BaseModel):
    """Boxed string, as expected by the host metadata decoder."""

    model_config = ConfigDict(frozen=True)

    value: str

    def __str__(self) -> str:
        return self.value


class EncodedProperty(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: Any
    disposition: PropertyDisposition = PropertyDisposition.NAMED_PROPERTY


class SyntheticGroupMetadata(BaseModel):
    """Encoded group declaration ready to append to the host extension catalog."""

    model_config = ConfigDict(frozen=True)

    declaration_type: str = "RegisterConfigurableHighlightingsGroup"
    group_key: str
    group_title: str
    properties: tuple[EncodedProperty, ...] = ()

    def property_names(self) -> list[str]:
        return [p.name for p in self.properties]
