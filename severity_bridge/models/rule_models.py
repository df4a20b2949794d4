"""
Rule Catalog Models — analyzers, their rules, and severity levels.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    DO_NOT_SHOW = "do_not_show"
    HINT = "hint"
    SUGGESTION = "suggestion"
    WARNING = "warning"
    ERROR = "error"


class Language(str, Enum):
    """Language a configurable severity item applies to."""

    CSHARP = "CSharp"


class Analyzer(BaseModel):
    """A named source of rules. Hashable, so it can key the catalog mapping."""

    model_config = ConfigDict(frozen=True)

    analyzer_id: str = Field(..., description="Stable analyzer identifier")
    name: str = Field(..., description="Display name, e.g. 'Spacing Rules'")


class Rule(BaseModel):
    """A single checkable condition owned by exactly one analyzer."""

    model_config = ConfigDict(frozen=True)

    rule_id: str = Field(..., description="Rule code, unique within the analyzer, e.g. 'SA1000'")
    name: str = Field(..., description="Identifier-style name, e.g. 'AvoidEmptyLine'")
    description: str = Field(default="", description="Free text description")


# Analyzer -> rules, in insertion order
AnalyzerRuleCatalog = dict[Analyzer, list[Rule]]
