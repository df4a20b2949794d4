"""
Severity Routes — read-only view of what the bridge registered.

  GET /severity-items          → published (language, descriptor) pairs
  GET /groups                  → group declarations registered with the host
  GET /highlight-id/{rule_id}  → derived highlight ID for a rule
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from severity_bridge.api.dependencies import get_registration
from severity_bridge.bridge.registration import HighlightingRegistration
from severity_bridge.models.group_models import GroupDeclaration
from severity_bridge.models.rule_models import Language
from severity_bridge.models.severity_models import ConfigurableSeverityDescriptor

router = APIRouter()


class SeverityItemOut(BaseModel):
    language: Language
    descriptor: ConfigurableSeverityDescriptor


class HighlightIdOut(BaseModel):
    rule_id: str
    highlight_id: str


@router.get("/severity-items", response_model=list[SeverityItemOut])
async def severity_items(
    registration: HighlightingRegistration = Depends(get_registration),
):
    return [
        SeverityItemOut(language=language, descriptor=descriptor)
        for language, descriptor in registration.configurable_severity_items
    ]


@router.get("/groups", response_model=list[GroupDeclaration])
async def groups(
    registration: HighlightingRegistration = Depends(get_registration),
):
    return registration.groups


@router.get("/highlight-id/{rule_id}", response_model=HighlightIdOut)
async def highlight_id(rule_id: str):
    return HighlightIdOut(
        rule_id=rule_id,
        highlight_id=HighlightingRegistration.get_highlight_id(rule_id),
    )
