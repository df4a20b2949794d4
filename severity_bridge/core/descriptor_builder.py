"""
Severity Descriptor Builder — one configurable severity item per rule.

Output order is analyzer insertion order, then rule insertion order.
Nothing is sorted and the input catalog is never mutated.
"""

from __future__ import annotations

from severity_bridge.core.identifiers import (
    GROUP_TITLE_TEMPLATE,
    HIGHLIGHT_ID_TEMPLATE,
    derive_group_name,
    display_title,
    get_highlight_id,
)
from severity_bridge.models.rule_models import (
    Analyzer,
    AnalyzerRuleCatalog,
    Language,
    Rule,
    Severity,
)
from severity_bridge.models.severity_models import (
    ConfigurableSeverityDescriptor,
    SeverityItem,
)


def build_descriptor(
    analyzer: Analyzer,
    rule: Rule,
    *,
    language: Language = Language.CSHARP,
    default_severity: Severity = Severity.WARNING,
    highlight_id_template: str = HIGHLIGHT_ID_TEMPLATE,
    group_title_template: str = GROUP_TITLE_TEMPLATE,
) -> ConfigurableSeverityDescriptor:
    """Build the descriptor for a single (analyzer, rule) pair."""
    return ConfigurableSeverityDescriptor(
        identifier=get_highlight_id(rule.rule_id, highlight_id_template),
        compound_item_name=None,
        group_name=derive_group_name(analyzer.name, group_title_template),
        display_title=display_title(rule.rule_id, rule.name),
        description=rule.description,
        default_severity=default_severity,
        solution_specific_only=False,
        compound_item_severity=False,
        language=language,
    )


def build_severity_descriptors(
    catalog: AnalyzerRuleCatalog,
    *,
    language: Language = Language.CSHARP,
    default_severity: Severity = Severity.WARNING,
    highlight_id_template: str = HIGHLIGHT_ID_TEMPLATE,
    group_title_template: str = GROUP_TITLE_TEMPLATE,
) -> list[SeverityItem]:
    """
    Build (language, descriptor) pairs for every rule in the catalog.

    Args:
        catalog: Analyzer -> ordered rules mapping.
        language: Applicability tag attached to every descriptor.
        default_severity: Severity a rule reports until the user changes it.

    Returns:
        One pair per rule, in catalog order.

    Raises:
        InvalidArgumentError: a rule has an empty rule_id.
    """
    items: list[SeverityItem] = []
    for analyzer, rules in catalog.items():
        for rule in rules:
            descriptor = build_descriptor(
                analyzer,
                rule,
                language=language,
                default_severity=default_severity,
                highlight_id_template=highlight_id_template,
                group_title_template=group_title_template,
            )
            items.append((descriptor.language, descriptor))
    return items
