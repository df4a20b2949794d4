"""
Identifier Deriver — stable highlight IDs, group names and readable titles.

The host persists users' severity choices keyed by these derived strings,
so the same input must always produce the same output.
"""

from __future__ import annotations

import re

from severity_bridge.core.errors import InvalidArgumentError

HIGHLIGHT_ID_TEMPLATE = "StyleCop.{0}"
GROUP_TITLE_TEMPLATE = "StyleCop - {0}"

_UPPERCASE = re.compile(r"([A-Z])")


def get_highlight_id(rule_id: str | None, template: str = HIGHLIGHT_ID_TEMPLATE) -> str:
    """
    Get the highlight ID for a rule.

    Raises:
        InvalidArgumentError: rule_id is None or empty.
    """
    if not rule_id:
        raise InvalidArgumentError("rule_id")
    return template.format(rule_id)


def derive_group_name(analyzer_name: str, template: str = GROUP_TITLE_TEMPLATE) -> str:
    # An empty analyzer name still yields a (degenerate) group name
    return template.format(analyzer_name)


def split_readable_name(identifier: str) -> str:
    """
    Turn an identifier-style name into a phrase: 'AvoidEmptyLine' -> 'Avoid Empty Line'.

    Every ASCII uppercase letter gets one preceding space, consecutive
    capitals included ('SA1000' -> 'S A1000'). Digits, underscores and
    non-Latin letters are left alone.
    """
    return _UPPERCASE.sub(r" \1", identifier).strip()


def display_title(rule_id: str, rule_name: str) -> str:
    return f"{rule_id}: {split_readable_name(rule_name)}"
