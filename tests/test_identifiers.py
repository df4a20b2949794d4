"""
Tests for Identifier Deriver — highlight IDs, group names, readable titles.
"""

import pytest

from severity_bridge.core.errors import InvalidArgumentError
from severity_bridge.core.identifiers import (
    derive_group_name,
    display_title,
    get_highlight_id,
    split_readable_name,
)


def test_highlight_id_prefixes_rule_id():
    assert get_highlight_id("SA1000") == "StyleCop.SA1000"


def test_highlight_id_custom_template():
    assert get_highlight_id("X1", "Acme.{0}") == "Acme.X1"


@pytest.mark.parametrize("rule_id", ["", None])
def test_highlight_id_rejects_empty(rule_id):
    with pytest.raises(InvalidArgumentError):
        get_highlight_id(rule_id)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        get_highlight_id("")


def test_group_name():
    assert derive_group_name("Spacing Rules") == "StyleCop - Spacing Rules"


def test_group_name_empty_analyzer_passes_through():
    assert derive_group_name("") == "StyleCop - "


def test_group_name_is_stable():
    assert derive_group_name("Layout Rules") == derive_group_name("Layout Rules")


def test_split_readable_name_camel_case():
    assert split_readable_name("AvoidEmptyLine") == "Avoid Empty Line"


def test_split_readable_name_consecutive_capitals():
    assert split_readable_name("SA1000") == "S A1000"


def test_split_readable_name_empty():
    assert split_readable_name("") == ""


def test_split_readable_name_leaves_digits_and_underscores():
    assert split_readable_name("rule_2x") == "rule_2x"
    assert split_readable_name("useIO") == "use I O"


def test_display_title():
    assert display_title("SA1000", "AvoidEmptyLine") == "SA1000: Avoid Empty Line"
