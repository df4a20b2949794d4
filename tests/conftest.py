"""
Test fixtures shared across all severity bridge tests.
"""

import pytest

from severity_bridge.catalog.reader import StaticCatalogReader
from severity_bridge.host.extension_catalog import ExtensionCatalog
from severity_bridge.host.lifetime import Lifetime
from severity_bridge.models.rule_models import Analyzer, Rule


@pytest.fixture
def spacing_catalog():
    """One analyzer with two rules."""
    return {
        Analyzer(analyzer_id="SpacingRules", name="Spacing Rules"): [
            Rule(rule_id="SA1000", name="AvoidEmptyLine", description="desc A"),
            Rule(rule_id="SA1001", name="AvoidExtraSpace", description="desc B"),
        ]
    }


@pytest.fixture
def multi_catalog():
    """Three analyzers, listed out of alphabetical order."""
    return {
        Analyzer(analyzer_id="ReadabilityRules", name="Readability Rules"): [
            Rule(rule_id="SA1101", name="PrefixLocalCallsWithThis", description="Use this."),
            Rule(rule_id="SA1100", name="DoNotPrefixCallsWithBaseUnlessLocalImplementationExists"),
        ],
        Analyzer(analyzer_id="SpacingRules", name="Spacing Rules"): [
            Rule(rule_id="SA1000", name="KeywordsMustBeSpacedCorrectly"),
        ],
        Analyzer(analyzer_id="DocumentationRules", name="Documentation Rules"): [
            Rule(rule_id="SA1600", name="ElementsMustBeDocumented"),
            Rule(rule_id="SA1611", name="ElementParametersMustBeDocumented"),
        ],
    }


@pytest.fixture
def colliding_catalog():
    """Two distinct analyzers that derive the same group name."""
    return {
        Analyzer(analyzer_id="Spacing.Core", name="Spacing Rules"): [
            Rule(rule_id="SA1000", name="AvoidEmptyLine"),
        ],
        Analyzer(analyzer_id="Spacing.Extra", name="Spacing Rules"): [
            Rule(rule_id="SA1002", name="SemicolonsMustBeSpacedCorrectly"),
        ],
    }


class FailingReader:
    """Catalog reader whose engine blows up."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or RuntimeError("analysis engine failed to load")

    def get_analyzer_rule_catalog(self):
        raise self.error


@pytest.fixture
def failing_reader():
    return FailingReader()


@pytest.fixture
def spacing_reader(spacing_catalog):
    return StaticCatalogReader(spacing_catalog)


@pytest.fixture
def extension_catalog():
    return ExtensionCatalog()


@pytest.fixture
def lifetime():
    lifetime = Lifetime("test")
    yield lifetime
    lifetime.terminate()
