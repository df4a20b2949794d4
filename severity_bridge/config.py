"""
Severity Bridge Configuration — pydantic-settings based.

All settings are read from environment variables or .env file.
Every value has a default, so the bridge can start with no environment at all.
"""

from typing import Literal

from pydantic_settings import BaseSettings
from pydantic import Field

from severity_bridge.models.rule_models import Language, Severity


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── Naming ──
    product_prefix: str = Field(
        default="StyleCop", description="Product name shown in group titles and IDs"
    )
    highlight_id_template: str = Field(
        default="StyleCop.{0}",
        description="Template for highlight IDs, {0} is the rule ID",
    )
    group_title_template: str = Field(
        default="StyleCop - {0}",
        description="Template for group titles, {0} is the analyzer name",
    )

    # ── Descriptors ──
    default_severity: Severity = Field(
        default=Severity.WARNING, description="Default severity for every published rule"
    )
    language: Language = Field(
        default=Language.CSHARP, description="Language the published rules apply to"
    )

    # ── Groups ──
    duplicate_group_policy: Literal["first_wins", "reject"] = Field(
        default="first_wins",
        description="What to do when two analyzers derive the same group name",
    )

    # ── Catalog ──
    catalog_path: str = Field(
        default="rule_catalog.json",
        description="Path to the JSON rule catalog exported by the analysis engine",
    )

    # ── Server ──
    port: int = Field(default=5002, description="Server port")
    host: str = Field(default="0.0.0.0", description="Server bind host")
    log_level: str = Field(default="INFO", description="Root logging level")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance — imported by other modules
settings = Settings()
