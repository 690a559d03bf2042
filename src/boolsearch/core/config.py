"""
Search Configuration

Settings for snippet windows and scoring weights, loaded from environment
variables prefixed with BOOLSEARCH_ (e.g. BOOLSEARCH_SNIPPET_MAX_LENGTH=200).
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchSettings(BaseSettings):
    """Search engine configuration"""

    model_config = SettingsConfigDict(
        env_prefix="BOOLSEARCH_",
        extra="ignore",
    )

    # Snippets
    snippet_max_length: int = Field(default=120, ge=0)
    snippet_context_before: int = Field(default=30, ge=0)
    snippet_context_after: int = Field(default=70, ge=0)
    ellipsis: str = "..."

    # Scoring
    term_weight: float = Field(default=1.0, ge=0.0)
    phrase_bonus: float = Field(default=2.0, ge=0.0)

    # Logging
    log_level: str = "INFO"


def load_settings() -> SearchSettings:
    """Load settings from environment variables."""
    return SearchSettings()


settings = load_settings()
