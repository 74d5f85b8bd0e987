"""Configuration management for retailops."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Pydantic Logfire Configuration (optional)
    logfire_token: str | None = Field(default=None, description="Pydantic Logfire token for observability")
    environment: str = Field(default="production", description="Deployment environment reported to Logfire")

    # Search Configuration
    search_default_limit: int = Field(default=10, ge=0, description="Maximum results returned by a search")
    search_default_threshold: float = Field(
        default=0.0, ge=0.0, description="Minimum score a result needs to be returned (0 disables filtering)"
    )
    search_picker_limit: int = Field(
        default=20, ge=0, description="Maximum results shown in product picker dropdowns"
    )
    search_auto_select_similarity: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Similarity above which a picker auto-selects the top product",
    )


# Application Constants
class Constants:
    """Application-wide constants."""

    # Match score bands (higher band always wins over lower bands)
    SCORE_EXACT: float = 10.0
    SCORE_STARTS_WITH: float = 5.0
    SCORE_CONTAINS: float = 3.0
    SCORE_WORD_MATCH: float = 2.0

    # Length bonus: max(0, (PIVOT - len(text)) / DIVISOR)
    LENGTH_BONUS_PIVOT: int = 50
    LENGTH_BONUS_DIVISOR: float = 100.0

    # Score bucket thresholds for UI styling
    SCORE_BUCKET_HIGH: float = 0.8
    SCORE_BUCKET_MEDIUM: float = 0.6
    SCORE_BUCKET_LOW: float = 0.4


def get_settings() -> Settings:
    """Get application settings (singleton pattern)."""
    return Settings()


# Global settings instance
settings = get_settings()
constants = Constants()
