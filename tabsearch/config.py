"""Application configuration using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings are validated at startup. Invalid values cause the
    application to fail fast with clear error messages.
    """

    # API Settings
    api_title: str = Field(default="Tab Search", description="API title")
    api_version: str = Field(default="1.0.0", description="API version")

    # Logging Settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Tiering
    history_threshold_hours: float = Field(
        default=24.0,
        gt=0.0,
        description="Records older than this are searched in the history tier",
    )
    max_history_records: int = Field(
        default=50,
        ge=0,
        le=1000,
        description="Maximum number of history entries merged into the record set",
    )

    # Recency bonus
    enable_recency_bonus: bool = Field(
        default=False,
        description="Add a recency bonus to scores before sorting within a pass",
    )
    recency_max_bonus: float = Field(
        default=50.0,
        ge=0.0,
        description="Bonus for records accessed within the full-bonus window",
    )
    recency_min_bonus: float = Field(
        default=5.0,
        ge=0.0,
        description="Floor of the recency bonus for older records",
    )
    recency_full_bonus_minutes: float = Field(
        default=5.0,
        ge=0.0,
        description="Records accessed within this many minutes get the full bonus",
    )
    recency_decay_minutes: float = Field(
        default=60.0,
        gt=0.0,
        description="Minutes over which the bonus decays linearly",
    )

    # Fallback destination
    search_url_template: str = Field(
        default="https://www.google.com/search?q={query}",
        description="Web search URL used when a query matches nothing; {query} is replaced",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"log_level must be one of {valid_levels}, got '{v}'"
            )
        return v_upper

    @field_validator("search_url_template")
    @classmethod
    def validate_search_url_template(cls, v: str) -> str:
        """Ensure the template is an http(s) URL with a {query} slot."""
        if not v.startswith("http"):
            raise ValueError("search_url_template must start with http:// or https://")
        if "{query}" not in v:
            raise ValueError("search_url_template must contain a {query} placeholder")
        return v

    def model_post_init(self, __context) -> None:
        """Additional validation after model initialization."""
        if self.recency_min_bonus > self.recency_max_bonus:
            raise ValueError(
                f"recency_min_bonus ({self.recency_min_bonus}) must be <= "
                f"recency_max_bonus ({self.recency_max_bonus})"
            )

        if self.recency_full_bonus_minutes >= self.recency_decay_minutes:
            raise ValueError(
                f"recency_full_bonus_minutes ({self.recency_full_bonus_minutes}) "
                f"must be less than recency_decay_minutes ({self.recency_decay_minutes})"
            )

    @property
    def history_threshold_ms(self) -> float:
        """History threshold in milliseconds."""
        return self.history_threshold_hours * 60 * 60 * 1000


# Global settings instance, created lazily on first access
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    Returns:
        Settings: The application settings

    Raises:
        ValueError: If settings validation fails
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Convenience function to reload settings (useful for testing)
def reload_settings() -> Settings:
    """Reload settings from environment.

    Returns:
        Settings: The reloaded application settings
    """
    global _settings
    _settings = Settings()
    return _settings
