"""Runtime configuration for ibanspec.

Pydantic-based settings; every field can be overridden through an environment
variable with the ``IBANSPEC_`` prefix or a ``.env`` file.

Environment Variables:
- IBANSPEC_LOG_LEVEL: Logging level (default: WARNING)
- IBANSPEC_JSON_LOGS: Emit JSON log lines (default: false)
- IBANSPEC_DEV_MODE: Colourful console logs (default: true)
- IBANSPEC_PRINT_SEPARATOR: Separator for print-format IBANs (default: " ")
- IBANSPEC_BBAN_SEPARATOR: Separator between BBAN segments (default: " ")
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """ibanspec settings.

    Example:
        >>> settings = Settings()
        >>> settings.print_separator
        ' '
    """

    model_config = SettingsConfigDict(
        env_prefix="IBANSPEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    json_logs: bool = Field(default=False, description="Emit JSON logs for aggregation")
    dev_mode: bool = Field(default=True, description="Human-friendly coloured console logs")

    # Formatting
    print_separator: str = Field(
        default=" ",
        max_length=3,
        description="Separator between 4-character groups in print format",
    )
    bban_separator: str = Field(
        default=" ",
        max_length=3,
        description="Separator between BBAN segments",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return level


# Global settings instance (singleton pattern)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the settings singleton."""
    global _settings

    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Re-read settings from the environment and ``.env``."""
    global _settings

    _settings = Settings()
    return _settings
