"""Application configuration with validation."""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class ConfigurationError(Exception):
    """Raised when preview configuration is internally inconsistent."""
    pass


class Settings(BaseSettings):
    """
    Preview settings with validation.

    Values come from ``CARDS_PREVIEW_*`` environment variables or a ``.env``
    file in the working directory.
    """

    # Preview line budget
    # The host exposes a 1-10 slider; unset or non-numeric values fall back
    # to the default.
    default_preview_lines: int = Field(
        default=3,
        description="Preview lines used when the view does not set a valid value"
    )
    min_preview_lines: int = Field(
        default=1,
        description="Smallest accepted preview line budget"
    )
    max_preview_lines: int = Field(
        default=10,
        description="Largest accepted preview line budget"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_format: str = Field(
        default="json",
        description="Log output format: 'json' for structured, 'text' for human-readable"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard Python logging levels."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v_upper

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v_lower = v.lower()
        if v_lower not in ('json', 'text'):
            raise ValueError("Invalid log format. Must be 'json' or 'text'")
        return v_lower

    def validate_preview_bounds(self) -> None:
        """Check that the line budget bounds are usable.

        Raises:
            ConfigurationError: If the bounds are empty or exclude the default.
        """
        errors: list[str] = []

        if self.min_preview_lines < 1:
            errors.append(
                f"MIN_PREVIEW_LINES must be at least 1 (got {self.min_preview_lines})"
            )
        if self.max_preview_lines < self.min_preview_lines:
            errors.append(
                f"MAX_PREVIEW_LINES ({self.max_preview_lines}) is below "
                f"MIN_PREVIEW_LINES ({self.min_preview_lines})"
            )
        if not self.min_preview_lines <= self.default_preview_lines <= self.max_preview_lines:
            errors.append(
                f"DEFAULT_PREVIEW_LINES ({self.default_preview_lines}) is outside "
                f"[{self.min_preview_lines}, {self.max_preview_lines}]"
            )

        if errors:
            raise ConfigurationError(
                "Preview configuration is invalid:\n  - " + "\n  - ".join(errors)
            )

    class Config:
        """Pydantic configuration."""
        env_prefix = "CARDS_PREVIEW_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        # Allow reading from environment variables with different case
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
