"""Application configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables
and provides type-safe access to the parsing and synthesis limits.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Engine settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    ``FORMSYNTH_*`` environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="FORMSYNTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Parsing limits
    max_nesting_depth: int = Field(
        default=10,
        ge=1,
        description="Maximum block nesting depth the parser recurses into.",
    )
    max_content_size: int = Field(
        default=1_000_000,
        ge=1,
        description="Maximum number of characters accepted for one template.",
    )

    # Parser reporting
    report_unterminated_blocks: bool = Field(
        default=True,
        description="Record a warning for block tags that never close.",
    )
    strict_dedup: bool = Field(
        default=False,
        description="Record a warning when a dropped duplicate field conflicts with the kept one.",
    )

    # Strategy Selection
    parser_type: str = Field(
        default="recursive",
        description="Template parser strategy to use: 'recursive'.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_dir: Path | None = Field(
        default=None,
        description="Directory for info.log/error.log. Console only when unset.",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    def configure_logging(self) -> None:
        """Configure global logging based on settings."""
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=level,
        )

        logger.setLevel(level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.configure_logging()
    return _settings
