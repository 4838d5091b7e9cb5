"""Monitoring and logging configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings


class MonitoringConfig(BaseSettings):
    """Monitoring, metrics and logging configuration.

    Attributes:
        enable_metrics: Enable metrics collection.
        log_level: Logging level.
        log_format: Log renderer, `json` for machines or `console` for humans.
    """

    enable_metrics: bool = Field(
        default=True,
        description="Enable metrics collection",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="json",
        description="Log output format: json or console",
        pattern=r"^(json|console)$",
    )

    class Config:
        """Pydantic configuration."""

        env_prefix = "FORGE_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
