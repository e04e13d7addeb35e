"""Logging and metrics configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings


class MonitoringConfig(BaseSettings):
    """Logging and metrics configuration.

    Attributes:
        log_level: Logging level.
        log_format: Log renderer, 'json' for machines or 'console' for humans.
        service_name: Service name attached to every log entry.
        metrics_cache_ttl: Seconds to cache generated Prometheus metrics.
    """

    log_level: str = Field(
        default="INFO",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="json",
        description="Log renderer: json or console",
        pattern=r"^(json|console)$",
    )
    service_name: str = Field(
        default="driftwatch",
        description="Service name attached to log entries",
        min_length=1,
    )
    metrics_cache_ttl: int = Field(
        default=5,
        description="Seconds to cache generated Prometheus metrics",
        ge=0,
        le=300,
    )

    class Config:
        """Pydantic configuration."""

        env_prefix = "DRIFTWATCH_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
