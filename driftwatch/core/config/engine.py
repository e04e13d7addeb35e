"""Drift engine configuration: thresholds, bounds, and optimization knobs."""

from typing import Any, Optional

from pydantic import Field

from pydantic_settings import BaseSettings


class EngineConfig(BaseSettings):
    """Configuration for a single drift engine instance.

    Attributes:
        drift_threshold: Base drift threshold applied to the aggregate score.
        prediction_window: Default number of periods ahead for forecasts.
        trend_window: Number of recent history entries used for trend fitting.
        max_history_size: Maximum number of history entries kept.
        max_cache_size: Maximum number of memoized detection results.
        recency_window: Number of most recent history entries kept in full.
        sampling_tolerance: Relative mean/std change below which a check is skipped.
        primary_method: Method favored by the 'primary' and 'weighted' strategies.
        scoring_strategy: How method scores are aggregated ('mean', 'primary', 'weighted').
        enable_metrics: Emit Prometheus metrics for each check.
    """

    drift_threshold: float = Field(
        default=0.1,
        description="Base drift threshold (0 < threshold <= 1)",
        gt=0.0,
        le=1.0,
    )
    prediction_window: int = Field(
        default=7,
        description="Default forecast horizon in detection periods",
        ge=1,
    )
    trend_window: int = Field(
        default=30,
        description="Recent history entries used to fit the drift trend",
        ge=3,
    )
    max_history_size: int = Field(
        default=1000,
        description="Maximum number of history entries kept in memory",
        ge=1,
    )
    max_cache_size: int = Field(
        default=100,
        description="Maximum number of memoized detection results",
        ge=1,
    )
    recency_window: int = Field(
        default=100,
        description="Most recent history entries kept uncompressed",
        ge=1,
    )
    sampling_tolerance: float = Field(
        default=0.05,
        description="Relative mean/std change below which a check is skipped",
        gt=0.0,
        lt=1.0,
    )
    primary_method: str = Field(
        default="psi",
        description="Primary drift method: psi, ks, jsd, or statistical",
        pattern=r"^(psi|ks|jsd|statistical)$",
    )
    scoring_strategy: str = Field(
        default="mean",
        description="Score aggregation strategy: mean, primary, or weighted",
        pattern=r"^(mean|primary|weighted)$",
    )
    enable_metrics: bool = Field(
        default=True,
        description="Emit Prometheus metrics for each drift check",
    )

    @classmethod
    def from_profile(cls, profile_name: Optional[str] = None, **overrides: Any) -> "EngineConfig":
        """Builds a config from a named profile, with explicit overrides on top.

        Args:
            profile_name: Registered profile name (e.g. 'financial'). Defaults
                to 'general'.
            **overrides: Field values that take precedence over the profile.

        Returns:
            A validated `EngineConfig`.
        """
        from driftwatch.core.config.profiles import load_profile

        values = load_profile(profile_name)
        values.update(overrides)
        return cls(**values)

    class Config:
        """Pydantic configuration."""

        env_prefix = "DRIFTWATCH_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
