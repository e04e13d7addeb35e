"""Tests for settings, engine configuration, and profiles."""

import pydantic
import pytest

from driftwatch.core.config import (
    EngineConfig,
    MonitoringConfig,
    ProfileRegistry,
    Settings,
    get_profile_info,
    get_settings,
    load_profile,
    reset_settings,
)
from driftwatch.utils.exceptions import UnknownProfileError


@pytest.mark.unit
class TestEngineConfig:
    """Tests for EngineConfig defaults, bounds, and environment loading."""

    def test_defaults(self):
        config = EngineConfig()

        assert config.drift_threshold == 0.1
        assert config.prediction_window == 7
        assert config.trend_window == 30
        assert config.max_history_size == 1000
        assert config.max_cache_size == 100
        assert config.recency_window == 100
        assert config.sampling_tolerance == 0.05
        assert config.primary_method == "psi"
        assert config.scoring_strategy == "mean"
        assert config.enable_metrics is True

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("DRIFTWATCH_DRIFT_THRESHOLD", "0.2")
        monkeypatch.setenv("DRIFTWATCH_SCORING_STRATEGY", "weighted")

        config = EngineConfig()

        assert config.drift_threshold == 0.2
        assert config.scoring_strategy == "weighted"

    @pytest.mark.parametrize(
        "field,value",
        [
            ("drift_threshold", 0.0),
            ("drift_threshold", 1.5),
            ("max_cache_size", 0),
            ("max_history_size", -1),
            ("prediction_window", 0),
            ("trend_window", 2),
            ("sampling_tolerance", 1.0),
            ("primary_method", "chi2"),
            ("scoring_strategy", "median"),
        ],
    )
    def test_out_of_bounds_values_are_rejected(self, field, value):
        with pytest.raises(pydantic.ValidationError):
            EngineConfig(**{field: value})

    def test_drift_threshold_of_one_is_allowed(self):
        assert EngineConfig(drift_threshold=1.0).drift_threshold == 1.0


@pytest.mark.unit
class TestProfiles:
    """Tests for domain profiles."""

    @pytest.mark.parametrize(
        "profile,threshold,window",
        [
            ("general", 0.1, 7),
            ("financial", 0.15, 30),
            ("healthcare", 0.08, 14),
            ("manufacturing", 0.12, 7),
        ],
    )
    def test_profile_defaults(self, profile, threshold, window):
        config = EngineConfig.from_profile(profile)

        assert config.drift_threshold == threshold
        assert config.prediction_window == window

    def test_overrides_win_over_profile(self):
        config = EngineConfig.from_profile("financial", drift_threshold=0.2)

        assert config.drift_threshold == 0.2
        assert config.prediction_window == 30

    def test_aliases_and_case(self):
        assert load_profile("FINANCE") == load_profile("financial")
        assert load_profile(None) == load_profile("general")

    def test_unknown_profile(self):
        with pytest.raises(UnknownProfileError) as exc_info:
            load_profile("aerospace")

        assert "financial" in exc_info.value.context["available"]

    def test_profile_info_excludes_aliases(self):
        info = get_profile_info()

        assert set(info) == {"general", "financial", "healthcare", "manufacturing"}
        assert info["healthcare"]["description"]

    def test_load_profile_returns_copy(self):
        load_profile("financial")["drift_threshold"] = 0.9
        assert load_profile("financial")["drift_threshold"] == 0.15

    def test_available_profiles_via_registry(self):
        assert "manufacturing" in ProfileRegistry.get_available_profiles()


@pytest.mark.unit
class TestSettings:
    """Tests for the composed Settings object."""

    def test_composition(self):
        settings = Settings()

        assert isinstance(settings.engine, EngineConfig)
        assert isinstance(settings.monitoring, MonitoringConfig)
        assert settings.log_level == "INFO"
        assert settings.drift_threshold == 0.1

    def test_recency_window_cannot_exceed_history(self):
        with pytest.raises(pydantic.ValidationError, match="recency_window"):
            Settings(engine=EngineConfig(max_history_size=50, recency_window=100))

    def test_load_from_profile(self):
        settings = Settings.load_from_profile("healthcare", max_cache_size=10)

        assert settings.engine.drift_threshold == 0.08
        assert settings.engine.max_cache_size == 10

    def test_profile_from_environment(self, monkeypatch):
        monkeypatch.setenv("DRIFTWATCH_PROFILE", "manufacturing")
        reset_settings()

        assert get_settings().engine.drift_threshold == 0.12

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_monitoring_from_environment(self, monkeypatch):
        monkeypatch.setenv("DRIFTWATCH_LOG_FORMAT", "console")
        assert MonitoringConfig().log_format == "console"

    def test_invalid_log_format(self):
        with pytest.raises(pydantic.ValidationError):
            MonitoringConfig(log_format="xml")
