"""
Drift detection engine.

`DriftEngine` ties the components together for one monitored signal:

- validates every input before touching state
- answers repeated samples from the result cache
- skips full checks for samples that barely moved (adaptive sampling)
- scores the sample with all four drift methods and classifies severity
- keeps a bounded, compressed history and forecasts the score trend

All state-changing calls are serialized by a lock, so an engine may be shared
between threads. Episode recording and metrics happen after the lock is
released and never fail a call.
"""

import time
from threading import Lock
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union
from uuid import uuid4

import numpy as np
import pydantic

from driftwatch.core.config import EngineConfig, load_profile
from driftwatch.core.logging import get_contextual_logger, log_drift_check
from driftwatch.interfaces.drift_interface import IDriftEngine
from driftwatch.interfaces.memory_interface import Episode, IEpisodeSink
from driftwatch.models.baseline import BaselineDistribution
from driftwatch.models.results import (
    CachedResult,
    ComputedResult,
    DetectionOptions,
    DriftMethod,
    DriftResult,
    EngineStatistics,
    HistoryEntry,
    PredictionResult,
    QuickStats,
    SkippedResult,
)
from driftwatch.monitoring.prometheus import (
    record_baseline_size,
    record_check,
    record_detection,
    record_engine_state,
    record_scores,
)
from driftwatch.services.adaptive_sampler import AdaptiveSampler
from driftwatch.services.drift_methods import compute_scores
from driftwatch.services.history_log import HistoryLog
from driftwatch.services.predictor import Predictor
from driftwatch.services.result_cache import ResultCache
from driftwatch.services.severity import SeverityClassifier, aggregate_score
from driftwatch.utils.error_codes import ErrorCode, raise_validation_error
from driftwatch.utils.exceptions import BaselineNotSetError
from driftwatch.utils.validation import NumericValidator

MIN_STABLE_BASELINE = 3


def _build_config(config: Optional[EngineConfig], overrides: Dict[str, Any]) -> EngineConfig:
    """Merges overrides into a config, reporting bad values as ValidationError."""
    try:
        if config is None:
            config = EngineConfig(**overrides)
        elif overrides:
            config = EngineConfig(**{**config.model_dump(), **overrides})
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        field_name = ".".join(str(part) for part in first.get("loc", ())) or "config"
        code = (
            ErrorCode.INVALID_THRESHOLD
            if field_name == "drift_threshold"
            else ErrorCode.ENGINE_CONFIG_ERROR
        )
        raise_validation_error(
            code,
            f"Invalid engine configuration for {field_name}: {first.get('msg')}",
            argument=field_name,
            errors=[error.get("msg") for error in e.errors()],
        )

    NumericValidator.validate_engine_config(config)
    return config


def _coerce_options(
    options: Union[DetectionOptions, Mapping[str, bool], None]
) -> DetectionOptions:
    if options is None:
        return DetectionOptions()
    if isinstance(options, DetectionOptions):
        return options
    if isinstance(options, Mapping):
        unknown = set(options) - {"adaptive_sampling", "memoization"}
        if not unknown:
            return DetectionOptions(**options)
        raise_validation_error(
            ErrorCode.INVALID_OPTION,
            f"Unknown detection options: {sorted(unknown)}",
            argument="options",
        )
    raise_validation_error(
        ErrorCode.INVALID_OPTION,
        f"options must be DetectionOptions or a mapping, got {type(options).__name__}",
        argument="options",
    )


class DriftEngine(IDriftEngine):
    """
    Baseline-versus-current drift detection for a single numeric signal.

    Example:
        >>> engine = DriftEngine(drift_threshold=0.1)
        >>> engine.set_baseline([0.5, 0.6, 0.7, 0.8, 0.9])
        >>> result = engine.detect_drift([0.1, 0.2, 0.3, 0.4, 0.5])
        >>> result.is_drift
        True
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        *,
        signal: str = "default",
        episode_sink: Optional[IEpisodeSink] = None,
        session_id: Optional[str] = None,
        **overrides: Any,
    ):
        """
        Initialize the engine.

        Args:
            config: Engine configuration. Built from the environment when omitted.
            signal: Name of the monitored signal, used in logs and metric labels.
            episode_sink: Optional store that receives an episode per action.
            session_id: Session identifier attached to episodes.
            **overrides: EngineConfig field values applied on top of ``config``.

        Raises:
            ValidationError: If any configuration value is out of bounds.
        """
        self.config = _build_config(config, overrides)
        self.signal = signal
        self.episode_sink = episode_sink
        self.session_id = session_id or str(uuid4())
        self.logger = get_contextual_logger(__name__, signal=signal)

        self._classifier = SeverityClassifier(self.config.drift_threshold)
        self._cache = ResultCache(self.config.max_cache_size)
        self._sampler = AdaptiveSampler(self.config.sampling_tolerance)
        self._history = HistoryLog(self.config.max_history_size, self.config.recency_window)
        self._predictor = Predictor(self.config.drift_threshold, self.config.trend_window)

        self._baseline: Optional[BaselineDistribution] = None
        self._lock = Lock()
        self._reset_counters()

        self.logger.info(
            "Drift engine initialized",
            drift_threshold=self.config.drift_threshold,
            primary_method=self.config.primary_method,
            scoring_strategy=self.config.scoring_strategy,
        )

    @classmethod
    def from_profile(cls, profile_name: str, **kwargs: Any) -> "DriftEngine":
        """Creates an engine with a named profile's defaults.

        Args:
            profile_name: Registered profile (general, financial, healthcare,
                manufacturing).
            **kwargs: Engine keyword arguments and EngineConfig overrides.
        """
        values = load_profile(profile_name)
        values.update(kwargs)
        return cls(**values)

    def _reset_counters(self) -> None:
        self._total_checks = 0
        self._drift_detected = 0
        self._checks_skipped = 0
        self._cache_hits = 0
        self._started_at = time.time()

    @property
    def baseline(self) -> Optional[BaselineDistribution]:
        return self._baseline

    def set_baseline(
        self,
        values: Sequence[float],
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> BaselineDistribution:
        """Validates and installs a new baseline.

        The result cache and adaptive sampler state are invalidated, since
        both depend on the baseline. Nothing changes if validation fails.

        Args:
            values: Non-empty sequence of finite numbers.
            metadata: Optional version, description, source, and tags.

        Returns:
            The new baseline.

        Raises:
            ValidationError: If values or metadata are invalid.
        """
        array = NumericValidator.validate_values(values, "values")
        baseline = BaselineDistribution.from_values(array, metadata)

        with self._lock:
            self._baseline = baseline
            self._cache.clear()
            self._sampler.reset()

        stats = baseline.statistics
        self.logger.info(
            "Baseline set",
            samples=stats.count,
            mean=stats.mean,
            std_dev=stats.std_dev,
            version=baseline.metadata.version,
        )
        if stats.count < MIN_STABLE_BASELINE:
            self.logger.warning(
                "Baseline has very few samples, drift scores will be unstable",
                samples=stats.count,
            )

        if self.config.enable_metrics:
            record_baseline_size(self.signal, stats.count)
        self._record_episode(
            Episode(
                session_id=self.session_id,
                task="set_baseline",
                score=1.0,
                success=True,
                critique=f"Baseline set with {stats.count} samples",
            )
        )
        return baseline

    def detect_drift(
        self,
        current: Sequence[float],
        options: Union[DetectionOptions, Mapping[str, bool], None] = None,
    ) -> DriftResult:
        """Compares a current sample against the baseline.

        An exact repeat of a memoized sample returns a `CachedResult`. A
        sample whose mean and standard deviation are within the sampling
        tolerance of the last full check returns a `SkippedResult`. Anything
        else is scored by all four methods and returns a `ComputedResult`.

        Args:
            current: Non-empty sequence of finite numbers.
            options: Per-call switches for memoization and adaptive sampling.

        Returns:
            The detection result.

        Raises:
            BaselineNotSetError: If no baseline has been set.
            ValidationError: If the sample or options are invalid.
            DriftDetectionError: If a method produces an invalid score.
        """
        start = time.perf_counter()
        options = _coerce_options(options)
        episode: Optional[Episode] = None
        computed: Optional[ComputedResult] = None
        result: Optional[DriftResult] = None

        with self._lock:
            baseline = self._baseline
            if baseline is None:
                raise BaselineNotSetError(context={"signal": self.signal})

            values = NumericValidator.validate_values(current, "current")

            key = self._cache.key_for(values) if options.memoization else None
            if key is not None:
                cached = self._cache.get(key)
                if cached is not None:
                    self._cache_hits += 1
                    result = CachedResult(result=cached)

            quick = self._sampler.quick_stats(values) if result is None else None
            if result is None and options.adaptive_sampling:
                prior = self._sampler.check(quick)
                if prior is not None:
                    self._total_checks += 1
                    self._checks_skipped += 1
                    result = SkippedResult(prior_result=prior, reason=self._sampler.reason)
                    self._history.append(result)
                    episode = self._detection_episode(prior)

            if result is None:
                computed = self._compute(baseline, values, quick)
                self._total_checks += 1
                if computed.is_drift:
                    self._drift_detected += 1
                self._history.append(computed)
                self._sampler.record(computed)
                if key is not None:
                    self._cache.put(key, computed)
                result = computed
                episode = self._detection_episode(computed)

            cache_size = len(self._cache)
            history_size = len(self._history)

        duration = time.perf_counter() - start
        if computed is not None:
            log_drift_check(
                self.logger,
                result.kind,
                duration * 1000,
                is_drift=computed.is_drift,
                severity=computed.severity.value,
                average_score=computed.average_score,
            )
        else:
            log_drift_check(self.logger, result.kind, duration * 1000)

        if self.config.enable_metrics:
            record_check(self.signal, result.kind, duration)
            if computed is not None:
                record_scores(self.signal, computed.average_score, computed.scores)
                if computed.is_drift:
                    record_detection(self.signal, computed.severity.value)
            record_engine_state(self.signal, cache_size, history_size)

        self._record_episode(episode)
        return result

    def _compute(
        self, baseline: BaselineDistribution, values: np.ndarray, quick: QuickStats
    ) -> ComputedResult:
        min_sample_size = min(baseline.size, int(values.size))
        scores = compute_scores(baseline, values, quick)
        average = aggregate_score(
            scores,
            self.config.scoring_strategy,
            self.config.primary_method,
            min_sample_size,
        )
        is_drift, severity, threshold = self._classifier.classify(average, min_sample_size)
        return ComputedResult(
            is_drift=is_drift,
            severity=severity,
            scores=scores,
            average_score=average,
            primary_method=DriftMethod(self.config.primary_method),
            quick_stats=quick,
            effective_threshold=threshold,
            sample_size=int(values.size),
        )

    def _detection_episode(self, result: ComputedResult) -> Episode:
        verdict = "Drift detected" if result.is_drift else "Drift not detected"
        return Episode(
            session_id=self.session_id,
            task="detect_drift",
            score=0.3 if result.is_drift else 0.9,
            success=not result.is_drift,
            critique=f"{verdict}: severity {result.severity.value}",
        )

    def _record_episode(self, episode: Optional[Episode]) -> None:
        if self.episode_sink is None or episode is None:
            return
        try:
            self.episode_sink.record_episode(episode)
        except Exception as e:
            self.logger.warning("Episode recording failed", task=episode.task, error=str(e))

    def predict_drift(self, periods_ahead: Optional[int] = None) -> PredictionResult:
        """Forecasts the aggregate drift score from recent history.

        Args:
            periods_ahead: Checks to extrapolate over. Defaults to the
                configured prediction window.

        Returns:
            The forecast; ``insufficient_data`` with fewer than three entries.

        Raises:
            ValidationError: If periods_ahead is not a positive integer.
        """
        if periods_ahead is None:
            periods_ahead = self.config.prediction_window
        with self._lock:
            history = self._history.recent(self.config.trend_window)
        prediction = self._predictor.predict(history, periods_ahead)
        self.logger.debug(
            "Drift trend predicted",
            prediction=prediction.prediction.value,
            confidence=prediction.confidence,
            trend_slope=prediction.trend_slope,
        )
        return prediction

    def get_history(self) -> List[HistoryEntry]:
        with self._lock:
            return self._history.entries()

    def get_statistics(self) -> EngineStatistics:
        with self._lock:
            total = self._total_checks
            return EngineStatistics(
                total_checks=total,
                drift_detected=self._drift_detected,
                checks_skipped=self._checks_skipped,
                cache_hits=self._cache_hits,
                drift_rate=self._drift_detected / total if total else 0.0,
                cache_size=len(self._cache),
                history_size=len(self._history),
                uptime_seconds=time.time() - self._started_at,
            )

    def reset(self) -> None:
        with self._lock:
            self._baseline = None
            self._cache.clear()
            self._sampler.reset()
            self._history.clear()
            self._reset_counters()
        self.logger.info("Drift engine reset")
