"""
Drift trend forecasting.

Fits a least-squares line to the aggregate scores of the most recent history
entries and extrapolates it forward. Confidence combines fit quality (residual
spread relative to the threshold) with how much of the trend window is filled.
"""

import math
from typing import Sequence

import numpy as np
from scipy import stats

from driftwatch.models.results import HistoryEntry, Prediction, PredictionResult
from driftwatch.utils.validation import NumericValidator

MIN_TREND_SAMPLES = 3


class Predictor:
    """Extrapolates the drift score trend from recent history."""

    def __init__(self, drift_threshold: float, trend_window: int = 30):
        self.drift_threshold = NumericValidator.validate_threshold(drift_threshold)
        self.trend_window = NumericValidator.validate_positive_int(trend_window, "trend_window")

    def predict(self, history: Sequence[HistoryEntry], periods_ahead: int) -> PredictionResult:
        """Forecasts the aggregate score ``periods_ahead`` checks from now.

        Args:
            history: Detection history, oldest first.
            periods_ahead: Number of future checks to extrapolate over.

        Returns:
            The forecast. With fewer than three entries the prediction is
            ``insufficient_data`` with zero confidence.

        Raises:
            ValidationError: If ``periods_ahead`` is not a positive integer.
        """
        periods_ahead = NumericValidator.validate_positive_int(periods_ahead, "periods_ahead")

        window = list(history)[-self.trend_window :]
        n = len(window)
        if n < MIN_TREND_SAMPLES:
            return PredictionResult(
                prediction=Prediction.INSUFFICIENT_DATA,
                confidence=0.0,
                trend_slope=0.0,
                projected_score=None,
                periods_ahead=periods_ahead,
                samples_used=n,
            )

        x = np.arange(n, dtype=np.float64)
        y = np.array([entry.average_score for entry in window], dtype=np.float64)
        fit = stats.linregress(x, y)

        slope = float(fit.slope)
        intercept = float(fit.intercept)
        projected = intercept + slope * (n - 1 + periods_ahead)

        residuals = y - (intercept + slope * x)
        residual_std = math.sqrt(float(np.sum(residuals**2)) / (n - 2))
        fit_quality = 1.0 / (1.0 + residual_std / self.drift_threshold)
        sample_factor = min(1.0, n / self.trend_window)
        confidence = min(1.0, max(0.0, fit_quality * sample_factor))

        prediction = (
            Prediction.DRIFT_LIKELY if projected > self.drift_threshold else Prediction.STABLE
        )
        return PredictionResult(
            prediction=prediction,
            confidence=confidence,
            trend_slope=slope,
            projected_score=float(projected),
            periods_ahead=periods_ahead,
            samples_used=n,
        )
