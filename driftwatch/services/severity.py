"""
Drift classification: aggregate scoring, sample-size tolerance, and severity.

Severity is derived from a single rule, the ratio of the aggregate score to
the effective threshold:

    not drift      -> none
    ratio <= 2     -> low
    ratio <= 3     -> medium
    ratio <= 4     -> high
    otherwise      -> critical
"""

from typing import Mapping, Tuple, Union

from driftwatch.models.results import DriftMethod, Severity
from driftwatch.utils.error_codes import ErrorCode, raise_validation_error
from driftwatch.utils.validation import NumericValidator

SCORING_STRATEGIES = ("mean", "primary", "weighted")

_SEVERITY_BANDS = (
    (2.0, Severity.LOW),
    (3.0, Severity.MEDIUM),
    (4.0, Severity.HIGH),
)


def sample_size_multiplier(min_sample_size: int) -> float:
    """Threshold multiplier that tolerates noisier small samples."""
    if min_sample_size <= 10:
        return 1.75
    if min_sample_size <= 20:
        return 1.5
    return 1.0


def severity_for_ratio(ratio: float) -> Severity:
    """Maps a score-to-threshold ratio of a detected drift to a severity."""
    for upper, severity in _SEVERITY_BANDS:
        if ratio <= upper:
            return severity
    return Severity.CRITICAL


def aggregate_score(
    scores: Mapping[str, float],
    strategy: str = "mean",
    primary_method: Union[DriftMethod, str] = DriftMethod.PSI,
    min_sample_size: int = 0,
) -> float:
    """Combines per-method scores into a single drift score.

    Args:
        scores: Scores keyed by method name.
        strategy: 'mean' averages all methods, 'primary' uses the primary
            method alone, 'weighted' gives the primary method 60% and splits
            40% across the others.
        primary_method: The method favored by 'primary' and 'weighted'.
        min_sample_size: Smaller of the two sample sizes. Under 20 samples
            with PSI as primary, 'weighted' leans on KS instead (70% KS, 15%
            each for JSD and Statistical), since sparse histograms make PSI
            unreliable.

    Returns:
        The aggregate score.

    Raises:
        ValidationError: If the strategy is not recognized.
    """
    primary = DriftMethod(primary_method).value

    if strategy == "mean":
        return sum(scores.values()) / len(scores)

    if strategy == "primary":
        return scores[primary]

    if strategy == "weighted":
        if min_sample_size < 20 and primary == DriftMethod.PSI.value:
            return (
                0.7 * scores[DriftMethod.KS.value]
                + 0.15 * scores[DriftMethod.JSD.value]
                + 0.15 * scores[DriftMethod.STATISTICAL.value]
            )
        others = [name for name in scores if name != primary]
        share = 0.4 / len(others)
        return 0.6 * scores[primary] + sum(share * scores[name] for name in others)

    raise_validation_error(
        ErrorCode.INVALID_OPTION,
        f"scoring_strategy must be one of {SCORING_STRATEGIES}, got {strategy!r}",
        argument="scoring_strategy",
    )


class SeverityClassifier:
    """Turns an aggregate score into a drift flag and severity level."""

    def __init__(self, base_threshold: float):
        self.base_threshold = NumericValidator.validate_threshold(base_threshold)

    def effective_threshold(self, min_sample_size: int) -> float:
        return self.base_threshold * sample_size_multiplier(min_sample_size)

    def classify(self, score: float, min_sample_size: int) -> Tuple[bool, Severity, float]:
        """Classifies a score for a comparison of the given sample size.

        Args:
            score: The aggregate drift score.
            min_sample_size: Smaller of the baseline and current sample sizes.

        Returns:
            ``(is_drift, severity, effective_threshold)``. Severity is always
            `Severity.NONE` when no drift is detected.
        """
        threshold = self.effective_threshold(min_sample_size)
        is_drift = score > threshold
        if not is_drift:
            return False, Severity.NONE, threshold
        return True, severity_for_ratio(score / threshold), threshold

