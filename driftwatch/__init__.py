"""
driftwatch

Statistical drift detection for numeric data streams: baseline comparison
with PSI, Kolmogorov-Smirnov, Jensen-Shannon, and moment-shift scoring,
severity classification, history tracking, and drift trend prediction.
"""

__version__ = "1.0.0"
