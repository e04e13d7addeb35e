"""Tests for the adaptive sampling short-circuit."""

import numpy as np
import pytest

from driftwatch.models.results import QuickStats
from driftwatch.services.adaptive_sampler import AdaptiveSampler


@pytest.mark.unit
class TestAdaptiveSampler:
    """Tests for skip decisions."""

    def test_no_prior_check(self):
        assert AdaptiveSampler().check(QuickStats(mean=1.0, std_dev=1.0)) is None

    def test_similar_sample_reuses_prior_result(self, make_computed):
        sampler = AdaptiveSampler(tolerance=0.05)
        prior = make_computed(mean=10.0, std_dev=2.0)
        sampler.record(prior)

        assert sampler.check(QuickStats(mean=10.4, std_dev=2.05)) is prior

    @pytest.mark.parametrize("mean,std_dev", [(10.6, 2.0), (10.0, 2.2), (9.0, 1.0)])
    def test_changed_sample_needs_full_check(self, make_computed, mean, std_dev):
        sampler = AdaptiveSampler(tolerance=0.05)
        sampler.record(make_computed(mean=10.0, std_dev=2.0))

        assert sampler.check(QuickStats(mean=mean, std_dev=std_dev)) is None

    def test_zero_mean_and_std_use_unit_denominator(self, make_computed):
        sampler = AdaptiveSampler(tolerance=0.05)
        sampler.record(make_computed(mean=0.0, std_dev=0.0))

        assert sampler.is_similar(QuickStats(mean=0.04, std_dev=0.01))
        assert not sampler.is_similar(QuickStats(mean=0.06, std_dev=0.0))

    def test_reset_forgets_prior_check(self, make_computed):
        sampler = AdaptiveSampler()
        sampler.record(make_computed(mean=1.0, std_dev=1.0))
        sampler.reset()

        assert sampler.last_result is None
        assert sampler.check(QuickStats(mean=1.0, std_dev=1.0)) is None

    def test_quick_stats(self):
        stats = AdaptiveSampler.quick_stats(np.array([1.0, 3.0]))
        assert stats == QuickStats(mean=2.0, std_dev=1.0)

    def test_reason_mentions_tolerance(self):
        assert "5%" in AdaptiveSampler(0.05).reason
