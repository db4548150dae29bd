"""
Cross-cutting properties: order independence and non-mutation of the
caller's data.
"""

import numpy as np
import pytest

from samplestats.core.tolerances import CPU_FP64
from samplestats.descriptive import (
    describe,
    iqr,
    median,
    mode,
    modes,
    quantile,
    sample_range,
    skew,
)
from samplestats.sample import UnweightedSample, central_moment, mean, var


class TestOrderIndependence:

    @pytest.fixture
    def sample_and_permutation(self, rng):
        x = np.round(rng.normal(10.0, 3.0, size=101), 1)
        return x, rng.permutation(x)

    def test_mean_and_variance(self, sample_and_permutation):
        x, p = sample_and_permutation
        np.testing.assert_allclose(mean(p), mean(x), rtol=CPU_FP64.rtol)
        np.testing.assert_allclose(var(p), var(x), rtol=CPU_FP64.rtol)

    def test_order_statistics_identical(self, sample_and_permutation):
        x, p = sample_and_permutation
        assert median(p) == median(x)
        assert modes(p) == modes(x)
        assert mode(p) == mode(x)
        for q in (0.0, 0.1, 0.5, 0.9, 1.0):
            assert quantile(p, q) == quantile(x, q)

    def test_reversed_list(self):
        x = [3.0, 9.0, 1.0, 9.0, 4.0]
        assert modes(x[::-1]) == modes(x)
        assert median(x[::-1]) == median(x)


class TestNonMutation:

    def test_list_keeps_order(self):
        data = [5.0, 3.0, 9.0, 1.0, 3.0]
        original = list(data)
        median(data)
        modes(data)
        quantile(data, 0.3)
        iqr(data)
        sample_range(data)
        describe(data)
        assert data == original

    def test_array_keeps_order(self):
        data = np.array([5.0, 3.0, 9.0, 1.0, 3.0])
        original = data.copy()
        median(data)
        iqr(data)
        quantile(data, 0.8)
        skew(data)
        np.testing.assert_array_equal(data, original)

    def test_sample_values_keep_order(self):
        s = UnweightedSample.from_array([2.0, 1.0, 3.0])
        median(s)
        iqr(s)
        np.testing.assert_array_equal(s.values, [2.0, 1.0, 3.0])


class TestFirstMomentProperty:

    @pytest.mark.parametrize("data", [[], [1.0], [1e300, -1e300], list(range(100))])
    def test_always_exactly_zero(self, data):
        assert central_moment(data, 1) == 0.0
