"""
Tests for moment-derived statistics.

Skewness and kurtosis here are the plain moment ratios (no small-sample
bias adjustment), so scipy.stats.skew/kurtosis with bias=True are exact
references.
"""

import math

import numpy as np
import pytest
from scipy import stats as sp_stats

from samplestats.core.exceptions import DomainError, DomainErrorKind, ValidationError
from samplestats.core.tolerances import CPU_FP64
from samplestats.descriptive import (
    avgdev,
    devsq,
    geomean,
    harmean,
    kurt,
    pearson_skew1,
    pearson_skew2,
    pvar,
    skew,
    stddev,
    stddevp,
)
from samplestats.sample import WeightedSample


class TestStandardDeviation:

    def test_stddev(self, one_to_five):
        np.testing.assert_allclose(stddev(one_to_five), 1.5811388300841898, rtol=1e-12)

    def test_stddevp(self, one_to_five):
        np.testing.assert_allclose(stddevp(one_to_five), math.sqrt(2.0), rtol=1e-12)

    def test_pvar(self, one_to_five):
        assert pvar(one_to_five) == 2.0

    def test_match_numpy(self, rng):
        x = rng.standard_normal(250)
        np.testing.assert_allclose(stddev(x), np.std(x, ddof=1), rtol=CPU_FP64.rtol)
        np.testing.assert_allclose(stddevp(x), np.std(x, ddof=0), rtol=CPU_FP64.rtol)

    def test_weighted_stddev_is_population_style(self, one_to_five):
        s = WeightedSample.from_arrays(one_to_five, np.ones(5))
        np.testing.assert_allclose(stddev(s), math.sqrt(2.0), rtol=CPU_FP64.rtol)
        np.testing.assert_allclose(stddevp(s), stddev(s), rtol=CPU_FP64.rtol)

    def test_stddev_single_element(self):
        with pytest.raises(DomainError) as exc:
            stddev([3.0])
        assert exc.value.kind is DomainErrorKind.INSUFFICIENT_SIZE

    def test_stddevp_single_element(self):
        assert stddevp([3.0]) == 0.0


class TestDevsq:

    def test_one_to_five(self, one_to_five):
        assert devsq(one_to_five) == 10.0

    def test_is_sum_not_average(self, rng):
        x = rng.standard_normal(60)
        np.testing.assert_allclose(devsq(x), np.var(x) * 60, rtol=CPU_FP64.rtol)

    def test_empty(self):
        with pytest.raises(DomainError) as exc:
            devsq([])
        assert exc.value.kind is DomainErrorKind.EMPTY_SAMPLE

    def test_rejects_weighted(self):
        with pytest.raises(ValidationError):
            devsq(WeightedSample.from_pairs([(1, 1), (2, 1)]))


class TestSkewKurt:

    def test_symmetric_zero_skew(self, one_to_five):
        assert skew(one_to_five) == 0.0

    def test_kurt_one_to_five(self, one_to_five):
        """m4 / m2^2 - 3 = 6.8 / 4 - 3 = -1.3."""
        np.testing.assert_allclose(kurt(one_to_five), -1.3, rtol=1e-12)

    def test_skew_matches_scipy(self, skewed_data):
        np.testing.assert_allclose(
            skew(skewed_data), sp_stats.skew(skewed_data, bias=True),
            rtol=CPU_FP64.rtol,
        )
        assert skew(skewed_data) > 0

    def test_kurt_matches_scipy(self, skewed_data):
        np.testing.assert_allclose(
            kurt(skewed_data),
            sp_stats.kurtosis(skewed_data, fisher=True, bias=True),
            rtol=CPU_FP64.rtol,
        )

    def test_weighted_matches_repeated(self):
        s = WeightedSample.from_pairs([(1.0, 4.0), (2.0, 2.0), (7.0, 1.0)])
        repeated = [1.0] * 4 + [2.0] * 2 + [7.0]
        np.testing.assert_allclose(skew(s), skew(repeated), rtol=CPU_FP64.rtol)
        np.testing.assert_allclose(kurt(s), kurt(repeated), rtol=CPU_FP64.rtol)

    @pytest.mark.parametrize("fn", [skew, kurt])
    def test_constant_sample_zero_variance(self, fn):
        with pytest.raises(DomainError) as exc:
            fn([2.0, 2.0, 2.0])
        assert exc.value.kind is DomainErrorKind.ZERO_VARIANCE

    @pytest.mark.parametrize("fn", [skew, kurt])
    def test_empty(self, fn):
        with pytest.raises(DomainError) as exc:
            fn([])
        assert exc.value.kind is DomainErrorKind.EMPTY_SAMPLE


class TestPearsonSkew:

    def test_first_coefficient(self):
        """mean 3, mode 1, var 34/4."""
        x = [1.0, 1.0, 2.0, 3.0, 8.0]
        np.testing.assert_allclose(
            pearson_skew1(x), 3.0 * (3.0 - 1.0) / math.sqrt(8.5), rtol=1e-12
        )

    def test_first_coefficient_no_mode(self):
        with pytest.raises(DomainError) as exc:
            pearson_skew1([1.0, 2.0, 3.0])
        assert exc.value.kind is DomainErrorKind.NO_MODE

    def test_first_coefficient_constant(self):
        with pytest.raises(DomainError) as exc:
            pearson_skew1([5.0, 5.0])
        assert exc.value.kind is DomainErrorKind.ZERO_VARIANCE

    def test_second_coefficient(self):
        """mean 4, median 3, var 12.5."""
        x = [1.0, 2.0, 3.0, 4.0, 10.0]
        np.testing.assert_allclose(
            pearson_skew2(x), 3.0 / math.sqrt(12.5), rtol=1e-12
        )

    def test_second_coefficient_symmetric(self, one_to_five):
        assert pearson_skew2(one_to_five) == 0.0

    def test_second_coefficient_constant(self):
        with pytest.raises(DomainError) as exc:
            pearson_skew2([1.0, 1.0, 1.0])
        assert exc.value.kind is DomainErrorKind.ZERO_VARIANCE

    def test_second_coefficient_single(self):
        with pytest.raises(DomainError) as exc:
            pearson_skew2([1.0])
        assert exc.value.kind is DomainErrorKind.INSUFFICIENT_SIZE


class TestAvgdev:

    def test_one_to_five(self, one_to_five):
        np.testing.assert_allclose(avgdev(one_to_five), 1.2, rtol=1e-12)

    def test_matches_numpy(self, rng):
        x = rng.standard_normal(80)
        np.testing.assert_allclose(
            avgdev(x), np.mean(np.abs(x - np.mean(x))), rtol=CPU_FP64.rtol
        )

    def test_empty(self):
        with pytest.raises(DomainError):
            avgdev([])


class TestMeanVariants:

    def test_harmean(self):
        np.testing.assert_allclose(harmean([1.0, 2.0, 4.0]), 3.0 / 1.75, rtol=1e-12)

    def test_harmean_matches_scipy(self, rng):
        x = rng.uniform(0.5, 5.0, size=50)
        np.testing.assert_allclose(harmean(x), sp_stats.hmean(x), rtol=CPU_FP64.rtol)

    def test_geomean(self):
        np.testing.assert_allclose(geomean([1.0, 2.0, 4.0]), 2.0, rtol=1e-12)

    def test_geomean_long_sample_no_overflow(self):
        x = np.full(2000, 1e3)
        np.testing.assert_allclose(geomean(x), 1e3, rtol=1e-12)

    @pytest.mark.parametrize("fn", [harmean, geomean])
    def test_non_positive(self, fn):
        with pytest.raises(DomainError) as exc:
            fn([1.0, 0.0, 2.0])
        assert exc.value.kind is DomainErrorKind.NON_POSITIVE_VALUE

    @pytest.mark.parametrize("fn", [harmean, geomean])
    def test_empty(self, fn):
        with pytest.raises(DomainError) as exc:
            fn([])
        assert exc.value.kind is DomainErrorKind.EMPTY_SAMPLE

    def test_ordering_of_means(self, rng):
        """Harmonic <= geometric <= arithmetic for positive data."""
        x = rng.uniform(1.0, 10.0, size=30)
        assert harmean(x) <= geomean(x) <= np.mean(x)
