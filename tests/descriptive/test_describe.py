"""
Tests for describe(): all scalar statistics in one call.
"""

import math

import numpy as np
import pytest

from samplestats.core.exceptions import DomainError, DomainErrorKind, ValidationError
from samplestats.core.tolerances import CPU_FP64
from samplestats.descriptive import (
    DescriptiveSolution,
    describe,
    kurt,
    skew,
)
from samplestats.sample import UnweightedSample, WeightedSample


class TestDescribeBasic:

    def test_returns_solution(self, one_to_five):
        assert isinstance(describe(one_to_five), DescriptiveSolution)

    def test_one_to_five(self, one_to_five):
        result = describe(one_to_five)
        assert result.n == 5
        assert result.mean == 3.0
        assert result.variance == 2.5
        np.testing.assert_allclose(result.sd, math.sqrt(2.5), rtol=1e-12)
        assert result.variance_population == 2.0
        np.testing.assert_allclose(result.sd_population, math.sqrt(2.0), rtol=1e-12)
        assert result.median == 3.0
        assert result.mode is None
        assert result.minimum == 1.0
        assert result.maximum == 5.0
        assert result.range == 4.0
        assert result.devsq == 10.0
        np.testing.assert_allclose(result.avgdev, 1.2, rtol=1e-12)
        assert result.skewness == 0.0
        np.testing.assert_allclose(result.kurtosis, -1.3, rtol=1e-12)
        assert result.warnings == ()

    def test_agrees_with_individual_functions(self, skewed_data):
        result = describe(skewed_data)
        np.testing.assert_allclose(result.skewness, skew(skewed_data), rtol=CPU_FP64.rtol)
        np.testing.assert_allclose(result.kurtosis, kurt(skewed_data), rtol=CPU_FP64.rtol)
        assert result.minimum == np.min(skewed_data)
        assert result.maximum == np.max(skewed_data)

    def test_accepts_sample(self):
        s = UnweightedSample.from_array([1, 1, 4])
        result = describe(s)
        assert result.mode == 1.0
        assert result.sample is s

    def test_timing_sections(self, one_to_five):
        timing = describe(one_to_five).timing
        assert {'total_seconds', 'moments', 'order'} <= set(timing)

    def test_info(self, one_to_five):
        result = describe(one_to_five)
        assert result.info['n'] == 5
        assert result.backend_name == 'cpu_descriptive'


class TestDescribeDegenerate:
    """Undefined statistics become None with a warning, never an exception."""

    def test_constant_sample(self):
        result = describe([4.0, 4.0, 4.0])
        assert result.variance == 0.0
        assert result.skewness is None
        assert result.kurtosis is None
        assert result.mode == 4.0
        assert any("skewness undefined" in w for w in result.warnings)
        assert any("kurtosis undefined" in w for w in result.warnings)

    def test_single_observation(self):
        result = describe([7.0])
        assert result.variance is None
        assert result.sd is None
        assert result.variance_population == 0.0
        assert result.median == 7.0
        assert any("variance undefined" in w for w in result.warnings)

    def test_empty_still_raises(self):
        with pytest.raises(DomainError) as exc:
            describe([])
        assert exc.value.kind is DomainErrorKind.EMPTY_SAMPLE

    def test_weighted_rejected(self):
        with pytest.raises(ValidationError):
            describe(WeightedSample.from_pairs([(1, 1), (2, 1)]))


class TestDescribeOutput:

    def test_to_dict_order(self, one_to_five):
        d = describe(one_to_five).to_dict()
        assert list(d)[:3] == ['n', 'mean', 'minimum']
        assert d['median'] == 3.0

    def test_summary_text(self, one_to_five):
        text = describe(one_to_five).summary()
        assert text.startswith("Descriptive Statistics:")
        assert "3.000000" in text
        assert "NA" in text  # mode

    def test_summary_lists_warnings(self):
        text = describe([2.0, 2.0]).summary()
        assert "Warning: skewness undefined" in text

    def test_repr(self):
        assert repr(describe([1.0])).startswith("DescriptiveSolution(n=1, undefined=[")
