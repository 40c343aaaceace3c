"""Tests for infinite set types and distribution capability checks."""

import numpy as np
import pytest
from hypothesis import given, strategies as st, assume
from scipy import stats

from infopt import InvalidSpecification
from infopt.sets import (
    InfiniteSet,
    SetKind,
    IntervalSet,
    DistributionSet,
    is_infinite_set,
    set_kind,
    set_to_dict,
    is_distribution,
    is_univariate,
    is_non_matrix_distribution,
    distribution_support,
)


class TestIntervalSet:
    """Tests for IntervalSet."""

    def test_bounds_are_floats(self):
        """Test that integer bounds are stored as floats."""
        interval = IntervalSet(0, 10)
        assert interval.lower_bound == 0.0
        assert interval.upper_bound == 10.0
        assert isinstance(interval.lower_bound, float)

    def test_is_immutable(self):
        """Test that IntervalSet cannot be edited in place."""
        interval = IntervalSet(0, 1)
        with pytest.raises(AttributeError):
            interval.lower_bound = 2.0

    def test_equality(self):
        """Test value equality."""
        assert IntervalSet(2, 10) == IntervalSet(2.0, 10.0)
        assert IntervalSet(0, 10) != IntervalSet(2, 10)

    def test_supports_span_interval(self):
        """Test supports are evenly spaced including both ends."""
        points = IntervalSet(0, 1).supports(5)
        np.testing.assert_allclose(points, [0.0, 0.25, 0.5, 0.75, 1.0])

    def test_to_dict(self):
        """Test serialization."""
        assert IntervalSet(-1, 1).to_dict() == {
            "type": "interval",
            "lower_bound": -1.0,
            "upper_bound": 1.0,
        }

    @given(
        lower=st.floats(min_value=-1e6, max_value=1e6),
        upper=st.floats(min_value=-1e6, max_value=1e6),
        n=st.integers(min_value=2, max_value=50),
    )
    def test_supports_within_bounds(self, lower, upper, n):
        """Property: interval supports stay inside the interval."""
        assume(lower <= upper)
        points = IntervalSet(lower, upper).supports(n)
        assert len(points) == n
        assert points[0] == lower
        assert points[-1] == pytest.approx(upper)


class TestDistributionSet:
    """Tests for DistributionSet."""

    def test_univariate_supports_shape(self, normal):
        """Test univariate supports are a flat vector."""
        points = DistributionSet(normal).supports(7, seed=0)
        assert points.shape == (7,)

    def test_multivariate_supports_shape(self, mvnormal):
        """Test multivariate supports have one row per point."""
        points = DistributionSet(mvnormal).supports(4, seed=0)
        assert points.shape == (4, 2)

    def test_multivariate_single_support(self, mvnormal):
        """Test a single multivariate draw keeps its row shape."""
        points = DistributionSet(mvnormal).supports(1, seed=0)
        assert points.shape == (1, 2)

    def test_supports_seeded(self, normal):
        """Test equal seeds give equal supports."""
        dset = DistributionSet(normal)
        np.testing.assert_array_equal(dset.supports(5, seed=3), dset.supports(5, seed=3))

    def test_is_univariate(self, normal, mvnormal):
        """Test univariate flag."""
        assert DistributionSet(normal).is_univariate
        assert not DistributionSet(mvnormal).is_univariate

    def test_rejects_non_distribution(self):
        """Test construction fails for objects that are not distributions."""
        with pytest.raises(InvalidSpecification, match="non-matrix"):
            DistributionSet("not a distribution")

    def test_rejects_matrix_distribution(self, wishart):
        with pytest.raises(InvalidSpecification, match="wishart"):
            DistributionSet(wishart)

    def test_rejects_unfrozen_generator(self):
        with pytest.raises(InvalidSpecification):
            DistributionSet(stats.multivariate_normal)

    def test_to_dict_univariate(self):
        """Test serialization of a univariate distribution."""
        exported = DistributionSet(stats.norm(1.0, 2.0)).to_dict()
        assert exported["type"] == "distribution"
        assert exported["name"] == "norm"
        assert exported["args"] == [1.0, 2.0]

    def test_to_dict_multivariate(self, mvnormal):
        """Test serialization of a multivariate distribution."""
        exported = DistributionSet(mvnormal).to_dict()
        assert exported["type"] == "distribution"
        assert exported["name"] == "multivariate_normal"


class TestCapabilities:
    """Tests for set and distribution capability checks."""

    def test_builtin_sets_satisfy_protocol(self, normal):
        """Test built-in variants are infinite sets."""
        assert is_infinite_set(IntervalSet(0, 1))
        assert is_infinite_set(DistributionSet(normal))
        assert isinstance(IntervalSet(0, 1), InfiniteSet)

    def test_custom_set_satisfies_protocol(self, point_set):
        """Test any object with supports() is an infinite set."""
        assert is_infinite_set(point_set)

    def test_non_sets_rejected(self, normal):
        """Test objects without supports() are not infinite sets."""
        assert not is_infinite_set(3.0)
        assert not is_infinite_set([0, 1])
        assert not is_infinite_set(normal)

    def test_set_kind(self, normal, point_set):
        """Test dispatch tags."""
        assert set_kind(IntervalSet(0, 1)) is SetKind.INTERVAL
        assert set_kind(DistributionSet(normal)) is SetKind.DISTRIBUTION
        assert set_kind(point_set) is SetKind.CUSTOM

    def test_custom_set_to_dict(self, point_set):
        """Test custom sets export their class only."""
        exported = set_to_dict(point_set)
        assert exported["type"] == "custom"
        assert exported["class"].endswith("PointSet")

    def test_is_distribution(self, normal, mvnormal):
        """Test frozen distributions are recognized, generators are not."""
        assert is_distribution(normal)
        assert is_distribution(mvnormal)
        assert not is_distribution(stats.norm)
        assert not is_distribution(stats.multivariate_normal)
        assert not is_distribution(stats.wishart)
        assert not is_distribution(IntervalSet(0, 1))

    def test_is_univariate(self, normal, mvnormal):
        """Test univariate detection."""
        assert is_univariate(normal)
        assert is_univariate(stats.poisson(3))
        assert not is_univariate(mvnormal)

    def test_non_matrix_distributions(self, normal, mvnormal, wishart):
        """Test matrix variate distributions are rejected."""
        assert is_non_matrix_distribution(normal)
        assert is_non_matrix_distribution(mvnormal)
        assert is_non_matrix_distribution(stats.dirichlet([1.0, 1.0, 1.0]))
        assert not is_non_matrix_distribution(wishart)
        assert not is_non_matrix_distribution("norm")

    def test_distribution_support(self, uniform, normal):
        """Test univariate support bounds."""
        assert distribution_support(uniform) == (2.0, 5.0)
        low, high = distribution_support(normal)
        assert low == -np.inf
        assert high == np.inf
