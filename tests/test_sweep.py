"""
Tests for the synchronized sweep: binary operations and dot product
between two compressed vectors.
"""

import operator

import numpy as np
import pytest

from rlevector import RleVector, DimensionMismatchError, check_invariants
from rlevector.core.numeric import Tolerance
from rlevector.core.run import Run
from rlevector.core.sweep import coalesce, encode, map_runs, sweep, sweep_dot


EQ = Tolerance()


class TestSweepScenario:

    def test_add_unrelated_boundaries(self):
        """Equal results separated by a different value stay separate runs."""
        a = RleVector.of(1, 1, 1, 2, 2)
        b = RleVector.of(5, 5, 4, 4, 4)
        assert a.triples() == [(1, 3, 0), (2, 2, 3)]
        assert b.triples() == [(5, 2, 0), (4, 3, 2)]

        c = a + b
        assert c.to_list() == [6, 6, 5, 6, 6]
        assert c.triples() == [(6, 2, 0), (5, 1, 2), (6, 2, 3)]

    def test_result_coalesces_equal_steps(self):
        """Consecutive steps with equal results extend the same output run."""
        a = RleVector.of(1, 1, 2, 2)
        b = RleVector.of(3, 3, 2, 2)
        assert (a + b).triples() == [(4, 4, 0)]

    def test_same_boundaries(self):
        """Aligned run boundaries give one output run per input run."""
        a = RleVector.of(1, 1, 2, 2, 2)
        b = RleVector.of(10, 10, 20, 20, 20)
        assert (a * b).triples() == [(10, 2, 0), (40, 3, 2)]

    def test_empty_vectors(self):
        """Zero-length operands sweep to an empty result."""
        assert (RleVector(0) + RleVector(0)).dim == 0
        assert RleVector(0).dot(RleVector(0)) == 0


class TestSweepEquivalence:

    @pytest.mark.parametrize('op', [operator.add, operator.sub, operator.mul])
    @pytest.mark.parametrize('seed', [0, 7, 42])
    def test_exact_ops_match_dense(self, op, seed):
        """decompress(RLE(a) op RLE(b)) == [op(a[i], b[i])] for unrelated run boundaries."""
        rng = np.random.RandomState(seed)
        a = rng.randint(0, 3, size=60).tolist()
        b = rng.randint(0, 3, size=60).tolist()

        c = op(RleVector.from_dense(a), RleVector.from_dense(b))

        assert c.to_list() == [op(x, y) for x, y in zip(a, b)]
        assert check_invariants(c).valid

    @pytest.mark.parametrize('seed', [0, 7, 42])
    def test_division_matches_dense(self, seed):
        """Fraction division over random runs agrees with dense division."""
        rng = np.random.RandomState(seed)
        a = rng.randint(0, 4, size=60)
        b = rng.randint(1, 4, size=60)

        c = RleVector.from_dense(a) / RleVector.from_dense(b)

        np.testing.assert_allclose(c.to_float(), a / b)
        assert check_invariants(c).valid

    @pytest.mark.parametrize('seed', [3, 11])
    def test_dot_matches_dense(self, seed):
        """The sweep dot product agrees with numpy.dot."""
        rng = np.random.RandomState(seed)
        a = np.round(rng.rand(80) * 3) / 2
        b = np.round(rng.rand(80) * 3) / 2

        result = RleVector.from_dense(a).dot(RleVector.from_dense(b))

        assert result == pytest.approx(float(np.dot(a, b)))

    def test_dot_scenario(self):
        """[1,1,1,2,2] . [5,5,4,4,4] is 30."""
        a = RleVector.of(1, 1, 1, 2, 2)
        b = RleVector.of(5, 5, 4, 4, 4)
        assert a.dot(b) == 30


class TestSweepErrors:

    def test_dimension_mismatch(self):
        """Operands of different dim are rejected."""
        with pytest.raises(DimensionMismatchError):
            RleVector(3) + RleVector(4)
        with pytest.raises(DimensionMismatchError):
            RleVector(3).dot(RleVector(4))

    def test_mismatch_is_a_value_error(self):
        """DimensionMismatchError can be caught as ValueError."""
        with pytest.raises(ValueError):
            RleVector(2) * RleVector(1)


class TestRunListFunctions:

    def test_encode(self):
        """encode closes a run when the value changes."""
        runs = encode([1, 1, 2], EQ)
        assert [r.as_tuple() for r in runs] == [(1, 2, 0), (2, 1, 2)]

    def test_coalesce_recomputes_starts(self):
        """Equal neighbours fuse and start positions are rebuilt."""
        runs = coalesce([(1, 2), (1, 1), (3, 4)], EQ)
        assert [r.as_tuple() for r in runs] == [(1, 3, 0), (3, 4, 3)]

    def test_coalesce_rejects_empty_run(self):
        """A zero count is refused."""
        with pytest.raises(ValueError):
            coalesce([(1, 0)], EQ)

    def test_map_runs_does_not_mutate_input(self):
        """map_runs returns fresh runs."""
        runs = [Run(-1, 1, 0), Run(1, 2, 1)]
        out = map_runs(runs, abs, EQ)
        assert [r.as_tuple() for r in out] == [(1, 3, 0)]
        assert runs[0].value == -1

    def test_sweep_and_dot_directly(self):
        """The module functions work on bare run lists."""
        a = encode([1, 1, 1, 2, 2], EQ)
        b = encode([5, 5, 4, 4, 4], EQ)
        assert [r.as_tuple() for r in sweep(a, b, 5, operator.sub, EQ)] == [
            (-4, 2, 0), (-3, 1, 2), (-2, 2, 3),
        ]
        assert sweep_dot(a, b, 5) == 30
