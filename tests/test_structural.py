"""
Tests for slicing, selection, concatenation and other structural
operations.
"""

import numpy as np
import pytest

from rlevector import RleVector, check_invariants


class TestSlicing:

    def test_slice_method(self, stepped):
        """slice returns the dense elements of [start, stop)."""
        v = RleVector.from_dense(stepped)
        np.testing.assert_array_equal(v.slice(2, 6), [0, 1, 1, 2])
        assert len(v.slice(4, 4)) == 0

    def test_slice_bounds(self, stepped):
        """A stop past dim is an IndexError."""
        with pytest.raises(IndexError):
            RleVector.from_dense(stepped).slice(5, 11)
        with pytest.raises(IndexError):
            RleVector.from_dense(stepped).slice(6, 5)

    def test_getitem_slice(self, stepped):
        """Slicing with [] matches list slicing."""
        v = RleVector.from_dense(stepped)
        np.testing.assert_array_equal(v[2:6], stepped[2:6])
        np.testing.assert_array_equal(v[::3], stepped[::3])
        np.testing.assert_array_equal(v[7:], stepped[7:])
        assert len(v[6:2]) == 0

    def test_select(self, stepped):
        """select picks logical elements in the order given."""
        v = RleVector.from_dense(stepped)
        np.testing.assert_array_equal(v.select([0, 5, 9, 3]), [0, 2, 2, 1])


class TestConcatenation:

    def test_expand(self, stepped):
        """expand pads with zeros."""
        v = RleVector.from_dense(stepped)
        out = v.expand(2)
        assert len(out) == 12
        np.testing.assert_array_equal(out[-2:], [0, 0])
        assert len(v.expand()) == 20
        assert len(v.expand(0)) == 10

    def test_concat(self, stepped):
        """concat appends a dense tail."""
        v = RleVector.from_dense(stepped)
        np.testing.assert_array_equal(v.concat([9]), stepped + [9])
        np.testing.assert_array_equal(v.concat(RleVector.of(7, 7)), stepped + [7, 7])

    def test_append_extends_last_run(self, stepped):
        """Appending the last value grows the last run."""
        v = RleVector.from_dense(stepped)
        w = v.append(2)
        assert w.dim == 11
        assert w.triples() == [(0, 3, 0), (1, 2, 3), (2, 6, 5)]
        assert v.dim == 10

    def test_append_new_run(self, stepped):
        """Appending a new value opens a run at the old dim."""
        w = RleVector.from_dense(stepped).append(7)
        assert w.triples()[-1] == (7, 1, 10)
        assert RleVector(0).append(3).triples() == [(3, 1, 0)]


class TestTransforms:

    def test_reverse(self, stepped):
        """reverse flips the runs and rebuilds start positions."""
        r = RleVector.from_dense(stepped).reverse()
        assert r.triples() == [(2, 5, 0), (1, 2, 5), (0, 3, 7)]
        assert check_invariants(r).valid

    def test_filter(self, stepped):
        """filter keeps matching elements and stays compressed."""
        f = RleVector.from_dense(stepped).filter(lambda x: x != 1)
        assert f.dim == 8
        assert f.triples() == [(0, 3, 0), (2, 5, 3)]

    def test_filter_coalesces(self):
        """Removing a middle run can make its neighbors equal."""
        assert RleVector.of(1, 0, 1).filter(lambda x: x > 0).triples() == [(1, 2, 0)]

    def test_filter_pos(self, stepped):
        """filter_pos lists the indices of matching elements."""
        assert RleVector.from_dense(stepped).filter_pos(lambda x: x == 1) == [3, 4]

    def test_map(self, stepped):
        """map applies the function per run and coalesces."""
        v = RleVector.from_dense(stepped)
        assert v.map(lambda x: x % 2).triples() == [(0, 3, 0), (1, 2, 3), (0, 5, 5)]
        assert v.map(lambda x: 0).triples() == [(0, 10, 0)]
