"""
RleVector: run-length-encoded numeric vector

A logical sequence of `dim` elements stored as an ordered list of runs
(value, count, start_pos). Element access and update, arithmetic and
reductions all work on the compressed form.

Invariants (hold before and after every public operation):
    1. Coverage        runs[0].start_pos == 0, runs are contiguous, end at dim
    2. Non-degeneracy  every run has count >= 1
    3. Maximality      no two adjacent runs hold equal values
    4. Totality        sum of counts == dim

Usage:
    from rlevector import RleVector

    v = RleVector.from_dense([0, 0, 0, 1, 1, 2, 2, 2, 2, 2])
    v[4] = 2                  # merges into the following run
    w = v + v                 # synchronized sweep, stays compressed
    v.dot(w), v.norm(), v.to_dense()
"""

import logging
import math
import operator
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from rlevector.config.loader import get_vector_config
from rlevector.validation.errors import (
    InvariantError,
    UnsupportedOperationError,
    check_dims,
    check_index,
    check_prefix,
)
from rlevector.validation.invariants import structural_errors

from . import reductions
from .numeric import OperandKind, Tolerance, classify_operand, is_inexact
from .run import Run
from .storage import RunArray
from .sweep import coalesce, dense_combine, dense_dot, encode, map_runs, sweep, sweep_dot


logger = logging.getLogger(__name__)


def _maximum(a, b):
    return b if b > a else a


def _minimum(a, b):
    return b if b < a else a


class RleVector:
    """
    Compressed vector of `dim` elements.

    Parameters
    ----------
    dim : int
        Logical length, fixed for the vector's lifetime
    runs : iterable of Run, optional
        Trusted canonical run list (internal). Use `from_runs` for
        untrusted input. Default: all zeros.
    tolerance : Tolerance, optional
        Element equality rule. Default: from configuration.
    """

    # numpy defers to our reflected operators (ndarray + RleVector)
    __array_ufunc__ = None

    __hash__ = None

    def __init__(
        self,
        dim: int = 0,
        runs: Optional[Iterable[Run]] = None,
        tolerance: Optional[Tolerance] = None,
    ):
        if dim < 0:
            raise ValueError(f"dim must be non-negative, got {dim}")
        self._dim = int(dim)
        self.tolerance = tolerance if tolerance is not None else get_vector_config().tolerance
        if runs is None:
            self._runs = RunArray([Run(0, self._dim, 0)] if self._dim > 0 else [])
        elif isinstance(runs, RunArray):
            self._runs = runs
        else:
            self._runs = RunArray(runs)

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def from_dense(cls, values: Iterable[Any], tolerance: Optional[Tolerance] = None) -> 'RleVector':
        """Compress a dense sequence (list, tuple, 1-D ndarray, ...)."""
        if isinstance(values, np.ndarray):
            if values.ndim != 1:
                raise ValueError(f"expected a 1-D array, got shape {values.shape}")
            values = values.tolist()
        elif isinstance(values, RleVector):
            return values.copy()
        eq = tolerance if tolerance is not None else get_vector_config().tolerance
        runs = encode(values, eq)
        dim = runs[-1].end if runs else 0
        return cls(dim, runs, eq)

    @classmethod
    def of(cls, *values: Any) -> 'RleVector':
        """Build from positional values: RleVector.of(1, 1, 2)."""
        return cls.from_dense(values)

    @classmethod
    def fill(cls, value: Any, dim: int, tolerance: Optional[Tolerance] = None) -> 'RleVector':
        """`dim` copies of one value: a single run (none if dim == 0)."""
        if dim < 0:
            raise ValueError(f"dim must be non-negative, got {dim}")
        return cls(dim, [Run(value, dim, 0)] if dim > 0 else [], tolerance)

    @classmethod
    def zeros(cls, dim: int) -> 'RleVector':
        return cls(dim)

    @classmethod
    def ones(cls, dim: int) -> 'RleVector':
        return cls.fill(1, dim)

    @classmethod
    def one_at(cls, j: int, dim: int) -> 'RleVector':
        """Vector of the form (0, ..., 1, ..., 0) with the 1 at position j."""
        c = cls(dim)
        c.update(j, 1)
        return c

    @classmethod
    def neg_one_at(cls, j: int, dim: int) -> 'RleVector':
        """Vector of the form (0, ..., -1, ..., 0) with the -1 at position j."""
        c = cls(dim)
        c.update(j, -1)
        return c

    @classmethod
    def from_runs(
        cls,
        runs: Iterable[Union[Run, Tuple[Any, int, int]]],
        dim: Optional[int] = None,
        tolerance: Optional[Tolerance] = None,
    ) -> 'RleVector':
        """
        Build from an explicit run list.

        Runs may be `Run` records or (value, count, start_pos) triples and
        are copied. Coverage and non-degeneracy are validated; adjacent
        runs holding equal values are coalesced.

        Raises:
            InvariantError: if the runs do not tile [0, dim) exactly
        """
        copied = [run.copy() if isinstance(run, Run) else Run(*run) for run in runs]
        if dim is None:
            dim = copied[-1].end if copied else 0

        errors = structural_errors(copied, dim)
        if errors:
            raise InvariantError(errors)

        eq = tolerance if tolerance is not None else get_vector_config().tolerance
        canonical = coalesce(((run.value, run.count) for run in copied), eq)
        if len(canonical) != len(copied):
            logger.debug("Coalesced %d runs into %d", len(copied), len(canonical))
        return cls(dim, canonical, eq)

    @classmethod
    def copy_of(cls, u: Any) -> 'RleVector':
        """Fresh canonical vector with the logical contents of `u` (RLE or dense)."""
        if isinstance(u, RleVector):
            return u.copy()
        return cls.from_dense(u)

    def copy(self) -> 'RleVector':
        """Deep copy: the new vector owns fresh runs."""
        return RleVector(self._dim, self._runs.copy(), self.tolerance)

    def _new(self, runs: List[Run], dim: Optional[int] = None) -> 'RleVector':
        return RleVector(self._dim if dim is None else dim, runs, self.tolerance)

    # =========================================================================
    # SHAPE AND VIEWS
    # =========================================================================

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def n_runs(self) -> int:
        return len(self._runs)

    @property
    def runs(self) -> Tuple[Run, ...]:
        """The current run records. Do not mutate them."""
        return self._runs.view()

    @property
    def compression_ratio(self) -> float:
        """Runs per element; 1.0 means no compression."""
        return len(self._runs) / self._dim if self._dim else 0.0

    def triples(self) -> List[Tuple[Any, int, int]]:
        return [run.as_tuple() for run in self._runs]

    def iter_runs(self) -> Iterator[Tuple[Any, int, int]]:
        for run in self._runs:
            yield run.as_tuple()

    def __len__(self) -> int:
        return self._dim

    def __iter__(self) -> Iterator[Any]:
        for run in self._runs:
            for _ in range(run.count):
                yield run.value

    def __contains__(self, x: Any) -> bool:
        return reductions.contains(self._runs, x, self.tolerance)

    # =========================================================================
    # ELEMENT ACCESS
    # =========================================================================

    def locate(self, i: int) -> int:
        """
        Index of the run containing logical index `i`.

        Binary search over start positions for the last run with
        start_pos <= i. O(log R).
        """
        i = check_index(i, self._dim)
        runs = self._runs
        lo, hi = 0, len(runs) - 1
        while lo < hi:
            mid = (lo + hi + 1) // 2
            if runs[mid].start_pos <= i:
                lo = mid
            else:
                hi = mid - 1
        return lo

    def __getitem__(self, key):
        if isinstance(key, slice):
            start, stop, step = key.indices(self._dim)
            if step == 1:
                return self.slice(start, max(start, stop))
            return self.to_dense()[key]
        return self._runs[self.locate(key)].value

    def __setitem__(self, key, x) -> None:
        if isinstance(key, slice):
            indices = range(*key.indices(self._dim))
            kind, operand = classify_operand(x)
            if kind is OperandKind.SCALAR:
                for i in indices:
                    self.update(i, operand)
            else:
                values = operand.to_list() if kind is OperandKind.COMPRESSED else operand.tolist()
                check_dims(len(indices), len(values), "slice assignment")
                for i, value in zip(indices, values):
                    self.update(i, value)
            return
        self.update(key, x)

    # =========================================================================
    # ELEMENT UPDATE
    # =========================================================================

    def update(self, i: int, x: Any) -> None:
        """
        Set logical element `i` to `x`, keeping the run list canonical.

        The owning run is located, then one of four local edits is applied
        depending on where `i` falls inside the run:

            count == 1          merge_both   (dissolve into neighbors)
            i == first          merge_left   (peel head, maybe join left)
            i == last           merge_right  (peel tail, maybe join right)
            interior            split        (one run becomes three)
        """
        r = self.locate(i)
        run = self._runs[r]
        i = int(i)

        if self.tolerance.equal(x, run.value):
            return

        if run.count == 1:
            self._merge_both(r, x)
        elif i == run.start_pos:
            self._merge_left(r, x)
        elif i == run.last:
            self._merge_right(r, x)
        else:
            self._split(r, i, x)

    def _merge_both(self, r: int, x: Any) -> None:
        runs = self._runs
        run = runs[r]
        eq = self.tolerance

        joins_prev = r > 0 and eq.equal(x, runs[r - 1].value)
        joins_next = r < len(runs) - 1 and eq.equal(x, runs[r + 1].value)

        if joins_prev and joins_next:
            runs[r - 1].count += 1 + runs[r + 1].count
            runs.remove2_at(r)
        elif joins_prev:
            runs[r - 1].count += 1
            runs.remove_at(r)
        elif joins_next:
            nxt = runs[r + 1]
            nxt.count += 1
            nxt.start_pos -= 1
            runs.remove_at(r)
        else:
            run.value = x

    def _merge_left(self, r: int, x: Any) -> None:
        runs = self._runs
        run = runs[r]
        i = run.start_pos
        run.count -= 1
        run.start_pos += 1

        if r > 0 and self.tolerance.equal(x, runs[r - 1].value):
            runs[r - 1].count += 1
        else:
            runs.insert_at(r, Run(x, 1, i))

    def _merge_right(self, r: int, x: Any) -> None:
        runs = self._runs
        run = runs[r]
        i = run.last
        run.count -= 1

        if r + 1 < len(runs) and self.tolerance.equal(x, runs[r + 1].value):
            nxt = runs[r + 1]
            nxt.count += 1
            nxt.start_pos -= 1
        else:
            runs.insert_at(r + 1, Run(x, 1, i))

    def _split(self, r: int, i: int, x: Any) -> None:
        # Both outer pieces keep the old value, which already differs from
        # the outer neighbors, so no neighbor check is needed.
        runs = self._runs
        run = runs[r]
        head = i - run.start_pos
        tail = run.count - head - 1
        run.count = head
        runs.insert2_at(r + 1, Run(x, 1, i), Run(run.value, tail, i + 1))

    def set_all(self, x: Any) -> None:
        """Set every element to `x` (one run)."""
        self._runs.replace([Run(x, self._dim, 0)] if self._dim > 0 else [])

    def assign(self, values: Iterable[Any]) -> None:
        """Replace the contents with `values`, which must have length dim."""
        if isinstance(values, RleVector):
            check_dims(self._dim, values.dim, "assign")
            self._runs = values._runs.copy()
            return
        if isinstance(values, np.ndarray):
            values = values.tolist()
        runs = encode(values, self.tolerance)
        check_dims(self._dim, runs[-1].end if runs else 0, "assign")
        self._runs.replace(runs)

    def swap(self, i: int, j: int) -> None:
        """Swap elements i and j."""
        check_index(i, self._dim)
        check_index(j, self._dim)
        t = self[j]
        self.update(j, self[i])
        self.update(i, t)

    def add_at(self, i: int, s: Any) -> 'RleVector':
        """Copy of this vector with `s` added at position `i` only."""
        c = self.copy()
        c.update(i, c[i] + s)
        return c

    def sub_at(self, i: int, s: Any) -> 'RleVector':
        """Copy of this vector with `s` subtracted at position `i` only."""
        c = self.copy()
        c.update(i, c[i] - s)
        return c

    # =========================================================================
    # CONVERSION
    # =========================================================================

    def to_dense(self, dtype=None) -> np.ndarray:
        """Decompress into a 1-D numpy array."""
        if self._dim == 0:
            return np.array([], dtype=dtype)
        values = np.array([run.value for run in self._runs], dtype=dtype)
        counts = [run.count for run in self._runs]
        return np.repeat(values, counts)

    def __array__(self, dtype=None, copy=None):
        return self.to_dense(dtype)

    def to_list(self) -> List[Any]:
        return [run.value for run in self._runs for _ in range(run.count)]

    def to_int(self) -> np.ndarray:
        values = np.array([int(run.value) for run in self._runs], dtype=np.int64)
        return np.repeat(values, [run.count for run in self._runs])

    def to_float(self) -> np.ndarray:
        values = np.array([float(run.value) for run in self._runs], dtype=np.float64)
        return np.repeat(values, [run.count for run in self._runs])

    # =========================================================================
    # STRUCTURAL OPERATIONS
    # =========================================================================

    def slice(self, start: int, stop: int) -> np.ndarray:
        """Dense copy of elements [start, stop)."""
        if not 0 <= start <= stop <= self._dim:
            raise IndexError(f"slice [{start}, {stop}) out of range for dim {self._dim}")
        if start == stop:
            return np.array([])
        out = []
        for run in islice_runs(self._runs, self.locate(start)):
            if run.start_pos >= stop:
                break
            lo = max(run.start_pos, start)
            hi = min(run.end, stop)
            out.extend([run.value] * (hi - lo))
        return np.array(out)

    def select(self, indices: Iterable[int]) -> np.ndarray:
        """Dense vector of the elements at the given positions."""
        return np.array([self[i] for i in indices])

    def expand(self, more: Optional[int] = None) -> np.ndarray:
        """Dense copy extended by `more` zeros (default: dim more)."""
        more = self._dim if more is None else more
        dense = self.to_dense()
        if more < 1:
            return dense
        return np.concatenate([dense, np.zeros(more, dtype=dense.dtype)])

    def concat(self, other: Any) -> np.ndarray:
        """Dense concatenation of this vector and `other`."""
        return np.concatenate([self.to_dense(), np.asarray(other)])

    def append(self, s: Any) -> 'RleVector':
        """New vector with scalar `s` appended; stays compressed."""
        runs = self._runs.copy()
        if len(runs) and self.tolerance.equal(runs[-1].value, s):
            runs[-1].count += 1
        else:
            runs.append(Run(s, 1, self._dim))
        return self._new(runs, self._dim + 1)

    def reverse(self) -> 'RleVector':
        """Elements in reverse order."""
        runs = []
        pos = 0
        for run in reversed(self._runs):
            runs.append(Run(run.value, run.count, pos))
            pos += run.count
        return self._new(runs)

    def filter(self, pred: Callable[[Any], bool]) -> 'RleVector':
        """Compressed vector of the elements satisfying `pred`."""
        runs = coalesce(((run.value, run.count) for run in self._runs if pred(run.value)),
                        self.tolerance)
        return self._new(runs, sum(run.count for run in runs))

    def filter_pos(self, pred: Callable[[Any], bool]) -> List[int]:
        """Positions of the elements satisfying `pred`."""
        return [k for run in self._runs if pred(run.value) for k in range(run.start_pos, run.end)]

    def map(self, f: Callable[[Any], Any]) -> 'RleVector':
        """Apply `f` to every element (once per run)."""
        return self._new(map_runs(self._runs, f, self.tolerance))

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def _binary(self, other: Any, op: Callable, name: str, reflected: bool = False):
        try:
            kind, operand = classify_operand(other)
        except TypeError:
            return NotImplemented

        if kind is OperandKind.COMPRESSED:
            check_dims(self._dim, operand.dim, name)
            a, b = (operand, self) if reflected else (self, operand)
            return self._new(sweep(a._runs, b._runs, self._dim, op, self.tolerance))

        if kind is OperandKind.DENSE:
            check_dims(self._dim, len(operand), name)
            logger.debug("%s: dense fallback against array of dim %d", name, len(operand))
            return dense_combine(self._runs, operand, op, reflected)

        if reflected:
            return self.map(lambda v: op(operand, v))
        return self.map(lambda v: op(v, operand))

    def _inplace(self, other: Any, op: Callable, name: str) -> 'RleVector':
        try:
            kind, operand = classify_operand(other)
        except TypeError:
            return NotImplemented

        if kind is OperandKind.COMPRESSED:
            check_dims(self._dim, operand.dim, name)
            runs = sweep(self._runs, operand._runs, self._dim, op, self.tolerance)
        elif kind is OperandKind.DENSE:
            check_dims(self._dim, len(operand), name)
            logger.debug("%s: recompressing after dense in-place operation", name)
            runs = encode(dense_combine(self._runs, operand, op).tolist(), self.tolerance)
        else:
            runs = map_runs(self._runs, lambda v: op(v, operand), self.tolerance)

        self._runs.replace(runs)
        return self

    def __add__(self, other):
        return self._binary(other, operator.add, "add")

    def __radd__(self, other):
        return self._binary(other, operator.add, "add", reflected=True)

    def __iadd__(self, other):
        return self._inplace(other, operator.add, "add")

    def __sub__(self, other):
        return self._binary(other, operator.sub, "subtract")

    def __rsub__(self, other):
        return self._binary(other, operator.sub, "subtract", reflected=True)

    def __isub__(self, other):
        return self._inplace(other, operator.sub, "subtract")

    def __mul__(self, other):
        return self._binary(other, operator.mul, "multiply")

    def __rmul__(self, other):
        return self._binary(other, operator.mul, "multiply", reflected=True)

    def __imul__(self, other):
        return self._inplace(other, operator.mul, "multiply")

    def __truediv__(self, other):
        return self._binary(other, operator.truediv, "divide")

    def __rtruediv__(self, other):
        return self._binary(other, operator.truediv, "divide", reflected=True)

    def __itruediv__(self, other):
        return self._inplace(other, operator.truediv, "divide")

    def __pow__(self, other):
        return self._binary(other, operator.pow, "power")

    def __rpow__(self, other):
        return self._binary(other, operator.pow, "power", reflected=True)

    def __ipow__(self, other):
        return self._inplace(other, operator.pow, "power")

    def __neg__(self) -> 'RleVector':
        return self.map(operator.neg)

    def __pos__(self) -> 'RleVector':
        return self.copy()

    def __abs__(self) -> 'RleVector':
        # abs can make neighbors equal (-3 next to 3); map_runs re-coalesces.
        return self.map(abs)

    def reciprocal(self) -> 'RleVector':
        return self.map(lambda v: 1 / v)

    def maximum(self, other: Any):
        """Elementwise maximum with `other` (vector or scalar)."""
        return self._binary(other, _maximum, "maximum")

    def minimum(self, other: Any):
        """Elementwise minimum with `other` (vector or scalar)."""
        return self._binary(other, _minimum, "minimum")

    def dot(self, other: Any) -> Any:
        """Dot product with a compressed or dense vector."""
        kind, operand = classify_operand(other)
        if kind is OperandKind.COMPRESSED:
            check_dims(self._dim, operand.dim, "dot")
            return sweep_dot(self._runs, operand._runs, self._dim)
        if kind is OperandKind.DENSE:
            check_dims(self._dim, len(operand), "dot")
            logger.debug("dot: dense fallback against array of dim %d", len(operand))
            return dense_dot(self._runs, operand)
        raise TypeError("dot requires a vector operand, got a scalar")

    # =========================================================================
    # REDUCTIONS
    # =========================================================================

    def sum(self) -> Any:
        return reductions.total(self._runs)

    def sum_abs(self) -> Any:
        return reductions.total_abs(self._runs)

    def sum_pos(self) -> Any:
        """Sum of the strictly positive elements."""
        return reductions.total_pos(self._runs)

    def sum_ne(self, i: int) -> Any:
        """Sum of all elements except the one at position `i`."""
        return self.sum() - self[i]

    def mean(self) -> Any:
        if self._dim == 0:
            raise ValueError("mean() of empty vector")
        return self.sum() / self._dim

    def norm_sq(self) -> Any:
        return reductions.norm_sq(self._runs)

    def norm(self) -> float:
        """Euclidean (2-) norm."""
        return math.sqrt(self.norm_sq())

    def norm1(self) -> Any:
        """Manhattan (1-) norm."""
        return reductions.total_abs(self._runs)

    def _nonempty(self, name: str) -> None:
        if self._dim == 0:
            raise ValueError(f"{name}() of empty vector")

    def max(self, e: Optional[int] = None) -> Any:
        """Maximum element, optionally within the prefix [0, e)."""
        self._nonempty("max")
        return reductions.max_run(self._runs, check_prefix(e, self._dim)).value

    def min(self, e: Optional[int] = None) -> Any:
        """Minimum element, optionally within the prefix [0, e)."""
        self._nonempty("min")
        return reductions.min_run(self._runs, check_prefix(e, self._dim)).value

    def argmax(self, e: Optional[int] = None) -> int:
        """Index of the first maximum element within [0, e)."""
        self._nonempty("argmax")
        return reductions.max_run(self._runs, check_prefix(e, self._dim)).start_pos

    def argmin(self, e: Optional[int] = None) -> int:
        """Index of the first minimum element within [0, e)."""
        self._nonempty("argmin")
        return reductions.min_run(self._runs, check_prefix(e, self._dim)).start_pos

    def argmax_pos(self, e: Optional[int] = None) -> int:
        """argmax, or -1 if the maximum is not positive."""
        self._nonempty("argmax_pos")
        run = reductions.max_run(self._runs, check_prefix(e, self._dim))
        return run.start_pos if run.value > 0 else -1

    def argmin_neg(self, e: Optional[int] = None) -> int:
        """argmin, or -1 if the minimum is not negative."""
        self._nonempty("argmin_neg")
        run = reductions.min_run(self._runs, check_prefix(e, self._dim))
        return run.start_pos if run.value < 0 else -1

    def first_neg(self, e: Optional[int] = None) -> int:
        """Index of the first negative element within [0, e), or -1."""
        e = check_prefix(e, self._dim, allow_empty=True)
        return reductions.first_where(self._runs, lambda v: v < 0, e)

    def first_pos(self, e: Optional[int] = None) -> int:
        """Index of the first positive element within [0, e), or -1."""
        e = check_prefix(e, self._dim, allow_empty=True)
        return reductions.first_where(self._runs, lambda v: v > 0, e)

    def index_of(self, x: Any, e: Optional[int] = None) -> int:
        """Index of the first occurrence of `x` within [0, e), or -1."""
        eq = self.tolerance
        e = check_prefix(e, self._dim, allow_empty=True)
        return reductions.first_where(self._runs, lambda v: eq.equal(v, x), e)

    def index_where(self, pred: Callable[[Any], bool]) -> int:
        """Index of the first element satisfying `pred`, or -1."""
        return reductions.first_where(self._runs, pred, self._dim)

    def count_neg(self) -> int:
        return reductions.count_where(self._runs, lambda v: v < 0)

    def count_pos(self) -> int:
        return reductions.count_where(self._runs, lambda v: v > 0)

    def distinct(self) -> 'RleVector':
        """Vector of the distinct values, in order of first appearance."""
        values = reductions.distinct_values(self._runs, self.tolerance)
        return self._new([Run(v, 1, k) for k, v in enumerate(values)], len(values))

    def count_distinct(self) -> int:
        return len(reductions.distinct_values(self._runs, self.tolerance))

    def is_nonnegative(self) -> bool:
        return all(run.value >= 0 for run in self._runs)

    def is_sorted(self) -> bool:
        """True if elements are in ascending (non-decreasing) order."""
        return reductions.is_sorted(self._runs)

    def cumulate(self) -> np.ndarray:
        """Prefix sums, e.g. pmf -> CDF. Not run-length stable, so dense."""
        return np.cumsum(self.to_dense())

    def rank(self) -> np.ndarray:
        """Rank order of the elements, e.g. (8, 2, 4, 6) -> (3, 0, 1, 2)."""
        order = np.argsort(self.to_dense(), kind='stable')
        return np.argsort(order, kind='stable')

    def normalize(self) -> 'RleVector':
        """Scale so the elements sum to one (probability vector)."""
        return self * (1 / self.sum())

    def normalize_u(self) -> 'RleVector':
        """Scale to unit Euclidean length."""
        return self * (1 / self.norm())

    def normalize1(self) -> 'RleVector':
        """Scale so the maximum element is one."""
        return self * (1 / self.max())

    # =========================================================================
    # UNSUPPORTED
    # =========================================================================

    def sort(self) -> None:
        raise UnsupportedOperationError("sort")

    def sort_descending(self) -> None:
        raise UnsupportedOperationError("sort_descending")

    def compare_to(self, other: Any) -> int:
        raise UnsupportedOperationError("compare_to")

    # =========================================================================
    # EQUALITY AND RENDERING
    # =========================================================================

    def __eq__(self, other) -> bool:
        if not isinstance(other, RleVector):
            return NotImplemented
        if self._dim != other._dim or len(self._runs) != len(other._runs):
            return False
        eq = self.tolerance
        return all(
            a.count == b.count and a.start_pos == b.start_pos and eq.equal(a.value, b.value)
            for a, b in zip(self._runs, other._runs)
        )

    def __repr__(self) -> str:
        config = get_vector_config()
        shown = [self._render_run(run, config.float_format)
                 for run in islice_runs(self._runs, 0, config.max_runs)]
        hidden = len(self._runs) - len(shown)
        if hidden > 0:
            shown.append(f"... {hidden} more runs")
        return f"RleVector({', '.join(shown)})"

    @staticmethod
    def _render_run(run: Run, float_format: str) -> str:
        value = float_format.format(run.value) if is_inexact(run.value) else str(run.value)
        return f"({value}, {run.count}, {run.start_pos})"


def islice_runs(runs: RunArray, start: int, stop: Optional[int] = None) -> Iterator[Run]:
    """Iterate runs[start:stop] without copying."""
    stop = len(runs) if stop is None else min(stop, len(runs))
    for k in range(start, stop):
        yield runs[k]
