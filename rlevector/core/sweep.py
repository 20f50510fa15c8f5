"""
Run-list algorithms

Builders and binary operations that work directly on run lists, never on
the expanded vector unless the other operand is dense.

    encode          dense sequence -> canonical runs
    coalesce        fuse adjacent runs holding equal values
    map_runs        apply f to every run value, then coalesce
    sweep           synchronized two-cursor elementwise operation
    sweep_dot       synchronized two-cursor dot product
    dense_combine   compressed (op) dense -> dense ndarray

All functions take an equality rule (`Tolerance`) where values are compared
and return fresh `Run` records; input runs are never mutated.
"""

from typing import Any, Callable, Iterable, List, Sequence, Tuple

import numpy as np

from .numeric import Tolerance
from .run import Run


BinaryOp = Callable[[Any, Any], Any]


# =============================================================================
# RUN-LIST BUILDERS
# =============================================================================

def encode(values: Iterable[Any], eq: Tolerance) -> List[Run]:
    """
    Compress a dense sequence left to right.

    A run is closed whenever the next element differs from the value of
    the run being built.
    """
    runs: List[Run] = []
    current = None
    pos = 0
    for value in values:
        if current is not None and eq.equal(current.value, value):
            current.count += 1
        else:
            current = Run(value, 1, pos)
            runs.append(current)
        pos += 1
    return runs


def coalesce(pairs: Iterable[Tuple[Any, int]], eq: Tolerance) -> List[Run]:
    """
    Build canonical runs from (value, count) pairs.

    Start positions are recomputed; adjacent pairs with equal values are
    fused. Pairs with a count below one are rejected.
    """
    runs: List[Run] = []
    current = None
    pos = 0
    for value, count in pairs:
        if count < 1:
            raise ValueError(f"run count must be >= 1, got {count}")
        if current is not None and eq.equal(current.value, value):
            current.count += count
        else:
            current = Run(value, count, pos)
            runs.append(current)
        pos += count
    return runs


def map_runs(runs: Sequence[Run], f: Callable[[Any], Any], eq: Tolerance) -> List[Run]:
    """
    Apply `f` to every run value in one O(R) pass.

    Neighbor coalescing is enough to restore maximality here only because
    `f` is applied uniformly and run order is preserved.
    """
    return coalesce(((f(run.value), run.count) for run in runs), eq)


# =============================================================================
# SYNCHRONIZED SWEEP
# =============================================================================

def sweep(
    a_runs: Sequence[Run],
    b_runs: Sequence[Run],
    dim: int,
    op: BinaryOp,
    eq: Tolerance,
) -> List[Run]:
    """
    Elementwise `op` over two run lists covering the same dim.

    Parameters
    ----------
    a_runs, b_runs : Sequence[Run]
        Canonical run lists, both covering [0, dim)
    dim : int
        Logical length
    op : callable
        Binary operator applied to run values, op(a, b)
    eq : Tolerance
        Equality rule used to extend the output run

    Returns
    -------
    List[Run]
        Canonical runs of C where C[i] = op(A[i], B[i])

    Notes
    -----
    Two cursors advance in lock-step by step = min(rem_a, rem_b). The
    side that runs out moves to its next run; the other carries its
    remainder forward. O(|A| + |B|) time.
    """
    out: List[Run] = []
    if dim == 0:
        return out

    ia = ib = 0
    rem_a = a_runs[0].count
    rem_b = b_runs[0].count
    pos = 0
    current = None

    while pos < dim:
        step = min(rem_a, rem_b)
        value = op(a_runs[ia].value, b_runs[ib].value)

        if current is not None and eq.equal(current.value, value):
            current.count += step
        else:
            current = Run(value, step, pos)
            out.append(current)

        pos += step
        rem_a -= step
        rem_b -= step
        if pos < dim:
            if rem_a == 0:
                ia += 1
                rem_a = a_runs[ia].count
            if rem_b == 0:
                ib += 1
                rem_b = b_runs[ib].count

    return out


def sweep_dot(a_runs: Sequence[Run], b_runs: Sequence[Run], dim: int) -> Any:
    """
    Dot product of two run lists without building an output vector.

    Same cursor synchronization as `sweep`; accumulates
    a.value * b.value * step. O(1) extra space.
    """
    total = 0
    if dim == 0:
        return total

    ia = ib = 0
    rem_a = a_runs[0].count
    rem_b = b_runs[0].count
    pos = 0

    while pos < dim:
        step = min(rem_a, rem_b)
        total += a_runs[ia].value * b_runs[ib].value * step

        pos += step
        rem_a -= step
        rem_b -= step
        if pos < dim:
            if rem_a == 0:
                ia += 1
                rem_a = a_runs[ia].count
            if rem_b == 0:
                ib += 1
                rem_b = b_runs[ib].count

    return total


# =============================================================================
# DENSE FALLBACK
# =============================================================================

def dense_combine(
    runs: Sequence[Run],
    dense: np.ndarray,
    op: BinaryOp,
    reflected: bool = False,
) -> np.ndarray:
    """
    Elementwise `op` between a run list and a dense array of the same length.

    Iterates runs on the compressed side and indexes the dense side
    directly. With `reflected`, computes op(dense[i], value) instead.
    """
    other = dense.tolist()
    out = []
    for run in runs:
        value = run.value
        if reflected:
            out.extend(op(other[k], value) for k in range(run.start_pos, run.end))
        else:
            out.extend(op(value, other[k]) for k in range(run.start_pos, run.end))
    return np.array(out)


def dense_dot(runs: Sequence[Run], dense: np.ndarray) -> Any:
    """Dot product of a run list with a dense array: sum of value * block sum."""
    other = dense.tolist()
    total = 0
    for run in runs:
        total += run.value * sum(other[run.start_pos:run.end])
    return total
