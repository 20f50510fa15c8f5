"""
Reductions and scans over a run list

Each function makes one pass over the runs, weighting a run's
contribution by its count: O(R) instead of O(dim).

Prefix-bounded searches take `e`, the exclusive end of the prefix [0, e).
A run takes part if it starts inside the prefix. Callers validate `e`.
"""

from itertools import islice
from typing import Any, Callable, List, Sequence

from .numeric import Tolerance
from .run import Run


# =============================================================================
# SUMS AND NORMS
# =============================================================================

def total(runs: Sequence[Run]) -> Any:
    return sum((run.value * run.count for run in runs), 0)


def total_abs(runs: Sequence[Run]) -> Any:
    return sum((abs(run.value) * run.count for run in runs), 0)


def total_pos(runs: Sequence[Run]) -> Any:
    """Sum of the strictly positive elements."""
    return sum((run.value * run.count for run in runs if run.value > 0), 0)


def norm_sq(runs: Sequence[Run]) -> Any:
    return sum((run.value * run.value * run.count for run in runs), 0)


# =============================================================================
# EXTREMA
# =============================================================================

def _extreme_run(runs: Sequence[Run], e: int, better: Callable[[Any, Any], bool]) -> Run:
    best = runs[0]
    for run in islice(runs, 1, None):
        if run.start_pos >= e:
            break
        if better(run.value, best.value):
            best = run
    return best


def max_run(runs: Sequence[Run], e: int) -> Run:
    """First run holding the maximum value within [0, e)."""
    return _extreme_run(runs, e, lambda a, b: a > b)


def min_run(runs: Sequence[Run], e: int) -> Run:
    """First run holding the minimum value within [0, e)."""
    return _extreme_run(runs, e, lambda a, b: a < b)


# =============================================================================
# SCANS
# =============================================================================

def first_where(runs: Sequence[Run], pred: Callable[[Any], bool], e: int) -> int:
    """
    Logical index of the first element within [0, e) satisfying `pred`.

    Returns -1 if none does.
    """
    for run in runs:
        if run.start_pos >= e:
            break
        if pred(run.value):
            return run.start_pos
    return -1


def count_where(runs: Sequence[Run], pred: Callable[[Any], bool]) -> int:
    return sum(run.count for run in runs if pred(run.value))


def distinct_values(runs: Sequence[Run], eq: Tolerance) -> List[Any]:
    """
    Distinct run values in order of first appearance.

    Uses the tolerance-aware equality rather than hashing, so values that
    are equal within tolerance are reported once.
    """
    seen: List[Any] = []
    for run in runs:
        if not any(eq.equal(run.value, v) for v in seen):
            seen.append(run.value)
    return seen


def contains(runs: Sequence[Run], x: Any, eq: Tolerance) -> bool:
    return any(eq.equal(run.value, x) for run in runs)


def is_sorted(runs: Sequence[Run]) -> bool:
    """True if run values are non-decreasing (ascending order)."""
    return all(runs[k - 1].value <= runs[k].value for k in range(1, len(runs)))
