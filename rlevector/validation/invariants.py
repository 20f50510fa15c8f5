"""
Run-list invariant checks

Verifies the four structural invariants of a compressed vector:

    1. Coverage        runs are contiguous from 0 and end at dim
    2. Non-degeneracy  every run has count >= 1
    3. Maximality      no two adjacent runs hold equal values
    4. Totality        counts sum to dim

Usage:
    from rlevector.validation import check_invariants

    report = check_invariants(v)
    if not report.valid:
        print(report.summary())
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .errors import InvariantError


@dataclass
class InvariantReport:
    """Report from an invariant check."""

    valid: bool = True
    errors: List[str] = field(default_factory=list)

    dim: int = 0
    n_runs: int = 0
    total_count: int = 0

    def summary(self) -> str:
        """Human-readable summary."""
        lines = [
            "=" * 60,
            "RUN LIST INVARIANT REPORT",
            "=" * 60,
            "",
            f"dim: {self.dim}",
            f"runs: {self.n_runs}",
            f"total count: {self.total_count}",
            "",
        ]

        if self.errors:
            lines.append("ERRORS:")
            for e in self.errors[:20]:
                lines.append(f"  - {e}")
            if len(self.errors) > 20:
                lines.append(f"  ... and {len(self.errors) - 20} more")
            lines.append("")

        status = "PASSED" if self.valid else "FAILED"
        lines.append(f"Status: {status}")
        lines.append("=" * 60)

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to serializable dict."""
        return {
            'valid': self.valid,
            'errors': self.errors,
            'dim': self.dim,
            'n_runs': self.n_runs,
            'total_count': self.total_count,
        }


def structural_errors(runs: Sequence, dim: int) -> List[str]:
    """
    Coverage, non-degeneracy and totality problems of a run list.

    Maximality is checked separately because explicit run lists are
    allowed to violate it and get coalesced.
    """
    errors: List[str] = []

    if dim < 0:
        errors.append(f"dim must be non-negative, got {dim}")
        return errors

    if dim == 0:
        if len(runs) != 0:
            errors.append(f"empty vector must have no runs, found {len(runs)}")
        return errors

    if len(runs) == 0:
        errors.append(f"vector of dim {dim} has no runs")
        return errors

    if runs[0].start_pos != 0:
        errors.append(f"first run starts at {runs[0].start_pos}, expected 0")

    expected = 0
    total = 0
    for k, run in enumerate(runs):
        if run.count < 1:
            errors.append(f"run {k} has count {run.count}")
        if run.start_pos != expected:
            errors.append(f"run {k} starts at {run.start_pos}, expected {expected}")
        expected = run.start_pos + run.count
        total += run.count

    if expected != dim:
        errors.append(f"last run ends at {expected}, expected {dim}")
    if total != dim:
        errors.append(f"run counts sum to {total}, expected {dim}")

    return errors


def check_invariants(vector, tolerance=None) -> InvariantReport:
    """
    Check all four invariants of an RleVector.

    Args:
        vector: the RleVector to check
        tolerance: equality rule for maximality (default: the vector's own)

    Returns:
        InvariantReport
    """
    runs = vector.runs
    eq = tolerance if tolerance is not None else vector.tolerance

    report = InvariantReport(
        dim=vector.dim,
        n_runs=len(runs),
        total_count=sum(run.count for run in runs),
    )
    report.errors.extend(structural_errors(runs, vector.dim))

    for k in range(1, len(runs)):
        if eq.equal(runs[k - 1].value, runs[k].value):
            report.errors.append(
                f"runs {k - 1} and {k} share value {runs[k].value!r}"
            )

    report.valid = not report.errors
    return report


def assert_canonical(vector, tolerance=None) -> None:
    """Raise InvariantError unless the vector is in canonical form."""
    report = check_invariants(vector, tolerance)
    if not report.valid:
        raise InvariantError(report.errors)
