"""
rlevector: run-length-encoded numeric vectors.

Public API:
    from rlevector import RleVector
    v = RleVector.from_dense([0, 0, 0, 1, 1, 2, 2, 2, 2, 2])

Layers:
    rlevector.core        Run, RunArray, Tolerance, RleVector, sweep + reductions
    rlevector.validation  Error taxonomy, guards, invariant checks
    rlevector.config      YAML configuration (tolerance, display)
    rlevector.io          polars table view of run lists
    rlevector.cli         Developer command line (python -m rlevector)
"""

from rlevector.core import Run, RunArray, Tolerance, RleVector
from rlevector.validation import (
    VectorIndexError,
    DimensionMismatchError,
    UnsupportedOperationError,
    InvariantError,
    ConfigError,
    check_invariants,
)

__version__ = "0.1.0"

__all__ = [
    "Run",
    "RunArray",
    "Tolerance",
    "RleVector",
    "VectorIndexError",
    "DimensionMismatchError",
    "UnsupportedOperationError",
    "InvariantError",
    "ConfigError",
    "check_invariants",
]
