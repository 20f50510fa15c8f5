"""
RLEVECTOR Validation Module

Error taxonomy, argument guards and run-list invariant checks.

Exports:
    - VectorIndexError: logical index outside [0, dim)
    - DimensionMismatchError: binary operation on unequal dims
    - UnsupportedOperationError: operation not defined on the compressed form
    - InvariantError: run list violating coverage / non-degeneracy / maximality
    - ConfigError: unknown profile or malformed configuration
    - check_invariants: verify invariants 1-4, returns InvariantReport
    - assert_canonical: raise InvariantError unless canonical
"""

from .errors import (
    VectorIndexError,
    DimensionMismatchError,
    UnsupportedOperationError,
    InvariantError,
    ConfigError,
    check_index,
    check_dims,
    check_prefix,
)

from .invariants import (
    InvariantReport,
    check_invariants,
    assert_canonical,
    structural_errors,
)

__all__ = [
    # Errors
    'VectorIndexError',
    'DimensionMismatchError',
    'UnsupportedOperationError',
    'InvariantError',
    'ConfigError',
    # Guards
    'check_index',
    'check_dims',
    'check_prefix',
    # Invariants
    'InvariantReport',
    'check_invariants',
    'assert_canonical',
    'structural_errors',
]
