"""
Error taxonomy and argument guards.

Every guard runs before any structural mutation, so a failed call never
leaves a vector in a non-canonical state.
"""

from typing import List


class VectorIndexError(IndexError):
    """Raised when a logical index falls outside [0, dim)."""

    def __init__(self, index: int, dim: int):
        self.index = index
        self.dim = dim
        super().__init__(f"index {index} out of range for vector of dim {dim}")


class DimensionMismatchError(ValueError):
    """Raised when a binary operation receives operands of unequal dim."""

    def __init__(self, left: int, right: int, operation: str = "operation"):
        self.left = left
        self.right = right
        self.operation = operation
        super().__init__(f"{operation} requires equal dimensions, got {left} and {right}")


class UnsupportedOperationError(NotImplementedError):
    """Raised for operations not defined on the compressed form."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} is not implemented for RleVector")


class InvariantError(ValueError):
    """Raised when a run list violates coverage or non-degeneracy."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "Invalid run list:\n" + "\n".join(f"  ERROR: {e}" for e in errors)
        super().__init__(message)


class ConfigError(ValueError):
    """Raised for an unknown profile or malformed configuration."""


def check_index(i: int, dim: int) -> int:
    """Return `i` if it is a valid logical index, else raise VectorIndexError."""
    if not isinstance(i, int):
        try:
            i = i.__index__()
        except AttributeError:
            raise TypeError(f"vector indices must be integers, not {type(i).__name__}") from None
    if i < 0 or i >= dim:
        raise VectorIndexError(i, dim)
    return i


def check_dims(left: int, right: int, operation: str = "operation") -> None:
    if left != right:
        raise DimensionMismatchError(left, right, operation)


def check_prefix(e, dim: int, allow_empty: bool = False) -> int:
    """
    Resolve the exclusive end `e` of a prefix search.

    None means the whole vector. Otherwise 1 <= e <= dim, or 0 <= e <= dim
    with `allow_empty` (searches that can report "not found").
    """
    if e is None:
        return dim
    if e < (0 if allow_empty else 1) or e > dim:
        raise VectorIndexError(e, dim + 1)
    return e
