"""
Element semantics

Elements are duck-typed numbers: int, float, fractions.Fraction and numpy
scalars all work. This module supplies the two things the container needs
on top of plain arithmetic:

    Tolerance       tolerance-aware equality for inexact element types
    OperandKind     COMPRESSED / DENSE / SCALAR tag for binary operations
"""

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Number
from typing import Any, Tuple

import numpy as np


DEFAULT_RTOL = 1e-9
DEFAULT_ATOL = 1e-12


def is_inexact(x: Any) -> bool:
    """True for floating point (or complex) scalars."""
    return isinstance(x, (float, complex, np.inexact))


@dataclass(frozen=True)
class Tolerance:
    """
    Equality rule for elements.

    Exact types (int, Fraction, numpy integers) compare with ``==``. If
    either side is inexact, values within ``atol + rtol * max(|a|, |b|)``
    are equal. NaN never equals anything, so NaN runs never coalesce.
    """

    rtol: float = DEFAULT_RTOL
    atol: float = DEFAULT_ATOL

    def __post_init__(self):
        if self.rtol < 0 or self.atol < 0:
            raise ValueError(f"tolerances must be non-negative, got rtol={self.rtol}, atol={self.atol}")

    def equal(self, a: Any, b: Any) -> bool:
        if a == b:
            return True
        if is_inexact(a) or is_inexact(b):
            scale = max(abs(a), abs(b))
            # inf only equals itself, caught by == above
            if math.isinf(scale):
                return False
            return bool(abs(a - b) <= self.atol + self.rtol * scale)
        return False

    __call__ = equal


EXACT = Tolerance(rtol=0.0, atol=0.0)


class OperandKind(Enum):
    """What the right-hand operand of a binary operation is."""

    COMPRESSED = 'compressed'
    DENSE = 'dense'
    SCALAR = 'scalar'


def classify_operand(x: Any) -> Tuple[OperandKind, Any]:
    """
    Resolve the operand kind once per call.

    Returns the tag and the operand normalized for that kind: RleVectors are
    passed through, sequences become 1-D numpy arrays, scalars are returned
    unchanged.
    """
    # Local import: vector imports this module.
    from .vector import RleVector

    if isinstance(x, RleVector):
        return OperandKind.COMPRESSED, x
    if isinstance(x, (Number, np.generic)):
        return OperandKind.SCALAR, x
    if isinstance(x, (str, bytes)):
        raise TypeError(f"unsupported operand type: {type(x).__name__}")
    if isinstance(x, np.ndarray) or hasattr(x, '__len__') or hasattr(x, '__array__'):
        arr = np.asarray(x)
        if arr.ndim == 0:
            return OperandKind.SCALAR, arr[()]
        if arr.ndim != 1:
            raise TypeError(f"dense operand must be one-dimensional, got shape {arr.shape}")
        return OperandKind.DENSE, arr
    raise TypeError(f"unsupported operand type: {type(x).__name__}")
