"""
Core compressed-vector components.

    Run         (value, count, start_pos) record
    RunArray    growable run storage with splice primitives
    Tolerance   element equality rule
    RleVector   the compressed vector
"""

from .run import Run
from .storage import RunArray
from .numeric import Tolerance, OperandKind, classify_operand, EXACT
from .vector import RleVector

__all__ = [
    'Run',
    'RunArray',
    'Tolerance',
    'OperandKind',
    'classify_operand',
    'EXACT',
    'RleVector',
]
