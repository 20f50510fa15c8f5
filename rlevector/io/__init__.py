"""RLEVECTOR table I/O (polars)."""

from .frame import runs_frame, from_frame, RUN_COLUMNS

__all__ = ['runs_frame', 'from_frame', 'RUN_COLUMNS']
