"""
Table view of a run list

    runs_frame(v)      RleVector -> polars DataFrame (value, count, start_pos)
    from_frame(df)     polars DataFrame -> RleVector (validated, coalesced)

In-memory only; the column layout is a debugging surface, not a file format.
"""

from numbers import Integral
from typing import Any, List, Optional

import numpy as np
import polars as pl

from rlevector.core.numeric import Tolerance
from rlevector.core.vector import RleVector


RUN_COLUMNS = ['value', 'count', 'start_pos']

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _value_dtype(values: List[Any]) -> pl.DataType:
    """
    Column dtype for run values.

    Int64 when every value is an integer that fits, Float64 for a mix of
    integers and floats, Object otherwise (Fraction, complex, big ints).
    """
    if all(isinstance(x, Integral) and INT64_MIN <= x <= INT64_MAX for x in values):
        return pl.Int64
    if all(isinstance(x, (Integral, float, np.floating)) for x in values):
        return pl.Float64
    return pl.Object


def runs_frame(v: RleVector) -> pl.DataFrame:
    """One row per run, in run order."""
    runs = v.runs
    values = [run.value for run in runs]
    return pl.DataFrame([
        pl.Series('value', values, dtype=_value_dtype(values), strict=False),
        pl.Series('count', [run.count for run in runs], dtype=pl.Int64),
        pl.Series('start_pos', [run.start_pos for run in runs], dtype=pl.Int64),
    ])


def from_frame(
    df: pl.DataFrame,
    dim: Optional[int] = None,
    tolerance: Optional[Tolerance] = None,
) -> RleVector:
    """
    Rebuild a vector from a run table.

    Args:
        df: DataFrame with value, count and start_pos columns
        dim: logical length (default: end of the last run)
        tolerance: equality rule for coalescing

    Raises:
        ValueError: if a required column is missing
        InvariantError: if the rows do not tile [0, dim)
    """
    missing = [c for c in RUN_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"run table is missing columns: {missing}")

    values = df['value'].to_list()
    counts = df['count'].to_list()
    starts = df['start_pos'].to_list()
    order = sorted(range(len(starts)), key=starts.__getitem__)
    triples = [(values[k], counts[k], starts[k]) for k in order]
    return RleVector.from_runs(triples, dim=dim, tolerance=tolerance)
