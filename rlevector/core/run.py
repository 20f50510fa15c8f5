"""
Run record

A run is a maximal contiguous block of equal elements in the logical
vector, stored as (value, count, start_pos) and covering the half-open
index range [start_pos, start_pos + count).
"""

from dataclasses import dataclass
from typing import Any, Tuple


@dataclass
class Run:
    """One run of a compressed vector. Owned by exactly one vector."""

    value: Any
    count: int
    start_pos: int

    @property
    def end(self) -> int:
        """Exclusive end of the covered index range."""
        return self.start_pos + self.count

    @property
    def last(self) -> int:
        """Index of the last element in the run."""
        return self.start_pos + self.count - 1

    def copy(self) -> 'Run':
        return Run(self.value, self.count, self.start_pos)

    def as_tuple(self) -> Tuple[Any, int, int]:
        return (self.value, self.count, self.start_pos)

    def __repr__(self) -> str:
        return f"({self.value!r}, {self.count}, {self.start_pos})"
