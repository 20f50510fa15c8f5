"""
Run storage

Growable array of runs with the splice primitives the edit algorithm
needs: insert one or two runs, remove one or two runs. Backed by a
Python list; indices are run indices, not logical indices.
"""

from typing import Iterable, Iterator, List, Optional

from .run import Run


class RunArray:
    """Ordered, exclusively owned sequence of `Run` records."""

    __slots__ = ('_runs',)

    def __init__(self, runs: Optional[Iterable[Run]] = None):
        self._runs: List[Run] = list(runs) if runs is not None else []

    def __len__(self) -> int:
        return len(self._runs)

    def __iter__(self) -> Iterator[Run]:
        return iter(self._runs)

    def __reversed__(self) -> Iterator[Run]:
        return reversed(self._runs)

    def __getitem__(self, idx: int) -> Run:
        return self._runs[idx]

    def __repr__(self) -> str:
        return f"RunArray({self._runs!r})"

    def append(self, run: Run) -> None:
        self._runs.append(run)

    def insert_at(self, idx: int, run: Run) -> None:
        """Insert `run` before position `idx`, shifting the suffix right by one."""
        self._runs.insert(idx, run)

    def insert2_at(self, idx: int, first: Run, second: Run) -> None:
        """Insert two runs before position `idx`, shifting the suffix right by two."""
        self._runs[idx:idx] = [first, second]

    def remove_at(self, idx: int) -> Run:
        """Remove and return the run at `idx`, shifting the suffix left by one."""
        return self._runs.pop(idx)

    def remove2_at(self, idx: int) -> None:
        """Remove the runs at `idx` and `idx + 1`."""
        del self._runs[idx:idx + 2]

    def replace(self, runs: Iterable[Run]) -> None:
        """Swap in a new run list wholesale (used by in-place arithmetic)."""
        self._runs = list(runs)

    def copy(self) -> 'RunArray':
        """Deep copy: the new array owns fresh `Run` records."""
        return RunArray(run.copy() for run in self._runs)

    def view(self) -> tuple:
        """Read-only snapshot of the current run objects (not copies)."""
        return tuple(self._runs)
