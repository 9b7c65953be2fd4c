"""Write-once memo tables for the recursive scorers.

Each table keeps scores in an int64 array and tracks which cells have been
written in a separate boolean presence bitmap, so "not computed yet" never
collides with a legitimate score. Tables are allocated per top-level call
and dropped when it returns.
"""

import numpy as np

from scoring.exceptions import ScoringError


class PairwiseScoreTable:
    """Scores keyed by an index pair (i, j) into two different sequences."""

    def __init__(self, rows: int, cols: int):
        self.scores = np.zeros((rows, cols), dtype=np.int64)
        self.known = np.zeros((rows, cols), dtype=bool)

    @property
    def shape(self) -> tuple[int, int]:
        return self.scores.shape

    @property
    def filled(self) -> int:
        """Number of cells written so far."""
        return int(self.known.sum())

    def _check_index(self, i: int, j: int) -> None:
        rows, cols = self.scores.shape
        if not (0 <= i < rows and 0 <= j < cols):
            raise IndexError(f"Invalid index (i={i}, j={j}) for shape {self.shape}")

    def get(self, i: int, j: int) -> int | None:
        """Return the stored score for (i, j), or None if not computed."""
        self._check_index(i, j)
        if not self.known[i, j]:
            return None
        return int(self.scores[i, j])

    def put(self, i: int, j: int, value: int) -> None:
        """Store the score for (i, j). A cell can only be written once."""
        self._check_index(i, j)
        if self.known[i, j]:
            raise ScoringError(f"Score for (i={i}, j={j}) is already stored")
        self.scores[i, j] = value
        self.known[i, j] = True


class IntervalScoreTable(PairwiseScoreTable):
    """Scores keyed by an inclusive interval [i, j] of a single sequence.

    Only cells with i <= j are meaningful; an empty interval is a base case
    of the recursion and is never stored.
    """

    def __init__(self, length: int):
        super().__init__(length, length)

    def _check_index(self, i: int, j: int) -> None:
        super()._check_index(i, j)
        if i > j:
            raise IndexError(f"Empty interval (i={i}, j={j}) has no table cell")
