import logging
from typing import Sequence, Tuple

logger = logging.getLogger(__name__)


class LCSTable:
    """
    Dense table of longest-common-subsequence lengths for every prefix pair of
    two sequences.

    ``table[i, j]`` is the length of the LCS of ``a[:i]`` and ``b[:j]``. Row 0
    and column 0 are zero. The table is computed once in the constructor and
    never written to again, so one instance can be shared by any number of
    extractions.

    Memory and time are O(len(a) * len(b)).
    """

    def __init__(self, a: Sequence, b: Sequence):
        self.a = a
        self.b = b
        self._lengths = self._build(a, b)
        logger.debug("Built %dx%d LCS table, lcs length %d",
                     len(a) + 1, len(b) + 1, self.lcs_length)

    @staticmethod
    def _build(a: Sequence, b: Sequence) -> Tuple[Tuple[int, ...], ...]:
        width = len(b) + 1
        previous = [0] * width
        rows = [tuple(previous)]

        for i in range(1, len(a) + 1):
            item_a = a[i - 1]
            current = [0] * width
            for j in range(1, width):
                if item_a == b[j - 1]:
                    current[j] = previous[j - 1] + 1
                else:
                    current[j] = max(previous[j], current[j - 1])
            rows.append(tuple(current))
            previous = current

        return tuple(rows)

    @property
    def lengths(self) -> Tuple[Tuple[int, ...], ...]:
        """The full (len(a)+1) x (len(b)+1) grid, row by row."""
        return self._lengths

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.a) + 1, len(self.b) + 1

    @property
    def lcs_length(self) -> int:
        """Length of the longest common subsequence of the whole inputs."""
        return self._lengths[len(self.a)][len(self.b)]

    def __getitem__(self, cell: Tuple[int, int]) -> int:
        i, j = cell
        rows, cols = self.shape
        # Negative indices would silently wrap around the tuple
        if not (0 <= i < rows and 0 <= j < cols):
            raise IndexError(f"cell {cell} outside table of shape {self.shape}")
        return self._lengths[i][j]

    def matches(self, i: int, j: int) -> bool:
        """True when a[i-1] equals b[j-1], i.e. cell (i, j) allows a diagonal step."""
        return self.a[i - 1] == self.b[j - 1]

    def __repr__(self):
        return f"LCSTable(shape={self.shape}, lcs_length={self.lcs_length})"


def build_table(a: Sequence, b: Sequence) -> LCSTable:
    """
    Builds the LCS length table for two sequences.

    Args:
        a (Sequence): First sequence (the "old" side of a diff).
        b (Sequence): Second sequence (the "new" side).

    Returns:
        LCSTable: The finished, read-only table.
    """
    return LCSTable(a, b)
