import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple
from .errors import ConfigError, EnumerationLimitError
from .models import Alignment, DiffComponent
from .table import LCSTable
from .utils import AlignmentUtils, Path

logger = logging.getLogger(__name__)

# Default Configuration
DEFAULT_CONFIG = {
    "TIE_BREAK": "left",   # "left" decrements j on ties, "up" decrements i
    "MAX_RESULTS": None    # Cap on distinct LCSs held per cell in extract_all
}

TIE_BREAK_POLICIES = ("left", "up")


class LCSEngine:
    """
    Extracts alignments from a finished LCSTable: one longest common
    subsequence, every distinct longest common subsequence, or a diff script.

    The engine only reads the table. Several engines (or several calls on one
    engine) can share a table safely.
    """

    def __init__(self, table: LCSTable, config: Optional[Dict] = None):
        self.table = table
        self.a = table.a
        self.b = table.b
        self.config = self._load_config(config)

    @staticmethod
    def _load_config(config: Optional[Dict]) -> Dict:
        cfg = dict(DEFAULT_CONFIG)
        if config:
            unknown = set(config) - set(DEFAULT_CONFIG)
            if unknown:
                raise ConfigError(f"Unknown config keys: {sorted(unknown)}")
            cfg.update(config)

        if cfg["TIE_BREAK"] not in TIE_BREAK_POLICIES:
            raise ConfigError(
                f"TIE_BREAK must be one of {TIE_BREAK_POLICIES}, got {cfg['TIE_BREAK']!r}")

        limit = cfg["MAX_RESULTS"]
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 1):
            raise ConfigError(f"MAX_RESULTS must be a positive int or None, got {limit!r}")
        return cfg

    def _prefers_left(self, i: int, j: int) -> bool:
        """Decides the move at a non-matching cell with i > 0 and j > 0."""
        up = self.table.lengths[i - 1][j]
        left = self.table.lengths[i][j - 1]
        if self.config["TIE_BREAK"] == "left":
            return left >= up
        return left > up

    # ------------------------------------------------------------------
    # Single LCS
    # ------------------------------------------------------------------

    def extract_one(self) -> Alignment:
        """
        Backtracks from the bottom-right cell to recover one longest common
        subsequence.

        Returns:
            Alignment: Index pairs in left-to-right order. Its length always
            equals table.lcs_length.
        """
        pairs = []
        i, j = len(self.a), len(self.b)

        while i > 0 and j > 0:
            if self.table.matches(i, j):
                pairs.append((i - 1, j - 1))
                i -= 1
                j -= 1
            elif self._prefers_left(i, j):
                j -= 1
            else:
                i -= 1

        pairs.reverse()
        return Alignment(tuple(pairs), self.a, self.b)

    def as_ref_a(self) -> List[Any]:
        return self.extract_one().as_ref_a()

    def as_ref_b(self) -> List[Any]:
        return self.extract_one().as_ref_b()

    def as_ref_both(self) -> List[Tuple[Any, Any]]:
        return self.extract_one().as_ref_both()

    # ------------------------------------------------------------------
    # All LCSs
    # ------------------------------------------------------------------

    def extract_all(self) -> List[Alignment]:
        """
        Enumerates every distinct longest common subsequence.

        Results are distinct by matched values, not by index path: when
        several index paths spell the same subsequence only the first one
        found is kept. Each cell's result set is computed once and cached,
        which bounds the running time by the table size times the output
        size. The output itself can still grow exponentially for inputs
        with many repeated elements; set MAX_RESULTS to fail fast with
        EnumerationLimitError instead of exhausting memory.

        Returns:
            List[Alignment]: Sorted by index pairs.
        """
        paths = self._enumerate()
        paths.sort()
        logger.debug("Found %d distinct LCSs of length %d",
                     len(paths), self.table.lcs_length)
        return [Alignment(path, self.a, self.b) for path in paths]

    def _enumerate(self) -> List[Path]:
        n, m = len(self.a), len(self.b)
        width = m + 1
        lengths = self.table.lengths
        limit = self.config["MAX_RESULTS"]

        # memo[i * width + j] holds the distinct LCS paths of a[:i] and b[:j]
        memo: List[Optional[List[Path]]] = [None] * ((n + 1) * width)
        stack = [(n, m)]
        visited = 0

        while stack:
            i, j = stack[-1]
            slot = i * width + j
            if memo[slot] is not None:
                stack.pop()
                continue

            if i == 0 or j == 0:
                memo[slot] = [()]
                stack.pop()
                continue

            deps = self._branches(i, j)
            pending = [cell for cell in deps if memo[cell[0] * width + cell[1]] is None]
            if pending:
                stack.extend(pending)
                continue

            stack.pop()
            visited += 1

            if self.table.matches(i, j):
                step = ((i - 1, j - 1),)
                result = [path + step for path in memo[(i - 1) * width + (j - 1)]]
            else:
                merged = []
                for di, dj in deps:
                    merged.extend(memo[di * width + dj])
                result = AlignmentUtils.dedupe_by_content(merged, self.a) \
                    if len(deps) > 1 else merged

            if limit is not None and len(result) > limit:
                logger.warning("LCS enumeration exceeded MAX_RESULTS=%d at cell (%d, %d)",
                               limit, i, j)
                raise EnumerationLimitError(limit, (i, j))

            memo[slot] = result

        logger.debug("All-LCS enumeration visited %d of %d cells",
                     visited, (n + 1) * width)
        return list(memo[n * width + m])

    def _branches(self, i: int, j: int) -> List[Tuple[int, int]]:
        """Predecessor cells that preserve the LCS length of cell (i, j)."""
        if self.table.matches(i, j):
            return [(i - 1, j - 1)]

        lengths = self.table.lengths
        here = lengths[i][j]
        branches = []
        if lengths[i - 1][j] == here:
            branches.append((i - 1, j))
        if lengths[i][j - 1] == here:
            branches.append((i, j - 1))
        return branches

    def all_as_ref_a(self) -> List[List[Any]]:
        return [alignment.as_ref_a() for alignment in self.extract_all()]

    def all_as_ref_b(self) -> List[List[Any]]:
        return [alignment.as_ref_b() for alignment in self.extract_all()]

    def all_as_ref_both(self) -> List[List[Tuple[Any, Any]]]:
        return [alignment.as_ref_both() for alignment in self.extract_all()]

    # ------------------------------------------------------------------
    # Diff
    # ------------------------------------------------------------------

    def diff(self) -> List[DiffComponent]:
        """
        Derives an edit script from a to b along the same path extract_one takes.

        Returns:
            List[DiffComponent]: In forward order. Unchanged + deletion steps
            spell out a, unchanged + insertion steps spell out b.
        """
        steps = []
        i, j = len(self.a), len(self.b)

        while i > 0 or j > 0:
            if i == 0:
                steps.append(DiffComponent.insertion(self.a, self.b, j - 1))
                j -= 1
            elif j == 0:
                steps.append(DiffComponent.deletion(self.a, self.b, i - 1))
                i -= 1
            elif self.table.matches(i, j):
                steps.append(DiffComponent.unchanged(self.a, self.b, i - 1, j - 1))
                i -= 1
                j -= 1
            elif self._prefers_left(i, j):
                steps.append(DiffComponent.insertion(self.a, self.b, j - 1))
                j -= 1
            else:
                steps.append(DiffComponent.deletion(self.a, self.b, i - 1))
                i -= 1

        steps.reverse()
        return steps


def lcs(a: Sequence, b: Sequence, config: Optional[Dict] = None) -> Alignment:
    """One longest common subsequence of a and b."""
    return LCSEngine(LCSTable(a, b), config).extract_one()


def all_lcs(a: Sequence, b: Sequence, config: Optional[Dict] = None) -> List[Alignment]:
    """Every distinct longest common subsequence of a and b."""
    return LCSEngine(LCSTable(a, b), config).extract_all()


def diff(a: Sequence, b: Sequence, config: Optional[Dict] = None) -> List[DiffComponent]:
    """Edit script turning a into b."""
    return LCSEngine(LCSTable(a, b), config).diff()
