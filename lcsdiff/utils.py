from typing import Any, Iterable, List, Sequence, Tuple
from .models import DiffComponent, DiffKind

Path = Tuple[Tuple[int, int], ...]


class AlignmentUtils:
    """
    Static helpers shared by the extractor and by callers consuming its results.
    """

    @staticmethod
    def content_key(path: Path, a: Sequence) -> Tuple[Any, ...]:
        """
        The matched values of an index path, read from sequence a.
        Two paths with equal keys describe the same subsequence.
        """
        return tuple(a[i] for i, _ in path)

    @staticmethod
    def dedupe_by_content(paths: Iterable[Path], a: Sequence) -> List[Path]:
        """
        Drops index paths whose matched values repeat an earlier path.

        Keeps the first path seen for each value sequence. Unhashable
        elements fall back to a linear equality scan.
        """
        hashed = set()
        unhashable = []
        unique = []
        for path in paths:
            key = AlignmentUtils.content_key(path, a)
            try:
                hash(key)
            except TypeError:
                if key in unhashable:
                    continue
                unhashable.append(key)
            else:
                if key in hashed:
                    continue
                hashed.add(key)
            unique.append(path)
        return unique

    @staticmethod
    def filter_diff(diff: Iterable[DiffComponent], *kinds: DiffKind) -> List[DiffComponent]:
        return [step for step in diff if step.kind in kinds]

    @staticmethod
    def reconstruct_a(diff: Iterable[DiffComponent]) -> List[Any]:
        """Rebuilds sequence a from the unchanged and deleted steps of a diff."""
        return [step.a_item for step in
                AlignmentUtils.filter_diff(diff, DiffKind.UNCHANGED, DiffKind.DELETION)]

    @staticmethod
    def reconstruct_b(diff: Iterable[DiffComponent]) -> List[Any]:
        """Rebuilds sequence b from the unchanged and inserted steps of a diff."""
        return [step.b_item for step in
                AlignmentUtils.filter_diff(diff, DiffKind.UNCHANGED, DiffKind.INSERTION)]
