from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Optional, Sequence, Tuple


class DiffKind(Enum):
    INSERTION = "insertion"
    UNCHANGED = "unchanged"
    DELETION = "deletion"


@dataclass(frozen=True)
class Alignment:
    """
    One common subsequence of two sequences, stored as index pairs.

    Attributes:
        pairs (Tuple[Tuple[int, int], ...]): (index into a, index into b) for each
            matched element, in left-to-right order.
        a (Sequence): The first source sequence. Held by reference, never copied.
        b (Sequence): The second source sequence.
    """
    pairs: Tuple[Tuple[int, int], ...]
    a: Sequence = field(repr=False, compare=False)
    b: Sequence = field(repr=False, compare=False)

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        return iter(self.as_ref_both())

    def as_ref_a(self) -> List[Any]:
        """Matched elements, taken from sequence a."""
        return [self.a[i] for i, _ in self.pairs]

    def as_ref_b(self) -> List[Any]:
        """Matched elements, taken from sequence b."""
        return [self.b[j] for _, j in self.pairs]

    def as_ref_both(self) -> List[Tuple[Any, Any]]:
        return [(self.a[i], self.b[j]) for i, j in self.pairs]

    @property
    def a_indices(self) -> List[int]:
        return [i for i, _ in self.pairs]

    @property
    def b_indices(self) -> List[int]:
        return [j for _, j in self.pairs]


@dataclass(frozen=True)
class DiffComponent:
    """
    A single step of an edit script.

    Insertions carry only b_index, deletions only a_index, and unchanged
    steps carry both. Elements are resolved from the source sequences on
    access.
    """
    kind: DiffKind
    a_index: Optional[int]
    b_index: Optional[int]
    a: Sequence = field(repr=False, compare=False)
    b: Sequence = field(repr=False, compare=False)

    @classmethod
    def insertion(cls, a: Sequence, b: Sequence, j: int) -> "DiffComponent":
        return cls(DiffKind.INSERTION, None, j, a, b)

    @classmethod
    def unchanged(cls, a: Sequence, b: Sequence, i: int, j: int) -> "DiffComponent":
        return cls(DiffKind.UNCHANGED, i, j, a, b)

    @classmethod
    def deletion(cls, a: Sequence, b: Sequence, i: int) -> "DiffComponent":
        return cls(DiffKind.DELETION, i, None, a, b)

    @property
    def a_item(self) -> Any:
        if self.a_index is None:
            raise AttributeError("insertions have no element in sequence a")
        return self.a[self.a_index]

    @property
    def b_item(self) -> Any:
        if self.b_index is None:
            raise AttributeError("deletions have no element in sequence b")
        return self.b[self.b_index]

    @property
    def item(self) -> Any:
        """The element this step is about: from b for insertions, from a otherwise."""
        if self.kind is DiffKind.INSERTION:
            return self.b_item
        return self.a_item

    def as_tuple(self) -> Tuple:
        """
        Plain tuple view, e.g. ("unchanged", "a", "a") or ("deletion", "x").
        """
        if self.kind is DiffKind.UNCHANGED:
            return (self.kind.value, self.a_item, self.b_item)
        return (self.kind.value, self.item)
