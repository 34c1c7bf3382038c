from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

from ..errors import InvalidAlignment

A = TypeVar("A")
B = TypeVar("B")


class Alignment(Enum):

    FIRST = "AlignFirst"
    LAST = "AlignLast"
    CENTER1 = "AlignCenter1"
    CENTER2 = "AlignCenter2"


top = Alignment.FIRST
bottom = Alignment.LAST
left = Alignment.FIRST
right = Alignment.LAST
center1 = Alignment.CENTER1
center2 = Alignment.CENTER2


def check_alignment(alignment: Any) -> Alignment:
    if not isinstance(alignment, Alignment):
        raise InvalidAlignment(f"Unknown alignment: {alignment!r}")
    return alignment


def leading_share(alignment: Alignment, size: int) -> int:
    """Units of a span of `size` that sit before the alignment anchor.

    Padding and cropping are both derived from the difference between the
    leading share of the target size and that of the content size, which
    keeps the odd unit on the same side for every re-alignment.
    """
    if alignment is Alignment.FIRST:
        return 0
    if alignment is Alignment.LAST:
        return size
    if alignment is Alignment.CENTER1:
        return (size + 1) // 2
    if alignment is Alignment.CENTER2:
        return size // 2
    raise InvalidAlignment(f"Unknown alignment: {alignment!r}")


@dataclass(frozen=True)
class Annotation(Generic[A]):

    data: A

    def map(self, mapper: Callable[[A], B]) -> "Annotation[B]":
        return Annotation(mapper(self.data))

    def filter(self, predicate: Callable[[A], bool]) -> Optional["Annotation[A]"]:
        return self if predicate(self.data) else None


def combine_annotations(
    first: Annotation[A], second: Annotation[A], merger: Callable[[A, A], A]
) -> Annotation[A]:
    return Annotation(merger(first.data, second.data))
