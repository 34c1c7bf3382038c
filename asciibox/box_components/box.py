from dataclasses import dataclass, replace
from typing import Any, Callable, ClassVar, Generic, Iterable, List, Optional, Sequence, Tuple

from ..errors import BoxError, InvalidDimension
from .core import A, Alignment, Annotation, B, check_alignment, left, top
from .width import string_width


@dataclass(frozen=True)
class Blank:
    tag: ClassVar[str] = "Blank"


@dataclass(frozen=True)
class Text:
    text: str
    tag: ClassVar[str] = "Text"


@dataclass(frozen=True)
class Row:
    boxes: Tuple["Box", ...]
    tag: ClassVar[str] = "Row"


@dataclass(frozen=True)
class Col:
    boxes: Tuple["Box", ...]
    tag: ClassVar[str] = "Col"


@dataclass(frozen=True)
class SubBox:
    box: "Box"
    x_align: Alignment
    y_align: Alignment
    tag: ClassVar[str] = "SubBox"


@dataclass(frozen=True)
class Box(Generic[A]):
    """Immutable layout node.

    `rows` and `cols` are fixed when the node is built; renderers treat them
    as authoritative and never re-measure children.
    """

    rows: int
    cols: int
    content: Any
    annotation: Optional[Annotation[A]] = None

    def __str__(self) -> str:
        content = self.content
        if isinstance(content, Blank):
            detail = " [empty]"
        elif isinstance(content, Text):
            shown = content.text if len(content.text) <= 20 else content.text[:17] + "..."
            detail = f' "{shown}"'
        elif isinstance(content, Row):
            detail = f" [{len(content.boxes)} boxes horizontal]"
        elif isinstance(content, Col):
            detail = f" [{len(content.boxes)} boxes vertical]"
        else:
            detail = f" [aligned {content.x_align.value}/{content.y_align.value}]"
        annotated = " annotated" if self.annotation is not None else ""
        return f"Box({self.rows}x{self.cols} {content.tag}{detail}{annotated})"


def _check_dimension(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimension(f"{name} must be an integer, got {value!r}.")
    if value < 0:
        raise InvalidDimension(f"{name} must be non-negative, got {value}.")
    return value


def empty_box(rows: int = 0, cols: int = 0) -> Box:
    return Box(_check_dimension("rows", rows), _check_dimension("cols", cols), Blank())


null_box: Box = Box(0, 0, Blank())


def char(c: str) -> Box:
    return Box(1, 1, Text(c[0] if c else " "))


def _line_box(s: str) -> Box:
    return Box(1, string_width(s), Text(s))


def line(s: str) -> Box:
    return _line_box(s.replace("\n", "").replace("\r", ""))


def text(s: str) -> Box:
    if "\n" not in s:
        return _line_box(s)
    return vcat([_line_box(part) for part in s.split("\n")], left)


def rows(box: Box) -> int:
    return box.rows


def cols(box: Box) -> int:
    return box.cols


def hcat(boxes: Iterable[Box], alignment: Alignment = top) -> Box:
    check_alignment(alignment)
    boxes = list(boxes)
    if not boxes:
        return null_box
    height = max(box.rows for box in boxes)
    width = sum(box.cols for box in boxes)
    children = tuple(
        box if box.rows == height or box.cols == 0 else align_vert(box, alignment, height)
        for box in boxes
    )
    return Box(height, width, Row(children))


def vcat(boxes: Iterable[Box], alignment: Alignment = left) -> Box:
    check_alignment(alignment)
    boxes = list(boxes)
    if not boxes:
        return null_box
    height = sum(box.rows for box in boxes)
    width = max(box.cols for box in boxes)
    children = tuple(
        box if box.cols == width or box.rows == 0 else align_horiz(box, alignment, width)
        for box in boxes
    )
    return Box(height, width, Col(children))


def h_append(first: Box, second: Box) -> Box:
    return hcat([first, second], top)


def v_append(first: Box, second: Box) -> Box:
    return vcat([first, second], left)


def hcat_with_space(first: Box, second: Box) -> Box:
    return hcat([first, empty_box(0, 1), second], top)


def vcat_with_space(first: Box, second: Box) -> Box:
    return vcat([first, empty_box(1, 0), second], left)


def combine_all(boxes: Iterable[Box]) -> Box:
    return hcat(boxes, top)


def combine_many(start: Box, boxes: Iterable[Box]) -> Box:
    return hcat([start, *boxes], top)


def _intersperse(boxes: Sequence[Box], separator: Box) -> List[Box]:
    result: List[Box] = []
    for index, box in enumerate(boxes):
        if index:
            result.append(separator)
        result.append(box)
    return result


def punctuate_h(boxes: Iterable[Box], alignment: Alignment, separator: Box) -> Box:
    boxes = list(boxes)
    if not boxes:
        return null_box
    return hcat(_intersperse(boxes, separator), alignment)


def punctuate_v(boxes: Iterable[Box], alignment: Alignment, separator: Box) -> Box:
    boxes = list(boxes)
    if not boxes:
        return null_box
    return vcat(_intersperse(boxes, separator), alignment)


def hsep(boxes: Iterable[Box], sep: int, alignment: Alignment = top) -> Box:
    return punctuate_h(boxes, alignment, empty_box(0, sep))


def vsep(boxes: Iterable[Box], sep: int, alignment: Alignment = left) -> Box:
    return punctuate_v(boxes, alignment, empty_box(sep, 0))


def align(
    box: Box, rows: int, cols: int, h_align: Alignment = left, v_align: Alignment = top
) -> Box:
    return Box(
        _check_dimension("rows", rows),
        _check_dimension("cols", cols),
        SubBox(box, check_alignment(h_align), check_alignment(v_align)),
    )


def align_horiz(box: Box, alignment: Alignment, cols: int) -> Box:
    return align(box, box.rows, cols, alignment, top)


def align_vert(box: Box, alignment: Alignment, rows: int) -> Box:
    return align(box, rows, box.cols, left, alignment)


def align_left(box: Box) -> Box:
    return align_horiz(box, left, box.cols)


def move_up(box: Box, n: int) -> Box:
    return align_vert(box, Alignment.FIRST, box.rows + _check_dimension("n", n))


def move_down(box: Box, n: int) -> Box:
    return align_vert(box, Alignment.LAST, box.rows + _check_dimension("n", n))


def move_left(box: Box, n: int) -> Box:
    return align_horiz(box, Alignment.FIRST, box.cols + _check_dimension("n", n))


def move_right(box: Box, n: int) -> Box:
    return align_horiz(box, Alignment.LAST, box.cols + _check_dimension("n", n))


def annotate(box: Box, annotation: Any) -> Box:
    if not isinstance(annotation, Annotation):
        annotation = Annotation(annotation)
    return replace(box, annotation=annotation)


def un_annotate(box: Box) -> Box:
    return replace(box, annotation=None)


def re_annotate(box: Box[A], transform: Callable[[A], B]) -> Box[B]:
    if box.annotation is None:
        raise BoxError("Cannot re-annotate a box that has no annotation.")
    return replace(box, annotation=box.annotation.map(transform))


def alter_annotations(box: Box[A], alter: Callable[[A], Iterable[B]]) -> List[Box[B]]:
    if box.annotation is None:
        raise BoxError("Cannot alter annotations on a box that has no annotation.")
    return [replace(box, annotation=Annotation(data)) for data in alter(box.annotation.data)]
