from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional

from ..box_components.box import Box, Col, Row, SubBox, annotate
from ..box_components.core import Annotation, leading_share
from .cmd import cursor_to


@dataclass(frozen=True)
class Reactive:
    id: str
    tag: ClassVar[str] = "reactive"


@dataclass(frozen=True)
class Position:
    row: int
    col: int
    rows: int
    cols: int


def reactive(id: str) -> Annotation[Reactive]:
    return Annotation(Reactive(id))


def make_reactive(box: Box, id: str) -> Box:
    return annotate(box, reactive(id))


def is_reactive(data: Any) -> bool:
    return getattr(data, "tag", None) == Reactive.tag


def get_positions(box: Box) -> Dict[str, Position]:
    """Map reactive ids to the cell each tagged box occupies once rendered.

    Coordinates are zero-based and relative to the top-left of `box`. When an
    id appears more than once, the last occurrence in render order wins.
    """
    positions: Dict[str, Position] = {}
    _collect(box, 0, 0, positions)
    return positions


def _collect(box: Box, row: int, col: int, positions: Dict[str, Position]) -> None:
    if box.annotation is not None and is_reactive(box.annotation.data):
        positions[box.annotation.data.id] = Position(row, col, box.rows, box.cols)

    content = box.content
    if isinstance(content, Row):
        offset = 0
        for child in content.boxes:
            _collect(child, row, col + offset, positions)
            offset += child.cols
    elif isinstance(content, Col):
        offset = 0
        for child in content.boxes:
            _collect(child, row + offset, col, positions)
            offset += child.rows
    elif isinstance(content, SubBox):
        child = content.box
        col_offset = leading_share(content.x_align, box.cols) - leading_share(content.x_align, child.cols)
        row_offset = leading_share(content.y_align, box.rows) - leading_share(content.y_align, child.rows)
        _collect(child, row + row_offset, col + col_offset, positions)


def cursor_to_reactive(positions: Dict[str, Position], id: str) -> Optional[Box]:
    position = positions.get(id)
    if position is None:
        return None
    return cursor_to(position.col, position.row)
