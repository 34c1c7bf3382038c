import math
from dataclasses import dataclass
from typing import Any, ClassVar

from ..box_components.box import Box, annotate, null_box
from ..box_components.core import Annotation
from ..errors import MalformedAnnotation
from .ansi import CSI, ESC

CURSOR = "Cursor"
SCREEN = "Screen"
VISIBILITY = "Visibility"
UTILITY = "Utility"

CATEGORIES = (CURSOR, SCREEN, VISIBILITY, UTILITY)


@dataclass(frozen=True)
class Command:
    category: str
    name: str
    sequence: str
    tag: ClassVar[str] = "command"


def _count(n: float) -> int:
    return max(0, math.floor(n))


def _command(category: str, name: str, sequence: str) -> Box:
    return annotate(null_box, Annotation(Command(category, name, sequence)))


def cursor_up(lines: float = 1) -> Box:
    return _command(CURSOR, "cursorUp", f"{CSI}{_count(lines)}A")


def cursor_down(lines: float = 1) -> Box:
    return _command(CURSOR, "cursorDown", f"{CSI}{_count(lines)}B")


def cursor_forward(columns: float = 1) -> Box:
    return _command(CURSOR, "cursorForward", f"{CSI}{_count(columns)}C")


def cursor_backward(columns: float = 1) -> Box:
    return _command(CURSOR, "cursorBackward", f"{CSI}{_count(columns)}D")


cursor_right = cursor_forward
cursor_left = cursor_backward


def cursor_to(column: float = 0, row: float = 0) -> Box:
    """Absolute move; `column` and `row` are zero-based."""
    return _command(CURSOR, "cursorTo", f"{CSI}{_count(row) + 1};{_count(column) + 1}H")


def cursor_move(columns: float = 0, rows: float = 0) -> Box:
    sequence = ""
    if rows > 0:
        sequence += f"{CSI}{_count(rows)}B"
    elif rows < 0:
        sequence += f"{CSI}{_count(-rows)}A"
    if columns > 0:
        sequence += f"{CSI}{_count(columns)}C"
    elif columns < 0:
        sequence += f"{CSI}{_count(-columns)}D"
    return _command(CURSOR, "cursorMove", sequence)


def cursor_next_line(lines: float = 1) -> Box:
    return _command(CURSOR, "cursorNextLine", f"{CSI}{_count(lines)}E")


def cursor_prev_line(lines: float = 1) -> Box:
    return _command(CURSOR, "cursorPrevLine", f"{CSI}{_count(lines)}F")


def cursor_save_position() -> Box:
    return _command(CURSOR, "cursorSavePosition", f"{ESC}7")


def cursor_restore_position() -> Box:
    return _command(CURSOR, "cursorRestorePosition", f"{ESC}8")


def cursor_show() -> Box:
    return _command(VISIBILITY, "cursorShow", f"{CSI}?25h")


def cursor_hide() -> Box:
    return _command(VISIBILITY, "cursorHide", f"{CSI}?25l")


def erase_screen() -> Box:
    return _command(SCREEN, "eraseScreen", f"{CSI}2J")


def erase_up() -> Box:
    return _command(SCREEN, "eraseUp", f"{CSI}1J")


def erase_down() -> Box:
    return _command(SCREEN, "eraseDown", f"{CSI}0J")


def erase_line() -> Box:
    return _command(SCREEN, "eraseLine", f"{CSI}2K")


def erase_start_line() -> Box:
    return _command(SCREEN, "eraseStartLine", f"{CSI}1K")


def erase_end_line() -> Box:
    return _command(SCREEN, "eraseEndLine", f"{CSI}0K")


def erase_lines(count: float) -> Box:
    return _command(SCREEN, "eraseLines", f"{CSI}{_count(count)}M")


def clear_screen() -> Box:
    return _command(SCREEN, "clearScreen", f"{CSI}2J{CSI}H")


def home() -> Box:
    return _command(CURSOR, "home", f"{CSI}H")


def bell() -> Box:
    return _command(UTILITY, "bell", "\x07")


def is_command(data: Any) -> bool:
    return getattr(data, "tag", None) == Command.tag


def interpret_command(data: Any) -> Command:
    if not is_command(data):
        raise MalformedAnnotation(f"Not a command payload: {data!r}")
    if not isinstance(getattr(data, "sequence", None), str):
        raise MalformedAnnotation(f"Command has no escape sequence: {data!r}")
    if getattr(data, "category", None) not in CATEGORIES:
        raise MalformedAnnotation(f"Unknown command category: {data.category!r}")
    return data
