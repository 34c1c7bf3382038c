from .annotations import (
    Position,
    ansi,
    cmd,
    cursor_to_reactive,
    get_positions,
    html,
    make_reactive,
    reactive,
)
from .box_components import *
from .box_components import __all__ as _box_all
from .renderers import *
from .renderers import __all__ as _renderer_all

__all__ = [
    *_box_all,
    *_renderer_all,
    "ansi",
    "cmd",
    "html",
    "Position",
    "reactive",
    "make_reactive",
    "get_positions",
    "cursor_to_reactive",
]
