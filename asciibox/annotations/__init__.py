from . import ansi, cmd, html
from .ansi import AnsiAttribute, AnsiStyle
from .cmd import Command
from .html import HtmlElement
from .reactive import Position, Reactive, cursor_to_reactive, get_positions, make_reactive, reactive

__all__ = [
    "ansi",
    "cmd",
    "html",
    "AnsiAttribute",
    "AnsiStyle",
    "Command",
    "HtmlElement",
    "Position",
    "Reactive",
    "reactive",
    "make_reactive",
    "get_positions",
    "cursor_to_reactive",
]
