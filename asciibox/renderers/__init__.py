from .config import HtmlRenderConfig, RenderConfig
from .base import Renderer, TextProcessor, fit_lines, join_lines, render_box
from .plain import PlainRenderer, PlainTextProcessor
from .ansi import AnsiRenderer, AnsiTextProcessor
from .html import HtmlRenderer, HtmlTextProcessor
from .factory import make_renderer
from .output import (
    print_box,
    render,
    render_html,
    render_lines,
    render_plain,
    render_pretty,
    render_with,
    render_with_spaces,
)

__all__ = [
    "RenderConfig",
    "HtmlRenderConfig",
    "Renderer",
    "TextProcessor",
    "render_box",
    "fit_lines",
    "join_lines",
    "PlainRenderer",
    "PlainTextProcessor",
    "AnsiRenderer",
    "AnsiTextProcessor",
    "HtmlRenderer",
    "HtmlTextProcessor",
    "make_renderer",
    "render",
    "render_lines",
    "render_plain",
    "render_pretty",
    "render_html",
    "render_with_spaces",
    "render_with",
    "print_box",
]
