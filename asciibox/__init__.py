from .layout import *
from .errors import *

__version__ = "0.1.0"
__all__ = [
    "Box",
    "Alignment",
    "Annotation",
    "empty_box",
    "null_box",
    "text",
    "line",
    "char",
    "hcat",
    "vcat",
    "hsep",
    "vsep",
    "align",
    "annotate",
    "border",
    "para",
    "columns",
    "ansi",
    "cmd",
    "html",
    "get_positions",
    "make_renderer",
    "render",
    "render_lines",
    "render_plain",
    "render_pretty",
    "render_html",
    "print_box",
    "RenderConfig",
    "HtmlRenderConfig",
    "BoxError",
    "InvalidDimension",
    "InvalidAlignment",
    "MalformedAnnotation",
    "ConfigurationError",
]
