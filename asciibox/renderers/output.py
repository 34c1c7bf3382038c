from typing import List, Optional, Union

from rich.console import Console
from rich.text import Text

from ..box_components.box import Box
from .ansi import AnsiRenderer
from .base import Renderer, join_lines
from .config import HtmlRenderConfig, RenderConfig
from .factory import make_renderer
from .html import HtmlRenderer
from .plain import PlainRenderer

RendererLike = Union[Renderer, str, None]


def _resolve(renderer: RendererLike) -> Renderer:
    if renderer is None:
        return PlainRenderer()
    if isinstance(renderer, str):
        return make_renderer(renderer)
    return renderer


def render_lines(box: Box, renderer: RendererLike = None) -> List[str]:
    return _resolve(renderer).render_lines(box)


def render(box: Box, renderer: RendererLike = None, config: Optional[RenderConfig] = None) -> str:
    """Render `box` to a string; `config` overrides the renderer's own join settings."""
    resolved = _resolve(renderer)
    return join_lines(resolved.render_lines(box), config or resolved.config)


def render_plain(box: Box, config: Optional[RenderConfig] = None) -> str:
    return PlainRenderer(config).render(box)


def render_pretty(box: Box, config: Optional[RenderConfig] = None) -> str:
    return AnsiRenderer(config).render(box)


def render_html(box: Box, config: Optional[HtmlRenderConfig] = None) -> str:
    return HtmlRenderer(config).render(box)


def render_with_spaces(box: Box) -> str:
    return render_plain(box, RenderConfig(preserve_whitespace=True))


def render_with(box: Box, sep: str) -> str:
    return render_with_spaces(box).replace(" ", sep)


def print_box(box: Box, renderer: RendererLike = None, console: Optional[Console] = None) -> None:
    resolved = _resolve(renderer)
    console = console or Console()
    output = resolved.render(box)
    if isinstance(resolved, AnsiRenderer):
        console.print(Text.from_ansi(output))
    else:
        console.print(output, markup=False, highlight=False)
