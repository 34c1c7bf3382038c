import logging
from typing import Any, Dict, Type

from ..errors import ConfigurationError
from .ansi import AnsiRenderer
from .base import Renderer
from .html import HtmlRenderer
from .plain import PlainRenderer

logger = logging.getLogger(__name__)

RENDERERS: Dict[str, Type[Renderer]] = {
    "plain": PlainRenderer,
    "text": PlainRenderer,
    "ansi": AnsiRenderer,
    "pretty": AnsiRenderer,
    "terminal": AnsiRenderer,
    "html": HtmlRenderer,
    "html-pretty": HtmlRenderer,
}


def make_renderer(style: str = "plain", **options: Any) -> Renderer:
    key = style.lower() if isinstance(style, str) else style
    if key not in RENDERERS:
        raise ConfigurationError(
            f"Unknown renderer {style!r}. Available: {', '.join(sorted(RENDERERS))}"
        )
    renderer_class = RENDERERS[key]
    if key == "html-pretty":
        options.setdefault("indent", True)
    try:
        config = renderer_class.config_class(**options)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid options for {style!r} renderer: {exc}") from exc
    return renderer_class(config)
