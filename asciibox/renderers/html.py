import logging
import re
from typing import Any, List, Optional

from ..annotations.html import (
    HtmlElement,
    close_tag,
    escape_html,
    interpret_html,
    is_html,
    is_void_element,
    open_tag,
    self_closing_tag,
)
from ..box_components.box import Blank, Box, Col, Row, SubBox, Text
from ..box_components.core import Alignment, Annotation, check_alignment
from ..box_components.width import Token, fit_tokens, text_tokens
from ..errors import MalformedAnnotation
from .base import Renderer, TextProcessor
from .config import HtmlRenderConfig

logger = logging.getLogger(__name__)

ENTITY_RE = re.compile(r"&(?:#\d+|#x[0-9a-fA-F]+|[a-zA-Z]+);")


def entity_tokens(text: str) -> List[Token]:
    tokens: List[Token] = []
    position = 0
    for match in ENTITY_RE.finditer(text):
        if match.start() > position:
            tokens.extend(text_tokens(text[position : match.start()]))
        tokens.append(("text", match.group(0), 1))
        position = match.end()
    if position < len(text):
        tokens.extend(text_tokens(text[position:]))
    return tokens


class HtmlTextProcessor(TextProcessor):
    """Pads and crops escaped text; an entity counts as the one character it stands for."""

    preserves_formatting = True

    def process_line_aligned(self, text: str, width: int, alignment: Alignment) -> str:
        return fit_tokens(entity_tokens(text), width, check_alignment(alignment))


class HtmlRenderer(Renderer):
    name = "html"
    config_class = HtmlRenderConfig

    def make_processor(self) -> TextProcessor:
        return HtmlTextProcessor()

    def indentation(self, depth: int) -> str:
        if not self.config.indent:
            return ""
        return " " * (self.config.indent_size * depth)

    def render_content(self, box: Box, depth: int = 0) -> List[str]:
        element = self._element(box.annotation)
        wraps = element is not None and not is_void_element(element.element)
        inner_depth = depth + 1 if wraps else depth

        lines: List[str] = []
        if box.rows and box.cols:
            lines = self._render_structure(box, inner_depth)
        if element is None:
            return lines
        return self.post_process(lines, box.annotation, depth)

    def _render_structure(self, box: Box, depth: int) -> List[str]:
        content = box.content
        if isinstance(content, Blank):
            return []
        if isinstance(content, Text):
            rendered = self.processor.process_line(escape_html(content.text), box.cols)
            if not rendered.strip():
                return [rendered]
            return [self.indentation(depth) + rendered]
        if isinstance(content, (Row, Col)):
            lines: List[str] = []
            for child in content.boxes:
                lines.extend(self.render_content(child, depth))
            return lines
        if isinstance(content, SubBox):
            return self.render_content(content.box, depth)
        raise TypeError(f"Unknown box content: {content!r}")

    def post_process(
        self, lines: List[str], annotation: Optional[Annotation[Any]], depth: int = 0
    ) -> List[str]:
        element = self._element(annotation)
        if element is None:
            return lines

        indent = self.indentation(depth)
        if is_void_element(element.element):
            if not lines:
                return [indent + self_closing_tag(element)]
            return lines
        return [indent + open_tag(element), *lines, indent + close_tag(element)]

    def _element(self, annotation: Optional[Annotation[Any]]) -> Optional[HtmlElement]:
        if annotation is None or not is_html(annotation.data):
            return None
        try:
            return interpret_html(annotation.data)
        except MalformedAnnotation as exc:
            logger.debug("Rendering without element: %s", exc)
            return None
