import logging
from typing import Any, List, Optional

from ..annotations.ansi import apply_ansi_styling, interpret_style, is_ansi, to_escape_sequence
from ..annotations.cmd import Command, interpret_command, is_command
from ..box_components.box import Box, Col, Row, SubBox
from ..box_components.core import Alignment, Annotation, check_alignment
from ..box_components.width import ansi_tokens, fit_tokens
from ..errors import MalformedAnnotation
from .base import Renderer, TextProcessor

logger = logging.getLogger(__name__)


def _children(box: Box) -> List[Box]:
    content = box.content
    if isinstance(content, (Row, Col)):
        return list(content.boxes)
    if isinstance(content, SubBox):
        return [content.box]
    return []


class AnsiTextProcessor(TextProcessor):
    preserves_formatting = True

    def process_line_aligned(self, text: str, width: int, alignment: Alignment) -> str:
        return fit_tokens(ansi_tokens(text), width, check_alignment(alignment))


class AnsiRenderer(Renderer):
    name = "ansi"

    def make_processor(self) -> TextProcessor:
        return AnsiTextProcessor()

    def render_content(self, box: Box) -> List[str]:
        if box.rows == 0 or box.cols == 0:
            command = self._command(box.annotation)
            if command is not None:
                return [command.sequence] if command.sequence else []
            emitted = "".join(
                item for child in _children(box) for item in self.render_content(child)
            )
            return [emitted] if emitted else []
        return super().render_content(box)

    def post_process(self, lines: List[str], annotation: Optional[Annotation[Any]]) -> List[str]:
        if annotation is None:
            return lines
        data = annotation.data
        if is_command(data):
            logger.debug("Ignoring command %r on a node with content", getattr(data, "name", data))
            return lines
        if not is_ansi(data):
            return lines
        try:
            style = interpret_style(data)
        except MalformedAnnotation as exc:
            logger.debug("Rendering without style: %s", exc)
            return lines
        return apply_ansi_styling(lines, to_escape_sequence(style))

    def _command(self, annotation: Optional[Annotation[Any]]) -> Optional[Command]:
        if annotation is None or not is_command(annotation.data):
            return None
        try:
            return interpret_command(annotation.data)
        except MalformedAnnotation as exc:
            logger.debug("Skipping command: %s", exc)
            return None
