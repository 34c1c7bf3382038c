import logging
from typing import Any, Callable, List, Optional, Type

from ..box_components.box import Blank, Box, Col, Row, SubBox, Text
from ..box_components.core import Alignment, Annotation, leading_share
from ..errors import ConfigurationError
from .config import RenderConfig

logger = logging.getLogger(__name__)

Recurse = Callable[[Box], List[str]]


class TextProcessor:
    """Width handling for one output format.

    Both methods must return a line of exactly `width` display columns, not
    counting any markup the format carries.
    """

    preserves_formatting = False

    def process_line(self, text: str, width: int) -> str:
        return self.process_line_aligned(text, width, Alignment.FIRST)

    def process_line_aligned(self, text: str, width: int, alignment: Alignment) -> str:
        raise NotImplementedError


def fit_lines(lines: List[str], rows: int, alignment: Alignment, blank: str) -> List[str]:
    """Pad or crop `lines` to `rows` entries around the alignment anchor."""
    offset = leading_share(alignment, rows) - leading_share(alignment, len(lines))
    if offset < 0:
        lines = lines[-offset:]
        offset = 0
    fitted = [blank] * offset + lines[: rows - offset]
    return fitted + [blank] * (rows - len(fitted))


def _vertical_alignment(box: Box) -> Alignment:
    if isinstance(box.content, SubBox):
        return box.content.y_align
    return Alignment.FIRST


def _horizontal_alignment(box: Box) -> Alignment:
    if isinstance(box.content, SubBox):
        return box.content.x_align
    return Alignment.FIRST


def render_box(box: Box, processor: TextProcessor, recurse: Recurse) -> List[str]:
    if box.rows == 0 or box.cols == 0:
        return []

    blank = " " * box.cols
    content = box.content

    if isinstance(content, Blank):
        return [blank] * box.rows

    if isinstance(content, Text):
        return fit_lines([processor.process_line(content.text, box.cols)], box.rows, Alignment.FIRST, blank)

    if isinstance(content, Row):
        columns = [
            fit_lines(recurse(child), box.rows, _vertical_alignment(child), " " * child.cols)
            for child in content.boxes
        ]
        merged = ["".join(parts) for parts in zip(*columns)]
        return fit_lines(merged, box.rows, Alignment.FIRST, blank)

    if isinstance(content, Col):
        lines: List[str] = []
        # output of zero-height children rides on the next line
        pending = ""
        for child in content.boxes:
            if child.rows == 0:
                pending += "".join(recurse(child))
                continue
            alignment = _horizontal_alignment(child)
            child_lines = [
                processor.process_line_aligned(item, box.cols, alignment) for item in recurse(child)
            ]
            if pending and child_lines:
                child_lines[0] = pending + child_lines[0]
                pending = ""
            lines.extend(child_lines)
        if pending and lines:
            lines[-1] += pending
        return fit_lines(lines, box.rows, Alignment.FIRST, blank)

    if isinstance(content, SubBox):
        lines = [
            processor.process_line_aligned(item, box.cols, content.x_align)
            for item in recurse(content.box)
        ]
        return fit_lines(lines, box.rows, content.y_align, blank)

    raise TypeError(f"Unknown box content: {content!r}")


def join_lines(lines: List[str], config: Optional[RenderConfig] = None) -> str:
    if config is not None and config.preserve_whitespace:
        return "\n".join(lines)
    return "\n".join(item.rstrip() for item in lines)


class Renderer:
    name = "renderer"
    config_class: Type[RenderConfig] = RenderConfig

    def __init__(self, config: Optional[RenderConfig] = None):
        if config is None:
            config = self.config_class()
        if not isinstance(config, self.config_class):
            raise ConfigurationError(
                f"{type(self).__name__} expects {self.config_class.__name__}, got {type(config).__name__}."
            )
        self.config = config
        self.processor = self.make_processor()
        logger.debug("Created %s renderer with %s", self.name, config)

    def make_processor(self) -> TextProcessor:
        raise NotImplementedError

    @property
    def preserves_formatting(self) -> bool:
        return self.processor.preserves_formatting

    def render_content(self, box: Box) -> List[str]:
        lines = render_box(box, self.processor, self.render_content)
        return self.post_process(lines, box.annotation)

    def post_process(self, lines: List[str], annotation: Optional[Annotation[Any]]) -> List[str]:
        return lines

    def render_lines(self, box: Box) -> List[str]:
        return self.render_content(box)

    def render(self, box: Box) -> str:
        return join_lines(self.render_lines(box), self.config)
