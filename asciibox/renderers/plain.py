from ..box_components.core import Alignment, check_alignment
from ..box_components.width import fit_tokens, strip_ansi, text_tokens
from .base import Renderer, TextProcessor


class PlainTextProcessor(TextProcessor):
    preserves_formatting = False

    def process_line_aligned(self, text: str, width: int, alignment: Alignment) -> str:
        return fit_tokens(text_tokens(strip_ansi(text)), width, check_alignment(alignment))


class PlainRenderer(Renderer):
    """Text only; annotations are ignored."""

    name = "plain"

    def make_processor(self) -> TextProcessor:
        return PlainTextProcessor()
