from typing import List

from ..errors import InvalidDimension
from .box import Box, _check_dimension, align_vert, empty_box, text, vcat
from .core import Alignment, check_alignment, top
from .width import string_width, take_width


def flow(paragraph: str, width: int) -> List[str]:
    """Greedy word wrap; words wider than `width` are cut to fit."""
    words = paragraph.split()
    if not words:
        return [""]

    lines: List[List[str]] = []
    current: List[str] = []
    current_width = 0
    for word in words:
        word_width = string_width(word)
        if not current:
            fits = word_width <= width
        else:
            fits = current_width + 1 + word_width <= width
        if fits:
            current.append(word)
            current_width += word_width if len(current) == 1 else word_width + 1
            continue
        if current:
            lines.append(current)
        current = [word]
        current_width = word_width

    if current:
        lines.append(current)
    return [take_width(" ".join(words_in_line), width) for words_in_line in lines]


def _para_box(lines: List[str], alignment: Alignment, height: int) -> Box:
    if not lines:
        return empty_box(height, 0)
    return align_vert(vcat([text(item) for item in lines], alignment), top, height)


def para(paragraph: str, alignment: Alignment, width: int) -> Box:
    check_alignment(alignment)
    lines = flow(paragraph, _check_dimension("width", width))
    return _para_box(lines, alignment, len(lines))


def columns(paragraph: str, alignment: Alignment, width: int, height: int) -> List[Box]:
    check_alignment(alignment)
    _check_dimension("height", height)
    if height == 0:
        raise InvalidDimension("height must be at least 1 to split text into columns.")
    lines = flow(paragraph, _check_dimension("width", width))
    return [
        _para_box(lines[start : start + height], alignment, height)
        for start in range(0, len(lines), height)
    ]
