from dataclasses import dataclass
from typing import Union

from ..errors import ConfigurationError
from .box import Box, char, empty_box, hcat, text, vcat
from .core import left, top


@dataclass(frozen=True)
class BorderChars:

    top_left: str = "┌"
    top_right: str = "┐"
    bottom_left: str = "└"
    bottom_right: str = "┘"

    horizontal: str = "─"
    vertical: str = "│"

    @classmethod
    def for_style(cls, style: str) -> "BorderChars":
        key = style.lower().strip()
        if key in {"square", "line", "box"}:
            return cls()
        if key in {"rounded", "round", "modern"}:
            return cls(top_left="╭", top_right="╮", bottom_left="╰", bottom_right="╯")
        if key in {"heavy", "bold"}:
            return cls(
                top_left="┏",
                top_right="┓",
                bottom_left="┗",
                bottom_right="┛",
                horizontal="━",
                vertical="┃",
            )
        if key == "double":
            return cls(
                top_left="╔",
                top_right="╗",
                bottom_left="╚",
                bottom_right="╝",
                horizontal="═",
                vertical="║",
            )
        if key in {"ascii", "plain"}:
            return cls(
                top_left="+",
                top_right="+",
                bottom_left="+",
                bottom_right="+",
                horizontal="-",
                vertical="|",
            )
        raise ConfigurationError(f"Unknown border style: {style}")


def border(box: Box, style: Union[str, BorderChars] = "square") -> Box:
    chars = style if isinstance(style, BorderChars) else BorderChars.for_style(style)

    if box.rows:
        side = vcat([char(chars.vertical)] * box.rows, left)
    else:
        side = empty_box(0, 1)
    edge = chars.horizontal * box.cols

    return vcat(
        [
            hcat([char(chars.top_left), text(edge), char(chars.top_right)], top),
            hcat([side, box, side], top),
            hcat([char(chars.bottom_left), text(edge), char(chars.bottom_right)], top),
        ],
        left,
    )
