from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple

from rich.color import Color, ColorParseError

from ..box_components.core import Annotation
from ..errors import ConfigurationError, MalformedAnnotation

ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

FOREGROUND = "foreground"
BACKGROUND = "background"
ATTRIBUTE = "attribute"


@dataclass(frozen=True)
class AnsiAttribute:
    kind: str
    name: str
    code: str


@dataclass(frozen=True)
class AnsiStyle:
    attributes: Tuple[AnsiAttribute, ...] = ()
    tag: ClassVar[str] = "ansi"


AnsiAnnotation = Annotation[AnsiStyle]


def _style(kind: str, name: str, code: str) -> AnsiAnnotation:
    return Annotation(AnsiStyle((AnsiAttribute(kind, name, code),)))


def _clamp(value: int) -> int:
    return min(255, max(0, int(value)))


black = _style(FOREGROUND, "black", "30")
red = _style(FOREGROUND, "red", "31")
green = _style(FOREGROUND, "green", "32")
yellow = _style(FOREGROUND, "yellow", "33")
blue = _style(FOREGROUND, "blue", "34")
magenta = _style(FOREGROUND, "magenta", "35")
cyan = _style(FOREGROUND, "cyan", "36")
white = _style(FOREGROUND, "white", "37")
fg_default = _style(FOREGROUND, "default", "39")

bg_black = _style(BACKGROUND, "black", "40")
bg_red = _style(BACKGROUND, "red", "41")
bg_green = _style(BACKGROUND, "green", "42")
bg_yellow = _style(BACKGROUND, "yellow", "43")
bg_blue = _style(BACKGROUND, "blue", "44")
bg_magenta = _style(BACKGROUND, "magenta", "45")
bg_cyan = _style(BACKGROUND, "cyan", "46")
bg_white = _style(BACKGROUND, "white", "47")
bg_default = _style(BACKGROUND, "default", "49")

bold = _style(ATTRIBUTE, "bold", "1")
dim = _style(ATTRIBUTE, "dim", "2")
italic = _style(ATTRIBUTE, "italic", "3")
underlined = _style(ATTRIBUTE, "underlined", "4")
blink = _style(ATTRIBUTE, "blink", "5")
inverse = _style(ATTRIBUTE, "inverse", "7")
hidden = _style(ATTRIBUTE, "hidden", "8")
strikethrough = _style(ATTRIBUTE, "strikethrough", "9")
overline = _style(ATTRIBUTE, "overline", "53")
reset = _style(ATTRIBUTE, "reset", "0")


def color256(n: int) -> AnsiAnnotation:
    n = _clamp(n)
    return _style(FOREGROUND, f"color256({n})", f"38;5;{n}")


def bg_color256(n: int) -> AnsiAnnotation:
    n = _clamp(n)
    return _style(BACKGROUND, f"color256({n})", f"48;5;{n}")


def color_rgb(r: int, g: int, b: int) -> AnsiAnnotation:
    r, g, b = _clamp(r), _clamp(g), _clamp(b)
    return _style(FOREGROUND, f"rgb({r},{g},{b})", f"38;2;{r};{g};{b}")


def bg_color_rgb(r: int, g: int, b: int) -> AnsiAnnotation:
    r, g, b = _clamp(r), _clamp(g), _clamp(b)
    return _style(BACKGROUND, f"rgb({r},{g},{b})", f"48;2;{r};{g};{b}")


def _parsed(value: str, foreground: bool) -> AnsiAnnotation:
    try:
        parsed = Color.parse(value)
    except ColorParseError as exc:
        raise ConfigurationError(str(exc)) from exc
    kind = FOREGROUND if foreground else BACKGROUND
    return _style(kind, parsed.name, ";".join(parsed.get_ansi_codes(foreground=foreground)))


def color(value: str) -> AnsiAnnotation:
    """Foreground colour from a name, `#rrggbb`, `rgb(r,g,b)` or `color(n)` string."""
    return _parsed(value, True)


def bg_color(value: str) -> AnsiAnnotation:
    return _parsed(value, False)


def _conflict_key(attribute: AnsiAttribute) -> str:
    if attribute.kind in (FOREGROUND, BACKGROUND):
        return attribute.kind
    return attribute.name


def combine(*annotations: AnsiAnnotation) -> AnsiAnnotation:
    resolved: Dict[str, AnsiAttribute] = {}
    for annotation in reversed(annotations):
        for attribute in reversed(annotation.data.attributes):
            resolved.setdefault(_conflict_key(attribute), attribute)
    return Annotation(AnsiStyle(tuple(reversed(list(resolved.values())))))


def is_ansi(data: Any) -> bool:
    return getattr(data, "tag", None) == AnsiStyle.tag


def interpret_style(data: Any) -> AnsiStyle:
    if not is_ansi(data):
        raise MalformedAnnotation(f"Not an ANSI style payload: {data!r}")
    attributes = getattr(data, "attributes", None)
    if not isinstance(attributes, Sequence) or not all(
        isinstance(attribute, AnsiAttribute) and isinstance(attribute.code, str)
        for attribute in attributes
    ):
        raise MalformedAnnotation(f"ANSI style has malformed attributes: {attributes!r}")
    return data


def to_escape_sequence(style: AnsiStyle) -> Optional[str]:
    codes = [attribute.code for attribute in style.attributes if attribute.code]
    if not codes:
        return None
    return f"{CSI}{';'.join(codes)}m"


def apply_ansi_styling(lines: List[str], sequence: Optional[str]) -> List[str]:
    if not sequence:
        return lines

    styled: List[str] = []
    for line in lines:
        if line.startswith(sequence):
            styled.append(line)
            continue
        if RESET in line:
            injected = sequence + line.replace(RESET, RESET + sequence)
            styled.append(injected if injected.endswith(RESET) else injected + RESET)
            continue
        styled.append(f"{sequence}{line}{RESET}")
    return styled
