import re
from typing import Iterable, List, Tuple

from wcwidth import wcwidth

from .core import Alignment, leading_share

Token = Tuple[str, str, int]

ANSI_ESCAPE_RE = re.compile(
    r"(?:\x1b\][^\x07\x1b]*(?:\x07|\x1b\\))"
    r"|(?:[\x1b\x9b]\[[0-?]*[ -/]*[@-~])"
    r"|(?:\x1b[78])"
    r"|(?:\x1b[@-Z\\-_])"
)

ZERO_WIDTH_JOINER = "\u200d"
VARIATION_SELECTOR_16 = "\ufe0f"


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def _is_regional_indicator(char: str) -> bool:
    return 0x1F1E6 <= ord(char) <= 0x1F1FF


def _is_emoji_modifier(char: str) -> bool:
    return 0x1F3FB <= ord(char) <= 0x1F3FF


def _is_tag_character(char: str) -> bool:
    return 0xE0020 <= ord(char) <= 0xE007F


def _extends_cluster(cluster: str, char: str) -> bool:
    if cluster.endswith(ZERO_WIDTH_JOINER):
        return True
    if wcwidth(char) == 0:
        return True
    if _is_emoji_modifier(char) or _is_tag_character(char):
        return True
    if (
        _is_regional_indicator(char)
        and len(cluster) == 1
        and _is_regional_indicator(cluster)
    ):
        return True
    return False


def segments(text: str) -> List[str]:
    clusters: List[str] = []
    for char in text:
        if clusters and _extends_cluster(clusters[-1], char):
            clusters[-1] += char
        else:
            clusters.append(char)
    return clusters


def segment_width(segment: str) -> int:
    if not segment:
        return 0
    width = wcwidth(segment[0])
    if width <= 0:
        return 0
    if width == 1 and (
        VARIATION_SELECTOR_16 in segment
        or ZERO_WIDTH_JOINER in segment
        or _is_regional_indicator(segment[0])
    ):
        return 2
    return width


def string_width(text: str) -> int:
    return sum(segment_width(segment) for segment in segments(strip_ansi(text)))


def text_tokens(text: str) -> List[Token]:
    return [("text", segment, segment_width(segment)) for segment in segments(text)]


def ansi_tokens(text: str) -> List[Token]:
    tokens: List[Token] = []
    position = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        if match.start() > position:
            tokens.extend(text_tokens(text[position : match.start()]))
        tokens.append(("escape", match.group(0), 0))
        position = match.end()
    if position < len(text):
        tokens.extend(text_tokens(text[position:]))
    return tokens


def fit_tokens(
    tokens: Iterable[Token], width: int, alignment: Alignment = Alignment.FIRST
) -> str:
    tokens = list(tokens)
    if width <= 0:
        return "".join(value for kind, value, _ in tokens if kind == "escape")

    total = sum(token_width for kind, _, token_width in tokens if kind == "text")
    offset = leading_share(alignment, width) - leading_share(alignment, total)
    skip = max(-offset, 0)
    budget = width

    parts: List[str] = []
    if offset > 0:
        parts.append(" " * offset)
        budget -= offset

    column = 0
    for kind, value, token_width in tokens:
        if kind == "escape":
            parts.append(value)
            continue
        start = column
        column += token_width
        if token_width == 0:
            if start >= skip:
                parts.append(value)
            continue
        if column <= skip:
            continue
        if start < skip:
            fill = min(column - skip, budget)
            parts.append(" " * fill)
            budget -= fill
            continue
        if token_width > budget:
            parts.append(" " * budget)
            budget = 0
            continue
        parts.append(value)
        budget -= token_width

    if budget > 0:
        parts.append(" " * budget)
    return "".join(parts)


def take_width(text: str, width: int) -> str:
    """Longest prefix of `text` whose display width does not exceed `width`."""
    parts: List[str] = []
    used = 0
    for segment in segments(text):
        seg_width = segment_width(segment)
        if used + seg_width > width:
            break
        parts.append(segment)
        used += seg_width
    return "".join(parts)
