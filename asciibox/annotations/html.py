from dataclasses import dataclass
from html import escape
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Tuple

from ..box_components.core import Annotation
from ..errors import ConfigurationError, MalformedAnnotation

VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img",
        "input", "link", "meta", "param", "source", "track", "wbr",
    }
)


@dataclass(frozen=True)
class HtmlElement:
    element: str
    attributes: Tuple[Tuple[str, str], ...] = ()
    tag: ClassVar[str] = "html"

    def __post_init__(self) -> None:
        if isinstance(self.attributes, Mapping):
            object.__setattr__(self, "attributes", tuple(self.attributes.items()))

    @property
    def attribute_map(self) -> Dict[str, str]:
        return dict(self.attributes)


HtmlAnnotation = Annotation[HtmlElement]


def escape_html(text: str) -> str:
    return escape(text, quote=True).replace("&#x27;", "&#39;")


def is_void_element(name: str) -> bool:
    return name.lower() in VOID_ELEMENTS


def render_attributes(attributes: Tuple[Tuple[str, str], ...]) -> str:
    return "".join(f' {key}="{escape_html(str(value))}"' for key, value in attributes)


def open_tag(payload: HtmlElement) -> str:
    return f"<{payload.element}{render_attributes(payload.attributes)}>"


def close_tag(payload: HtmlElement) -> str:
    return f"</{payload.element}>"


def self_closing_tag(payload: HtmlElement) -> str:
    return f"<{payload.element}{render_attributes(payload.attributes)} />"


def element(name: str, attributes: Optional[Mapping[str, Any]] = None) -> HtmlAnnotation:
    if not name or not name.replace("-", "").isalnum():
        raise ConfigurationError(f"Invalid HTML element name: {name!r}")
    pairs = tuple((key, str(value)) for key, value in (attributes or {}).items())
    return Annotation(HtmlElement(name, pairs))


def _constructor(name: str) -> Callable[..., HtmlAnnotation]:
    def build(attributes: Optional[Mapping[str, Any]] = None) -> HtmlAnnotation:
        return element(name, attributes)

    build.__name__ = name
    build.__doc__ = f"`<{name}>` annotation."
    return build


div = _constructor("div")
span = _constructor("span")
p = _constructor("p")
h1 = _constructor("h1")
h2 = _constructor("h2")
h3 = _constructor("h3")
h4 = _constructor("h4")
h5 = _constructor("h5")
h6 = _constructor("h6")
section = _constructor("section")
article = _constructor("article")
header = _constructor("header")
footer = _constructor("footer")
main = _constructor("main")
nav = _constructor("nav")
aside = _constructor("aside")
ul = _constructor("ul")
ol = _constructor("ol")
li = _constructor("li")
a = _constructor("a")
strong = _constructor("strong")
em = _constructor("em")
code = _constructor("code")
pre = _constructor("pre")
br = _constructor("br")
hr = _constructor("hr")


def is_html(data: Any) -> bool:
    return getattr(data, "tag", None) == HtmlElement.tag


def interpret_html(data: Any) -> HtmlElement:
    if not is_html(data):
        raise MalformedAnnotation(f"Not an HTML payload: {data!r}")
    if not isinstance(getattr(data, "element", None), str) or not data.element:
        raise MalformedAnnotation(f"HTML payload has no element name: {data!r}")
    attributes = getattr(data, "attributes", ())
    if not isinstance(attributes, tuple) or not all(
        isinstance(pair, tuple) and len(pair) == 2 for pair in attributes
    ):
        raise MalformedAnnotation(f"HTML payload has malformed attributes: {attributes!r}")
    return data
