from .core import (
    Alignment,
    Annotation,
    bottom,
    center1,
    center2,
    combine_annotations,
    left,
    right,
    top,
)
from .box import (
    Blank,
    Box,
    Col,
    Row,
    SubBox,
    Text,
    align,
    align_horiz,
    align_left,
    align_vert,
    alter_annotations,
    annotate,
    char,
    cols,
    combine_all,
    combine_many,
    empty_box,
    h_append,
    hcat,
    hcat_with_space,
    hsep,
    line,
    move_down,
    move_left,
    move_right,
    move_up,
    null_box,
    punctuate_h,
    punctuate_v,
    re_annotate,
    rows,
    text,
    un_annotate,
    v_append,
    vcat,
    vcat_with_space,
    vsep,
)
from .border import BorderChars, border
from .paragraph import columns, flow, para
from .width import segment_width, string_width, strip_ansi, take_width

__all__ = [
    "Alignment",
    "Annotation",
    "top",
    "bottom",
    "left",
    "right",
    "center1",
    "center2",
    "combine_annotations",
    "Box",
    "Blank",
    "Text",
    "Row",
    "Col",
    "SubBox",
    "empty_box",
    "null_box",
    "char",
    "line",
    "text",
    "rows",
    "cols",
    "hcat",
    "vcat",
    "h_append",
    "v_append",
    "hcat_with_space",
    "vcat_with_space",
    "combine_all",
    "combine_many",
    "punctuate_h",
    "punctuate_v",
    "hsep",
    "vsep",
    "align",
    "align_horiz",
    "align_vert",
    "align_left",
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "annotate",
    "un_annotate",
    "re_annotate",
    "alter_annotations",
    "border",
    "BorderChars",
    "para",
    "columns",
    "flow",
    "string_width",
    "segment_width",
    "strip_ansi",
    "take_width",
]
