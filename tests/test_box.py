"""Tests for box construction, composition and annotations."""

import pytest

from asciibox.box_components import (
    Alignment,
    Annotation,
    Box,
    Col,
    Row,
    SubBox,
    Text,
    align,
    alter_annotations,
    annotate,
    char,
    combine_annotations,
    empty_box,
    hcat,
    hsep,
    line,
    null_box,
    punctuate_h,
    re_annotate,
    text,
    un_annotate,
    vcat,
    vsep,
)
from asciibox.errors import BoxError, InvalidAlignment, InvalidDimension


class TestConstructors:

    def test_text_dimensions(self):
        box = text("Hello")
        assert (box.rows, box.cols) == (1, 5)
        assert box.content == Text("Hello")

    def test_empty_text_has_one_row(self):
        assert (text("").rows, text("").cols) == (1, 0)

    def test_multiline_text_becomes_column(self):
        box = text("a\nbcd")
        assert (box.rows, box.cols) == (2, 3)
        assert isinstance(box.content, Col)

    def test_wide_text_width(self):
        assert text("日本").cols == 4

    def test_line_drops_newlines(self):
        assert line("a\nb\r") == text("ab")

    def test_char_keeps_first_character(self):
        assert char("xyz").content == Text("x")
        assert char("").content == Text(" ")

    def test_empty_box(self):
        box = empty_box(2, 3)
        assert (box.rows, box.cols) == (2, 3)

    def test_null_box(self):
        assert (null_box.rows, null_box.cols) == (0, 0)

    @pytest.mark.parametrize("rows, cols", [(-1, 0), (0, -3), (1.5, 1), (True, 1)])
    def test_invalid_dimensions(self, rows, cols):
        with pytest.raises(InvalidDimension):
            empty_box(rows, cols)


class TestComposition:

    def test_hcat_dimensions(self):
        box = hcat([text("ab"), empty_box(3, 1)])
        assert (box.rows, box.cols) == (3, 3)
        assert isinstance(box.content, Row)

    def test_vcat_dimensions(self):
        box = vcat([text("ab"), text("cdef"), empty_box(2, 1)])
        assert (box.rows, box.cols) == (4, 4)

    def test_empty_concatenation_is_null_box(self):
        assert hcat([]) == null_box
        assert vcat([]) == null_box

    def test_hcat_wraps_shorter_children(self):
        box = hcat([text("a"), empty_box(3, 1)], Alignment.LAST)
        first, second = box.content.boxes
        assert isinstance(first.content, SubBox)
        assert first.content.y_align is Alignment.LAST
        assert second == empty_box(3, 1)

    def test_hcat_keeps_zero_width_children_unwrapped(self):
        marker = empty_box(0, 0)
        box = hcat([text("ab"), marker])
        assert box.content.boxes[1] is marker

    def test_hsep_and_vsep(self):
        assert hsep([text("a"), text("b"), text("c")], 2).cols == 7
        assert vsep([text("a"), text("b")], 3).rows == 5

    def test_punctuate_empty(self):
        assert punctuate_h([], Alignment.FIRST, text(",")) == null_box

    def test_invalid_alignment(self):
        with pytest.raises(InvalidAlignment):
            hcat([text("a")], "middle")

    def test_hsep_negative_separator(self):
        with pytest.raises(InvalidDimension):
            hsep([text("a"), text("b")], -1)


class TestAlign:

    def test_declared_size(self):
        box = align(text("x"), 3, 5, Alignment.CENTER1, Alignment.LAST)
        assert (box.rows, box.cols) == (3, 5)
        assert box.content == SubBox(text("x"), Alignment.CENTER1, Alignment.LAST)

    def test_negative_size_rejected(self):
        with pytest.raises(InvalidDimension):
            align(text("x"), -1, 2)

    def test_annotation_stays_on_child(self):
        styled = annotate(text("x"), "style")
        box = align(styled, 1, 3)
        assert box.annotation is None
        assert box.content.box.annotation == Annotation("style")


class TestAnnotations:

    def test_annotate_wraps_payload(self):
        assert annotate(text("a"), "x").annotation == Annotation("x")

    def test_annotate_accepts_annotation(self):
        assert annotate(text("a"), Annotation(1)).annotation == Annotation(1)

    def test_un_annotate(self):
        assert un_annotate(annotate(text("a"), "x")) == text("a")

    def test_re_annotate(self):
        box = re_annotate(annotate(text("a"), 2), lambda value: value * 10)
        assert box.annotation == Annotation(20)

    def test_re_annotate_without_annotation(self):
        with pytest.raises(BoxError):
            re_annotate(text("a"), str)

    def test_alter_annotations(self):
        boxes = alter_annotations(annotate(text("a"), "ab"), list)
        assert [box.annotation.data for box in boxes] == ["a", "b"]

    def test_annotation_map_and_filter(self):
        annotation = Annotation(3)
        assert annotation.map(str) == Annotation("3")
        assert annotation.filter(lambda value: value > 5) is None

    def test_combine_annotations(self):
        merged = combine_annotations(Annotation(["a"]), Annotation(["b"]), lambda x, y: x + y)
        assert merged == Annotation(["a", "b"])


class TestValueSemantics:

    def test_structural_equality_and_hash(self):
        first = hcat([text("a"), text("b")])
        second = hcat([text("a"), text("b")])
        assert first == second
        assert hash(first) == hash(second)

    def test_boxes_are_immutable(self):
        box = text("a")
        with pytest.raises(AttributeError):
            box.rows = 4

    def test_str(self):
        assert str(text("Hi")) == 'Box(1x2 Text "Hi")'
        assert str(empty_box(2, 3)) == "Box(2x3 Blank [empty])"
        assert str(annotate(hcat([text("a"), text("b")]), "x")) == (
            "Box(1x2 Row [2 boxes horizontal] annotated)"
        )

    def test_str_truncates_long_text(self):
        box = text("abcdefghijklmnopqrstuvwxyz")
        assert str(box) == 'Box(1x26 Text "abcdefghijklmnopq...")'

    def test_generic_box(self):
        assert isinstance(Box[int](1, 1, Text("a")), Box)
