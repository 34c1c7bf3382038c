"""Tests for terminal command boxes."""

import pytest

from asciibox.annotations import cmd
from asciibox.annotations.cmd import Command, interpret_command
from asciibox.box_components import annotate, hcat, text, vcat
from asciibox.errors import MalformedAnnotation


def sequence(box):
    return box.annotation.data.sequence


class TestSequences:

    @pytest.mark.parametrize(
        "box, expected",
        [
            (cmd.cursor_up(3), "\x1b[3A"),
            (cmd.cursor_down(), "\x1b[1B"),
            (cmd.cursor_forward(2), "\x1b[2C"),
            (cmd.cursor_backward(4), "\x1b[4D"),
            (cmd.cursor_right(1), "\x1b[1C"),
            (cmd.cursor_left(1), "\x1b[1D"),
            (cmd.cursor_next_line(2), "\x1b[2E"),
            (cmd.cursor_prev_line(), "\x1b[1F"),
            (cmd.cursor_save_position(), "\x1b7"),
            (cmd.cursor_restore_position(), "\x1b8"),
            (cmd.cursor_show(), "\x1b[?25h"),
            (cmd.cursor_hide(), "\x1b[?25l"),
            (cmd.erase_screen(), "\x1b[2J"),
            (cmd.erase_up(), "\x1b[1J"),
            (cmd.erase_down(), "\x1b[0J"),
            (cmd.erase_line(), "\x1b[2K"),
            (cmd.erase_start_line(), "\x1b[1K"),
            (cmd.erase_end_line(), "\x1b[0K"),
            (cmd.erase_lines(3), "\x1b[3M"),
            (cmd.clear_screen(), "\x1b[2J\x1b[H"),
            (cmd.home(), "\x1b[H"),
            (cmd.bell(), "\x07"),
        ],
    )
    def test_sequence(self, box, expected):
        assert sequence(box) == expected

    def test_counts_are_floored_and_clamped(self):
        assert sequence(cmd.cursor_up(2.7)) == "\x1b[2A"
        assert sequence(cmd.cursor_up(-2)) == "\x1b[0A"

    def test_cursor_to_is_one_based(self):
        assert sequence(cmd.cursor_to(4, 2)) == "\x1b[3;5H"
        assert sequence(cmd.cursor_to()) == "\x1b[1;1H"

    def test_cursor_move(self):
        assert sequence(cmd.cursor_move(2, -3)) == "\x1b[3A\x1b[2C"
        assert sequence(cmd.cursor_move(-1, 1)) == "\x1b[1B\x1b[1D"
        assert sequence(cmd.cursor_move(0, 0)) == ""

    def test_command_boxes_have_no_size(self):
        box = cmd.cursor_up(1)
        assert (box.rows, box.cols) == (0, 0)

    def test_categories(self):
        assert cmd.cursor_hide().annotation.data.category == cmd.VISIBILITY
        assert cmd.bell().annotation.data.category == cmd.UTILITY
        assert cmd.erase_line().annotation.data.category == cmd.SCREEN


class TestRendering:

    def test_command_alone(self, ansi_renderer):
        assert ansi_renderer.render_lines(cmd.cursor_up(2)) == ["\x1b[2A"]

    def test_empty_command_emits_nothing(self, ansi_renderer):
        assert ansi_renderer.render_lines(cmd.cursor_move(0, 0)) == []

    def test_command_after_text(self, ansi_renderer):
        box = hcat([text("ab"), cmd.cursor_up(1)])
        assert ansi_renderer.render(box) == "ab\x1b[1A"

    def test_plain_drops_commands(self, plain):
        assert plain.render(hcat([text("ab"), cmd.cursor_up(1)])) == "ab"

    def test_html_drops_commands(self, html_renderer):
        assert html_renderer.render(hcat([text("ab"), cmd.bell()])) == "ab"

    def test_command_in_column_joins_next_line(self, ansi_renderer):
        box = vcat([text("a"), cmd.erase_line(), text("b")])
        assert ansi_renderer.render_lines(box) == ["a", "\x1b[2Kb"]

    def test_trailing_command_in_column(self, ansi_renderer):
        box = vcat([text("a"), cmd.cursor_hide()])
        assert ansi_renderer.render_lines(box) == ["a\x1b[?25l"]

    def test_group_of_commands(self, ansi_renderer):
        box = hcat([cmd.cursor_save_position(), cmd.cursor_up(1)])
        assert ansi_renderer.render_lines(box) == ["\x1b7\x1b[1A"]

    def test_command_on_sized_node_ignored(self, ansi_renderer):
        box = annotate(text("x"), cmd.cursor_up(1).annotation)
        assert ansi_renderer.render(box) == "x"


class TestInterpretCommand:

    def test_accepts_command(self):
        command = Command(cmd.CURSOR, "cursorUp", "\x1b[1A")
        assert interpret_command(command) is command

    def test_rejects_unknown_category(self):
        with pytest.raises(MalformedAnnotation):
            interpret_command(Command("Bogus", "x", ""))

    def test_rejects_other_payloads(self):
        with pytest.raises(MalformedAnnotation):
            interpret_command({"sequence": "\x1b[1A"})

    def test_malformed_command_box_renders_nothing(self, ansi_renderer):
        box = annotate(cmd.home(), Command("Bogus", "x", "\x1b[H"))
        assert ansi_renderer.render_lines(box) == []
