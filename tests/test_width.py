"""Tests for display-width measurement and column fitting."""

import pytest

from asciibox.box_components.core import Alignment
from asciibox.box_components.width import (
    ansi_tokens,
    fit_tokens,
    segments,
    string_width,
    strip_ansi,
    take_width,
    text_tokens,
)


class TestStringWidth:

    def test_ascii(self):
        assert string_width("abc") == 3

    def test_wide_characters(self):
        assert string_width("日本") == 4

    def test_escape_sequences_are_not_counted(self):
        assert string_width("\x1b[31mred\x1b[0m") == 3

    def test_combining_mark_joins_previous_character(self):
        assert segments("e\u0301x") == ["e\u0301", "x"]
        assert string_width("e\u0301") == 1

    def test_flag_pair_is_one_wide_unit(self):
        flag = "\U0001F1FA\U0001F1F8"
        assert len(segments(flag)) == 1
        assert string_width(flag) == 2

    def test_zwj_sequence_is_one_wide_unit(self):
        family = "\U0001F468\u200d\U0001F469"
        assert len(segments(family)) == 1
        assert string_width(family) == 2

    def test_variation_selector_widens_symbol(self):
        assert string_width("\u2764\ufe0f") == 2

    def test_empty(self):
        assert string_width("") == 0


class TestStripAnsi:

    def test_removes_sgr_and_cursor_sequences(self):
        assert strip_ansi("\x1b[1;31mhi\x1b[0m\x1b[2A\x1b7") == "hi"

    def test_plain_text_untouched(self):
        assert strip_ansi("plain") == "plain"


class TestTakeWidth:

    def test_stops_before_wide_character_that_does_not_fit(self):
        assert take_width("日本語", 3) == "日"

    def test_whole_string_when_it_fits(self):
        assert take_width("abc", 10) == "abc"


class TestFitTokens:

    @pytest.mark.parametrize(
        "alignment, expected",
        [
            (Alignment.FIRST, "abc   "),
            (Alignment.LAST, "   abc"),
            (Alignment.CENTER1, " abc  "),
            (Alignment.CENTER2, "  abc "),
        ],
    )
    def test_padding(self, alignment, expected):
        assert fit_tokens(text_tokens("abc"), 6, alignment) == expected

    @pytest.mark.parametrize(
        "alignment, expected",
        [
            (Alignment.FIRST, "abc"),
            (Alignment.LAST, "def"),
            (Alignment.CENTER1, "bcd"),
            (Alignment.CENTER2, "cde"),
        ],
    )
    def test_cropping(self, alignment, expected):
        assert fit_tokens(text_tokens("abcdef"), 3, alignment) == expected

    def test_wide_character_cut_at_end_becomes_space(self):
        assert fit_tokens(text_tokens("日本"), 3) == "日 "

    def test_wide_character_cut_at_start_becomes_space(self):
        assert fit_tokens(text_tokens("日本"), 3, Alignment.LAST) == " 本"

    def test_escapes_survive_padding(self):
        assert fit_tokens(ansi_tokens("\x1b[31mab\x1b[0m"), 4) == "\x1b[31mab\x1b[0m  "

    def test_escapes_survive_cropping(self):
        assert fit_tokens(ansi_tokens("\x1b[31mab\x1b[0m"), 1) == "\x1b[31ma\x1b[0m"

    def test_zero_width_keeps_only_escapes(self):
        assert fit_tokens(ansi_tokens("\x1b[31mab\x1b[0m"), 0) == "\x1b[31m\x1b[0m"

    def test_ansi_tokens_split_escapes(self):
        assert ansi_tokens("\x1b[1mx") == [("escape", "\x1b[1m", 0), ("text", "x", 1)]
