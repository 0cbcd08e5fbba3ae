"""Tests for line number to offset resolution."""

from __future__ import annotations

import pytest

from friendly_errors.errors import UnresolvedPositionError
from friendly_errors.resolver import (
    INVALID,
    UNRESOLVED,
    LineOffset,
    Resolved,
    line_count,
    line_end_index,
    line_number_at,
    resolve_line_end_start_index,
    resolve_line_start_index,
)

from tests.helpers import HELLO_WORLD

TEXTS = [
    HELLO_WORLD,
    "single line",
    "one\ntwo\nthree",
    "trailing\n\n",
    "\n\n\n",
    "crlf\r\nline\r\n",
]


class TestResolveLineStart:
    @pytest.mark.parametrize(
        "line, offset", [(1, 0), (2, 1), (3, 13), (4, 44)]
    )
    def test_hello_world_lines(self, line, offset):
        assert resolve_line_start_index(HELLO_WORLD, line) == Resolved(offset)

    @pytest.mark.parametrize("text", TEXTS)
    def test_every_line_starts_after_a_newline(self, text):
        begin = 0
        for n, line in enumerate(text.splitlines(keepends=True), start=1):
            assert resolve_line_start_index(text, n) == Resolved(begin)
            begin += len(line)

    @pytest.mark.parametrize("text", TEXTS)
    def test_first_line_is_offset_zero(self, text):
        assert resolve_line_start_index(text, 1) == Resolved(0)

    @pytest.mark.parametrize("text", TEXTS + [""])
    def test_line_zero_is_invalid(self, text):
        assert resolve_line_start_index(text, 0) == INVALID

    @pytest.mark.parametrize("text", TEXTS + [""])
    def test_line_past_end_is_invalid(self, text):
        assert resolve_line_start_index(text, line_count(text) + 1) == INVALID

    def test_far_past_end_is_not_clamped(self):
        assert resolve_line_start_index("a\nb\n", 1000) == INVALID

    def test_empty_text_has_no_lines(self):
        assert resolve_line_start_index("", 1) == INVALID

    def test_missing_line_number_is_invalid(self):
        assert resolve_line_start_index(HELLO_WORLD, None) == INVALID

    def test_negative_line_number_is_invalid(self):
        assert resolve_line_start_index(HELLO_WORLD, -3) == INVALID

    def test_carriage_return_stays_on_its_line(self):
        assert resolve_line_start_index("a\r\nb", 2) == Resolved(3)

    def test_end_resolution_matches_start_resolution(self):
        for n in range(0, 7):
            assert resolve_line_end_start_index(HELLO_WORLD, n) == resolve_line_start_index(
                HELLO_WORLD, n
            )


class TestLineOffset:
    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            LineOffset()

    def test_resolved(self):
        assert Resolved(7).is_valid()
        assert Resolved(7).offset_or(0) == 7

    def test_invalid(self):
        assert not INVALID.is_valid()
        assert INVALID.offset_or(3) == 3

    def test_unresolved_is_a_bug(self):
        with pytest.raises(UnresolvedPositionError):
            UNRESOLVED.is_valid()
        with pytest.raises(UnresolvedPositionError):
            UNRESOLVED.offset_or(0)


class TestLineHelpers:
    def test_line_count(self):
        assert line_count("") == 0
        assert line_count("abc") == 1
        assert line_count("abc\n") == 1
        assert line_count("abc\n\n") == 2
        assert line_count(HELLO_WORLD) == 4

    def test_line_end_index(self):
        assert line_end_index(HELLO_WORLD, 0) == 0
        assert line_end_index(HELLO_WORLD, 1) == 12
        assert line_end_index("no newline", 3) == 10

    def test_line_number_at(self):
        assert line_number_at(HELLO_WORLD, 0) == 1
        assert line_number_at(HELLO_WORLD, 1) == 2
        assert line_number_at(HELLO_WORLD, 44) == 4
