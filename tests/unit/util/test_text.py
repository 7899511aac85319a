"""Unit tests for text truncation."""

import pytest

from blog.util.text import ELLIPSIS, truncate


class TestTruncate:
    """Tests for truncate."""

    def test_short_text_is_unchanged(self):
        assert truncate("hello", 10) == "hello"

    def test_text_of_exact_length_is_unchanged(self):
        text = "a" * 128
        assert truncate(text, 128) == text

    def test_long_text_is_cut_and_marked(self):
        result = truncate("a" * 129, 128)
        assert result == "a" * 128 + ELLIPSIS
        assert len(result) == 129

    def test_empty_text(self):
        assert truncate("", 5) == ""

    def test_zero_max_length_returns_marker_only(self):
        assert truncate("hello", 0) == ELLIPSIS

    def test_negative_max_length_returns_marker_only(self):
        assert truncate("hello", -3) == ELLIPSIS

    def test_zero_max_length_with_empty_text_returns_marker(self):
        """Degenerate bound wins over the fits-unchanged rule."""
        assert truncate("", 0) == ELLIPSIS

    def test_marker_is_single_character(self):
        assert len(ELLIPSIS) == 1

    @pytest.mark.parametrize("max_length", [0, 1, 5, 128])
    @pytest.mark.parametrize(
        "text", ["", "a", "hello", "b" * 128, "c" * 129, "x…y" * 60]
    )
    def test_truncating_twice_changes_nothing(self, text, max_length):
        once = truncate(text, max_length)

        assert truncate(once, max_length) == once
