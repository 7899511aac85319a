"""Unit tests for pagination helpers."""

import pytest

from blog.domain.value import PageWindow, last_page_for, normalize_page_size


class TestNormalizePageSize:
    """Tests for normalize_page_size."""

    @pytest.mark.parametrize("requested", [0, -1, -100])
    def test_non_positive_size_falls_back_to_default(self, requested):
        assert normalize_page_size(requested, default=5, maximum=100) == 5

    def test_size_within_bounds_is_kept(self):
        assert normalize_page_size(20, default=5, maximum=100) == 20

    def test_size_above_maximum_is_capped(self):
        assert normalize_page_size(1000, default=5, maximum=100) == 100


class TestLastPageFor:
    """Tests for last_page_for."""

    def test_empty_result_still_has_one_page(self):
        assert last_page_for(0, 5) == 1

    def test_exact_multiple(self):
        assert last_page_for(10, 5) == 2

    def test_partial_last_page(self):
        assert last_page_for(12, 5) == 3


class TestPageWindow:
    """Tests for PageWindow.resolve."""

    def test_first_page(self):
        window = PageWindow.resolve(page_number=1, page_size=5, total_count=12)

        assert window.page_number == 1
        assert window.offset == 0
        assert window.last_page == 3
        assert window.has_prev is False
        assert window.has_next is True

    def test_middle_page(self):
        window = PageWindow.resolve(page_number=2, page_size=5, total_count=12)

        assert window.offset == 5
        assert window.has_prev is True
        assert window.has_next is True

    def test_page_beyond_last_is_clamped(self):
        window = PageWindow.resolve(page_number=99, page_size=5, total_count=12)

        assert window.page_number == 3
        assert window.offset == 10
        assert window.has_prev is True
        assert window.has_next is False

    @pytest.mark.parametrize("requested", [0, -5])
    def test_page_below_one_is_clamped(self, requested):
        window = PageWindow.resolve(page_number=requested, page_size=5, total_count=12)

        assert window.page_number == 1
        assert window.has_prev is False

    def test_empty_result(self):
        window = PageWindow.resolve(page_number=3, page_size=5, total_count=0)

        assert window.page_number == 1
        assert window.last_page == 1
        assert window.offset == 0
        assert window.has_prev is False
        assert window.has_next is False
