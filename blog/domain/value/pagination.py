"""Pagination window for post listings.

Page numbers are 1-indexed. Out-of-range input is never an error: the page
size falls back to a default (or is capped), and the page number is clamped
into ``[1, last_page]`` once the number of matching items is known.
"""

import math

from blog.domain.value.common import ValueObject


def normalize_page_size(page_size: int, default: int, maximum: int) -> int:
    """Bring a requested page size into ``[1, maximum]``.

    Args:
        page_size: Requested page size
        default: Size used when the request is below 1
        maximum: Largest allowed page size

    Returns:
        Usable page size
    """
    if page_size < 1:
        return default
    return min(page_size, maximum)


def last_page_for(total_count: int, page_size: int) -> int:
    """Number of the last page, never less than 1."""
    return max(1, math.ceil(total_count / page_size))


class PageWindow(ValueObject):
    """A resolved slice of a filtered, sorted result set."""

    page_number: int
    page_size: int
    last_page: int
    total_count: int

    @classmethod
    def resolve(cls, page_number: int, page_size: int, total_count: int) -> "PageWindow":
        """Clamp the page number against the result size.

        Args:
            page_number: Requested 1-indexed page
            page_size: Already-normalized page size (>= 1)
            total_count: Number of items matching the filter

        Returns:
            Window with a page number in ``[1, last_page]``
        """
        last_page = last_page_for(total_count, page_size)
        clamped = min(max(page_number, 1), last_page)
        return cls(
            page_number=clamped,
            page_size=page_size,
            last_page=last_page,
            total_count=total_count,
        )

    @property
    def offset(self) -> int:
        """Index of the first item on this page."""
        return (self.page_number - 1) * self.page_size

    @property
    def has_prev(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.last_page
