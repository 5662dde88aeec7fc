"""Cursor over a paged grid of entries."""

from __future__ import annotations

from enum import Enum


class HidDirection(Enum):
    """Direction in which a list or its pages run."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class PageCursor:
    """Index of the highlighted entry inside a page, and the current page."""

    def __init__(
        self,
        entries: int,
        columns: int,
        list_direction: HidDirection = HidDirection.VERTICAL,
        max_pages: int = 0,
    ) -> None:
        if columns <= 0 or entries < columns:
            raise ValueError("need at least one column and one full row of entries")
        self.max_visible_entries = entries
        self.columns = columns
        self.rows = entries // columns
        self.list_direction = list_direction
        self.max_pages = max_pages
        self.index = 0
        self.page = 0

    def full_index(self) -> int:
        """Index of the highlighted entry across all pages."""
        return self.index + self.page * self.max_visible_entries

    def max_entries(self, count: int) -> int:
        """Highest in-page index valid on the current page for ``count`` entries.

        Returns -1 when the current page holds exactly no entries.
        """
        remaining = count - self.page * self.max_visible_entries
        if remaining > self.max_visible_entries or remaining < 0:
            return self.max_visible_entries - 1
        return remaining - 1

    def page_back(self) -> None:
        """Go to the previous page, wrapping from the first to the last."""
        if self.page > 0:
            self.page -= 1
        elif self.page == 0:
            self.page = self.max_pages - 1

    def page_forward(self) -> None:
        """Go to the next page, wrapping from the last to the first."""
        if self.page < self.max_pages - 1:
            self.page += 1
        elif self.page == self.max_pages - 1:
            self.page = 0

    def reset(self) -> None:
        self.index = 0
        self.page = 0

    def correct_index(self, count: int) -> None:
        """Pull the index back inside the current page after the entry count shrank."""
        limit = self.max_entries(count)
        if limit < 0 or self.index <= limit:
            return
        if self.list_direction is HidDirection.HORIZONTAL:
            self.index %= self.columns
        else:
            self.index %= self.rows
        if self.index > limit:
            self.index = limit