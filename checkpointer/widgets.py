"""Clickable cells and a paged list of them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Clickable:
    """A rectangular element with a label, colours and a selection state."""

    x: int
    y: int
    width: int
    height: int
    color_bg: Any
    color_text: Any
    text: str
    centered: bool
    selected: bool = field(default=False, init=False)
    can_change_color_when_selected: bool = field(default=False, init=False)

    def set_colors(self, bg: Any, text: Any) -> None:
        """Replace background and text colours."""
        self.color_bg = bg
        self.color_text = text


class Scrollable:
    """A list of clickable cells shown in pages of ``visible_entries`` rows."""

    def __init__(self, x: int, y: int, width: int, height: int, visible_entries: int) -> None:
        if visible_entries <= 0:
            raise ValueError("visible_entries must be positive")
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.visible_entries = visible_entries
        self._index = 0
        self._page = 0
        self._cells: list[Clickable] = []

    @property
    def page(self) -> int:
        return self._page

    @property
    def cells(self) -> list[Clickable]:
        return list(self._cells)

    def push_back(self, color_bg: Any, color_text: Any, text: str, selected: bool) -> Clickable:
        """Append a cell laid out in the next row of its page and return it."""
        row_height = self.height // self.visible_entries
        row = len(self._cells) % self.visible_entries
        cell = Clickable(
            self.x, self.y + row * row_height, self.width, row_height,
            color_bg, color_text, text, False,
        )
        cell.selected = selected
        self._cells.append(cell)
        return cell

    def _cell(self, index: int) -> Clickable:
        if not 0 <= index < len(self._cells):
            raise IndexError(f"cell index {index} out of range")
        return self._cells[index]

    def cell_name(self, index: int) -> str:
        return self._cell(index).text

    def rename_cell(self, index: int, name: str) -> None:
        self._cell(index).text = name

    def flush(self) -> None:
        """Remove every cell."""
        self._cells.clear()

    def __len__(self) -> int:
        return len(self._cells)

    def max_visible_entries(self) -> int:
        """Number of cells shown on the current page."""
        remaining = len(self._cells) - self._page * self.visible_entries
        if remaining > self.visible_entries or remaining < 0:
            return self.visible_entries
        return remaining

    def index(self) -> int:
        """Absolute index of the highlighted cell."""
        return self._index + self._page * self.visible_entries

    def set_index(self, index: int) -> None:
        if index < 0:
            raise ValueError("index must not be negative")
        self._page = index // self.visible_entries
        self._index = index - self._page * self.visible_entries

    def reset_index(self) -> None:
        self._index = 0
        self._page = 0

    def select_row(self, index: int, selected: bool) -> None:
        self._cell(index).selected = selected