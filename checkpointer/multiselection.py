"""A set of selected entry indices that keeps the order of selection."""

from __future__ import annotations


class MultiSelection:
    """Indices picked for a batch action, in the order they were picked."""

    def __init__(self) -> None:
        self._entries: list[int] = []

    def selected_entries(self) -> list[int]:
        """A copy of the selected indices in selection order."""
        return list(self._entries)

    def enabled(self) -> bool:
        """True when at least one entry is selected."""
        return bool(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def toggle(self, index: int) -> None:
        """Select ``index`` if it is not selected, otherwise deselect it."""
        if index in self._entries:
            self._entries.remove(index)
        else:
            self._entries.append(index)

    def __contains__(self, index: object) -> bool:
        return index in self._entries

    def __len__(self) -> int:
        return len(self._entries)