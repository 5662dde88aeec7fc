"""Axis-aligned rectangles used for text layout and clipping."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its top-left corner and its size."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def union(self, other: Rect) -> Rect:
        """The smallest rectangle covering both rectangles."""
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        x2 = max(self.right, other.right)
        y2 = max(self.bottom, other.bottom)
        return Rect(x, y, max(0, x2 - x), max(0, y2 - y))

    def intersect(self, other: Rect) -> Rect:
        """The overlap of both rectangles; width or height is 0 where they do not meet."""
        x = max(self.x, other.x)
        right = min(self.right, other.right)
        y = max(self.y, other.y)
        bottom = min(self.bottom, other.bottom)
        return Rect(x, y, max(0, right - x), max(0, bottom - y))

    def contains(self, x: float, y: float) -> bool:
        """True if the point lies inside the rectangle or on its edge."""
        return self.x <= x <= self.right and self.y <= y <= self.bottom