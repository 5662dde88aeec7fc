"""Glyph lookup table and the packer that lays glyphs out on cache textures."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from checkpointer.geometry import Rect

CACHE_PADDING = 1
"""Blank pixels kept around each glyph to avoid filtering artifacts."""

DEFAULT_NUM_BUCKETS = 300
"""Enough buckets to hold every ASCII character and some more."""

DEFAULT_TAB_WIDTH = 4
"""Width of a tab in units of the space width."""


@dataclass
class GlyphData:
    """Where a glyph lives: its cache texture and its rectangle on it."""

    cache_level: int
    x: int
    y: int
    w: int
    h: int

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)


class GlyphMap:
    """A hash map from packed code points to glyph data.

    Inserting a code point twice keeps both entries; lookups find the first.
    """

    def __init__(self, num_buckets: int = DEFAULT_NUM_BUCKETS) -> None:
        if num_buckets <= 0:
            raise ValueError("num_buckets must be positive")
        self.num_buckets = num_buckets
        self._buckets: list[list[tuple[int, GlyphData]]] = [[] for _ in range(num_buckets)]

    def _bucket(self, codepoint: int) -> list[tuple[int, GlyphData]]:
        if codepoint < 0:
            raise ValueError("code point must not be negative")
        return self._buckets[codepoint % self.num_buckets]

    def insert(self, codepoint: int, glyph: GlyphData) -> GlyphData:
        """Add ``glyph`` under ``codepoint`` and return it."""
        self._bucket(codepoint).append((codepoint, glyph))
        return glyph

    def find(self, codepoint: int) -> GlyphData | None:
        """The glyph stored for ``codepoint``, or None if there is none."""
        return next(
            (glyph for key, glyph in self._bucket(codepoint) if key == codepoint), None
        )

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, codepoint: object) -> bool:
        return isinstance(codepoint, int) and codepoint >= 0 and self.find(codepoint) is not None

    def codepoints(self) -> list[int]:
        """Every stored code point, bucket by bucket in insertion order."""
        return [key for bucket in self._buckets for key, _ in bucket]

    def __iter__(self) -> Iterator[int]:
        return iter(self.codepoints())


class GlyphPacker:
    """Places glyphs row by row on square cache textures.

    ``cursor`` holds the rectangle of the last glyph placed and the cache
    level new glyphs go to.
    """

    def __init__(self, line_height: int, tab_width: int = DEFAULT_TAB_WIDTH) -> None:
        if line_height < 0:
            raise ValueError("line_height must not be negative")
        self.line_height = line_height
        self.tab_width = tab_width
        self.cursor = GlyphData(0, CACHE_PADDING, CACHE_PADDING, 0, line_height)

    def pack(
        self,
        glyphs: GlyphMap,
        codepoint: int,
        width: int,
        max_width: int,
        max_height: int,
        cache_count: int,
    ) -> GlyphData | None:
        """Reserve room for a glyph, record it in ``glyphs`` and return its data.

        Returns None when the current cache level is full; the cursor then
        moves to the top of level ``cache_count`` so that packing can be
        retried once that level exists.
        """
        cursor = self.cursor
        row_height = self.line_height + CACHE_PADDING

        if codepoint == ord("\t"):
            space = glyphs.find(ord(" "))
            if space is None:
                raise KeyError("a tab needs the space glyph to be packed first")
            width = self.tab_width * space.w

        if cursor.x + cursor.w + width >= max_width - CACHE_PADDING:
            if cursor.y + row_height + row_height >= max_height - CACHE_PADDING:
                cursor.cache_level = cache_count
                cursor.x = CACHE_PADDING
                cursor.y = CACHE_PADDING
                cursor.w = 0
                return None
            cursor.x = CACHE_PADDING
            cursor.y += row_height
            cursor.w = 0

        cursor.x += cursor.w + 1 + CACHE_PADDING
        cursor.w = width

        return glyphs.insert(
            codepoint, GlyphData(cursor.cache_level, cursor.x, cursor.y, cursor.w, cursor.h)
        )