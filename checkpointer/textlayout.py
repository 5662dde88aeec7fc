"""Splitting, measuring and word-wrapping text for column layout.

Widths are measured by a caller-supplied function so that layout works the
same with any font backend. A line that does not fit is broken at spaces and
tabs. Every wrapped line holds at least one word, even when that word alone is
wider than the column.
"""

from __future__ import annotations

from collections.abc import Callable

Measure = Callable[[str], int]
GlyphWidth = Callable[[str], "int | None"]

_BREAKING_SPACES = frozenset(" \t")


def _check_delimiter(delimiter: str) -> None:
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")


def explode(text: str, delimiter: str) -> list[str]:
    """Split ``text`` at every ``delimiter``, dropping the delimiters.

    Empty pieces are kept, so the result always has at least one element.
    """
    _check_delimiter(delimiter)
    return text.split(delimiter)


def explode_and_keep(text: str, delimiter: str) -> list[str]:
    """Split ``text`` before every ``delimiter``, keeping it at the start of the piece."""
    _check_delimiter(delimiter)
    first, *rest = text.split(delimiter)
    return [first, *(delimiter + piece for piece in rest)]


def explode_breaking_space(text: str) -> tuple[list[str], list[str]]:
    """Split ``text`` into words at spaces and tabs.

    Returns ``(words, spaces)`` of equal length: ``spaces[i]`` is the space or
    tab that ended ``words[i]``, and ``""`` for the last word.
    """
    words: list[str] = []
    spaces: list[str] = []
    current: list[str] = []
    for ch in text:
        if ch in _BREAKING_SPACES:
            words.append("".join(current))
            spaces.append(ch)
            current = []
        else:
            current.append(ch)
    words.append("".join(current))
    spaces.append("")
    return words, spaces


def text_width(text: str, glyph_width: GlyphWidth) -> int:
    """Width of the widest line of ``text``.

    ``glyph_width`` gives the width of one character, or None when the font
    has no glyph for it; such characters take the width of a space, and add
    nothing if there is no space glyph either.
    """
    widest = 0
    for line in text.split("\n"):
        width = 0
        for ch in line:
            glyph = glyph_width(ch)
            if glyph is None:
                glyph = glyph_width(" ")
            if glyph is not None:
                width += glyph
        widest = max(widest, width)
    return widest


def text_height(text: str, line_height: int, line_spacing: int = 0) -> int:
    """Height of ``text``: one line height per line plus spacing between lines."""
    lines = text.count("\n") + 1
    return line_height * lines + line_spacing * (lines - 1)


def _wrap_line(line: str, width: int, measure: Measure) -> list[str]:
    words, spaces = explode_breaking_space(line)
    wrapped: list[str] = []
    current = words[0] + spaces[0]
    for word, space in zip(words[1:], spaces[1:]):
        if measure(current + word) > width:
            wrapped.append(current)
            current = word + space
        else:
            current += word + space
    wrapped.append(current)
    return wrapped


def fit_to_column(
    text: str, width: int, measure: Measure, keep_newlines: bool = False
) -> list[str]:
    """Break ``text`` into lines no wider than ``width`` where spaces allow.

    Lines are first split at newlines; with ``keep_newlines`` each line after
    the first keeps its leading newline. A ``width`` of 0 or less disables
    wrapping.
    """
    lines = explode_and_keep(text, "\n") if keep_newlines else explode(text, "\n")
    result: list[str] = []
    for line in lines:
        if width > 0 and measure(line) > width:
            result.extend(_wrap_line(line, width, measure))
        else:
            result.append(line)
    return result


def column_height(text: str, width: int, measure: Measure, line_height: int) -> int:
    """Height of ``text`` wrapped to ``width``; one line height when ``width`` is 0."""
    if width == 0:
        return line_height
    return len(fit_to_column(text, width, measure, False)) * line_height


def wrapped_text(text: str, width: int, measure: Measure, max_size: int) -> str:
    """``text`` wrapped to ``width`` with lines joined by newlines.

    The result holds at most ``max_size - 1`` characters, as if written into a
    buffer of ``max_size`` with room for a terminator. A ``width`` of 0 gives
    an empty string.
    """
    if width == 0:
        return ""
    lines = fit_to_column(text, width, measure, False)
    remaining = max_size - 1
    parts: list[str] = []
    for position, line in enumerate(lines):
        if remaining <= 0:
            break
        piece = line[:remaining]
        parts.append(piece)
        remaining -= len(piece)
        if remaining > 0 and position + 1 < len(lines):
            parts.append("\n")
            remaining -= 1
    return "".join(parts)