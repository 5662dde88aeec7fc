"""UTF-8 helpers that pack a character's bytes into one integer.

A packed code point holds the UTF-8 bytes of a single character in big-endian
order, so ``"A"`` is ``0x41`` and ``"\\ue000"`` (bytes ``EE 80 80``) is
``0xEE8080``. Glyph caches key their entries by this value.
"""

from __future__ import annotations

from collections.abc import Iterator


def char_size(first_byte: int) -> int:
    """Number of bytes in a UTF-8 sequence that starts with ``first_byte``."""
    if not 0 <= first_byte <= 0xFF:
        raise ValueError("byte must be in range 0..255")
    if first_byte <= 0x7F:
        return 1
    if first_byte < 0xE0:
        return 2
    if first_byte < 0xF0:
        return 3
    return 4


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def codepoint_from_utf8(
    data: bytes | bytearray | memoryview | str, offset: int = 0
) -> tuple[int, int]:
    """Read the character at ``offset`` and return ``(packed code point, next offset)``.

    Raises ``IndexError`` when ``offset`` is outside ``data`` and ``ValueError``
    when the sequence is cut short.
    """
    raw = _as_bytes(data)
    if not 0 <= offset < len(raw):
        raise IndexError(f"offset {offset} out of range")
    size = char_size(raw[offset])
    end = offset + size
    if end > len(raw):
        raise ValueError(f"truncated UTF-8 sequence at offset {offset}")
    return int.from_bytes(raw[offset:end], "big"), end


def utf8_from_codepoint(codepoint: int) -> bytes:
    """Bytes of a packed code point, with leading zero bytes dropped.

    The lowest byte is always kept, so ``0`` yields a single zero byte.
    """
    if not 0 <= codepoint <= 0xFFFFFFFF:
        raise ValueError("packed code point must fit in 32 bits")
    raw = codepoint.to_bytes(4, "big")
    return raw.lstrip(b"\0") or raw[-1:]


def iter_codepoints(data: bytes | bytearray | memoryview | str) -> Iterator[int]:
    """Yield the packed code point of every character in ``data``."""
    raw = _as_bytes(data)
    offset = 0
    while offset < len(raw):
        codepoint, offset = codepoint_from_utf8(raw, offset)
        yield codepoint