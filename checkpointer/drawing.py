"""Drawing helpers independent of any rendering backend."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError("colour channels must be in range 0..255")


def outline_rects(
    x: int, y: int, width: int, height: int, size: int
) -> list[tuple[int, int, int, int]]:
    """Rectangles ``(x, y, w, h)`` of a frame ``size`` thick around a box: top, left, right, bottom."""
    return [
        (x - size, y - size, width + 2 * size, size),
        (x - size, y, size, height),
        (x + width, y, size, height),
        (x - size, y + height, width + 2 * size, size),
    ]


def pulse_multiplier(seconds: float) -> float:
    """Highlight strength for a one-second pulse: 1 at whole seconds, 0 at half seconds."""
    return max(0.0, abs(math.fmod(seconds, 1.0) - 0.5) / 0.5)


def pulsing_color(color: Color, seconds: float) -> Color:
    """Blend ``color`` towards white by the pulse strength at ``seconds``; alpha is opaque."""
    m = pulse_multiplier(seconds)

    def blend(channel: int) -> int:
        return min(255, int(channel + (255 - channel) * m))

    return Color(blend(color.r), blend(color.g), blend(color.b), 255)


def trim_to_fit(text: str, max_width: int, measure: Callable[[str], int]) -> str:
    """Cut ``text`` so it fits ``max_width`` as measured, appending an ellipsis when cut."""
    result = ""
    for ch in text:
        if measure(result) < max_width:
            result += ch
        else:
            result += "..."
            break
    return result