"""RGBA colours and colour palettes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Palette(Enum):
    """Palettes for mapping a value in ``[0, 1]`` to a colour."""

    RAINBOW = "rainbow"
    BLUE_TO_RED = "blue_to_red"
    GRAYSCALE = "grayscale"


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"{name} must be an integer in [0, 255], got {value!r}")

    @classmethod
    def from_hex(cls, value: int, alpha: int = 255) -> Color:
        """Build a colour from a 0xRRGGBB integer."""
        return cls(
            (value & 0xFF0000) >> 16,
            (value & 0x00FF00) >> 8,
            value & 0x0000FF,
            alpha,
        )

    @classmethod
    def from_range(
        cls, value: float, palette: Palette = Palette.RAINBOW, alpha: int = 255
    ) -> Color:
        """Map ``value`` (clamped to ``[0, 1]``) onto the palette."""
        value = max(0.0, min(1.0, value))

        if palette is Palette.RAINBOW:
            if value == 1.0:
                return cls(RED.red, RED.green, RED.blue, alpha)
            step = 1.0 / 7.0
            index = 0
            while value > step and index < len(_RAINBOW) - 2:
                index += 1
                value -= step
            fraction = max(0.0, min(1.0, value * 7.0))
            return _blend(_RAINBOW[index], _RAINBOW[index + 1], fraction, alpha)
        if palette is Palette.BLUE_TO_RED:
            return _blend(BLUE, RED, value, alpha)
        if palette is Palette.GRAYSCALE:
            return _blend(BLACK, WHITE, value, alpha)
        raise ValueError(f"unknown palette: {palette!r}")


def _blend(low: Color, high: Color, fraction: float, alpha: int) -> Color:
    def channel(a: int, b: int) -> int:
        return int(a * (1.0 - fraction) + b * fraction)

    return Color(
        channel(low.red, high.red),
        channel(low.green, high.green),
        channel(low.blue, high.blue),
        alpha,
    )


CLEAR = Color(0, 0, 0, 0)
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)
ORANGE = Color(255, 128, 0)
YELLOW = Color(255, 255, 0)
GREEN = Color(128, 255, 0)
BLUE = Color(0, 0, 255)
INDIGO = Color(75, 0, 130)
VIOLET = Color(139, 0, 255)
CYAN = Color(0, 255, 255)
PURPLE = Color(128, 0, 255)

_RAINBOW = (VIOLET, INDIGO, BLUE, GREEN, YELLOW, ORANGE, RED)