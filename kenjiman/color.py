"""RGBA colours with byte-sized channels."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real


def _to_byte(value: float) -> int:
    return int(value) & 0xFF


@dataclass(frozen=True)
class RGBAColor:
    """A colour whose channels wrap like unsigned bytes."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            object.__setattr__(self, name, _to_byte(getattr(self, name)))

    def __add__(self, other: RGBAColor) -> RGBAColor:
        if not isinstance(other, RGBAColor):
            return NotImplemented
        return RGBAColor(
            self.red + other.red,
            self.green + other.green,
            self.blue + other.blue,
            self.alpha + other.alpha,
        )

    def __mul__(self, factor: float) -> RGBAColor:
        if not isinstance(factor, Real):
            return NotImplemented
        return RGBAColor(
            self.red * factor,
            self.green * factor,
            self.blue * factor,
            self.alpha * factor,
        )

    def __str__(self) -> str:
        return f"R: {self.red}, G: {self.green}, B: {self.blue}, A: {self.alpha}"


TRANSPARENT = RGBAColor(0, 0, 0, 0)
BLACK = RGBAColor(0, 0, 0)
WHITE = RGBAColor(255, 255, 255)
RED = RGBAColor(255, 0, 0)
LIME = RGBAColor(0, 255, 0)
GREEN = RGBAColor(0, 128, 0)
BLUE = RGBAColor(0, 0, 255)
NAVY = RGBAColor(0, 0, 128)
YELLOW = RGBAColor(255, 255, 0)
CYAN = RGBAColor(0, 255, 255)
MAGENTA = RGBAColor(255, 0, 255)
PURPLE = RGBAColor(128, 0, 128)
SILVER = RGBAColor(192, 192, 192)
GRAY = RGBAColor(128, 128, 128)