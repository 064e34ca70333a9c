"""Text labels drawn with a bitmap font."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Any

from kenjiman.color import RGBAColor
from kenjiman.fonts import GlutFont
from kenjiman.transition import Transitionable
from kenjiman.vec2d import Vec2D


class HorizontalAlignment(Enum):
    """Where the anchor point sits horizontally in the text."""

    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()


class VerticalAlignment(Enum):
    """Where the anchor point sits vertically in the text."""

    TOP = auto()
    CENTER = auto()
    BOTTOM = auto()


@dataclass
class Text(Transitionable):
    """A string anchored at a position, with a colour, font and alignment."""

    TRANSITION_COLOR_RGB = 0
    TRANSITION_COLOR_ALPHA = 1
    TRANSITION_POSITION = 2

    position: Vec2D
    content: str
    text_color: RGBAColor
    font: GlutFont = GlutFont.BITMAP_8_BY_13
    horizontal_alignment: HorizontalAlignment = HorizontalAlignment.LEFT
    vertical_alignment: VerticalAlignment = VerticalAlignment.BOTTOM

    def compute_width(self) -> int:
        """Width of the rendered text in pixels."""
        return self.font.text_width(self.content)

    def compute_height(self) -> int:
        """Height of one line of the rendered text in pixels."""
        return self.font.height()

    def compute_visible_position(self) -> Vec2D:
        """Bottom-left corner of the text once alignment is applied."""
        x = self.position.x
        if self.horizontal_alignment is HorizontalAlignment.RIGHT:
            x -= self.compute_width()
        elif self.horizontal_alignment is HorizontalAlignment.CENTER:
            x -= self.compute_width() // 2

        y = self.position.y
        if self.vertical_alignment is VerticalAlignment.TOP:
            y += self.compute_height()
        elif self.vertical_alignment is VerticalAlignment.CENTER:
            y += self.compute_height() // 2

        return Vec2D(x, y)

    def compute_visible_end_position(self) -> Vec2D:
        """Top-right corner of the text once alignment is applied."""
        return self.compute_visible_position() + Vec2D(
            self.compute_width(), -self.compute_height()
        )

    def draw(self, window: Any) -> None:
        window.draw_string(
            self.compute_visible_position(), self.content, self.text_color, self.font
        )

    def get_values(self, transition_id: int) -> list[float]:
        color = self.text_color
        if transition_id == self.TRANSITION_COLOR_RGB:
            return [float(color.red), float(color.green), float(color.blue)]
        if transition_id == self.TRANSITION_COLOR_ALPHA:
            return [float(color.alpha)]
        if transition_id == self.TRANSITION_POSITION:
            return [float(self.position.x), float(self.position.y)]
        return []

    def set_values(self, transition_id: int, values: Sequence[float]) -> None:
        if transition_id == self.TRANSITION_COLOR_RGB:
            self.text_color = replace(
                self.text_color, red=values[0], green=values[1], blue=values[2]
            )
        elif transition_id == self.TRANSITION_COLOR_ALPHA:
            self.text_color = replace(self.text_color, alpha=values[0])
        elif transition_id == self.TRANSITION_POSITION:
            self.position = Vec2D(int(values[0]), int(values[1]))