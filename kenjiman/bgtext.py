"""Text drawn over a filled background rectangle."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from kenjiman.color import RGBAColor
from kenjiman.shapes import Rectangle
from kenjiman.text import Text
from kenjiman.transition import Transitionable
from kenjiman.vec2d import Vec2D


class BgText(Transitionable):
    """A text label with a background sized to the text; both colours animate."""

    TRANSITION_TEXT_COLOR = 0
    TRANSITION_BACKGROUND_COLOR = 1

    def __init__(
        self,
        position: Vec2D,
        content: str,
        text_color: RGBAColor,
        background_color: RGBAColor,
    ) -> None:
        self.text = Text(position, content, text_color)
        self.background = Rectangle(
            self.text.compute_visible_position(),
            self.text.compute_visible_end_position(),
            background_color,
        )

    def draw(self, window: Any) -> None:
        """Draw the background, then the text over it."""
        window << self.background << self.text

    def get_values(self, transition_id: int) -> list[float]:
        if transition_id == self.TRANSITION_TEXT_COLOR:
            color = self.text.text_color
        elif transition_id == self.TRANSITION_BACKGROUND_COLOR:
            color = self.background.fill_color
        else:
            return []
        return [float(color.red), float(color.green), float(color.blue)]

    def set_values(self, transition_id: int, values: Sequence[float]) -> None:
        if transition_id == self.TRANSITION_TEXT_COLOR:
            self.text.text_color = RGBAColor(values[0], values[1], values[2])
        elif transition_id == self.TRANSITION_BACKGROUND_COLOR:
            self.background.fill_color = RGBAColor(values[0], values[1], values[2])