"""Filled geometric shapes that can be drawn and animated."""

from __future__ import annotations

import math
from abc import abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from kenjiman.color import TRANSPARENT, RGBAColor
from kenjiman.transition import Transitionable
from kenjiman.vec2d import Vec2D

_CIRCLE_SEGMENTS = 20


def _vec(values: Sequence[float]) -> Vec2D:
    return Vec2D(int(values[0]), int(values[1]))


def _point(vec: Vec2D) -> tuple[int, int]:
    return (vec.x, vec.y)


class Shape(Transitionable):
    """Base for shapes with a fill colour and a border colour.

    Subclasses hold ``fill_color`` and ``border_color`` attributes; a border
    equal to the transparent colour is not drawn.
    """

    TRANSITION_FILL_COLOR_RGB = 0
    TRANSITION_FILL_COLOR_ALPHA = 1
    TRANSITION_BORDER_COLOR_RGB = 2
    TRANSITION_BORDER_COLOR_ALPHA = 3

    fill_color: RGBAColor
    border_color: RGBAColor

    @abstractmethod
    def draw(self, window: Any) -> None:
        """Render the shape on the window."""

    @property
    def has_border(self) -> bool:
        return self.border_color != TRANSPARENT

    def _color_values(self, transition_id: int) -> list[float] | None:
        if transition_id == self.TRANSITION_FILL_COLOR_RGB:
            c = self.fill_color
            return [float(c.red), float(c.green), float(c.blue)]
        if transition_id == self.TRANSITION_FILL_COLOR_ALPHA:
            return [float(self.fill_color.alpha)]
        if transition_id == self.TRANSITION_BORDER_COLOR_RGB:
            c = self.border_color
            return [float(c.red), float(c.green), float(c.blue)]
        if transition_id == self.TRANSITION_BORDER_COLOR_ALPHA:
            return [float(self.border_color.alpha)]
        return None

    def _set_color_values(self, transition_id: int, values: Sequence[float]) -> bool:
        if transition_id == self.TRANSITION_FILL_COLOR_RGB:
            self.fill_color = replace(
                self.fill_color, red=values[0], green=values[1], blue=values[2]
            )
        elif transition_id == self.TRANSITION_FILL_COLOR_ALPHA:
            self.fill_color = replace(self.fill_color, alpha=values[0])
        elif transition_id == self.TRANSITION_BORDER_COLOR_RGB:
            self.border_color = replace(
                self.border_color, red=values[0], green=values[1], blue=values[2]
            )
        elif transition_id == self.TRANSITION_BORDER_COLOR_ALPHA:
            self.border_color = replace(self.border_color, alpha=values[0])
        else:
            return False
        return True


@dataclass
class Circle(Shape):
    """A circle given by its centre and radius."""

    TRANSITION_POSITION = 4
    TRANSITION_RADIUS = 5

    position: Vec2D
    radius: int
    fill_color: RGBAColor
    border_color: RGBAColor = TRANSPARENT

    def __post_init__(self) -> None:
        self.radius = max(0, int(self.radius))

    def rim_points(self) -> list[tuple[float, float]]:
        """Points approximating the circle's outline."""
        cx, cy = self.position.x, self.position.y
        step = 2.0 * math.pi / _CIRCLE_SEGMENTS
        return [
            (cx + self.radius * math.cos(i * step), cy + self.radius * math.sin(i * step))
            for i in range(_CIRCLE_SEGMENTS)
        ]

    def draw(self, window: Any) -> None:
        rim = self.rim_points()
        window.fill_polygon(rim, self.fill_color)
        if self.has_border:
            window.draw_polyline(rim, self.border_color, 1.0, True)

    def get_values(self, transition_id: int) -> list[float]:
        colors = self._color_values(transition_id)
        if colors is not None:
            return colors
        if transition_id == self.TRANSITION_POSITION:
            return [float(self.position.x), float(self.position.y)]
        if transition_id == self.TRANSITION_RADIUS:
            return [float(self.radius)]
        return []

    def set_values(self, transition_id: int, values: Sequence[float]) -> None:
        if self._set_color_values(transition_id, values):
            return
        if transition_id == self.TRANSITION_POSITION:
            self.position = _vec(values)
        elif transition_id == self.TRANSITION_RADIUS:
            self.radius = max(0, int(values[0]))

    def __add__(self, offset: Vec2D) -> Circle:
        if not isinstance(offset, Vec2D):
            return NotImplemented
        return Circle(self.position + offset, self.radius, self.fill_color, self.border_color)

    def __mul__(self, factor: float) -> Circle:
        return Circle(self.position * factor, self.radius, self.fill_color, self.border_color)


@dataclass
class Line(Shape):
    """A straight segment between two points; its border is its fill colour."""

    TRANSITION_FIRST_POSITION = 4
    TRANSITION_SECOND_POSITION = 5
    TRANSITION_LINE_WIDTH = 6

    first_position: Vec2D
    second_position: Vec2D
    fill_color: RGBAColor
    line_width: float = 1.0
    border_color: RGBAColor = field(init=False)

    def __post_init__(self) -> None:
        self.border_color = self.fill_color
        self.line_width = float(self.line_width)

    def draw(self, window: Any) -> None:
        window.draw_polyline(
            [_point(self.first_position), _point(self.second_position)],
            self.fill_color,
            self.line_width,
            False,
        )

    def get_values(self, transition_id: int) -> list[float]:
        colors = self._color_values(transition_id)
        if colors is not None:
            return colors
        if transition_id == self.TRANSITION_FIRST_POSITION:
            return [float(self.first_position.x), float(self.first_position.y)]
        if transition_id == self.TRANSITION_SECOND_POSITION:
            return [float(self.second_position.x), float(self.second_position.y)]
        if transition_id == self.TRANSITION_LINE_WIDTH:
            return [self.line_width]
        return []

    def set_values(self, transition_id: int, values: Sequence[float]) -> None:
        if self._set_color_values(transition_id, values):
            return
        if transition_id == self.TRANSITION_FIRST_POSITION:
            self.first_position = _vec(values)
        elif transition_id == self.TRANSITION_SECOND_POSITION:
            self.second_position = _vec(values)
        elif transition_id == self.TRANSITION_LINE_WIDTH:
            self.line_width = float(values[0])

    def __add__(self, offset: Vec2D) -> Line:
        if not isinstance(offset, Vec2D):
            return NotImplemented
        return Line(self.first_position + offset, self.second_position + offset, self.fill_color)

    def __mul__(self, factor: float) -> Line:
        return Line(self.first_position * factor, self.second_position * factor, self.fill_color)


@dataclass
class Rectangle(Shape):
    """An axis-aligned rectangle given by two opposite corners."""

    TRANSITION_FIRST_POSITION = 4
    TRANSITION_SECOND_POSITION = 5

    first_position: Vec2D
    second_position: Vec2D
    fill_color: RGBAColor
    border_color: RGBAColor = TRANSPARENT

    @staticmethod
    def from_size(
        position: Vec2D,
        width: int,
        height: int,
        fill_color: RGBAColor,
        border_color: RGBAColor = TRANSPARENT,
    ) -> Rectangle:
        """Build a rectangle from its top-left corner and its size."""
        return Rectangle(
            Vec2D(position.x, position.y),
            Vec2D(position.x + int(width), position.y + int(height)),
            fill_color,
            border_color,
        )

    def corners(self) -> list[tuple[int, int]]:
        first, second = self.first_position, self.second_position
        return [
            (first.x, first.y),
            (first.x, second.y),
            (second.x, second.y),
            (second.x, first.y),
        ]

    def draw(self, window: Any) -> None:
        corners = self.corners()
        window.fill_polygon(corners, self.fill_color)
        if self.has_border:
            window.draw_polyline(corners, self.border_color, 1.0, True)

    def get_values(self, transition_id: int) -> list[float]:
        colors = self._color_values(transition_id)
        if colors is not None:
            return colors
        if transition_id == self.TRANSITION_FIRST_POSITION:
            return [float(self.first_position.x), float(self.first_position.y)]
        if transition_id == self.TRANSITION_SECOND_POSITION:
            return [float(self.second_position.x), float(self.second_position.y)]
        return []

    def set_values(self, transition_id: int, values: Sequence[float]) -> None:
        if self._set_color_values(transition_id, values):
            return
        if transition_id == self.TRANSITION_FIRST_POSITION:
            self.first_position = _vec(values)
        elif transition_id == self.TRANSITION_SECOND_POSITION:
            self.second_position = _vec(values)

    def __add__(self, offset: Vec2D) -> Rectangle:
        if not isinstance(offset, Vec2D):
            return NotImplemented
        return Rectangle(
            self.first_position + offset,
            self.second_position + offset,
            self.fill_color,
            self.border_color,
        )

    def __mul__(self, factor: float) -> Rectangle:
        return Rectangle(
            self.first_position * factor,
            self.second_position * factor,
            self.fill_color,
            self.border_color,
        )


@dataclass
class Triangle(Shape):
    """A triangle given by its three vertices."""

    TRANSITION_FIRST_POSITION = 4
    TRANSITION_SECOND_POSITION = 5
    TRANSITION_THIRD_POSITION = 6

    first_position: Vec2D
    second_position: Vec2D
    third_position: Vec2D
    fill_color: RGBAColor
    border_color: RGBAColor = TRANSPARENT

    def vertices(self) -> list[tuple[int, int]]:
        return [
            _point(self.first_position),
            _point(self.second_position),
            _point(self.third_position),
        ]

    def draw(self, window: Any) -> None:
        vertices = self.vertices()
        window.fill_polygon(vertices, self.fill_color)
        if self.has_border:
            window.draw_polyline(vertices, self.border_color, 1.0, True)

    def get_values(self, transition_id: int) -> list[float]:
        colors = self._color_values(transition_id)
        if colors is not None:
            return colors
        if transition_id == self.TRANSITION_FIRST_POSITION:
            return [float(self.first_position.x), float(self.first_position.y)]
        if transition_id == self.TRANSITION_SECOND_POSITION:
            return [float(self.second_position.x), float(self.second_position.y)]
        if transition_id == self.TRANSITION_THIRD_POSITION:
            return [float(self.third_position.x), float(self.third_position.y)]
        return []

    def set_values(self, transition_id: int, values: Sequence[float]) -> None:
        if self._set_color_values(transition_id, values):
            return
        if transition_id == self.TRANSITION_FIRST_POSITION:
            self.first_position = _vec(values)
        elif transition_id == self.TRANSITION_SECOND_POSITION:
            self.second_position = _vec(values)
        elif transition_id == self.TRANSITION_THIRD_POSITION:
            self.third_position = _vec(values)

    def __add__(self, offset: Vec2D) -> Triangle:
        if not isinstance(offset, Vec2D):
            return NotImplemented
        return Triangle(
            self.first_position + offset,
            self.second_position + offset,
            self.third_position + offset,
            self.fill_color,
            self.border_color,
        )

    def __mul__(self, factor: float) -> Triangle:
        return Triangle(
            self.first_position * factor,
            self.second_position * factor,
            self.third_position * factor,
            self.fill_color,
            self.border_color,
        )