"""Game window: keyboard state, event queue and drawing primitives."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

import pygame

from kenjiman.color import BLACK, RGBAColor
from kenjiman.events import Event, EventManager, EventType
from kenjiman.fonts import GlutFont
from kenjiman.vec2d import Vec2D

Point = tuple[float, float]


class Drawable(Protocol):
    def draw(self, window: MinGL) -> None: ...


@dataclass(frozen=True)
class Key:
    """A key: a character code, or a special key code when ``special`` is set."""

    code: int
    special: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.code, str):
            if len(self.code) != 1:
                raise ValueError(f"a key is a single character, not {self.code!r}")
            object.__setattr__(self, "code", ord(self.code))
        else:
            object.__setattr__(self, "code", int(self.code))


KEY_ESCAPE = Key(27)
KEY_LEFT = Key(100, True)
KEY_UP = Key(101, True)
KEY_RIGHT = Key(102, True)
KEY_DOWN = Key(103, True)

_FUNCTION_KEYS = (
    pygame.K_F1, pygame.K_F2, pygame.K_F3, pygame.K_F4, pygame.K_F5, pygame.K_F6,
    pygame.K_F7, pygame.K_F8, pygame.K_F9, pygame.K_F10, pygame.K_F11, pygame.K_F12,
)
_SPECIAL_KEYS: dict[int, int] = {key: number for number, key in enumerate(_FUNCTION_KEYS, 1)}
_SPECIAL_KEYS.update({
    pygame.K_LEFT: 100,
    pygame.K_UP: 101,
    pygame.K_RIGHT: 102,
    pygame.K_DOWN: 103,
    pygame.K_PAGEUP: 104,
    pygame.K_PAGEDOWN: 105,
    pygame.K_HOME: 106,
    pygame.K_END: 107,
    pygame.K_INSERT: 108,
})


def _as_key(key: Key | str | int) -> Key:
    return key if isinstance(key, Key) else Key(key)


def _rgba(color: RGBAColor) -> tuple[int, int, int, int]:
    return (color.red, color.green, color.blue, color.alpha)


class MinGL:
    """A drawing window; draws off screen until init_graphic opens it."""

    def __init__(
        self,
        name: str = "",
        window_size: Vec2D | None = None,
        window_position: Vec2D | None = None,
        background_color: RGBAColor = BLACK,
    ) -> None:
        size = window_size if window_size is not None else Vec2D(640, 640)
        self.name = name
        self.window_position = window_position if window_position is not None else Vec2D(128, 128)
        self.background_color = background_color
        self.events = EventManager()
        self.surface = pygame.Surface((size.x, size.y), pygame.SRCALPHA)
        self._keys: dict[Key, bool] = {}
        self._held: dict[int, Key] = {}
        self._fonts: dict[GlutFont, Any] = {}
        self._open = False
        self._display = False

    def __enter__(self) -> MinGL:
        self.init_graphic()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop_graphic()

    @property
    def size(self) -> Vec2D:
        width, height = self.surface.get_size()
        return Vec2D(width, height)

    def init_graphic(self) -> None:
        """Open the window on screen."""
        position = self.window_position
        os.environ["SDL_VIDEO_WINDOW_POS"] = f"{position.x},{position.y}"
        pygame.display.init()
        pygame.font.init()
        self.surface = pygame.display.set_mode(self.surface.get_size())
        pygame.display.set_caption(self.name)
        pygame.key.set_repeat()
        self._display = True
        self._open = True
        self.clear_screen()
        self._pump_events()

    def stop_graphic(self) -> None:
        """Close the on-screen window, if any."""
        if self._display:
            size = self.surface.get_size()
            pygame.display.quit()
            self.surface = pygame.Surface(size, pygame.SRCALPHA)
            self._display = False
        self._open = False

    def finish_frame(self) -> None:
        """Process pending input and show what was drawn."""
        if self._display:
            self._pump_events()
            pygame.display.flip()

    def clear_screen(self) -> None:
        self.surface.fill(_rgba(self.background_color))

    def is_open(self) -> bool:
        return self._open

    def is_pressed(self, key: Key | str | int) -> bool:
        return self._keys.get(_as_key(key), False)

    def reset_key(self, key: Key | str | int) -> None:
        self._keys[_as_key(key)] = False

    def key_down(self, key: Key | str | int) -> None:
        self._keys[_as_key(key)] = True

    def key_up(self, key: Key | str | int) -> None:
        self._keys[_as_key(key)] = False

    def mouse_click(self, button: int, state: int, x: int, y: int) -> None:
        self.events.push_event(Event(EventType.MOUSE_CLICK, x, y, button, state))

    def mouse_drag(self, x: int, y: int) -> None:
        self.events.push_event(Event(EventType.MOUSE_DRAG, x, y))

    def mouse_move(self, x: int, y: int) -> None:
        self.events.push_event(Event(EventType.MOUSE_MOVE, x, y))

    def close(self) -> None:
        self._open = False

    def draw(self, drawable: Drawable) -> MinGL:
        drawable.draw(self)
        return self

    def __lshift__(self, drawable: Drawable) -> MinGL:
        return self.draw(drawable)

    def _paint(self, color: RGBAColor, painter: Callable[[Any, tuple], None]) -> None:
        if color.alpha == 0:
            return
        if color.alpha == 255:
            painter(self.surface, _rgba(color))
            return
        layer = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        painter(layer, _rgba(color))
        self.surface.blit(layer, (0, 0))

    def fill_polygon(self, points: Iterable[Point], color: RGBAColor) -> None:
        vertices = list(points)
        self._paint(color, lambda target, rgba: pygame.draw.polygon(target, rgba, vertices))

    def draw_polyline(
        self,
        points: Iterable[Point],
        color: RGBAColor,
        width: float = 1.0,
        closed: bool = False,
    ) -> None:
        vertices = list(points)
        thickness = max(1, round(width))
        self._paint(
            color,
            lambda target, rgba: pygame.draw.lines(target, rgba, closed, vertices, thickness),
        )

    def draw_points(self, points: Iterable[tuple[int, int, RGBAColor]]) -> None:
        """Set single pixels, blending those that are partly transparent."""
        layer = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        width, height = layer.get_size()
        for x, y, color in points:
            if color.alpha and 0 <= x < width and 0 <= y < height:
                layer.set_at((x, y), _rgba(color))
        self.surface.blit(layer, (0, 0))

    def _font(self, font: GlutFont) -> Any:
        if not pygame.font.get_init():
            pygame.font.init()
        if font not in self._fonts:
            self._fonts[font] = pygame.font.Font(None, font.height())
        return self._fonts[font]

    def draw_string(
        self, position: Vec2D, content: str, color: RGBAColor, font: GlutFont
    ) -> None:
        """Draw text whose first baseline starts at the position."""
        if color.alpha == 0:
            return
        rendered = self._font(font)
        y = position.y - rendered.get_ascent()
        for line in content.split("\n"):
            image = rendered.render(line, True, _rgba(color)[:3])
            if color.alpha < 255:
                image.set_alpha(color.alpha)
            self.surface.blit(image, (position.x, y))
            y += font.height()

    def _pump_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
            elif event.type == pygame.KEYDOWN:
                key = self._translate_key(event)
                if key is not None:
                    self._held[event.key] = key
                    self.key_down(key)
            elif event.type == pygame.KEYUP:
                key = self._held.pop(event.key, None)
                if key is not None:
                    self.key_up(key)
            elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                state = 0 if event.type == pygame.MOUSEBUTTONDOWN else 1
                x, y = event.pos
                self.mouse_click(event.button - 1, state, x, y)
            elif event.type == pygame.MOUSEMOTION:
                x, y = event.pos
                if any(event.buttons):
                    self.mouse_drag(x, y)
                else:
                    self.mouse_move(x, y)

    @staticmethod
    def _translate_key(event: Any) -> Key | None:
        if event.key in _SPECIAL_KEYS:
            return Key(_SPECIAL_KEYS[event.key], True)
        text = getattr(event, "unicode", "")
        if text and len(text) == 1:
            return Key(text)
        return None


def polygon_points(points: Sequence[Point]) -> list[Point]:
    """Copy of a point sequence as a list of float pairs."""
    return [(float(x), float(y)) for x, y in points]