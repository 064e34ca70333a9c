import pygame
import pytest

from kenjiman.color import BLACK, BLUE, RED, RGBAColor
from kenjiman.events import EventType
from kenjiman.shapes import Rectangle
from kenjiman.vec2d import Vec2D
from kenjiman.window import KEY_UP, Key, MinGL


def rgba(color):
    return (color.red, color.green, color.blue, color.alpha)


def make_window():
    window = MinGL("test", Vec2D(64, 48))
    window.clear_screen()
    return window


def test_key_from_character_matches_code():
    assert Key("z") == Key(ord("z"))
    assert Key(ord("z"), True) != Key("z")


def test_key_rejects_long_strings():
    with pytest.raises(ValueError):
        Key("zq")


def test_key_state_follows_presses():
    window = make_window()
    assert not window.is_pressed(Key("z"))
    window.key_down(Key("z"))
    assert window.is_pressed("z")
    window.key_up("z")
    assert not window.is_pressed(Key("z"))


def test_reset_key_and_special_keys():
    window = make_window()
    window.key_down(KEY_UP)
    window.key_down(" ")
    window.reset_key(" ")
    assert window.is_pressed(KEY_UP)
    assert not window.is_pressed(" ")


def test_mouse_events_are_queued_in_order():
    window = make_window()
    window.mouse_move(1, 2)
    window.mouse_drag(3, 4)
    window.mouse_click(0, 1, 5, 6)
    first = window.events.pull_event()
    second = window.events.pull_event()
    third = window.events.pull_event()
    assert (first.type, first.x, first.y) == (EventType.MOUSE_MOVE, 1, 2)
    assert (second.type, second.x, second.y) == (EventType.MOUSE_DRAG, 3, 4)
    assert (third.type, third.button, third.state, third.x, third.y) == (
        EventType.MOUSE_CLICK, 0, 1, 5, 6)
    assert not window.events.has_event()


def test_size_matches_request():
    assert make_window().size == Vec2D(64, 48)


def test_clear_screen_uses_background():
    window = MinGL("bg", Vec2D(8, 8), background_color=BLUE)
    window.clear_screen()
    assert tuple(window.surface.get_at((3, 3))) == rgba(BLUE)


def test_shift_operator_draws_and_chains():
    window = make_window()
    rect = Rectangle.from_size(Vec2D(10, 10), 20, 20, RED)
    assert (window << rect) is window
    assert tuple(window.surface.get_at((20, 20))) == rgba(RED)
    assert tuple(window.surface.get_at((40, 40))) == rgba(BLACK)


def test_transparent_fill_leaves_background():
    window = make_window()
    window.fill_polygon([(0, 0), (30, 0), (30, 30), (0, 30)], RGBAColor(255, 0, 0, 0))
    assert tuple(window.surface.get_at((10, 10))) == rgba(BLACK)


def test_partial_alpha_blends():
    window = make_window()
    window.fill_polygon([(0, 0), (30, 0), (30, 30), (0, 30)], RGBAColor(255, 0, 0, 128))
    red = window.surface.get_at((10, 10)).r
    assert 0 < red < 255


def test_draw_points_sets_pixels():
    window = make_window()
    window.draw_points([(5, 6, BLUE), (100, 100, RED)])
    assert tuple(window.surface.get_at((5, 6))) == rgba(BLUE)


def test_draw_polyline_marks_its_path():
    window = make_window()
    window.draw_polyline([(0, 10), (60, 10)], RED, 3.0, False)
    assert tuple(window.surface.get_at((30, 10))) == rgba(RED)


def test_display_lifecycle_and_keyboard(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    window = MinGL("test", Vec2D(64, 48))
    window.init_graphic()
    try:
        assert window.is_open()
        assert window.size == Vec2D(64, 48)
        pygame.event.post(pygame.event.Event(
            pygame.KEYDOWN, key=pygame.K_z, unicode="z", mod=0, scancode=0))
        window.finish_frame()
        assert window.is_pressed("z")
        window.close()
        assert not window.is_open()
    finally:
        window.stop_graphic()
    assert not window.is_open()