from kenjiman.bgtext import BgText
from kenjiman.color import BLUE, RED, RGBAColor
from kenjiman.shapes import Rectangle
from kenjiman.text import Text
from kenjiman.vec2d import Vec2D


class _Recorder:
    def __init__(self):
        self.drawn = []

    def __lshift__(self, drawable):
        self.drawn.append(drawable)
        return self


def _make():
    return BgText(Vec2D(64, 64), "Hello, World!", BLUE, RED)


def test_background_covers_text():
    item = _make()
    assert item.background.first_position == item.text.compute_visible_position()
    assert item.background.second_position == item.text.compute_visible_end_position()
    assert item.background.fill_color == RED


def test_draw_order_background_then_text():
    item = _make()
    window = _Recorder()
    item.draw(window)
    assert len(window.drawn) == 2
    assert isinstance(window.drawn[0], Rectangle)
    assert isinstance(window.drawn[1], Text)
    assert window.drawn[1].content == "Hello, World!"


def test_get_values_reads_colours():
    item = _make()
    assert item.get_values(BgText.TRANSITION_TEXT_COLOR) == [0.0, 0.0, 255.0]
    assert item.get_values(BgText.TRANSITION_BACKGROUND_COLOR) == [255.0, 0.0, 0.0]


def test_set_values_round_trip():
    item = _make()
    item.set_values(BgText.TRANSITION_TEXT_COLOR, [255.0, 0.0, 0.0])
    item.set_values(BgText.TRANSITION_BACKGROUND_COLOR, [0.0, 0.0, 255.0])
    assert item.get_values(BgText.TRANSITION_TEXT_COLOR) == [255.0, 0.0, 0.0]
    assert item.get_values(BgText.TRANSITION_BACKGROUND_COLOR) == [0.0, 0.0, 255.0]
    assert item.text.text_color == RGBAColor(255, 0, 0)


def test_unknown_id_changes_nothing():
    item = _make()
    item.set_values(99, [1.0, 2.0, 3.0])
    assert item.get_values(99) == []
    assert item.text.text_color == BLUE
    assert item.background.fill_color == RED