import pytest

from kenjiman.events import Event, EventManager, EventType


def test_empty_manager_has_no_event():
    manager = EventManager()
    assert not manager.has_event()
    assert len(manager) == 0


def test_events_come_out_in_order():
    manager = EventManager()
    first = Event(EventType.MOUSE_MOVE, 3, 4)
    second = Event(EventType.MOUSE_CLICK, 5, 6, button=0, state=1)
    third = Event(EventType.MOUSE_DRAG, 7, 8)
    for event in (first, second, third):
        manager.push_event(event)
    assert manager.has_event()
    assert [manager.pull_event() for _ in range(3)] == [first, second, third]
    assert not manager.has_event()


def test_clear_events_empties_queue():
    manager = EventManager()
    manager.push_event(Event(EventType.MOUSE_MOVE, 1, 1))
    manager.push_event(Event(EventType.MOUSE_MOVE, 2, 2))
    manager.clear_events()
    assert not manager.has_event()
    assert len(manager) == 0


def test_pull_from_empty_raises():
    with pytest.raises(IndexError):
        EventManager().pull_event()


def test_event_fields_kept():
    event = Event(EventType.MOUSE_CLICK, 10, 20, button=2, state=1)
    manager = EventManager()
    manager.push_event(event)
    pulled = manager.pull_event()
    assert (pulled.type, pulled.x, pulled.y, pulled.button, pulled.state) == (
        EventType.MOUSE_CLICK,
        10,
        20,
        2,
        1,
    )