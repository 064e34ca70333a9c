from datetime import timedelta

from kenjiman.transition import (
    FinishMode,
    Transition,
    TransitionContract,
    TransitionEngine,
    TransitionMode,
    Transitionable,
)

SIZE = 0
POSITION = 1


class Box(Transitionable):
    def __init__(self, size=0.0, position=(0.0, 0.0)):
        self.values = {SIZE: [size], POSITION: list(position)}

    def get_values(self, transition_id):
        return list(self.values[transition_id])

    def set_values(self, transition_id, values):
        self.values[transition_id] = list(values)


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def make(box, mode=TransitionMode.FINITE, delay=0.0, clock=None):
    contract = TransitionContract(box, SIZE, 2.0, [10.0], delay=delay, mode=mode)
    calls = []
    contract.set_destination_callback(lambda: calls.append(1))
    return Transition(contract, clock or FakeClock()), contract, calls


def test_contract_captures_beginning():
    box = Box(position=(3.0, 4.0))
    contract = TransitionContract(box, POSITION, 1.0, [7.0, 8.0])
    assert contract.beginning == [3.0, 4.0]
    assert contract.destination == [7.0, 8.0]


def test_beginning_padded_to_destination_length():
    box = Box(size=3.0)
    contract = TransitionContract(box, SIZE, 1.0, [1.0, 2.0, 3.0])
    assert contract.beginning == [3.0, 0.0, 0.0]


def test_durations_accept_timedelta():
    contract = TransitionContract(Box(), SIZE, timedelta(seconds=2), [1.0], delay=timedelta(seconds=1))
    assert contract.duration == 2.0
    assert contract.delay == 1.0


def test_halfway_interpolates():
    box = Box()
    transition, _, _ = make(box)
    transition.set_elapsed(1.0)
    assert box.values[SIZE] == [5.0]
    assert not transition.finished


def test_finite_reaches_destination_and_finishes():
    box = Box()
    transition, contract, calls = make(box)
    transition.set_elapsed(2.0)
    assert box.values[SIZE] == contract.destination
    assert transition.finished
    assert calls == [1]


def test_progress_is_clamped():
    box = Box()
    transition, contract, _ = make(box)
    transition.set_elapsed(-5.0)
    assert box.values[SIZE] == contract.beginning
    transition.set_elapsed(100.0)
    assert box.values[SIZE] == contract.destination


def test_add_to_elapsed_accumulates():
    box = Box()
    transition, contract, _ = make(box)
    transition.add_to_elapsed(1.0)
    transition.add_to_elapsed(1.0)
    assert box.values[SIZE] == contract.destination
    assert transition.finished


def test_finite_reverse_goes_back_then_finishes():
    box = Box()
    transition, contract, calls = make(box, TransitionMode.FINITE_REVERSE)
    transition.set_elapsed(2.0)
    assert transition.reversed
    assert not transition.finished
    assert transition.elapsed == 0.0
    assert box.values[SIZE] == contract.destination
    transition.set_elapsed(1.0)
    assert box.values[SIZE] == [5.0]
    transition.set_elapsed(2.0)
    assert box.values[SIZE] == contract.beginning
    assert transition.finished
    assert len(calls) == 2


def test_loop_resets_to_beginning():
    box = Box()
    transition, contract, calls = make(box, TransitionMode.LOOP)
    transition.set_elapsed(2.0)
    assert box.values[SIZE] == contract.beginning
    assert not transition.finished
    assert transition.elapsed == 0.0
    assert calls == [1]


def test_loop_smooth_toggles_direction():
    box = Box()
    transition, contract, _ = make(box, TransitionMode.LOOP_SMOOTH)
    transition.set_elapsed(2.0)
    assert transition.reversed
    transition.set_elapsed(2.0)
    assert not transition.reversed
    assert box.values[SIZE] == contract.beginning
    assert not transition.finished


def test_delay_blocks_progress_until_start():
    box = Box()
    clock = FakeClock(0.0)
    transition, contract, _ = make(box, delay=5.0, clock=clock)
    transition.set_elapsed(2.0)
    assert transition.elapsed == 0.0
    assert box.values[SIZE] == contract.beginning
    clock.now = 5.0
    transition.set_elapsed(2.0)
    assert box.values[SIZE] == contract.destination


def test_finish_modes():
    box = Box()
    transition, contract, _ = make(box)
    transition.finish(FinishMode.DESTINATION)
    assert box.values[SIZE] == contract.destination
    assert transition.finished

    box = Box()
    transition, contract, _ = make(box)
    transition.set_elapsed(1.0)
    midway = box.get_values(SIZE)
    transition.finish(FinishMode.CURRENT)
    assert box.values[SIZE] == midway
    transition.finish(FinishMode.START)
    assert box.values[SIZE] == contract.beginning


def test_finished_transition_no_longer_moves_target():
    box = Box()
    transition, contract, _ = make(box)
    transition.finish(FinishMode.START)
    transition.set_elapsed(2.0)
    assert box.values[SIZE] == contract.beginning


def test_engine_runs_and_drops_finished():
    box = Box()
    engine = TransitionEngine()
    contract = TransitionContract(box, SIZE, 2.0, [10.0])
    engine.start_contract(contract)
    assert len(engine) == 1
    engine.update(2.0)
    assert box.values[SIZE] == contract.destination
    assert engine.transitions[0].finished
    assert len(engine) == 1
    engine.update(2.0)
    assert len(engine) == 0


def test_engine_update_accepts_timedelta():
    box = Box()
    engine = TransitionEngine()
    contract = TransitionContract(box, SIZE, 2.0, [10.0])
    engine.start_contract(contract)
    engine.update(timedelta(seconds=2))
    assert box.values[SIZE] == contract.destination


def test_engine_finish_every_transition():
    first, second = Box(), Box()
    engine = TransitionEngine()
    c1 = TransitionContract(first, SIZE, 2.0, [10.0])
    c2 = TransitionContract(second, POSITION, 2.0, [4.0, 6.0])
    engine.start_contract(c1)
    engine.start_contract(c2)
    engine.finish_every_transition(FinishMode.DESTINATION)
    assert first.values[SIZE] == c1.destination
    assert second.values[POSITION] == c2.destination
    assert all(t.finished for t in engine.transitions)


def test_engine_finish_only_given_target():
    first, second = Box(), Box()
    engine = TransitionEngine()
    c1 = TransitionContract(first, SIZE, 2.0, [10.0])
    c2 = TransitionContract(second, SIZE, 2.0, [10.0])
    t1 = engine.start_contract(c1)
    t2 = engine.start_contract(c2)
    engine.finish_every_transition_of_target(first, FinishMode.DESTINATION)
    assert t1.finished and not t2.finished
    assert first.values[SIZE] == c1.destination
    assert second.values[SIZE] == c2.beginning
    engine.update(0.0)
    assert engine.transitions == (t2,)