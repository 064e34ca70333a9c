"""Timed interpolation of object properties."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from datetime import timedelta
from enum import Enum, auto

Clock = Callable[[], float]
Duration = "float | timedelta"


def _seconds(value: float | timedelta) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


class Transitionable(ABC):
    """An object whose numeric properties can be read and written by id."""

    @abstractmethod
    def get_values(self, transition_id: int) -> list[float]:
        """Current values of the property with this id."""

    @abstractmethod
    def set_values(self, transition_id: int, values: Sequence[float]) -> None:
        """Write new values to the property with this id."""


class TransitionMode(Enum):
    """What a transition does once it reaches its destination."""

    FINITE = auto()
    FINITE_REVERSE = auto()
    LOOP = auto()
    LOOP_SMOOTH = auto()


class FinishMode(Enum):
    """Where a transition leaves its target when finished early."""

    START = auto()
    CURRENT = auto()
    DESTINATION = auto()


class TransitionContract:
    """Describes a transition: target, property, duration and destination."""

    def __init__(
        self,
        target: Transitionable,
        transition_id: int,
        duration: float | timedelta,
        destination: Sequence[float],
        delay: float | timedelta = 0.0,
        mode: TransitionMode = TransitionMode.FINITE,
    ) -> None:
        self.target = target
        self.transition_id = transition_id
        self.duration = _seconds(duration)
        self.delay = _seconds(delay)
        self.mode = mode
        self.destination = [float(v) for v in destination]
        current = [float(v) for v in target.get_values(transition_id)][: len(self.destination)]
        current.extend([0.0] * (len(self.destination) - len(current)))
        self.beginning = current
        self.destination_callback: Callable[[], None] | None = None

    def set_destination_callback(self, callback: Callable[[], None] | None) -> None:
        """Set the function called each time the destination is reached."""
        self.destination_callback = callback


class Transition:
    """A running transition built from a contract."""

    def __init__(self, contract: TransitionContract, clock: Clock = time.monotonic) -> None:
        self.contract = contract
        self._clock = clock
        self._start_time = clock() + contract.delay
        self._elapsed = 0.0
        self._reversed = False
        self._finished = False

    @property
    def target(self) -> Transitionable:
        return self.contract.target

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def reversed(self) -> bool:
        return self._reversed

    @property
    def finished(self) -> bool:
        return self._finished

    def set_elapsed(self, elapsed: float | timedelta) -> None:
        """Move to a point in time; ignored while the start delay runs."""
        if self._clock() < self._start_time:
            return
        self._elapsed = _seconds(elapsed)
        self._update_values()

    def add_to_elapsed(self, added: float | timedelta) -> None:
        self.set_elapsed(self._elapsed + _seconds(added))

    def finish(self, finish_mode: FinishMode = FinishMode.CURRENT) -> None:
        """Mark finished, leaving the target as the finish mode says."""
        self._finished = True
        contract = self.contract
        if finish_mode is FinishMode.START:
            contract.target.set_values(contract.transition_id, list(contract.beginning))
        elif finish_mode is FinishMode.DESTINATION:
            contract.target.set_values(contract.transition_id, list(contract.destination))

    def _restart(self) -> None:
        self._start_time = self._clock()
        self._elapsed = 0.0

    def _update_values(self) -> None:
        if self._finished:
            return
        contract = self.contract
        if contract.duration <= 0:
            progress = 1.0
        else:
            progress = max(0.0, min(self._elapsed / contract.duration, 1.0))
        effective = 1.0 - progress if self._reversed else progress
        values = [
            (end - start) * effective + start
            for start, end in zip(contract.beginning, contract.destination)
        ]
        contract.target.set_values(contract.transition_id, values)
        if progress == 1.0:
            self._handle_endlife()

    def _handle_endlife(self) -> None:
        contract = self.contract
        mode = contract.mode
        if mode is TransitionMode.FINITE:
            self.finish(FinishMode.DESTINATION)
        elif mode is TransitionMode.FINITE_REVERSE:
            if not self._reversed:
                self._reversed = True
                self._restart()
            else:
                self.finish(FinishMode.START)
        elif mode is TransitionMode.LOOP:
            contract.target.set_values(contract.transition_id, list(contract.beginning))
            self._restart()
        elif mode is TransitionMode.LOOP_SMOOTH:
            self._reversed = not self._reversed
            self._restart()

        if contract.destination_callback is not None:
            contract.destination_callback()


class TransitionEngine:
    """Keeps running transitions and advances them each frame."""

    def __init__(self, clock: Clock = time.monotonic) -> None:
        self._clock = clock
        self._transitions: list[Transition] = []

    def __len__(self) -> int:
        return len(self._transitions)

    @property
    def transitions(self) -> tuple[Transition, ...]:
        return tuple(self._transitions)

    def update(self, delta: float | timedelta) -> None:
        """Advance all transitions, dropping those already finished."""
        current = self._transitions
        self._transitions = []
        for transition in current:
            if transition.finished:
                continue
            transition.add_to_elapsed(delta)
            self._transitions.append(transition)

    def start_contract(self, contract: TransitionContract) -> Transition:
        transition = Transition(contract, self._clock)
        self._transitions.append(transition)
        return transition

    def finish_every_transition(self, finish_mode: FinishMode = FinishMode.CURRENT) -> None:
        for transition in self._transitions:
            transition.finish(finish_mode)

    def finish_every_transition_of_target(
        self, target: Transitionable, finish_mode: FinishMode = FinishMode.CURRENT
    ) -> None:
        for transition in self._transitions:
            if transition.target is target:
                transition.finish(finish_mode)