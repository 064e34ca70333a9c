"""Rules of the two-player maze game: moves, pellets, teleporters and rounds."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from kenjiman.params import Params
from kenjiman.vec2d import Vec2D

GameMap = list[list[int]]

WALL = 0
RICE = 1
EMPTY = 4
BONUS = 6

ROUNDS_TO_WIN = 2
BONUS_POINTS = 5


class Direction(Enum):
    """A heading on the grid; NONE means standing still."""

    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4

    @property
    def delta(self) -> Vec2D:
        """Displacement of one step in this direction."""
        return Vec2D(*_DELTAS[self])

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS = {
    Direction.NONE: (0, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.NONE: Direction.NONE,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_KEY_NAMES = {
    Direction.UP: "HAUT",
    Direction.DOWN: "BAS",
    Direction.LEFT: "GAUCHE",
    Direction.RIGHT: "DROITE",
}

PLAYER_ONE_START = Vec2D(13, 11)
PLAYER_TWO_START = Vec2D(13, 17)
_ARRIVAL_LEFT = Vec2D(1, 14)
_PLAYER_ARRIVAL_RIGHT = Vec2D(26, 14)
_BOT_ARRIVAL_RIGHT = Vec2D(25, 14)


@dataclass
class GameState:
    """Everything that changes while the game runs."""

    paused: bool = False
    bot: bool = True
    teleport_left: Vec2D = field(default_factory=lambda: Vec2D(0, 14))
    teleport_right: Vec2D = field(default_factory=lambda: Vec2D(27, 14))
    player_one: Vec2D = field(default_factory=lambda: Vec2D(PLAYER_ONE_START.x, PLAYER_ONE_START.y))
    player_two: Vec2D = field(default_factory=lambda: Vec2D(PLAYER_TWO_START.x, PLAYER_TWO_START.y))
    score_one: int = 0
    score_two: int = 0
    points_one: int = 0
    points_two: int = 0
    direction_one: Direction = Direction.NONE
    direction_two: Direction = Direction.NONE
    last_move_one: Direction = Direction.NONE
    last_move_two: Direction = Direction.NONE
    victory: int = 0
    rice_eaten: int = 0
    bonus_one: int = 0
    bonus_two: int = 0


def award_round(state: GameState) -> None:
    """Give the round to the higher score; two rounds win the match."""
    if state.score_one > state.score_two:
        state.points_one += 1
    elif state.score_one < state.score_two:
        state.points_two += 1
    if state.points_one == ROUNDS_TO_WIN:
        state.victory = 1
    elif state.points_two == ROUNDS_TO_WIN:
        state.victory = 2


def toggle_round(state: GameState, game_map: GameMap, reference_map: GameMap) -> None:
    """Switch between the results pause and a fresh round.

    Leaving the pause scores the finished round, restores the map from the
    reference and puts both players back at their starting cells. Entering
    it after a won match clears the match.
    """
    if state.paused:
        state.paused = False
        state.rice_eaten = 0
        game_map[:] = [list(row) for row in reference_map]
        award_round(state)
        state.score_one = 0
        state.score_two = 0
        state.player_one = Vec2D(PLAYER_ONE_START.x, PLAYER_ONE_START.y)
        state.last_move_one = Direction.NONE
        state.player_two = Vec2D(PLAYER_TWO_START.x, PLAYER_TWO_START.y)
        state.last_move_two = Direction.NONE
    else:
        state.paused = True
        if state.victory != 0:
            state.victory = 0
            state.points_one = 0
            state.points_two = 0


def pellet_kind(cell: int) -> int:
    """1 for rice, 2 for a bonus pellet, 0 for anything else."""
    if cell == RICE:
        return 1
    if cell == BONUS:
        return 2
    return 0


def in_contact(first: Vec2D, second: Vec2D) -> bool:
    return first == second


def _cell(game_map: GameMap, position: Vec2D) -> int:
    if 0 <= position.y < len(game_map) and 0 <= position.x < len(game_map[position.y]):
        return game_map[position.y][position.x]
    return WALL


def _neighbour(game_map: GameMap, position: Vec2D, direction: Direction) -> int:
    return _cell(game_map, position + direction.delta)


def _eat(state: GameState, game_map: GameMap, seat: str, bonus_points: int) -> None:
    position: Vec2D = getattr(state, f"player_{seat}")
    kind = pellet_kind(_cell(game_map, position))
    if kind == 0:
        return
    game_map[position.y][position.x] = EMPTY
    state.rice_eaten += 1
    score_name = f"score_{seat}"
    if kind == 1:
        setattr(state, score_name, getattr(state, score_name) + 1)
    else:
        setattr(state, score_name, getattr(state, score_name) + bonus_points)
        bonus_name = f"bonus_{seat}"
        setattr(state, bonus_name, getattr(state, bonus_name) + 1)


def _bot_choice(game_map: GameMap, position: Vec2D, last: Direction) -> Direction:
    forbidden = Vec2D() if last is Direction.NONE else position - last.delta
    if position == forbidden:
        return Direction.NONE

    for direction in (Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP):
        if _neighbour(game_map, position, direction) == RICE:
            return direction
    if last is not Direction.NONE and _neighbour(game_map, position, last) != WALL:
        return last
    for direction in (Direction.UP, Direction.RIGHT, Direction.LEFT, Direction.DOWN):
        if _neighbour(game_map, position, direction) != WALL and last is not direction.opposite:
            return direction
    return Direction.NONE


def bot_step(state: GameState, game_map: GameMap) -> None:
    """Move the computer-driven second player by one cell."""
    choice = _bot_choice(game_map, state.player_two, state.last_move_two)

    if in_contact(state.player_one, state.player_two):
        heading = state.direction_two
        if heading is not Direction.NONE:
            state.direction_two = heading.opposite
            state.player_one = state.player_one + heading.opposite.delta

    if state.player_two == state.teleport_left:
        state.player_two = Vec2D(_BOT_ARRIVAL_RIGHT.x, _BOT_ARRIVAL_RIGHT.y)
        state.direction_two = Direction.LEFT
    elif state.player_two == state.teleport_right:
        state.player_two = Vec2D(_ARRIVAL_LEFT.x, _ARRIVAL_LEFT.y)
        state.direction_two = Direction.RIGHT

    if choice is not Direction.NONE:
        _eat(state, game_map, "two", BONUS_POINTS)
        state.player_two = state.player_two + choice.delta

    state.last_move_two = choice


def _player_step(
    state: GameState,
    game_map: GameMap,
    pressed: Callable[[str], bool],
    params: Params,
    seat: str,
    suffix: str,
) -> None:
    position_name = f"player_{seat}"
    direction_name = f"direction_{seat}"

    position: Vec2D = getattr(state, position_name)
    if position == state.teleport_left:
        setattr(state, position_name, Vec2D(_PLAYER_ARRIVAL_RIGHT.x, _PLAYER_ARRIVAL_RIGHT.y))
        setattr(state, direction_name, Direction.LEFT)
    elif position == state.teleport_right:
        setattr(state, position_name, Vec2D(_ARRIVAL_LEFT.x, _ARRIVAL_LEFT.y))
        setattr(state, direction_name, Direction.RIGHT)

    position = getattr(state, position_name)
    for direction, name in _KEY_NAMES.items():
        if pressed(params[name + suffix]) and _neighbour(game_map, position, direction) != WALL:
            setattr(state, direction_name, direction)
            break

    heading: Direction = getattr(state, direction_name)
    if heading is not Direction.NONE and _neighbour(game_map, position, heading) != WALL:
        if seat == "one":
            bonus = BONUS_POINTS if heading is Direction.RIGHT else 1
        else:
            bonus = BONUS_POINTS
        _eat(state, game_map, seat, bonus)
        setattr(state, position_name, position + heading.delta)

    if in_contact(state.player_one, state.player_two) and heading is not Direction.NONE:
        setattr(state, direction_name, heading.opposite)
        setattr(state, position_name, getattr(state, position_name) + heading.opposite.delta)


def player_one_step(
    state: GameState, game_map: GameMap, pressed: Callable[[str], bool], params: Params
) -> None:
    """Steer and move the first player from the keys currently held."""
    _player_step(state, game_map, pressed, params, "one", "J1")


def player_two_step(
    state: GameState, game_map: GameMap, pressed: Callable[[str], bool], params: Params
) -> None:
    """Steer and move the second player from the keys currently held."""
    _player_step(state, game_map, pressed, params, "two", "J2")