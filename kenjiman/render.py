"""Drawing of the maze game: board, players, scores and the end-of-round screen."""

from __future__ import annotations

from typing import Any

from kenjiman.color import BLUE, MAGENTA, TRANSPARENT, WHITE, YELLOW, RGBAColor
from kenjiman.fonts import GlutFont
from kenjiman.gamelogic import BONUS, RICE, GameMap, GameState
from kenjiman.shapes import Circle
from kenjiman.text import Text
from kenjiman.vec2d import Vec2D

CELL_SIZE = 20
PELLET_RADIUS = 5
PLAYER_RADIUS = 10
INVISIBILITY_FRAMES = 25
RESTART_HINT = "Apuier sur P pour relancer la game"


def _tick_invisibility(counter: int) -> tuple[int, bool]:
    """Advance a bonus counter; report whether the opponent is hidden this frame."""
    if counter == 0:
        return 0, False
    counter += 1
    if counter >= INVISIBILITY_FRAMES:
        counter = 0
    return counter, True


def _hint(height: int) -> Text:
    return Text(Vec2D(60, height - 25), RESTART_HINT, WHITE, GlutFont.BITMAP_HELVETICA_18)


def draw_game(
    window: Any, state: GameState, game_map: GameMap, map_sprite: Any = None
) -> None:
    """Draw one frame of the running game.

    A bonus pellet eaten by one player hides the other player for a short
    while; the counters in the state are advanced here, once per frame.
    """
    color_one: RGBAColor = YELLOW
    color_two: RGBAColor = BLUE

    state.bonus_one, hide_two = _tick_invisibility(state.bonus_one)
    if hide_two:
        color_two = TRANSPARENT
    state.bonus_two, hide_one = _tick_invisibility(state.bonus_two)
    if hide_one:
        color_one = TRANSPARENT

    if map_sprite is not None:
        window << map_sprite

    for y, row in enumerate(game_map):
        for x, cell in enumerate(row):
            position = Vec2D(x * CELL_SIZE, y * CELL_SIZE)
            if cell == RICE:
                window << Circle(position, PELLET_RADIUS, WHITE)
            elif cell == BONUS:
                window << Circle(position, PELLET_RADIUS, MAGENTA)

    window << Circle(state.player_one * CELL_SIZE, PLAYER_RADIUS, color_one)
    window << Circle(state.player_two * CELL_SIZE, PLAYER_RADIUS, color_two)

    width, height = window.size.x, window.size.y
    window << Text(
        Vec2D(width - 100, 20),
        f"joueur1: {state.score_one}",
        WHITE,
        GlutFont.BITMAP_HELVETICA_18,
    )
    window << Text(
        Vec2D(width - 100, 40),
        f"joueur2: {state.score_two}",
        WHITE,
        GlutFont.BITMAP_HELVETICA_18,
    )
    window << _hint(height)


def draw_end_screen(window: Any, state: GameState) -> None:
    """Draw the rounds won by each player and, once decided, the match winner."""
    width, height = window.size.x, window.size.y
    window << Text(
        Vec2D(width - 375, height - 450),
        f"joueur1 : {state.points_one}",
        WHITE,
        GlutFont.BITMAP_HELVETICA_18,
    )
    window << Text(
        Vec2D(width - 375, height - 400),
        f"joueur2 : {state.points_two}",
        WHITE,
        GlutFont.BITMAP_HELVETICA_18,
    )
    window << _hint(height)

    if state.victory != 0:
        window << Text(
            Vec2D(width - 400, height - 475),
            f"Le Gagnant est le joueur : {state.victory}",
            WHITE,
            GlutFont.BITMAP_TIMES_ROMAN_24,
        )