# kenjiman

The rules and the drawing code of a two-player maze game in which the players
race to eat the pellets laid out on a grid, together with the small 2D drawing
toolkit they are built on: vectors, colours, shapes, text, an event queue, a
window and an engine that animates object properties over time. Drawing is
done with pygame.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The toolkit

- `kenjiman.vec2d.Vec2D`: an integer 2D vector with `+`, `-`, `*`, `/` and
  `%` (integer division and remainder round toward zero), ordering by
  magnitude, `magnitude()`, `is_colliding()`, `Vec2D.minimum()` and
  `Vec2D.is_minimum()`.
- `kenjiman.color.RGBAColor`: an immutable RGBA colour whose channels wrap
  like bytes; it can be added to another colour and scaled with `*`. Named
  colours such as `WHITE`, `BLUE` and `TRANSPARENT` live in the same module.
- `kenjiman.errors`: `MinGLError`, carrying a message and an `ErrorCode`.
- `kenjiman.events`: `EventManager`, a first-in, first-out queue of mouse
  `Event`s (`EventType.MOUSE_CLICK`, `MOUSE_DRAG`, `MOUSE_MOVE`).
- `kenjiman.fonts.GlutFont`: the bitmap font faces, with `height()` and
  `text_width()`.
- `kenjiman.shapes`: `Circle`, `Line`, `Rectangle` (also
  `Rectangle.from_size()`) and `Triangle`; each can be drawn, moved with `+ Vec2D`
  and scaled with `* factor`.
- `kenjiman.text.Text`: a string in a `GlutFont`, anchored with
  `HorizontalAlignment` and `VerticalAlignment`.
- `kenjiman.bgtext.BgText`: text drawn over a background rectangle sized to it.
- `kenjiman.transition`: a `TransitionEngine` runs `TransitionContract`s that
  move a property of any `Transitionable` (all shapes, `Text` and `BgText`)
  towards a destination, once, there and back, or in a loop
  (`TransitionMode`). `finish_every_transition()` stops them early, leaving
  the targets where `FinishMode` says.
- `kenjiman.window.MinGL`: the window. It draws to an off-screen surface
  until `init_graphic()` opens it on screen. Draw into it with
  `window << shape`, query keys with `is_pressed()`, read mouse events from
  `window.events`, and end each frame with `finish_frame()`.

A minimal frame loop:

```python
import time

from kenjiman.color import RED, WHITE
from kenjiman.shapes import Circle
from kenjiman.text import Text
from kenjiman.vec2d import Vec2D
from kenjiman.window import MinGL

with MinGL("Demo") as window:
    while window.is_open():
        window.clear_screen()
        window << Circle(Vec2D(320, 320), 50, RED)
        window << Text(Vec2D(20, 20), "Hello, World!", WHITE)
        window.finish_frame()
        window.events.clear_events()
        time.sleep(1 / 60)
```

## The game

`kenjiman.gamelogic` holds the rules. `GameState` keeps the players'
positions, headings, scores, round points and bonus counters; the map is a
list of rows of cells (`WALL`, `RICE`, `EMPTY`, `BONUS`).
`player_one_step()` and `player_two_step()` steer and move a player from
the keys held, `bot_step()` moves the computer-driven second player, and
players eating rice or a bonus pellet score points. `toggle_round()`
switches between the pause between rounds and a fresh round, and
`award_round()` gives the round to the higher score; the first player to
win two rounds wins the match.

Key bindings come from `kenjiman.params`: `default_params()` gives the
defaults (z/s/q/d for player one, o/l/k/m for player two), and
`load_params()` reads overrides from a file of `KEY : c` lines, raising
`MinGLError` when the file cannot be read.

`kenjiman.render` draws a frame of the game with `draw_game()` and the
round results with `draw_end_screen()`.

One step of the game, driven by a window:

```python
from kenjiman.gamelogic import GameState, player_one_step, player_two_step
from kenjiman.params import default_params
from kenjiman.render import draw_game

state = GameState()
params = default_params()
# game_map: a list of rows of cell values, bordered by walls
player_one_step(state, game_map, window.is_pressed, params)
player_two_step(state, game_map, window.is_pressed, params)
draw_game(window, state, game_map)
```

## What it does not do

- There is no command to start the game: the package provides its rules and
  its drawing, and the frame loop that ties them to a window is left to the
  caller.
- It does not ship a maze or load images: `draw_game()` can draw a map
  picture under the board, but the caller has to supply that drawable.
- It plays no sound or music.