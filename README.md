# sketchmotion

Small 2D motion sketches built on pygame. Each sketch opens a window and
animates something simple. There are balls that fall under gravity and balls
that collide elastically. There are drifting dots, planets on elliptical orbits,
a particle fountain that follows the mouse, text crawling around the window
border and a small snake game.

The motion itself lives in plain Python classes. You can step, inspect and test
them without opening a window.

## Installation

```
pip install sketchmotion
```

To run the tests:

```
pip install "sketchmotion[test]"
pytest
```

## Command line

Each sketch is a subcommand of `sketchmotion`. To list them, run:

```
sketchmotion --help
```

In every window, Escape or the close button quits.

| Command | What it shows |
| --- | --- |
| `sketchmotion blank` | An empty black window |
| `sketchmotion collide [--count N]` | N random balls (default 50) colliding inside the window |
| `sketchmotion collide-click` | A left click adds a colliding ball of random size and speed |
| `sketchmotion axis {x,y}` | A left click adds a ball that slides back and forth along one axis |
| `sketchmotion bounce [--friction]` | One ball dropped under gravity; with `--friction` it also travels sideways and slows on each bounce |
| `sketchmotion bounce-many [--friction]` | A left click drops a new ball |
| `sketchmotion bounce-wall` | A left click adds a ball that bounces off all four walls. Its speed is printed. |
| `sketchmotion snake [--variant {no-food,food,grow}]` | Snake on a bordered board. The default variant is `grow`. |
| `sketchmotion snake-wrap` | Snake on a borderless board. Leaving one edge brings the snake in at the opposite edge. |
| `sketchmotion dots` | The up arrow adds a square at a random spot and the down arrow removes the newest one |
| `sketchmotion drift [--no-bounce] [--white]` | A left click adds a ball drifting at a random heading. By default balls reflect off the walls and get a random colour. `--no-bounce` drops balls that leave the window, and `--white` draws them white. |
| `sketchmotion orbit-circle` | A body circling a sun |
| `sketchmotion orbit-ellipse` | A body on an ellipse, with the sun at its left focus |
| `sketchmotion solar-system` | The eight planets on their orbits. W/A/S/D pans and the mouse wheel zooms. |
| `sketchmotion particles` | A fountain of fading particles that follows the mouse |
| `sketchmotion marquee` | A line of text travelling clockwise around the window border |

Snake controls:

* The arrow keys steer. A turn straight back is ignored.
* R restarts.
* Escape quits.
* On a bordered board, the game prints `kalah` and ends when the head leaves the board.

## Using the simulations without a window

The `run*` functions are thin pygame loops around the classes below:

* `sketchmotion.physics`
  * `Vec2`, `Ball` and `CollisionWorld`
  * `normalize`, `dot`, `collide`, `bounce_off_walls` and `resolve_collisions`
* `sketchmotion.movers`
  * `AxisMover`, `Axis` and `spawn_axis_mover`
* `sketchmotion.bounce`
  * `GravityBall`, for gravity with optional ground friction
  * `WallBall`, which moves a fixed step per frame
* `sketchmotion.drift`
  * `Drifter` and `DriftField`
  * `reflect_heading`
* `sketchmotion.snake`
  * `Direction`, `Snake` and `SnakeGame`
  * `GameOver`, raised by `SnakeGame.tick` when the head is off the board
* `sketchmotion.snake_wrap`
  * `WrappingSnake`
* `sketchmotion.dots`
  * `DotStack`
* `sketchmotion.orbits`
  * `CircularOrbit`, `EllipticalOrbit`, `Planet` and `Camera`
  * `ellipse_points` and `solar_system`
* `sketchmotion.particles`
  * `Particle` and `ParticleSystem`
* `sketchmotion.marquee`
  * `Marquee`

For example, to step a collision world:

```python
import random

from sketchmotion.physics import CollisionWorld

world = CollisionWorld()
world.spawn_random(20, random.Random(1))
for _ in range(60):
    world.step(1 / 60)
```

To play one snake frame:

```python
from sketchmotion.snake import Direction, GameOver, SnakeGame

game = SnakeGame()
game.snake.turn(Direction.UP)
try:
    ate = game.tick()
except GameOver:
    print("the snake left the board")
```

`SnakeGame.tick` returns `True` when the head was on the food in that frame.

## What it does not do

* The snake game keeps no score.
* The snake does not end the game when it runs into itself. Only leaving the board does that.
* The sketches save nothing.
* No textured or font-file sketches are included. The marquee uses pygame's default font.