import pytest

from sketchmotion.physics import Vec2
from sketchmotion.snake import Direction
from sketchmotion.snake_wrap import WrappingSnake


def make(head: Vec2, direction: Direction) -> WrappingSnake:
    back = -direction.unit
    segments = [head + back * (i * 35.0) for i in range(3)]
    return WrappingSnake(segments, direction)


def test_defaults_match_board():
    snake = make(Vec2(100.0, 100.0), Direction.RIGHT)
    assert snake.part_size == 30.0
    assert snake.gap == 5.0
    assert (snake.width, snake.height) == (1024, 1024)


def test_advance_without_wrap_moves_head_and_body_follows():
    snake = make(Vec2(100.0, 100.0), Direction.RIGHT)
    old = list(snake.segments)
    snake.advance()
    assert snake.segments[0] == Vec2(100.0 + snake.stride, 100.0)
    assert snake.segments[1:] == old[:-1]


def test_length_is_preserved():
    snake = make(Vec2(500.0, 500.0), Direction.DOWN)
    for _ in range(50):
        snake.advance()
    assert len(snake.segments) == 3


def test_wrap_right_edge():
    snake = make(Vec2(1000.0, 200.0), Direction.RIGHT)
    snake.advance()
    assert snake.segments[1] == Vec2(1000.0 - snake.width, 200.0)
    assert snake.segments[0] == snake.segments[1] + Vec2(snake.stride, 0.0)


def test_no_wrap_when_exactly_touching_right_edge():
    head = Vec2(994.0, 200.0)
    snake = make(head, Direction.RIGHT)
    snake.advance()
    assert snake.segments[1] == head


def test_wrap_left_edge():
    snake = make(Vec2(-5.0, 300.0), Direction.LEFT)
    snake.advance()
    assert snake.segments[1] == Vec2(-5.0 + snake.width, 300.0)
    assert snake.segments[0] == snake.segments[1] - Vec2(snake.stride, 0.0)


def test_wrap_bottom_edge():
    snake = make(Vec2(300.0, 1010.0), Direction.DOWN)
    snake.advance()
    assert snake.segments[1] == Vec2(300.0, 1010.0 - snake.height)
    assert snake.segments[0].y == pytest.approx(snake.segments[1].y + snake.stride)


def test_wrap_top_edge():
    snake = make(Vec2(300.0, -1.0), Direction.UP)
    snake.advance()
    assert snake.segments[1] == Vec2(300.0, -1.0 + snake.height)
    assert snake.segments[0].y == pytest.approx(snake.segments[1].y - snake.stride)


def test_turn_into_opposite_is_ignored():
    snake = make(Vec2(100.0, 100.0), Direction.LEFT)
    snake.turn(Direction.RIGHT)
    assert snake.direction is Direction.LEFT


def test_turn_perpendicular_is_taken():
    snake = make(Vec2(100.0, 100.0), Direction.LEFT)
    snake.turn(Direction.UP)
    assert snake.direction is Direction.UP
    snake.advance()
    assert snake.segments[0].x == 100.0