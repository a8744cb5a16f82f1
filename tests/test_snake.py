import random

import pytest

from sketchmotion.physics import Vec2
from sketchmotion.snake import (
    Direction,
    GameOver,
    Snake,
    SnakeGame,
    START_LENGTH,
)


def make_snake(direction=Direction.RIGHT, size=30.0, gap=5.0):
    start = Vec2(100.0, 100.0)
    back = -direction.unit
    segments = [start + back * (i * (size + gap)) for i in range(3)]
    return Snake(segments, direction, size, gap)


@pytest.mark.parametrize(
    "a, b",
    [
        (Direction.UP, Direction.DOWN),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.DOWN, Direction.UP),
    ],
)
def test_opposite_directions(a, b):
    assert a.is_opposite(b)


@pytest.mark.parametrize(
    "a, b",
    [
        (Direction.UP, Direction.LEFT),
        (Direction.RIGHT, Direction.DOWN),
        (Direction.UP, Direction.UP),
    ],
)
def test_not_opposite_directions(a, b):
    assert not a.is_opposite(b)


def test_turn_refuses_reversal():
    snake = make_snake(Direction.RIGHT)
    snake.turn(Direction.LEFT)
    assert snake.direction is Direction.RIGHT


def test_turn_allows_perpendicular():
    snake = make_snake(Direction.RIGHT)
    snake.turn(Direction.UP)
    assert snake.direction is Direction.UP


def test_advance_moves_head_and_body_follows():
    snake = make_snake(Direction.RIGHT, size=30.0, gap=5.0)
    before = list(snake.segments)
    snake.advance()
    assert snake.segments[0] == before[0] + Vec2(30.0 + 5.0, 0.0)
    assert snake.segments[1:] == before[:-1]
    assert len(snake.segments) == len(before)


def test_advance_up_decreases_y():
    snake = make_snake(Direction.UP, size=30.0, gap=5.0)
    head = snake.segments[0]
    snake.advance()
    assert snake.segments[0] == Vec2(head.x, head.y - (30.0 + 5.0))


def test_reset_builds_straight_snake_behind_head():
    game = SnakeGame(part_size=25.0, rng=random.Random(1))
    segments = game.snake.segments
    assert len(segments) == START_LENGTH
    back = -game.snake.direction.unit
    for i, segment in enumerate(segments):
        expected = segments[0] + back * (i * (25.0 + game.gap))
        assert segment.x == pytest.approx(expected.x)
        assert segment.y == pytest.approx(expected.y)


def test_reset_places_head_and_food_in_range():
    for seed in range(20):
        game = SnakeGame(part_size=35.0, rng=random.Random(seed))
        head = game.snake.segments[0]
        assert 35.0 <= head.x <= game.width - 35.0
        assert 35.0 <= head.y <= game.width - 35.0
        assert 35.0 <= game.food.x <= game.width - 35.0
        assert game.food_available


def test_same_seed_same_game():
    a = SnakeGame(rng=random.Random(7))
    b = SnakeGame(rng=random.Random(7))
    assert a.snake == b.snake
    assert a.food == b.food


def test_no_food_mode_has_no_food():
    game = SnakeGame(food_enabled=False, grow=False, rng=random.Random(3))
    game.tick()
    assert game.food is None
    assert len(game.snake.segments) == START_LENGTH


def test_grow_without_food_rejected():
    with pytest.raises(ValueError):
        SnakeGame(food_enabled=False, grow=True)


def test_head_off_board_ends_game():
    game = SnakeGame(rng=random.Random(2))
    game.snake.segments[0] = Vec2(game.width + 1.0, 10.0)
    with pytest.raises(GameOver):
        game.tick()


def test_head_left_of_board_ends_game():
    game = SnakeGame(part_size=35.0, rng=random.Random(2))
    game.snake.segments[0] = Vec2(-36.0, 10.0)
    with pytest.raises(GameOver):
        game.tick()


def test_eating_grows_and_respawns_food():
    game = SnakeGame(part_size=35.0, grow=True, rng=random.Random(4))
    head = game.snake.segments[0]
    old_tail = game.snake.segments[-1]
    game.food = Vec2(head.x + 1.0, head.y + 1.0)
    assert game.tick() is True
    assert len(game.snake.segments) == START_LENGTH + 1
    assert game.snake.segments[-1] == old_tail
    assert game.food_available
    assert 35.0 <= game.food.x <= game.width - 35.0


def test_eating_without_grow_keeps_length():
    game = SnakeGame(part_size=25.0, grow=False, rng=random.Random(5))
    head = game.snake.segments[0]
    game.food = Vec2(head.x + 1.0, head.y + 1.0)
    assert game.tick() is True
    assert len(game.snake.segments) == START_LENGTH
    assert game.food_available


def test_food_on_edge_is_not_eaten():
    game = SnakeGame(rng=random.Random(6))
    head = game.snake.segments[0]
    game.food = Vec2(head.x, head.y + 1.0)
    assert game.tick() is False
    assert game.food == Vec2(head.x, head.y + 1.0)


def test_add_tail_duplicates_last_segment():
    game = SnakeGame(rng=random.Random(8))
    last = game.snake.segments[-1]
    game.add_tail()
    assert game.snake.segments[-1] == last
    assert len(game.snake.segments) == START_LENGTH + 1


def test_reset_restores_length():
    game = SnakeGame(rng=random.Random(9))
    game.add_tail()
    game.add_tail()
    game.reset()
    assert len(game.snake.segments) == START_LENGTH