"""A snake game on a bordered board, optionally with food and a growing tail."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from sketchmotion.physics import Vec2

Color = tuple[int, int, int]

WIDTH, HEIGHT = 1024, 1024
PART_GAP = 5.0
PART_SIZE_NO_FOOD = 30.0
PART_SIZE_FOOD = 25.0
PART_SIZE_GROW = 35.0
FOOD_SIZE = 20.0
START_LENGTH = 3
FRAME_DELAY_MS = 800
HEAD_COLOR: Color = (255, 0, 0)
BODY_COLOR: Color = (255, 255, 255)
FOOD_COLOR: Color = (0, 255, 0)


class Direction(Enum):
    """Heading in degrees on screen, where y grows downwards."""

    RIGHT = 0
    DOWN = 90
    LEFT = 180
    UP = 270

    @property
    def unit(self) -> Vec2:
        """Unit step in screen coordinates for this heading."""
        return {
            Direction.RIGHT: Vec2(1.0, 0.0),
            Direction.DOWN: Vec2(0.0, 1.0),
            Direction.LEFT: Vec2(-1.0, 0.0),
            Direction.UP: Vec2(0.0, -1.0),
        }[self]

    def is_opposite(self, other: Direction) -> bool:
        """True when ``other`` points the exact other way."""
        return (self.value - other.value) % 360 == 180


class GameOver(Exception):
    """Raised when the snake's head leaves the board."""


@dataclass
class Snake:
    """A chain of square segments, head first, each placed by its top-left corner."""

    segments: list[Vec2]
    direction: Direction
    part_size: float = PART_SIZE_FOOD
    gap: float = PART_GAP

    @property
    def stride(self) -> float:
        """Distance the head travels in one move."""
        return self.part_size + self.gap

    def turn(self, direction: Direction) -> None:
        """Change heading unless that would reverse the snake onto itself."""
        if not direction.is_opposite(self.direction):
            self.direction = direction

    def advance(self) -> None:
        """Move the head one stride; every other segment takes its predecessor's place."""
        previous = self.segments[:-1]
        head = self.segments[0] + self.direction.unit * self.stride
        self.segments = [head, *previous]


def _new_snake(
    rng: random.Random,
    direction: Direction,
    part_size: float,
    gap: float,
    width: float,
) -> Snake:
    head = Vec2(
        rng.uniform(part_size, width - part_size),
        rng.uniform(part_size, width - part_size),
    )
    backwards = -direction.unit
    segments = [head + backwards * (i * (part_size + gap)) for i in range(START_LENGTH)]
    return Snake(segments, direction, part_size, gap)


@dataclass
class SnakeGame:
    """The board, the snake on it and, when enabled, a piece of food."""

    width: float = WIDTH
    height: float = HEIGHT
    part_size: float = PART_SIZE_GROW
    gap: float = PART_GAP
    food_enabled: bool = True
    grow: bool = True
    rng: random.Random = field(default_factory=random.Random)
    snake: Snake = field(init=False)
    food: Vec2 | None = field(init=False, default=None)
    food_available: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        if self.grow and not self.food_enabled:
            raise ValueError("a snake can only grow when food is enabled")
        self.reset()

    def reset(self) -> None:
        """Start over with a fresh three-segment snake in a random heading."""
        direction = self.rng.choice(list(Direction))
        if self.food_enabled:
            self.spawn_food()
        else:
            self.food = None
            self.food_available = False
        self.snake = _new_snake(self.rng, direction, self.part_size, self.gap, self.width)

    def spawn_food(self) -> Vec2:
        """Place a new piece of food at a random spot and return its position."""
        low, high = self.part_size, self.width - self.part_size
        self.food = Vec2(self.rng.uniform(low, high), self.rng.uniform(low, high))
        self.food_available = True
        return self.food

    def add_tail(self) -> None:
        """Append a segment on top of the current last one."""
        self.snake.segments.append(self.snake.segments[-1])

    def _head_outside(self) -> bool:
        head, size = self.snake.segments[0], self.part_size
        return (
            head.x > self.width
            or head.x + size < 0
            or head.y > self.height
            or head.y + size < 0
        )

    def _head_on_food(self) -> bool:
        if self.food is None:
            return False
        head, size = self.snake.segments[0], self.part_size
        return head.x < self.food.x < head.x + size and head.y < self.food.y < head.y + size

    def tick(self) -> bool:
        """Play one frame; return True if the food was eaten.

        Raises GameOver if the head is off the board before moving.
        """
        if self._head_outside():
            raise GameOver("the snake left the board")
        ate = False
        if self.food_enabled and self._head_on_food():
            ate = True
            self.food_available = False
            if self.grow:
                self.add_tail()
        self.snake.advance()
        if self.food_enabled and not self.food_available:
            self.spawn_food()
        return ate


def run(food: bool = True, grow: bool = True) -> None:
    """Open a window and play snake with the arrow keys; R restarts."""
    import pygame

    if grow:
        part_size = PART_SIZE_GROW
    elif food:
        part_size = PART_SIZE_FOOD
    else:
        part_size = PART_SIZE_NO_FOOD
    game = SnakeGame(part_size=part_size, food_enabled=food, grow=grow)
    keys = {
        pygame.K_UP: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((int(game.width), int(game.height)))
        pygame.display.set_caption("Game Uler")
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN:
                    if event.key in keys:
                        game.snake.turn(keys[event.key])
                    elif event.key == pygame.K_ESCAPE:
                        return
                    elif event.key == pygame.K_r:
                        game.reset()

            screen.fill((0, 0, 0))
            for index, segment in enumerate(game.snake.segments):
                color = HEAD_COLOR if index == 0 else BODY_COLOR
                rect = pygame.Rect(segment.x, segment.y, part_size, part_size)
                pygame.draw.rect(screen, color, rect)
            try:
                ate = game.tick()
            except GameOver:
                print("kalah")
                return
            if game.food_enabled and not ate and game.food is not None:
                rect = pygame.Rect(game.food.x, game.food.y, FOOD_SIZE, FOOD_SIZE)
                pygame.draw.rect(screen, FOOD_COLOR, rect)
            pygame.time.delay(FRAME_DELAY_MS)
            pygame.display.flip()
    finally:
        pygame.quit()