"""A snake on a borderless board: leaving one edge brings it in at the other."""

from __future__ import annotations

import random
from dataclasses import dataclass

from sketchmotion.physics import Vec2
from sketchmotion.snake import BODY_COLOR, FRAME_DELAY_MS, HEAD_COLOR, START_LENGTH, Direction

WIDTH, HEIGHT = 1024, 1024
PART_SIZE = 30.0
PART_GAP = 5.0


@dataclass
class WrappingSnake:
    """A chain of square segments, head first, each placed by its top-left corner."""

    segments: list[Vec2]
    direction: Direction
    part_size: float = PART_SIZE
    gap: float = PART_GAP
    width: float = WIDTH
    height: float = HEIGHT

    @property
    def stride(self) -> float:
        """Distance the head travels in one move."""
        return self.part_size + self.gap

    def turn(self, direction: Direction) -> None:
        """Change heading unless that would reverse the snake onto itself."""
        if not direction.is_opposite(self.direction):
            self.direction = direction

    def _wrapped_head(self) -> Vec2:
        x, y = self.segments[0]
        if self.direction is Direction.RIGHT and x + self.part_size > self.width:
            x -= self.width
        elif self.direction is Direction.DOWN and y + self.part_size > self.height:
            y -= self.height
        elif self.direction is Direction.LEFT and x < 0:
            x += self.width
        elif self.direction is Direction.UP and y < 0:
            y += self.height
        return Vec2(x, y)

    def advance(self) -> None:
        """Move the head one stride, wrapping it first if it has run past an edge.

        The segment behind the head takes the head's wrapped place; every
        other segment takes its predecessor's place.
        """
        previous = self._wrapped_head()
        head = previous + self.direction.unit * self.stride
        self.segments = [head, previous, *self.segments[1:-1]]


def _new_snake(rng: random.Random) -> WrappingSnake:
    direction = rng.choice(list(Direction))
    head = Vec2(rng.uniform(0.0, WIDTH - PART_SIZE), rng.uniform(0.0, WIDTH - PART_SIZE))
    backwards = -direction.unit
    stride = PART_SIZE + PART_GAP
    segments = [head + backwards * (i * stride) for i in range(START_LENGTH)]
    return WrappingSnake(segments, direction)


def run() -> None:
    """Open a window and steer a wrapping snake with the arrow keys; R restarts."""
    import pygame

    rng = random.Random()
    snake = _new_snake(rng)
    keys = {
        pygame.K_UP: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Game Uler")
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN:
                    if event.key in keys:
                        snake.turn(keys[event.key])
                    elif event.key == pygame.K_ESCAPE:
                        return
                    elif event.key == pygame.K_r:
                        snake = _new_snake(rng)

            screen.fill((0, 0, 0))
            for index, segment in enumerate(snake.segments):
                color = HEAD_COLOR if index == 0 else BODY_COLOR
                rect = pygame.Rect(segment.x, segment.y, snake.part_size, snake.part_size)
                pygame.draw.rect(screen, color, rect)
            snake.advance()
            pygame.time.delay(FRAME_DELAY_MS)
            pygame.display.flip()
    finally:
        pygame.quit()