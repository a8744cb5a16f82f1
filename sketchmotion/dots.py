"""A stack of squares dropped at random spots and removed last-first."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from sketchmotion.physics import Vec2

WIDTH, HEIGHT = 1024, 1024
DOT_SIZE = 20.0
FRAME_RATE = 60


@dataclass
class DotStack:
    """Squares, placed by their top-left corners, in the order they were added."""

    width: float = WIDTH
    height: float = HEIGHT
    size: float = DOT_SIZE
    dots: list[Vec2] = field(default_factory=list)

    def push(self, rng: random.Random) -> Vec2:
        """Add a square at a random spot and return its position."""
        limit = self.width - self.size
        dot = Vec2(rng.uniform(0.0, limit), rng.uniform(0.0, limit))
        self.dots.append(dot)
        return dot

    def pop(self) -> Vec2 | None:
        """Remove and return the newest square, or None when there is none."""
        return self.dots.pop() if self.dots else None


def run() -> None:
    """Open a window: the up arrow adds a square, the down arrow removes one."""
    import pygame

    stack = DotStack()
    rng = random.Random()
    pygame.init()
    try:
        screen = pygame.display.set_mode((int(stack.width), int(stack.height)))
        pygame.display.set_caption("Game Uler")
        clock = pygame.time.Clock()
        running = True
        while running:
            clock.tick(FRAME_RATE)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_UP:
                        stack.push(rng)
                    elif event.key == pygame.K_DOWN:
                        stack.pop()
            screen.fill((0, 0, 0))
            for dot in stack.dots:
                rect = pygame.Rect(dot.x, dot.y, stack.size, stack.size)
                pygame.draw.rect(screen, (255, 255, 255), rect)
            pygame.display.flip()
    finally:
        pygame.quit()