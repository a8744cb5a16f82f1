"""Balls that slide back and forth along one axis."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

WIDTH, HEIGHT = 800, 600
RADIUS = 10.0
SPEED = 3.0
FRAME_RATE = 60


class Axis(Enum):
    """The axis a mover travels along."""

    X = "x"
    Y = "y"


@dataclass
class AxisMover:
    """A ball at (x, y), its top-left corner, moving along one axis."""

    x: float
    y: float
    axis: Axis
    forward: bool
    radius: float = RADIUS
    speed: float = SPEED

    def _coordinate(self) -> float:
        return self.x if self.axis is Axis.X else self.y

    def step(self, limit: float) -> None:
        """Move one frame, turning at 0 and at ``limit`` minus the diameter."""
        delta = self.speed if self.forward else -self.speed
        if self.axis is Axis.X:
            self.x += delta
        else:
            self.y += delta

        position = self._coordinate()
        if position >= limit - 2 * self.radius and self.forward:
            self.forward = False
        elif position <= 0 and not self.forward:
            self.forward = True


def spawn_axis_mover(x: float, y: float, axis: Axis | str, rng: random.Random) -> AxisMover:
    """Create a mover at (x, y) heading forward or backward at random."""
    return AxisMover(float(x), float(y), Axis(axis), rng.uniform(0.0, 100.0) >= 50)


def run(axis: Axis | str = Axis.X) -> None:
    """Open a window where each left click adds a ball moving along ``axis``."""
    import pygame

    axis = Axis(axis)
    limit = WIDTH if axis is Axis.X else HEIGHT
    movers: list[AxisMover] = []
    rng = random.Random()

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Axis movers")
        clock = pygame.time.Clock()
        running = True
        while running:
            clock.tick(FRAME_RATE)
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    movers.append(spawn_axis_mover(*event.pos, axis, rng))
            screen.fill((0, 0, 0))
            for mover in movers:
                centre = (mover.x + mover.radius, mover.y + mover.radius)
                pygame.draw.circle(screen, (255, 255, 255), centre, mover.radius)
                mover.step(limit)
            pygame.display.flip()
    finally:
        pygame.quit()