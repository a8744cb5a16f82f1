"""Balls drifting in a random heading, either bouncing off the walls or vanishing."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

Color = tuple[int, int, int]

BOUNCE_WIDTH, BOUNCE_HEIGHT = 1280, 720
BOUNCE_RADIUS = 50.0
FREE_WIDTH, FREE_HEIGHT = 800, 600
FREE_RADIUS = 10.0
SPEED = 5.0
EPSILON = 1e-9
FRAME_RATE = 60
WHITE: Color = (255, 255, 255)


def reflect_heading(
    heading: float, x: float, y: float, width: float, height: float, radius: float
) -> float:
    """Return the heading, in degrees, after touching a wall at (x, y).

    The position is the ball's top-left corner. Only the first wall found,
    in the order right, bottom, left, top, is considered; a heading that is
    not moving into that wall is returned unchanged.
    """
    right = width - 2 * radius
    bottom = height - 2 * radius

    if x >= right:
        if heading in (0, 360):
            return 180.0
        if 0 < heading < 90:
            return 90 + (90 - heading)
        if 270 < heading < 360:
            return 270 - (heading - 270)
    elif y >= bottom:
        if heading == 90:
            return 270.0
        if 0 < heading < 90:
            return 360 - heading
        if 90 < heading < 180:
            return 180 + (180 - heading)
    elif x <= 0:
        if heading == 180:
            return 0.0
        if 180 < heading < 270:
            return 270 + (heading - 180)
        if 90 < heading < 180:
            return 90 - (180 - heading)
    elif y <= 0:
        if heading == 270:
            return 90.0
        if 180 < heading < 270:
            return 180 - (heading - 180)
        if 270 < heading < 360:
            return 360 - heading
    return heading


@dataclass
class Drifter:
    """A ball, placed by its top-left corner, moving a fixed distance per frame."""

    x: float
    y: float
    heading: float
    radius: float = BOUNCE_RADIUS
    speed: float = SPEED
    color: Color = WHITE

    def step(self) -> None:
        """Move one frame along the heading."""
        angle = math.radians(self.heading)
        dx, dy = math.cos(angle), math.sin(angle)
        if 0 < dx < EPSILON:
            dx = 0.0
        if 0 < dy < EPSILON:
            dy = 0.0
        self.x += dx * self.speed
        self.y += dy * self.speed


@dataclass
class DriftField:
    """A box of drifters that either bounce off the walls or are dropped on leaving."""

    width: float = BOUNCE_WIDTH
    height: float = BOUNCE_HEIGHT
    radius: float = BOUNCE_RADIUS
    bounce: bool = True
    colored: bool = True
    speed: float = SPEED
    drifters: list[Drifter] = field(default_factory=list)

    def add(self, x: float, y: float, rng: random.Random) -> Drifter:
        """Add a drifter at (x, y) with a random heading and, if enabled, colour."""
        if self.colored:
            color = tuple(int(rng.uniform(0.0, 255.0)) for _ in range(3))
        else:
            color = WHITE
        heading = rng.uniform(0.0, 360.0)
        drifter = Drifter(float(x), float(y), heading, self.radius, self.speed, color)  # type: ignore[arg-type]
        self.drifters.append(drifter)
        return drifter

    def _outside(self, drifter: Drifter) -> bool:
        return (
            drifter.x > self.width - 2 * self.radius
            or drifter.y > self.height - 2 * self.radius
            or drifter.x < 0
            or drifter.y < 0
        )

    def step(self) -> None:
        """Move every drifter one frame, then bounce it or drop it if it left."""
        kept = []
        for drifter in self.drifters:
            drifter.step()
            if self.bounce:
                drifter.heading = reflect_heading(
                    drifter.heading, drifter.x, drifter.y, self.width, self.height, self.radius
                )
                kept.append(drifter)
            elif not self._outside(drifter):
                kept.append(drifter)
        self.drifters = kept


def run(bounce: bool = True, colored: bool = True) -> None:
    """Open a window where each left click adds a drifting ball."""
    import pygame

    if bounce:
        drift = DriftField(BOUNCE_WIDTH, BOUNCE_HEIGHT, BOUNCE_RADIUS, True, colored)
    else:
        drift = DriftField(FREE_WIDTH, FREE_HEIGHT, FREE_RADIUS, False, colored)
    rng = random.Random()

    pygame.init()
    try:
        screen = pygame.display.set_mode((int(drift.width), int(drift.height)))
        pygame.display.set_caption("Drifting balls")
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
                    drift.add(*event.pos, rng)
            screen.fill((0, 0, 0))
            for drifter in drift.drifters:
                centre = (drifter.x + drifter.radius, drifter.y + drifter.radius)
                pygame.draw.circle(screen, drifter.color, centre, drifter.radius)
            drift.step()
            pygame.display.flip()
    finally:
        pygame.quit()