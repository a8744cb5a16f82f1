"""Elastic collisions between balls bouncing inside a rectangular box."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from itertools import combinations
from typing import Iterator

Color = tuple[int, int, int]

RANDOM_WIDTH, RANDOM_HEIGHT = 1280, 720
CLICK_WIDTH, CLICK_HEIGHT = 1080, 1920
RESTITUTION = 1.0
FRAME_RATE = 60


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)


def normalize(v: Vec2) -> Vec2:
    """Return the unit vector along ``v``, or the zero vector if ``v`` is zero."""
    length = v.length()
    return Vec2(0.0, 0.0) if length == 0 else v / length


def dot(a: Vec2, b: Vec2) -> float:
    """Dot product of two vectors."""
    return a.x * b.x + a.y * b.y


@dataclass
class Ball:
    """A ball whose position is its centre."""

    position: Vec2
    velocity: Vec2
    mass: float
    radius: float
    color: Color = (255, 255, 255)

    def update(self, dt: float) -> None:
        """Move the ball along its velocity for ``dt`` seconds."""
        self.position = self.position + self.velocity * dt


def collide(a: Ball, b: Ball) -> None:
    """Apply an elastic impulse to two touching balls and push them apart."""
    pos_a, pos_b = a.position, b.position
    normal = normalize(pos_b - pos_a)

    vel_along_normal = dot(b.velocity - a.velocity, normal)
    if vel_along_normal > 0:
        return  # already separating

    inv_a, inv_b = 1.0 / a.mass, 1.0 / b.mass
    total_inv_mass = inv_a + inv_b

    j = -(1 + RESTITUTION) * vel_along_normal / total_inv_mass
    impulse = normal * j
    a.velocity = a.velocity - impulse * inv_a
    b.velocity = b.velocity + impulse * inv_b

    overlap = (a.radius + b.radius) - (pos_a - pos_b).length()
    correction = normal * (overlap / 2.0)
    a.position = pos_a - correction * inv_a / total_inv_mass
    b.position = pos_b + correction * inv_b / total_inv_mass


def bounce_off_walls(ball: Ball, width: float, height: float) -> None:
    """Reverse a velocity component when the ball crosses a wall."""
    x, y = ball.position
    vx, vy = ball.velocity
    if x < ball.radius or x > width - ball.radius:
        vx = -vx
    if y < ball.radius or y > height - ball.radius:
        vy = -vy
    ball.velocity = Vec2(vx, vy)


def resolve_collisions(balls: list[Ball]) -> None:
    """Collide every overlapping pair of balls, in list order."""
    for first, second in combinations(balls, 2):
        distance = (second.position - first.position).length()
        if distance < first.radius + second.radius:
            collide(first, second)


def _random_color(rng: random.Random) -> Color:
    return (rng.randrange(255), rng.randrange(255), rng.randrange(255))


@dataclass
class CollisionWorld:
    """A box of balls that bounce off the walls and off each other."""

    width: int = RANDOM_WIDTH
    height: int = RANDOM_HEIGHT
    balls: list[Ball] = field(default_factory=list)

    def spawn_random(self, count: int, rng: random.Random) -> list[Ball]:
        """Add ``count`` balls of random size, place, speed and colour."""
        spawned = []
        for _ in range(count):
            radius = float(5 + rng.randrange(10))
            velocity = Vec2(float(rng.randrange(200) - 100), float(rng.randrange(200) - 100))
            position = Vec2(
                rng.randrange(self.width) - radius,
                rng.randrange(self.height) - radius,
            )
            ball = Ball(position, velocity, radius, radius, _random_color(rng))
            self.balls.append(ball)
            spawned.append(ball)
        return spawned

    def add_ball_at(self, x: float, y: float, rng: random.Random) -> Ball | None:
        """Add a random ball centred at (x, y) if it fits; return it or None."""
        radius = rng.uniform(0.0, 50.0)
        if not (0 < x < self.width - radius and 0 < y < self.height - radius):
            return None
        velocity = Vec2(rng.uniform(-100.0, 100.0), rng.uniform(-100.0, 100.0))
        ball = Ball(Vec2(float(x), float(y)), velocity, radius, radius, _random_color(rng))
        self.balls.append(ball)
        return ball

    def step(self, dt: float) -> None:
        """Advance every ball by ``dt`` seconds and resolve contacts."""
        for ball in self.balls:
            ball.update(dt)
            bounce_off_walls(ball, self.width, self.height)
        resolve_collisions(self.balls)


def _run(world: CollisionWorld, spawn_on_click: bool) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((world.width, world.height))
        pygame.display.set_caption("Ball collisions")
        clock = pygame.time.Clock()
        rng = random.Random()
        running = True
        while running:
            dt = clock.tick(FRAME_RATE) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
                elif (
                    spawn_on_click
                    and event.type == pygame.MOUSEBUTTONDOWN
                    and event.button == 1
                ):
                    world.add_ball_at(*event.pos, rng)
            world.step(dt)
            screen.fill((0, 0, 0))
            for ball in world.balls:
                pygame.draw.circle(screen, ball.color, tuple(ball.position), ball.radius)
            pygame.display.flip()
    finally:
        pygame.quit()


def run_random(count: int = 50) -> None:
    """Open a window with ``count`` random balls colliding."""
    world = CollisionWorld(RANDOM_WIDTH, RANDOM_HEIGHT)
    world.spawn_random(count, random.Random())
    _run(world, spawn_on_click=False)


def run_click() -> None:
    """Open a window where each left click adds a colliding ball."""
    _run(CollisionWorld(CLICK_WIDTH, CLICK_HEIGHT), spawn_on_click=True)