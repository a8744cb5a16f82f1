"""Balls falling under gravity and balls bouncing between four walls."""

from __future__ import annotations

import random
from dataclasses import dataclass

Color = tuple[int, int, int]

WIDTH, HEIGHT = 1280, 720
RESTITUTION = 0.5
GRAVITY = 980.0  # pixels per second squared
GROUND_FRICTION = 0.8
FRICTION_STOP_SPEED = 10.0
BALL_RADIUS = 25.0
START_X, START_Y = 640.0, 10.0
START_X_SPEED = 300.0
WALL_BALL_RADIUS = 50.0
WALL_MAX_SPEED = 10.0
FRAME_RATE = 60
WHITE: Color = (255, 255, 255)


@dataclass
class GravityBall:
    """A ball, positioned by its top-left corner, falling onto the ground.

    Without friction the ball only moves vertically. With friction it also
    travels horizontally, loses horizontal speed on every bounce and bounces
    off the left and right walls.
    """

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    radius: float = BALL_RADIUS
    friction: bool = False
    width: float = WIDTH
    height: float = HEIGHT
    color: Color = WHITE

    @property
    def ground(self) -> float:
        """The lowest y the ball's top-left corner may reach."""
        return self.height - 2 * self.radius

    def step(self, dt: float) -> None:
        """Advance the ball by ``dt`` seconds."""
        self.vy += GRAVITY * dt
        self.y += self.vy * dt
        if self.friction:
            self.x += self.vx * dt

        if self.y > self.ground:
            self.y = self.ground
            self.vy *= -RESTITUTION
            if self.friction:
                self.vx *= GROUND_FRICTION
                if abs(self.vy) < FRICTION_STOP_SPEED:
                    self.vy = 0.0
                if abs(self.vx) < FRICTION_STOP_SPEED:
                    self.vx = 0.0
            elif abs(self.vy) < 2 * self.radius:
                self.vy = 0.0

        if self.friction:
            right = self.width - 2 * self.radius
            if self.x <= 0 or self.x > right:
                self.x = min(max(self.x, 0.0), right)
                self.vx *= -RESTITUTION


@dataclass
class WallBall:
    """A ball, positioned by its top-left corner, moving a fixed step per frame."""

    x: float
    y: float
    vx: float
    vy: float
    radius: float = WALL_BALL_RADIUS
    width: float = WIDTH
    height: float = HEIGHT
    color: Color = WHITE

    def step(self) -> None:
        """Move one frame, reflecting off any wall that is reached."""
        x = self.x + self.vx
        y = self.y + self.vy
        if x <= 0 or x >= self.width - 2 * self.radius:
            self.vx = -self.vx
            x += self.vx
        if y <= 0 or y >= self.height - 2 * self.radius:
            self.vy = -self.vy
            y += self.vy
        self.x, self.y = x, y


def _fits(x: float, y: float, radius: float) -> bool:
    return 0 < x < WIDTH - 2 * radius and 0 < y < HEIGHT - 2 * radius


def _random_color(rng: random.Random) -> Color:
    return tuple(int(rng.uniform(0.0, 255.0)) for _ in range(3))  # type: ignore[return-value]


def _spawn_gravity_ball(x: float, y: float, friction: bool, rng: random.Random) -> GravityBall:
    color = _random_color(rng)
    vx = rng.uniform(-START_X_SPEED, START_X_SPEED) if friction else 0.0
    return GravityBall(float(x), float(y), vx=vx, friction=friction, color=color)


def _spawn_wall_ball(x: float, y: float, rng: random.Random) -> WallBall:
    color = _random_color(rng)
    vx = rng.uniform(-WALL_MAX_SPEED, WALL_MAX_SPEED)
    vy = rng.uniform(-WALL_MAX_SPEED, WALL_MAX_SPEED)
    return WallBall(float(x), float(y), vx, vy, color=color)


def _quit_requested(event, pygame) -> bool:
    return event.type == pygame.QUIT or (
        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
    )


def _draw(screen, pygame, ball) -> None:
    centre = (ball.x + ball.radius, ball.y + ball.radius)
    pygame.draw.circle(screen, ball.color, centre, ball.radius)


def run_single(friction: bool = False) -> None:
    """Open a window with one ball dropped from near the top."""
    import pygame

    ball = GravityBall(
        START_X, START_Y, vx=START_X_SPEED if friction else 0.0, friction=friction
    )
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Bouncing ball")
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if _quit_requested(event, pygame):
                    running = False
            dt = clock.tick(FRAME_RATE) / 1000.0
            ball.step(dt)
            screen.fill((0, 0, 0))
            _draw(screen, pygame, ball)
            pygame.display.flip()
    finally:
        pygame.quit()


def run_many(friction: bool = False) -> None:
    """Open a window where each left click drops a new ball."""
    import pygame

    balls: list[GravityBall] = []
    rng = random.Random()
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Bouncing balls")
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if _quit_requested(event, pygame):
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    x, y = event.pos
                    if _fits(x, y, BALL_RADIUS):
                        balls.append(_spawn_gravity_ball(x, y, friction, rng))
            dt = clock.tick(FRAME_RATE) / 1000.0
            screen.fill((0, 0, 0))
            for ball in balls:
                ball.step(dt)
                _draw(screen, pygame, ball)
            pygame.display.flip()
    finally:
        pygame.quit()


def run_wall() -> None:
    """Open a window where each left click adds a ball bouncing off the walls."""
    import pygame

    balls: list[WallBall] = []
    rng = random.Random()
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Wall bounce")
        clock = pygame.time.Clock()
        running = True
        while running:
            clock.tick(FRAME_RATE)
            for event in pygame.event.get():
                if _quit_requested(event, pygame):
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    x, y = event.pos
                    if _fits(x, y, WALL_BALL_RADIUS):
                        ball = _spawn_wall_ball(x, y, rng)
                        balls.append(ball)
                        print(f"ball {len(balls)},  xSpeed: {ball.vx:g}, ySpeed: {ball.vy:g}")
            screen.fill((0, 0, 0))
            for ball in balls:
                _draw(screen, pygame, ball)
                ball.step()
            pygame.display.flip()
    finally:
        pygame.quit()