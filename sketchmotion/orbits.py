"""Bodies orbiting a sun on circles and ellipses, with a pannable, zoomable camera."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from sketchmotion.physics import Vec2

Color = tuple[int, int, int]

PI = 3.14159265
TWO_PI = 2 * PI
WIDTH, HEIGHT = 1920, 1080
CENTER = Vec2(WIDTH / 2, HEIGHT / 2)
FRAME_RATE = 60

SUN_RADIUS = 20.0
EARTH_RADIUS = 10.0
ORBIT_RADIUS = 100.0
ANGULAR_SPEED = 0.5  # radians per second
ELLIPSE_A = 200.0
ELLIPSE_E = 0.5

SYSTEM_SUN_RADIUS = 69.57
ELLIPSE_POINT_COUNT = 360
PAN_STEP = 10.0
ZOOM_IN = 0.9
ZOOM_OUT = 1.1

YELLOW: Color = (255, 255, 0)
CYAN: Color = (0, 255, 255)
WHITE: Color = (255, 255, 255)


@dataclass
class CircularOrbit:
    """A body circling ``center`` at a fixed radius."""

    center: Vec2 = CENTER
    radius: float = ORBIT_RADIUS
    angle: float = 0.0
    angular_speed: float = ANGULAR_SPEED

    def step(self, dt: float) -> None:
        """Advance the angle by ``dt`` seconds, keeping it at most two pi."""
        self.angle += self.angular_speed * dt
        if self.angle > TWO_PI:
            self.angle -= TWO_PI

    def position(self) -> Vec2:
        """The body's current position."""
        return Vec2(
            self.center.x + self.radius * math.cos(self.angle),
            self.center.y + self.radius * math.sin(self.angle),
        )


@dataclass
class EllipticalOrbit:
    """A body on an ellipse centred at ``center`` with semi-major axis ``a`` along x."""

    center: Vec2 = CENTER
    a: float = ELLIPSE_A
    e: float = ELLIPSE_E
    angle: float = 0.0
    angular_speed: float = ANGULAR_SPEED
    retrograde: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.e < 1:
            raise ValueError(f"eccentricity must be in [0, 1), got {self.e}")

    @property
    def b(self) -> float:
        """Semi-minor axis."""
        return self.a * math.sqrt(1 - self.e**2)

    def step(self, dt: float) -> None:
        """Advance the angle by ``dt`` seconds; below two pi it is lifted by two pi."""
        delta = self.angular_speed * dt
        self.angle += delta if self.retrograde else -delta
        if self.angle < TWO_PI:
            self.angle += TWO_PI

    def position(self) -> Vec2:
        """The body's current position."""
        return Vec2(
            self.center.x + self.a * math.cos(self.angle),
            self.center.y + self.b * math.sin(self.angle),
        )

    def focus(self) -> Vec2:
        """The left focus of the ellipse, where the sun sits."""
        return Vec2(self.center.x - self.e * self.a, self.center.y)


def ellipse_points(center: Vec2, a: float, e: float, count: int = ELLIPSE_POINT_COUNT) -> list[Vec2]:
    """Return ``count + 1`` points tracing the whole ellipse, first and last coinciding."""
    if count <= 0:
        raise ValueError("count must be positive")
    b = a * math.sqrt(1 - e**2)
    angles = (j * TWO_PI / count for j in range(count + 1))
    return [Vec2(center.x + a * math.cos(t), center.y + b * math.sin(t)) for t in angles]


@dataclass
class Planet:
    """A named body of a given size and colour on an elliptical orbit."""

    name: str
    radius: float
    orbit: EllipticalOrbit
    color: Color


_PLANETS = (
    ("mercury", 24.0, 390.0, 0.205, 0.479, (26, 26, 26)),
    ("venus", 60.0, 720.0, 0.006, 0.35, (230, 230, 230)),
    ("earth", 63.5, 1000.0, 0.016, 0.298, (47, 106, 105)),
    ("mars", 33.5, 1520.0, 0.093, 0.241, (153, 61, 0)),
    ("jupiter", 699.0, 5200.0, 0.048, 0.131, (176, 127, 53)),
    ("saturn", 512.0, 9540.0, 0.054, 0.097, (176, 143, 54)),
    ("uranus", 253.5, 19220.0, 0.047, 0.068, (85, 128, 170)),
    ("neptune", 298.5, 300600.0, 0.008, 0.054, (54, 104, 150)),
)


def solar_system(rng: random.Random) -> list[Planet]:
    """The eight planets at random starting angles; venus turns the other way."""
    planets = []
    for name, radius, a, e, speed, color in _PLANETS:
        angle = rng.uniform(0.0, 359.0) if name == "mercury" else rng.uniform(0.0, 255.0)
        orbit = EllipticalOrbit(CENTER, a, e, angle, speed, retrograde=name == "venus")
        planets.append(Planet(name, radius, orbit, color))
    return planets


@dataclass
class Camera:
    """The visible part of the world: a rectangle given by its centre and size."""

    center: Vec2 = CENTER
    size: Vec2 = field(default_factory=lambda: Vec2(float(WIDTH), float(HEIGHT)))

    def move(self, dx: float, dy: float) -> None:
        """Pan by (dx, dy) world units."""
        self.center = self.center + Vec2(dx, dy)

    def zoom(self, factor: float) -> None:
        """Scale the visible area about its centre; below 1 zooms in."""
        self.size = self.size * factor

    def _scale(self, screen_size: tuple[int, int]) -> float:
        return screen_size[0] / self.size.x

    def _to_screen(self, point: Vec2, screen_size: tuple[int, int]) -> tuple[float, float]:
        left = self.center.x - self.size.x / 2
        top = self.center.y - self.size.y / 2
        return (
            (point.x - left) * screen_size[0] / self.size.x,
            (point.y - top) * screen_size[1] / self.size.y,
        )


def _quit_requested(event, pygame) -> bool:
    return event.type == pygame.QUIT or (
        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
    )


def _run_two_bodies(sun_position: Vec2, orbit) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Orbit")
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if _quit_requested(event, pygame):
                    running = False
            orbit.step(clock.tick(FRAME_RATE) / 1000.0)
            screen.fill((0, 0, 0))
            pygame.draw.circle(screen, YELLOW, tuple(sun_position), SUN_RADIUS)
            pygame.draw.circle(screen, CYAN, tuple(orbit.position()), EARTH_RADIUS)
            pygame.display.flip()
    finally:
        pygame.quit()


def run_circle() -> None:
    """Open a window with one body circling the sun."""
    _run_two_bodies(CENTER, CircularOrbit())


def run_ellipse() -> None:
    """Open a window with one body on an ellipse around a sun at its focus."""
    orbit = EllipticalOrbit()
    _run_two_bodies(orbit.focus(), orbit)


def run_system() -> None:
    """Open a window with the solar system; WASD pans, the wheel zooms."""
    import pygame

    planets = solar_system(random.Random())
    sun_position = planets[2].orbit.focus()
    camera = Camera()
    pans = {
        pygame.K_w: (0.0, -PAN_STEP),
        pygame.K_s: (0.0, PAN_STEP),
        pygame.K_a: (-PAN_STEP, 0.0),
        pygame.K_d: (PAN_STEP, 0.0),
    }
    outlines = [ellipse_points(p.orbit.center, p.orbit.a, p.orbit.e) for p in planets]

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Solar system")
        screen_size = (WIDTH, HEIGHT)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if _quit_requested(event, pygame):
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in pans:
                    camera.move(*pans[event.key])
                elif event.type == pygame.MOUSEWHEEL:
                    if event.y > 0:
                        camera.zoom(ZOOM_IN)
                    elif event.y < 0:
                        camera.zoom(ZOOM_OUT)

            dt = clock.tick(FRAME_RATE) / 1000.0
            for planet in planets:
                planet.orbit.step(dt)

            scale = camera._scale(screen_size)
            screen.fill((0, 0, 0))
            pygame.draw.circle(
                screen, YELLOW, camera._to_screen(sun_position, screen_size), SYSTEM_SUN_RADIUS * scale
            )
            for planet, outline in zip(planets, outlines):
                centre = camera._to_screen(planet.orbit.position(), screen_size)
                pygame.draw.circle(screen, planet.color, centre, planet.radius * scale)
                points = [camera._to_screen(p, screen_size) for p in outline]
                pygame.draw.lines(screen, WHITE, False, points)
            pygame.display.flip()
    finally:
        pygame.quit()