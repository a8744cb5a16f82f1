"""A fountain of fading particles that respawn at an emitter."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from sketchmotion.physics import Vec2

WIDTH, HEIGHT = 800, 600
PARTICLE_COUNT = 1000
LIFETIME = 3.0  # seconds a particle lives at most
MIN_SPEED, MAX_SPEED = 50.0, 100.0
MIN_LIFETIME_MS, MAX_LIFETIME_MS = 1000, 3000
FRAME_RATE = 60


@dataclass
class Particle:
    """A point with a velocity, a remaining lifetime in seconds and an opacity."""

    position: Vec2 = Vec2()
    velocity: Vec2 = Vec2()
    lifetime: float = 0.0
    alpha: int = 255


@dataclass
class ParticleSystem:
    """Particles that fly out of the emitter and fade as their lifetime runs out."""

    count: int = PARTICLE_COUNT
    lifetime: float = LIFETIME
    emitter: Vec2 = Vec2()
    rng: random.Random = field(default_factory=random.Random)
    particles: list[Particle] = field(init=False)

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"particle count must not be negative, got {self.count}")
        if self.lifetime <= 0:
            raise ValueError(f"lifetime must be positive, got {self.lifetime}")
        self.particles = [Particle() for _ in range(self.count)]

    def set_emitter(self, position: Vec2) -> None:
        """Move the point where dead particles are reborn."""
        self.emitter = Vec2(*position)

    def _reset(self, particle: Particle) -> None:
        angle = math.radians(self.rng.uniform(0.0, 360.0))
        speed = self.rng.uniform(MIN_SPEED, MAX_SPEED)
        particle.velocity = Vec2(speed * math.cos(angle), speed * math.sin(angle))
        particle.lifetime = self.rng.randint(MIN_LIFETIME_MS, MAX_LIFETIME_MS) / 1000.0
        particle.position = self.emitter

    def update(self, elapsed: float) -> None:
        """Age, respawn, move and fade every particle by ``elapsed`` seconds."""
        for particle in self.particles:
            particle.lifetime -= elapsed
            if particle.lifetime <= 0:
                self._reset(particle)
            particle.position = particle.position + particle.velocity * elapsed
            ratio = particle.lifetime / self.lifetime
            particle.alpha = int(ratio * 255) & 0xFF


def run() -> None:
    """Open a window with a particle fountain that follows the mouse."""
    import pygame

    system = ParticleSystem()
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Particles")
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            system.set_emitter(Vec2(*map(float, pygame.mouse.get_pos())))
            system.update(clock.tick(FRAME_RATE) / 1000.0)

            screen.fill((0, 0, 0))
            for particle in system.particles:
                x, y = int(particle.position.x), int(particle.position.y)
                if 0 <= x < WIDTH and 0 <= y < HEIGHT:
                    shade = particle.alpha
                    screen.set_at((x, y), (shade, shade, shade))
            pygame.display.flip()
    finally:
        pygame.quit()