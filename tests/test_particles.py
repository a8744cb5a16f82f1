import random

import pytest

from sketchmotion.particles import (
    LIFETIME,
    MAX_SPEED,
    MIN_SPEED,
    Particle,
    ParticleSystem,
)
from sketchmotion.physics import Vec2


def make_system(count=50, seed=1):
    return ParticleSystem(count=count, rng=random.Random(seed))


def test_new_system_holds_count_dead_particles():
    system = make_system(count=7)
    assert len(system.particles) == 7
    assert all(p.lifetime == 0.0 for p in system.particles)
    assert all(p.position == Vec2() for p in system.particles)


def test_negative_count_is_rejected():
    with pytest.raises(ValueError):
        ParticleSystem(count=-1)


def test_non_positive_lifetime_is_rejected():
    with pytest.raises(ValueError):
        ParticleSystem(count=1, lifetime=0.0)


def test_first_update_respawns_everything_at_emitter():
    system = make_system()
    system.set_emitter(Vec2(100.0, 200.0))
    system.update(0.0)
    for particle in system.particles:
        assert particle.position == Vec2(100.0, 200.0)
        assert MIN_SPEED <= particle.velocity.length() <= MAX_SPEED + 1e-9
        assert 1.0 <= particle.lifetime <= LIFETIME


def test_alpha_tracks_remaining_lifetime():
    system = make_system()
    system.update(0.01)
    for particle in system.particles:
        assert particle.alpha == int(particle.lifetime / LIFETIME * 255)
        assert 0 <= particle.alpha <= 255


def test_living_particles_age_and_move():
    system = make_system()
    system.set_emitter(Vec2(10.0, 10.0))
    system.update(0.0)
    before = [(p.position, p.velocity, p.lifetime) for p in system.particles]
    system.update(0.5)
    for (position, velocity, lifetime), particle in zip(before, system.particles):
        assert particle.lifetime == pytest.approx(lifetime - 0.5)
        assert particle.velocity == velocity
        assert particle.position.x == pytest.approx(position.x + velocity.x * 0.5)
        assert particle.position.y == pytest.approx(position.y + velocity.y * 0.5)


def test_expired_particle_is_reborn_at_new_emitter():
    system = make_system(count=1)
    system.update(0.0)
    system.set_emitter(Vec2(300.0, 40.0))
    system.update(LIFETIME + 1.0)
    particle = system.particles[0]
    distance = (particle.position - Vec2(300.0, 40.0)).length()
    assert distance == pytest.approx(particle.velocity.length() * (LIFETIME + 1.0))
    assert particle.lifetime >= 1.0


def test_set_emitter_accepts_tuple():
    system = make_system(count=1)
    system.set_emitter((5.0, 6.0))
    assert system.emitter == Vec2(5.0, 6.0)


def test_particle_defaults_are_opaque():
    assert Particle().alpha == 255