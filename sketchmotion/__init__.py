"""Interactive 2D motion sketches: bouncing, colliding, drifting, orbiting, particles and snake."""

__version__ = "0.1.0"