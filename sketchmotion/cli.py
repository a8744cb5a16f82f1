"""Command line entry point that opens one of the animated sketches."""

from __future__ import annotations

import argparse
from typing import Any, Callable

from sketchmotion import bounce, dots, drift, marquee, movers, orbits, particles, physics
from sketchmotion import snake, snake_wrap

WIDTH, HEIGHT = 800, 600
FRAME_RATE = 60


def run_blank() -> None:
    """Open an empty black window that closes on Escape or the close button."""
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Sketch")
        clock = pygame.time.Clock()
        running = True
        while running:
            clock.tick(FRAME_RATE)
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            screen.fill((0, 0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()


_SNAKE_VARIANTS = {
    "no-food": {"food": False, "grow": False},
    "food": {"food": True, "grow": False},
    "grow": {"food": True, "grow": True},
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sketchmotion", description="Animated sketches.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("blank", help="an empty black window")

    collide = sub.add_parser("collide", help="random balls colliding")
    collide.add_argument("--count", type=int, default=50)
    sub.add_parser("collide-click", help="click to add colliding balls")

    axis = sub.add_parser("axis", help="click to add balls moving along one axis")
    axis.add_argument("axis", choices=["x", "y"])

    for name, text in (("bounce", "one falling ball"), ("bounce-many", "click to drop balls")):
        command = sub.add_parser(name, help=text)
        command.add_argument("--friction", action="store_true")
    sub.add_parser("bounce-wall", help="click to add balls bouncing off the walls")

    snake_cmd = sub.add_parser("snake", help="snake on a bordered board")
    snake_cmd.add_argument("--variant", choices=list(_SNAKE_VARIANTS), default="grow")
    sub.add_parser("snake-wrap", help="snake on a borderless board")

    sub.add_parser("dots", help="arrow keys add and remove squares")

    drift_cmd = sub.add_parser("drift", help="click to add drifting balls")
    drift_cmd.add_argument("--no-bounce", action="store_true")
    drift_cmd.add_argument("--white", action="store_true")

    sub.add_parser("orbit-circle", help="a body on a circular orbit")
    sub.add_parser("orbit-ellipse", help="a body on an elliptical orbit")
    sub.add_parser("solar-system", help="the planets, with pan and zoom")
    sub.add_parser("particles", help="a particle fountain following the mouse")
    sub.add_parser("marquee", help="text crawling around the window")
    return parser


def _resolve(argv: list[str] | None) -> tuple[Callable[..., None], dict[str, Any]]:
    args = _build_parser().parse_args(argv)
    command = args.command
    if command == "collide":
        return physics.run_random, {"count": args.count}
    if command == "axis":
        return movers.run, {"axis": args.axis}
    if command == "bounce":
        return bounce.run_single, {"friction": args.friction}
    if command == "bounce-many":
        return bounce.run_many, {"friction": args.friction}
    if command == "snake":
        return snake.run, dict(_SNAKE_VARIANTS[args.variant])
    if command == "drift":
        return drift.run, {"bounce": not args.no_bounce, "colored": not args.white}
    plain = {
        "blank": run_blank,
        "collide-click": physics.run_click,
        "bounce-wall": bounce.run_wall,
        "snake-wrap": snake_wrap.run,
        "dots": dots.run,
        "orbit-circle": orbits.run_circle,
        "orbit-ellipse": orbits.run_ellipse,
        "solar-system": orbits.run_system,
        "particles": particles.run,
        "marquee": marquee.run,
    }
    return plain[command], {}


def main(argv: list[str] | None = None) -> int:
    """Run the sketch named on the command line."""
    func, kwargs = _resolve(argv)
    func(**kwargs)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())