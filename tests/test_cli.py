import pytest

from sketchmotion import bounce, drift, movers, orbits, physics, snake
from sketchmotion.cli import _resolve, main, run_blank


def test_missing_command_is_an_error():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_unknown_command_is_an_error():
    with pytest.raises(SystemExit) as info:
        main(["nonsense"])
    assert info.value.code == 2


def test_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_blank_resolves_to_blank_window():
    assert _resolve(["blank"]) == (run_blank, {})


def test_collide_default_and_custom_count():
    assert _resolve(["collide"]) == (physics.run_random, {"count": 50})
    assert _resolve(["collide", "--count", "7"]) == (physics.run_random, {"count": 7})


def test_axis_choice_is_passed_on():
    assert _resolve(["axis", "y"]) == (movers.run, {"axis": "y"})
    with pytest.raises(SystemExit):
        _resolve(["axis", "z"])


def test_bounce_friction_flag():
    assert _resolve(["bounce"]) == (bounce.run_single, {"friction": False})
    assert _resolve(["bounce-many", "--friction"]) == (bounce.run_many, {"friction": True})


@pytest.mark.parametrize(
    "variant, expected",
    [
        ("no-food", {"food": False, "grow": False}),
        ("food", {"food": True, "grow": False}),
        ("grow", {"food": True, "grow": True}),
    ],
)
def test_snake_variants(variant, expected):
    assert _resolve(["snake", "--variant", variant]) == (snake.run, expected)


def test_drift_flags():
    assert _resolve(["drift"]) == (drift.run, {"bounce": True, "colored": True})
    assert _resolve(["drift", "--no-bounce", "--white"]) == (
        drift.run,
        {"bounce": False, "colored": False},
    )


def test_solar_system_command():
    assert _resolve(["solar-system"]) == (orbits.run_system, {})