import random

from sketchmotion.dots import DotStack


def test_push_adds_dot_within_bounds():
    stack = DotStack()
    rng = random.Random(1)
    for _ in range(200):
        dot = stack.push(rng)
        assert 0.0 <= dot.x <= stack.width - stack.size
        assert 0.0 <= dot.y <= stack.width - stack.size
    assert len(stack.dots) == 200


def test_pop_is_last_in_first_out():
    stack = DotStack()
    rng = random.Random(2)
    first = stack.push(rng)
    second = stack.push(rng)
    assert stack.pop() == second
    assert stack.pop() == first
    assert stack.dots == []


def test_pop_on_empty_returns_none():
    stack = DotStack()
    assert stack.pop() is None
    assert stack.dots == []


def test_same_seed_same_dots():
    a, b = DotStack(), DotStack()
    ra, rb = random.Random(7), random.Random(7)
    for _ in range(5):
        a.push(ra)
        b.push(rb)
    assert a.dots == b.dots


def test_default_dot_size():
    assert DotStack().size == 20.0