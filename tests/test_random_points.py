# tests/test_random_points.py
"""
Random point generation

Covers:
- integer grid (inclusive) and float box modes stay in range
- seeded generation is reproducible
- argument validation
"""

from __future__ import annotations

import pytest
import torch

from cmeans.initialization import RandomPoints, generate_random_points
from cmeans import Point


def test_integer_points_in_inclusive_range():
    points = generate_random_points(500, x_range=(-2, 2), y_range=(0, 1), random_state=3)

    assert len(points) == 500
    assert all(isinstance(p, Point) for p in points)
    xs = {p.x for p in points}
    ys = {p.y for p in points}
    assert xs <= {-2.0, -1.0, 0.0, 1.0, 2.0}
    assert ys <= {0.0, 1.0}
    # both ends of the grid are reachable
    assert {-2.0, 2.0} <= xs


def test_float_points_in_box():
    points = RandomPoints(x_range=(10, 20), y_range=(-1, 1), integer=False,
                          random_state=1).generate(200)

    assert all(10 <= p.x < 20 and -1 <= p.y < 1 for p in points)
    assert any(p.x != int(p.x) for p in points)


def test_seeded_generation_is_reproducible():
    a = generate_random_points(10, random_state=42)
    b = generate_random_points(10, random_state=42)
    c = generate_random_points(10, random_state=43)

    assert a == b
    assert a != c


def test_generator_state_is_shared():
    gen = torch.Generator()
    gen.manual_seed(0)
    points = RandomPoints(random_state=gen)

    first = points.generate(3)
    second = points.generate(3)

    assert first != second


def test_integer_mode_rounds_float_bounds_inward():
    points = generate_random_points(300, x_range=(-0.5, 0.5), y_range=(1.2, 3.9), random_state=7)

    assert {p.x for p in points} == {0.0}
    assert {p.y for p in points} == {2.0, 3.0}

    points = generate_random_points(300, x_range=(-1.5, 1.5), y_range=(0, 0), random_state=7)
    assert {p.x for p in points} == {-1.0, 0.0, 1.0}

    with pytest.raises(ValueError, match="no integer"):
        RandomPoints(x_range=(0.2, 0.8))
    # Float mode accepts the same box
    assert len(RandomPoints(x_range=(0.2, 0.8), integer=False).generate(3)) == 3


def test_zero_points():
    assert generate_random_points(0) == []


def test_invalid_arguments():
    with pytest.raises(ValueError):
        generate_random_points(-1)
    with pytest.raises(ValueError):
        RandomPoints(x_range=(5, -5))
    with pytest.raises(TypeError):
        RandomPoints(random_state="seed")
