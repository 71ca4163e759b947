"""
test_noise.py
-------------

Perlin noise determinism, seeding and range.
"""

import numpy as np
import pytest

from solandra_svg.noise import PERMUTATION, PerlinNoise, perlin2, seed_noise


@pytest.fixture
def sample_points():
    rng = np.random.default_rng(0)
    return rng.uniform(-20, 20, size=(200, 2))


def test_zero_on_lattice_points():
    noise = PerlinNoise(0)
    for x in range(-3, 4):
        for y in range(-3, 4):
            assert noise(x, y) == 0


def test_values_bounded(sample_points):
    noise = PerlinNoise(7)
    values = np.array([noise(x, y) for x, y in sample_points])
    assert np.all(np.abs(values) <= 1.0)
    assert np.std(values) > 0.05


def test_seeding_rules():
    assert list(PerlinNoise(0).perm[:4]) == list(PERMUTATION[:4])
    # 0.5 scales to 0x8000: even entries flip the high bit, odd entries keep.
    half = PerlinNoise(0.5)
    assert half.perm[0] == 151 ^ 128
    assert half.perm[1] == 160
    # Small seeds fill both bytes.
    three = PerlinNoise(3)
    assert three.perm[0] == 151 ^ 3
    assert three.perm[1] == 160 ^ 3
    assert len(three.perm) == 512
    assert np.array_equal(three.perm[:256], three.perm[256:])


def test_seed_changes_field(sample_points):
    a, b = PerlinNoise(1), PerlinNoise(2)
    assert any(a(x, y) != b(x, y) for x, y in sample_points)


def test_deterministic_and_continuous():
    noise = PerlinNoise(11)
    assert noise(3.7, -1.2) == PerlinNoise(11)(3.7, -1.2)
    assert abs(noise(3.7, -1.2) - noise(3.7001, -1.2)) < 1e-3


def test_module_level_instance():
    try:
        base = perlin2(0.3, 0.6)
        seed_noise(99)
        assert perlin2(0.3, 0.6) == PerlinNoise(99)(0.3, 0.6)
    finally:
        seed_noise(0)
    assert perlin2(0.3, 0.6) == base
