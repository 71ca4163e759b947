"""
noise.py
--------

Seedable 2D Perlin gradient noise.

``PerlinNoise`` holds its own permutation and gradient tables, so separate
instances never disturb each other. The module-level ``perlin2`` and
``seed_noise`` drive a shared default instance seeded with 0.

Values are roughly in ``[-1, 1]`` and exactly 0 on integer lattice points.
"""

from __future__ import annotations

__all__ = ["PerlinNoise", "perlin2", "seed_noise"]

import math

import numpy as np

# Ken Perlin's reference permutation.
PERMUTATION = np.array([
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
], dtype=np.int64)

# x, y components of the 12 edge gradients of a cube.
GRADIENTS = np.array([
    [1, 1], [-1, 1], [1, -1], [-1, -1],
    [1, 0], [-1, 0], [1, 0], [-1, 0],
    [0, 1], [0, -1], [0, 1], [0, -1],
], dtype=float)


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a: float, b: float, t: float) -> float:
    return (1 - t) * a + t * b


class PerlinNoise:
    """2D Perlin noise with a seeded permutation.

    Seeds in ``(0, 1)`` are scaled to 16 bits; seeds below 256 fill both the
    high and low byte.
    """

    def __init__(self, seed: float = 0) -> None:
        self.perm = np.zeros(512, dtype=np.int64)
        self.grad = np.zeros((512, 2), dtype=float)
        self.seed(seed)

    def seed(self, seed: float) -> None:
        if 0 < seed < 1:
            seed *= 65536
        seed = math.floor(seed)
        if seed < 256:
            seed |= seed << 8

        mask = np.where(np.arange(256) & 1, seed & 255, (seed >> 8) & 255)
        v = PERMUTATION ^ mask
        self.perm = np.concatenate([v, v])
        self.grad = GRADIENTS[self.perm % 12]

    def __call__(self, x: float, y: float) -> float:
        X = math.floor(x)
        Y = math.floor(y)
        x -= X
        y -= Y
        X &= 255
        Y &= 255

        perm, grad = self.perm, self.grad
        n00 = float(grad[X + perm[Y]] @ (x, y))
        n01 = float(grad[X + perm[Y + 1]] @ (x, y - 1))
        n10 = float(grad[X + 1 + perm[Y]] @ (x - 1, y))
        n11 = float(grad[X + 1 + perm[Y + 1]] @ (x - 1, y - 1))

        u = _fade(x)
        return _lerp(_lerp(n00, n10, u), _lerp(n01, n11, u), _fade(y))


_default = PerlinNoise(0)


def seed_noise(seed: float) -> None:
    """Reseed the shared instance behind ``perlin2``."""
    _default.seed(seed)


def perlin2(x: float, y: float) -> float:
    return _default(x, y)
