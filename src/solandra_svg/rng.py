"""
rng.py
------

Seedable, thread-safe PCG32 random generator.

Every stochastic helper of the canvas draws from one instance of this class,
so a given seed reproduces the whole drawing bit for bit. The generator is
PCG32 (XSH-RR output) with the reference multiplier and default increment;
its full state is exposed as four unsigned 32-bit words for save/replay.
"""

from __future__ import annotations

__all__ = ["RNG", "RNGState"]

import os
import time
import random
import threading
from typing import Any, MutableSequence, Optional, Sequence, TypeAlias

# ---------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------
MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF
PCG_MULTIPLIER = 0x5851F42D4C957F2D
PCG_DEFAULT_INCREMENT = 0x14057B7EF767814F
BIT_27 = 134217728.0
BIT_53 = 9007199254740992.0

RNGState: TypeAlias = tuple[int, int, int, int]


def _entropy_seed() -> int:
    return (
        os.getpid() ^ (time.time_ns() & MASK32) ^ random.getrandbits(32)
    ) & MASK32


# ---------------------------------------------------------------------
# RNG class
# ---------------------------------------------------------------------
class RNG:
    """Deterministic PCG32 generator.

    Attributes:
        _state: 64-bit LCG state.
        _inc:   64-bit odd stream increment.
        _lock:  threading.Lock guarding every state mutation.

    Notes:
        - ``RNG()`` seeds from pid/time/OS entropy (not reproducible).
        - ``RNG(s)`` uses ``s`` as the low word of the 64-bit seed.
        - ``RNG(hi, lo)`` uses the full 64-bit seed.
    """

    def __init__(self, seed_hi: Optional[int] = None, seed_lo: Optional[int] = None):
        self._lock = threading.Lock()
        self._state = 0
        self._inc = PCG_DEFAULT_INCREMENT
        self.seed(seed_hi, seed_lo)

    # -----------------------------------------------------------------
    # Core seeding
    # -----------------------------------------------------------------
    def seed(self, seed_hi: Optional[int] = None, seed_lo: Optional[int] = None) -> None:
        """Reinitialize the RNG in place (preserves object identity)."""
        if seed_hi is None and seed_lo is None:
            seed_hi, seed_lo = 0, _entropy_seed()
        elif seed_lo is None:
            seed_hi, seed_lo = 0, seed_hi
        seed64 = ((int(seed_hi) & MASK32) << 32) | (int(seed_lo) & MASK32)

        with self._lock:
            self._inc |= 1
            self._state = 0
            self._step()
            self._state = (self._state + seed64) & MASK64
            self._step()

    def _step(self) -> None:
        self._state = (self._state * PCG_MULTIPLIER + self._inc) & MASK64

    def _next(self) -> int:
        old = self._state
        self._step()
        xorshifted = (((old >> 18) ^ old) >> 27) & MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & MASK32

    # -----------------------------------------------------------------
    # Draws
    # -----------------------------------------------------------------
    def next(self) -> int:
        """Return a uniformly distributed unsigned 32-bit integer."""
        with self._lock:
            return self._next()

    def integer(self, bound: int) -> int:
        """Return a uniform integer in ``[0, bound)``.

        Non-power-of-two bounds are reduced by rejection, so there is no
        modulo bias. A falsy bound returns the raw 32-bit draw.
        """
        with self._lock:
            if not bound:
                return self._next()
            bound = int(bound) & MASK32
            if bound & (bound - 1) == 0:
                return self._next() & (bound - 1)
            skew = ((-bound) & MASK32) % bound
            num = self._next()
            while num < skew:
                num = self._next()
            return num % bound

    def number(self) -> float:
        """Return a uniform float in ``[0, 1)`` with 53 bits of precision."""
        with self._lock:
            hi = float(self._next() & 0x03FFFFFF)
            lo = float(self._next() & 0x07FFFFFF)
            return (hi * BIT_27 + lo) / BIT_53

    def random(self) -> float:
        return self.number()

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.number()

    def randint(self, a: int, b: int) -> int:
        """Uniform integer in ``[a, b]`` (both ends inclusive)."""
        if b < a:
            raise ValueError(f"Empty range for randint({a}, {b})")
        return a + self.integer(b - a + 1)

    def choice(self, seq: Sequence[Any]) -> Any:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence.")
        return seq[self.integer(len(seq))]

    def shuffle(self, seq: MutableSequence[Any]) -> MutableSequence[Any]:
        """Fisher-Yates shuffle in place; returns ``seq`` for chaining."""
        for i in range(len(seq) - 1, 0, -1):
            j = self.integer(i + 1)
            seq[i], seq[j] = seq[j], seq[i]
        return seq

    # -----------------------------------------------------------------
    # Utility & Introspection
    # -----------------------------------------------------------------
    def getstate(self) -> RNGState:
        """Return the full state as ``(state_hi, state_lo, inc_hi, inc_lo)``."""
        with self._lock:
            return (
                self._state >> 32,
                self._state & MASK32,
                self._inc >> 32,
                self._inc & MASK32,
            )

    def setstate(self, state: Sequence[int]) -> None:
        if len(state) != 4:
            raise ValueError(f"RNG state must have 4 words, got {len(state)}")
        state_hi, state_lo, inc_hi, inc_lo = (int(w) & MASK32 for w in state)
        with self._lock:
            self._state = (state_hi << 32) | state_lo
            self._inc = (inc_hi << 32) | inc_lo

    def __repr__(self) -> str:
        return f"<RNG pcg32 state={self._state:#018x} id={id(self)}>"
