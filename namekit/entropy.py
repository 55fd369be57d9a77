#!/usr/bin/env python3
"""
Seeded Random Source
====================
Reproducible integer draws for name generation.

The generator only ever asks for two things: a uniform integer in [0, n)
and a uniform integer in [lo, hi). Any object exposing those two methods
can stand in for SeededRandom.

Seeding:
- bytes are used as raw entropy (e.g. a SHA-256 digest)
- str is hashed with SHA-256 first
- int is used directly
- None pulls fresh entropy from os.urandom()

Usage:
    rng = SeededRandom.from_string("test-seed")
    rng.next_int(4)            # 0..3
    rng.next_int_range(100, 999)  # 100..998
"""

import os
import random
import hashlib
from typing import Optional, Protocol, Union, runtime_checkable


Seed = Union[bytes, bytearray, int, str, None]


@runtime_checkable
class RandomSource(Protocol):
    """The two draws the name generator depends on."""

    def next_int(self, n: int) -> int:
        ...

    def next_int_range(self, lo: int, hi: int) -> int:
        ...


def digest_seed(text: str) -> bytes:
    """SHA-256 digest of a UTF-8 seed string."""
    return hashlib.sha256(text.encode('utf-8')).digest()


class SeededRandom:
    """
    Deterministic random source.

    Every draw advances the internal state, so the same seed and the same
    sequence of calls always yield the same values.
    """

    def __init__(self, seed: Seed = None):
        self._seed = self._normalize(seed)
        self._rng = random.Random(self._seed)

    @staticmethod
    def _normalize(seed: Seed) -> int:
        if seed is None:
            seed = os.urandom(32)
        if isinstance(seed, str):
            seed = digest_seed(seed)
        if isinstance(seed, (bytes, bytearray)):
            seed = int.from_bytes(bytes(seed), 'big')
        if not isinstance(seed, int):
            raise ValueError(f"Unsupported seed type: {type(seed).__name__}")
        return seed

    @classmethod
    def from_string(cls, text: str) -> 'SeededRandom':
        """Seed from the SHA-256 digest of a string."""
        return cls(digest_seed(text))

    @property
    def seed(self) -> int:
        return self._seed

    def next_int(self, n: int) -> int:
        """Return a uniform integer in [0, n)."""
        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        return self._rng.randrange(n)

    def next_int_range(self, lo: int, hi: int) -> int:
        """Return a uniform integer in [lo, hi)."""
        if hi <= lo:
            raise ValueError(f"Empty range [{lo}, {hi})")
        return self._rng.randrange(lo, hi)

    def reset(self, seed: Optional[Seed] = None) -> None:
        """Rewind to the original seed, or reseed with a new one."""
        if seed is not None:
            self._seed = self._normalize(seed)
        self._rng.seed(self._seed)


__all__ = [
    'RandomSource',
    'SeededRandom',
    'digest_seed',
]
