"""
Random source interface for dataset generation.

Every random draw made by the synthesizer and the builder goes through a
``RandomSource`` passed in by the caller. ``random.Random`` satisfies the
protocol, so a seeded instance makes a whole build reproducible.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """
    Minimal randomness contract used by the generators.

    Methods
    -------
    random()
        Uniform float in [0, 1).
    uniform(a, b)
        Uniform float in [a, b].
    randrange(stop)
        Uniform integer in [0, stop).
    """

    def random(self) -> float:
        ...

    def uniform(self, a: float, b: float) -> float:
        ...

    def randrange(self, stop: int) -> int:
        ...


def make_random_source(seed: Optional[int] = None) -> RandomSource:
    """
    Build a random source. A ``None`` seed gives a nondeterministic source.
    """
    return random.Random(seed)


__all__ = ["RandomSource", "make_random_source"]
