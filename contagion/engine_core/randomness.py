"""
Randomness - The injected source of chance.

The engine never touches a global RNG. Seeding SeededRandomness makes a
whole game replayable.
"""

from __future__ import annotations
import random
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class Randomness(Protocol):
    """Randomness capability consumed by the engine."""

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        """k distinct elements, without replacement."""
        ...

    def shuffle(self, sequence: Sequence[T]) -> list[T]:
        """A new list holding a uniform permutation of sequence."""
        ...

    def rand_int(self, low: int, high: int) -> int:
        """Uniform integer in [low, high)."""
        ...


class SeededRandomness:
    """Randomness backed by random.Random with a fixed seed."""

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        return self._rng.sample(list(population), k)

    def shuffle(self, sequence: Sequence[T]) -> list[T]:
        items = list(sequence)
        self._rng.shuffle(items)
        return items

    def rand_int(self, low: int, high: int) -> int:
        return self._rng.randrange(low, high)
