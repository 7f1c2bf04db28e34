"""
Deterministic RNG — Seed-consuming draw stream.

All randomness in the generator passes through a single SeedStream
instance. Each draw takes `value mod m` as its result and leaves
`value // m` behind, so identical (seed) → identical call sequence →
identical results. Call order is part of the contract.
"""

from __future__ import annotations

from typing import List, Sequence, TypeVar

from marble_kernel.invariants import check_draw_modulus

T = TypeVar("T")


class SeedStream:
    """Holds the remaining seed value. No global random state touched."""

    def __init__(self, seed: int) -> None:
        self._value = seed

    @property
    def value(self) -> int:
        """Entropy left in the stream."""
        return self._value

    def draw(self, modulus: int) -> int:
        """Return an integer in [0, modulus), consuming one division step."""
        check_draw_modulus(modulus)
        self._value, result = divmod(self._value, modulus)
        return result

    def draw_index(self, seq: Sequence[T]) -> int:
        """Draw a valid index into a non-empty sequence."""
        return self.draw(len(seq))

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """
        Destructive shuffle: repeatedly draw k over the remaining pool,
        remove and emit pool[k]. Pool sizes shrink n, n-1, ..., 1; the
        final modulus-1 draw always yields 0 but still consumes a step.
        """
        pool = list(items)
        shuffled: List[T] = []
        while pool:
            shuffled.append(pool.pop(self.draw_index(pool)))
        return shuffled
