from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import MutableSequence

    from ..models.api import Snapshot


class RandomSource(Protocol):
    """Subset of random.Random the game draws from; pass a seeded instance for repeatable runs."""

    def randint(self, a: int, b: int) -> int: ...

    def shuffle(self, x: MutableSequence) -> None: ...


class RenderSink(Protocol):
    def draw(self, snapshot: Snapshot) -> None: ...


def roll_percent(rng: RandomSource, chance: int) -> bool:
    """True with probability chance/100."""
    return rng.randint(0, 99) < chance
