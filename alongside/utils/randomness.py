import random
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float:
        ...

    def choice(self, seq: Sequence[T]) -> T:
        ...


def make_random_source(seed: Optional[int] = None) -> random.Random:
    """Seeded generator when a seed is given, OS entropy otherwise."""
    return random.Random(seed)
