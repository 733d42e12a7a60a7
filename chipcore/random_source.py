import random

from itertools import cycle
from typing import Iterable, Optional, Protocol

from chipcore.constants import BYTE_MASK


class RandomSource(Protocol):
    """
    Anything which can hand out random bytes to the randomizing opcode.
    """
    def next_byte(self) -> int:
        ...


class SystemRandomSource:
    """
    Random bytes from the standard pseudo-random generator, optionally seeded.
    """
    def __init__(self, seed: Optional[int] = None):
        self.random = random.Random(seed)

    def next_byte(self) -> int:
        return self.random.randint(0, BYTE_MASK)


class SequenceRandomSource:
    """
    Replays the given bytes in order, starting over once they run out.
    """
    def __init__(self, values: Iterable[int]):
        values = [value & BYTE_MASK for value in values]
        if not values:
            raise ValueError("At least one value is needed to replay.")
        self.values = cycle(values)

    def next_byte(self) -> int:
        return next(self.values)
