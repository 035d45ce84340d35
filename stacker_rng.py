
"""7-bag randomizer over a secure byte source"""
import secrets
from typing import Callable, List, Sequence, TypeVar

from stacker_piece import PIECE_TYPES

T = TypeVar("T")
ByteSource = Callable[[int], bytes]


def random_int(high: int, source: ByteSource = secrets.token_bytes) -> int:
    """Return an unbiased integer in [0, high).

    Draws just enough bytes to express high - 1 and rejects any draw at or above the
    largest multiple of `high` those bytes can hold, so the final modulo is even.
    """
    if high < 1:
        raise ValueError("high must be positive")
    n_bytes = max(1, ((high - 1).bit_length() + 7) // 8)
    span = 256 ** n_bytes
    limit = span - span % high
    while True:
        value = int.from_bytes(source(n_bytes), "big")
        if value < limit:
            return value % high


def shuffle(items: Sequence[T], source: ByteSource = secrets.token_bytes) -> List[T]:
    """Return a shuffled copy of `items` (inside-out Fisher-Yates)."""
    out: List[T] = []
    for i, item in enumerate(items):
        j = random_int(i + 1, source)
        if j == i:
            out.append(item)
        else:
            out.append(out[j])
            out[j] = item
    return out


class BagRandomizer:
    PIECES = list(PIECE_TYPES)

    def __init__(self, source: ByteSource = secrets.token_bytes):
        self.source = source

    def next_bag(self) -> List[str]:
        return shuffle(self.PIECES, self.source)
