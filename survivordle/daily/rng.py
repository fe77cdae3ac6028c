"""
Seeded PRNG and shuffle shared by every client.

The daily answer order must be bit-for-bit identical everywhere (the web
client shuffles the same pool with the same seed), so Python's `random`
module cannot be used here. Mulberry32 is small and fully specified:

  state  = (state + 0x6D2B79F5) mod 2^32
  t      = imul(state ^ (state >> 15), state | 1)
  t      = ((t + imul(t ^ (t >> 7), t | 61)) mod 2^32) ^ t
  output = t ^ (t >> 14)                       # uint32
  random = output / 2^32                       # float in [0, 1)

imul is 32-bit wrapping multiplication. All shifts are logical (unsigned).

seeded_shuffle is a Fisher-Yates pass from the last index down to 1 with
j = floor(random() * (i + 1)).
"""

from __future__ import annotations

import math
from typing import List, Sequence, TypeVar

T = TypeVar("T")

_MASK = 0xFFFFFFFF
_GOLDEN = 0x6D2B79F5


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


class Mulberry32:
    def __init__(self, seed: int):
        self.state = seed & _MASK

    def next_uint32(self) -> int:
        self.state = (self.state + _GOLDEN) & _MASK
        s = self.state
        t = _imul(s ^ (s >> 15), s | 1)
        t = ((t + _imul(t ^ (t >> 7), t | 61)) & _MASK) ^ t
        return (t ^ (t >> 14)) & _MASK

    def random(self) -> float:
        return self.next_uint32() / 4294967296


def seeded_shuffle(items: Sequence[T], seed: int) -> List[T]:
    """Return a shuffled copy of `items`; the input is left untouched."""
    out = list(items)
    rng = Mulberry32(seed)
    for i in range(len(out) - 1, 0, -1):
        j = math.floor(rng.random() * (i + 1))
        out[i], out[j] = out[j], out[i]
    return out
