"""
Seedable Alea pseudo-random number generator.

Based on Johannes Baagøe's Alea algorithm. Any string (or number, or
sequence of either) seeds it, and the same seed always yields the same
stream, which makes generated Voronoi images reproducible from a short
seed string.
"""

from typing import Sequence, TypeVar

T = TypeVar("T")

_TWO_POW_32 = 0x100000000
_TWO_POW_NEG_32 = 2.3283064365386963e-10


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class _Mash:
    """Alea's string hash; keeps running state across calls."""

    def __init__(self):
        self.n = 0xEFC8249D

    def __call__(self, data) -> float:
        for char in str(data):
            self.n += ord(char)
            h = 0.02519603282416938 * self.n
            self.n = _uint32(h)
            h -= self.n
            h *= self.n
            self.n = _uint32(h)
            h -= self.n
            self.n += h * _TWO_POW_32
        return _uint32(self.n) * _TWO_POW_NEG_32


class AleaPRNG:
    """
    Alea PRNG with three float state words and a carry.

    Attributes:
        call_count: Number of values drawn via `random()` so far
    """

    def __init__(self, seed):
        """Initialize with a seed string, number, or sequence of them."""
        self.call_count = 0

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            args = list(seed)
        else:
            args = [seed]

        mash = _Mash()
        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        for arg in args:
            self.s0 = self._reduce(self.s0 - mash(arg))
            self.s1 = self._reduce(self.s1 - mash(arg))
            self.s2 = self._reduce(self.s2 - mash(arg))

    @staticmethod
    def _reduce(state: float) -> float:
        return state + 1 if state < 0 else state

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * _TWO_POW_NEG_32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def randint_below(self, upper: int) -> int:
        """
        Uniform integer in [0, upper).

        Raises:
            ValueError: If upper < 1
        """
        if upper < 1:
            raise ValueError(f"upper bound must be at least 1, got {upper}")
        # min() guards the float product rounding up to `upper`
        return min(int(self.random() * upper), upper - 1)

    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.randint_below(len(seq))]
