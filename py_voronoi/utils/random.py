"""
Random focus generation.

All randomness goes through a module-level Alea PRNG so that a run can be
reproduced from its seed string. Python's `random` and NumPy's random
generators are not used.
"""

import secrets
from typing import List, Optional

import structlog

from ..core.alea_prng import AleaPRNG
from ..core.color import Color
from ..core.focus import Focus, Point

logger = structlog.get_logger()

# Global PRNG instance
_prng: Optional[AleaPRNG] = None
_seed: Optional[str] = None


def set_random_seed(seed: Optional[str] = None) -> str:
    """
    Reseed the global PRNG.

    Args:
        seed: Seed string. A fresh one is drawn from the OS when omitted.

    Returns:
        The seed actually used
    """
    global _prng, _seed

    if seed is None:
        seed = secrets.token_hex(8)
    _prng = AleaPRNG(seed)
    _seed = seed
    logger.debug("PRNG seeded", seed=seed)
    return seed


def get_prng() -> AleaPRNG:
    """
    Get the current PRNG instance, seeding it randomly on first use.

    Returns:
        AleaPRNG instance
    """
    if _prng is None:
        set_random_seed()
    return _prng


def get_seed() -> Optional[str]:
    """Seed of the current global PRNG, or None if it has not been seeded yet."""
    return _seed


def random_point(width: int, height: int, prng: Optional[AleaPRNG] = None) -> Point:
    """Uniform grid point with row in [0, height) and col in [0, width)."""
    prng = prng or get_prng()
    row = prng.randint_below(height)
    col = prng.randint_below(width)
    return Point(row, col)


def random_color(prng: Optional[AleaPRNG] = None) -> Color:
    """Color with each channel uniform in [0, 1)."""
    prng = prng or get_prng()
    r = prng.random()
    g = prng.random()
    b = prng.random()
    return Color(r, g, b)


def random_focus(width: int, height: int, prng: Optional[AleaPRNG] = None) -> Focus:
    prng = prng or get_prng()
    point = random_point(width, height, prng)
    return Focus(point, random_color(prng))


def random_foci(width: int, height: int, count: int,
                prng: Optional[AleaPRNG] = None) -> List[Focus]:
    """
    Generate `count` random foci inside a width x height canvas.

    Args:
        width, height: Canvas dimensions (both at least 1)
        count: Number of foci
        prng: Generator to draw from, defaults to the global PRNG

    Returns:
        List of foci in generation order
    """
    prng = prng or get_prng()
    foci = [random_focus(width, height, prng) for _ in range(count)]
    logger.info("Foci generated", count=len(foci), prng_calls=prng.call_count)
    return foci
