"""Focus points and the grid distance metric."""

import math
from typing import NamedTuple

from .color import Color


class Point(NamedTuple):
    """Integer grid position."""
    row: int
    col: int


class Focus(NamedTuple):
    """A Voronoi site: grid point plus the color of its cell."""
    point: Point
    color: Color

    @classmethod
    def at(cls, row: int, col: int, color: Color) -> "Focus":
        return cls(Point(row, col), color)


def _abs_diff(a: int, b: int) -> int:
    return a - b if a >= b else b - a


def distance(p1: Point, p2: Point) -> float:
    """
    Euclidean distance between two grid points.

    Differences are taken as absolute values before squaring, so the
    result is symmetric and distance(p, p) is exactly 0.0.
    """
    r0, c0 = p1
    r1, c1 = p2
    delta_r = float(_abs_diff(r0, r1))
    delta_c = float(_abs_diff(c0, c1))
    return math.sqrt(delta_c ** 2 + delta_r ** 2)
