"""
Voronoi image construction.

Every pixel of the target canvas takes the color of its nearest focus.
Pixels within `DOT_RADIUS` of their nearest focus are painted black so each
focus shows up as a dot. Nearest-focus search is a brute-force scan over all
foci; when two foci are equally close the one added first wins.
"""

from typing import Iterable, List, Optional, Tuple

import numpy as np
import structlog

from .canvas import Canvas
from .color import BLACK
from .focus import Focus, Point, distance

logger = structlog.get_logger()

DOT_RADIUS = 4.0

BUILD_METHODS = ("scan", "numpy")


class VoronoiImage:
    """
    Target dimensions plus the ordered focus list for one rendered image.

    Usage:
        image = VoronoiImage(800, 600).with_foci(foci)
        canvas = image.build_canvas()
    """

    def __init__(self, width: int, height: int, dot_radius: float = DOT_RADIUS):
        self.width = width
        self.height = height
        self.dot_radius = dot_radius
        self.foci: List[Focus] = []

    def with_foci(self, foci: Iterable[Focus]) -> "VoronoiImage":
        """Append foci (order preserved) and return self for chaining."""
        self.foci.extend(foci)
        return self

    def add_focus(self, focus: Focus) -> None:
        self.foci.append(focus)

    def nearest_focus(self, row: int, col: int) -> Optional[Tuple[float, Focus]]:
        """
        Find the focus closest to (row, col).

        Args:
            row, col: Pixel coordinates

        Returns:
            (distance, focus) for the nearest focus, or None if there are no foci.
            A later focus only replaces the current best if it is strictly closer.
        """
        best: Optional[Tuple[float, Focus]] = None
        target = Point(row, col)
        for focus in self.foci:
            current = distance(focus.point, target)
            if best is None or current < best[0]:
                best = (current, focus)
        return best

    def _nearest_focus_grid(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Run the brute-force scan for the whole grid at once.

        Foci are visited in insertion order and a pixel's best is replaced
        only on a strictly smaller distance, matching `nearest_focus`.

        Returns:
            Tuple of (distances, indices), both shaped (height, width).
            Indices are -1 and distances inf when there are no foci.
        """
        rows = np.arange(self.height, dtype=np.int64)[:, np.newaxis]
        cols = np.arange(self.width, dtype=np.int64)[np.newaxis, :]

        best_distance = np.full((self.height, self.width), np.inf, dtype=np.float64)
        best_index = np.full((self.height, self.width), -1, dtype=np.int64)

        for i, focus in enumerate(self.foci):
            f_row, f_col = focus.point
            delta_r = np.abs(rows - f_row).astype(np.float64)
            delta_c = np.abs(cols - f_col).astype(np.float64)
            current = np.sqrt(delta_c ** 2 + delta_r ** 2)
            closer = current < best_distance
            best_distance[closer] = current[closer]
            best_index[closer] = i

        return best_distance, best_index

    def nearest_focus_indices(self) -> np.ndarray:
        """Index into `foci` of the nearest focus for every pixel, shape (height, width)."""
        _, indices = self._nearest_focus_grid()
        return indices

    def build_canvas(self, method: str = "scan") -> Canvas:
        """
        Render the Voronoi diagram.

        Args:
            method: "scan" walks every pixel and calls `nearest_focus`;
                "numpy" computes the same scan over the whole grid with
                array operations. Both produce identical canvases.

        Returns:
            Canvas of size width x height

        Raises:
            ValueError: If method is unknown or the dimensions are invalid
        """
        if method not in BUILD_METHODS:
            raise ValueError(f"Unknown build method: {method!r} (expected one of {BUILD_METHODS})")

        logger.info("Building Voronoi canvas",
                    width=self.width, height=self.height,
                    foci=len(self.foci), method=method)

        canvas = Canvas(self.width, self.height)
        if method == "scan":
            self._fill_by_scan(canvas)
        else:
            self._fill_from_grid(canvas)

        logger.info("Voronoi canvas built", pixels=len(canvas))
        return canvas

    def _fill_by_scan(self, canvas: Canvas) -> None:
        for row, col, pixel in canvas.enumerate_pixels_mut():
            nearest = self.nearest_focus(row, col)
            if nearest is None:
                continue
            d, focus = nearest
            pixel.color = BLACK if d <= self.dot_radius else focus.color

    def _fill_from_grid(self, canvas: Canvas) -> None:
        distances, indices = self._nearest_focus_grid()
        flat_indices = indices.ravel().tolist()
        flat_dots = (distances <= self.dot_radius).ravel().tolist()

        for (_, _, pixel), index, is_dot in zip(canvas.enumerate_pixels_mut(),
                                                 flat_indices, flat_dots):
            if index < 0:
                continue
            pixel.color = BLACK if is_dot else self.foci[index].color
