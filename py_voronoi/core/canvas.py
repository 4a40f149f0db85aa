"""
Pixel buffer for rendered images.

The canvas stores a flat, row-major list of `Color` values together with its
width. Height is derived from the buffer length so the two can never drift
apart. Pixels are addressed as (x, y) = (column, row) and live at linear index
`y * width + x`.
"""

from typing import Iterator, List, Tuple

import numpy as np

from .color import BLACK, Color


class PixelRef:
    """
    Writable handle to a single canvas pixel.

    Returned by `Canvas.pixels_mut` and `Canvas.enumerate_pixels_mut`.
    Assigning to `color` writes straight into the owning canvas buffer.
    """

    __slots__ = ("_pixels", "_index")

    def __init__(self, pixels: List[Color], index: int):
        self._pixels = pixels
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    @property
    def color(self) -> Color:
        return self._pixels[self._index]

    @color.setter
    def color(self, value: Color) -> None:
        self._pixels[self._index] = value

    def __repr__(self):
        return f"PixelRef({self._index}, {self.color!r})"


class Canvas:
    """
    Row-major 2D buffer of colors, serializable to binary PPM.

    All pixels start out black. The buffer is allocated once in the
    constructor and never resized.
    """

    def __init__(self, width: int, height: int):
        """
        Allocate a black canvas.

        Args:
            width: Number of columns, must be at least 1
            height: Number of rows, must not be negative

        Raises:
            ValueError: If width < 1 or height < 0
        """
        if width < 1:
            raise ValueError(f"Canvas width must be at least 1, got {width}")
        if height < 0:
            raise ValueError(f"Canvas height must not be negative, got {height}")
        self._width = width
        self._pixels: List[Color] = [BLACK] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return len(self._pixels) // self._width

    def __len__(self) -> int:
        return len(self._pixels)

    def __iter__(self) -> Iterator[Color]:
        return self.pixels()

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) out of bounds for {self._width}x{self.height} canvas"
            )
        return y * self._width + x

    def pixel_at(self, x: int, y: int) -> Color:
        """Return the color at column x, row y."""
        return self._pixels[self._index(x, y)]

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Set the color at column x, row y in place."""
        self._pixels[self._index(x, y)] = color

    def with_pixel(self, x: int, y: int, color: Color) -> "Canvas":
        """Return a copy of this canvas with one pixel replaced."""
        index = self._index(x, y)
        canvas = Canvas.__new__(Canvas)
        canvas._width = self._width
        canvas._pixels = list(self._pixels)
        canvas._pixels[index] = color
        return canvas

    def pixels(self) -> Iterator[Color]:
        """Iterate over pixel colors in row-major order."""
        return iter(self._pixels)

    def pixels_mut(self) -> Iterator[PixelRef]:
        """Iterate over writable pixel handles in row-major order."""
        for index in range(len(self._pixels)):
            yield PixelRef(self._pixels, index)

    def enumerate_pixels_mut(self) -> Iterator[Tuple[int, int, PixelRef]]:
        """
        Lazily yield (row, column, pixel) for every pixel in row-major order.

        The column wraps back to 0 and the row advances exactly every
        `width` pixels. The generator stops after `width * height` items.
        """
        width = self._width
        row = 0
        col = 0
        for index in range(len(self._pixels)):
            if col >= width:
                col = 0
                row += 1
            yield row, col, PixelRef(self._pixels, index)
            col += 1

    def to_array(self) -> np.ndarray:
        """Return the pixels as a (height, width, 3) uint8 array of byte triples."""
        triples = [pixel.to_byte_triple() for pixel in self._pixels]
        array = np.array(triples, dtype=np.uint8)
        return array.reshape((self.height, self._width, 3))

    def to_ppm(self) -> bytes:
        """
        Serialize to binary PPM (P6).

        Layout is the ASCII header "P6\\n<width> <height>\\n255\\n" followed by
        three raw bytes (R, G, B) per pixel in row-major order.
        """
        header = f"P6\n{self._width} {self.height}\n255\n".encode("ascii")
        return header + self.to_array().tobytes()

    def __repr__(self):
        return f"Canvas({self._width}x{self.height})"
