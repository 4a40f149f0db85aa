"""
Voronoi diagram renderer.

Colors every pixel of a canvas by its nearest randomly placed focus and
writes the result as a binary PPM image.
"""

__version__ = "0.1.0"
