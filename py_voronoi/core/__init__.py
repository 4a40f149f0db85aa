"""
Core rendering functionality.
"""

from .color import Color, NAMED_COLORS, named_color
from .canvas import Canvas, PixelRef
from .focus import Point, Focus, distance
from .voronoi_image import VoronoiImage, DOT_RADIUS
from .alea_prng import AleaPRNG

__all__ = ['Color', 'NAMED_COLORS', 'named_color', 'Canvas', 'PixelRef',
           'Point', 'Focus', 'distance', 'VoronoiImage', 'DOT_RADIUS', 'AleaPRNG']
