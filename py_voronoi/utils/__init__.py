"""
Utilities: seeded focus generation and image output.
"""

from .random import set_random_seed, get_prng, get_seed, random_point, random_color, random_focus, random_foci
from .output import write_image

__all__ = ['set_random_seed', 'get_prng', 'get_seed', 'random_point', 'random_color',
           'random_focus', 'random_foci', 'write_image']
