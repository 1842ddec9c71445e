"""
pga_kernel: a computational kernel for 3D Projective Geometric Algebra

Points, lines and planes of homogeneous 4D space with the join, meet and
dual operations that relate them, plus motor construction from an axis
line, an angle and a distance.

Key Features:
- Point, Line and Plane value types backed by float32 torch tensors
- Join (^), meet (&) and weight dual (~) operators
- Invertible complement with meet == left_complement(complement(a) ^ complement(b))
- Closed-form perpendiculars and projections that match their dual-derived forms exactly
- A scenario harness runnable as `python -m pga_kernel`

Example:
    >>> from pga_kernel.pga import Point
    >>> a = Point(1.0, 0.0, 0.0, 1.0)
    >>> b = Point(0.0, 1.0, 0.0, 1.0)
    >>> c = Point(0.0, 0.0, 1.0, 1.0)
    >>> plane = a ^ b ^ c
    >>> perpendicular = ~plane ^ Point(1.0, 1.0, 1.0, 1.0)
"""

__version__ = "0.1.0"
__author__ = "pga_kernel Contributors"

from . import core
from . import pga
from . import utils
from . import harness

__all__ = [
    "core",
    "pga",
    "utils",
    "harness",
]
