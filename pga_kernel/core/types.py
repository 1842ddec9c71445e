"""
Type aliases and component conventions for pga_kernel.

Component Conventions:
======================

The algebra uses e4 as the projective basis vector. Each entity stores its
coordinates in one tensor whose last dimension holds the components:

    Point  (..., 4): [x, y, z, w]          read as [e1, e2, e3, e4]
    Line   (..., 6): [vx, vy, vz, mx, my, mz]
                     read as [e41, e42, e43, e23, e31, e12]
    Plane  (..., 4): [x, y, z, w]          read as [e234, e314, e124, e321]
    Motor  r (..., 4): [rx, ry, rz, rw]    read as [e41, e42, e43, e1234]
           u (..., 4): [ux, uy, uz, uw]    read as [e23, e31, e12, 1]

Basis table:

    grade 0   scalar       1
    grade 1   vectors      e1, e2, e3, e4
    grade 2   bivectors    e23, e31, e12, e43, e42, e41
    grade 3   antivectors  e321, e124, e314, e234
    grade 4   antiscalar   e1234

A point with w == 0 is ideal (a direction). A line's v part is its
direction and its m part its moment about the origin. A plane's (x, y, z)
part is its normal and w its offset.
"""

from typing import Sequence, Tuple, Union
import torch


# =============================================================================
# Basic Type Aliases
# =============================================================================

# A single coordinate: a Python number or a tensor broadcastable against
# the other coordinates of the same entity
Scalar = Union[float, int, torch.Tensor]

# Three coordinates given together (a direction or a moment)
Vector3 = Union[Sequence[float], torch.Tensor]


# =============================================================================
# Component Names
# =============================================================================

POINT_FIELDS: Tuple[str, ...] = ("x", "y", "z", "w")
POINT_BLADES: Tuple[str, ...] = ("e1", "e2", "e3", "e4")

LINE_FIELDS: Tuple[str, ...] = ("vx", "vy", "vz", "mx", "my", "mz")
LINE_BLADES: Tuple[str, ...] = ("e41", "e42", "e43", "e23", "e31", "e12")

PLANE_FIELDS: Tuple[str, ...] = ("x", "y", "z", "w")
PLANE_BLADES: Tuple[str, ...] = ("e234", "e314", "e124", "e321")
