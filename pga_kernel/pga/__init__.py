"""
PGA (Projective Geometric Algebra) module.

Implements points, lines and planes of 3D projective space with e4 as the
projective direction, the join (^), meet (&) and dual (~) operations that
relate them, and motor construction from an axis line.
"""

from .primitives import (
    Point,
    Line,
    Plane,
    origin,
    ideal_point,
    line_from_point_direction,
    x_axis,
    y_axis,
    z_axis,
    xy_plane,
    xz_plane,
    yz_plane,
)

from .operations import (
    join,
    meet,
    dual,
    complement,
    left_complement,
    meet_via_complement,
)

from .motors import (
    Motor,
    motor_from_axis,
    rotation_about,
    translation_along,
)

from .constructions import (
    perpendicular_line,
    perpendicular_plane_through_point,
    perpendicular_plane_through_line,
    project_point_onto_plane,
    project_point_onto_line,
)

__all__ = [
    # Primitives
    "Point",
    "Line",
    "Plane",
    "origin",
    "ideal_point",
    "line_from_point_direction",
    "x_axis",
    "y_axis",
    "z_axis",
    "xy_plane",
    "xz_plane",
    "yz_plane",
    # Operations
    "join",
    "meet",
    "dual",
    "complement",
    "left_complement",
    "meet_via_complement",
    # Motors
    "Motor",
    "motor_from_axis",
    "rotation_about",
    "translation_along",
    # Constructions
    "perpendicular_line",
    "perpendicular_plane_through_point",
    "perpendicular_plane_through_line",
    "project_point_onto_plane",
    "project_point_onto_line",
]
