"""
The fixed battery of kernel scenarios.

Every scenario is a zero-argument callable returning a bool. Most of them
build the same entity two ways, once through joins, meets and duals and once
through a closed-form construction, and compare the results exactly.
"""

from dataclasses import dataclass
from typing import Callable, Tuple

from ..pga import (
    Point,
    Line,
    Plane,
    Motor,
    meet_via_complement,
    perpendicular_line,
    perpendicular_plane_through_point,
    perpendicular_plane_through_line,
    project_point_onto_plane,
    project_point_onto_line,
)


@dataclass(frozen=True)
class Scenario:
    """A named boolean check."""

    name: str
    check: Callable[[], bool]

    def __call__(self) -> bool:
        return bool(self.check())


# Shared operands with non-trivial fractional coordinates
def _sample_point() -> Point:
    return Point(1.5, -0.25, 3.0, 2.0)


def _sample_plane() -> Plane:
    return Plane(0.3, -1.7, 2.25, 0.8)


def _sample_line() -> Line:
    return Point(2.0, 3.0, 7.0, 1.0) ^ Point(-0.5, 1.25, 0.0, 1.0)


# =============================================================================
# Join
# =============================================================================

def line_from_points() -> bool:
    """The line through (2, 3, 7) and (2, 1, 0) has the hand-derived coordinates."""
    a = Point(2.0, 3.0, 7.0, 1.0)
    b = Point(2.0, 1.0, 0.0, 1.0)
    line = a ^ b
    return line == Line([0.0, -2.0, -7.0], [-7.0, 14.0, -4.0]) and (line ^ a).is_degenerate()


def plane_from_points() -> bool:
    """Three joins give the z = 0 plane, whose footprint has unit weight."""
    a = Point(0.0, 0.0, 0.0, 1.0)
    b = Point(0.0, 1.0, 0.0, 1.0)
    c = Point(1.0, 1.0, 0.0, 1.0)
    plane = a ^ b ^ c
    footprint = plane.weight()
    return plane == Plane(0.0, 0.0, -1.0, 0.0) and bool(footprint.w == 1.0)


def join_antisymmetry() -> bool:
    p = Point(2.0, 3.0, 7.0, 1.0)
    q = Point(-0.5, 1.25, 0.0, 1.0)
    return (p ^ q) == -(q ^ p)


def join_degeneracy() -> bool:
    p = _sample_point()
    return (p ^ p).is_degenerate()


# =============================================================================
# Meet
# =============================================================================

def meet_degeneracy() -> bool:
    f = _sample_plane()
    return (f & f).is_degenerate()


def meet_planes_via_complement() -> bool:
    f = _sample_plane()
    g = Plane(-1.0, 0.5, 0.125, -3.0)
    return (f & g) == meet_via_complement(f, g)


def meet_line_plane_via_complement() -> bool:
    l = _sample_line()
    f = _sample_plane()
    return (l & f) == meet_via_complement(l, f)


# =============================================================================
# Duality consistency
# =============================================================================

def perpendicular_line_through_point() -> bool:
    """The plane through (1,0,0), (0,1,0), (0,0,1) and the point (1,1,1)."""
    a = Point(1.0, 0.0, 0.0, 1.0)
    b = Point(0.0, 1.0, 0.0, 1.0)
    c = Point(0.0, 0.0, 1.0, 1.0)
    p = Point(1.0, 1.0, 1.0, 1.0)
    f = a ^ b ^ c
    return (~f ^ p) == perpendicular_line(f, p)


def perpendicular_line_general() -> bool:
    f = _sample_plane()
    p = _sample_point()
    return (~f ^ p) == perpendicular_line(f, p)


def plane_perpendicular_to_line() -> bool:
    l = _sample_line()
    p = _sample_point()
    return (~l ^ p) == perpendicular_plane_through_point(l, p)


def plane_through_line_perpendicular_to_plane() -> bool:
    l = _sample_line()
    f = _sample_plane()
    return (l ^ ~f) == perpendicular_plane_through_line(l, f)


# =============================================================================
# Projection
# =============================================================================

def projection_onto_plane() -> bool:
    f = _sample_plane()
    p = _sample_point()
    return ((~f ^ p) & f) == project_point_onto_plane(p, f)


def projection_onto_line() -> bool:
    l = _sample_line()
    p = _sample_point()
    return ((~l ^ p) & l) == project_point_onto_line(p, l)


# =============================================================================
# Motor
# =============================================================================

def motor_zero_angle_is_identity() -> bool:
    return Motor(_sample_line(), 0.0, 0.0) == Motor.identity()


SCENARIOS: Tuple[Scenario, ...] = (
    Scenario("line_from_points", line_from_points),
    Scenario("plane_from_points", plane_from_points),
    Scenario("join_antisymmetry", join_antisymmetry),
    Scenario("join_degeneracy", join_degeneracy),
    Scenario("meet_degeneracy", meet_degeneracy),
    Scenario("meet_planes_via_complement", meet_planes_via_complement),
    Scenario("meet_line_plane_via_complement", meet_line_plane_via_complement),
    Scenario("perpendicular_line_through_point", perpendicular_line_through_point),
    Scenario("perpendicular_line_general", perpendicular_line_general),
    Scenario("plane_perpendicular_to_line", plane_perpendicular_to_line),
    Scenario("plane_through_line_perpendicular_to_plane", plane_through_line_perpendicular_to_plane),
    Scenario("projection_onto_plane", projection_onto_plane),
    Scenario("projection_onto_line", projection_onto_line),
    Scenario("motor_zero_angle_is_identity", motor_zero_angle_is_identity),
)
