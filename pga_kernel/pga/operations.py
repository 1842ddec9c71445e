"""
Join, meet and duality operations on points, lines and planes.

- Join (wedge, ^): smallest entity containing both operands
  - point ^ point → line
  - line ^ point → plane (point ^ line is the same plane)
- Meet (antiwedge, &): common locus of both operands
  - plane & plane → line
  - line & plane → point (plane & line is the same point)
- Dual (~): weight dual, a lossy map onto the complementary grade
- Complement: the invertible right complement; meet is the left complement
  of the join of the right complements

The formulas below are written out component by component. Their operand
order is part of the contract: the scenario harness compares them to
dual-derived expressions with exact floating point equality.
"""

from __future__ import annotations
from typing import Union

import torch

from .primitives import Point, Line, Plane


Entity = Union[Point, Line, Plane]


def _join_points(p: Point, q: Point) -> Line:
    """
    Line containing points p and q.

    Zero if p and q are coincident.
    """
    px, py, pz, pw = p.x, p.y, p.z, p.w
    qx, qy, qz, qw = q.x, q.y, q.z, q.w

    return Line.from_tensor(_stack(
        qx * pw - px * qw,
        qy * pw - py * qw,
        qz * pw - pz * qw,
        py * qz - pz * qy,
        pz * qx - px * qz,
        px * qy - py * qx,
    ))


def _join_line_point(l: Line, p: Point) -> Plane:
    """
    Plane containing line l and point p.

    Normal is zero if p lies on l.
    """
    vx, vy, vz = l.vx, l.vy, l.vz
    mx, my, mz = l.mx, l.my, l.mz
    px, py, pz, pw = p.x, p.y, p.z, p.w

    return Plane.from_tensor(_stack(
        vy * pz - vz * py + mx * pw,
        vz * px - vx * pz + my * pw,
        vx * py - vy * px + mz * pw,
        -(mx * px + my * py + mz * pz),
    ))


def _meet_planes(f: Plane, g: Plane) -> Line:
    """
    Line where planes f and g intersect.

    Direction is zero if f and g are parallel.
    """
    fx, fy, fz, fw = f.x, f.y, f.z, f.w
    gx, gy, gz, gw = g.x, g.y, g.z, g.w

    return Line.from_tensor(_stack(
        fz * gy - fy * gz,
        fx * gz - fz * gx,
        fy * gx - fx * gy,
        fx * gw - gx * fw,
        fy * gw - gy * fw,
        fz * gw - gz * fw,
    ))


def _meet_line_plane(l: Line, f: Plane) -> Point:
    """
    Point where line l intersects plane f.

    Weight is zero if l and f are parallel.
    """
    vx, vy, vz = l.vx, l.vy, l.vz
    mx, my, mz = l.mx, l.my, l.mz
    fx, fy, fz, fw = f.x, f.y, f.z, f.w

    return Point.from_tensor(_stack(
        my * fz - mz * fy + vx * fw,
        mz * fx - mx * fz + vy * fw,
        mx * fy - my * fx + vz * fw,
        -(vx * fx + vy * fy + vz * fz),
    ))


def _stack(*components: torch.Tensor) -> torch.Tensor:
    return torch.stack(components, dim=-1)


def join(a: Union[Point, Line], b: Union[Point, Line]) -> Union[Line, Plane]:
    """
    Join operation (wedge product).

    Creates the smallest element containing both a and b:
    - point ^ point → line
    - line ^ point → plane
    - point ^ line → plane

    Args:
        a, b: Entities to join

    Returns:
        Line or plane

    Raises:
        TypeError: If the join of the two types is not a point, line or plane
    """
    if isinstance(a, Point) and isinstance(b, Point):
        return _join_points(a, b)
    if isinstance(a, Line) and isinstance(b, Point):
        return _join_line_point(a, b)
    if isinstance(a, Point) and isinstance(b, Line):
        return _join_line_point(b, a)
    raise TypeError(f"join is not defined for {type(a).__name__} and {type(b).__name__}")


def meet(a: Union[Plane, Line], b: Union[Plane, Line]) -> Union[Line, Point]:
    """
    Meet operation (antiwedge product).

    Finds the intersection of a and b:
    - plane & plane → line
    - line & plane → point
    - plane & line → point

    Args:
        a, b: Entities to meet

    Returns:
        Line or point

    Raises:
        TypeError: If the meet of the two types is not a point, line or plane
    """
    if isinstance(a, Plane) and isinstance(b, Plane):
        return _meet_planes(a, b)
    if isinstance(a, Line) and isinstance(b, Plane):
        return _meet_line_plane(a, b)
    if isinstance(a, Plane) and isinstance(b, Line):
        return _meet_line_plane(b, a)
    raise TypeError(f"meet is not defined for {type(a).__name__} and {type(b).__name__}")


def dual(a: Entity) -> Entity:
    """
    Weight dual: point → plane (0, 0, 0, -w), line → line (0, -v),
    plane → point (x, y, z, 0).
    """
    return a.dual()


def complement(a: Entity) -> Entity:
    """Right complement: point → plane, line → line, plane → point."""
    return a.complement()


def left_complement(a: Entity) -> Entity:
    """Left complement, the inverse of complement()."""
    return a.left_complement()


def meet_via_complement(a: Union[Plane, Line], b: Union[Plane, Line]) -> Union[Line, Point]:
    """
    Meet computed as the left complement of the join of right complements.

    Equals meet(a, b) exactly.
    """
    if isinstance(a, Plane) and isinstance(b, Line):
        a, b = b, a
    return left_complement(join(complement(a), complement(b)))
