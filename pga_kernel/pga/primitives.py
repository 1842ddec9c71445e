"""
Geometric primitives in Projective Geometric Algebra (PGA).

The algebra is the 4D exterior algebra with e4 as the projective direction.
Geometric objects are represented as follows:
- Points: Grade-1 vectors (x*e1 + y*e2 + z*e3 + w*e4)
- Lines: Grade-2 bivectors (vx*e41 + vy*e42 + vz*e43 + mx*e23 + my*e31 + mz*e12)
- Planes: Grade-3 antivectors (x*e234 + y*e314 + z*e124 + w*e321)

A finite point has w != 0 and sits at (x/w, y/w, z/w). A point with w == 0
is ideal: a direction. A line carries its direction v and its moment m. A
plane x*X + y*Y + z*Z + w = 0 carries its normal (x, y, z) and offset w.

Operators:
- a ^ b: join (point ^ point -> line, line ^ point -> plane)
- a & b: meet (plane & plane -> line, line & plane -> point)
- ~a: weight dual
- -a: negation

Every entity is an immutable value. Degenerate configurations produce zero
components rather than errors.
"""

from __future__ import annotations
from typing import Union

import torch

from ..core.base import GeometricEntity, as_vector3, stack_components, concat_vectors
from ..core.constants import POINT_COMPONENTS, LINE_COMPONENTS, PLANE_COMPONENTS
from ..core.types import (
    Scalar,
    Vector3,
    POINT_FIELDS,
    POINT_BLADES,
    LINE_FIELDS,
    LINE_BLADES,
    PLANE_FIELDS,
    PLANE_BLADES,
)


class Point(GeometricEntity):
    """
    A homogeneous point x*e1 + y*e2 + z*e3 + w*e4.

    Example:
        >>> p = Point(1.0, 2.0, 3.0, 1.0)
        >>> p.cartesian()
        tensor([1., 2., 3.])
    """

    NUM_COMPONENTS = POINT_COMPONENTS
    FIELDS = POINT_FIELDS
    BLADES = POINT_BLADES

    def __init__(self, x: Scalar, y: Scalar, z: Scalar, w: Scalar):
        """
        Args:
            x, y, z: Coordinates (numbers or broadcastable tensors)
            w: Homogeneous weight; 0 for a point at infinity
        """
        self._coords = stack_components(x, y, z, w)

    @property
    def x(self) -> torch.Tensor:
        return self._component(0)

    @property
    def y(self) -> torch.Tensor:
        return self._component(1)

    @property
    def z(self) -> torch.Tensor:
        return self._component(2)

    @property
    def w(self) -> torch.Tensor:
        return self._component(3)

    # Basis blade readings of the same slots
    e1 = x
    e2 = y
    e3 = z
    e4 = w

    @property
    def xyz(self) -> torch.Tensor:
        """Spatial part of shape (..., 3)."""
        return self._coords[..., :3]

    def cartesian(self) -> torch.Tensor:
        """
        Cartesian position (x/w, y/w, z/w).

        Ideal points have no position; their components come out as
        inf or nan per IEEE division.
        """
        return self.xyz / self.w.unsqueeze(-1)

    def is_ideal(self) -> bool:
        """True if every point in the batch has zero weight."""
        return bool((self.w == 0).all())

    def dual(self) -> 'Plane':
        """
        Weight dual: the plane (0, 0, 0, -w).

        Only the homogeneous weight survives; this is the ideal plane
        stand-in used by dual-derived formulas, not a general plane.
        """
        zero = torch.zeros_like(self.w)
        return Plane(zero, zero, zero, -self.w)

    def complement(self) -> 'Plane':
        """Right complement: e1 -> e234, e2 -> e314, e3 -> e124, e4 -> e321."""
        return Plane.from_tensor(self._coords)

    def left_complement(self) -> 'Plane':
        """Inverse of Plane.complement()."""
        return Plane.from_tensor(-self._coords)

    def __xor__(self, other: Union['Point', 'Line']) -> Union['Line', 'Plane']:
        """Join: point ^ point -> line, point ^ line -> plane."""
        if isinstance(other, (Point, Line)):
            from .operations import join
            return join(self, other)
        return NotImplemented


class Line(GeometricEntity):
    """
    A line in Plücker form: direction v (e41, e42, e43) and moment m (e23, e31, e12).

    For a line through point P with direction D, v = D and m = P x D.
    A line with v == 0 and m == 0 is degenerate.
    """

    NUM_COMPONENTS = LINE_COMPONENTS
    FIELDS = LINE_FIELDS
    BLADES = LINE_BLADES

    def __init__(self, v: Vector3, m: Vector3):
        """
        Args:
            v: Direction of shape (..., 3) or a 3-sequence
            m: Moment of shape (..., 3) or a 3-sequence
        """
        self._coords = concat_vectors(v, m)

    @property
    def v(self) -> torch.Tensor:
        """Direction (ideal) part of shape (..., 3)."""
        return self._coords[..., :3]

    @property
    def m(self) -> torch.Tensor:
        """Moment part of shape (..., 3)."""
        return self._coords[..., 3:]

    @property
    def vx(self) -> torch.Tensor:
        return self._component(0)

    @property
    def vy(self) -> torch.Tensor:
        return self._component(1)

    @property
    def vz(self) -> torch.Tensor:
        return self._component(2)

    @property
    def mx(self) -> torch.Tensor:
        return self._component(3)

    @property
    def my(self) -> torch.Tensor:
        return self._component(4)

    @property
    def mz(self) -> torch.Tensor:
        return self._component(5)

    e41 = vx
    e42 = vy
    e43 = vz
    e23 = mx
    e31 = my
    e12 = mz

    def weight(self) -> Point:
        """The line's direction as a point at infinity."""
        return Point(self.vx, self.vy, self.vz, torch.zeros_like(self.vx))

    def is_degenerate(self) -> bool:
        """True if every line in the batch is the zero line."""
        return bool((self._coords == 0).all())

    def dual(self) -> 'Line':
        """Weight dual: direction 0, moment -v."""
        return Line.from_tensor(torch.cat([torch.zeros_like(self.v), -self.v], dim=-1))

    def complement(self) -> 'Line':
        """Right complement: (v, m) -> (-m, -v). It is its own inverse."""
        return Line.from_tensor(torch.cat([-self.m, -self.v], dim=-1))

    def left_complement(self) -> 'Line':
        return self.complement()

    def __xor__(self, other: Point) -> 'Plane':
        """Join: line ^ point -> plane."""
        if isinstance(other, Point):
            from .operations import join
            return join(self, other)
        return NotImplemented

    def __and__(self, other: 'Plane') -> Point:
        """Meet: line & plane -> point."""
        if isinstance(other, Plane):
            from .operations import meet
            return meet(self, other)
        return NotImplemented


class Plane(GeometricEntity):
    """
    A plane x*e234 + y*e314 + z*e124 + w*e321.

    The plane is the locus x*X + y*Y + z*Z + w = 0; (x, y, z) is its normal
    and w its offset. A zero normal is degenerate.
    """

    NUM_COMPONENTS = PLANE_COMPONENTS
    FIELDS = PLANE_FIELDS
    BLADES = PLANE_BLADES

    def __init__(self, x: Scalar, y: Scalar, z: Scalar, w: Scalar):
        """
        Args:
            x, y, z: Normal components
            w: Signed offset
        """
        self._coords = stack_components(x, y, z, w)

    @property
    def x(self) -> torch.Tensor:
        return self._component(0)

    @property
    def y(self) -> torch.Tensor:
        return self._component(1)

    @property
    def z(self) -> torch.Tensor:
        return self._component(2)

    @property
    def w(self) -> torch.Tensor:
        return self._component(3)

    e234 = x
    e314 = y
    e124 = z
    e321 = w

    @property
    def normal(self) -> torch.Tensor:
        """Normal of shape (..., 3)."""
        return self._coords[..., :3]

    @property
    def offset(self) -> torch.Tensor:
        return self.w

    def weight(self) -> Point:
        """Footprint point (x, y, z, 1)."""
        return Point(self.x, self.y, self.z, torch.ones_like(self.x))

    def is_degenerate(self) -> bool:
        """True if every plane in the batch has a zero normal."""
        return bool((self.normal == 0).all())

    def dual(self) -> Point:
        """Weight dual: the normal as a point at infinity (x, y, z, 0)."""
        return Point(self.x, self.y, self.z, torch.zeros_like(self.x))

    def complement(self) -> Point:
        """Right complement: e234 -> -e1, e314 -> -e2, e124 -> -e3, e321 -> -e4."""
        return Point.from_tensor(-self._coords)

    def left_complement(self) -> Point:
        """Inverse of Point.complement()."""
        return Point.from_tensor(self._coords)

    def __and__(self, other: Union['Plane', Line]) -> Union[Line, Point]:
        """Meet: plane & plane -> line, plane & line -> point."""
        if isinstance(other, (Plane, Line)):
            from .operations import meet
            return meet(self, other)
        return NotImplemented


# === Factory functions ===

def origin() -> Point:
    """Create the origin point (0, 0, 0, 1)."""
    return Point(0.0, 0.0, 0.0, 1.0)


def ideal_point(
    dx: Scalar,
    dy: Scalar,
    dz: Scalar
) -> Point:
    """
    Create an ideal point (point at infinity) from a direction.

    Args:
        dx, dy, dz: Direction components

    Returns:
        Point with w = 0
    """
    return Point(dx, dy, dz, 0.0)


def line_from_point_direction(position: Vector3, direction: Vector3) -> Line:
    """
    Create a line through a Cartesian position with the given direction.

    Args:
        position: A point on the line, shape (..., 3)
        direction: Line direction, shape (..., 3)

    Returns:
        Line with v = direction and m = position x direction
    """
    position = as_vector3(position)
    direction = as_vector3(direction).to(position.dtype)
    moment = torch.linalg.cross(position, direction, dim=-1)
    return Line(direction, moment)


def x_axis() -> Line:
    """Create the X axis."""
    return Line([1.0, 0.0, 0.0], [0.0, 0.0, 0.0])


def y_axis() -> Line:
    """Create the Y axis."""
    return Line([0.0, 1.0, 0.0], [0.0, 0.0, 0.0])


def z_axis() -> Line:
    """Create the Z axis."""
    return Line([0.0, 0.0, 1.0], [0.0, 0.0, 0.0])


def xy_plane() -> Plane:
    """Create the XY plane (z = 0)."""
    return Plane(0.0, 0.0, 1.0, 0.0)


def xz_plane() -> Plane:
    """Create the XZ plane (y = 0)."""
    return Plane(0.0, 1.0, 0.0, 0.0)


def yz_plane() -> Plane:
    """Create the YZ plane (x = 0)."""
    return Plane(1.0, 0.0, 0.0, 0.0)
