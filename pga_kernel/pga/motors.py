"""
Motor construction for Projective Geometric Algebra (PGA).

A Motor represents a screw motion: a rotation by an angle about an axis line
combined with a translation by a distance along that axis. It is stored as
two 4-component parts:

    r = rx*e41 + ry*e42 + rz*e43 + rw*e1234    (rotor part)
    u = ux*e23 + uy*e31 + uz*e12 + uw          (translator-coupled part)

For an axis with direction v and moment m, angle phi and distance d:

    r = (v sin(phi), cos(phi))
    u = (d v cos(phi) + m sin(phi), -d sin(phi))

Only construction is provided; applying a motor to points, lines or planes
is out of scope.
"""

from __future__ import annotations
from typing import List, Union

import torch

from ..core.base import as_component
from ..core.constants import MOTOR_PART_COMPONENTS, DEFAULT_DTYPE, DEFAULT_RTOL, DEFAULT_ATOL
from .primitives import Line


class Motor:
    """
    A screw-motion operator built from an axis line, an angle and a distance.

    Can be constructed from:
    - An axis line, rotation angle and translation distance
    - Raw rotor and translator parts (from_parts)
    - Nothing at all (identity)

    Example:
        >>> axis = Line([0.0, 0.0, 1.0], [0.0, 0.0, 0.0])
        >>> motor = Motor(axis, phi=0.0, d=2.0)
        >>> motor.r
        tensor([0., 0., 0., 1.])
    """

    def __init__(
        self,
        line: Line,
        phi: Union[float, torch.Tensor],
        d: Union[float, torch.Tensor]
    ):
        """
        Initialize a Motor.

        Args:
            line: Axis line; its direction is the rotation axis and the
                  translation direction
            phi: Rotation angle in radians
            d: Translation distance along the axis
        """
        if not isinstance(line, Line):
            raise TypeError(f"Expected a Line axis, got {type(line).__name__}")

        phi = as_component(phi).to(line.dtype)
        d = as_component(d).to(line.dtype)

        # Axis, angle and distance share one batch shape so r and u agree
        batch_shape = torch.broadcast_shapes(line.shape, phi.shape, d.shape)
        v = line.v.expand(*batch_shape, 3)
        m = line.m.expand(*batch_shape, 3)
        sin_phi = torch.sin(phi).expand(batch_shape).unsqueeze(-1)
        cos_phi = torch.cos(phi).expand(batch_shape).unsqueeze(-1)
        d = d.expand(batch_shape).unsqueeze(-1)

        rv = v * sin_phi
        uv = d * v * cos_phi + m * sin_phi

        self._r = torch.cat([rv, cos_phi], dim=-1)
        self._u = torch.cat([uv, -d * sin_phi], dim=-1)

    @classmethod
    def from_parts(cls, r: torch.Tensor, u: torch.Tensor) -> 'Motor':
        """
        Create a Motor from raw parts.

        Args:
            r: Rotor part [e41, e42, e43, e1234] of shape (..., 4)
            u: Translator-coupled part [e23, e31, e12, scalar] of shape (..., 4)

        Returns:
            Motor wrapping the two tensors
        """
        for name, part in (("r", r), ("u", u)):
            if part.shape[-1] != MOTOR_PART_COMPONENTS:
                raise ValueError(
                    f"Expected {MOTOR_PART_COMPONENTS} components for {name}, "
                    f"got shape {tuple(part.shape)}"
                )
        motor = cls.__new__(cls)
        motor._r = r
        motor._u = u
        return motor

    @classmethod
    def identity(cls, dtype: torch.dtype = DEFAULT_DTYPE) -> 'Motor':
        """Create identity motor (no transformation)."""
        r = torch.tensor([0.0, 0.0, 0.0, 1.0], dtype=dtype)
        u = torch.zeros(MOTOR_PART_COMPONENTS, dtype=dtype)
        return cls.from_parts(r, u)

    # === Parts ===

    @property
    def r(self) -> torch.Tensor:
        """Rotor part [e41, e42, e43, e1234] of shape (..., 4)."""
        return self._r

    @property
    def u(self) -> torch.Tensor:
        """Translator-coupled part [e23, e31, e12, scalar] of shape (..., 4)."""
        return self._u

    rotor = r
    translator = u

    @property
    def rx(self) -> torch.Tensor:
        return self._r[..., 0]

    @property
    def ry(self) -> torch.Tensor:
        return self._r[..., 1]

    @property
    def rz(self) -> torch.Tensor:
        return self._r[..., 2]

    @property
    def rw(self) -> torch.Tensor:
        return self._r[..., 3]

    @property
    def ux(self) -> torch.Tensor:
        return self._u[..., 0]

    @property
    def uy(self) -> torch.Tensor:
        return self._u[..., 1]

    @property
    def uz(self) -> torch.Tensor:
        return self._u[..., 2]

    @property
    def uw(self) -> torch.Tensor:
        return self._u[..., 3]

    e41 = rx
    e42 = ry
    e43 = rz
    e1234 = rw
    antiscalar = rw
    e23 = ux
    e31 = uy
    e12 = uz
    scalar = uw

    @property
    def shape(self) -> torch.Size:
        """Batch shape."""
        return self._r.shape[:-1]

    @property
    def dtype(self) -> torch.dtype:
        return self._r.dtype

    def tolist(self) -> List:
        """Both parts as [r, u] nested Python lists."""
        return [self._r.tolist(), self._u.tolist()]

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Motor):
            return NotImplemented
        if self._r.shape != other._r.shape or self._u.shape != other._u.shape:
            return False
        return bool(torch.eq(self._r, other._r).all() and torch.eq(self._u, other._u).all())

    __hash__ = None

    def isclose(self, other: 'Motor', rtol: float = DEFAULT_RTOL, atol: float = DEFAULT_ATOL) -> bool:
        """Approximate equality of both parts."""
        if not isinstance(other, Motor):
            raise TypeError(f"Cannot compare Motor with {type(other).__name__}")
        if self._r.shape != other._r.shape or self._u.shape != other._u.shape:
            return False
        return (
            torch.allclose(self._r, other._r, rtol=rtol, atol=atol)
            and torch.allclose(self._u, other._u, rtol=rtol, atol=atol)
        )

    def __repr__(self) -> str:
        if self._r.dim() == 1:
            return f"Motor(r={self._r.tolist()}, u={self._u.tolist()})"
        return f"Motor(shape={tuple(self.shape)}, dtype={self.dtype})"


def motor_from_axis(line: Line, phi: Union[float, torch.Tensor], d: Union[float, torch.Tensor]) -> Motor:
    """Screw motion about line by angle phi and distance d."""
    return Motor(line, phi, d)


def rotation_about(line: Line, phi: Union[float, torch.Tensor]) -> Motor:
    """Pure rotation about line by angle phi."""
    return Motor(line, phi, 0.0)


def translation_along(line: Line, d: Union[float, torch.Tensor]) -> Motor:
    """Pure translation by d along the direction of line."""
    return Motor(line, 0.0, d)
