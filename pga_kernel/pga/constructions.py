"""
Closed-form constructions built from joins, meets and weight duals.

Each function here has a dual-derived counterpart:

    perpendicular_line(f, p)                 == ~f ^ p
    perpendicular_plane_through_point(l, p)  == ~l ^ p
    perpendicular_plane_through_line(l, f)   == l ^ ~f
    project_point_onto_plane(p, f)           == (~f ^ p) & f
    project_point_onto_line(p, l)            == (~l ^ p) & l

The closed forms evaluate their products and sums in the same order as the
composed operations, so both sides agree exactly in float32.
"""

from __future__ import annotations

import torch

from .primitives import Point, Line, Plane


def perpendicular_line(f: Plane, p: Point) -> Line:
    """
    Line through p perpendicular to plane f.

    Args:
        f: Plane
        p: Point the line passes through

    Returns:
        Line with direction -w_p * n_f and moment n_f x p
    """
    fx, fy, fz = f.x, f.y, f.z
    px, py, pz, pw = p.x, p.y, p.z, p.w

    return Line.from_tensor(torch.stack([
        -(fx * pw),
        -(fy * pw),
        -(fz * pw),
        fy * pz - fz * py,
        fz * px - fx * pz,
        fx * py - fy * px,
    ], dim=-1))


def perpendicular_plane_through_point(l: Line, p: Point) -> Plane:
    """
    Plane through p perpendicular to line l.

    The normal is the line direction scaled by -w_p.
    """
    vx, vy, vz = l.vx, l.vy, l.vz
    px, py, pz, pw = p.x, p.y, p.z, p.w

    return Plane.from_tensor(torch.stack([
        -(vx * pw),
        -(vy * pw),
        -(vz * pw),
        vx * px + vy * py + vz * pz,
    ], dim=-1))


def perpendicular_plane_through_line(l: Line, f: Plane) -> Plane:
    """
    Plane containing line l and perpendicular to plane f.

    Normal is zero if l is perpendicular to f.
    """
    vx, vy, vz = l.vx, l.vy, l.vz
    mx, my, mz = l.mx, l.my, l.mz
    fx, fy, fz = f.x, f.y, f.z

    return Plane.from_tensor(torch.stack([
        vy * fz - vz * fy,
        vz * fx - vx * fz,
        vx * fy - vy * fx,
        -(mx * fx + my * fy + mz * fz),
    ], dim=-1))


def project_point_onto_plane(p: Point, f: Plane) -> Point:
    """
    Orthogonal projection of p onto plane f.

    The result is scaled by w_p * |n_f|^2; unitize with Point.cartesian().
    """
    fx, fy, fz, fw = f.x, f.y, f.z, f.w
    px, py, pz, pw = p.x, p.y, p.z, p.w

    # moment of the perpendicular line through p
    mx = fy * pz - fz * py
    my = fz * px - fx * pz
    mz = fx * py - fy * px

    return Point.from_tensor(torch.stack([
        my * fz - mz * fy - fx * pw * fw,
        mz * fx - mx * fz - fy * pw * fw,
        mx * fy - my * fx - fz * pw * fw,
        fx * pw * fx + fy * pw * fy + fz * pw * fz,
    ], dim=-1))


def project_point_onto_line(p: Point, l: Line) -> Point:
    """
    Orthogonal projection of p onto line l.

    The result is scaled by w_p * |v_l|^2; unitize with Point.cartesian().
    """
    vx, vy, vz = l.vx, l.vy, l.vz
    mx, my, mz = l.mx, l.my, l.mz
    px, py, pz, pw = p.x, p.y, p.z, p.w

    # offset of the plane through p perpendicular to l
    d = vx * px + vy * py + vz * pz

    return Point.from_tensor(torch.stack([
        mz * (vy * pw) - my * (vz * pw) + vx * d,
        mx * (vz * pw) - mz * (vx * pw) + vy * d,
        my * (vx * pw) - mx * (vy * pw) + vz * d,
        vx * (vx * pw) + vy * (vy * pw) + vz * (vz * pw),
    ], dim=-1))
