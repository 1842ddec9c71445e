"""
Tests for the weight dual (~) and the right/left complements.
"""

import torch

from pga_kernel.pga import (
    Point,
    Line,
    Plane,
    dual,
    complement,
    left_complement,
)


class TestWeightDual:
    """The weight dual maps each grade onto its complementary grade."""

    def test_point_to_plane(self):
        f = ~Point(1.0, 2.0, 3.0, 4.0)
        assert isinstance(f, Plane)
        assert f == Plane(0.0, 0.0, 0.0, -4.0)

    def test_line_to_line(self):
        l = ~Line([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
        assert isinstance(l, Line)
        assert l.v.tolist() == [0.0, 0.0, 0.0]
        assert l.m.tolist() == [-1.0, -2.0, -3.0]

    def test_plane_to_point(self):
        p = ~Plane(1.0, 2.0, 3.0, 4.0)
        assert isinstance(p, Point)
        assert p == Point(1.0, 2.0, 3.0, 0.0)
        assert p.is_ideal()

    def test_functional_form_matches_operator(self, random_planes):
        assert dual(random_planes) == ~random_planes

    def test_keeps_batch_shape(self, random_points, random_lines, random_planes):
        assert (~random_points).shape == random_points.shape
        assert (~random_lines).shape == random_lines.shape
        assert (~random_planes).shape == random_planes.shape

    def test_is_a_projection(self):
        """The weight dual is lossy: a plane dualized twice is the zero plane."""
        f = Plane(1.0, 2.0, 3.0, 4.0)
        assert ~~f == Plane(0.0, 0.0, 0.0, -0.0)

    def test_ideal_line_has_zero_dual(self):
        ideal_line = Line([0.0, 0.0, 0.0], [1.0, 2.0, 3.0])
        assert (~ideal_line).is_degenerate()


class TestComplement:
    """The right complement is invertible; double complement fixes signs by grade."""

    def test_point_complement_keeps_coordinates(self):
        f = complement(Point(1.0, 2.0, 3.0, 4.0))
        assert f == Plane(1.0, 2.0, 3.0, 4.0)

    def test_line_complement_swaps_and_negates(self):
        l = complement(Line([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]))
        assert l == Line([-4.0, -5.0, -6.0], [-1.0, -2.0, -3.0])

    def test_plane_complement_negates(self):
        p = complement(Plane(1.0, 2.0, 3.0, 4.0))
        assert p == Point(-1.0, -2.0, -3.0, -4.0)

    def test_double_complement_point(self, random_points):
        assert complement(complement(random_points)) == -random_points

    def test_double_complement_line(self, random_lines):
        assert complement(complement(random_lines)) == random_lines

    def test_double_complement_plane(self, random_planes):
        assert complement(complement(random_planes)) == -random_planes

    def test_left_complement_inverts(self, random_points, random_lines, random_planes):
        for entity in (random_points, random_lines, random_planes):
            assert left_complement(complement(entity)) == entity
            assert complement(left_complement(entity)) == entity

    def test_point_complement_reads_same_coordinates(self):
        p = Point(1.0, 2.0, 3.0, 4.0)
        f = p.complement()
        assert torch.equal(f.coords, p.coords)
        assert type(f) is Plane
