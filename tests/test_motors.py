"""
Tests for PGA motor construction.
"""

import math

import pytest
import torch

from pga_kernel.pga.motors import (
    Motor,
    motor_from_axis,
    rotation_about,
    translation_along,
)
from pga_kernel.pga.primitives import Line, Point, z_axis


class TestMotorCreation:
    """Test motor creation methods."""

    def test_identity_motor(self):
        motor = Motor.identity()
        assert motor.r.tolist() == [0.0, 0.0, 0.0, 1.0]
        assert motor.u.tolist() == [0.0, 0.0, 0.0, 0.0]

    def test_zero_angle_zero_distance_is_identity(self):
        line = Point(2.0, 3.0, 7.0, 1.0) ^ Point(-0.5, 1.25, 0.0, 1.0)
        assert Motor(line, 0.0, 0.0) == Motor.identity()

    def test_zero_angle_is_pure_translation(self):
        """phi = 0 gives the identity rotor and u = (d v, 0)."""
        line = Line([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
        motor = Motor(line, 0.0, 2.0)
        assert motor.r.tolist() == [0.0, 0.0, 0.0, 1.0]
        assert motor.u.tolist() == [2.0, 4.0, 6.0, 0.0]

    def test_quarter_turn(self):
        line = Line([0.0, 0.0, 1.0], [1.0, 0.0, 0.0])
        motor = Motor(line, math.pi / 2, 3.0)
        assert torch.allclose(motor.r, torch.tensor([0.0, 0.0, 1.0, 0.0]), atol=1e-6)
        assert torch.allclose(motor.u, torch.tensor([1.0, 0.0, 0.0, -3.0]), atol=1e-6)

    def test_general_formula(self):
        v = torch.tensor([0.6, 0.0, 0.8])
        m = torch.tensor([0.0, 2.0, 0.0])
        phi, d = 0.7, -1.5
        motor = Motor(Line(v, m), phi, d)

        s, c = math.sin(phi), math.cos(phi)
        expected_r = torch.cat([v * s, torch.tensor([c])])
        expected_u = torch.cat([d * v * c + m * s, torch.tensor([-d * s])])
        assert torch.allclose(motor.r, expected_r, atol=1e-6)
        assert torch.allclose(motor.u, expected_u, atol=1e-6)

    def test_tensor_angle(self):
        motor = Motor(z_axis(), torch.tensor(math.pi), 0.0)
        assert torch.allclose(motor.r, torch.tensor([0.0, 0.0, 0.0, -1.0]), atol=1e-6)

    def test_batched_angles(self):
        phis = torch.tensor([0.0, math.pi / 2, math.pi])
        motor = Motor(z_axis(), phis, 1.0)
        assert motor.shape == (3,)
        assert motor.r.shape == (3, 4)
        assert motor.u.shape == (3, 4)
        assert motor.rw[0].item() == 1.0

    def test_batched_distance_broadcasts_both_parts(self):
        motor = Motor(z_axis(), 0.5, torch.tensor([1.0, 2.0, 3.0]))
        assert motor.shape == (3,)
        assert motor.r.shape == (3, 4)
        assert motor.u.shape == (3, 4)
        assert torch.equal(motor.r[0], motor.r[2])
        assert torch.allclose(motor.uw, -torch.tensor([1.0, 2.0, 3.0]) * math.sin(0.5))

    def test_batched_axis_broadcasts_scalar_parameters(self, random_lines):
        motor = Motor(random_lines, 0.25, 1.5)
        assert motor.r.shape == (random_lines.shape[0], 4)
        assert motor.u.shape == (random_lines.shape[0], 4)

    def test_batched_angle_and_distance_broadcast_together(self):
        motor = Motor(z_axis(), torch.tensor([[0.0], [1.0]]), torch.tensor([1.0, 2.0, 3.0]))
        assert motor.shape == (2, 3)
        assert motor.r.shape == (2, 3, 4)
        assert motor.u.shape == (2, 3, 4)

    def test_rejects_non_line_axis(self):
        with pytest.raises(TypeError):
            Motor(Point(0.0, 0.0, 1.0, 0.0), 0.5, 1.0)


class TestMotorParts:

    def test_aliases_read_same_slots(self):
        motor = Motor(Line([0.0, 0.0, 1.0], [1.0, 0.0, 0.0]), 0.3, 2.0)
        assert torch.equal(motor.rotor, motor.r)
        assert torch.equal(motor.translator, motor.u)
        assert torch.equal(motor.e41, motor.rx)
        assert torch.equal(motor.e42, motor.ry)
        assert torch.equal(motor.e43, motor.rz)
        assert torch.equal(motor.e1234, motor.rw)
        assert torch.equal(motor.antiscalar, motor.rw)
        assert torch.equal(motor.e23, motor.ux)
        assert torch.equal(motor.e31, motor.uy)
        assert torch.equal(motor.e12, motor.uz)
        assert torch.equal(motor.scalar, motor.uw)

    def test_from_parts(self):
        r = torch.tensor([0.0, 0.0, 0.0, 1.0])
        u = torch.tensor([1.0, 2.0, 3.0, 0.0])
        motor = Motor.from_parts(r, u)
        assert motor.r is r
        assert motor.u is u

    def test_from_parts_rejects_wrong_size(self):
        with pytest.raises(ValueError):
            Motor.from_parts(torch.zeros(3), torch.zeros(4))

    def test_tolist(self):
        assert Motor.identity().tolist() == [[0.0, 0.0, 0.0, 1.0], [0.0, 0.0, 0.0, 0.0]]


class TestMotorComparison:

    def test_exact_equality(self):
        line = Line([0.0, 0.0, 1.0], [1.0, 0.0, 0.0])
        assert Motor(line, 0.3, 2.0) == Motor(line, 0.3, 2.0)
        assert Motor(line, 0.3, 2.0) != Motor(line, 0.3, 2.5)

    def test_isclose(self):
        line = Line([0.0, 0.0, 1.0], [1.0, 0.0, 0.0])
        assert Motor(line, 0.3, 2.0).isclose(Motor(line, 0.3 + 1e-8, 2.0))

    def test_not_equal_to_other_types(self):
        assert Motor.identity() != Point(0.0, 0.0, 0.0, 1.0)

    def test_isclose_rejects_other_types(self):
        with pytest.raises(TypeError):
            Motor.identity().isclose(Point(0.0, 0.0, 0.0, 1.0))

    def test_isclose_different_shapes(self):
        batched = Motor(z_axis(), torch.tensor([0.0, 0.0]), 0.0)
        assert not Motor.identity().isclose(batched)


class TestMotorFactories:

    def test_motor_from_axis(self):
        line = Line([0.0, 0.0, 1.0], [1.0, 0.0, 0.0])
        assert motor_from_axis(line, 0.3, 2.0) == Motor(line, 0.3, 2.0)

    def test_rotation_about_has_no_translation_term(self):
        motor = rotation_about(z_axis(), 0.5)
        assert motor.u.tolist() == [0.0, 0.0, 0.0, 0.0]

    def test_translation_along(self):
        motor = translation_along(z_axis(), 4.0)
        assert motor.r.tolist() == [0.0, 0.0, 0.0, 1.0]
        assert motor.u.tolist() == [0.0, 0.0, 4.0, 0.0]
