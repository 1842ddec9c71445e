"""
Pytest configuration and fixtures for pga_kernel tests.
"""

import pytest
import torch

from pga_kernel.pga import Point, Line, Plane


@pytest.fixture
def batch_size():
    """Default batch size for tests."""
    return 32


@pytest.fixture
def generator():
    """Seeded generator so random batches are reproducible."""
    return torch.Generator().manual_seed(1234)


@pytest.fixture
def random_points(batch_size, generator):
    """Random finite points with weights away from zero."""
    coords = torch.randn(batch_size, 4, generator=generator)
    coords[..., 3] = coords[..., 3].abs() + 0.5
    return Point.from_tensor(coords)


@pytest.fixture
def other_points(batch_size, generator):
    """A second batch of random finite points."""
    coords = torch.randn(batch_size, 4, generator=generator)
    coords[..., 3] = coords[..., 3].abs() + 0.5
    return Point.from_tensor(coords)


@pytest.fixture
def random_planes(batch_size, generator):
    """Random planes."""
    return Plane.from_tensor(torch.randn(batch_size, 4, generator=generator))


@pytest.fixture
def other_planes(batch_size, generator):
    """A second batch of random planes."""
    return Plane.from_tensor(torch.randn(batch_size, 4, generator=generator))


@pytest.fixture
def random_lines(random_points, other_points):
    """Random lines joined from two random points."""
    return random_points ^ other_points


@pytest.fixture
def unit_triangle():
    """Points (1,0,0), (0,1,0), (0,0,1) spanning the plane x + y + z = 1."""
    return (
        Point(1.0, 0.0, 0.0, 1.0),
        Point(0.0, 1.0, 0.0, 1.0),
        Point(0.0, 0.0, 1.0, 1.0),
    )


@pytest.fixture
def sample_line():
    """The line through (2, 3, 7) and (2, 1, 0)."""
    return Line([0.0, -2.0, -7.0], [-7.0, 14.0, -4.0])
