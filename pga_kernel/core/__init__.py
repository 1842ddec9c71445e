"""
Core module for pga_kernel.

Contains:
- Constants: Default dtype, tolerances and report formats
- Types: Type aliases and component naming conventions
- Base: The abstract base class shared by points, lines and planes
"""

from .constants import (
    DEFAULT_DTYPE,
    DEFAULT_RTOL,
    DEFAULT_ATOL,
    POINT_COMPONENTS,
    LINE_COMPONENTS,
    PLANE_COMPONENTS,
    MOTOR_PART_COMPONENTS,
    REPORT_EXECUTED,
    REPORT_PASSED,
    REPORT_FAILED,
    EXIT_SUCCESS,
    EXIT_FAILURE,
)

from .types import (
    Scalar,
    Vector3,
    POINT_FIELDS,
    POINT_BLADES,
    LINE_FIELDS,
    LINE_BLADES,
    PLANE_FIELDS,
    PLANE_BLADES,
)

from .base import (
    GeometricEntity,
    as_component,
    as_vector3,
    stack_components,
    concat_vectors,
)

__all__ = [
    # Constants
    "DEFAULT_DTYPE",
    "DEFAULT_RTOL",
    "DEFAULT_ATOL",
    "POINT_COMPONENTS",
    "LINE_COMPONENTS",
    "PLANE_COMPONENTS",
    "MOTOR_PART_COMPONENTS",
    "REPORT_EXECUTED",
    "REPORT_PASSED",
    "REPORT_FAILED",
    "EXIT_SUCCESS",
    "EXIT_FAILURE",
    # Types
    "Scalar",
    "Vector3",
    "POINT_FIELDS",
    "POINT_BLADES",
    "LINE_FIELDS",
    "LINE_BLADES",
    "PLANE_FIELDS",
    "PLANE_BLADES",
    # Base classes
    "GeometricEntity",
    "as_component",
    "as_vector3",
    "stack_components",
    "concat_vectors",
]
