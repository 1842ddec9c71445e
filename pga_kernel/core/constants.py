"""
Centralized constants for pga_kernel.

This module defines the default values and numeric constants used throughout
the library. Using these constants keeps the kernel, the scenario harness and
the tests in agreement about dtypes, tolerances and report formats.

Usage:
    from pga_kernel.core.constants import DEFAULT_DTYPE, DEFAULT_ATOL

    def my_function(atol: float = DEFAULT_ATOL):
        ...
"""

import torch


# =============================================================================
# Numeric Constants
# =============================================================================

# Every coordinate is single precision unless a tensor of another
# floating dtype is passed in explicitly
DEFAULT_DTYPE: torch.dtype = torch.float32

# Tolerances for approximate comparison (isclose). The scenario oracle
# never uses these: it compares exactly.
DEFAULT_RTOL: float = 1e-5
DEFAULT_ATOL: float = 1e-6


# =============================================================================
# Component Counts
# =============================================================================

POINT_COMPONENTS: int = 4
LINE_COMPONENTS: int = 6
PLANE_COMPONENTS: int = 4
MOTOR_PART_COMPONENTS: int = 4


# =============================================================================
# Harness Report
# =============================================================================

REPORT_EXECUTED: str = "{} tests executed."
REPORT_PASSED: str = "{} tests passed."
REPORT_FAILED: str = "{} tests failed."

EXIT_SUCCESS: int = 0
EXIT_FAILURE: int = 1
