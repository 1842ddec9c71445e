"""
Utility functions for pga_kernel.

Includes configuration management for the scenario harness.
"""

from .config import HarnessConfig

__all__ = [
    # Config
    "HarnessConfig",
]
