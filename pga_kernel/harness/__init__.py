"""
Scenario harness for the PGA kernel.

Runs a fixed battery of boolean scenarios and reports how many were
executed, passed and failed.
"""

from .scenarios import Scenario, SCENARIOS
from .runner import (
    ScenarioResult,
    ScenarioReport,
    run_scenario,
    run_scenarios,
    main,
)

__all__ = [
    "Scenario",
    "SCENARIOS",
    "ScenarioResult",
    "ScenarioReport",
    "run_scenario",
    "run_scenarios",
    "main",
]
