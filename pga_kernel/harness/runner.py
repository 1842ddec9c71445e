"""
Scenario runner and report.

Runs a battery of boolean scenarios, tallies them and prints:

    <N> tests executed.
    <P> tests passed.
    <F> tests failed.

The process exit status is configurable through HarnessConfig; by default
any failed scenario makes the run exit with status 1.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..core.constants import (
    REPORT_EXECUTED,
    REPORT_PASSED,
    REPORT_FAILED,
    EXIT_SUCCESS,
)
from ..utils.config import HarnessConfig
from .scenarios import Scenario, SCENARIOS


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioResult:
    """Outcome of one scenario."""

    name: str
    passed: bool
    error: Optional[str] = None


@dataclass
class ScenarioReport:
    """Tally of a scenario run. executed == passed + failed always holds."""

    results: List[ScenarioResult] = field(default_factory=list)

    @property
    def executed(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.passed)

    @property
    def failures(self) -> List[ScenarioResult]:
        return [r for r in self.results if not r.passed]

    def lines(self) -> List[str]:
        """The three summary lines, in output order."""
        return [
            REPORT_EXECUTED.format(self.executed),
            REPORT_PASSED.format(self.passed),
            REPORT_FAILED.format(self.failed),
        ]

    def exit_code(self, config: HarnessConfig) -> int:
        """Exit status for this report under the given config."""
        return config.exit_code_on_failure if self.failed else EXIT_SUCCESS


def run_scenario(scenario: Scenario) -> ScenarioResult:
    """
    Run one scenario.

    A scenario that raises is recorded as failed together with the error.
    """
    try:
        passed = scenario()
    except Exception as e:
        logger.warning(f"Scenario '{scenario.name}' raised {type(e).__name__}: {e}")
        return ScenarioResult(scenario.name, False, f"{type(e).__name__}: {e}")

    if passed:
        logger.debug(f"Scenario '{scenario.name}' passed")
    else:
        logger.warning(f"Scenario '{scenario.name}' failed")
    return ScenarioResult(scenario.name, passed)


def run_scenarios(
    scenarios: Iterable[Scenario] = SCENARIOS,
    config: Optional[HarnessConfig] = None,
) -> ScenarioReport:
    """
    Run scenarios in order and collect a report.

    Args:
        scenarios: Scenarios to run (defaults to the built-in battery)
        config: Harness configuration (defaults to HarnessConfig())

    Returns:
        ScenarioReport with one result per executed scenario
    """
    config = config or HarnessConfig()
    report = ScenarioReport()

    for scenario in scenarios:
        result = run_scenario(scenario)
        report.results.append(result)
        if not result.passed and config.stop_on_first_failure:
            logger.info(f"Stopping after first failure: {scenario.name}")
            break

    return report


def main(config: Optional[HarnessConfig] = None) -> int:
    """
    Run the built-in battery, print the summary and return the exit status.
    """
    config = config or HarnessConfig()
    logging.basicConfig(level=config.log_level)

    report = run_scenarios(SCENARIOS, config)
    for line in report.lines():
        print(line)

    return report.exit_code(config)
