"""
Scenario catalog loading and validation
"""
from typing import Dict, Iterable, List, Optional, Union

import structlog

from ..data.deployments import DEPLOYMENT_CONFIGS
from ..data.scenarios import SCENARIOS
from ..exceptions import (
    ScenarioValidationError,
    UnknownDeploymentModeError,
    UnknownScenarioError,
)
from ..models.domain import DeploymentConfig, DeploymentMode, Scenario

logger = structlog.get_logger()


def validate_scenario(scenario: Scenario) -> List[str]:
    """
    Check a scenario for internal consistency.

    Returns a list of human-readable problems; an empty list means the
    scenario is well formed. The metric engine tolerates every problem
    reported here, so these are configuration errors, not runtime ones.
    """
    problems: List[str] = []
    prefix = f"[{scenario.id}]"

    metric_keys = [m.key for m in scenario.metrics]
    for key in _duplicates(metric_keys):
        problems.append(f"{prefix} duplicate metric key '{key}'")

    for metric in scenario.metrics:
        if metric.higher_is_better and metric.target <= metric.baseline:
            problems.append(
                f"{prefix} metric '{metric.key}' target {metric.target} is not above baseline {metric.baseline}"
            )
        if not metric.higher_is_better and metric.target >= metric.baseline:
            problems.append(
                f"{prefix} metric '{metric.key}' target {metric.target} is not below baseline {metric.baseline}"
            )

    solution_keys = [s.key for s in scenario.solutions]
    for key in _duplicates(solution_keys):
        problems.append(f"{prefix} duplicate solution key '{key}'")

    known_metrics = set(metric_keys)
    for solution in scenario.solutions:
        for key in solution.impacts:
            if key not in known_metrics:
                problems.append(
                    f"{prefix} solution '{solution.key}' impacts undefined metric '{key}'"
                )

        for key in _duplicates(solution.alternative_keys):
            problems.append(
                f"{prefix} solution '{solution.key}' has duplicate alternative '{key}'"
            )

        for alt in solution.alternatives:
            for key in alt.impacts:
                if key not in known_metrics:
                    problems.append(
                        f"{prefix} alternative '{solution.key}.{alt.key}' impacts undefined metric '{key}'"
                    )

        if solution.default_alt is not None and solution.alternative(solution.default_alt) is None:
            problems.append(
                f"{prefix} solution '{solution.key}' default_alt '{solution.default_alt}' is not a declared alternative"
            )

    node_ids = [n.id for n in scenario.diagram_nodes]
    for node_id in _duplicates(node_ids):
        problems.append(f"{prefix} duplicate diagram node '{node_id}'")

    solutions = scenario.solutions_by_key
    for node in scenario.diagram_nodes:
        if node.added_by_alt is not None and node.added_by_solution is None:
            problems.append(
                f"{prefix} diagram node '{node.id}' sets added_by_alt without added_by_solution"
            )
            continue
        if node.added_by_solution is None:
            continue
        solution = solutions.get(node.added_by_solution)
        if solution is None:
            problems.append(
                f"{prefix} diagram node '{node.id}' references unknown solution '{node.added_by_solution}'"
            )
        elif node.added_by_alt is not None and solution.alternative(node.added_by_alt) is None:
            problems.append(
                f"{prefix} diagram node '{node.id}' references unknown alternative "
                f"'{node.added_by_solution}.{node.added_by_alt}'"
            )

    return problems


def _duplicates(keys: Iterable[str]) -> List[str]:
    seen = set()
    dupes = []
    for key in keys:
        if key in seen and key not in dupes:
            dupes.append(key)
        seen.add(key)
    return dupes


class ScenarioCatalog:
    """Validated, key-addressable view over a list of scenarios"""

    def __init__(self, scenarios: List[Scenario], deployments: Dict[DeploymentMode, DeploymentConfig]):
        problems: List[str] = []
        for key in _duplicates(s.id for s in scenarios):
            problems.append(f"duplicate scenario id '{key}'")
        for scenario in scenarios:
            problems.extend(validate_scenario(scenario))
        missing_modes = [mode.value for mode in DeploymentMode if mode not in deployments]
        if missing_modes:
            problems.append(f"missing deployment configs: {', '.join(missing_modes)}")

        if problems:
            logger.error("Scenario catalog failed validation", problems=problems)
            raise ScenarioValidationError(problems)

        self._scenarios = {s.id: s for s in scenarios}
        self._deployments = dict(deployments)

    @property
    def scenarios(self) -> List[Scenario]:
        return list(self._scenarios.values())

    @property
    def deployments(self) -> List[DeploymentConfig]:
        return [self._deployments[mode] for mode in DeploymentMode]

    @property
    def default_scenario_id(self) -> str:
        return next(iter(self._scenarios))

    def get_scenario(self, scenario_id: str) -> Scenario:
        scenario = self._scenarios.get(scenario_id)
        if scenario is None:
            raise UnknownScenarioError(scenario_id)
        return scenario

    def get_deployment(self, mode: Union[DeploymentMode, str]) -> DeploymentConfig:
        try:
            return self._deployments[DeploymentMode(mode)]
        except (ValueError, KeyError):
            raise UnknownDeploymentModeError(str(getattr(mode, "value", mode)))


_catalog: Optional[ScenarioCatalog] = None


def load_catalog() -> ScenarioCatalog:
    """Load and validate the built-in catalog (cached after first call)"""
    global _catalog
    if _catalog is None:
        _catalog = ScenarioCatalog(SCENARIOS, DEPLOYMENT_CONFIGS)
        logger.info(
            "Scenario catalog loaded",
            scenarios=len(_catalog.scenarios),
            deployments=len(_catalog.deployments),
        )
    return _catalog
