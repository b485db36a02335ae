"""
ROI simulator state machine and snapshot assembly.

State is an immutable value; every transition goes through ``reduce`` and
returns a new ``SimulatorState``. Switching scenario rebuilds the state from
the scenario's declared defaults, so alternative keys from another scenario
can never survive the switch.
"""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Union

import structlog

from ..config import DEFAULT_DEPLOYMENT_MODE
from ..exceptions import InvalidAlternativeError, UnknownSolutionError
from ..models.domain import DeploymentMode, DiagramNode, NodeType, Scenario
from .catalog import ScenarioCatalog
from .cost_model import CostSummary, summarize_costs
from .metric_engine import (
    MetricValue,
    all_targets_hit,
    compute_metrics,
    format_metric_value,
    format_target_value,
    is_metric_good,
    metric_progress,
    metric_status,
)

logger = structlog.get_logger()


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class SimulatorState:
    """Complete view state of the simulator"""
    scenario_id: str
    active: Mapping[str, bool] = field(default_factory=dict)
    chosen: Mapping[str, Optional[str]] = field(default_factory=dict)
    deployment_mode: DeploymentMode = DeploymentMode(DEFAULT_DEPLOYMENT_MODE)

    def __post_init__(self):
        object.__setattr__(self, "active", _frozen(self.active))
        object.__setattr__(self, "chosen", _frozen(self.chosen))
        object.__setattr__(self, "deployment_mode", DeploymentMode(self.deployment_mode))


# Actions

class ActionType(str, Enum):
    SELECT_SCENARIO = "select_scenario"
    TOGGLE_SOLUTION = "toggle_solution"
    SELECT_ALTERNATIVE = "select_alternative"
    SELECT_DEPLOYMENT = "select_deployment"


@dataclass(frozen=True)
class SelectScenario:
    scenario_id: str
    type: ActionType = ActionType.SELECT_SCENARIO


@dataclass(frozen=True)
class ToggleSolution:
    solution_key: str
    type: ActionType = ActionType.TOGGLE_SOLUTION


@dataclass(frozen=True)
class SelectAlternative:
    solution_key: str
    alternative_key: Optional[str]
    type: ActionType = ActionType.SELECT_ALTERNATIVE


@dataclass(frozen=True)
class SelectDeployment:
    mode: DeploymentMode
    type: ActionType = ActionType.SELECT_DEPLOYMENT


Action = Union[SelectScenario, ToggleSolution, SelectAlternative, SelectDeployment]


def default_state(scenario: Scenario) -> SimulatorState:
    """Incumbent alternatives active and chosen; NVIDIA-only additions off"""
    active = {}
    chosen = {}
    for solution in scenario.solutions:
        if solution.default_alt is not None:
            active[solution.key] = True
            chosen[solution.key] = solution.default_alt
        else:
            active[solution.key] = False
            chosen[solution.key] = None
    return SimulatorState(scenario_id=scenario.id, active=active, chosen=chosen)


def validate_state(catalog: ScenarioCatalog, state: SimulatorState) -> SimulatorState:
    """
    Check a client-held state against its scenario.

    Unknown solution keys and undeclared alternative keys are rejected.
    Solutions the state does not mention take their default selections.
    """
    scenario = catalog.get_scenario(state.scenario_id)
    for key in list(state.active) + list(state.chosen):
        if scenario.solution(key) is None:
            raise UnknownSolutionError(scenario.id, key)
    for key, alt in state.chosen.items():
        if alt is not None and scenario.solution(key).alternative(alt) is None:
            raise InvalidAlternativeError(key, alt)

    defaults = default_state(scenario)
    return SimulatorState(
        scenario_id=scenario.id,
        active={**defaults.active, **state.active},
        chosen={**defaults.chosen, **state.chosen},
        deployment_mode=state.deployment_mode,
    )


def select_scenario(catalog: ScenarioCatalog, scenario_id: str) -> SimulatorState:
    return default_state(catalog.get_scenario(scenario_id))


def toggle_solution(scenario: Scenario, state: SimulatorState, solution_key: str) -> SimulatorState:
    if scenario.solution(solution_key) is None:
        raise UnknownSolutionError(scenario.id, solution_key)
    active = dict(state.active)
    active[solution_key] = not active.get(solution_key, False)
    return SimulatorState(
        scenario_id=state.scenario_id,
        active=active,
        chosen=state.chosen,
        deployment_mode=state.deployment_mode,
    )


def select_alternative(
    scenario: Scenario,
    state: SimulatorState,
    solution_key: str,
    alternative_key: Optional[str],
) -> SimulatorState:
    """Choose an alternative, or ``None`` for the NVIDIA default; never changes the active flag"""
    solution = scenario.solution(solution_key)
    if solution is None:
        raise UnknownSolutionError(scenario.id, solution_key)
    if alternative_key is not None and solution.alternative(alternative_key) is None:
        raise InvalidAlternativeError(solution_key, alternative_key)
    chosen = dict(state.chosen)
    chosen[solution_key] = alternative_key
    return SimulatorState(
        scenario_id=state.scenario_id,
        active=state.active,
        chosen=chosen,
        deployment_mode=state.deployment_mode,
    )


def select_deployment(catalog: ScenarioCatalog, state: SimulatorState, mode) -> SimulatorState:
    config = catalog.get_deployment(mode)
    return SimulatorState(
        scenario_id=state.scenario_id,
        active=state.active,
        chosen=state.chosen,
        deployment_mode=config.mode,
    )


def reduce(catalog: ScenarioCatalog, state: SimulatorState, action: Action) -> SimulatorState:
    """Apply one action to a state and return the new state"""
    if isinstance(action, SelectScenario):
        new_state = select_scenario(catalog, action.scenario_id)
    else:
        scenario = catalog.get_scenario(state.scenario_id)
        if isinstance(action, ToggleSolution):
            new_state = toggle_solution(scenario, state, action.solution_key)
        elif isinstance(action, SelectAlternative):
            new_state = select_alternative(scenario, state, action.solution_key, action.alternative_key)
        elif isinstance(action, SelectDeployment):
            new_state = select_deployment(catalog, state, action.mode)
        else:
            raise TypeError(f"Unsupported action: {action!r}")

    logger.debug("Simulator transition", action=action.type.value, scenario_id=new_state.scenario_id)
    return new_state


def is_node_visible(
    node: DiagramNode,
    active: Mapping[str, bool],
    chosen: Mapping[str, Optional[str]],
) -> bool:
    if node.type in (NodeType.BASELINE, NodeType.EXTERNAL):
        return True
    if node.added_by_solution is None:
        return True
    if not active.get(node.added_by_solution, False):
        return False
    chosen_alt = chosen.get(node.added_by_solution)
    if node.added_by_alt is not None:
        return chosen_alt == node.added_by_alt
    if node.type == NodeType.NVIDIA:
        return chosen_alt is None
    return True


def visible_diagram_nodes(
    scenario: Scenario,
    active: Mapping[str, bool],
    chosen: Mapping[str, Optional[str]],
) -> List[DiagramNode]:
    return [node for node in scenario.diagram_nodes if is_node_visible(node, active, chosen)]


@dataclass(frozen=True)
class MetricReading:
    """A composed metric with everything needed to render it"""
    value: MetricValue
    good: bool
    progress: float
    status: str
    color: str
    display_value: str
    display_target: str


@dataclass(frozen=True)
class SimulatorSnapshot:
    state: SimulatorState
    scenario: Scenario
    metrics: List[MetricReading]
    all_targets_hit: bool
    success_message: Optional[str]
    costs: CostSummary
    diagram_nodes: List[DiagramNode]
    active_count: int
    solution_count: int


def read_metric(value: MetricValue) -> MetricReading:
    progress = metric_progress(value)
    status, color = metric_status(progress)
    return MetricReading(
        value=value,
        good=is_metric_good(value),
        progress=round(progress, 1),
        status=status,
        color=color,
        display_value=format_metric_value(value.metric, value.current),
        display_target=format_target_value(value.metric),
    )


def simulate(catalog: ScenarioCatalog, state: SimulatorState) -> SimulatorSnapshot:
    """Derive every displayed figure from a state; pure and repeatable"""
    scenario = catalog.get_scenario(state.scenario_id)
    deployment = catalog.get_deployment(state.deployment_mode)

    values = compute_metrics(scenario, state.active, state.chosen)
    hit = all_targets_hit(values)

    return SimulatorSnapshot(
        state=state,
        scenario=scenario,
        metrics=[read_metric(v) for v in values],
        all_targets_hit=hit,
        success_message=scenario.success_message if hit else None,
        costs=summarize_costs(scenario, state.active, state.chosen, deployment),
        diagram_nodes=visible_diagram_nodes(scenario, state.active, state.chosen),
        active_count=sum(1 for s in scenario.solutions if state.active.get(s.key, False)),
        solution_count=len(scenario.solutions),
    )
