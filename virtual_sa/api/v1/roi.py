"""
ROI Simulator API Endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException
import structlog

from ...dependencies import get_catalog
from ...exceptions import (
    InvalidAlternativeError,
    UnknownDeploymentModeError,
    UnknownScenarioError,
    UnknownSolutionError,
)
from ...models.domain import DeploymentConfig, Scenario
from ...models.schemas import (
    ActionRequest,
    CostSummaryModel,
    ErrorResponse,
    MetricReadingModel,
    ScenarioSummary,
    SimulationResponse,
    SimulatorAction,
    SimulatorStateModel,
)
from ...services.catalog import ScenarioCatalog
from ...services.simulator import (
    Action,
    SelectAlternative,
    SelectDeployment,
    SelectScenario,
    SimulatorSnapshot,
    SimulatorState,
    ToggleSolution,
    default_state,
    reduce,
    simulate,
    validate_state,
)

logger = structlog.get_logger()
router = APIRouter()


def to_state(model: SimulatorStateModel, catalog: ScenarioCatalog) -> SimulatorState:
    """Rebuild a client-held state, rejecting keys its scenario does not declare"""
    return validate_state(catalog, SimulatorState(
        scenario_id=model.scenario_id,
        active=model.active,
        chosen=model.chosen,
        deployment_mode=model.deployment_mode,
    ))


def to_state_model(state: SimulatorState) -> SimulatorStateModel:
    return SimulatorStateModel(
        scenario_id=state.scenario_id,
        active=dict(state.active),
        chosen=dict(state.chosen),
        deployment_mode=state.deployment_mode,
    )


def to_action(action: SimulatorAction) -> Action:
    """Build a simulator action, rejecting requests missing their required field"""
    if action.type == "select_scenario":
        if not action.scenario_id:
            raise ValueError("select_scenario requires scenario_id")
        return SelectScenario(scenario_id=action.scenario_id)
    if action.type == "toggle_solution":
        if not action.solution_key:
            raise ValueError("toggle_solution requires solution_key")
        return ToggleSolution(solution_key=action.solution_key)
    if action.type == "select_alternative":
        if not action.solution_key:
            raise ValueError("select_alternative requires solution_key")
        return SelectAlternative(solution_key=action.solution_key, alternative_key=action.alternative_key)
    if action.deployment_mode is None:
        raise ValueError("select_deployment requires deployment_mode")
    return SelectDeployment(mode=action.deployment_mode)


def to_response(snapshot: SimulatorSnapshot, catalog: ScenarioCatalog) -> SimulationResponse:
    costs = snapshot.costs
    return SimulationResponse(
        state=to_state_model(snapshot.state),
        metrics=[
            MetricReadingModel(
                key=r.value.metric.key,
                label=r.value.metric.label,
                unit=r.value.metric.unit,
                baseline=r.value.metric.baseline,
                target=r.value.metric.target,
                higher_is_better=r.value.metric.higher_is_better,
                current=r.value.current,
                good=r.good,
                progress=r.progress,
                status=r.status,
                color=r.color,
                display_value=r.display_value,
                display_target=r.display_target,
            )
            for r in snapshot.metrics
        ],
        all_targets_hit=snapshot.all_targets_hit,
        success_message=snapshot.success_message,
        costs=CostSummaryModel(
            total_savings=costs.total_savings,
            annual_infra_opex=costs.annual_infra_opex,
            net_annual_savings=costs.net_annual_savings,
            capex_total=costs.capex_total,
            payback_months=costs.payback_months,
            payback_basis=costs.payback_basis.value,
            payback_display=costs.payback_display,
            savings_display=costs.savings_display,
            cost_reduction_pct=costs.cost_reduction_pct,
            nvidia_only_active=costs.nvidia_only_active,
        ),
        deployment=catalog.get_deployment(snapshot.state.deployment_mode),
        diagram_nodes=snapshot.diagram_nodes,
        active_count=snapshot.active_count,
        solution_count=snapshot.solution_count,
    )


@router.get(
    "/scenarios",
    response_model=List[ScenarioSummary],
    summary="List scenarios",
    description="Industry scenarios available in the ROI simulator"
)
async def list_scenarios(catalog: ScenarioCatalog = Depends(get_catalog)):
    return [
        ScenarioSummary(
            id=s.id,
            title=s.title,
            industry=s.industry,
            accent=s.accent,
            solution_count=len(s.solutions),
            metric_count=len(s.metrics),
        )
        for s in catalog.scenarios
    ]


@router.get(
    "/scenarios/{scenario_id}",
    response_model=Scenario,
    summary="Get scenario",
    responses={404: {"model": ErrorResponse, "description": "Unknown scenario"}}
)
async def get_scenario(scenario_id: str, catalog: ScenarioCatalog = Depends(get_catalog)):
    try:
        return catalog.get_scenario(scenario_id)
    except UnknownScenarioError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get(
    "/deployments",
    response_model=List[DeploymentConfig],
    summary="List deployment modes"
)
async def list_deployments(catalog: ScenarioCatalog = Depends(get_catalog)):
    return catalog.deployments


@router.get(
    "/scenarios/{scenario_id}/state",
    response_model=SimulationResponse,
    summary="Initial simulator state",
    description="Default selections for a scenario with the resulting metrics and costs",
    responses={404: {"model": ErrorResponse, "description": "Unknown scenario"}}
)
async def get_initial_state(scenario_id: str, catalog: ScenarioCatalog = Depends(get_catalog)):
    try:
        state = default_state(catalog.get_scenario(scenario_id))
    except UnknownScenarioError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return to_response(simulate(catalog, state), catalog)


@router.post(
    "/simulate",
    response_model=SimulationResponse,
    summary="Evaluate a simulator state",
    description="Compute metrics, costs and the visible diagram for a client-held state",
    responses={
        400: {"model": ErrorResponse, "description": "State references undeclared solutions or alternatives"},
        404: {"model": ErrorResponse, "description": "Unknown scenario"},
    }
)
async def simulate_state(state: SimulatorStateModel, catalog: ScenarioCatalog = Depends(get_catalog)):
    try:
        snapshot = simulate(catalog, to_state(state, catalog))
    except UnknownScenarioError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (UnknownSolutionError, InvalidAlternativeError) as e:
        logger.warning("Rejected simulator state", scenario_id=state.scenario_id, error=str(e))
        raise HTTPException(status_code=400, detail=str(e))
    return to_response(snapshot, catalog)


@router.post(
    "/actions",
    response_model=SimulationResponse,
    summary="Apply a simulator action",
    description="Apply one transition to a state and return the new state with its snapshot",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid action"},
        404: {"model": ErrorResponse, "description": "Unknown scenario"},
    }
)
async def apply_action(request: ActionRequest, catalog: ScenarioCatalog = Depends(get_catalog)):
    try:
        action = to_action(request.action)
        new_state = reduce(catalog, to_state(request.state, catalog), action)
        snapshot = simulate(catalog, new_state)
    except UnknownScenarioError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (ValueError, UnknownSolutionError, InvalidAlternativeError, UnknownDeploymentModeError) as e:
        logger.warning("Rejected simulator action", action=request.action.type, error=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("Simulator action applied", action=request.action.type, scenario_id=new_state.scenario_id)
    return to_response(snapshot, catalog)
