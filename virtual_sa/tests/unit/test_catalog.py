"""
Unit tests for scenario catalog loading and validation.
"""
import pytest

from virtual_sa.data.deployments import DEPLOYMENT_CONFIGS
from virtual_sa.data.scenarios import HEALTHCARE, SCENARIOS
from virtual_sa.exceptions import (
    ScenarioValidationError,
    UnknownDeploymentModeError,
    UnknownScenarioError,
)
from virtual_sa.models.domain import (
    Alternative,
    DeploymentMode,
    DiagramNode,
    Metric,
    NodeType,
    Scenario,
    Solution,
)
from virtual_sa.services.catalog import ScenarioCatalog, load_catalog, validate_scenario


def make_scenario(**overrides):
    fields = dict(
        id="test",
        title="Test",
        industry="Test",
        base_annual_cost=100000,
        metrics=[
            Metric(key="latency", label="Latency", unit="s", baseline=5.0, target=1.0, higher_is_better=False),
        ],
        solutions=[
            Solution(
                key="nim",
                title="NIM",
                product="NIM",
                impacts={"latency": -4.0},
                annual_cost_savings=1000,
                alternatives=[Alternative(key="vendor", title="Vendor", product="Vendor")],
            ),
        ],
        diagram_nodes=[
            DiagramNode(id="llm", label="LLM", type=NodeType.NVIDIA, added_by_solution="nim"),
        ],
    )
    fields.update(overrides)
    return Scenario(**fields)


class TestValidateScenario:
    """Test scenario consistency checks."""

    @pytest.mark.parametrize("scenario", SCENARIOS, ids=lambda s: s.id)
    def test_built_in_scenarios_are_valid(self, scenario):
        assert validate_scenario(scenario) == []

    def test_well_formed_scenario(self):
        assert validate_scenario(make_scenario()) == []

    def test_target_equal_to_baseline(self):
        scenario = make_scenario(metrics=[
            Metric(key="latency", label="Latency", unit="s", baseline=5.0, target=5.0, higher_is_better=False),
        ])
        problems = validate_scenario(scenario)
        assert len(problems) == 1
        assert "not below baseline" in problems[0]

    def test_target_on_wrong_side(self):
        scenario = make_scenario(metrics=[
            Metric(key="latency", label="Latency", unit="", baseline=5.0, target=1.0, higher_is_better=True),
        ])
        assert any("not above baseline" in p for p in validate_scenario(scenario))

    def test_impact_on_undefined_metric(self):
        scenario = make_scenario(solutions=[
            Solution(key="nim", title="NIM", product="NIM", impacts={"latncy": -1.0}),
        ])
        assert any("undefined metric 'latncy'" in p for p in validate_scenario(scenario))

    def test_diagram_node_with_unknown_alternative(self):
        scenario = make_scenario(diagram_nodes=[
            DiagramNode(id="x", label="X", type=NodeType.ALTERNATIVE, added_by_solution="nim", added_by_alt="ghost"),
        ])
        assert any("unknown alternative 'nim.ghost'" in p for p in validate_scenario(scenario))

    def test_diagram_node_with_unknown_solution(self):
        scenario = make_scenario(diagram_nodes=[
            DiagramNode(id="x", label="X", type=NodeType.NVIDIA, added_by_solution="ghost"),
        ])
        assert any("unknown solution 'ghost'" in p for p in validate_scenario(scenario))

    def test_default_alt_must_be_declared(self):
        scenario = make_scenario(solutions=[
            Solution(key="nim", title="NIM", product="NIM", default_alt="missing"),
        ], diagram_nodes=[])
        assert any("default_alt 'missing'" in p for p in validate_scenario(scenario))

    def test_duplicate_keys(self):
        metric = Metric(key="latency", label="Latency", unit="s", baseline=5.0, target=1.0, higher_is_better=False)
        scenario = make_scenario(metrics=[metric, metric])
        assert any("duplicate metric key" in p for p in validate_scenario(scenario))


class TestScenarioCatalog:
    """Test the catalog wrapper."""

    def test_rejects_invalid_scenarios(self):
        bad = make_scenario(solutions=[
            Solution(key="nim", title="NIM", product="NIM", impacts={"ghost": 1}),
        ])
        with pytest.raises(ScenarioValidationError) as exc_info:
            ScenarioCatalog([bad], DEPLOYMENT_CONFIGS)
        assert exc_info.value.problems

    def test_rejects_duplicate_scenario_ids(self):
        with pytest.raises(ScenarioValidationError):
            ScenarioCatalog([HEALTHCARE, HEALTHCARE], DEPLOYMENT_CONFIGS)

    def test_requires_every_deployment_mode(self):
        partial = {DeploymentMode.CLOUD_API: DEPLOYMENT_CONFIGS[DeploymentMode.CLOUD_API]}
        with pytest.raises(ScenarioValidationError):
            ScenarioCatalog(SCENARIOS, partial)

    def test_built_in_catalog(self):
        catalog = load_catalog()

        assert [s.id for s in catalog.scenarios] == ["healthcare", "fintech", "retail", "devops", "legal"]
        assert catalog.default_scenario_id == "healthcare"
        assert [d.mode for d in catalog.deployments] == list(DeploymentMode)
        assert load_catalog() is catalog

    def test_lookup_errors(self):
        catalog = load_catalog()

        with pytest.raises(UnknownScenarioError):
            catalog.get_scenario("nope")
        with pytest.raises(UnknownDeploymentModeError):
            catalog.get_deployment("nope")
        assert catalog.get_deployment("on-prem").capex_per_gpu == 35000
