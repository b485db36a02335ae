"""
Unit tests for savings aggregation and payback.
"""
import pytest

from virtual_sa.data.deployments import DEPLOYMENT_CONFIGS
from virtual_sa.data.scenarios import HEALTHCARE, SCENARIOS
from virtual_sa.models.domain import DeploymentMode
from virtual_sa.services.cost_model import (
    ASSUMED_INTEGRATION_COST_PER_SOLUTION,
    PaybackBasis,
    annual_infra_opex,
    capex_total,
    format_payback,
    format_savings,
    payback_months,
    round_half_up,
    summarize_costs,
)

CLOUD_API = DEPLOYMENT_CONFIGS[DeploymentMode.CLOUD_API]
CLOUD_GPU = DEPLOYMENT_CONFIGS[DeploymentMode.CLOUD_GPU]
ON_PREM = DEPLOYMENT_CONFIGS[DeploymentMode.ON_PREM]

ALL_ACTIVE = {s.key: True for s in HEALTHCARE.solutions}
ALL_NVIDIA = {s.key: None for s in HEALTHCARE.solutions}


class TestInfraCosts:
    """Test deployment-derived costs."""

    def test_cloud_api_has_no_infrastructure_cost(self):
        assert annual_infra_opex(CLOUD_API) == 0
        assert capex_total(CLOUD_API) == 0

    def test_cloud_gpu_opex(self):
        # 2500 * 4 * 12 + 4500 * 4
        assert annual_infra_opex(CLOUD_GPU) == 138000
        assert capex_total(CLOUD_GPU) == 0

    def test_on_prem_opex_and_capex(self):
        # 400 * 4 * 12 + 4500 * 4
        assert annual_infra_opex(ON_PREM) == 37200
        assert capex_total(ON_PREM) == 140000


class TestSummarizeCosts:
    """Test the cost summary for a scenario state."""

    def test_all_nvidia_cloud_api(self):
        summary = summarize_costs(HEALTHCARE, ALL_ACTIVE, ALL_NVIDIA, CLOUD_API)

        assert summary.total_savings == 408000
        assert summary.net_annual_savings == 408000
        assert summary.nvidia_only_active == 4
        assert summary.payback_basis == PaybackBasis.INTEGRATION_ESTIMATE
        # 4 * 50,000 / 408,000 * 12 = 5.88
        assert summary.payback_months == 6
        assert summary.cost_reduction_pct == 76
        assert summary.savings_display == "$408K"
        assert summary.payback_display == "6 mo"

    def test_on_prem_uses_capex(self):
        summary = summarize_costs(HEALTHCARE, ALL_ACTIVE, ALL_NVIDIA, ON_PREM)

        assert summary.net_annual_savings == 370800
        assert summary.payback_basis == PaybackBasis.CAPEX
        # 140,000 / 370,800 * 12 = 4.53
        assert summary.payback_months == 5

    def test_incumbent_stack_has_no_savings(self):
        summary = summarize_costs(HEALTHCARE, {"qlora": True}, {"qlora": "openai_gpt4"}, CLOUD_API)

        assert summary.total_savings == 0
        assert summary.nvidia_only_active == 0
        assert summary.payback_basis == PaybackBasis.NONE
        assert summary.payback_display == "—"
        assert summary.savings_display == "$0"

    def test_net_savings_floored_at_zero(self):
        summary = summarize_costs(HEALTHCARE, {"evaluator": True}, {}, CLOUD_GPU)

        assert summary.total_savings == 15000
        assert summary.net_annual_savings == 0
        assert summary.payback_months == 0
        assert summary.payback_basis == PaybackBasis.NONE
        assert summary.cost_reduction_pct == 0

    def test_alternative_savings_not_counted_as_nvidia_only(self):
        summary = summarize_costs(HEALTHCARE, {"qlora": True}, {"qlora": "self_hosted_llama"}, ON_PREM)

        assert summary.total_savings == 100000
        assert summary.nvidia_only_active == 0
        assert summary.payback_basis == PaybackBasis.CAPEX

    @pytest.mark.parametrize("scenario", SCENARIOS, ids=lambda s: s.id)
    @pytest.mark.parametrize("mode", list(DeploymentMode))
    def test_net_savings_and_payback_bounds(self, scenario, mode):
        active = {s.key: True for s in scenario.solutions}
        chosen = {s.key: None for s in scenario.solutions}
        summary = summarize_costs(scenario, active, chosen, DEPLOYMENT_CONFIGS[mode])

        assert summary.net_annual_savings >= 0
        assert summary.payback_months >= 0
        assert summary.net_annual_savings == max(0, summary.total_savings - summary.annual_infra_opex)


class TestPayback:
    """Test payback months and display."""

    def test_integration_estimate_uses_named_constant(self):
        months, basis = payback_months(0, ASSUMED_INTEGRATION_COST_PER_SOLUTION * 12, 1)
        assert (months, basis) == (1, PaybackBasis.INTEGRATION_ESTIMATE)

    def test_no_net_savings_has_no_payback(self):
        assert payback_months(140000, 0, 3) == (0, PaybackBasis.NONE)

    def test_rounds_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(2.49) == 2

    @pytest.mark.parametrize("months,basis,expected", [
        (0, PaybackBasis.NONE, "—"),
        (0, PaybackBasis.CAPEX, "<1 mo"),
        (1, PaybackBasis.INTEGRATION_ESTIMATE, "<1 mo"),
        (7, PaybackBasis.CAPEX, "7 mo"),
        (36, PaybackBasis.CAPEX, "36 mo"),
        (120, PaybackBasis.CAPEX, "36 mo"),
    ])
    def test_display(self, months, basis, expected):
        assert format_payback(months, basis) == expected

    @pytest.mark.parametrize("amount,expected", [
        (0, "$0"),
        (-5, "$0"),
        (320000, "$320K"),
        (1200000, "$1.2M"),
    ])
    def test_savings_display(self, amount, expected):
        assert format_savings(amount) == expected
