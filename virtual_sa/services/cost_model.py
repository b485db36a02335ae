"""
Savings and deployment-cost aggregation for the ROI simulator
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from ..models.domain import DeploymentConfig, Scenario
from .metric_engine import resolve_savings

# Assumed one-off integration cost per active NVIDIA-only solution, used to
# estimate payback when there is no hardware capex. Presentation heuristic
# only, not a derived financial figure.
ASSUMED_INTEGRATION_COST_PER_SOLUTION = 50_000

MAX_DISPLAY_PAYBACK_MONTHS = 36
MONTHS_PER_YEAR = 12


class PaybackBasis(str, Enum):
    CAPEX = "capex"
    INTEGRATION_ESTIMATE = "integration_estimate"
    NONE = "none"


@dataclass(frozen=True)
class CostSummary:
    total_savings: float
    annual_infra_opex: float
    net_annual_savings: float
    capex_total: float
    payback_months: int
    payback_basis: PaybackBasis
    nvidia_only_active: int
    cost_reduction_pct: int

    @property
    def payback_display(self) -> str:
        return format_payback(self.payback_months, self.payback_basis)

    @property
    def savings_display(self) -> str:
        return format_savings(self.net_annual_savings)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def total_savings(
    scenario: Scenario,
    active: Mapping[str, bool],
    chosen: Mapping[str, Optional[str]],
) -> float:
    return sum(
        resolve_savings(solution, chosen.get(solution.key))
        for solution in scenario.solutions
        if active.get(solution.key, False)
    )


def count_nvidia_only_active(
    scenario: Scenario,
    active: Mapping[str, bool],
    chosen: Mapping[str, Optional[str]],
) -> int:
    """Active solutions running their NVIDIA default (no alternative chosen)"""
    return sum(
        1
        for solution in scenario.solutions
        if active.get(solution.key, False) and chosen.get(solution.key) is None
    )


def annual_infra_opex(deployment: DeploymentConfig) -> float:
    if not deployment.self_hosted:
        return 0.0
    gpus = deployment.gpus_required
    return (
        deployment.opex_per_gpu_per_month * gpus * MONTHS_PER_YEAR
        + deployment.enterprise_license_per_gpu_per_year * gpus
    )


def capex_total(deployment: DeploymentConfig) -> float:
    return deployment.capex_per_gpu * deployment.gpus_required


def payback_months(capex: float, net_savings: float, nvidia_only_active: int) -> tuple:
    """Return (months, basis) for the time-to-ROI estimate"""
    if capex > 0 and net_savings > 0:
        return round_half_up(capex / net_savings * MONTHS_PER_YEAR), PaybackBasis.CAPEX
    if nvidia_only_active > 0 and net_savings > 0:
        integration_cost = nvidia_only_active * ASSUMED_INTEGRATION_COST_PER_SOLUTION
        return round_half_up(integration_cost / net_savings * MONTHS_PER_YEAR), PaybackBasis.INTEGRATION_ESTIMATE
    return 0, PaybackBasis.NONE


def summarize_costs(
    scenario: Scenario,
    active: Mapping[str, bool],
    chosen: Mapping[str, Optional[str]],
    deployment: DeploymentConfig,
) -> CostSummary:
    savings = total_savings(scenario, active, chosen)
    opex = annual_infra_opex(deployment)
    net = max(0.0, savings - opex)
    capex = capex_total(deployment)
    nvidia_only = count_nvidia_only_active(scenario, active, chosen)
    months, basis = payback_months(capex, net, nvidia_only)

    reduction = round_half_up(net / scenario.base_annual_cost * 100) if scenario.base_annual_cost > 0 else 0

    return CostSummary(
        total_savings=savings,
        annual_infra_opex=opex,
        net_annual_savings=net,
        capex_total=capex,
        payback_months=months,
        payback_basis=basis,
        nvidia_only_active=nvidia_only,
        cost_reduction_pct=reduction,
    )


def format_payback(months: int, basis: PaybackBasis = PaybackBasis.CAPEX) -> str:
    if basis == PaybackBasis.NONE:
        return "—"
    if months <= 1:
        return "<1 mo"
    return f"{min(months, MAX_DISPLAY_PAYBACK_MONTHS)} mo"


def format_savings(amount: float) -> str:
    if amount <= 0:
        return "$0"
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.1f}M"
    return f"${amount / 1000:.0f}K"
