"""
Metric composition engine for the ROI simulator.

All functions here are pure: they read a scenario plus the two view-state
maps (active flag and chosen alternative per solution key) and never mutate
either.
"""
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from ..models.domain import Metric, Scenario, Solution

LOWER_IS_BETTER_FLOOR = 0.01
HIGHER_IS_BETTER_FLOOR = 0.0

STATUS_THRESHOLDS = [
    (90, "on_track", "#76b900"),
    (50, "improving", "#ffa726"),
]
AT_RISK = ("at_risk", "#ff4d6a")


@dataclass(frozen=True)
class MetricValue:
    """A metric together with its composed current value"""
    metric: Metric
    current: float

    @property
    def key(self) -> str:
        return self.metric.key


def resolve_impacts(solution: Solution, chosen_alt: Optional[str]) -> Dict[str, float]:
    """Impact map in effect for a solution: the chosen alternative's, else its own"""
    alt = solution.alternative(chosen_alt)
    return alt.impacts if alt is not None else solution.impacts


def resolve_savings(solution: Solution, chosen_alt: Optional[str]) -> float:
    alt = solution.alternative(chosen_alt)
    return alt.annual_cost_savings if alt is not None else solution.annual_cost_savings


def compute_metrics(
    scenario: Scenario,
    active: Mapping[str, bool],
    chosen: Mapping[str, Optional[str]],
) -> List[MetricValue]:
    """Compose the current value of every metric in declaration order"""
    values = {m.key: float(m.baseline) for m in scenario.metrics}

    for solution in scenario.solutions:
        if not active.get(solution.key, False):
            continue
        impacts = resolve_impacts(solution, chosen.get(solution.key))
        for key, delta in impacts.items():
            # Impacts on unknown metrics are dropped; the catalog loader reports them.
            if key in values:
                values[key] += delta

    results = []
    for metric in scenario.metrics:
        floor = HIGHER_IS_BETTER_FLOOR if metric.higher_is_better else LOWER_IS_BETTER_FLOOR
        current = round(max(floor, values[metric.key]), 2)
        results.append(MetricValue(metric=metric, current=current))
    return results


def is_metric_good(value: MetricValue) -> bool:
    metric = value.metric
    if metric.higher_is_better:
        return value.current >= metric.target
    return value.current <= metric.target


def all_targets_hit(values: List[MetricValue]) -> bool:
    return all(is_metric_good(v) for v in values)


def metric_progress(value: MetricValue) -> float:
    """Progress from baseline toward target, clamped to 0-100"""
    metric = value.metric
    if metric.higher_is_better:
        span = metric.target - metric.baseline
        gained = value.current - metric.baseline
    else:
        span = metric.baseline - metric.target
        gained = metric.baseline - value.current

    if span <= 0:
        return 100.0
    return min(100.0, max(0.0, gained / span * 100))


def metric_status(progress: float) -> tuple:
    """(status, colour) band for a progress percentage"""
    for threshold, status, colour in STATUS_THRESHOLDS:
        if progress >= threshold:
            return status, colour
    return AT_RISK


def _plain_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(round(value, 2))


def _grouped_number(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")


def format_metric_value(metric: Metric, value: float) -> str:
    unit = metric.unit
    if unit == "$":
        return f"${value:.2f}"
    if unit in ("%", "/5"):
        return f"{_plain_number(value)}{unit}"
    if unit == "s":
        return f"{_plain_number(value)}s"
    if unit == "ms":
        return f"{_plain_number(value)}ms"
    if unit == "min":
        return f"{_plain_number(value)} min"
    return _grouped_number(value)


def format_target_value(metric: Metric) -> str:
    direction = ">" if metric.higher_is_better else "<"
    unit = metric.unit
    target = metric.target
    if unit == "$":
        return f"{direction} ${_plain_number(target)}"
    if unit in ("%", "/5", "s", "ms"):
        return f"{direction} {_plain_number(target)}{unit}"
    if unit == "min":
        return f"{direction} {_plain_number(target)} min"
    return f"{direction} {_grouped_number(target)}"
