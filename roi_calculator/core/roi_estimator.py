# roi_calculator/core/roi_estimator.py

import logging
import math

from roi_calculator.core.efficiency import CURRENT_EFFICIENCY_GAIN, potential_efficiency
from roi_calculator.core.frequency import to_annual
from roi_calculator.models.schemas import (
    EfficiencyGains,
    ROIResult,
    ScenarioMetrics,
    TaskParameters,
)

logger = logging.getLogger("ROIEstimator")
logger.setLevel(logging.INFO)


class ROICalculationError(ValueError):
    """Raised when inputs drive a figure past what a float can represent."""
    pass


TRAINING_COST_RATIO = 0.20
MINUTES_PER_HOUR = 60


def round_half_up(value: float, digits: int = 2) -> float:
    """
    Rounds halves towards +infinity (410.625 -> 410.63).
    The built-in round() uses banker's rounding, which would give 410.62.
    """
    factor = 10 ** digits
    scaled = value * factor
    if not math.isfinite(scaled):
        raise ROICalculationError(f"ROI figure out of range: {value}")
    return math.floor(scaled + 0.5) / factor


def _scenario(
    hours_per_occurrence: float,
    annual_frequency: float,
    params: TaskParameters,
    efficiency_gain: float,
    total_costs: float
) -> dict:
    """Unrounded metrics for one scenario."""
    time_savings = hours_per_occurrence * annual_frequency * params.num_sellers * efficiency_gain
    cost_savings = time_savings * params.hourly_rate

    # Zero denominators degrade to 0, not NaN/inf
    agent_roi = ((cost_savings - total_costs) / total_costs) * 100 if total_costs > 0 else 0
    org_roi = ((cost_savings - total_costs) / cost_savings) * 100 if cost_savings > 0 else 0

    return {
        "time_savings_hours": time_savings,
        "cost_savings": cost_savings,
        "agent_roi": agent_roi,
        "org_roi": org_roi,
    }


def _rounded(metrics: dict) -> ScenarioMetrics:
    return ScenarioMetrics(**{k: round_half_up(v) for k, v in metrics.items()})


def calculate_roi(params: TaskParameters) -> ROIResult:
    """
    Computes the ROI of automating a task under two scenarios.

    Current:   fixed 30% efficiency gain (generic tooling baseline).
    Potential: efficiency modelled from complexity and maturity.

    Both scenarios share the annual frequency, the per-occurrence hours and
    the total implementation cost (dev + maintenance + 20% training).
    Improvements are taken on the unrounded values and then rounded.
    """
    annual_frequency = to_annual(params.task_frequency, params.frequency_unit)
    hours_per_occurrence = params.median_time / MINUTES_PER_HOUR

    training_cost = params.dev_cost * TRAINING_COST_RATIO
    total_costs = params.dev_cost + params.maintenance_cost + training_cost

    potential_gain = potential_efficiency(
        complexity=params.task_complexity_score.score,
        maturity=params.current_action_maturity_score.score
    )

    current = _scenario(hours_per_occurrence, annual_frequency, params, CURRENT_EFFICIENCY_GAIN, total_costs)
    potential = _scenario(hours_per_occurrence, annual_frequency, params, potential_gain, total_costs)
    improvements = {key: potential[key] - current[key] for key in current}

    logger.debug(
        f"ROI for '{params.task_name}': annual={annual_frequency}, "
        f"efficiency {CURRENT_EFFICIENCY_GAIN:.2f} -> {potential_gain:.3f}, "
        f"total_costs={total_costs:.2f}"
    )

    return ROIResult(
        current=_rounded(current),
        potential=_rounded(potential),
        improvements=_rounded(improvements),
        total_costs=round_half_up(total_costs),
        efficiency_gains=EfficiencyGains(
            current_percent=int(round_half_up(CURRENT_EFFICIENCY_GAIN * 100, 0)),
            potential_percent=int(round_half_up(potential_gain * 100, 0))
        )
    )
