# roi_calculator/core/chart_points.py

from roi_calculator.core.recommendations import ROIBandEngine, get_band_engine
from roi_calculator.models.schemas import ChartPoint, ROIResult, TaskParameters

MIN_POINT_RADIUS = 5.0
MAX_POINT_RADIUS = 20.0


def point_radius(time_savings_hours: float) -> float:
    """Scatter point size grows 10px per 1,000 hours saved, clamped to 5-20."""
    return max(MIN_POINT_RADIUS, min(MAX_POINT_RADIUS, (time_savings_hours / 1000) * 10 + 5))


def build_chart_point(
    params: TaskParameters,
    result: ROIResult,
    band_engine: ROIBandEngine = None
) -> ChartPoint:
    """
    Places a task on the quadrant chart: x = action maturity, y = complexity.
    Size and colour come from the potential scenario.
    """
    engine = band_engine or get_band_engine()
    potential = result.potential

    return ChartPoint(
        x=params.current_action_maturity_score.score,
        y=params.task_complexity_score.score,
        task_name=params.task_name,
        agent_roi=potential.agent_roi,
        time_savings_hours=potential.time_savings_hours,
        cost_savings=potential.cost_savings,
        point_radius=point_radius(potential.time_savings_hours),
        color=engine.color_for(potential.agent_roi)
    )
