from typing import List
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from roi_calculator.core.frequency import FrequencyUnit
from roi_calculator.core.qualitative import QualitativeLevel

# Upper bounds keep every derived figure finite
MAX_TASK_FREQUENCY = 1_000_000
MAX_MEDIAN_TIME = 525_600  # minutes in a year
MAX_NUM_SELLERS = 1_000_000
MAX_HOURLY_RATE = 1_000_000
MAX_COST = 1e12

# -----------------------------------------------------------------------------
# Wire convention: snake_case in Python, camelCase on the JSON wire.
# -----------------------------------------------------------------------------

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# -----------------------------------------------------------------------------
# 1. Input Schemas (produced by the wizard / chat collector)
# -----------------------------------------------------------------------------

class TaskParameters(CamelModel):
    """
    One fully-populated task record. Created once per wizard completion and
    consumed immediately by the estimator. Defaults for optional cost fields
    are applied by the request layer, not here.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "taskName": "Draft personalised sales emails",
                "taskFrequency": 5,
                "frequencyUnit": "per day",
                "medianTime": 15,
                "taskComplexityScore": "Low",
                "currentActionMaturityScore": "High",
                "hourlyRate": 50,
                "numSellers": 3,
                "devCost": 0,
                "maintenanceCost": 0
            }
        }
    )

    task_name: str = Field(..., min_length=1, description="Descriptive label only")
    task_frequency: float = Field(..., gt=0, le=MAX_TASK_FREQUENCY, description="Occurrences per frequency_unit")
    frequency_unit: str = Field(
        FrequencyUnit.PER_DAY.value,
        description="'per day', 'per week', 'per month' or 'per year'. Unknown units pass through."
    )
    median_time: float = Field(..., gt=0, le=MAX_MEDIAN_TIME, description="Minutes to perform one occurrence manually")
    task_complexity_score: QualitativeLevel
    current_action_maturity_score: QualitativeLevel
    hourly_rate: float = Field(50.0, ge=0, le=MAX_HOURLY_RATE, description="Fully loaded cost per hour")
    num_sellers: float = Field(1.0, ge=0, le=MAX_NUM_SELLERS, description="People performing the task")
    dev_cost: float = Field(0.0, ge=0, le=MAX_COST, description="One-time automation development cost")
    maintenance_cost: float = Field(0.0, ge=0, le=MAX_COST, description="Recurring maintenance cost")


# -----------------------------------------------------------------------------
# 2. Output Schemas (derived, never persisted)
# -----------------------------------------------------------------------------

class ScenarioMetrics(CamelModel):
    """Annual outcome of one efficiency scenario. All values rounded to 2 dp."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    time_savings_hours: float
    cost_savings: float
    agent_roi: float = Field(..., alias="agentROI", description="ROI against total implementation cost (%)")
    org_roi: float = Field(..., alias="orgROI", description="Net benefit as a share of cost savings (%)")


class EfficiencyGains(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    current_percent: int
    potential_percent: int


class ROIResult(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    current: ScenarioMetrics
    potential: ScenarioMetrics
    improvements: ScenarioMetrics = Field(..., description="potential - current, per metric")
    total_costs: float = Field(..., ge=0, description="dev + maintenance + 20% training")
    efficiency_gains: EfficiencyGains


# -----------------------------------------------------------------------------
# 3. Consumer Schemas (chart feed, report)
# -----------------------------------------------------------------------------

class ChartPoint(CamelModel):
    """One task on the maturity (x) / complexity (y) quadrant chart."""
    x: int = Field(..., ge=1, le=5, description="Action maturity score")
    y: int = Field(..., ge=1, le=5, description="Task complexity score")
    task_name: str
    agent_roi: float = Field(..., alias="agentROI")
    time_savings_hours: float
    cost_savings: float
    point_radius: float
    color: str


class Recommendation(CamelModel):
    band: str
    items: List[str] = Field(default_factory=list)
