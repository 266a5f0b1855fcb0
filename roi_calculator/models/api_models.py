# roi_calculator/models/api_models.py

from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import Field

from roi_calculator.config.settings import settings
from roi_calculator.core.frequency import FrequencyUnit
from roi_calculator.core.qualitative import QualitativeLevel
from roi_calculator.models.schemas import (
    MAX_COST,
    MAX_HOURLY_RATE,
    MAX_MEDIAN_TIME,
    MAX_NUM_SELLERS,
    MAX_TASK_FREQUENCY,
    CamelModel,
    ChartPoint,
    Recommendation,
    ROIResult,
    TaskParameters,
)

# -----------------------------------------------------------------------------
# 1. ROI Calculation
# -----------------------------------------------------------------------------

class ROICalculationRequest(CamelModel):
    """
    Payload sent when the wizard completes.
    Cost fields may be omitted, null or zero; documented defaults are applied
    here so the estimator never sees a "missing" value.
    """
    task_name: str = Field(..., min_length=1)
    task_frequency: float = Field(..., gt=0, le=MAX_TASK_FREQUENCY)
    frequency_unit: str = FrequencyUnit.PER_DAY.value
    median_time: float = Field(..., gt=0, le=MAX_MEDIAN_TIME)
    task_complexity_score: QualitativeLevel
    current_action_maturity_score: QualitativeLevel
    hourly_rate: Optional[float] = Field(None, ge=0, le=MAX_HOURLY_RATE)
    num_sellers: Optional[float] = Field(None, ge=0, le=MAX_NUM_SELLERS)
    dev_cost: Optional[float] = Field(None, ge=0, le=MAX_COST)
    maintenance_cost: Optional[float] = Field(None, ge=0, le=MAX_COST)

    def to_task_parameters(self) -> TaskParameters:
        return TaskParameters(
            task_name=self.task_name,
            task_frequency=self.task_frequency,
            frequency_unit=self.frequency_unit,
            median_time=self.median_time,
            task_complexity_score=self.task_complexity_score,
            current_action_maturity_score=self.current_action_maturity_score,
            hourly_rate=self.hourly_rate or settings.DEFAULT_HOURLY_RATE,
            num_sellers=self.num_sellers or settings.DEFAULT_NUM_SELLERS,
            dev_cost=self.dev_cost or settings.DEFAULT_DEV_COST,
            maintenance_cost=self.maintenance_cost or settings.DEFAULT_MAINTENANCE_COST
        )


class ROICalculationResponse(CamelModel):
    task_name: str
    parameters: TaskParameters
    complexity_caption: str = Field(..., description="Report caption, e.g. '2 (Low)'")
    maturity_caption: str
    result: ROIResult
    chart_point: ChartPoint
    recommendations: Recommendation


class EfficiencyRequest(CamelModel):
    task_complexity_score: QualitativeLevel
    current_action_maturity_score: QualitativeLevel


class EfficiencyResponse(CamelModel):
    current_efficiency: float
    potential_efficiency: float


class PortfolioResponse(CamelModel):
    points: List[ChartPoint] = Field(default_factory=list)
    count: int = 0


# -----------------------------------------------------------------------------
# 2. Assessments
# -----------------------------------------------------------------------------

class AssessmentResponse(CamelModel):
    level: QualitativeLevel
    score: int


# -----------------------------------------------------------------------------
# 3. LLM Proxy
# -----------------------------------------------------------------------------

class ChatRequest(CamelModel):
    message: str = Field(..., min_length=1)
    roi_data: Optional[Dict[str, Any]] = None


class ChatResponse(CamelModel):
    response: str


class EstimateRequest(CamelModel):
    message: str = Field(..., min_length=1, description="Free-text task description")


class EstimateSuggestion(CamelModel):
    """Pre-fill values for the wizard. Falls back to fixed defaults on any parse failure."""
    task_frequency: float = 5
    frequency_unit: str = FrequencyUnit.PER_DAY.value
    time_per_task: float = 15
    task_complexity: QualitativeLevel = QualitativeLevel.MEDIUM
    action_maturity: QualitativeLevel = QualitativeLevel.MEDIUM
    used_fallback: bool = False


class InsightsRequest(CamelModel):
    task_name: str = Field(..., min_length=1)
    roi_summary: Dict[str, Any]


class InsightTriple(CamelModel):
    recommendation: str
    best_practice: str
    key_success_driver: str


class InsightsResponse(CamelModel):
    insights: str
    task_name: str
    timestamp: datetime
    parsed: List[InsightTriple] = Field(default_factory=list)


class HealthResponse(CamelModel):
    status: str = "OK"
    timestamp: datetime
    llm_configured: bool
