"""
FastAPI Routes - ROI Calculator API
Endpoints for the ROI estimate, questionnaires, chart portfolio and the LLM proxy.

- ROI endpoints are pure computation and never depend on the LLM
- LLM failures are reported to the caller, never folded into a result
- Request validation via Pydantic models (HTTP 422)
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, status

from roi_calculator.core.assessment import AssessmentEngine, ComplexityAnswers, MaturityAnswers
from roi_calculator.core.chart_points import build_chart_point
from roi_calculator.core.efficiency import CURRENT_EFFICIENCY_GAIN, potential_efficiency
from roi_calculator.core.recommendations import get_band_engine
from roi_calculator.core.qualitative import describe_score
from roi_calculator.core.roi_estimator import ROICalculationError, calculate_roi
from roi_calculator.models.api_models import (
    AssessmentResponse,
    ChatRequest,
    ChatResponse,
    EfficiencyRequest,
    EfficiencyResponse,
    EstimateRequest,
    EstimateSuggestion,
    HealthResponse,
    InsightsRequest,
    InsightsResponse,
    PortfolioResponse,
    ROICalculationRequest,
    ROICalculationResponse,
)
from roi_calculator.services.estimate_parser import DEFAULT_ESTIMATE, parse_estimate
from roi_calculator.services.insight_parser import parse_insights
from roi_calculator.services.llm_client import LLMRequestError, LLMUnavailableError, get_llm_client
from roi_calculator.services.portfolio import get_portfolio

logger = logging.getLogger("ROIAPI")
logger.setLevel(logging.INFO)

roi_router = APIRouter(prefix="/roi", tags=["ROI Estimator"])
assessment_router = APIRouter(prefix="/assessments", tags=["Assessments"])
assistant_router = APIRouter(tags=["AI Assistant"])

# Initialize dependencies
llm_client = get_llm_client()
portfolio = get_portfolio()
band_engine = get_band_engine()


def _llm_http_error(error: Exception) -> HTTPException:
    if isinstance(error, LLMUnavailableError):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(error)
        )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error": error.message, "details": error.details}
    )


def _caption(score: int) -> str:
    return f"{score} {describe_score(score)}"


# ============================================================================
# ROI ESTIMATE
# ============================================================================

@roi_router.post("/calculate", response_model=ROICalculationResponse)
async def calculate(payload: ROICalculationRequest):
    """
    Computes current vs potential ROI for one task and plots it.

    Omitted cost fields take their defaults (hourly rate 50, headcount 1,
    dev/maintenance cost 0) before the estimator runs.
    """
    params = payload.to_task_parameters()

    try:
        result = calculate_roi(params)
        point = build_chart_point(params, result, band_engine)
        recommendations = band_engine.recommend(
            agent_roi=result.potential.agent_roi,
            org_roi=result.potential.org_roi
        )
    except ROICalculationError as e:
        logger.warning(f"ROI calculation rejected for '{params.task_name}': {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"ROI calculation failed for '{params.task_name}': {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Calculation Failed: {str(e)}"
        )

    portfolio.add(point)

    logger.info(
        f"ROI calculated for '{params.task_name}': "
        f"savings ${result.current.cost_savings:,.2f} -> ${result.potential.cost_savings:,.2f}, "
        f"total_costs=${result.total_costs:,.2f}"
    )

    return ROICalculationResponse(
        task_name=params.task_name,
        parameters=params,
        complexity_caption=_caption(params.task_complexity_score.score),
        maturity_caption=_caption(params.current_action_maturity_score.score),
        result=result,
        chart_point=point,
        recommendations=recommendations
    )


@roi_router.post("/efficiency", response_model=EfficiencyResponse)
async def efficiency(payload: EfficiencyRequest):
    """Current (fixed) and potential (modelled) efficiency for a score pair."""
    return EfficiencyResponse(
        current_efficiency=CURRENT_EFFICIENCY_GAIN,
        potential_efficiency=potential_efficiency(
            complexity=payload.task_complexity_score.score,
            maturity=payload.current_action_maturity_score.score
        )
    )


@roi_router.get("/portfolio", response_model=PortfolioResponse)
async def list_portfolio():
    points = portfolio.list()
    return PortfolioResponse(points=points, count=len(points))


@roi_router.delete("/portfolio", status_code=status.HTTP_204_NO_CONTENT)
async def clear_portfolio():
    portfolio.clear()


# ============================================================================
# QUESTIONNAIRES
# ============================================================================

@assessment_router.post("/complexity", response_model=AssessmentResponse)
async def assess_complexity(payload: ComplexityAnswers):
    level = AssessmentEngine.score_complexity(payload)
    return AssessmentResponse(level=level, score=level.score)


@assessment_router.post("/maturity", response_model=AssessmentResponse)
async def assess_maturity(payload: MaturityAnswers):
    level = AssessmentEngine.score_maturity(payload)
    return AssessmentResponse(level=level, score=level.score)


# ============================================================================
# LLM PROXY
# ============================================================================

@assistant_router.post("/chat", response_model=ChatResponse)
def chat(payload: ChatRequest):
    """Free-form ROI question, optionally grounded on a calculation result."""
    try:
        reply = llm_client.chat(payload.message, roi_data=payload.roi_data)
    except (LLMUnavailableError, LLMRequestError) as e:
        logger.error(f"Chat failed: {e}")
        raise _llm_http_error(e)

    return ChatResponse(response=reply)


@assistant_router.post("/estimate", response_model=EstimateSuggestion)
def estimate(payload: EstimateRequest):
    """
    Pre-fills wizard estimates from a task description.
    Always answers: LLM or parse failures return the default estimate.
    """
    try:
        raw = llm_client.suggest_estimates(payload.message)
    except (LLMUnavailableError, LLMRequestError) as e:
        logger.warning(f"Estimate prefill unavailable ({e}). Using default estimate.")
        return DEFAULT_ESTIMATE.model_copy(update={"used_fallback": True})

    return parse_estimate(raw)


@assistant_router.post("/ai-insights", response_model=InsightsResponse)
def ai_insights(payload: InsightsRequest):
    """Three improvement insights for a completed calculation."""
    logger.info(f"Insights requested for '{payload.task_name}'")

    try:
        insights = llm_client.generate_insights(payload.task_name, payload.roi_summary)
    except (LLMUnavailableError, LLMRequestError) as e:
        logger.error(f"Insight generation failed: {e}")
        raise _llm_http_error(e)

    return InsightsResponse(
        insights=insights,
        task_name=payload.task_name,
        timestamp=datetime.now(timezone.utc),
        parsed=parse_insights(insights)
    )


@assistant_router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc),
        llm_configured=llm_client.available
    )
