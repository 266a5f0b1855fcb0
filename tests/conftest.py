"""
Pytest configuration and shared fixtures for the ROI Calculator tests.

This file provides:
- FastAPI test client
- A mocked LLM client patched into the API routes
- Sample task records
"""

import pytest
from typing import Generator
from unittest.mock import patch, MagicMock

from fastapi.testclient import TestClient

from roi_calculator.core.qualitative import QualitativeLevel
from roi_calculator.models.schemas import TaskParameters


# ============================================================================
# API Client Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def api_client() -> Generator:
    """Create FastAPI test client for the session."""
    from roi_calculator.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def client(api_client):
    """Alias for api_client fixture."""
    return api_client


@pytest.fixture(autouse=True)
def empty_portfolio():
    """Every test starts with no plotted tasks."""
    from roi_calculator.services.portfolio import get_portfolio

    get_portfolio().clear()
    yield
    get_portfolio().clear()


# ============================================================================
# Mock Client Fixtures
# ============================================================================

@pytest.fixture
def mock_llm():
    """Mock LLM client used by the routes."""
    with patch("roi_calculator.api.routes.llm_client") as mock_client:
        mock_client.available = True
        mock_client.chat.return_value = "Automate the repetitive parts first."
        mock_client.suggest_estimates.return_value = (
            '{"taskFrequency": 10, "frequencyUnit": "per week", "timePerTask": 30, '
            '"taskComplexity": "High", "actionMaturity": "Low"}'
        )
        mock_client.generate_insights.return_value = SAMPLE_INSIGHTS
        yield mock_client


# ============================================================================
# Test Data Fixtures
# ============================================================================

SAMPLE_INSIGHTS = """Here are three insights for your automation:

1. **Actionable Recommendation:** Implement template libraries for the most common email types.
**Best Practice:** Start with the five highest-volume templates and expand monthly.
**Key Success Driver:** Keep CRM data clean so personalisation fields resolve correctly.

2. **Actionable Recommendation:** Introduce a human review step for high-value accounts.
**Best Practice:** Route only accounts above a revenue threshold to reviewers.
**Key Success Driver:** Clear ownership of the review queue.

3. **Actionable Recommendation:** Measure reply rates per template.
**Best Practice:** Compare against a manual-email control group.
**Key Success Driver:** Consistent tracking across all sellers.
"""


@pytest.fixture
def sample_insights() -> str:
    return SAMPLE_INSIGHTS


@pytest.fixture
def sales_email_task() -> TaskParameters:
    """5 per day, 15 min, Low complexity, High maturity, 3 sellers at $50/hr, no costs."""
    return TaskParameters(
        task_name="Draft personalised sales emails",
        task_frequency=5,
        frequency_unit="per day",
        median_time=15,
        task_complexity_score=QualitativeLevel.LOW,
        current_action_maturity_score=QualitativeLevel.HIGH,
        hourly_rate=50,
        num_sellers=3,
        dev_cost=0,
        maintenance_cost=0
    )


@pytest.fixture
def sales_email_payload() -> dict:
    """Wire payload for the same task; cost fields omitted."""
    return {
        "taskName": "Draft personalised sales emails",
        "taskFrequency": 5,
        "frequencyUnit": "per day",
        "medianTime": 15,
        "taskComplexityScore": "Low",
        "currentActionMaturityScore": "High",
        "numSellers": 3
    }
