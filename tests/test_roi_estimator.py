"""
Tests for the ROI estimator.

Covers the worked sales-email scenario, the zero-denominator policy,
rounding, idempotence and monotonicity.
"""

import pytest
from pydantic import ValidationError

from roi_calculator.core.qualitative import QualitativeLevel
from roi_calculator.core.roi_estimator import ROICalculationError, calculate_roi, round_half_up
from roi_calculator.models.api_models import ROICalculationRequest
from roi_calculator.models.schemas import (
    MAX_COST,
    MAX_HOURLY_RATE,
    MAX_MEDIAN_TIME,
    MAX_NUM_SELLERS,
    MAX_TASK_FREQUENCY,
    TaskParameters,
)

LEVELS = list(QualitativeLevel)


def _task(**overrides) -> TaskParameters:
    fields = dict(
        task_name="Reconcile invoices",
        task_frequency=5,
        frequency_unit="per day",
        median_time=15,
        task_complexity_score=QualitativeLevel.LOW,
        current_action_maturity_score=QualitativeLevel.HIGH,
        hourly_rate=50,
        num_sellers=3,
        dev_cost=0,
        maintenance_cost=0,
    )
    fields.update(overrides)
    return TaskParameters(**fields)


def _numbers(result):
    for scenario in (result.current, result.potential, result.improvements):
        yield from (scenario.time_savings_hours, scenario.cost_savings, scenario.agent_roi, scenario.org_roi)
    yield result.total_costs


class TestRoundHalfUp:

    def test_half_rounds_up(self):
        assert round_half_up(410.625) == 410.63

    def test_whole_digits(self):
        assert round_half_up(68.8, 0) == 69

    def test_negative(self):
        assert round_half_up(-82.890625) == -82.89

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan"), 1e307])
    def test_unrepresentable_rejected(self, value):
        with pytest.raises(ROICalculationError):
            round_half_up(value)


class TestSalesEmailScenario:
    """5/day, 15 min, Low complexity, High maturity, 3 sellers, $50/hr, no costs."""

    def test_current_scenario(self, sales_email_task):
        result = calculate_roi(sales_email_task)

        assert result.current.time_savings_hours == 410.63
        assert result.current.cost_savings == 20531.25

    def test_potential_scenario(self, sales_email_task):
        result = calculate_roi(sales_email_task)

        # 1825 * 0.25 * 3 * 0.688
        assert result.potential.time_savings_hours == 941.7
        assert result.potential.cost_savings == 47085.0

    def test_zero_costs_zero_agent_roi(self, sales_email_task):
        result = calculate_roi(sales_email_task)

        assert result.total_costs == 0
        assert result.current.agent_roi == 0
        assert result.potential.agent_roi == 0

    def test_org_roi_is_full_savings_when_costs_are_zero(self, sales_email_task):
        result = calculate_roi(sales_email_task)

        assert result.current.org_roi == 100.0
        assert result.potential.org_roi == 100.0

    def test_efficiency_percentages(self, sales_email_task):
        result = calculate_roi(sales_email_task)

        assert result.efficiency_gains.current_percent == 30
        assert result.efficiency_gains.potential_percent == 69

    def test_improvements(self, sales_email_task):
        result = calculate_roi(sales_email_task)

        assert result.improvements.time_savings_hours == pytest.approx(531.08, abs=0.01)
        assert result.improvements.cost_savings == pytest.approx(26553.75, abs=0.01)
        assert result.improvements.agent_roi == 0
        assert result.improvements.org_roi == 0


class TestCosts:

    def test_total_costs_include_training(self):
        result = calculate_roi(_task(dev_cost=1000, maintenance_cost=200))
        assert result.total_costs == 1400.0

    def test_roi_with_costs(self):
        result = calculate_roi(_task(dev_cost=1000, maintenance_cost=200))

        assert result.current.agent_roi == 1366.52
        assert result.current.org_roi == 93.18

    def test_negative_roi_when_costs_exceed_savings(self):
        result = calculate_roi(_task(dev_cost=100000))

        assert result.current.agent_roi == -82.89
        assert result.current.org_roi < 0

    def test_zero_savings_gives_zero_org_roi(self):
        result = calculate_roi(_task(hourly_rate=0, dev_cost=500))

        assert result.current.cost_savings == 0
        assert result.current.org_roi == 0
        assert result.current.agent_roi == -100.0

    def test_zero_headcount(self):
        result = calculate_roi(_task(num_sellers=0))
        assert result.potential.time_savings_hours == 0


class TestProperties:

    def test_idempotent(self, sales_email_task):
        assert calculate_roi(sales_email_task).model_dump() == calculate_roi(sales_email_task).model_dump()

    @pytest.mark.parametrize("params", [
        dict(),
        dict(dev_cost=1234.567, maintenance_cost=89.01),
        dict(task_frequency=3.3333, frequency_unit="per week", median_time=7.77),
        dict(hourly_rate=37.129, num_sellers=11),
    ])
    def test_at_most_two_decimals(self, params):
        for value in _numbers(calculate_roi(_task(**params))):
            assert round(value, 2) == value

    @pytest.mark.parametrize("complexity", LEVELS)
    def test_savings_never_drop_as_maturity_rises(self, complexity):
        savings = [
            calculate_roi(_task(task_complexity_score=complexity, current_action_maturity_score=m)).potential.cost_savings
            for m in LEVELS
        ]
        assert savings == sorted(savings)

    @pytest.mark.parametrize("maturity", LEVELS)
    def test_savings_never_rise_as_complexity_rises(self, maturity):
        savings = [
            calculate_roi(_task(task_complexity_score=c, current_action_maturity_score=maturity)).potential.cost_savings
            for c in LEVELS
        ]
        assert savings == sorted(savings, reverse=True)

    def test_current_ignores_complexity_and_maturity(self):
        easy = calculate_roi(_task(task_complexity_score="Very Low", current_action_maturity_score="Very High"))
        hard = calculate_roi(_task(task_complexity_score="Very High", current_action_maturity_score="Very Low"))
        assert easy.current == hard.current

    def test_unknown_frequency_unit_treated_as_annual(self):
        result = calculate_roi(_task(task_frequency=100, frequency_unit="per fortnight", median_time=60, num_sellers=1))

        assert result.current.time_savings_hours == 30.0
        assert result.current.cost_savings == 1500.0


class TestTaskParameters:

    def test_invalid_label_rejected(self):
        with pytest.raises(ValidationError):
            _task(task_complexity_score="Extreme")

    @pytest.mark.parametrize("field", ["task_frequency", "median_time"])
    def test_non_positive_rejected(self, field):
        with pytest.raises(ValidationError):
            _task(**{field: 0})

    def test_negative_cost_rejected(self):
        with pytest.raises(ValidationError):
            _task(dev_cost=-1)

    @pytest.mark.parametrize("field,value", [
        ("task_frequency", 1e306),
        ("median_time", 1e10),
        ("hourly_rate", 1e300),
        ("num_sellers", 1e300),
        ("dev_cost", 1e300),
        ("maintenance_cost", 1e300),
    ])
    def test_oversized_rejected(self, field, value):
        with pytest.raises(ValidationError):
            _task(**{field: value})

    def test_largest_accepted_values_stay_finite(self):
        result = calculate_roi(_task(
            task_frequency=MAX_TASK_FREQUENCY,
            median_time=MAX_MEDIAN_TIME,
            hourly_rate=MAX_HOURLY_RATE,
            num_sellers=MAX_NUM_SELLERS,
            dev_cost=MAX_COST,
            maintenance_cost=MAX_COST,
        ))
        assert result.potential.cost_savings > 0

    def test_unvalidated_overflow_raises_calculation_error(self):
        params = TaskParameters.model_construct(
            task_name="Overflow",
            task_frequency=1e300,
            frequency_unit="per day",
            median_time=1e10,
            task_complexity_score=QualitativeLevel.LOW,
            current_action_maturity_score=QualitativeLevel.HIGH,
            hourly_rate=50,
            num_sellers=1,
            dev_cost=0,
            maintenance_cost=0,
        )
        with pytest.raises(ROICalculationError):
            calculate_roi(params)

    def test_immutable(self, sales_email_task):
        with pytest.raises(ValidationError):
            sales_email_task.median_time = 30

    def test_camel_case_wire_names(self):
        params = TaskParameters.model_validate({
            "taskName": "Triage tickets",
            "taskFrequency": 2,
            "frequencyUnit": "per week",
            "medianTime": 10,
            "taskComplexityScore": "Medium",
            "currentActionMaturityScore": "Medium",
        })
        assert params.task_frequency == 2
        assert params.hourly_rate == 50


class TestRequestDefaults:

    def _request(self, **costs):
        return ROICalculationRequest(
            task_name="Triage tickets",
            task_frequency=2,
            median_time=10,
            task_complexity_score="Medium",
            current_action_maturity_score="Medium",
            **costs
        )

    def test_missing_costs_take_defaults(self):
        params = self._request().to_task_parameters()

        assert params.hourly_rate == 50
        assert params.num_sellers == 1
        assert params.dev_cost == 0
        assert params.maintenance_cost == 0

    def test_zero_rate_and_headcount_take_defaults(self):
        params = self._request(hourly_rate=0, num_sellers=0).to_task_parameters()

        assert params.hourly_rate == 50
        assert params.num_sellers == 1

    def test_explicit_values_kept(self):
        params = self._request(hourly_rate=80, num_sellers=4, dev_cost=500).to_task_parameters()

        assert params.hourly_rate == 80
        assert params.num_sellers == 4
        assert params.dev_cost == 500
