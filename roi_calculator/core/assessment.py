# roi_calculator/core/assessment.py

from typing import Annotated
from pydantic import Field

from roi_calculator.core.qualitative import QualitativeLevel, classify_average
from roi_calculator.models.schemas import CamelModel

# Numeric value (1-5) of the option picked for one questionnaire step
Answer = Annotated[int, Field(ge=1, le=5)]


class ComplexityAnswers(CamelModel):
    """Task complexity questionnaire: more steps, judgment and sources = more complex."""
    steps: Answer
    judgment: Answer
    data_sources: Answer


class MaturityAnswers(CamelModel):
    """Action maturity questionnaire: how reliably current AI handles the action."""
    reliability: Answer
    output_quality: Answer
    intent_understanding: Answer


class AssessmentEngine:
    """
    Turns questionnaire answers into the qualitative levels the estimator consumes.
    All three answers are required. Partial questionnaires fail validation upstream.
    """

    @staticmethod
    def score_complexity(answers: ComplexityAnswers) -> QualitativeLevel:
        return classify_average([answers.steps, answers.judgment, answers.data_sources])

    @staticmethod
    def score_maturity(answers: MaturityAnswers) -> QualitativeLevel:
        return classify_average([
            answers.reliability,
            answers.output_quality,
            answers.intent_understanding,
        ])
