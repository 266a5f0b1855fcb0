# roi_calculator/core/qualitative.py

import math
from enum import Enum
from typing import Dict, Iterable, Union


class InvalidQualitativeLevelError(ValueError):
    """Raised when a label or score is not one of the five qualitative levels."""
    pass


class QualitativeLevel(str, Enum):
    """
    Five-point qualitative scale shared by task complexity and action maturity.
    The numeric score of every level comes from QUALITATIVE_SCORES, the single
    lookup used by the estimator, the chart feed and the report captions.
    """
    VERY_LOW = "Very Low"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"

    @property
    def score(self) -> int:
        return QUALITATIVE_SCORES[self]


QUALITATIVE_SCORES: Dict[QualitativeLevel, int] = {
    QualitativeLevel.VERY_LOW: 1,
    QualitativeLevel.LOW: 2,
    QualitativeLevel.MEDIUM: 3,
    QualitativeLevel.HIGH: 4,
    QualitativeLevel.VERY_HIGH: 5,
}

_LEVELS_BY_SCORE: Dict[int, QualitativeLevel] = {v: k for k, v in QUALITATIVE_SCORES.items()}


def parse_level(label: Union[str, QualitativeLevel]) -> QualitativeLevel:
    """
    Resolves a label such as "High" to its QualitativeLevel.
    Unknown labels are rejected, never defaulted to Medium.
    """
    if isinstance(label, QualitativeLevel):
        return label
    try:
        return QualitativeLevel(label)
    except ValueError:
        valid = ", ".join(level.value for level in QualitativeLevel)
        raise InvalidQualitativeLevelError(
            f"Unknown qualitative level '{label}'. Must be one of: {valid}"
        )


def level_for_score(score: int) -> QualitativeLevel:
    if score not in _LEVELS_BY_SCORE:
        raise InvalidQualitativeLevelError(f"Score {score} is outside the 1-5 scale.")
    return _LEVELS_BY_SCORE[score]


def describe_score(score: Union[int, str]) -> str:
    """Report caption for a numeric score, e.g. 3 -> '(Medium)'. Unknown scores give ''."""
    try:
        return f"({level_for_score(int(score)).value})"
    except (InvalidQualitativeLevelError, TypeError, ValueError):
        return ""


def classify_average(scores: Iterable[int]) -> QualitativeLevel:
    """
    Buckets the mean of 1-5 answers into a qualitative level.

    Thresholds:
        >= 4.5 Very High, >= 3.5 High, >= 2.5 Medium, >= 1.5 Low, else Very Low
    An average off the 1-5 scale raises InvalidQualitativeLevelError.
    """
    values = list(scores)
    if not values:
        raise InvalidQualitativeLevelError("Cannot classify an empty set of answers.")

    average = sum(values) / len(values)

    # Thresholds sit on the halves, so this is the average rounded half-up
    return level_for_score(math.floor(average + 0.5))
