# roi_calculator/core/frequency.py

import logging
from enum import Enum
from typing import Dict, Union

logger = logging.getLogger("FrequencyConverter")
logger.setLevel(logging.INFO)


class FrequencyUnit(str, Enum):
    PER_DAY = "per day"
    PER_WEEK = "per week"
    PER_MONTH = "per month"
    PER_YEAR = "per year"


ANNUAL_MULTIPLIERS: Dict[str, int] = {
    FrequencyUnit.PER_DAY.value: 365,
    FrequencyUnit.PER_WEEK.value: 52,
    FrequencyUnit.PER_MONTH.value: 12,
    FrequencyUnit.PER_YEAR.value: 1,
}


def to_annual(frequency: float, unit: Union[str, FrequencyUnit]) -> float:
    """
    Converts a task frequency to occurrences per year.
    Unknown units pass the frequency through unchanged. No rounding.
    """
    key = unit.value if isinstance(unit, FrequencyUnit) else unit
    multiplier = ANNUAL_MULTIPLIERS.get(key)

    if multiplier is None:
        logger.warning(f"Unknown frequency unit '{unit}'. Treating frequency as annual.")
        return frequency

    return frequency * multiplier
