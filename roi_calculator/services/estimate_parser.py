# roi_calculator/services/estimate_parser.py

import json
import logging
import re
from typing import Any, Dict, Optional

from roi_calculator.core.frequency import ANNUAL_MULTIPLIERS
from roi_calculator.core.qualitative import InvalidQualitativeLevelError, QualitativeLevel, parse_level
from roi_calculator.models.api_models import EstimateSuggestion

logger = logging.getLogger("EstimateParser")
logger.setLevel(logging.INFO)

DEFAULT_ESTIMATE = EstimateSuggestion()

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


def _extract_json(text: str) -> Optional[Dict[str, Any]]:
    """Pulls the first JSON object out of model text, tolerating code fences."""
    clean = text.strip()
    if clean.count("`") >= 6:
        parts = clean.split("`" * 3)
        if len(parts) >= 3:
            clean = parts[1].strip()
            if clean.lower().startswith("json"):
                clean = clean[4:].strip()

    match = _JSON_OBJECT.search(clean)
    if not match:
        return None

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None


def _positive_number(value: Any) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def _unit(value: Any) -> Optional[str]:
    unit = str(value).strip().lower()
    return unit if unit in ANNUAL_MULTIPLIERS else None


def _level(value: Any) -> Optional[QualitativeLevel]:
    try:
        return parse_level(str(value).strip())
    except InvalidQualitativeLevelError:
        return None


def parse_estimate(text: Optional[str]) -> EstimateSuggestion:
    """
    Turns the model's reply into wizard pre-fill values.

    No parseable JSON: the fixed defaults (5 per day, 15 min, Medium, Medium).
    Individual missing or invalid fields take their own default. Either way
    used_fallback=True marks that some of the pre-fill was not from the model.
    """
    data = _extract_json(text or "")
    if data is None:
        logger.warning("Estimate response was not valid JSON. Using default estimate.")
        return DEFAULT_ESTIMATE.model_copy(update={"used_fallback": True})

    fields = {
        "task_frequency": _positive_number(data.get("taskFrequency")),
        "frequency_unit": _unit(data.get("frequencyUnit")),
        "time_per_task": _positive_number(data.get("timePerTask")),
        "task_complexity": _level(data.get("taskComplexity")),
        "action_maturity": _level(data.get("actionMaturity")),
    }
    defaulted = [name for name, value in fields.items() if value is None]
    if defaulted:
        logger.info(f"Estimate fields defaulted: {', '.join(defaulted)}")

    return EstimateSuggestion(
        **{name: value for name, value in fields.items() if value is not None},
        used_fallback=bool(defaulted)
    )
