# roi_calculator/services/insight_parser.py

import re
from typing import List

from roi_calculator.models.api_models import InsightTriple

MAX_INSIGHTS = 3

_LABEL = r"\**\s*{label}\s*:?\s*\**\s*:?\s*"

TRIPLE_PATTERN = re.compile(
    _LABEL.format(label="Actionable Recommendation") + r"(?P<recommendation>.+?)\s*"
    + _LABEL.format(label="Best Practice") + r"(?P<best_practice>.+?)\s*"
    + _LABEL.format(label="Key Success Driver") + r"(?P<key_success_driver>.+?)"
    + r"(?=\n\s*\d+\.|\n\s*\**\s*Actionable Recommendation|\Z)",
    re.IGNORECASE | re.DOTALL
)


def _clean(fragment: str) -> str:
    return " ".join(fragment.strip().strip("*").split())


def parse_insights(text: str) -> List[InsightTriple]:
    """
    Best-effort extraction of up to three insight triples from model text.
    Text without the expected structure yields an empty list.
    """
    if not text:
        return []

    triples = []
    for match in TRIPLE_PATTERN.finditer(text):
        parts = {key: _clean(value) for key, value in match.groupdict().items()}
        if all(parts.values()):
            triples.append(InsightTriple(**parts))
        if len(triples) == MAX_INSIGHTS:
            break

    return triples
