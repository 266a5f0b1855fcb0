# roi_calculator/core/efficiency.py

# Fixed baseline for today's generic tooling. Not modelled from complexity/maturity.
CURRENT_EFFICIENCY_GAIN = 0.30

BASE_EFFICIENCY = 0.40
ADDITIONAL_EFFICIENCY = 0.45
MAX_EFFICIENCY = 0.85


def potential_efficiency(complexity: int, maturity: int) -> float:
    """
    Automation potential of a task as a fraction of manual time removed.

    Maturity raises the potential and complexity lowers it. The two factors
    are multiplied, so a weak score on either axis caps the achievable gain:

        maturity_multiplier = maturity / 5          (0.2 .. 1.0)
        complexity_penalty  = (6 - complexity) / 5  (0.2 .. 1.0)
        efficiency          = 0.40 + 0.45 * maturity_multiplier * complexity_penalty

    Args:
        complexity: 1 (Very Low) .. 5 (Very High)
        maturity: 1 (Very Low) .. 5 (Very High)

    Returns:
        float in [0.40, 0.85]
    """
    maturity_multiplier = maturity / 5
    complexity_penalty = (6 - complexity) / 5

    efficiency = BASE_EFFICIENCY + (ADDITIONAL_EFFICIENCY * maturity_multiplier * complexity_penalty)

    return min(efficiency, MAX_EFFICIENCY)
