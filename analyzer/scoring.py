"""Weighted overall score.

Weights are fixed product constants, not configuration:

    overall = round(0.30*performance + 0.25*accessibility + 0.25*seo
                    + 0.15*best_practices + 0.05*pwa)
"""

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal

from analyzer.models import Category

# Weights sum to 1.0; kept as strings so Decimal arithmetic is exact
_WEIGHTS = {
    Category.PERFORMANCE: "0.30",
    Category.ACCESSIBILITY: "0.25",
    Category.SEO: "0.25",
    Category.BEST_PRACTICES: "0.15",
    Category.PWA: "0.05",
}

CATEGORY_WEIGHTS: dict[Category, float] = {c: float(w) for c, w in _WEIGHTS.items()}


def round_half_up(value: float | Decimal) -> int:
    """Round to the nearest integer with ties away from zero.

    Python's round() uses banker's rounding; reports need 72.5 -> 73.
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_overall_score(category_scores: Mapping[str, int]) -> int:
    """Weighted overall score (0-100) from the five category scores.

    Missing categories contribute 0.
    """
    total = sum(
        (Decimal(weight) * Decimal(category_scores.get(category.value, 0))
         for category, weight in _WEIGHTS.items()),
        Decimal(0),
    )
    return round_half_up(total)
