# This project was developed with assistance from AI tools.
"""Preference-weighted ranking of analyzed loan products."""

from ..schemas.analysis import AnalysisPreferences, AnalyzedProduct, MetricScores, ScoredProduct

# metric -> (default weight, weight when prioritized, preference flag)
_WEIGHT_TABLE: dict[str, tuple[float, float, str]] = {
    "interest_rate": (0.3, 0.4, "prioritize_rate"),
    "monthly_payment": (0.2, 0.4, "prioritize_payment"),
    "customer_service": (0.1, 0.3, "prioritize_service"),
    "flexibility": (0.1, 0.3, "prioritize_flexibility"),
    "approval_likelihood": (0.2, 0.3, "prioritize_approval"),
}

# Lower is better for these; they are min-max normalized and inverted
_COST_METRICS = ("interest_rate", "monthly_payment")

NEUTRAL_SCORE = 0.5


def derive_weights(preferences: AnalysisPreferences | None = None) -> dict[str, float]:
    """Metric weights for the given preferences, renormalized to sum to 1."""
    preferences = preferences or AnalysisPreferences()
    raw = {
        metric: prioritized if getattr(preferences, flag) else default
        for metric, (default, prioritized, flag) in _WEIGHT_TABLE.items()
    }
    total = sum(raw.values())
    return {metric: weight / total for metric, weight in raw.items()}


def normalize(value: float, low: float, high: float) -> float:
    """Min-max normalize; a degenerate range gives the neutral score."""
    if high == low:
        return NEUTRAL_SCORE
    return (value - low) / (high - low)


def rank_products(
    analyzed: list[AnalyzedProduct],
    preferences: AnalysisPreferences | None = None,
) -> list[ScoredProduct]:
    """Score every product and sort best first.

    Ties on total score fall back to the lower monthly payment, then to the
    original (catalog) order.
    """
    if not analyzed:
        return []

    weights = derive_weights(preferences)
    ranges = {
        metric: (
            min(getattr(p, metric) for p in analyzed),
            max(getattr(p, metric) for p in analyzed),
        )
        for metric in _COST_METRICS
    }

    scored = []
    for product in analyzed:
        cost_scores = {
            metric: 1 - normalize(getattr(product, metric), *ranges[metric])
            for metric in _COST_METRICS
        }
        scores = MetricScores(
            **cost_scores,
            customer_service=product.customer_service,
            flexibility=product.flexibility,
            approval_likelihood=product.approval_likelihood,
        )
        total = sum(getattr(scores, metric) * weight for metric, weight in weights.items())
        scored.append(
            ScoredProduct(**dict(product), scores=scores, total_score=total)
        )

    return sorted(scored, key=lambda p: (-p.total_score, p.monthly_payment))
