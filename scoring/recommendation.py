# scoring/recommendation.py
from __future__ import annotations

from .config import FALLBACK_TIER, PRODUCT_CATALOG, TIER_THRESHOLDS, get_tier_label
from .models import Product, Recommendation, Tier


def classify_tier(score: float) -> Tier:
    """
    Map a score to its tier. Thresholds are inclusive; anything below the
    lowest one, including scores outside [300, 850], is `poor`.
    """
    for threshold, tier in TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return FALLBACK_TIER


def recommend(score: float) -> Recommendation:
    """
    Select the product bundle for a score.

    Products are built fresh on every call, so callers may modify the result
    without affecting later recommendations.
    """
    tier = classify_tier(score)
    products = [Product(**product) for product in PRODUCT_CATALOG[tier]]
    return Recommendation(tier=tier, label=get_tier_label(tier), products=products)
