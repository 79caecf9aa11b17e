"""
Scoring Module Configuration

This file contains the score scale, the tier thresholds and the product
catalog offered to each tier. It centralizes all recommendation data so the
selector and the results page stay consistent.

Author: Credit Advisor System
Date: 2024
"""

from typing import Any, Dict, List, Tuple

import pandas as pd

from .models import MAX_SCORE, MIN_SCORE, Tier

# =============================================================================
# SCORE SCALE
# =============================================================================

# Highest normalized contribution a single question can make
MAX_CONTRIBUTION = 4

SCORE_RANGE = MAX_SCORE - MIN_SCORE  # 550

# =============================================================================
# TIER THRESHOLDS
# =============================================================================

# Evaluated high to low; the first threshold the score reaches wins
TIER_THRESHOLDS: List[Tuple[int, Tier]] = [
    (700, Tier.EXCELLENT),
    (650, Tier.GOOD),
    (600, Tier.FAIR),
]

# Anything below the lowest threshold, including out-of-range scores
FALLBACK_TIER = Tier.POOR

TIER_LABELS = {
    Tier.EXCELLENT: "Excellent",
    Tier.GOOD: "Good",
    Tier.FAIR: "Fair",
    Tier.POOR: "Low",
}

# =============================================================================
# PRODUCT CATALOG
# =============================================================================

# Amounts in pesos, rates in percent
PRODUCT_CATALOG: Dict[Tier, List[Dict[str, Any]]] = {
    Tier.EXCELLENT: [
        {"name": "Premium Card", "max_amount": 15000000, "annual_rate": 1.2},
        {"name": "Home Loan", "max_amount": 200000000, "annual_rate": 0.8},
        {"name": "Auto Loan", "max_amount": 80000000, "annual_rate": 1.0},
    ],
    Tier.GOOD: [
        {"name": "Classic Card", "max_amount": 10000000, "annual_rate": 1.5},
        {"name": "Home Loan", "max_amount": 150000000, "annual_rate": 1.0},
        {"name": "Auto Loan", "max_amount": 60000000, "annual_rate": 1.2},
    ],
    Tier.FAIR: [
        {"name": "Basic Card", "max_amount": 5000000, "annual_rate": 2.0},
        {"name": "Consumer Loan", "max_amount": 30000000, "annual_rate": 1.8},
    ],
    Tier.POOR: [
        {"name": "Basic Consumer Loan", "max_amount": 2000000, "annual_rate": 2.5},
    ],
}

# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def get_tier_label(tier: Tier) -> str:
    """Get the display label of a tier"""
    return TIER_LABELS[Tier(tier)]


def get_tier_floor(tier: Tier) -> int:
    """Get the lowest score that still lands in `tier`"""
    for threshold, candidate in TIER_THRESHOLDS:
        if candidate == tier:
            return threshold
    return MIN_SCORE


def create_product_catalog_dataframe() -> pd.DataFrame:
    """Create a DataFrame of the whole catalog, one row per tier and product."""
    rows = []
    for tier, products in PRODUCT_CATALOG.items():
        for product in products:
            rows.append({
                "Tier": tier.value,
                "Min Score": get_tier_floor(tier),
                "Product": product["name"],
                "Max Amount": product["max_amount"],
                "Annual Rate (%)": product["annual_rate"],
            })
    return pd.DataFrame(rows, columns=["Tier", "Min Score", "Product", "Max Amount", "Annual Rate (%)"])
