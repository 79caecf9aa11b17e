"""
Credit scoring and product recommendation.
"""

from .models import (
    MAX_SCORE,
    MIN_SCORE,
    EvaluationResult,
    Product,
    Recommendation,
    ScoreBreakdown,
    Tier,
)
from .score_engine import ScoringEngine, compute_score
from .recommendation import classify_tier, recommend

__all__ = [
    'MAX_SCORE',
    'MIN_SCORE',
    'EvaluationResult',
    'Product',
    'Recommendation',
    'ScoreBreakdown',
    'Tier',
    'ScoringEngine',
    'compute_score',
    'classify_tier',
    'recommend',
]
