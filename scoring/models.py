from datetime import datetime
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field

MIN_SCORE = 300
MAX_SCORE = 850


class Tier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class Product(BaseModel):
    """A financial product offered to applicants of a given tier."""
    name: str
    max_amount: int = Field(ge=0, description="Maximum amount granted, in pesos")
    annual_rate: float = Field(ge=0.0, description="Interest rate, in percent")


class Recommendation(BaseModel):
    tier: Tier
    label: str
    products: List[Product]


class ScoreBreakdown(BaseModel):
    """Accumulators of one scoring pass."""
    total_score: float = 0.0
    total_weight: float = 0.0
    max_possible: float = 0.0
    contributions: Dict[str, float] = Field(
        default_factory=dict,
        description="Normalized contribution (0..4) of every question that was scored",
    )
    score: int = Field(default=MIN_SCORE, ge=MIN_SCORE, le=MAX_SCORE)


class EvaluationResult(BaseModel):
    """What a completed questionnaire hands to the presentation layer."""
    session_id: str
    score: int = Field(ge=MIN_SCORE, le=MAX_SCORE)
    recommendation: Recommendation
    completed_at: datetime = Field(default_factory=datetime.now)
