# scoring/score_engine.py
from __future__ import annotations
import math
from typing import Any, Callable, Dict, Mapping, Optional

from survey.answer_store import AnswerStore, to_number
from survey.models import Question, QuestionType, Schema
from operation.logging import get_logger, log_function_call

from .config import MAX_CONTRIBUTION, SCORE_RANGE
from .models import MAX_SCORE, MIN_SCORE, ScoreBreakdown

logger = get_logger(__name__)

# Maps a raw numeric answer to a contribution in [0, MAX_CONTRIBUTION]
Normalizer = Callable[[float], float]


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def round_half_up(value: float) -> int:
    """Round halves up, so 712.5 becomes 713."""
    return int(math.floor(value + 0.5))


def normalize_monthly_income(value: float) -> float:
    """One point per million pesos above 500,000, capped at 4."""
    return _clamp((value - 500000) / 1000000, 0, MAX_CONTRIBUTION)


def normalize_age(value: float) -> float:
    if 25 <= value <= 55:
        return 3
    if 18 <= value <= 65:
        return 2
    return 1


DEFAULT_NORMALIZERS: Dict[str, Normalizer] = {
    "monthly_income": normalize_monthly_income,
    "age": normalize_age,
}


class ScoringEngine:
    """
    Turns a set of answers into a credit score in [300, 850].

    Aggregation is tolerant: an answer that cannot be scored (unanswered, not
    matching any option, unscored option, free text, multi-select, or a number
    question without a registered normalizer) is skipped instead of failing
    the whole computation, so the engine is total over partial answer sets.
    """

    def __init__(self, normalizers: Optional[Mapping[str, Normalizer]] = None):
        self._normalizers: Dict[str, Normalizer] = dict(
            DEFAULT_NORMALIZERS if normalizers is None else normalizers
        )

    def register_normalizer(self, question_id: str, normalizer: Normalizer) -> None:
        """Score the number question `question_id` with `normalizer`."""
        self._normalizers[question_id] = normalizer

    def has_normalizer(self, question_id: str) -> bool:
        return question_id in self._normalizers

    def _contribution(self, question: Question, answer: Any) -> Optional[float]:
        """Normalized contribution (0..4) of one answer, or None when it is skipped."""
        if question.type == QuestionType.SINGLE:
            option = question.find_option(answer)
            if option is None:
                logger.debug(f"Answer {answer!r} matches no option of '{question.id}', skipping")
                return None
            if option.score is None:
                return None
            return float(option.score)

        if question.type == QuestionType.NUMBER:
            normalizer = self._normalizers.get(question.id)
            if normalizer is None:
                return None
            number = to_number(answer)
            if number is None:
                logger.debug(f"Answer {answer!r} to '{question.id}' is not numeric, skipping")
                return None
            contribution = float(normalizer(number))
            return contribution if math.isfinite(contribution) else None

        # Multi-select and free text answers are collected but never scored
        return None

    def breakdown(self, schema: Schema, answers: Mapping[str, Any]) -> ScoreBreakdown:
        """
        Score `answers` against `schema`, keeping the intermediate accumulators.

        Args:
            schema: Questionnaire the answers belong to
            answers: Mapping (or AnswerStore) of question id to answer value

        Returns:
            ScoreBreakdown with the weighted totals and the final score
        """
        if isinstance(answers, AnswerStore):
            answers = answers.as_dict()

        total_score = 0.0
        total_weight = 0.0
        contributions: Dict[str, float] = {}

        for question in schema.questions:
            answer = answers.get(question.id)
            if answer is None or (isinstance(answer, str) and answer == ""):
                continue
            contribution = self._contribution(question, answer)
            if contribution is None:
                continue
            contributions[question.id] = contribution
            total_score += contribution * question.weight
            total_weight += question.weight

        max_possible = total_weight * MAX_CONTRIBUTION
        if max_possible == 0:
            logger.debug("No question contributed weight, falling back to the minimum score")
            score = MIN_SCORE
        else:
            raw = (total_score / max_possible) * SCORE_RANGE + MIN_SCORE
            score = round_half_up(_clamp(raw, MIN_SCORE, MAX_SCORE))

        return ScoreBreakdown(
            total_score=total_score,
            total_weight=total_weight,
            max_possible=max_possible,
            contributions=contributions,
            score=score,
        )

    def compute_score(self, schema: Schema, answers: Mapping[str, Any]) -> int:
        return self.breakdown(schema, answers).score


_default_engine = ScoringEngine()


@log_function_call
def compute_score(schema: Schema, answers: Mapping[str, Any]) -> int:
    """Score `answers` with the default normalizers."""
    return _default_engine.compute_score(schema, answers)
