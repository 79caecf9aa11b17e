# wizard/wizard_controller.py
from __future__ import annotations
from enum import Enum
from typing import Any, Optional

from survey.answer_store import AnswerStore, is_empty_answer, to_number
from survey.models import Question, QuestionType, Schema, Section
from scoring.models import EvaluationResult, Recommendation
from scoring.recommendation import recommend
from scoring.score_engine import ScoringEngine, round_half_up
from operation.logging import get_logger, set_correlation_id

logger = get_logger(__name__)

REQUIRED_MESSAGE = "This question is required"
INVALID_MESSAGE = "Invalid answer"


class Phase(str, Enum):
    COLLECTING = "collecting"
    RESULTS = "results"


class WizardController:
    """
    Walks one user through the questionnaire, one question at a time.

    Questions are visited in section order, then question order. Moving
    forward is gated on the validity of the current answer; moving past the
    last question scores the answers and switches to the results phase, where
    the outcome is held until restart(). Not safe for concurrent use.
    """

    def __init__(self, schema: Schema, engine: Optional[ScoringEngine] = None, session_id: Optional[str] = None):
        """
        Initialize the WizardController.

        Args:
            schema: Questionnaire to walk through, must hold at least one question
            engine: Scoring engine used on completion (default normalizers if None)
            session_id: Id used in log records, generated if None
        """
        if schema.total_questions == 0:
            raise ValueError(f"Schema '{schema.id}' has no questions")
        self.schema = schema
        self.engine = engine or ScoringEngine()
        self.answers = AnswerStore()
        self.current_index = 0
        self.phase = Phase.COLLECTING
        self.result: Optional[EvaluationResult] = None
        self.session_id = set_correlation_id(session_id)
        logger.info(f"Evaluation session started for '{schema.id}' ({schema.total_questions} questions)")

    # ------------------------------------------------------------------
    # Position
    # ------------------------------------------------------------------

    @property
    def current_question(self) -> Question:
        return self.schema.get_question(self.current_index)

    @property
    def current_section(self) -> Section:
        return self.schema.section_for(self.current_question.id)

    @property
    def total_questions(self) -> int:
        return self.schema.total_questions

    @property
    def question_number(self) -> int:
        """1-based position of the current question."""
        return self.current_index + 1

    @property
    def progress_percent(self) -> int:
        return round_half_up(self.question_number / self.total_questions * 100)

    @property
    def is_first(self) -> bool:
        return self.current_index == 0

    @property
    def is_last(self) -> bool:
        return self.current_index == self.total_questions - 1

    @property
    def is_complete(self) -> bool:
        return self.phase == Phase.RESULTS

    @property
    def score(self) -> Optional[int]:
        return self.result.score if self.result else None

    @property
    def recommendation(self) -> Optional[Recommendation]:
        return self.result.recommendation if self.result else None

    # ------------------------------------------------------------------
    # Answers
    # ------------------------------------------------------------------

    def current_answer(self) -> Any:
        return self.answers.get(self.current_question.id)

    def set_answer(self, value: Any, question_id: Optional[str] = None) -> None:
        """
        Store `value` for the current question, or for `question_id` if given.
        Nothing is validated here; see can_advance().
        """
        if self.is_complete:
            logger.debug("Ignoring answer received after completion")
            return
        if question_id is None:
            question_id = self.current_question.id
        elif not self.schema.has_question(question_id):
            raise ValueError(f"Question with ID '{question_id}' not found")
        self.answers.set(question_id, value)

    def toggle_option(self, option_value: Any) -> frozenset:
        """Select or deselect `option_value` on the current multi-select question."""
        question = self.current_question
        if question.type != QuestionType.MULTIPLE:
            raise ValueError(f"Question '{question.id}' is not a multiple-choice question")
        if self.is_complete:
            logger.debug("Ignoring selection received after completion")
            return self.answers.get(question.id, frozenset())
        return self.answers.toggle(question.id, option_value)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validation_error(self) -> Optional[str]:
        """Why the current answer blocks navigation, or None when it does not."""
        question = self.current_question
        value = self.answers.get(question.id)

        if is_empty_answer(value):
            return REQUIRED_MESSAGE if question.required else None

        if question.type == QuestionType.NUMBER:
            number = to_number(value)
            # Bounds hold for every entered value, required or not
            if number is None or (question.validation and not question.validation.contains(number)):
                message = question.validation.message if question.validation else None
                return message or INVALID_MESSAGE

        return None

    def can_advance(self) -> bool:
        if self.is_complete:
            return False
        return self.validation_error() is None

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def next(self) -> bool:
        """
        Move to the next question, or finish the questionnaire from the last one.

        Returns:
            True if the wizard moved, False if it was blocked
        """
        if not self.can_advance():
            return False
        if not self.is_last:
            self.current_index += 1
            return True
        self._complete()
        return True

    def previous(self) -> bool:
        """Move back one question. Answers are kept."""
        if self.is_complete or self.current_index == 0:
            return False
        self.current_index -= 1
        return True

    def restart(self) -> None:
        """Discard every answer and the result, and start a new session."""
        self.answers.clear()
        self.current_index = 0
        self.phase = Phase.COLLECTING
        self.result = None
        self.session_id = set_correlation_id()
        logger.info("Evaluation session restarted")

    def _complete(self) -> None:
        score = self.engine.compute_score(self.schema, self.answers)
        self.result = EvaluationResult(
            session_id=self.session_id,
            score=score,
            recommendation=recommend(score),
        )
        self.phase = Phase.RESULTS
        logger.info(
            f"Evaluation completed: score={score}, tier={self.result.recommendation.tier.value}, "
            f"answered={len(self.answers)}/{self.total_questions}"
        )
