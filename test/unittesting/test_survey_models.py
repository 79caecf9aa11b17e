"""
Unit tests for survey/models.py and survey/config.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import unittest
from survey.models import (
    Option, Question, QuestionCategory, QuestionType, Schema, Section, Validation
)
from survey.config import CREDIT_ANALYSIS_SURVEY, get_schema, get_questions


def _choice(question_id, weight=1, options=None, type="single"):
    return Question(
        id=question_id,
        type=type,
        prompt=f"Question {question_id}?",
        category="personal",
        weight=weight,
        options=options if options is not None else [
            Option(id="low", text="Low", value="low", score=0),
            Option(id="high", text="High", value="high", score=4),
        ],
    )


class TestQuestion(unittest.TestCase):
    """Test cases for Question invariants."""

    def test_plain_strings_are_coerced(self):
        """Type and category accept their string values."""
        question = _choice("q1")
        self.assertIs(question.type, QuestionType.SINGLE)
        self.assertIs(question.category, QuestionCategory.PERSONAL)
        self.assertIsInstance(question.options, tuple)

    def test_choice_question_without_options(self):
        """Single and multiple questions need at least one option."""
        with self.assertRaises(ValueError):
            _choice("q1", options=[])
        with self.assertRaises(ValueError):
            _choice("q1", options=[], type="multiple")

    def test_free_form_question_with_options(self):
        """Text and number questions cannot declare options."""
        with self.assertRaises(ValueError):
            Question(
                id="q1", type="text", prompt="?", category="personal", weight=1,
                options=[Option(id="a", text="A", value="a")],
            )

    def test_negative_weight(self):
        with self.assertRaises(ValueError):
            _choice("q1", weight=-1)

    def test_unknown_type(self):
        with self.assertRaises(ValueError):
            Question(id="q1", type="slider", prompt="?", category="personal", weight=1)

    def test_duplicate_option_ids(self):
        with self.assertRaises(ValueError):
            _choice("q1", options=[
                Option(id="a", text="A", value="a"),
                Option(id="a", text="B", value="b"),
            ])

    def test_non_finite_option_score(self):
        for score in (float("nan"), float("inf"), float("-inf")):
            with self.assertRaises(ValueError):
                Option(id="a", text="A", value="a", score=score)
        self.assertIsNone(Option(id="a", text="A", value="a").score)

    def test_find_option(self):
        question = _choice("q1")
        self.assertEqual(question.find_option("high").score, 4)
        self.assertIsNone(question.find_option("missing"))

    def test_find_option_does_not_confuse_bool_and_int(self):
        question = _choice("q1", options=[Option(id="one", text="One", value=1, score=2)])
        self.assertIsNotNone(question.find_option(1))
        self.assertIsNone(question.find_option(True))


class TestValidation(unittest.TestCase):
    """Test cases for numeric validation bounds."""

    def test_contains_is_inclusive(self):
        validation = Validation(min=18, max=80)
        self.assertTrue(validation.contains(18))
        self.assertTrue(validation.contains(80))
        self.assertFalse(validation.contains(17.9))
        self.assertFalse(validation.contains(81))

    def test_open_bounds(self):
        self.assertTrue(Validation(min=10).contains(10 ** 9))
        self.assertTrue(Validation(max=10).contains(-(10 ** 9)))

    def test_min_greater_than_max(self):
        with self.assertRaises(ValueError):
            Validation(min=10, max=5)


class TestSchema(unittest.TestCase):
    """Test cases for Schema lookups."""

    def setUp(self):
        """Set up test fixtures."""
        self.schema = Schema(
            id="test",
            title="Test",
            description="Two sections",
            sections=[
                Section(id="s1", title="First", description="", questions=[_choice("a"), _choice("b")]),
                Section(id="s2", title="Second", description="", questions=[_choice("c")]),
            ],
        )

    def test_questions_are_flattened_in_order(self):
        self.assertEqual([q.id for q in self.schema.questions], ["a", "b", "c"])
        self.assertEqual(self.schema.total_questions, 3)

    def test_get_question_by_index(self):
        self.assertEqual(self.schema.get_question(2).id, "c")

    def test_get_question_by_index_out_of_range(self):
        with self.assertRaises(IndexError):
            self.schema.get_question(3)
        with self.assertRaises(IndexError):
            self.schema.get_question(-1)

    def test_get_question_by_id(self):
        self.assertEqual(self.schema.get_question_by_id("b").id, "b")

    def test_get_question_by_id_not_found(self):
        with self.assertRaises(ValueError):
            self.schema.get_question_by_id("nonexistent_id")

    def test_section_for(self):
        self.assertEqual(self.schema.section_for("c").id, "s2")
        with self.assertRaises(ValueError):
            self.schema.section_for("nonexistent_id")

    def test_duplicate_question_ids_across_sections(self):
        with self.assertRaises(ValueError):
            Schema(
                id="dup", title="", description="",
                sections=[
                    Section(id="s1", title="", description="", questions=[_choice("a")]),
                    Section(id="s2", title="", description="", questions=[_choice("a")]),
                ],
            )

    def test_questions_property_returns_a_copy(self):
        questions = self.schema.questions
        questions.clear()
        self.assertEqual(self.schema.total_questions, 3)


class TestCreditAnalysisSurvey(unittest.TestCase):
    """Test cases for the default questionnaire data."""

    def test_get_schema(self):
        self.assertIs(get_schema(), CREDIT_ANALYSIS_SURVEY)

    def test_shape(self):
        schema = get_schema()
        self.assertEqual(len(schema.sections), 4)
        self.assertEqual(schema.total_questions, 11)
        self.assertEqual(len(get_questions()), 11)
        self.assertEqual(schema.estimated_time, 10)

    def test_numeric_questions_have_bounds(self):
        for question_id, low, high in [("age", 18, 80), ("monthly_income", 500000, 50000000),
                                       ("monthly_expenses", 200000, 30000000)]:
            question = get_schema().get_question_by_id(question_id)
            self.assertIs(question.type, QuestionType.NUMBER)
            self.assertEqual((question.validation.min, question.validation.max), (low, high))
            self.assertTrue(question.validation.message)

    def test_option_scores_within_contribution_scale(self):
        for question in get_schema().questions:
            for option in question.options:
                self.assertGreaterEqual(option.score, 0)
                self.assertLessEqual(option.score, 4)


if __name__ == '__main__':
    unittest.main()
