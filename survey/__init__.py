"""
Questionnaire schema and answer storage.
"""

from .models import (
    Option,
    Question,
    QuestionCategory,
    QuestionType,
    Schema,
    Section,
    Validation,
)
from .answer_store import AnswerStore, is_empty_answer
from .config import CREDIT_ANALYSIS_SURVEY, get_schema

__all__ = [
    'Option',
    'Question',
    'QuestionCategory',
    'QuestionType',
    'Schema',
    'Section',
    'Validation',
    'AnswerStore',
    'is_empty_answer',
    'CREDIT_ANALYSIS_SURVEY',
    'get_schema',
]
