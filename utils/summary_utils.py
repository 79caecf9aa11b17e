"""
Summary utilities for presenting evaluation results
"""

from typing import Any, Optional

from scoring.models import EvaluationResult, Recommendation
from survey.models import Question, QuestionType, Schema
import settings


def format_currency(value: Any, currency_code: Optional[str] = None) -> str:
    """
    Format an amount of money with thousands separators and no decimals.

    Args:
        value: Amount as a number or numeric string
        currency_code: ISO code appended to the amount (settings.CURRENCY_CODE if None)

    Returns:
        Formatted amount, or an empty string for missing/zero/non-numeric values
    """
    if value is None or value == "":
        return ""
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return ""
    if amount == 0:
        return ""
    code = currency_code if currency_code is not None else settings.CURRENCY_CODE
    formatted = f"${amount:,.0f}"
    return f"{formatted} {code}" if code else formatted


def format_answer(question: Question, value: Any) -> str:
    """Render a stored answer the way the user saw it."""
    if value is None or value == "":
        return "-"
    if question.type == QuestionType.SINGLE:
        option = question.find_option(value)
        return option.text if option else str(value)
    if question.type == QuestionType.MULTIPLE and isinstance(value, (set, frozenset, list, tuple)):
        texts = []
        for opt in question.options:
            if opt.value in value:
                texts.append(opt.text)
        return ", ".join(texts) if texts else "-"
    return str(value)


def generate_recommendation_summary(recommendation: Recommendation) -> str:
    """
    Generate a summary of the recommended products.

    Args:
        recommendation: Tier and product bundle

    Returns:
        Formatted product summary string
    """
    lines = [f"**Profile:** {recommendation.label}"]
    for product in recommendation.products:
        lines.append(
            f"• **{product.name}** up to {format_currency(product.max_amount)} "
            f"at {product.annual_rate:.1f}%"
        )
    return "\n".join(lines)


def generate_evaluation_summary(result: EvaluationResult, schema: Optional[Schema] = None, answers: Optional[dict] = None) -> str:
    """
    Generate the final message for a completed evaluation.

    Args:
        result: Score and recommendation of the evaluation
        schema: Questionnaire, needed to list the responses
        answers: Stored answers keyed by question id

    Returns:
        Complete summary string
    """
    parts = [
        f"**Credit Score:** {result.score}",
        generate_recommendation_summary(result.recommendation),
    ]

    if schema is not None and answers:
        response_lines = ["**Responses:**"]
        for question in schema.questions:
            if question.id in answers:
                response_lines.append(f"• {question.prompt} {format_answer(question, answers[question.id])}")
        parts.append("\n".join(response_lines))

    return "\n\n".join(parts)
