"""
Survey Module Configuration

This file contains the credit analysis questionnaire: its sections, questions,
answer options with their point values, numeric validation bounds and the
weight each question carries in the final score.

Author: Credit Advisor System
Date: 2024
"""

from typing import List

from .models import Option, Question, Schema, Section, Validation

# =============================================================================
# PERSONAL INFORMATION
# =============================================================================

PERSONAL_SECTION = Section(
    id="personal-info",
    title="Personal Information",
    description="Basic details about the applicant",
    questions=[
        Question(
            id="age",
            type="number",
            prompt="How old are you?",
            description="Enter your current age",
            required=True,
            validation=Validation(min=18, max=80, message="Age must be between 18 and 80"),
            category="personal",
            weight=1,
        ),
        Question(
            id="marital_status",
            type="single",
            prompt="What is your marital status?",
            required=True,
            options=[
                Option(id="single", text="Single", value="single", score=1),
                Option(id="married", text="Married", value="married", score=2),
                Option(id="divorced", text="Divorced", value="divorced", score=1),
                Option(id="widowed", text="Widowed", value="widowed", score=1),
            ],
            category="personal",
            weight=1,
        ),
    ],
)

# =============================================================================
# EMPLOYMENT INFORMATION
# =============================================================================

EMPLOYMENT_SECTION = Section(
    id="employment-info",
    title="Employment Information",
    description="Details about your current employment",
    questions=[
        Question(
            id="employment_status",
            type="single",
            prompt="What is your current employment status?",
            required=True,
            options=[
                Option(id="employed", text="Employed", value="employed", score=3),
                Option(id="self_employed", text="Self-employed", value="self_employed", score=2),
                Option(id="unemployed", text="Unemployed", value="unemployed", score=0),
                Option(id="retired", text="Retired", value="retired", score=1),
            ],
            category="employment",
            weight=3,
        ),
        Question(
            id="job_tenure",
            type="single",
            prompt="How long have you been in your current job?",
            required=True,
            options=[
                Option(id="less_6_months", text="Less than 6 months", value="less_6_months", score=1),
                Option(id="6_12_months", text="6 months to 1 year", value="6_12_months", score=2),
                Option(id="1_3_years", text="1 to 3 years", value="1_3_years", score=3),
                Option(id="more_3_years", text="More than 3 years", value="more_3_years", score=4),
            ],
            category="employment",
            weight=2,
        ),
        Question(
            id="monthly_income",
            type="number",
            prompt="What is your net monthly income?",
            description="Enter the amount in Colombian pesos",
            required=True,
            validation=Validation(
                min=500000,
                max=50000000,
                message="Income must be between $500,000 and $50,000,000",
            ),
            category="employment",
            weight=4,
        ),
    ],
)

# =============================================================================
# FINANCIAL INFORMATION
# =============================================================================

FINANCIAL_SECTION = Section(
    id="financial-info",
    title="Financial Information",
    description="Details about your financial situation",
    questions=[
        Question(
            id="monthly_expenses",
            type="number",
            prompt="What are your approximate monthly expenses?",
            description="Include housing, food, transport, etc.",
            required=True,
            validation=Validation(
                min=200000,
                max=30000000,
                message="Expenses must be between $200,000 and $30,000,000",
            ),
            category="financial",
            weight=3,
        ),
        Question(
            id="savings",
            type="single",
            prompt="Do you have savings or investments?",
            required=True,
            options=[
                Option(id="no_savings", text="I have no savings", value="no_savings", score=0),
                Option(id="less_1_month", text="Less than 1 month of income", value="less_1_month", score=1),
                Option(id="1_3_months", text="1 to 3 months of income", value="1_3_months", score=2),
                Option(id="more_3_months", text="More than 3 months of income", value="more_3_months", score=3),
            ],
            category="financial",
            weight=2,
        ),
        Question(
            id="other_loans",
            type="single",
            prompt="Do you have other active credits or loans?",
            required=True,
            options=[
                Option(id="no_loans", text="I have no other credits", value="no_loans", score=3),
                Option(id="one_loan", text="I have 1 credit", value="one_loan", score=2),
                Option(id="two_loans", text="I have 2 credits", value="two_loans", score=1),
                Option(id="more_loans", text="I have 3 or more credits", value="more_loans", score=0),
            ],
            category="financial",
            weight=2,
        ),
    ],
)

# =============================================================================
# CREDIT HISTORY
# =============================================================================

CREDIT_HISTORY_SECTION = Section(
    id="credit-history",
    title="Credit History",
    description="Information about your credit history",
    questions=[
        Question(
            id="credit_score",
            type="single",
            prompt="Do you know your credit score?",
            required=True,
            options=[
                Option(id="excellent", text="Excellent (700-850)", value="excellent", score=4),
                Option(id="good", text="Good (650-699)", value="good", score=3),
                Option(id="fair", text="Fair (600-649)", value="fair", score=2),
                Option(id="poor", text="Low (300-599)", value="poor", score=1),
                Option(id="unknown", text="I don't know it", value="unknown", score=1),
            ],
            category="credit_history",
            weight=4,
        ),
        Question(
            id="payment_history",
            type="single",
            prompt="How would you rate your payment history?",
            required=True,
            options=[
                Option(id="always_on_time", text="I always pay on time", value="always_on_time", score=4),
                Option(id="mostly_on_time", text="I almost always pay on time", value="mostly_on_time", score=3),
                Option(id="sometimes_late", text="I am sometimes late", value="sometimes_late", score=2),
                Option(id="often_late", text="I am often late", value="often_late", score=1),
            ],
            category="credit_history",
            weight=3,
        ),
        Question(
            id="credit_purpose",
            type="single",
            prompt="What do you need the credit for?",
            required=True,
            options=[
                Option(id="home", text="Buying a home", value="home", score=3),
                Option(id="vehicle", text="Buying a vehicle", value="vehicle", score=2),
                Option(id="education", text="Education", value="education", score=3),
                Option(id="business", text="Business / investment", value="business", score=2),
                Option(id="debt_consolidation", text="Debt consolidation", value="debt_consolidation", score=1),
                Option(id="personal", text="Personal expenses", value="personal", score=1),
            ],
            category="credit_history",
            weight=2,
        ),
    ],
)

# =============================================================================
# QUESTIONNAIRE
# =============================================================================

CREDIT_ANALYSIS_SURVEY = Schema(
    id="credit-analysis-2024",
    title="Comprehensive Credit Evaluation",
    description="Questionnaire that evaluates the credit profile and recommends suitable financial products",
    sections=[
        PERSONAL_SECTION,
        EMPLOYMENT_SECTION,
        FINANCIAL_SECTION,
        CREDIT_HISTORY_SECTION,
    ],
    estimated_time=10,
)


def get_schema() -> Schema:
    """Get the default credit analysis questionnaire."""
    return CREDIT_ANALYSIS_SURVEY


def get_questions() -> List[Question]:
    """Get the flattened list of questionnaire questions."""
    return CREDIT_ANALYSIS_SURVEY.questions
