import streamlit as st
import plotly.graph_objects as go
from typing import Any, Optional

import settings
from operation.logging.logging_config import setup_logging, set_correlation_id
from scoring.config import create_product_catalog_dataframe
from scoring.models import EvaluationResult, MAX_SCORE, MIN_SCORE, Tier
from survey.config import get_schema
from survey.answer_store import to_number
from survey.models import Question, QuestionType
from utils.summary_utils import format_answer, format_currency, generate_evaluation_summary
from wizard.wizard_controller import WizardController

TIER_COLORS = {
    Tier.EXCELLENT: "#10b981",
    Tier.GOOD: "#3b82f6",
    Tier.FAIR: "#f59e0b",
    Tier.POOR: "#ef4444",
}

# Page configuration
st.set_page_config(
    page_title=settings.APP_TITLE,
    page_icon="💳",
    layout="wide",
    initial_sidebar_state="expanded"
)


def initialize_session_state():
    """Initialize session state variables"""
    setup_logging(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)

    if 'wizard' not in st.session_state:
        st.session_state.wizard = WizardController(get_schema())

    # Streamlit may serve each rerun from a different thread
    set_correlation_id(st.session_state.wizard.session_id)


def reset_app():
    """Start a new evaluation"""
    st.session_state.wizard.restart()
    st.rerun()


def _widget_key(wizard: WizardController, question: Question) -> str:
    # Keyed by session so widgets start empty after a restart
    return f"{wizard.session_id}_{question.id}"


def render_question_input(wizard: WizardController, question: Question) -> None:
    """Render the input matching the question type and store what the user entered"""
    stored = wizard.current_answer()
    key = _widget_key(wizard, question)

    if question.type == QuestionType.SINGLE:
        values = [opt.value for opt in question.options]
        index = values.index(stored) if stored in values else None
        selected = st.radio(
            question.prompt,
            options=list(question.options),
            index=index,
            format_func=lambda opt: opt.text,
            key=key,
            label_visibility="collapsed",
        )
        value: Any = selected.value if selected is not None else None
        if value != stored:
            wizard.set_answer(value)

    elif question.type == QuestionType.MULTIPLE:
        selection = stored if isinstance(stored, frozenset) else frozenset()
        for opt in question.options:
            checked = st.checkbox(opt.text, value=opt.value in selection, key=f"{key}_{opt.id}")
            if checked != (opt.value in selection):
                wizard.toggle_option(opt.value)

    elif question.type == QuestionType.TEXT:
        text = st.text_area(
            question.prompt,
            value=stored or "",
            placeholder="Type your answer here...",
            key=key,
            label_visibility="collapsed",
        )
        if text != (stored or ""):
            wizard.set_answer(text)

    elif question.type == QuestionType.NUMBER:
        number = st.number_input(
            question.prompt,
            value=to_number(stored),
            step=1.0,
            format="%.0f",
            placeholder="Enter a value...",
            key=key,
            label_visibility="collapsed",
        )
        value = "" if number is None else number
        if value != (stored if stored is not None else ""):
            wizard.set_answer(value)

        validation = question.validation
        if validation and validation.min is not None and validation.max is not None:
            st.caption(f"Range: {validation.min:,.0f} - {validation.max:,.0f}")
        elif validation and validation.min is not None:
            st.caption(f"Minimum: {validation.min:,.0f}")
        elif validation and validation.max is not None:
            st.caption(f"Maximum: {validation.max:,.0f}")


def render_questionnaire(wizard: WizardController) -> None:
    """Render the current question with progress and navigation"""
    question = wizard.current_question
    section = wizard.current_section

    col1, col2 = st.columns(2)
    with col1:
        st.caption(f"Question {wizard.question_number} of {wizard.total_questions}")
    with col2:
        st.caption(f"{wizard.progress_percent}% completed")
    st.progress(wizard.progress_percent / 100)

    st.markdown(f"#### {section.title}")
    st.subheader(question.prompt)
    if question.description:
        st.write(question.description)

    render_question_input(wizard, question)

    error = wizard.validation_error()
    if error:
        st.warning(error)

    prev_col, next_col = st.columns(2)
    with prev_col:
        if st.button("◀ Previous", key="previous_button", disabled=wizard.is_first):
            wizard.previous()
            st.rerun()
    with next_col:
        label = "Finish" if wizard.is_last else "Next ▶"
        if st.button(label, key="next_button", type="primary", disabled=not wizard.can_advance()):
            wizard.next()
            st.rerun()


def render_score_gauge(score: int, tier: Tier) -> None:
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=score,
        gauge={
            "axis": {"range": [MIN_SCORE, MAX_SCORE]},
            "bar": {"color": TIER_COLORS[tier]},
            "steps": [
                {"range": [MIN_SCORE, 600], "color": "#fee2e2"},
                {"range": [600, 650], "color": "#fef3c7"},
                {"range": [650, 700], "color": "#dbeafe"},
                {"range": [700, MAX_SCORE], "color": "#d1fae5"},
            ],
        },
    ))
    fig.update_layout(height=260, margin={"t": 20, "b": 0, "l": 20, "r": 20})
    st.plotly_chart(fig, config={'displayModeBar': False})


def render_results(wizard: WizardController) -> None:
    """Render the score and the recommended products"""
    result: Optional[EvaluationResult] = wizard.result
    if result is None:
        return
    recommendation = result.recommendation

    st.success("Evaluation completed")
    col1, col2 = st.columns([1, 1])
    with col1:
        render_score_gauge(result.score, recommendation.tier)
    with col2:
        st.metric("Credit Score", result.score)
        st.metric("Profile", recommendation.label)

    st.markdown("### Recommended Products")
    for product in recommendation.products:
        st.markdown(
            f"**{product.name}**: up to {format_currency(product.max_amount)} "
            f"at {product.annual_rate:.1f}%"
        )

    with st.expander("📝 Questionnaire Responses", expanded=False):
        for question in wizard.schema.questions:
            if question.id in wizard.answers:
                st.write(f"**{question.prompt}** {format_answer(question, wizard.answers[question.id])}")

    st.download_button(
        "⬇ Download summary",
        data=generate_evaluation_summary(result, wizard.schema, wizard.answers.as_dict()),
        file_name=f"credit_evaluation_{result.session_id}.md",
        mime="text/markdown",
        key="download_summary_button",
    )

    if st.button("🔄 Start a new evaluation", key="restart_results_button"):
        reset_app()


def main():
    initialize_session_state()
    wizard: WizardController = st.session_state.wizard

    st.title(settings.APP_TITLE)
    st.caption(wizard.schema.description)

    with st.sidebar:
        st.markdown(f"### {wizard.schema.title}")
        st.caption(f"{wizard.total_questions} questions · about {wizard.schema.estimated_time} minutes")
        if st.button("🔄 Reset", key="reset_button", type="primary"):
            reset_app()
        with st.expander("Product catalog", expanded=False):
            st.dataframe(create_product_catalog_dataframe(), hide_index=True)

    if wizard.is_complete:
        render_results(wizard)
    else:
        render_questionnaire(wizard)


main()
