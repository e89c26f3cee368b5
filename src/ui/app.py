"""Streamlit web application for the language practice exercise."""

import asyncio
import logging

import streamlit as st

from src.config import get_settings
from src.ui.api_client import APIClient
from src.ui.state import Step
from src.ui.utils import (
    NO_VOCABULARY_TEXT,
    answer_button_label,
    category_button_label,
    create_download_markdown,
    format_vocabulary_markdown,
)
from src.ui.workflow import WorkflowController

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Page configuration
st.set_page_config(
    page_title="Language Learning Assistant",
    page_icon="📚",
    layout="centered",
)

# Initialize API client
api_client = APIClient()


def init_session_state():
    """Initialize one workflow controller per browser session."""
    if "controller" not in st.session_state:
        st.session_state.controller = WorkflowController(client=api_client)


def get_controller() -> WorkflowController:
    return st.session_state.controller


def render_sidebar():
    """Render sidebar with service status."""
    with st.sidebar:
        st.title("⚙️ Settings")

        st.subheader("Service status")
        if asyncio.run(api_client.health_check()):
            st.success("✅ Service reachable")
        else:
            st.error("❌ Service unreachable")
            st.caption(f"Start the service at {api_client.base_url}")

        st.caption(f"Vocabulary parsing: {get_controller().vocabulary_parse_mode}")


def render_error():
    """Render the last error message, if any."""
    error_message = get_controller().state.error_message
    if error_message:
        st.error(error_message)


def render_category_step():
    """Render step 1: category selection."""
    controller = get_controller()
    state = controller.state

    st.header("📚 Step 1: Choose a Category")
    st.caption("Enter a topic or category you'd like to practice discussing")

    with st.form("category_form"):
        category = st.text_input(
            "Category",
            value=state.category,
            placeholder="e.g., Travel, Technology, Food, Sports...",
        )
        submitted = st.form_submit_button(
            category_button_label(state.is_loading),
            type="primary",
            disabled=state.is_loading,
        )

    if submitted:
        controller.edit_category(category)
        with st.spinner(category_button_label(True)):
            asyncio.run(controller.submit_category())
        st.rerun()


def render_question_step():
    """Render step 2: the generated question and the answer form."""
    controller = get_controller()
    state = controller.state

    st.header("💬 Step 2: Answer the Question")
    st.markdown(f"Category: `{state.category.strip()}`")
    st.info(state.question)

    with st.form("answer_form"):
        answer = st.text_area(
            "Your answer",
            value=state.user_answer,
            height=150,
            placeholder="Type your answer here...",
        )
        col1, col2 = st.columns([3, 1])
        with col1:
            submitted = st.form_submit_button(
                answer_button_label(state.is_loading),
                type="primary",
                disabled=state.is_loading,
            )
        with col2:
            back = st.form_submit_button("Back")

    if back:
        controller.back()
        st.rerun()
    elif submitted:
        controller.edit_answer(answer)
        with st.spinner(answer_button_label(True)):
            asyncio.run(controller.submit_answer())
        st.rerun()


def render_results_step():
    """Render the results: original answer, enhanced answer and vocabulary."""
    controller = get_controller()
    state = controller.state

    st.header("💡 Results")
    st.caption("Your enhanced answer and extracted vocabulary")

    st.subheader("Your Original Answer")
    st.text(state.user_answer)

    st.subheader("Enhanced Answer")
    st.success(state.enhanced_answer)

    st.subheader("Key Vocabulary")
    st.caption("Words and phrases from your enhanced answer")
    if state.vocabularies:
        st.markdown(format_vocabulary_markdown(state.vocabularies))
    else:
        st.caption(NO_VOCABULARY_TEXT)

    st.download_button(
        label="📥 Download as Markdown",
        data=create_download_markdown(state),
        file_name="practice_session.md",
        mime="text/markdown",
    )

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Start New Session", type="primary", use_container_width=True):
            controller.reset()
            st.rerun()
    with col2:
        if st.button("Try Another Category", use_container_width=True):
            controller.try_another_category()
            st.rerun()


STEP_RENDERERS = {
    Step.CATEGORY: render_category_step,
    Step.QUESTION: render_question_step,
    Step.RESULTS: render_results_step,
}


def main():
    """Main application entry point."""
    init_session_state()

    st.title("Language Learning Assistant")
    st.caption("Improve your English with AI-powered questions and vocabulary building")

    render_sidebar()
    render_error()
    STEP_RENDERERS[get_controller().state.step]()


if __name__ == "__main__":
    main()
