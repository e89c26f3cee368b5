"""Tests for the UI state model and rendering helpers."""


class TestUIComponents:
    """Test UI helper functions."""

    def test_button_labels_follow_loading(self):
        """Test submit button labels."""
        from src.ui.utils import answer_button_label, category_button_label

        assert category_button_label(False) == "Generate Question →"
        assert category_button_label(True) == "Generating Question..."
        assert answer_button_label(False) == "Submit Answer →"
        assert answer_button_label(True) == "Processing Answer..."

    def test_truncate_text(self):
        """Test text truncation utility."""
        from src.ui.utils import truncate_text

        short_text = "What is your favorite food?"
        assert truncate_text(short_text, max_length=50) == short_text

        long_text = "Describe a memorable experience you have had related to travel. " * 3
        truncated = truncate_text(long_text, max_length=50)
        assert len(truncated) <= 53  # 50 + "..."
        assert truncated.endswith("...")

    def test_format_vocabulary_markdown(self):
        """Test vocabulary bullet rendering."""
        from src.ui.utils import NO_VOCABULARY_TEXT, format_vocabulary_markdown

        assert format_vocabulary_markdown(("travels", "often")) == "- travels\n- often"
        assert NO_VOCABULARY_TEXT in format_vocabulary_markdown(())

    def test_create_download_markdown(self):
        """Test markdown export of a finished exercise."""
        from src.ui.state import Step, WorkflowState
        from src.ui.utils import create_download_markdown

        state = WorkflowState(
            step=Step.RESULTS,
            category=" Travel ",
            question="Where do you like to travel?",
            user_answer="she travel often",
            enhanced_answer="She travels often.",
            vocabularies=("travels", "often"),
        )

        markdown = create_download_markdown(state)

        assert "**Category:** Travel" in markdown
        assert "## Question" in markdown
        assert "she travel often" in markdown
        assert "She travels often." in markdown
        assert "- travels\n- often" in markdown


class TestUIState:
    """Test UI state management."""

    def test_workflow_state_model(self):
        """Test WorkflowState defaults."""
        from src.ui.state import Step, WorkflowState

        state = WorkflowState()

        assert state.step == Step.CATEGORY
        assert state.category == ""
        assert state.question == ""
        assert state.user_answer == ""
        assert state.enhanced_answer == ""
        assert state.vocabularies == ()
        assert state.is_loading is False
        assert state.error_message is None
        assert state.error_kind is None

    def test_can_submit_category(self):
        """Test the category submit guard."""
        from src.ui.state import Step, WorkflowState

        assert WorkflowState(category="Travel").can_submit_category is True
        assert WorkflowState(category="   ").can_submit_category is False
        assert WorkflowState(category="Travel", is_loading=True).can_submit_category is False
        assert (
            WorkflowState(category="Travel", step=Step.QUESTION).can_submit_category is False
        )

    def test_can_submit_answer(self):
        """Test the answer submit guard."""
        from src.ui.state import Step, WorkflowState

        assert WorkflowState(step=Step.QUESTION, user_answer="Yes").can_submit_answer is True
        assert WorkflowState(step=Step.QUESTION, user_answer=" ").can_submit_answer is False
        assert WorkflowState(user_answer="Yes").can_submit_answer is False

    def test_step_values(self):
        """Test that steps serialize to their names."""
        from src.ui.state import Step

        assert [step.value for step in Step] == ["category", "question", "answer", "results"]
