"""Utility functions for rendering the exercise."""

from src.ui.state import WorkflowState

NO_VOCABULARY_TEXT = "No vocabulary extracted"


def category_button_label(is_loading: bool) -> str:
    """Label for the category form's submit button."""
    return "Generating Question..." if is_loading else "Generate Question →"


def answer_button_label(is_loading: bool) -> str:
    """Label for the answer form's submit button."""
    return "Processing Answer..." if is_loading else "Submit Answer →"


def truncate_text(text: str, max_length: int = 100) -> str:
    """Truncate text to max length with ellipsis.

    Args:
        text: Text to truncate.
        max_length: Maximum length before truncation.

    Returns:
        Truncated text with ellipsis if needed.
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def format_vocabulary_markdown(vocabularies: tuple[str, ...] | list[str]) -> str:
    """Render vocabulary items as a markdown bullet list."""
    if not vocabularies:
        return f"_{NO_VOCABULARY_TEXT}_"
    return "\n".join(f"- {item}" for item in vocabularies)


def create_download_markdown(state: WorkflowState) -> str:
    """Create markdown content for downloading a finished exercise.

    Args:
        state: Workflow state, normally in the results step.

    Returns:
        Formatted markdown string.
    """
    lines = []

    lines.append("# Language Practice Session")
    lines.append("")
    lines.append(f"**Category:** {state.category.strip()}")
    lines.append("")

    lines.append("## Question")
    lines.append("")
    lines.append(state.question)
    lines.append("")

    lines.append("## Your Original Answer")
    lines.append("")
    lines.append(state.user_answer.strip())
    lines.append("")

    lines.append("## Enhanced Answer")
    lines.append("")
    lines.append(state.enhanced_answer)
    lines.append("")

    lines.append("## Key Vocabulary")
    lines.append("")
    lines.append(format_vocabulary_markdown(state.vocabularies))

    return "\n".join(lines)
