"""UI module: workflow controller, service client and Streamlit interface."""

from src.ui.api_client import APIClient, ServiceError, ServiceTimeoutError
from src.ui.response_parser import (
    ResponseParseError,
    clean_response_text,
    extract_question,
    parse_vocabulary,
)
from src.ui.state import ErrorKind, Step, WorkflowState
from src.ui.utils import (
    answer_button_label,
    category_button_label,
    create_download_markdown,
    format_vocabulary_markdown,
    truncate_text,
)
from src.ui.workflow import InvalidTransitionError, WorkflowController, WorkflowError

__all__ = [
    "APIClient",
    "ErrorKind",
    "InvalidTransitionError",
    "ResponseParseError",
    "ServiceError",
    "ServiceTimeoutError",
    "Step",
    "WorkflowController",
    "WorkflowError",
    "WorkflowState",
    "answer_button_label",
    "category_button_label",
    "clean_response_text",
    "create_download_markdown",
    "extract_question",
    "format_vocabulary_markdown",
    "parse_vocabulary",
    "truncate_text",
]
