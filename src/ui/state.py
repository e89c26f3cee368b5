"""State management models for the exercise workflow."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Step(str, Enum):
    """Workflow step currently shown to the user.

    ANSWER is part of the vocabulary of steps but never entered: the
    question and the answer form are rendered together in QUESTION.
    """

    CATEGORY = "category"
    QUESTION = "question"
    ANSWER = "answer"
    RESULTS = "results"


class ErrorKind(str, Enum):
    """Classification of the last failed operation."""

    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    PARSE = "parse"


class WorkflowState(BaseModel):
    """Session-scoped state for one practice session.

    Instances are immutable; the workflow controller replaces the whole
    record on every transition.
    """

    model_config = ConfigDict(frozen=True)

    step: Step = Field(default=Step.CATEGORY, description="Active workflow step")
    category: str = Field(default="", description="Topic entered by the user")
    question: str = Field(default="", description="Generated discussion question")
    user_answer: str = Field(default="", description="Answer typed by the user")
    enhanced_answer: str = Field(default="", description="Rewritten answer from the service")
    vocabularies: tuple[str, ...] = Field(default=(), description="Extracted vocabulary")
    is_loading: bool = Field(default=False, description="An operation is in flight")
    error_message: str | None = Field(default=None, description="User-facing error message")
    error_kind: ErrorKind | None = Field(default=None, description="Kind of the last failure")

    @property
    def can_submit_category(self) -> bool:
        """Whether the category form may be submitted."""
        return self.step == Step.CATEGORY and not self.is_loading and bool(self.category.strip())

    @property
    def can_submit_answer(self) -> bool:
        """Whether the answer form may be submitted."""
        return (
            self.step == Step.QUESTION and not self.is_loading and bool(self.user_answer.strip())
        )
