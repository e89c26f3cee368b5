"""Workflow controller driving a practice session through its steps.

The controller owns the only ``WorkflowState`` of a session. Every user
action goes through it, and it is the only place where state is replaced.
Allowed moves are listed in ``TRANSITIONS``; anything else raises
``InvalidTransitionError``.

Network completions are tagged with a generation number taken when the
operation starts. Back, reset and "try another category" bump the
generation, so a request that resolves after the user has moved on is
discarded instead of overwriting the newer state.
"""

import logging
from enum import Enum

from src.config import VocabularyParseMode, get_settings
from src.ui.api_client import APIClient, ServiceError, ServiceTimeoutError
from src.ui.response_parser import (
    ResponseParseError,
    clean_response_text,
    extract_question,
    parse_vocabulary,
)
from src.ui.state import ErrorKind, Step, WorkflowState

logger = logging.getLogger(__name__)

QUESTION_ERROR_MESSAGE = "Failed to generate question. Please try again."
ANSWER_ERROR_MESSAGE = "Failed to process your answer. Please try again."
TIMEOUT_ERROR_MESSAGE = "The request timed out. Please try again."


class Action(str, Enum):
    """User actions recognized by the workflow."""

    EDIT_CATEGORY = "edit_category"
    SUBMIT_CATEGORY = "submit_category"
    EDIT_ANSWER = "edit_answer"
    SUBMIT_ANSWER = "submit_answer"
    BACK = "back"
    TRY_ANOTHER_CATEGORY = "try_another_category"
    RESET = "reset"


# (current step, action) -> step entered when the action succeeds
TRANSITIONS: dict[tuple[Step, Action], Step] = {
    (Step.CATEGORY, Action.EDIT_CATEGORY): Step.CATEGORY,
    (Step.CATEGORY, Action.SUBMIT_CATEGORY): Step.QUESTION,
    (Step.QUESTION, Action.EDIT_ANSWER): Step.QUESTION,
    (Step.QUESTION, Action.SUBMIT_ANSWER): Step.RESULTS,
    (Step.QUESTION, Action.BACK): Step.CATEGORY,
    (Step.RESULTS, Action.TRY_ANOTHER_CATEGORY): Step.CATEGORY,
    **{(step, Action.RESET): Step.CATEGORY for step in Step},
}


class WorkflowError(Exception):
    """Base error for misuse of the workflow controller."""


class InvalidTransitionError(WorkflowError):
    """An action was requested from a step that does not allow it."""

    def __init__(self, step: Step, action: Action):
        super().__init__(f"Action '{action.value}' is not allowed in step '{step.value}'")
        self.step = step
        self.action = action


class WorkflowController:
    """State machine for the category -> question -> results exercise."""

    def __init__(
        self,
        client: APIClient | None = None,
        vocabulary_parse_mode: VocabularyParseMode | None = None,
    ):
        """Initialize the controller with a fresh session state.

        Args:
            client: Service client. Creates one from settings if not provided.
            vocabulary_parse_mode: Vocabulary parsing strategy. Defaults to the
                VOCABULARY_PARSE_MODE setting.
        """
        self.client = client or APIClient()
        self.vocabulary_parse_mode = (
            vocabulary_parse_mode or get_settings().vocabulary_parse_mode
        )
        self._state = WorkflowState()
        self._generation = 0

    @property
    def state(self) -> WorkflowState:
        """Current (immutable) session state."""
        return self._state

    def _target(self, action: Action) -> Step:
        try:
            return TRANSITIONS[(self._state.step, action)]
        except KeyError:
            raise InvalidTransitionError(self._state.step, action) from None

    def _update(self, **changes) -> None:
        self._state = self._state.model_copy(update=changes)

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _begin(self) -> int:
        self._generation += 1
        self._update(is_loading=True, error_message=None, error_kind=None)
        return self._generation

    def _finish(self, generation: int) -> None:
        if self._is_current(generation):
            self._update(is_loading=False)

    def _invalidate(self) -> None:
        """Orphan any in-flight operation."""
        self._generation += 1

    def _fail(self, generation: int, error: ServiceError, message: str) -> None:
        """Record a failed operation, unless the user has moved on since."""
        if not self._is_current(generation):
            logger.debug(f"Discarding stale failure: {error}")
            return

        if isinstance(error, ServiceTimeoutError):
            logger.warning(f"Service request timed out: {error}")
            self._update(error_message=TIMEOUT_ERROR_MESSAGE, error_kind=ErrorKind.TIMEOUT)
            return

        logger.exception(f"Service request failed: {error}")
        kind = ErrorKind.PARSE if isinstance(error, ResponseParseError) else ErrorKind.TRANSPORT
        self._update(error_message=message, error_kind=kind)

    def edit_category(self, text: str) -> bool:
        """Record the category text as typed by the user.

        Returns:
            False if ignored because a request is in flight, True otherwise.
        """
        self._target(Action.EDIT_CATEGORY)
        if self._state.is_loading:
            logger.debug("Ignoring category edit while loading")
            return False
        self._update(category=text)
        return True

    def edit_answer(self, text: str) -> bool:
        """Record the answer text as typed by the user.

        Returns:
            False if ignored because a request is in flight, True otherwise.
        """
        self._target(Action.EDIT_ANSWER)
        if self._state.is_loading:
            logger.debug("Ignoring answer edit while loading")
            return False
        self._update(user_answer=text)
        return True

    async def submit_category(self) -> bool:
        """Generate a question for the current category.

        Returns:
            True if the workflow advanced to the question step. False if the
            submission was a no-op (blank category or an operation already in
            flight), failed, or was superseded by a later action.
        """
        target = self._target(Action.SUBMIT_CATEGORY)
        if not self._state.can_submit_category:
            return False
        category = self._state.category.strip()

        generation = self._begin()
        logger.debug(f"Generating question for category {category!r}")
        try:
            question = extract_question(await self.client.generate_question(category))
        except ServiceError as e:
            self._fail(generation, e, QUESTION_ERROR_MESSAGE)
            return False
        finally:
            self._finish(generation)

        if not self._is_current(generation):
            logger.debug("Discarding stale question response")
            return False

        self._update(step=target, question=question)
        return True

    async def submit_answer(self) -> bool:
        """Enhance the user's answer, then extract vocabulary from it.

        The two service calls run strictly in sequence. The enhanced answer
        and vocabulary are only stored once both have succeeded.

        Returns:
            True if the workflow advanced to the results step.
        """
        target = self._target(Action.SUBMIT_ANSWER)
        if not self._state.can_submit_answer:
            return False
        answer = self._state.user_answer.strip()

        generation = self._begin()
        logger.debug("Enhancing answer")
        try:
            enhanced = clean_response_text(await self.client.enhance_answer(answer))
            if not enhanced.strip():
                raise ResponseParseError("Enhanced answer is empty")

            if not self._is_current(generation):
                logger.debug("Answer processing superseded, skipping vocabulary extraction")
                return False

            logger.debug("Extracting vocabulary")
            vocabulary_text = clean_response_text(await self.client.list_vocabularies(enhanced))
            vocabularies = parse_vocabulary(vocabulary_text, self.vocabulary_parse_mode)
        except ServiceError as e:
            self._fail(generation, e, ANSWER_ERROR_MESSAGE)
            return False
        finally:
            self._finish(generation)

        if not self._is_current(generation):
            logger.debug("Discarding stale vocabulary response")
            return False

        self._update(
            step=target,
            enhanced_answer=enhanced,
            vocabularies=tuple(vocabularies),
        )
        logger.info(f"Answer processed with {len(vocabularies)} vocabulary items")
        return True

    def back(self) -> None:
        """Return from the question step to category selection."""
        target = self._target(Action.BACK)
        self._invalidate()
        self._update(step=target, is_loading=False)

    def try_another_category(self) -> None:
        """Return from results to category selection, keeping entered text."""
        target = self._target(Action.TRY_ANOTHER_CATEGORY)
        self._invalidate()
        self._update(step=target, is_loading=False)

    def reset(self) -> None:
        """Start a new session: every field returns to its initial value."""
        self._target(Action.RESET)
        self._invalidate()
        self._state = WorkflowState()
