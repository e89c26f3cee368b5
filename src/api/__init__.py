"""API module: FastAPI stub of the language practice service."""

from src.api.models import (
    CategoryRequest,
    QuestionResponse,
    UserAnswerRequest,
    VocabularyRequest,
)
from src.api.stub_service import StubLanguageService

__all__ = [
    "CategoryRequest",
    "QuestionResponse",
    "StubLanguageService",
    "UserAnswerRequest",
    "VocabularyRequest",
]
