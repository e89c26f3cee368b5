"""Request and response models of the practice service."""

from pydantic import BaseModel, Field


class CategoryRequest(BaseModel):
    """Request model for question generation."""

    category: str = Field(min_length=1, description="Discussion topic chosen by the user")


class QuestionResponse(BaseModel):
    """Response model for question generation."""

    question: str = Field(description="Generated discussion question")


class UserAnswerRequest(BaseModel):
    """Request model for answer enhancement."""

    user_answer_question: str = Field(min_length=1, description="Answer written by the user")


class VocabularyRequest(BaseModel):
    """Request model for vocabulary extraction."""

    enhanced_answer: str = Field(min_length=1, description="Enhanced answer to mine for vocabulary")
