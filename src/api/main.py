"""FastAPI stub of the language practice service.

Serves the three endpoints the client consumes, with the same response
shapes as the real service: ``/category`` answers with a JSON object,
while ``/user_answers_question`` and ``/list_vocabularies`` answer with a
bare JSON string, which is what the client sees as quoted text.

Run locally with ``uvicorn src.api.main:app --reload``.
"""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from src.api.models import (
    CategoryRequest,
    QuestionResponse,
    UserAnswerRequest,
    VocabularyRequest,
)
from src.api.stub_service import StubLanguageService
from src.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

service = StubLanguageService()

app = FastAPI(
    title="Language Practice Stub API",
    description="Offline stand-in for question generation, answer enhancement and vocabulary",
    version="0.1.0",
)

# The Streamlit client and browser dev tools may run on another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/category", response_model=QuestionResponse)
async def generate_question(body: CategoryRequest) -> QuestionResponse:
    """Generate a discussion question for a category.

    Args:
        body: Request with the chosen category.

    Returns:
        The generated question.
    """
    if not body.category.strip():
        raise HTTPException(status_code=422, detail="Category must not be blank")
    logger.info(f"Generating question for category: {body.category}")
    return QuestionResponse(question=service.generate_question(body.category))


@app.post("/user_answers_question")
async def enhance_answer(body: UserAnswerRequest) -> str:
    """Return an enhanced version of the user's answer as a JSON string."""
    if not body.user_answer_question.strip():
        raise HTTPException(status_code=422, detail="Answer must not be blank")
    return service.enhance_answer(body.user_answer_question)


@app.post("/list_vocabularies")
async def list_vocabularies(body: VocabularyRequest) -> str:
    """Return vocabulary from the enhanced answer as a JSON-quoted bullet list."""
    return service.list_vocabularies(body.enhanced_answer)
