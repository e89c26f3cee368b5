"""Tests for the FastAPI stub of the practice service."""

import asyncio

import httpx
from fastapi.testclient import TestClient


class TestHealthEndpoint:
    """Test health check endpoint."""

    def test_health_check_returns_ok(self):
        """Test that health check returns OK status."""
        from src.api.main import app

        client = TestClient(app)
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestCategoryEndpoint:
    """Test question generation endpoint."""

    def test_returns_question_object(self):
        """Test that /category answers with {"question": ...}."""
        from src.api.main import app

        client = TestClient(app)
        response = client.post("/category", json={"category": "Travel"})

        assert response.status_code == 200
        assert "travel" in response.json()["question"]

    def test_blank_category_is_rejected(self):
        """Test that blank categories fail with 422."""
        from src.api.main import app

        client = TestClient(app)

        assert client.post("/category", json={"category": "   "}).status_code == 422
        assert client.post("/category", json={}).status_code == 422


class TestEnhancementEndpoints:
    """Test answer enhancement and vocabulary endpoints."""

    def test_enhanced_answer_is_json_quoted(self):
        """Test that /user_answers_question returns a bare JSON string."""
        from src.api.main import app

        client = TestClient(app)
        response = client.post(
            "/user_answers_question",
            json={"user_answer_question": "i am gonna visit japan"},
        )

        assert response.status_code == 200
        assert response.text == '"I am going to visit japan."'

    def test_vocabulary_is_quoted_bullet_list(self):
        """Test that /list_vocabularies returns an escaped, bulleted string."""
        from src.api.main import app

        client = TestClient(app)
        response = client.post(
            "/list_vocabularies",
            json={"enhanced_answer": "Travelling broadens perspective."},
        )

        assert response.status_code == 200
        assert response.text == '"- travelling\\n- broadens\\n- perspective"'
        assert response.json() == "- travelling\n- broadens\n- perspective"


class TestStubLanguageService:
    """Test the rule-based stub operations."""

    def test_question_is_deterministic(self):
        """Test that the same category yields the same question."""
        from src.api.stub_service import StubLanguageService

        service = StubLanguageService()

        assert service.generate_question("Food") == service.generate_question("Food")
        assert "food" in service.generate_question(" Food ")

    def test_enhancement_rules(self):
        """Test informal phrases, capitalization and final punctuation."""
        from src.api.stub_service import StubLanguageService

        service = StubLanguageService()
        enhanced = service.enhance_answer("the  food was very good and i wanna go back")

        assert enhanced == "The food was excellent and I want to go back."

    def test_enhancement_keeps_existing_punctuation(self):
        """Test that a finished sentence is not punctuated twice."""
        from src.api.stub_service import StubLanguageService

        assert StubLanguageService().enhance_answer("Really?") == "Really?"

    def test_vocabulary_is_unique_and_ordered(self):
        """Test vocabulary selection by word length."""
        from src.api.stub_service import StubLanguageService

        service = StubLanguageService(min_vocabulary_length=6)
        vocabulary = service.list_vocabularies("Travel broadens minds. Travel often, travel far.")

        assert vocabulary == "- travel\n- broadens"

    def test_no_vocabulary(self):
        """Test that short answers produce an empty list."""
        from src.api.stub_service import StubLanguageService

        assert StubLanguageService().list_vocabularies("I go.") == ""


class TestClientAgainstStub:
    """Run the workflow controller end-to-end against the stub service."""

    def test_full_exercise(self):
        """Test category -> question -> results through real HTTP handling."""
        from src.api.main import app
        from src.ui.api_client import APIClient
        from src.ui.state import Step
        from src.ui.workflow import WorkflowController

        client = APIClient(
            base_url="http://testserver",
            transport=httpx.ASGITransport(app=app),
        )
        controller = WorkflowController(client=client)

        controller.edit_category("Travel")
        assert asyncio.run(controller.submit_category()) is True
        assert "travel" in controller.state.question

        controller.edit_answer("i am gonna visit japan because the food is very good")
        assert asyncio.run(controller.submit_answer()) is True

        state = controller.state
        assert state.step == Step.RESULTS
        assert state.enhanced_answer == "I am going to visit japan because the food is excellent."
        assert list(state.vocabularies) == ["because", "excellent"]
        assert state.error_message is None
