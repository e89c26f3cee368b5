"""Pytest configuration and fixtures."""

import asyncio
import os

import pytest


def pytest_configure(config):
    """Set up test environment variables before tests run."""
    os.environ.setdefault("LOG_LEVEL", "DEBUG")
    os.environ.setdefault("REQUEST_TIMEOUT", "5")
    os.environ.setdefault("VOCABULARY_PARSE_MODE", "tolerant")


class FakeServiceClient:
    """In-memory stand-in for ``APIClient``.

    ``responses`` holds the raw body returned by each method, ``errors`` an
    exception to raise instead, and ``gates`` an ``asyncio.Event`` the call
    waits on before answering, so tests can observe in-flight state.
    """

    def __init__(self):
        self.responses = {
            "generate_question": '"What is the best place you have ever traveled to?"',
            "enhance_answer": '"She travels often."',
            "list_vocabularies": '"- travels\\n- often"',
        }
        self.errors: dict[str, Exception] = {}
        self.gates: dict[str, asyncio.Event] = {}
        self.calls: list[tuple[str, str]] = []

    def called(self, name: str) -> bool:
        return any(call_name == name for call_name, _ in self.calls)

    async def _respond(self, name: str, argument: str) -> str:
        self.calls.append((name, argument))
        if name in self.gates:
            await self.gates[name].wait()
        if name in self.errors:
            raise self.errors[name]
        return self.responses[name]

    async def generate_question(self, category: str) -> str:
        return await self._respond("generate_question", category)

    async def enhance_answer(self, user_answer: str) -> str:
        return await self._respond("enhance_answer", user_answer)

    async def list_vocabularies(self, enhanced_answer: str) -> str:
        return await self._respond("list_vocabularies", enhanced_answer)


@pytest.fixture
def fake_client():
    """Provide a scriptable fake service client."""
    return FakeServiceClient()


@pytest.fixture
def controller(fake_client):
    """Provide a workflow controller wired to the fake client."""
    from src.ui.workflow import WorkflowController

    return WorkflowController(client=fake_client, vocabulary_parse_mode="tolerant")


@pytest.fixture
def mock_settings():
    """Provide settings for testing."""
    from src.config import Settings

    return Settings(
        api_base_url="http://testserver",
        request_timeout=5.0,
        vocabulary_parse_mode="tolerant",
    )
