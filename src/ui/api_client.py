"""API client for communicating with the question/enhancement service."""

import logging

import httpx

from src.config import get_settings

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """The collaborator service could not produce a usable response."""


class ServiceTimeoutError(ServiceError):
    """The collaborator service did not respond within the timeout."""


class APIClient:
    """Async client for the language practice service.

    Each method returns the raw response body as text. Normalizing that
    text into domain values is left to ``src.ui.response_parser``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the API client.

        Args:
            base_url: Base URL of the service. If not provided, uses the
                API_BASE_URL setting (http://localhost:8000 by default).
            timeout: Per-request timeout in seconds. Defaults to the
                REQUEST_TIMEOUT setting.
            transport: Optional httpx transport, used to stub the service.
        """
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.health_check_timeout = settings.health_check_timeout
        self._transport = transport

    def _client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=self._transport,
        )

    async def _post_text(self, path: str, payload: dict[str, str]) -> str:
        """POST a JSON payload and return the response body as text.

        Raises:
            ServiceTimeoutError: If the request times out.
            ServiceError: On network failure, a non-2xx status, or a payload
                that cannot be encoded as UTF-8.
        """
        logger.debug(f"POST {self.base_url}{path}")
        try:
            async with self._client(self.timeout) as client:
                response = await client.post(path, json=payload)
                response.raise_for_status()
                return response.text
        except httpx.TimeoutException as e:
            raise ServiceTimeoutError(f"{path} timed out after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise ServiceError(f"{path} returned HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise ServiceError(f"{path} request failed: {e}") from e
        except UnicodeEncodeError as e:
            raise ServiceError(f"{path} payload is not valid UTF-8") from e

    async def health_check(self) -> bool:
        """Check if the service is reachable.

        Returns:
            True if the service answers /health with 200, False otherwise.
        """
        try:
            async with self._client(self.health_check_timeout) as client:
                response = await client.get("/health")
                return response.status_code == 200
        except httpx.RequestError:
            return False

    async def generate_question(self, category: str) -> str:
        """Request a discussion question for a category.

        Args:
            category: Trimmed category text.

        Returns:
            Raw response body (plain text or a JSON ``{"question": ...}`` object).
        """
        return await self._post_text("/category", {"category": category})

    async def enhance_answer(self, user_answer: str) -> str:
        """Request an enhanced rewrite of the user's answer.

        Args:
            user_answer: Trimmed answer text.

        Returns:
            Raw response body, possibly JSON-quoted.
        """
        return await self._post_text(
            "/user_answers_question", {"user_answer_question": user_answer}
        )

    async def list_vocabularies(self, enhanced_answer: str) -> str:
        """Request vocabulary extracted from an enhanced answer.

        Args:
            enhanced_answer: Cleaned enhanced answer text.

        Returns:
            Raw response body, possibly JSON-quoted, bullet- or newline-delimited.
        """
        return await self._post_text("/list_vocabularies", {"enhanced_answer": enhanced_answer})
