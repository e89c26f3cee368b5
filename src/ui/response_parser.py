"""Normalization of loosely structured service responses.

The service answers either with plain text, a JSON-quoted string, or (for
question generation) a JSON object. Precedence used by
``clean_response_text``:

1. Surrounding whitespace is stripped.
2. A body that is a valid JSON string literal is decoded, so escape
   sequences such as ``\\n`` and ``\\"`` become real characters.
3. Otherwise one leading and one trailing double quote are removed, each
   independently, if present.
"""

import json
import logging
import re

from src.config import VocabularyParseMode
from src.ui.api_client import ServiceError

logger = logging.getLogger(__name__)

# Escaped "\n" sequences left in the text, or runs of real line breaks.
LINE_BREAK_PATTERN = re.compile(r"\\n|[\r\n]+")
# "•" anywhere, or "-" at line start / after whitespace. "well-known" survives,
# but "cat -dog" still splits into "cat" and "dog".
INLINE_BULLET_PATTERN = re.compile(r"•\s*|(?:^|\s+)-\s*")
LEADING_BULLET_PATTERN = re.compile(r"^[-•]\s*")


class ResponseParseError(ServiceError):
    """The response body could not be interpreted as expected text."""


def is_utf8_encodable(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def clean_response_text(raw: str) -> str:
    """Normalize a raw response body into plain text.

    Args:
        raw: Response body as received.

    Returns:
        The unquoted text.

    Raises:
        ResponseParseError: If the JSON escapes decode to text that cannot be
            sent back to the service as UTF-8.
    """
    text = raw.strip()

    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        try:
            decoded = json.loads(text)
        except ValueError:
            decoded = None
        if isinstance(decoded, str):
            if not is_utf8_encodable(decoded):
                raise ResponseParseError("Response decodes to text with unpaired surrogates")
            return decoded

    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    return text


def extract_question(raw: str) -> str:
    """Extract the generated question from a /category response.

    Both ``{"question": "..."}`` and plain or quoted text are accepted.

    Args:
        raw: Response body as received.

    Returns:
        The question text, trimmed.

    Raises:
        ResponseParseError: If the body holds no usable question.
    """
    text = raw.strip()
    question: object

    if text.startswith("{"):
        try:
            data = json.loads(text)
        except (ValueError, RecursionError) as e:
            raise ResponseParseError("Question response is not valid JSON") from e
        if not isinstance(data, dict):
            raise ResponseParseError("Question response is not a JSON object")
        question = data.get("question")
        if not isinstance(question, str):
            raise ResponseParseError("Question response has no 'question' string")
    else:
        question = clean_response_text(text)

    question = question.strip()
    if not question:
        raise ResponseParseError("Question response is empty")
    if not is_utf8_encodable(question):
        raise ResponseParseError("Question response contains unpaired surrogates")
    return question


def split_lines(text: str) -> list[str]:
    """Split on real line breaks and on escaped ``\\n`` sequences."""
    return LINE_BREAK_PATTERN.split(text)


def parse_vocabulary(text: str, mode: VocabularyParseMode = "tolerant") -> list[str]:
    """Parse cleaned vocabulary text into an ordered list of items.

    In ``tolerant`` mode every line is kept and inline bullets are split
    apart, so ``"- cat - dog"`` yields ``["cat", "dog"]``. In ``strict``
    mode only lines starting with ``-`` or ``•`` are kept and everything
    else is discarded.

    Duplicates are preserved and the output follows source order.

    Args:
        text: Cleaned vocabulary response text.
        mode: Parsing strategy.

    Returns:
        Vocabulary items, possibly empty.
    """
    items: list[str] = []

    for line in split_lines(text):
        if mode == "strict":
            stripped = line.strip()
            if not stripped.startswith(("-", "•")):
                if stripped:
                    logger.debug(f"Discarding non-bulleted vocabulary line: {stripped!r}")
                continue
            fragments = [LEADING_BULLET_PATTERN.sub("", stripped)]
        else:
            fragments = INLINE_BULLET_PATTERN.split(line)

        for fragment in fragments:
            fragment = fragment.strip()
            if fragment:
                items.append(fragment)

    return items
