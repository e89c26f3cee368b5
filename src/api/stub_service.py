"""Deterministic stand-in for the language practice service.

Produces template-based questions, rule-based answer enhancements and
length-based vocabulary lists, so the client can be run and tested
offline against the same response shapes as the real service.
"""

import logging
import re

logger = logging.getLogger(__name__)

QUESTION_TEMPLATES = [
    "What do you enjoy most about {category}, and why?",
    "How has {category} changed in your country over the last ten years?",
    "Describe a memorable experience you have had related to {category}.",
    "Do you think {category} will be more or less important in the future? Explain.",
]

# Informal phrase -> more formal replacement, applied case-insensitively.
ENHANCEMENTS = {
    r"\bgonna\b": "going to",
    r"\bwanna\b": "want to",
    r"\bkinda\b": "somewhat",
    r"\ba lot of\b": "a great deal of",
    r"\bvery good\b": "excellent",
    r"\bvery bad\b": "terrible",
    r"\bvery big\b": "enormous",
    r"\bi\b": "I",
}

WORD_PATTERN = re.compile(r"[A-Za-z][A-Za-z'-]+")
MIN_VOCABULARY_LENGTH = 7


class StubLanguageService:
    """Rule-based implementation of the three service operations."""

    def __init__(self, min_vocabulary_length: int = MIN_VOCABULARY_LENGTH):
        self.min_vocabulary_length = min_vocabulary_length

    def generate_question(self, category: str) -> str:
        """Pick a question template for the category.

        The template is chosen from the category text, so the same category
        always yields the same question.
        """
        category = category.strip()
        index = sum(ord(char) for char in category.lower()) % len(QUESTION_TEMPLATES)
        return QUESTION_TEMPLATES[index].format(category=category.lower())

    def enhance_answer(self, user_answer: str) -> str:
        """Rewrite an answer with a more formal register."""
        text = " ".join(user_answer.split())
        for pattern, replacement in ENHANCEMENTS.items():
            text = re.sub(pattern, replacement, text, flags=re.IGNORECASE)

        if text:
            text = text[0].upper() + text[1:]
            if text[-1] not in ".!?":
                text += "."
        return text

    def list_vocabularies(self, enhanced_answer: str) -> str:
        """List notable words as a newline-delimited bullet list.

        Words are kept in order of first appearance, without duplicates.
        """
        seen: set[str] = set()
        words: list[str] = []
        for match in WORD_PATTERN.finditer(enhanced_answer):
            word = match.group().lower()
            if len(word) >= self.min_vocabulary_length and word not in seen:
                seen.add(word)
                words.append(word)

        logger.debug(f"Extracted {len(words)} vocabulary words")
        return "\n".join(f"- {word}" for word in words)
