"""
Sentiment Service - LLM-Based Sentiment Classification
=======================================================

ARCHITECTURAL DECISION:
- Uses the Gemini generateContent REST API
- Returns the raw label text; callers decide how to treat unknown labels
- No fallback: any failure is a ClassificationError
- One attempt per call, bounded by the configured timeout

EXTENSIBILITY:
- To use different model: set GEMINI_MODEL
- To use another provider: subclass and override _generate()
"""

import logging
import requests
from enum import Enum
from typing import Optional

from ..config import LLMSettings, get_settings
from ...exceptions import ClassificationError

logger = logging.getLogger(__name__)


class Sentiment(Enum):
    """
    Documented sentiment labels.

    The service itself returns plain strings, since the model may answer
    with anything; these are the values callers match against.
    """
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


class SentimentService:
    """
    Sentiment classification service using Gemini.

    USAGE:
        service = SentimentService()
        label = service.classify("I loved the product!")
        print(label)  # "Positive"

    One instance is created at startup and shared by all requests; it holds
    only read-only configuration.
    """

    PROMPT_TEMPLATE = (
        "Analyze the sentiment of the following review. "
        "Respond with only one word: 'Positive', 'Negative', or 'Neutral'.\n\n"
        "Review: {review}"
    )

    def __init__(self, settings: Optional[LLMSettings] = None):
        """Initialize sentiment service with settings."""
        settings = settings or get_settings().llm
        self._api_key = settings.api_key
        self._api_url = settings.api_url
        self._model = settings.model
        self._temperature = settings.temperature
        self._timeout = settings.timeout_seconds

    @property
    def endpoint(self) -> str:
        return f"{self._api_url}/{self._model}:generateContent"

    def classify(self, text: str) -> str:
        """
        Classify sentiment of review text.

        Args:
            text: Review description.

        Returns:
            The label returned by the model, whitespace trimmed.

        Raises:
            ClassificationError: API failure, no candidates or no text.
        """
        data = self._generate(self.PROMPT_TEMPLATE.format(review=text))
        return self._extract_label(data)

    def _generate(self, prompt: str) -> dict:
        """Send the prompt to Gemini and return the decoded response."""
        headers = {
            "x-goog-api-key": self._api_key,
            "Content-Type": "application/json",
        }

        payload = {
            "contents": [
                {"parts": [{"text": prompt}]}
            ],
            "generationConfig": {
                "temperature": self._temperature,
            },
        }

        try:
            response = requests.post(
                self.endpoint,
                headers=headers,
                json=payload,
                timeout=self._timeout
            )
            response.raise_for_status()
            return response.json()

        except requests.Timeout as e:
            raise ClassificationError(f"LLM API timeout after {self._timeout}s") from e

        except requests.RequestException as e:
            raise ClassificationError(f"LLM API error: {e}") from e

        except ValueError as e:
            raise ClassificationError(f"LLM API returned invalid JSON: {e}") from e

    def _extract_label(self, data: dict) -> str:
        """Concatenate the text parts of the first candidate."""
        if not isinstance(data, dict):
            raise ClassificationError("unexpected response format")

        candidates = data.get("candidates") or []
        if not candidates:
            raise ClassificationError("no candidates in response")

        try:
            content = candidates[0].get("content") or {}
            label = "".join(
                part.get("text", "")
                for part in content.get("parts") or []
                if isinstance(part, dict)
            )
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise ClassificationError("unexpected response format") from e

        if label == "":
            raise ClassificationError("no text content in response")

        logger.debug(f"LLM classified as: {label.strip()!r}")
        return label.strip()
