"""
Review Submission - Application Use Case
=========================================

Runs one review form post end to end:

    validate -> classify -> persist -> notify (best-effort) -> respond

Every failure before persistence ends the request with a SubmissionError and
leaves no side effects behind. Once the review is stored the submission has
succeeded; a failed SMS is only logged.
"""

import re
import logging
from typing import Mapping, Protocol

from ..exceptions import ClassificationError, PersistenceError, SubmissionError
from ..infrastructure.llm import Sentiment
from ..infrastructure.persistence import Review
from ..infrastructure.sms import NotificationResult

logger = logging.getLogger(__name__)

SUBMIT_METHOD = "POST"

# Form field names posted by the review form
NAME_FIELD = "review_name"
RATING_FIELD = "rating"
DESCRIPTION_FIELD = "review_description"

# ── User-visible error messages ────────────────────────────────
INVALID_METHOD = "Invalid request method"
FORM_PARSE_ERROR = "Error parsing form"
INVALID_RATING = "Invalid rating value"
MISSING_FIELDS = "All fields are required"
SENTIMENT_ERROR = "Error analyzing sentiment"
DATABASE_ERROR = "Database error"

# ── Acknowledgment messages ────────────────────────────────────
POSITIVE_MESSAGE = "Thank you for the positive feedback!"
NEGATIVE_MESSAGE = "We are sorry to hear about your experience. We will work on improving it!"
DEFAULT_MESSAGE = "Thank you for your feedback!"

SENTIMENT_MESSAGES = {
    Sentiment.POSITIVE.value: POSITIVE_MESSAGE,
    Sentiment.NEGATIVE.value: NEGATIVE_MESSAGE,
    Sentiment.NEUTRAL.value: DEFAULT_MESSAGE,
}

RESPONSE_TEMPLATE = """
    <div class="sentiment-message">
        <p>{message}</p>
        <a href="/">Submit another review</a>
    </div>
"""

# Signed decimal that fits in a 64-bit SQLite INTEGER
_RATING_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2 ** 63), 2 ** 63 - 1


class Classifier(Protocol):
    def classify(self, text: str) -> str: ...


class ReviewStore(Protocol):
    def add_review(self, name: str, rating: int, description: str) -> Review: ...


class Dispatcher(Protocol):
    def try_notify(self, name: str, rating: int) -> NotificationResult: ...


def parse_rating(raw: str) -> int:
    """
    Parse a rating the way the form sends it: optional sign, digits only.

    Raises:
        ValueError: on anything else, including out of range values.
    """
    if not _RATING_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid rating {raw!r}")
    rating = int(raw)
    if not _INT64_MIN <= rating <= _INT64_MAX:
        raise ValueError(f"rating out of range {raw!r}")
    return rating


def acknowledgment_for(sentiment: str) -> str:
    """Pick the message shown to the submitter for a sentiment label."""
    message = SENTIMENT_MESSAGES.get(sentiment)
    if message is None:
        logger.warning(f"Unexpected sentiment label {sentiment!r}, using generic acknowledgment")
        return DEFAULT_MESSAGE
    return message


def render_acknowledgment(sentiment: str) -> str:
    return RESPONSE_TEMPLATE.format(message=acknowledgment_for(sentiment))


class ReviewSubmissionHandler:
    """
    Orchestrates a single review submission.

    USAGE:
        handler = ReviewSubmissionHandler(SentimentService(), db, dispatcher)
        handler.check_method(request.method)
        html = handler.submit({"review_name": "Ana", "rating": "5", ...})

    Collaborators are shared between concurrent requests and must be safe
    to call from several threads.
    """

    def __init__(self, classifier: Classifier, store: ReviewStore, dispatcher: Dispatcher):
        self._classifier = classifier
        self._store = store
        self._dispatcher = dispatcher

    def check_method(self, method: str) -> None:
        if method.upper() != SUBMIT_METHOD:
            logger.warning(f"Rejected {method} request to review submission")
            raise SubmissionError(405, INVALID_METHOD)

    def submit(self, form: Mapping[str, object]) -> str:
        """
        Validate, classify, store and announce one review.

        Args:
            form: Parsed form fields.

        Returns:
            HTML acknowledgment fragment.

        Raises:
            SubmissionError: 400 for invalid input, 500 when classification
                or persistence fails.
        """
        logger.info("Form submission received")

        name = _field(form, NAME_FIELD)
        description = _field(form, DESCRIPTION_FIELD)
        try:
            rating = parse_rating(_field(form, RATING_FIELD))
        except ValueError as e:
            logger.warning(f"Invalid rating value: {e}")
            raise SubmissionError(400, INVALID_RATING) from e

        logger.info(f"Received name: {name}, rating: {rating}")

        if not name or rating == 0 or not description:
            logger.warning("Missing required form fields")
            raise SubmissionError(400, MISSING_FIELDS)

        try:
            sentiment = self._classifier.classify(description)
        except ClassificationError as e:
            logger.error(f"Error analyzing sentiment: {e}")
            raise SubmissionError(500, SENTIMENT_ERROR) from e

        try:
            review = self._store.add_review(name, rating, description)
        except PersistenceError as e:
            logger.error(f"Database error: {e}")
            raise SubmissionError(500, DATABASE_ERROR) from e

        logger.info(f"Review {review.id} submitted successfully (sentiment: {sentiment})")

        self._report_notification(self._dispatcher.try_notify(review.name, review.rating))

        return render_acknowledgment(sentiment)

    @staticmethod
    def _report_notification(result: NotificationResult) -> None:
        if result.sent:
            logger.info("SMS sent successfully")
        else:
            logger.warning(f"Error sending SMS: {result.error}")


def _field(form: Mapping[str, object], key: str) -> str:
    """Text value of a form field; missing fields and file uploads read as ""."""
    value = form.get(key, "")
    return value if isinstance(value, str) else ""
