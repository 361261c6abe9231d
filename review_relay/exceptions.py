"""
Exceptions shared across layers.

Infrastructure services raise the specific subclasses; the submission
handler turns them into SubmissionError, which carries the HTTP status
and the short message shown to the submitter.
"""


class ReviewRelayError(Exception):
    """Base exception for Review Relay."""
    pass


class ConfigurationError(ReviewRelayError):
    """Required configuration is missing."""
    pass


class ClassificationError(ReviewRelayError):
    """The sentiment classifier could not produce a label."""
    pass


class PersistenceError(ReviewRelayError):
    """A review could not be written to the store."""
    pass


class NotificationError(ReviewRelayError):
    """The messaging provider failed to deliver a notification."""
    pass


class SubmissionError(ReviewRelayError):
    """A review submission was rejected or aborted."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
