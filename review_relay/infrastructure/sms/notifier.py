"""
Notification Dispatcher - Product Owner Alerts
===============================================

Tells the product owner that a new review came in. Delivery is
best-effort: errors are raised to the caller, never retried here.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..config import SMSSettings, get_settings
from ...exceptions import NotificationError
from .messaging_provider import MessagingProvider, TwilioProvider

logger = logging.getLogger(__name__)

MESSAGE_TEMPLATE = "{name} rated your product a {rating} star"


@dataclass(frozen=True)
class NotificationResult:
    """Outcome of one dispatch attempt. Only used for logging."""
    sent: bool
    message_id: str = ""
    error: Optional[NotificationError] = None


class NotificationDispatcher:
    """
    Sends the fixed review alert to the configured recipient.

    USAGE:
        dispatcher = NotificationDispatcher.from_settings(get_settings().sms)
        dispatcher.notify("Ana", 5)
    """

    def __init__(self, provider: MessagingProvider, recipient: str):
        self._provider = provider
        self._recipient = recipient

    @classmethod
    def from_settings(cls, settings: Optional[SMSSettings] = None) -> "NotificationDispatcher":
        settings = settings or get_settings().sms
        return cls(TwilioProvider.from_settings(settings), settings.to_number)

    def notify(self, name: str, rating: int) -> str:
        """
        Send "<name> rated your product a <rating> star".

        Raises:
            NotificationError: any provider or transport failure.
        """
        return self._provider.send_message(
            self._recipient,
            MESSAGE_TEMPLATE.format(name=name, rating=rating)
        )

    def try_notify(self, name: str, rating: int) -> NotificationResult:
        """
        Like notify(), but captures the failure instead of raising.

        Any provider exception counts as a failed delivery, since providers
        are swappable and may not raise NotificationError.
        """
        try:
            message_id = self.notify(name, rating)
        except NotificationError as e:
            return NotificationResult(sent=False, error=e)
        except Exception as e:
            logger.exception(f"Messaging provider failed unexpectedly: {e}")
            error = NotificationError(f"{type(e).__name__}: {e}")
            error.__cause__ = e
            return NotificationResult(sent=False, error=error)
        return NotificationResult(sent=True, message_id=message_id)
