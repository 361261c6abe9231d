from .messaging_provider import MessagingProvider, TwilioProvider
from .notifier import NotificationDispatcher, NotificationResult, MESSAGE_TEMPLATE

__all__ = [
    "MessagingProvider",
    "TwilioProvider",
    "NotificationDispatcher",
    "NotificationResult",
    "MESSAGE_TEMPLATE",
]
