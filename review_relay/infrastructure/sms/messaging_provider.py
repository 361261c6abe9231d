"""
Messaging Provider - Abstraction Layer for SMS Messaging
=========================================================

Provides a unified interface for sending text messages.
Currently supports the Twilio REST API.

USAGE:
    provider = TwilioProvider(account_sid="AC...", auth_token="...", from_number="+15550001111")
    provider.send_message("+15552223333", "Hello!")
"""

import logging
from abc import ABC, abstractmethod

import requests

from ..config import SMSSettings
from ...exceptions import NotificationError

logger = logging.getLogger(__name__)


class MessagingProvider(ABC):
    """
    Abstract base class for messaging providers.
    Implement this interface to add new messaging backends.
    """

    @abstractmethod
    def send_message(self, phone: str, text: str) -> str:
        """
        Send a text message to a phone number.

        Returns:
            Provider message id.

        Raises:
            NotificationError: if the message was not accepted.
        """
        ...


class TwilioProvider(MessagingProvider):
    """Sends SMS through Twilio's Messages resource."""

    DEFAULT_API_URL = "https://api.twilio.com/2010-04-01"

    def __init__(
        self,
        account_sid: str = "",
        auth_token: str = "",
        from_number: str = "",
        api_url: str = "",
        timeout: int = 10,
    ):
        self._account_sid = account_sid
        self._auth_token = auth_token
        self._from_number = from_number
        self._api_url = api_url or self.DEFAULT_API_URL
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: SMSSettings) -> "TwilioProvider":
        return cls(
            account_sid=settings.account_sid,
            auth_token=settings.auth_token,
            from_number=settings.from_number,
            api_url=settings.api_url,
            timeout=settings.timeout_seconds,
        )

    def send_message(self, phone: str, text: str) -> str:
        if not self._account_sid or not self._auth_token or not self._from_number:
            raise NotificationError("Twilio credentials or sender number not configured")
        if not phone:
            raise NotificationError("recipient phone number not configured")

        try:
            response = requests.post(
                f"{self._api_url}/Accounts/{self._account_sid}/Messages.json",
                auth=(self._account_sid, self._auth_token),
                data={"To": phone, "From": self._from_number, "Body": text},
                timeout=self._timeout,
            )
        except requests.Timeout as e:
            raise NotificationError(f"Twilio API timeout after {self._timeout}s") from e
        except requests.RequestException as e:
            raise NotificationError(f"Twilio API error: {e}") from e

        if not response.ok:
            raise NotificationError(
                f"Twilio API returned {response.status_code}: {self._error_message(response)}"
            )

        try:
            return response.json().get("sid", "")
        except (ValueError, AttributeError, TypeError):
            logger.warning("Twilio accepted the message but returned an unexpected body")
            return ""

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Extract Twilio's error message, falling back to the raw body."""
        try:
            return response.json().get("message") or response.text
        except (ValueError, AttributeError, TypeError):
            return response.text
