"""Tests for the Twilio provider and the notification dispatcher."""

import pytest
import requests
from unittest.mock import Mock, patch

from review_relay.exceptions import NotificationError
from review_relay.infrastructure.config import SMSSettings
from review_relay.infrastructure.sms import NotificationDispatcher, TwilioProvider
from tests.helpers import OWNER_PHONE

POST = "review_relay.infrastructure.sms.messaging_provider.requests.post"


def twilio_response(status_code=201, body=None):
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = body if body is not None else {"sid": "SM123"}
    response.text = str(body)
    return response


@pytest.fixture
def twilio():
    return TwilioProvider(account_sid="AC123", auth_token="secret", from_number="+15550001111")


class TestNotificationDispatcher:

    def test_notify_formats_message(self, dispatcher, provider):
        dispatcher.notify("Ana", 5)

        provider.send_message.assert_called_once_with(OWNER_PHONE, "Ana rated your product a 5 star")

    def test_notify_propagates_provider_error(self, dispatcher, provider):
        provider.send_message.side_effect = NotificationError("boom")

        with pytest.raises(NotificationError):
            dispatcher.notify("Ana", 5)

    def test_try_notify_captures_error(self, dispatcher, provider):
        provider.send_message.side_effect = NotificationError("boom")

        result = dispatcher.try_notify("Ana", 5)

        assert result.sent is False
        assert str(result.error) == "boom"

    def test_try_notify_success(self, dispatcher):
        result = dispatcher.try_notify("Ana", 5)

        assert result.sent is True
        assert result.message_id == "SM123"
        assert result.error is None

    def test_try_notify_captures_unexpected_provider_exception(self, dispatcher, provider):
        provider.send_message.side_effect = AttributeError("'list' object has no attribute 'get'")

        result = dispatcher.try_notify("Ana", 5)

        assert result.sent is False
        assert isinstance(result.error, NotificationError)
        assert "AttributeError" in str(result.error)

    def test_from_settings_without_credentials_fails_on_send(self):
        dispatcher = NotificationDispatcher.from_settings(
            SMSSettings(account_sid="", auth_token="", from_number="", to_number="")
        )

        with patch(POST) as post:
            result = dispatcher.try_notify("Ana", 5)

        assert result.sent is False
        post.assert_not_called()


class TestTwilioProvider:

    def test_send_message_posts_to_messages_resource(self, twilio):
        with patch(POST, return_value=twilio_response()) as post:
            sid = twilio.send_message(OWNER_PHONE, "hello")

        assert sid == "SM123"
        args, kwargs = post.call_args
        assert args[0] == "https://api.twilio.com/2010-04-01/Accounts/AC123/Messages.json"
        assert kwargs["auth"] == ("AC123", "secret")
        assert kwargs["data"] == {"To": OWNER_PHONE, "From": "+15550001111", "Body": "hello"}

    def test_error_status_raises_with_twilio_message(self, twilio):
        response = twilio_response(400, {"code": 21211, "message": "Invalid 'To' Phone Number"})

        with patch(POST, return_value=response):
            with pytest.raises(NotificationError, match="Invalid 'To' Phone Number"):
                twilio.send_message("not-a-number", "hello")

    def test_transport_error_raises(self, twilio):
        with patch(POST, side_effect=requests.ConnectionError("refused")):
            with pytest.raises(NotificationError):
                twilio.send_message(OWNER_PHONE, "hello")

    def test_missing_recipient_raises(self, twilio):
        with patch(POST) as post:
            with pytest.raises(NotificationError, match="recipient"):
                twilio.send_message("", "hello")

        post.assert_not_called()

    def test_timeout_raises(self, twilio):
        with patch(POST, side_effect=requests.Timeout()):
            with pytest.raises(NotificationError, match="timeout"):
                twilio.send_message(OWNER_PHONE, "hello")

    @pytest.mark.parametrize("body", [["queued"], "queued", None])
    def test_accepted_message_with_unexpected_body(self, twilio, body):
        response = twilio_response(201)
        response.json.return_value = body

        with patch(POST, return_value=response):
            assert twilio.send_message(OWNER_PHONE, "hello") == ""

    def test_error_status_with_non_object_body(self, twilio):
        response = twilio_response(500)
        response.json.return_value = ["oops"]
        response.text = "oops"

        with patch(POST, return_value=response):
            with pytest.raises(NotificationError, match="500: oops"):
                twilio.send_message(OWNER_PHONE, "hello")
