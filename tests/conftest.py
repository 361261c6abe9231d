"""
Shared fixtures.

Classifier and messaging provider are mocked so no test talks to Gemini
or Twilio; the store is a real SQLite file in a temp directory.
"""

import pytest
from unittest.mock import Mock

from fastapi.testclient import TestClient

from review_relay.application import ReviewSubmissionHandler
from review_relay.infrastructure.persistence import Database
from review_relay.infrastructure.sms import MessagingProvider, NotificationDispatcher
from review_relay.web.app import create_app
from tests.helpers import OWNER_PHONE


@pytest.fixture
def db(tmp_path):
    """Initialized review store backed by a temp file."""
    database = Database(str(tmp_path / "reviews.db"))
    database.init()
    return database


@pytest.fixture
def classifier():
    mock = Mock(spec=["classify"])
    mock.classify.return_value = "Positive"
    return mock


@pytest.fixture
def provider():
    mock = Mock(spec=MessagingProvider)
    mock.send_message.return_value = "SM123"
    return mock


@pytest.fixture
def dispatcher(provider):
    return NotificationDispatcher(provider, OWNER_PHONE)


@pytest.fixture
def handler(classifier, db, dispatcher):
    return ReviewSubmissionHandler(classifier, db, dispatcher)


@pytest.fixture
def client(handler):
    return TestClient(create_app(handler))

