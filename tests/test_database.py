"""Tests for the SQLite review store."""

import pytest

from review_relay.exceptions import PersistenceError
from review_relay.infrastructure.persistence import Database, Review
from tests.helpers import fetch_reviews


def test_add_review_returns_stored_record(db):
    review = db.add_review("Ana", 5, "Great product")

    assert isinstance(review, Review)
    assert review.name == "Ana"
    assert review.rating == 5
    assert review.description == "Great product"
    assert fetch_reviews(db) == [(review.id, "Ana", 5, "Great product")]


def test_ids_are_unique_and_increasing(db):
    ids = [db.add_review(f"user{i}", i + 1, "text").id for i in range(3)]

    assert ids == sorted(ids)
    assert len(set(ids)) == 3


def test_init_is_idempotent(db):
    db.add_review("Ana", 5, "Great product")
    db.init()

    assert len(fetch_reviews(db)) == 1


def test_missing_table_raises_persistence_error(tmp_path):
    database = Database(str(tmp_path / "empty.db"))

    with pytest.raises(PersistenceError):
        database.add_review("Ana", 5, "Great product")


def test_unopenable_database_raises_persistence_error(tmp_path):
    database = Database(str(tmp_path / "missing-dir" / "reviews.db"))

    with pytest.raises(PersistenceError):
        database.init()
