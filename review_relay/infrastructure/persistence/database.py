"""
SQLite Database Repository - Review Persistence
================================================

Append-only store for submitted reviews. Each operation opens its own
connection, so concurrent requests rely on SQLite's write locking rather
than on any locking in the caller.
"""

import sqlite3
import logging
from dataclasses import dataclass
from contextlib import contextmanager

from ...exceptions import PersistenceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Review:
    """Review record from database."""
    id: int
    name: str
    rating: int
    description: str


class Database:
    """
    SQLite database for Review Relay.

    Usage:
        db = Database("reviews.db")
        db.init()

        review = db.add_review(name="Ana", rating=5, description="Great product")
        print(review.id)
    """

    def __init__(self, db_path: str, timeout: float = 5.0):
        self.db_path = db_path
        self._timeout = timeout

    @contextmanager
    def _get_connection(self):
        """Get database connection with context manager."""
        conn = sqlite3.connect(self.db_path, timeout=self._timeout)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def init(self):
        """Initialize database tables. Safe to call more than once."""
        try:
            with self._get_connection() as conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS reviews (
                        id INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT,
                        name TEXT,
                        rating INTEGER,
                        description TEXT
                    )
                """)
        except sqlite3.Error as e:
            raise PersistenceError(f"Could not initialize {self.db_path}: {e}") from e

        logger.info(f"Database initialized: {self.db_path}")

    def add_review(self, name: str, rating: int, description: str) -> Review:
        """
        Insert a new review.

        Returns:
            The stored Review, with the id assigned by SQLite.

        Raises:
            PersistenceError: if the insert fails.
        """
        try:
            with self._get_connection() as conn:
                cursor = conn.execute(
                    "INSERT INTO reviews (name, rating, description) VALUES (?, ?, ?)",
                    (name, rating, description)
                )
                review_id = cursor.lastrowid
        except sqlite3.Error as e:
            raise PersistenceError(str(e)) from e

        return Review(id=review_id, name=name, rating=rating, description=description)
