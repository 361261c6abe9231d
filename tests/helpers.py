import sqlite3

from review_relay.infrastructure.persistence import Database

OWNER_PHONE = "+15550009999"


def fetch_reviews(database: Database) -> list:
    """All stored rows as (id, name, rating, description) tuples."""
    conn = sqlite3.connect(database.db_path)
    try:
        return conn.execute(
            "SELECT id, name, rating, description FROM reviews ORDER BY id"
        ).fetchall()
    finally:
        conn.close()
