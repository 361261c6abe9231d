from .database import Database, Review

__all__ = ["Database", "Review"]
