"""
Base repository interface for data access layer.
This follows the Repository pattern to separate loading logic from data access.
"""

import logging
from typing import Generic, TypeVar, Type
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from abc import ABC

from app.exceptions import PersistenceError

ModelType = TypeVar("ModelType")

logger = logging.getLogger("chipotle.database")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing the shared transaction handling.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def count(self) -> int:
        """Count rows of the repository's table"""
        return self.db.query(self.model).count()

    def commit(self, action: str):
        """
        Commit the session's pending work as one transaction.

        Rolls back and raises PersistenceError if the database rejects it.

        Args:
            action: What was being written, used in the error message
        """
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise PersistenceError(
                f"error {action}: {exc}", details={"table": self._table_name()}
            ) from exc

    def flush(self, action: str):
        """Flush pending rows so generated ids are available"""
        try:
            self.db.flush()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise PersistenceError(
                f"error {action}: {exc}", details={"table": self._table_name()}
            ) from exc

    def _table_name(self) -> str:
        return getattr(self.model, "__tablename__", self.model.__name__)
