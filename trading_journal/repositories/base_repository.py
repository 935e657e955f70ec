"""
Base Repository - shared repository base class

Common session handling and CRUD used by every repository.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from trading_journal.database import Base

# Generic type for model
T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """Repository base class with generic CRUD operations"""

    def __init__(self, session: Session, model_class: Type[T]):
        """
        Args:
            session: SQLAlchemy Session
            model_class: mapped model class
        """
        self.session = session
        self.model_class = model_class

    def find_by_id(self, id_value: Any) -> Optional[T]:
        """
        Look up a single row by primary key

        Returns:
            Model instance or None
        """
        return self.session.get(self.model_class, id_value)

    def save(self, entity: T) -> T:
        """
        Add a row (insert or update)

        Flushes so the primary key is assigned, without committing.
        """
        self.session.add(entity)
        self.session.flush()
        return entity

    def count(self) -> int:
        stmt = select(func.count()).select_from(self.model_class)
        return self.session.execute(stmt).scalar() or 0

    def refresh(self, entity: T) -> T:
        """Reload column values from the database"""
        self.session.refresh(entity)
        return entity

    def commit(self) -> None:
        """Commit the current transaction"""
        self.session.commit()

    def rollback(self) -> None:
        """Roll back the current transaction"""
        self.session.rollback()
