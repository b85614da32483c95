"""
Generic Repository Module

CRUD adapter over a SQLAlchemy session, shared by every entity repository.
Subclasses only bind ``model``:

    class FeedbackRepository(BaseRepository[Feedback]):
        model = Feedback

Every operation returns an ``Ok``/``Err`` result instead of raising. Store
faults (``SQLAlchemyError``) roll the session back and surface as ``Err`` with
the fault's message.
"""

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from feedback_service.utils.result import Err, Ok, Result

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

NOT_FOUND = "Not found"


class BaseRepository(Generic[ModelT]):
    model: Type[ModelT]

    def __init__(self, session: Session):
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def add(self, entity: ModelT) -> Result[None]:
        """Insert a new row. The entity's shape is not validated here."""
        try:
            self._session.add(entity)
            self._session.commit()
            return Ok()
        except SQLAlchemyError as e:
            return self._fail("add", e)

    def update(self, entity: ModelT) -> Result[None]:
        """Copy the entity's current values onto the stored row with the same primary key."""
        try:
            if self._get_by_identity(entity) is None:
                return Err(NOT_FOUND)
            self._session.merge(entity)
            self._session.commit()
            return Ok()
        except SQLAlchemyError as e:
            return self._fail("update", e)

    def delete(self, entity: ModelT) -> Result[None]:
        try:
            stored = self._get_by_identity(entity)
            if stored is None:
                return Err(NOT_FOUND)
            self._session.delete(stored)
            self._session.commit()
            return Ok()
        except SQLAlchemyError as e:
            return self._fail("delete", e)

    def get_all(self) -> Result[List[ModelT]]:
        try:
            return Ok(list(self._session.scalars(select(self.model)).all()))
        except SQLAlchemyError as e:
            return self._fail("get_all", e)

    def get(self, *criteria: Any, **filters: Any) -> Result[ModelT]:
        """
        First row matching the criteria.

        A query with no match is reported as ``Err("Not found")``, the same
        shape as a failed query. Use ``find`` to tell the two apart.
        """
        found = self.find(*criteria, **filters)
        if found.success and found.result is None:
            return Err(NOT_FOUND)
        return found

    def find(self, *criteria: Any, **filters: Any) -> Result[Optional[ModelT]]:
        """First row matching the criteria, or ``Ok(None)`` when nothing matches."""
        try:
            stmt = select(self.model).where(*criteria).filter_by(**filters).limit(1)
            return Ok(self._session.scalars(stmt).first())
        except SQLAlchemyError as e:
            return self._fail("find", e)

    def already_exists(self, *criteria: Any, **filters: Any) -> Result[None]:
        """
        ``Ok()`` when at least one row matches, ``Err()`` with no message when none does.

        Here ``success`` means "exists". A store fault still carries its message.
        """
        try:
            stmt = select(self.model).where(*criteria).filter_by(**filters).limit(1)
            if self._session.scalars(stmt).first() is not None:
                return Ok()
            return Err()
        except SQLAlchemyError as e:
            return self._fail("already_exists", e)

    def _get_by_identity(self, entity: ModelT) -> Optional[ModelT]:
        mapper = inspect(self.model)
        identity = mapper.primary_key_from_instance(entity)
        if any(value is None for value in identity):
            return None
        key = identity[0] if len(identity) == 1 else tuple(identity)
        return self._session.get(self.model, key)

    def _fail(self, operation: str, exc: SQLAlchemyError) -> Err:
        self._session.rollback()
        logger.error(f"{self.model.__name__} {operation} failed: {exc}")
        return Err(str(exc) or exc.__class__.__name__)
