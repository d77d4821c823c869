"""
Shared SQLAlchemy repository behavior.
Owner-scoped loading, version checks and translation of flush failures.
"""

import logging
from typing import Any, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from hourbook.domain.models.base import (
    EntityNotFoundError,
    DuplicateEntityError,
    ConcurrencyConflictError,
)


logger = logging.getLogger(__name__)


class SQLAlchemyRepository:
    """Base class for owner-scoped repositories over one mapped model."""

    model: Any = None
    entity_type: str = "Entity"

    def __init__(self, session: Session):
        self.session = session

    def _owned_query(self, owner_id: str):
        return self.session.query(self.model).filter(self.model.owner_id == owner_id)

    def _get_owned_model(self, owner_id: str, entity_id: int):
        return self._owned_query(owner_id).filter(self.model.id == entity_id).first()

    def _exists(self, owner_id: str, entity_id: int) -> bool:
        return self.session.query(
            self._owned_query(owner_id).filter(self.model.id == entity_id).exists()
        ).scalar()

    def _load_for_update(self, owner_id: str, entity_id: int, expected_version: Optional[int]):
        """Load an owned row, failing when it is gone or its version moved on."""
        model = self._get_owned_model(owner_id, entity_id)
        if model is None:
            raise EntityNotFoundError(self.entity_type, entity_id)
        if expected_version is not None and model.version != expected_version:
            raise ConcurrencyConflictError(self.entity_type, entity_id)
        return model

    def _flush(self, owner_id: str, entity_id: Optional[int], unique: Optional[Tuple[str, Any]] = None) -> None:
        """
        Flush pending changes.

        A unique index violation becomes DuplicateEntityError. A stale version
        re-checks existence to tell a vanished row from a concurrent edit.
        Either way the session is rolled back.
        """
        try:
            self.session.flush()
        except IntegrityError:
            self.session.rollback()
            if unique is None:
                raise
            field, value = unique
            logger.info(f"{self.entity_type} {field}={value!r} rejected by unique index for owner {owner_id}")
            raise DuplicateEntityError(self.entity_type, field, value)
        except StaleDataError:
            self.session.rollback()
            if entity_id is not None and self._exists(owner_id, entity_id):
                logger.info(f"Concurrent update detected on {self.entity_type} {entity_id}")
                raise ConcurrencyConflictError(self.entity_type, entity_id)
            raise EntityNotFoundError(self.entity_type, entity_id)

        # relationships follow foreign keys changed in this flush
        self.session.expire_all()

    def delete(self, owner_id: str, entity_id: int) -> bool:
        """Delete an owned row. Returns False when it does not exist."""
        model = self._get_owned_model(owner_id, entity_id)
        if model is None:
            return False

        self.session.delete(model)
        self._flush(owner_id, entity_id)
        return True
