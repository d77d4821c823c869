"""
SQLAlchemy unit of work.
"""

from sqlalchemy.orm import Session

from hourbook.domain.repositories.unit_of_work import UnitOfWork


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Commits or rolls back the request-scoped session."""

    def __init__(self, session: Session):
        self.session = session

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
