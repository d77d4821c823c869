"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TypeVar, Generic
from dataclasses import dataclass
from datetime import datetime

from hourbook.domain.models.base import (
    DomainException,
    ValidationError,
    BusinessRuleViolation,
    ForbiddenError,
)
from hourbook.domain.repositories.unit_of_work import UnitOfWork


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success_result(cls, data: T, metadata: Optional[Dict[str, Any]] = None) -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def error_result(
        cls,
        error: str,
        error_code: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "UseCaseResult[T]":
        """Create an error result."""
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            metadata=metadata
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> "UseCaseResult[T]":
        """Create error result from exception. Non-domain errors never leak their message."""
        if isinstance(exc, ValidationError):
            return cls.error_result(exc.message, "VALIDATION_ERROR")
        elif isinstance(exc, BusinessRuleViolation):
            return cls.error_result(exc.message, "BUSINESS_RULE_VIOLATION")
        elif isinstance(exc, DomainException):
            return cls.error_result(exc.message, exc.code)
        else:
            return cls.error_result(INTERNAL_ERROR_MESSAGE, "INTERNAL_ERROR")


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Provides common structure and error handling.
    """

    def __init__(self):
        self.execution_start: Optional[datetime] = None
        self.execution_end: Optional[datetime] = None
        self.current_user_id: Optional[str] = None

    async def execute(self, request: T) -> UseCaseResult[R]:
        """
        Execute the use case with proper error handling and logging.
        """
        self.execution_start = datetime.utcnow()

        try:
            await self._validate_request(request)

            result = await self._execute_business_logic(request)

            self.execution_end = datetime.utcnow()
            execution_time = (self.execution_end - self.execution_start).total_seconds()

            return UseCaseResult.success_result(
                result,
                metadata={
                    "execution_time_seconds": execution_time,
                    "executed_at": self.execution_end.isoformat()
                }
            )

        except Exception as exc:
            self.execution_end = datetime.utcnow()
            execution_time = (self.execution_end - self.execution_start).total_seconds()

            if not isinstance(exc, DomainException):
                logger.exception(
                    f"Unexpected error in {type(self).__name__} "
                    f"(user={self.current_user_id}, entity={self._entity_id(request)})"
                )

            error_result = UseCaseResult.from_exception(exc)
            error_result.metadata = {
                "execution_time_seconds": execution_time,
                "failed_at": self.execution_end.isoformat(),
                "exception_type": type(exc).__name__
            }

            return error_result

    @staticmethod
    def _entity_id(request: Any) -> Any:
        if isinstance(request, int):
            return request
        return getattr(request, "id", None)

    async def _validate_request(self, request: T) -> None:
        """
        Validate the request. Override in subclasses if needed.
        """
        pass

    @abstractmethod
    async def _execute_business_logic(self, request: T) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class QueryUseCase(BaseUseCase[T, R]):
    """
    Base class for query use cases (read operations).
    """
    pass


class CommandUseCase(BaseUseCase[T, R]):
    """
    Base class for command use cases (write operations).
    Commits the unit of work on success and rolls it back on any failure.
    """

    unit_of_work: Optional[UnitOfWork] = None

    async def _execute_business_logic(self, request: T) -> R:
        """
        Execute command with transaction handling.
        """
        try:
            result = await self._execute_command_logic(request)
            if self.unit_of_work is not None:
                self.unit_of_work.commit()
            return result

        except Exception:
            if self.unit_of_work is not None:
                self.unit_of_work.rollback()
            raise

    @abstractmethod
    async def _execute_command_logic(self, request: T) -> R:
        """Execute the command logic. Must be implemented by subclasses."""
        pass


# Specific use case patterns
class CreateUseCase(CommandUseCase[T, R]):
    """Base class for entity creation use cases."""
    pass


class UpdateUseCase(CommandUseCase[T, R]):
    """Base class for entity update use cases."""
    pass


class DeleteUseCase(CommandUseCase[T, R]):
    """Base class for entity deletion use cases."""
    pass


class GetByIdUseCase(QueryUseCase[T, R]):
    """Base class for get-by-id use cases."""

    async def _validate_request(self, request: T) -> None:
        """Validate get-by-id request."""
        await super()._validate_request(request)

        entity_id = self._entity_id(request)
        if entity_id is not None and entity_id <= 0:
            raise ValidationError("ID must be positive")


class ListUseCase(QueryUseCase[T, R]):
    """Base class for list use cases."""
    pass


# Authorization mixin
class AuthorizedUseCase(BaseUseCase[T, R]):
    """
    Mixin for use cases that act on behalf of an authenticated owner.
    """

    def set_current_user(self, user_id: str) -> "AuthorizedUseCase[T, R]":
        """Set the current user context."""
        self.current_user_id = user_id
        return self

    async def _validate_request(self, request: T) -> None:
        """Validate request with authorization check."""
        await super()._validate_request(request)

        if not self.current_user_id:
            raise ValidationError("User authentication required")

        await self._check_authorization(request)

    async def _check_authorization(self, request: T) -> None:
        """Reject payloads that name a different owner before anything is touched."""
        claimed_owner = getattr(request, "owner_id", None)
        if claimed_owner is not None:
            self._require_owner(claimed_owner)

    def _require_owner(self, resource_owner_id: str) -> None:
        """Check that the current user is the owner."""
        if self.current_user_id != resource_owner_id:
            raise ForbiddenError()
