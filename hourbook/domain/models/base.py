"""
Base entity and value objects for the domain layer.
This module contains the foundational classes for all domain entities.
"""

from datetime import datetime
from typing import Optional, Any
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import re


@dataclass
class BaseEntity(ABC):
    """
    Base class for all domain entities.
    Provides common attributes and behavior for all entities.
    """

    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        """Initialize entity after creation."""
        if self.created_at is None:
            self.created_at = datetime.utcnow()
        if self.updated_at is None:
            self.updated_at = datetime.utcnow()

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and are of the same type."""
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        if self.id is None:
            return hash(id(self))
        return hash((self.__class__.__name__, self.id))

    def mark_as_updated(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = datetime.utcnow()

    @property
    def is_new(self) -> bool:
        """Check if entity is new (not persisted)."""
        return self.id is None

    def validate(self) -> None:
        """
        Validate the entity's state.
        Should be overridden by subclasses to implement specific validation rules.
        Raises ValidationError if the entity is in an invalid state.
        """
        pass


@dataclass
class AggregateRoot(BaseEntity):
    """
    Base class for aggregate roots.
    Every aggregate is owned by exactly one user and carries a version
    number used as its optimistic concurrency token.
    """

    owner_id: str = ""
    version: int = field(default=1)


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when entity validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class BusinessRuleViolation(DomainException):
    """Exception raised when a business rule is violated."""

    def __init__(self, message: str):
        super().__init__(message, "BUSINESS_RULE_VIOLATION")


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, "ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class DuplicateEntityError(DomainException):
    """Exception raised when trying to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: Any):
        message = f"{entity_type} with {field}='{value}' already exists"
        super().__init__(message, "DUPLICATE_ENTITY")
        self.entity_type = entity_type
        self.field = field
        self.value = value


class ForbiddenError(DomainException):
    """Exception raised when a payload claims an owner other than the caller."""

    def __init__(self, message: str = "You are not allowed to modify this resource"):
        super().__init__(message, "FORBIDDEN")


class ConcurrencyConflictError(DomainException):
    """Exception raised when a row was modified by someone else since it was read."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with id {entity_id} was modified by another request"
        super().__init__(message, "CONCURRENCY_CONFLICT")
        self.entity_type = entity_type
        self.entity_id = entity_id


class DeleteBlockedError(DomainException):
    """Exception raised when dependent rows prevent a delete."""

    def __init__(self, message: str):
        super().__init__(message, "DELETE_BLOCKED")


class ExternalServiceError(DomainException):
    """Exception raised when an external collaborator fails."""

    def __init__(self, message: str, code: str = "EXTERNAL_SERVICE_ERROR"):
        super().__init__(message, code)


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.
    Value objects are immutable and are compared by their values.
    """

    def __post_init__(self):
        """Validate value object after creation."""
        self.validate()

    @abstractmethod
    def validate(self) -> None:
        """Validate the value object's state."""
        pass


# Common value objects

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class Email(ValueObject):
    """Email value object with validation."""

    value: str

    def validate(self) -> None:
        """Validate email format."""
        if not self.value:
            raise ValidationError("Email cannot be empty", "email")

        if not EMAIL_PATTERN.match(self.value):
            raise ValidationError(f"Invalid email format: {self.value}", "email")

        if len(self.value) > 256:
            raise ValidationError("Email too long (max 256 characters)", "email")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class InvoiceNumber(ValueObject):
    """Invoice number of the form ``{prefix}-{year}-{sequence:03d}``."""

    prefix: str
    year: int
    sequence: int

    def validate(self) -> None:
        """Validate invoice number parts."""
        if self.sequence <= 0:
            raise ValidationError("Invoice sequence must be positive", "invoice_number")

        if not self.prefix or len(self.prefix) > 10:
            raise ValidationError("Invoice prefix must be 1-10 characters", "invoice_number")

    def __str__(self) -> str:
        return f"{self.prefix}-{self.year}-{self.sequence:03d}"

    @staticmethod
    def year_prefix(prefix: str, year: int) -> str:
        """The shared prefix of every number issued in a year."""
        return f"{prefix}-{year}-"

    @classmethod
    def first(cls, prefix: str, year: int) -> 'InvoiceNumber':
        """First number of a year."""
        return cls(prefix, year, 1)

    def next(self) -> 'InvoiceNumber':
        """Get the next invoice number in sequence."""
        return InvoiceNumber(self.prefix, self.year, self.sequence + 1)


def require_text(value: Optional[str], field_name: str, label: str, max_length: int) -> str:
    """Strip a required text field and enforce its length."""
    if not value or not value.strip():
        raise ValidationError(f"{label} is required", field_name)
    value = value.strip()
    if len(value) > max_length:
        raise ValidationError(f"{label} cannot exceed {max_length} characters", field_name)
    return value


def optional_text(value: Optional[str], field_name: str, label: str, max_length: int) -> Optional[str]:
    """Strip an optional text field, turning blanks into None, and enforce its length."""
    if value is None or not value.strip():
        return None
    value = value.strip()
    if len(value) > max_length:
        raise ValidationError(f"{label} cannot exceed {max_length} characters", field_name)
    return value
