"""
Domain models for Hourbook.
This module exports all domain entities and value objects.
"""

# Base classes
from .base import (
    BaseEntity,
    AggregateRoot,
    DomainException,
    ValidationError,
    BusinessRuleViolation,
    EntityNotFoundError,
    DuplicateEntityError,
    ForbiddenError,
    ConcurrencyConflictError,
    DeleteBlockedError,
    ExternalServiceError,
    ValueObject,
    Email,
    InvoiceNumber,
)

# Domain entities
from .user import UserProfile
from .client import Client
from .project import Project, ProjectStatus
from .time_entry import TimeEntry
from .invoice import Invoice

__all__ = [
    "BaseEntity",
    "AggregateRoot",
    "DomainException",
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "ForbiddenError",
    "ConcurrencyConflictError",
    "DeleteBlockedError",
    "ExternalServiceError",
    "ValueObject",
    "Email",
    "InvoiceNumber",
    "UserProfile",
    "Client",
    "Project",
    "ProjectStatus",
    "TimeEntry",
    "Invoice",
]
