"""
User domain model.
Profile of the authenticated principal that owns every other aggregate.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from hourbook.domain.models.base import (
    ValidationError,
    require_text,
    optional_text,
)


DEFAULT_FIRST_NAME = "User"


@dataclass
class UserProfile:
    """
    User profile.
    The id is the identity provider's subject claim, so it is assigned
    before the profile is ever persisted.
    """

    id: str
    first_name: str = DEFAULT_FIRST_NAME
    last_name: Optional[str] = None
    company_name: Optional[str] = None
    address: Optional[str] = None
    version: int = 1
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Validate profile fields."""
        if not self.id:
            raise ValidationError("User ID is required", "id")
        self.first_name = require_text(self.first_name, "first_name", "First name", 100)
        self.last_name = optional_text(self.last_name, "last_name", "Last name", 100)
        self.company_name = optional_text(self.company_name, "company_name", "Company name", 200)
        self.address = optional_text(self.address, "address", "Address", 500)

    @property
    def full_name(self) -> str:
        """First and last name joined."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def update_profile(
        self,
        first_name: str,
        last_name: Optional[str],
        company_name: Optional[str],
        address: Optional[str],
    ) -> None:
        """Replace the editable profile fields."""
        self.first_name = first_name
        self.last_name = last_name
        self.company_name = company_name
        self.address = address
        self.validate()
        self.updated_at = datetime.utcnow()
