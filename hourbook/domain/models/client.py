"""
Client domain model.
Represents a billable party owned by a single user.
"""

from dataclasses import dataclass
from typing import Optional

from hourbook.domain.models.base import (
    AggregateRoot,
    Email,
    ValidationError,
    BusinessRuleViolation,
    require_text,
    optional_text,
)


@dataclass
class Client(AggregateRoot):
    """
    Client aggregate root.
    Names are unique per owner, compared case-insensitively by the repository.
    """

    name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    is_active: bool = True

    # Read-side statistic, filled by list queries
    project_count: int = 0

    def __post_init__(self):
        """Initialize client after creation."""
        super().__post_init__()
        self.validate()

    def validate(self) -> None:
        """Validate client state."""
        if not self.owner_id:
            raise ValidationError("Owner ID is required", "owner_id")

        self.name = require_text(self.name, "name", "Client name", 200)
        self.email = optional_text(self.email, "email", "Email", 256)
        if self.email:
            Email(self.email)
        self.phone = optional_text(self.phone, "phone", "Phone", 20)
        self.address = optional_text(self.address, "address", "Address", 500)
        self.notes = optional_text(self.notes, "notes", "Notes", 1000)

    @classmethod
    def create(
        cls,
        owner_id: str,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> "Client":
        """Create a new active client."""
        return cls(
            owner_id=owner_id,
            name=name,
            email=email,
            phone=phone,
            address=address,
            notes=notes,
            is_active=True,
        )

    def update_info(
        self,
        name: str,
        email: Optional[str],
        phone: Optional[str],
        address: Optional[str],
        notes: Optional[str],
        is_active: Optional[bool] = None,
    ) -> None:
        """Replace the editable client fields."""
        self.name = name
        self.email = email
        self.phone = phone
        self.address = address
        self.notes = notes
        if is_active is not None:
            self.is_active = is_active

        self.validate()
        self.mark_as_updated()

    def deactivate(self) -> None:
        """Soft-delete the client."""
        if not self.is_active:
            raise BusinessRuleViolation("Client is already inactive")
        self.is_active = False
        self.mark_as_updated()

    def reactivate(self) -> None:
        """Bring a deactivated client back."""
        if self.is_active:
            raise BusinessRuleViolation("Client is already active")
        self.is_active = True
        self.mark_as_updated()

    def ensure_can_be_billed(self) -> None:
        """Projects and invoices may only reference active clients."""
        if not self.is_active:
            raise ValidationError("Please select an active client", "client_id")
