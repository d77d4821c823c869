"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

from datetime import datetime

from sqlalchemy import (
    Column, Integer, String, DateTime, Text, Boolean,
    Numeric, Date, ForeignKey, Enum as SQLEnum,
    Index, UniqueConstraint, CheckConstraint, Table
)
from sqlalchemy.orm import relationship

from hourbook.domain.models.project import ProjectStatus
from .database import Base


# Association table for invoice <-> time entry links
invoice_time_entries = Table(
    'invoice_time_entries',
    Base.metadata,
    Column('invoice_id', Integer, ForeignKey('invoices.id', ondelete='CASCADE'), primary_key=True),
    Column('time_entry_id', Integer, ForeignKey('time_entries.id', ondelete='CASCADE'), primary_key=True),
)


class UserProfileModel(Base):
    """User profile table, keyed by the identity provider's subject id."""
    __tablename__ = 'user_profiles'

    id = Column(String(450), primary_key=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100))
    company_name = Column(String(200))
    address = Column(String(500))
    version = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    # Relationships
    owned_clients = relationship("ClientModel", back_populates="owner")
    owned_projects = relationship("ProjectModel", back_populates="owner")
    time_entries = relationship("TimeEntryModel", back_populates="owner")
    owned_invoices = relationship("InvoiceModel", back_populates="owner")

    __mapper_args__ = {"version_id_col": version}


class ClientModel(Base):
    """Client table"""
    __tablename__ = 'clients'

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(String(450), ForeignKey('user_profiles.id'), nullable=False)
    name = Column(String(200), nullable=False)
    email = Column(String(256))
    phone = Column(String(20))
    address = Column(String(500))
    notes = Column(String(1000))
    is_active = Column(Boolean, nullable=False, default=True)
    version = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    # Relationships
    owner = relationship("UserProfileModel", back_populates="owned_clients")
    projects = relationship("ProjectModel", back_populates="client")
    invoices = relationship("InvoiceModel", back_populates="client")

    __table_args__ = (
        Index('idx_clients_owner_active', 'owner_id', 'is_active'),
        UniqueConstraint('owner_id', 'name', name='unique_client_name_per_owner'),
    )

    __mapper_args__ = {"version_id_col": version}


class ProjectModel(Base):
    """Project table"""
    __tablename__ = 'projects'

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(String(450), ForeignKey('user_profiles.id'), nullable=False)
    client_id = Column(Integer, ForeignKey('clients.id'), nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(String(2000))
    hourly_rate = Column(Numeric(18, 2), nullable=False, default=0)
    status = Column(SQLEnum(ProjectStatus), nullable=False, default=ProjectStatus.ACTIVE)

    start_date = Column(Date)
    end_date = Column(Date)
    version = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    # Relationships
    owner = relationship("UserProfileModel", back_populates="owned_projects")
    client = relationship("ClientModel", back_populates="projects")
    time_entries = relationship("TimeEntryModel", back_populates="project")

    __table_args__ = (
        Index('idx_projects_owner_client', 'owner_id', 'client_id'),
        UniqueConstraint('owner_id', 'title', name='unique_project_title_per_owner'),
        CheckConstraint('hourly_rate >= 0', name='check_project_rate_non_negative'),
    )

    __mapper_args__ = {"version_id_col": version}


class TimeEntryModel(Base):
    """Time entry table"""
    __tablename__ = 'time_entries'

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(String(450), ForeignKey('user_profiles.id'), nullable=False)
    project_id = Column(Integer, ForeignKey('projects.id'), nullable=False)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    description = Column(String(1000), nullable=False)
    is_billed = Column(Boolean, nullable=False, default=False)
    version = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    # Relationships
    owner = relationship("UserProfileModel", back_populates="time_entries")
    project = relationship("ProjectModel", back_populates="time_entries")
    invoices = relationship("InvoiceModel", secondary=invoice_time_entries, back_populates="time_entries")

    __table_args__ = (
        Index('idx_time_entries_owner_start', 'owner_id', 'start_time'),
        Index('idx_time_entries_project_billed', 'project_id', 'is_billed'),
        CheckConstraint('end_time > start_time', name='check_time_entry_end_after_start'),
    )

    __mapper_args__ = {"version_id_col": version}


class InvoiceModel(Base):
    """Invoice table"""
    __tablename__ = 'invoices'

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(String(450), ForeignKey('user_profiles.id'), nullable=False)
    client_id = Column(Integer, ForeignKey('clients.id'), nullable=False)
    invoice_number = Column(String(100), nullable=False)
    invoice_date = Column(Date, nullable=False)
    due_date = Column(Date, nullable=False)
    total_amount = Column(Numeric(18, 2), nullable=False, default=0)
    is_paid = Column(Boolean, nullable=False, default=False)
    payment_date = Column(DateTime)
    notes = Column(String(500))
    version = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    # Relationships
    owner = relationship("UserProfileModel", back_populates="owned_invoices")
    client = relationship("ClientModel", back_populates="invoices")
    time_entries = relationship("TimeEntryModel", secondary=invoice_time_entries, back_populates="invoices")

    __table_args__ = (
        Index('idx_invoices_owner_paid', 'owner_id', 'is_paid'),
        UniqueConstraint('owner_id', 'invoice_number', name='unique_invoice_number_per_owner'),
        CheckConstraint('total_amount >= 0', name='check_invoice_total_non_negative'),
    )

    __mapper_args__ = {"version_id_col": version}
