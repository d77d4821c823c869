#!/usr/bin/env python3
"""
Database management script for Hourbook.
Handles table creation, teardown and demo data seeding.
"""

import logging
import sys
from decimal import Decimal

from hourbook.infrastructure.db.database import Base, SessionLocal, engine
from hourbook.infrastructure.db import models  # noqa: F401  registers the tables
from hourbook.domain.models.client import Client
from hourbook.domain.models.project import Project
from hourbook.infrastructure.repositories import (
    SQLAlchemyClientRepository,
    SQLAlchemyProjectRepository,
    SQLAlchemyUserRepository,
)


logger = logging.getLogger("manage_db")

DEMO_CLIENTS = [
    {
        "name": "Tech Innovators Corp",
        "email": "contact@techinnovators.com",
        "phone": "+1-555-TECH-001",
        "address": "456 Innovation Drive, Silicon Valley, CA 94000",
    },
    {
        "name": "Global Marketing Agency",
        "email": "info@globalmarketing.com",
        "phone": "+1-555-MARKET-02",
        "address": "789 Marketing Boulevard, New York, NY 10001",
    },
]

DEMO_PROJECTS = [
    {
        "client": "Tech Innovators Corp",
        "title": "Q4 E-commerce Platform Relaunch",
        "description": "Relaunch of the online store ahead of the holiday season.",
        "hourly_rate": Decimal("75.00"),
    },
    {
        "client": "Global Marketing Agency",
        "title": "2026 Brand Strategy Documentation",
        "description": "Brand guidelines and messaging framework for the coming year.",
        "hourly_rate": Decimal("60.00"),
    },
]


def create_tables():
    """Create all tables that do not exist yet."""
    print("Creating tables...")
    Base.metadata.create_all(bind=engine)
    print("Done.")


def drop_tables():
    """Drop all tables - WARNING: This will drop all data!"""
    print("Dropping tables...")
    Base.metadata.drop_all(bind=engine)
    print("Done.")


def reset_database():
    """Reset database - WARNING: This will drop all data!"""
    response = input("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() == 'yes':
        drop_tables()
        create_tables()
    else:
        print("Database reset cancelled.")


def seed_user(user_id: str):
    """
    Seed demo data for one user.
    Rows that already exist are left alone, so running it twice is harmless.
    """
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        users = SQLAlchemyUserRepository(session)
        clients = SQLAlchemyClientRepository(session)
        projects = SQLAlchemyProjectRepository(session)

        profile = users.get_or_create(user_id)
        if profile.company_name is None:
            profile.update_profile("Demo", "User", "Demo Company", profile.address)
            users.save(profile)

        client_ids = {}
        existing_clients = {client.name: client for client in clients.list(user_id, include_inactive=True)}
        for data in DEMO_CLIENTS:
            client = existing_clients.get(data["name"])
            if client is None:
                client = clients.save(Client.create(owner_id=user_id, **data))
                print(f"  client   {client.name}")
            client_ids[data["name"]] = client.id

        existing_titles = {project.title for project in projects.list(user_id)}
        for data in DEMO_PROJECTS:
            if data["title"] in existing_titles:
                continue
            project = projects.save(Project.create(
                owner_id=user_id,
                client_id=client_ids[data["client"]],
                title=data["title"],
                description=data["description"],
                hourly_rate=data["hourly_rate"],
            ))
            print(f"  project  {project.title}")

        session.commit()
        logger.info(f"Seeded demo data for user {user_id}")
        print(f"Seeded demo data for user {user_id}.")
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def main():
    """Main CLI function."""
    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) < 2:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  create          - Create all tables")
        print("  drop            - Drop all tables (WARNING: drops all data)")
        print("  reset           - Drop and recreate all tables (WARNING: drops all data)")
        print("  seed <user_id>  - Seed demo profile, clients and projects for a user")
        return

    command_name = sys.argv[1]

    if command_name == "create":
        create_tables()
    elif command_name == "drop":
        drop_tables()
    elif command_name == "reset":
        reset_database()
    elif command_name == "seed":
        if len(sys.argv) < 3:
            print("Usage: python manage_db.py seed <user_id>")
            sys.exit(1)
        seed_user(sys.argv[2])
    else:
        print(f"Unknown command: {command_name}")
        sys.exit(1)


if __name__ == "__main__":
    main()
