"""Seed default roles into the database."""

import uuid

from sqlalchemy.orm import Session

from pagecompose.models.role import Role

ADMINISTRATOR_ROLE_ID = uuid.UUID("a1a1a1a1-0000-4000-8000-000000000001")
REGISTERED_ROLE_ID = uuid.UUID("a1a1a1a1-0000-4000-8000-000000000002")
EVERYONE_ROLE_ID = uuid.UUID("a1a1a1a1-0000-4000-8000-000000000003")


def seed_roles(db: Session) -> None:
    """Insert default roles if they don't already exist."""
    roles_data = [
        {"id": ADMINISTRATOR_ROLE_ID, "name": "Administrator"},
        {"id": REGISTERED_ROLE_ID, "name": "Registered"},
        {"id": EVERYONE_ROLE_ID, "name": "Everyone"},
    ]

    for role_data in roles_data:
        existing = db.query(Role).filter(Role.name == role_data["name"]).first()
        if not existing:
            db.add(Role(**role_data))

    db.commit()
    print(f"✅ Seeded {len(roles_data)} roles")
