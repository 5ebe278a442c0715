"""Role model. Permissions reference roles by id only."""

import uuid

from sqlalchemy import Column, String, Uuid

from pagecompose.db.base import Base


class Role(Base):
    __tablename__ = "roles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), unique=True, nullable=False, index=True)
