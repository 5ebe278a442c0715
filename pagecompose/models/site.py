"""Site model — the tenant that owns pages and provides text defaults."""

import enum
import uuid

from sqlalchemy import Column, String, Text, DateTime, Enum, Uuid, func
from sqlalchemy.orm import relationship

from pagecompose.db.base import Base


class SiteStatus(str, enum.Enum):
    active = "active"
    hidden = "hidden"
    deleted = "deleted"


class Site(Base):
    """A tenant site. Its title and meta fields are the last fallback for page text."""
    __tablename__ = "sites"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), unique=True, nullable=False, index=True)
    title = Column(String(255), nullable=True)
    meta_description = Column(Text, nullable=True)
    meta_keywords = Column(Text, nullable=True)
    status = Column(Enum(SiteStatus), default=SiteStatus.active, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    languages = relationship("Language", back_populates="site", lazy="selectin")
