"""Language model — the languages a site offers localisations in."""

import enum
import uuid

from sqlalchemy import Column, Integer, String, Enum, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from pagecompose.db.base import Base


class LanguageStatus(str, enum.Enum):
    active = "active"
    hidden = "hidden"
    deleted = "deleted"


class Language(Base):
    __tablename__ = "languages"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    site_id = Column(Uuid, ForeignKey("sites.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(100), nullable=False)
    culture_name = Column(String(20), nullable=False)  # e.g. "fr-FR"
    url = Column(String(20), nullable=True)
    sort_order = Column(Integer, default=0, nullable=False)
    status = Column(Enum(LanguageStatus), default=LanguageStatus.active, nullable=False)

    site = relationship("Site", back_populates="languages")
