"""Page model with its localisations, permissions, and module placements."""

import enum
import uuid

from sqlalchemy import (
    Column, Integer, String, Text, Boolean, DateTime, Enum, ForeignKey, Uuid, func
)
from sqlalchemy.orm import relationship

from pagecompose.db.base import Base
from pagecompose.models.permission import PermissionType


class PageStatus(str, enum.Enum):
    active = "active"
    hidden = "hidden"
    deleted = "deleted"


class PageModuleStatus(str, enum.Enum):
    active = "active"
    deleted = "deleted"


class Page(Base):
    """A content page of a site."""
    __tablename__ = "pages"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    site_id = Column(Uuid, ForeignKey("sites.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    url = Column(String(255), nullable=True)
    title = Column(String(255), nullable=True)
    meta_description = Column(Text, nullable=True)
    meta_keywords = Column(Text, nullable=True)
    status = Column(Enum(PageStatus), default=PageStatus.active, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    page_localisations = relationship(
        "PageLocalisation", back_populates="page", cascade="all, delete-orphan"
    )
    page_permissions = relationship(
        "PagePermission", back_populates="page", cascade="all, delete-orphan"
    )
    page_modules = relationship(
        "PageModule", back_populates="page", cascade="all, delete-orphan"
    )


class PageLocalisation(Base):
    """Per-language override of a page's text fields. Blank fields fall back."""
    __tablename__ = "page_localisations"

    page_id = Column(Uuid, ForeignKey("pages.id", ondelete="CASCADE"), primary_key=True)
    language_id = Column(Uuid, ForeignKey("languages.id", ondelete="CASCADE"), primary_key=True)
    url = Column(String(255), nullable=True)
    title = Column(String(255), nullable=True)
    meta_description = Column(Text, nullable=True)
    meta_keywords = Column(Text, nullable=True)

    page = relationship("Page", back_populates="page_localisations")


class PagePermission(Base):
    """Grants one permission kind on a page to one role."""
    __tablename__ = "page_permissions"

    page_id = Column(Uuid, ForeignKey("pages.id", ondelete="CASCADE"), primary_key=True)
    role_id = Column(Uuid, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True)
    type = Column(Enum(PermissionType), primary_key=True)

    page = relationship("Page", back_populates="page_permissions")


class PageModule(Base):
    """Placement of a module in a zone of a page."""
    __tablename__ = "page_modules"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    page_id = Column(Uuid, ForeignKey("pages.id", ondelete="CASCADE"), nullable=False, index=True)
    module_id = Column(Uuid, ForeignKey("modules.id"), nullable=False)
    title = Column(String(255), nullable=True)
    zone = Column(String(100), nullable=False)
    sort_order = Column(Integer, default=0, nullable=False)
    inherit_permissions = Column(Boolean, default=True, nullable=False)
    status = Column(Enum(PageModuleStatus), default=PageModuleStatus.active, nullable=False)

    page = relationship("Page", back_populates="page_modules")
    page_module_localisations = relationship(
        "PageModuleLocalisation", back_populates="page_module", cascade="all, delete-orphan"
    )
    page_module_permissions = relationship(
        "PageModulePermission", back_populates="page_module", cascade="all, delete-orphan"
    )


class PageModuleLocalisation(Base):
    __tablename__ = "page_module_localisations"

    page_module_id = Column(Uuid, ForeignKey("page_modules.id", ondelete="CASCADE"), primary_key=True)
    language_id = Column(Uuid, ForeignKey("languages.id", ondelete="CASCADE"), primary_key=True)
    title = Column(String(255), nullable=True)

    page_module = relationship("PageModule", back_populates="page_module_localisations")


class PageModulePermission(Base):
    """Grants one permission kind on a placement to one role.

    Ignored while the placement inherits the page's permissions.
    """
    __tablename__ = "page_module_permissions"

    page_module_id = Column(Uuid, ForeignKey("page_modules.id", ondelete="CASCADE"), primary_key=True)
    role_id = Column(Uuid, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True)
    type = Column(Enum(PermissionType), primary_key=True)

    page_module = relationship("PageModule", back_populates="page_module_permissions")
