"""Module and ModuleType models — the reusable content catalog."""

import enum
import uuid

from sqlalchemy import Column, String, DateTime, Enum, ForeignKey, Uuid, func

from pagecompose.db.base import Base


class ModuleStatus(str, enum.Enum):
    active = "active"
    deleted = "deleted"


class ModuleTypeStatus(str, enum.Enum):
    active = "active"
    hidden = "hidden"
    deleted = "deleted"


class ViewType(str, enum.Enum):
    view_component = "view_component"
    partial_view = "partial_view"


class EditType(str, enum.Enum):
    modal = "modal"
    url = "url"


class ModuleType(Base):
    """Describes how instances of a module are rendered and edited."""
    __tablename__ = "module_types"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), unique=True, nullable=False)
    title = Column(String(255), nullable=True)
    view_type = Column(Enum(ViewType), default=ViewType.view_component, nullable=False)
    view_name = Column(String(255), nullable=False)
    edit_type = Column(Enum(EditType), default=EditType.modal, nullable=False)
    edit_url = Column(String(500), nullable=True)
    status = Column(Enum(ModuleTypeStatus), default=ModuleTypeStatus.active, nullable=False)


class Module(Base):
    """A content unit that can be placed on one or more pages."""
    __tablename__ = "modules"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    site_id = Column(Uuid, ForeignKey("sites.id", ondelete="CASCADE"), nullable=False)
    module_type_id = Column(Uuid, ForeignKey("module_types.id"), nullable=False)
    title = Column(String(255), nullable=True)
    status = Column(Enum(ModuleStatus), default=ModuleStatus.active, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
