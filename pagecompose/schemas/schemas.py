"""Pydantic schemas for the composed page model."""

from typing import Optional, List, Dict
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pagecompose.models.module import ViewType, EditType
from pagecompose.models.permission import PermissionType


RoleMap = Dict[PermissionType, List[str]]


class _CamelModel(BaseModel):
    """Serializes with camelCase aliases, accepts field names on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---- Page ----
class PageModel(_CamelModel):
    id: UUID
    name: str
    url: str = ""
    title: str = ""
    meta_description: str = ""
    meta_keywords: str = ""
    permissions: RoleMap = Field(default_factory=dict)


class ThemeModel(_CamelModel):
    name: str


class PageTemplateModel(_CamelModel):
    view_name: str


# ---- Module ----
class ModuleTypeModel(_CamelModel):
    view_type: ViewType
    view_name: str
    edit_type: EditType
    edit_url: Optional[str] = None


class ModuleTemplateModel(_CamelModel):
    view_name: str


class ModuleModel(_CamelModel):
    id: UUID
    placement_id: UUID
    title: str = ""
    zone: str
    sort_order: int
    permissions: RoleMap = Field(default_factory=dict)
    module_type: ModuleTypeModel
    template: ModuleTemplateModel


# ---- Zone ----
class ZoneModel(_CamelModel):
    name: str
    modules: List[ModuleModel] = Field(default_factory=list)


class PageInfo(_CamelModel):
    """Everything a renderer needs to draw one page in one language."""
    page: PageModel
    theme: ThemeModel
    template: PageTemplateModel
    zones: List[ZoneModel] = Field(default_factory=list)
