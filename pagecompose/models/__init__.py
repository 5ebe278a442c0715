"""Models package — import all models so create_all can discover them."""

from pagecompose.models.permission import PermissionType
from pagecompose.models.site import Site, SiteStatus
from pagecompose.models.language import Language, LanguageStatus
from pagecompose.models.role import Role
from pagecompose.models.module import (
    Module, ModuleStatus, ModuleType, ModuleTypeStatus, ViewType, EditType
)
from pagecompose.models.page import (
    Page, PageStatus, PageLocalisation, PagePermission,
    PageModule, PageModuleStatus, PageModuleLocalisation, PageModulePermission,
)

__all__ = [
    "PermissionType", "Site", "SiteStatus", "Language", "LanguageStatus", "Role",
    "Module", "ModuleStatus", "ModuleType", "ModuleTypeStatus", "ViewType", "EditType",
    "Page", "PageStatus", "PageLocalisation", "PagePermission",
    "PageModule", "PageModuleStatus", "PageModuleLocalisation", "PageModulePermission",
]
