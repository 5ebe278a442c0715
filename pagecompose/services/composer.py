"""Page composition — turns a page, its site and its placements into a PageInfo."""

import asyncio
import logging
from typing import Dict, List, Optional
from uuid import UUID

from pagecompose.core.config import settings
from pagecompose.models.module import ModuleStatus, ModuleTypeStatus
from pagecompose.models.page import Page, PageModule, PageModuleStatus
from pagecompose.models.site import Site
from pagecompose.schemas.schemas import (
    PageInfo, PageModel, ThemeModel, PageTemplateModel,
    ZoneModel, ModuleModel, ModuleTypeModel, ModuleTemplateModel, RoleMap,
)
from pagecompose.services.localisation import find_localisation, localised_field, resolve_text
from pagecompose.services.permission_service import PermissionService
from pagecompose.services.stores import PageStore

logger = logging.getLogger("pagecompose")


class ModuleComposer:
    """Builds the render model of a single placement."""

    def __init__(self, store: PageStore, permissions: PermissionService, template_name: str):
        self.store = store
        self.permissions = permissions
        self.template_name = template_name

    async def compose(
        self,
        page_module: PageModule,
        page_roles: RoleMap,
        language_id: Optional[UUID],
    ) -> Optional[ModuleModel]:
        """Return the module model, or None when the placement must be dropped.

        A placement is dropped when its module or module type is missing or
        deleted; that is a normal outcome, not an error.
        """
        module = await self.store.load_module(page_module.module_id)
        if module is None or module.status == ModuleStatus.deleted:
            logger.debug("Dropping placement %s: module %s unavailable",
                         page_module.id, page_module.module_id)
            return None

        module_type = await self.store.load_module_type(module.module_type_id)
        if module_type is None or module_type.status == ModuleTypeStatus.deleted:
            logger.debug("Dropping placement %s: module type %s unavailable",
                         page_module.id, module.module_type_id)
            return None

        if page_module.inherit_permissions:
            roles = page_roles
        else:
            roles = await self.permissions.resolve_all(page_module.page_module_permissions)

        localisation = find_localisation(page_module.page_module_localisations, language_id)
        title = resolve_text(localised_field(localisation, "title"), page_module.title)

        return ModuleModel(
            id=page_module.module_id,
            placement_id=page_module.id,
            title=title,
            zone=page_module.zone,
            sort_order=page_module.sort_order,
            permissions=roles,
            module_type=ModuleTypeModel(
                view_type=module_type.view_type,
                view_name=module_type.view_name,
                edit_type=module_type.edit_type,
                edit_url=module_type.edit_url,
            ),
            template=ModuleTemplateModel(view_name=self.template_name),
        )


class ZoneComposer:
    """Groups placements into zones and composes their modules in display order."""

    def __init__(self, module_composer: ModuleComposer):
        self.module_composer = module_composer

    @staticmethod
    def group_by_zone(page_modules: List[PageModule]) -> Dict[str, List[PageModule]]:
        """Active placements per zone.

        Zones keep the order in which they first appear; placements are
        stable-sorted by sort order within a zone.
        """
        zones: Dict[str, List[PageModule]] = {}
        for page_module in page_modules:
            if page_module.status != PageModuleStatus.active:
                continue
            zones.setdefault(page_module.zone, []).append(page_module)
        return {
            name: sorted(placements, key=lambda pm: pm.sort_order)
            for name, placements in zones.items()
        }

    async def compose(
        self,
        page_modules: List[PageModule],
        page_roles: RoleMap,
        language_id: Optional[UUID],
    ) -> List[ZoneModel]:
        zones = self.group_by_zone(page_modules)
        return list(await asyncio.gather(
            *(self._compose_zone(name, placements, page_roles, language_id)
              for name, placements in zones.items())
        ))

    async def _compose_zone(
        self,
        name: str,
        placements: List[PageModule],
        page_roles: RoleMap,
        language_id: Optional[UUID],
    ) -> ZoneModel:
        modules = await asyncio.gather(
            *(self.module_composer.compose(pm, page_roles, language_id) for pm in placements)
        )
        return ZoneModel(name=name, modules=[m for m in modules if m is not None])


class PageComposer:
    """Orchestrates loading, permission and text resolution, and zone assembly."""

    def __init__(
        self,
        store: PageStore,
        permissions: PermissionService,
        theme_name: str = settings.DEFAULT_THEME,
        template_name: str = settings.DEFAULT_TEMPLATE,
    ):
        self.store = store
        self.permissions = permissions
        self.theme_name = theme_name
        self.template_name = template_name
        self.zone_composer = ZoneComposer(ModuleComposer(store, permissions, template_name))

    async def compose(
        self,
        site_id: UUID,
        page_id: UUID,
        language_id: Optional[UUID] = None,
    ) -> Optional[PageInfo]:
        """Compose a page, or return None when the page or its site is unavailable."""
        page = await self.store.load_page_with_details(site_id, page_id)
        if page is None:
            logger.info("Page %s not found for site %s", page_id, site_id)
            return None

        site = await self.store.load_active_site(site_id)
        if site is None:
            logger.info("Site %s not found or inactive", site_id)
            return None

        roles = await self.permissions.resolve_all(page.page_permissions)
        zones = await self.zone_composer.compose(page.page_modules, roles, language_id)

        return PageInfo(
            page=self._page_model(page, site, roles, language_id),
            theme=ThemeModel(name=self.theme_name),
            template=PageTemplateModel(view_name=self.template_name),
            zones=zones,
        )

    @staticmethod
    def _page_model(page: Page, site: Site, roles: RoleMap, language_id: Optional[UUID]) -> PageModel:
        localisation = find_localisation(page.page_localisations, language_id)
        return PageModel(
            id=page.id,
            name=page.name,
            # No site-level url
            url=resolve_text(localised_field(localisation, "url"), page.url),
            title=resolve_text(localised_field(localisation, "title"), page.title, site.title),
            meta_description=resolve_text(
                localised_field(localisation, "meta_description"),
                page.meta_description,
                site.meta_description,
            ),
            meta_keywords=resolve_text(
                localised_field(localisation, "meta_keywords"),
                page.meta_keywords,
                site.meta_keywords,
            ),
            permissions=roles,
        )
