"""Shared fixtures: in-memory collaborators and entity factories."""

import asyncio
import uuid

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from pagecompose.db.seeds.seed_roles import seed_roles
from pagecompose.db.seeds.seed_sample_data import seed_sample_data
from pagecompose.db.session import create_tables
from pagecompose.models import (
    Site, SiteStatus, Page, PageStatus, PageLocalisation, PagePermission,
    PageModule, PageModuleStatus, PageModuleLocalisation, PageModulePermission,
    Module, ModuleStatus, ModuleType, ModuleTypeStatus, ViewType, EditType,
)
from pagecompose.services.composer import PageComposer
from pagecompose.services.permission_service import PermissionService
from pagecompose.services.stores import PageStore, RoleNameResolver


class FakePageStore(PageStore):
    """PageStore over plain dicts. Mirrors the status filtering of SqlPageStore."""

    def __init__(self):
        self.sites = {}
        self.pages = {}
        self.modules = {}
        self.module_types = {}
        self.fail_with = None

    async def load_page_with_details(self, site_id, page_id):
        await asyncio.sleep(0)
        if self.fail_with is not None:
            raise self.fail_with
        page = self.pages.get(page_id)
        if page is None or page.site_id != site_id or page.status != PageStatus.active:
            return None
        return page

    async def load_active_site(self, site_id):
        site = self.sites.get(site_id)
        if site is None or site.status != SiteStatus.active:
            return None
        return site

    async def load_module(self, module_id):
        return self.modules.get(module_id)

    async def load_module_type(self, module_type_id):
        return self.module_types.get(module_type_id)


class FakeRoleResolver(RoleNameResolver):
    def __init__(self, names=None):
        self.names = dict(names or {})
        self.calls = []

    async def resolve_role_names(self, role_ids):
        role_ids = list(role_ids)
        self.calls.append(role_ids)
        await asyncio.sleep(0)
        return [self.names[r] for r in role_ids if r in self.names]


# ---- Entity factories ----

def make_site(title="Acme", status=SiteStatus.active, **kwargs):
    return Site(
        id=kwargs.pop("id", uuid.uuid4()),
        name=kwargs.pop("name", "Default"),
        title=title,
        meta_description=kwargs.pop("meta_description", "Site description"),
        meta_keywords=kwargs.pop("meta_keywords", "site, keywords"),
        status=status,
        **kwargs,
    )


def make_page(site, title="Home", status=PageStatus.active, **kwargs):
    return Page(
        id=kwargs.pop("id", uuid.uuid4()),
        site_id=site.id,
        name=kwargs.pop("name", "Home"),
        url=kwargs.pop("url", "home"),
        title=title,
        meta_description=kwargs.pop("meta_description", None),
        meta_keywords=kwargs.pop("meta_keywords", None),
        status=status,
        **kwargs,
    )


def make_page_localisation(language_id, **fields):
    return PageLocalisation(language_id=language_id, **fields)


def make_permission(role_id, kind):
    return PagePermission(role_id=role_id, type=kind)


def make_module_permission(role_id, kind):
    return PageModulePermission(role_id=role_id, type=kind)


def make_module_localisation(language_id, title):
    return PageModuleLocalisation(language_id=language_id, title=title)


class CatalogBuilder:
    """Registers modules and module types in a FakePageStore and builds placements."""

    def __init__(self, store):
        self.store = store

    def module_type(self, view_name="Text", status=ModuleTypeStatus.active):
        module_type = ModuleType(
            id=uuid.uuid4(),
            name=view_name.lower() + str(len(self.store.module_types)),
            view_type=ViewType.view_component,
            view_name=view_name,
            edit_type=EditType.modal,
            edit_url=f"{view_name}/Edit",
            status=status,
        )
        self.store.module_types[module_type.id] = module_type
        return module_type

    def module(self, module_type=None, status=ModuleStatus.active):
        module_type = module_type or self.module_type()
        module = Module(
            id=uuid.uuid4(),
            site_id=uuid.uuid4(),
            module_type_id=module_type.id,
            title="Module",
            status=status,
        )
        self.store.modules[module.id] = module
        return module

    def placement(
        self,
        zone="main",
        sort_order=0,
        module=None,
        title="Module title",
        inherit_permissions=True,
        status=PageModuleStatus.active,
        permissions=(),
        localisations=(),
    ):
        module = module or self.module()
        placement = PageModule(
            id=uuid.uuid4(),
            module_id=module.id,
            zone=zone,
            sort_order=sort_order,
            title=title,
            inherit_permissions=inherit_permissions,
            status=status,
        )
        placement.page_module_permissions = list(permissions)
        placement.page_module_localisations = list(localisations)
        return placement


@pytest.fixture
def store():
    return FakePageStore()


@pytest.fixture
def catalog(store):
    return CatalogBuilder(store)


@pytest.fixture
def role_ids():
    return {"admin": uuid.uuid4(), "registered": uuid.uuid4(), "everyone": uuid.uuid4()}


@pytest.fixture
def role_resolver(role_ids):
    return FakeRoleResolver({
        role_ids["admin"]: "Administrator",
        role_ids["registered"]: "Registered",
        role_ids["everyone"]: "Everyone",
    })


@pytest.fixture
def permission_service(role_resolver):
    return PermissionService(role_resolver)


@pytest.fixture
def composer(store, permission_service):
    return PageComposer(store, permission_service, theme_name="Default", template_name="Default")


@pytest.fixture
def site(store):
    site = make_site()
    store.sites[site.id] = site
    return site


@pytest.fixture
def page(store, site):
    page = make_page(site)
    store.pages[page.id] = page
    return page


@pytest.fixture
def session_factory(tmp_path):
    """Seeded SQLite database. A file so concurrent lookups get their own connections."""
    engine = create_engine(f"sqlite:///{tmp_path / 'pages.db'}")
    create_tables(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = factory()
    try:
        seed_roles(db)
        seed_sample_data(db)
    finally:
        db.close()
    yield factory
    engine.dispose()
