"""Seed a demo site with a localised home page and a few module placements."""

import uuid

from sqlalchemy.orm import Session

from pagecompose.db.seeds.seed_roles import (
    ADMINISTRATOR_ROLE_ID, REGISTERED_ROLE_ID, EVERYONE_ROLE_ID,
)
from pagecompose.models import (
    Site, Language, ModuleType, Module, Page, PageLocalisation, PagePermission,
    PageModule, PageModuleLocalisation, PageModulePermission, PermissionType,
    ViewType, EditType,
)

DEMO_SITE_ID = uuid.UUID("5e5e5e5e-0000-4000-8000-000000000001")
DEMO_PAGE_ID = uuid.UUID("5e5e5e5e-0000-4000-8000-000000000002")
ENGLISH_ID = uuid.UUID("5e5e5e5e-0000-4000-8000-000000000003")
FRENCH_ID = uuid.UUID("5e5e5e5e-0000-4000-8000-000000000004")


def seed_sample_data(db: Session) -> None:
    """Insert the demo site unless it already exists."""
    if db.get(Site, DEMO_SITE_ID) is not None:
        print("⚠️  Demo site already seeded.")
        return

    db.add(Site(
        id=DEMO_SITE_ID,
        name="Default",
        title="Acme",
        meta_description="Acme corporate site",
        meta_keywords="acme, demo",
    ))
    db.add_all([
        Language(id=ENGLISH_ID, site_id=DEMO_SITE_ID, name="English",
                 culture_name="en-GB", url="en", sort_order=1),
        Language(id=FRENCH_ID, site_id=DEMO_SITE_ID, name="Français",
                 culture_name="fr-FR", url="fr", sort_order=2),
    ])

    text_type = ModuleType(
        name="text", title="Text", view_type=ViewType.view_component,
        view_name="Text", edit_type=EditType.modal, edit_url="Text/Edit",
    )
    menu_type = ModuleType(
        name="menu", title="Menu", view_type=ViewType.view_component,
        view_name="Menu", edit_type=EditType.url, edit_url="Menu/Edit",
    )
    db.add_all([text_type, menu_type])
    db.flush()

    welcome = Module(site_id=DEMO_SITE_ID, module_type_id=text_type.id, title="Welcome")
    intro = Module(site_id=DEMO_SITE_ID, module_type_id=text_type.id, title="Intro")
    menu = Module(site_id=DEMO_SITE_ID, module_type_id=menu_type.id, title="Menu")
    db.add_all([welcome, intro, menu])
    db.flush()

    page = Page(id=DEMO_PAGE_ID, site_id=DEMO_SITE_ID, name="Home", url="home", title="Home")
    page.page_localisations = [
        PageLocalisation(language_id=FRENCH_ID, url="accueil", title="Accueil"),
    ]
    page.page_permissions = [
        PagePermission(role_id=EVERYONE_ROLE_ID, type=PermissionType.view),
        PagePermission(role_id=ADMINISTRATOR_ROLE_ID, type=PermissionType.edit),
    ]

    members_only = PageModule(
        module_id=menu.id, zone="sidebar", sort_order=1, title="Members",
        inherit_permissions=False,
    )
    members_only.page_module_permissions = [
        PageModulePermission(role_id=REGISTERED_ROLE_ID, type=PermissionType.view),
    ]
    welcome_placement = PageModule(module_id=welcome.id, zone="main", sort_order=2, title="Welcome")
    welcome_placement.page_module_localisations = [
        PageModuleLocalisation(language_id=FRENCH_ID, title="Bienvenue"),
    ]
    page.page_modules = [
        welcome_placement,
        PageModule(module_id=intro.id, zone="main", sort_order=1, title="Intro"),
        members_only,
    ]
    db.add(page)
    db.commit()
    print(f"✅ Seeded demo site {DEMO_SITE_ID} with page {DEMO_PAGE_ID}")
