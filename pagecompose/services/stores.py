"""Read-side collaborators for page composition and their SQLAlchemy adapters."""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload, with_loader_criteria

from pagecompose.core.exceptions import StorageError, RoleResolutionError
from pagecompose.models.module import Module, ModuleType
from pagecompose.models.page import Page, PageModule, PageModuleStatus, PageStatus
from pagecompose.models.role import Role
from pagecompose.models.site import Site, SiteStatus

logger = logging.getLogger("pagecompose")


class PageStore(ABC):
    """Loads the entities a page composition reads.

    Implementations return fully materialized objects; the composer never
    relies on lazy loading.
    """

    @abstractmethod
    async def load_page_with_details(self, site_id: UUID, page_id: UUID) -> Optional[Page]:
        """Active page of the site with localisations, permissions and active placements."""
        ...

    @abstractmethod
    async def load_active_site(self, site_id: UUID) -> Optional[Site]:
        ...

    @abstractmethod
    async def load_module(self, module_id: UUID) -> Optional[Module]:
        ...

    @abstractmethod
    async def load_module_type(self, module_type_id: UUID) -> Optional[ModuleType]:
        ...


class RoleNameResolver(ABC):
    """Turns role ids into display names."""

    @abstractmethod
    async def resolve_role_names(self, role_ids: Iterable[UUID]) -> List[str]:
        ...


class SqlPageStore(PageStore):
    """PageStore backed by SQLAlchemy sessions.

    Each call opens its own session and runs in the default thread pool so
    concurrent lookups never share a session.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    async def _run(self, fn, *args):
        return await asyncio.to_thread(self._in_session, fn, *args)

    def _in_session(self, fn, *args):
        db = self.session_factory()
        try:
            return fn(db, *args)
        except SQLAlchemyError as e:
            logger.exception("Page store query %s failed", fn.__name__)
            raise StorageError(f"{fn.__name__} failed: {e}") from e
        finally:
            db.close()

    async def load_page_with_details(self, site_id: UUID, page_id: UUID) -> Optional[Page]:
        return await self._run(self._query_page, site_id, page_id)

    async def load_active_site(self, site_id: UUID) -> Optional[Site]:
        return await self._run(self._query_site, site_id)

    async def load_module(self, module_id: UUID) -> Optional[Module]:
        return await self._run(self._query_by_id, Module, module_id)

    async def load_module_type(self, module_type_id: UUID) -> Optional[ModuleType]:
        return await self._run(self._query_by_id, ModuleType, module_type_id)

    @staticmethod
    def _query_page(db: Session, site_id: UUID, page_id: UUID) -> Optional[Page]:
        return (
            db.query(Page)
            .options(
                selectinload(Page.page_localisations),
                selectinload(Page.page_permissions),
                selectinload(Page.page_modules).selectinload(PageModule.page_module_localisations),
                selectinload(Page.page_modules).selectinload(PageModule.page_module_permissions),
                with_loader_criteria(PageModule, PageModule.status == PageModuleStatus.active),
            )
            .filter(
                Page.site_id == site_id,
                Page.id == page_id,
                Page.status == PageStatus.active,
            )
            .first()
        )

    @staticmethod
    def _query_site(db: Session, site_id: UUID) -> Optional[Site]:
        return (
            db.query(Site)
            .filter(Site.id == site_id, Site.status == SiteStatus.active)
            .first()
        )

    @staticmethod
    def _query_by_id(db: Session, model, entity_id: UUID):
        return db.query(model).filter(model.id == entity_id).first()


class SqlRoleNameResolver(RoleNameResolver):
    """Resolves role names from the roles table, ordered by name."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    async def resolve_role_names(self, role_ids: Iterable[UUID]) -> List[str]:
        ids = set(role_ids)
        if not ids:
            return []
        return await asyncio.to_thread(self._query_names, ids)

    def _query_names(self, ids: set) -> List[str]:
        db = self.session_factory()
        try:
            rows = db.query(Role.name).filter(Role.id.in_(ids)).order_by(Role.name).all()
            return [name for (name,) in rows]
        except SQLAlchemyError as e:
            logger.exception("Role name lookup failed for %d roles", len(ids))
            raise RoleResolutionError(f"Role name lookup failed: {e}") from e
        finally:
            db.close()
