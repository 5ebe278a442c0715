"""Page info service — cached entry point for composing pages."""

import logging
from typing import Optional
from uuid import UUID

from pagecompose.core.config import settings
from pagecompose.schemas.schemas import PageInfo
from pagecompose.services.cache_service import CacheManager, build_cache_store
from pagecompose.services.composer import PageComposer
from pagecompose.services.localisation import NO_LANGUAGE
from pagecompose.services.permission_service import PermissionService
from pagecompose.services.stores import SqlPageStore, SqlRoleNameResolver

logger = logging.getLogger("pagecompose")


def page_info_cache_key(site_id, page_id, language_id=None) -> str:
    """Cache key for one page in one language. No language maps to the nil UUID."""
    return settings.PAGE_INFO_CACHE_KEY.format(
        site_id=site_id,
        page_id=page_id,
        language_id=language_id or NO_LANGUAGE,
    )


class PageInfoService:
    """Serves composed pages through the cache."""

    def __init__(self, composer: PageComposer, cache: CacheManager):
        self.composer = composer
        self.cache = cache

    async def get_page_info(
        self,
        site_id: UUID,
        page_id: UUID,
        language_id: Optional[UUID] = None,
    ) -> Optional[PageInfo]:
        """Return the composed page, or None when it cannot be shown."""
        key = page_info_cache_key(site_id, page_id, language_id)
        return await self.cache.get_or_compute(
            key,
            lambda: self.composer.compose(site_id, page_id, language_id),
            PageInfo,
        )

    async def invalidate_page(self, site_id: UUID, page_id: UUID) -> None:
        """Drop every cached language variant of a page after it was edited.

        Compositions of the page still in flight finish but are not stored.
        """
        pattern = page_info_cache_key(site_id, page_id, "*")
        logger.info("Invalidating cached page %s of site %s", page_id, site_id)
        await self.cache.invalidate_pattern(pattern)


def build_page_info_service(session_factory=None, cache_store=None) -> PageInfoService:
    """Wire the SQLAlchemy stores and the configured cache into a PageInfoService."""
    if session_factory is None:
        from pagecompose.db.session import SessionLocal
        session_factory = SessionLocal

    composer = PageComposer(
        SqlPageStore(session_factory),
        PermissionService(SqlRoleNameResolver(session_factory)),
    )
    cache = CacheManager(
        cache_store or build_cache_store(settings),
        ttl_seconds=settings.CACHE_TTL_SECONDS,
    )
    return PageInfoService(composer, cache)
