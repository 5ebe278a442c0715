"""Localisation fallback — pick the most specific non-blank text value."""

from typing import Iterable, Optional, TypeVar
from uuid import UUID

# Language id meaning "no language override requested"
NO_LANGUAGE = UUID(int=0)

L = TypeVar("L")


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def has_language(language_id: Optional[UUID]) -> bool:
    return language_id is not None and language_id != NO_LANGUAGE


def find_localisation(localisations: Iterable[L], language_id: Optional[UUID]) -> Optional[L]:
    """Return the localisation record for the requested language, if any."""
    if not has_language(language_id):
        return None
    return next((loc for loc in localisations if loc.language_id == language_id), None)


def resolve_text(
    localised: Optional[str],
    own: Optional[str],
    parent_default: Optional[str] = None,
) -> str:
    """Resolve a text field along localised -> own -> parent default.

    Pass ``parent_default=None`` for two-tier chains (page url, module titles).
    Returns an empty string when every tier is blank.
    """
    for value in (localised, own, parent_default):
        if not is_blank(value):
            return value
    return ""


def localised_field(localisation, field: str) -> Optional[str]:
    """Read ``field`` from a localisation record, tolerating a missing record."""
    if localisation is None:
        return None
    return getattr(localisation, field, None)
