"""Permission resolution — role names granted each permission kind."""

import asyncio
from typing import Dict, Iterable, List

from pagecompose.models.permission import PermissionType
from pagecompose.services.stores import RoleNameResolver


class PermissionService:
    """Builds the ``PermissionType -> [role name]`` map for a page or a placement.

    Every permission kind is always present in the result. No role is granted
    anything implicitly, administrators included.
    """

    def __init__(self, role_resolver: RoleNameResolver):
        self.role_resolver = role_resolver

    async def resolve_all(self, entries: Iterable) -> Dict[PermissionType, List[str]]:
        """Resolve permission entries (objects with ``role_id`` and ``type``)."""
        role_ids_by_type = self.group_role_ids(entries)
        kinds = list(PermissionType)
        names = await asyncio.gather(
            *(self.role_resolver.resolve_role_names(role_ids_by_type[kind]) for kind in kinds)
        )
        return {kind: list(role_names) for kind, role_names in zip(kinds, names)}

    @staticmethod
    def group_role_ids(entries: Iterable) -> Dict[PermissionType, List]:
        """Distinct role ids per permission kind, in first-seen order."""
        grouped: Dict[PermissionType, List] = {kind: [] for kind in PermissionType}
        for entry in entries:
            role_ids = grouped[PermissionType(entry.type)]
            if entry.role_id not in role_ids:
                role_ids.append(entry.role_id)
        return grouped
