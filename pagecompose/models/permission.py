"""Permission kinds gated per role on pages and modules."""

import enum


class PermissionType(str, enum.Enum):
    """Closed set of access actions. Iterate it to build a per-kind map."""
    view = "view"
    add = "add"
    edit = "edit"
    delete = "delete"
