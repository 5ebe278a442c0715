"""Custom exception classes for page composition."""


class PageComposeError(Exception):
    """Base exception for page composition."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class StorageError(PageComposeError):
    """Raised when the page store cannot be read."""
    pass


class RoleResolutionError(PageComposeError):
    """Raised when role ids cannot be resolved to names."""
    pass