# ============================================================================
# DOMAIN EXCEPTIONS
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Foundation - Exception hierarchy
# PURPOSE: Errors raised across the locator core
# CREATED: 19 OCT 2026
# ============================================================================
"""
Domain exceptions.

Validation problems are NOT exceptions - they come back as result objects
(see services.project_store.Rejected). Exceptions are reserved for
resource failures the caller has to degrade around.
"""

from typing import Optional


class LocatorError(Exception):
    """Base class for locator errors."""


class BoundaryLoadError(LocatorError):
    """
    A boundary document could not be fetched or parsed.

    Attributes:
        resource: Resource identifier that was requested
        status_code: HTTP status if the server answered, else None
    """

    def __init__(self, message: str, resource: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.resource = resource
        self.status_code = status_code

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code is not None:
            return f"{base} (resource={self.resource}, status={self.status_code})"
        return f"{base} (resource={self.resource})"


__all__ = ["LocatorError", "BoundaryLoadError"]
