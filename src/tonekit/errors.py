"""Exceptions raised while defining color roles.

Resolution itself never raises; these cover mistakes made when wiring roles
together (a catalog bug), caught when the role or the catalog is built.
"""

from __future__ import annotations

__all__ = ["RoleDefinitionError", "RoleGraphCycleError"]


class RoleDefinitionError(RuntimeError):
    """Raised when a role's background / contrast / pairing fields are inconsistent."""


class RoleGraphCycleError(RoleDefinitionError):
    """Raised when roles depend on each other through their backgrounds."""

    def __init__(self, path):
        self.path = list(path)
        super().__init__("Role background cycle: " + " -> ".join(self.path))
