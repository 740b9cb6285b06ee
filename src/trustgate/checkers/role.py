"""Checkers answering permission queries about a single role."""

from abc import ABC, abstractmethod

from trustgate.checkers.base import match_names, permission_matches
from trustgate.config import get_config
from trustgate.types import NameInput, Role


class RoleChecker(ABC):
    """Abstract base class for role checkers."""

    def __init__(self, role: Role) -> None:
        self.role = role

    @abstractmethod
    def get_current_role_permissions(self) -> list[str]:
        """Get the names of the role's permissions."""
        ...

    @abstractmethod
    def flush_cache(self) -> None:
        """Drop any memoized names."""
        ...

    def has_permission(self, name: NameInput, require_all: bool = False) -> bool:
        """Check if the role grants a permission, or any/all of several.

        Same matching rules as :meth:`UserChecker.has_permission`.
        """
        return match_names(
            name,
            require_all,
            lambda permission: permission_matches(permission, self.get_current_role_permissions()),
        )


class RoleDefaultChecker(RoleChecker):
    """Role checker memoizing permission names until flushed."""

    def __init__(self, role: Role, cache_enabled: bool | None = None) -> None:
        super().__init__(role)
        self.cache_enabled = get_config().cache_enabled if cache_enabled is None else cache_enabled
        self._permissions: list[str] | None = None

    def get_current_role_permissions(self) -> list[str]:
        if not self.cache_enabled:
            return self.role.effective_permission_names()
        if self._permissions is None:
            self._permissions = self.role.effective_permission_names()
        return self._permissions

    def flush_cache(self) -> None:
        self._permissions = None


class RoleQueryChecker(RoleChecker):
    """Role checker reading the role model on every query."""

    def get_current_role_permissions(self) -> list[str]:
        return self.role.effective_permission_names()

    def flush_cache(self) -> None:
        pass
