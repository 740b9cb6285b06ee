"""Checkers answering role and permission queries about a single group."""

from abc import ABC, abstractmethod

from trustgate.checkers.base import match_names, permission_matches
from trustgate.config import get_config
from trustgate.types import Group, NameInput


class GroupChecker(ABC):
    """Abstract base class for group checkers."""

    def __init__(self, group: Group) -> None:
        self.group = group

    @abstractmethod
    def get_current_group_roles(self) -> list[str]:
        """Get the names of the group's roles."""
        ...

    @abstractmethod
    def get_current_group_permissions(self) -> list[str]:
        """Get the group's own permissions and those granted by its roles."""
        ...

    @abstractmethod
    def flush_cache(self) -> None:
        """Drop any memoized names."""
        ...

    def has_role(self, name: NameInput, require_all: bool = False) -> bool:
        """Check if the group carries a role, or any/all of several."""
        return match_names(name, require_all, lambda role: role in self.get_current_group_roles())

    def has_permission(self, name: NameInput, require_all: bool = False) -> bool:
        """Check if the group grants a permission, or any/all of several."""
        return match_names(
            name,
            require_all,
            lambda permission: permission_matches(permission, self.get_current_group_permissions()),
        )


class GroupDefaultChecker(GroupChecker):
    """Group checker memoizing role and permission names until flushed."""

    def __init__(self, group: Group, cache_enabled: bool | None = None) -> None:
        super().__init__(group)
        self.cache_enabled = get_config().cache_enabled if cache_enabled is None else cache_enabled
        self._roles: list[str] | None = None
        self._permissions: list[str] | None = None

    def get_current_group_roles(self) -> list[str]:
        if not self.cache_enabled:
            return self.group.effective_role_names()
        if self._roles is None:
            self._roles = self.group.effective_role_names()
        return self._roles

    def get_current_group_permissions(self) -> list[str]:
        if not self.cache_enabled:
            return self.group.effective_permission_names()
        if self._permissions is None:
            self._permissions = self.group.effective_permission_names()
        return self._permissions

    def flush_cache(self) -> None:
        self._roles = None
        self._permissions = None


class GroupQueryChecker(GroupChecker):
    """Group checker reading the group model on every query."""

    def get_current_group_roles(self) -> list[str]:
        return self.group.effective_role_names()

    def get_current_group_permissions(self) -> list[str]:
        return self.group.effective_permission_names()

    def flush_cache(self) -> None:
        pass
