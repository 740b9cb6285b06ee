"""Base checker abstraction answering role, group and permission queries."""

from abc import ABC, abstractmethod
from fnmatch import fnmatchcase
from typing import Any, Callable, Mapping, Protocol, runtime_checkable

from loguru import logger

from trustgate.ability import resolve_ability
from trustgate.helpers import standardize
from trustgate.types import AbilityResult, NameInput, Subject

WILDCARD = "*"


@runtime_checkable
class CapabilitySource(Protocol):
    """Anything that can tell whether a subject has roles, groups or permissions."""

    def has_role(self, name: NameInput, require_all: bool = False) -> bool: ...

    def has_group(self, name: NameInput, require_all: bool = False) -> bool: ...

    def has_permission(self, name: NameInput, require_all: bool = False) -> bool: ...

    def flush_cache(self) -> None: ...


def match_names(name: NameInput, require_all: bool, check_one: Callable[[str], bool]) -> bool:
    """Apply a single-name check to one name or to any/all of a list.

    An empty list is always satisfied. Lists short-circuit on the first
    hit (any) or the first miss (all).
    """
    names = standardize(name)
    if isinstance(names, str):
        return check_one(names)

    if not names:
        return True

    for single in names:
        matched = check_one(single)
        if matched and not require_all:
            return True
        if not matched and require_all:
            return False

    return require_all


def permission_matches(name: str, permissions: list[str]) -> bool:
    """Check a permission name, or a ``*`` pattern, against owned permissions."""
    if WILDCARD in name:
        return any(fnmatchcase(permission, name) for permission in permissions)
    return name in permissions


class UserChecker(ABC):
    """Abstract base class for subject checkers.

    Subclasses decide where the subject's names come from and whether
    they are memoized; the matching rules live here.
    """

    def __init__(self, subject: Subject) -> None:
        """Initialize the checker.

        Args:
            subject: The subject whose assignments are checked.
        """
        self.subject = subject

    @abstractmethod
    def get_current_user_roles(self) -> list[str]:
        """Get the names of the subject's roles."""
        ...

    @abstractmethod
    def get_current_user_groups(self) -> list[str]:
        """Get the names of the subject's groups."""
        ...

    @abstractmethod
    def get_current_user_permissions(self) -> list[str]:
        """Get the names of the subject's permissions."""
        ...

    @abstractmethod
    def flush_cache(self) -> None:
        """Drop any memoized names."""
        ...

    def has_role(self, name: NameInput, require_all: bool = False) -> bool:
        """Check if the subject has a role, or any/all of several roles.

        Args:
            name: Role name, enum member, or a list of those.
            require_all: With a list, require every role instead of one.

        Returns:
            True if the subject satisfies the requirement.
        """
        return match_names(name, require_all, lambda role: role in self.get_current_user_roles())

    def has_group(self, name: NameInput, require_all: bool = False) -> bool:
        """Check if the subject is in a group, or any/all of several groups.

        Args:
            name: Group name, enum member, or a list of those.
            require_all: With a list, require every group instead of one.

        Returns:
            True if the subject satisfies the requirement.
        """
        return match_names(name, require_all, lambda group: group in self.get_current_user_groups())

    def has_permission(self, name: NameInput, require_all: bool = False) -> bool:
        """Check if the subject has a permission, or any/all of several.

        Names containing ``*`` match any permission fitting the pattern,
        e.g. ``posts.*`` matches ``posts.edit``.

        Args:
            name: Permission name, enum member, or a list of those.
            require_all: With a list, require every permission instead of one.

        Returns:
            True if the subject satisfies the requirement.
        """
        return match_names(name, require_all, self._has_single_permission)

    def has_ability(
        self,
        roles: NameInput,
        permissions: NameInput,
        options: Mapping[str, Any] | None = None,
    ) -> AbilityResult:
        """Check roles and permissions together.

        See :func:`trustgate.ability.resolve_ability` for the options and
        result shapes.
        """
        return resolve_ability(roles, permissions, options, self)

    def _has_single_permission(self, name: str) -> bool:
        matched = permission_matches(name, self.get_current_user_permissions())
        if not matched:
            logger.debug(f"Subject {self.subject.id} lacks permission {name}")
        return matched
