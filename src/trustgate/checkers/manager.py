"""Checker registry and configuration-driven checker selection.

Checkers come in three kinds: ``user`` (a Subject), ``role`` (a Role) and
``group`` (a Group). Each kind has its own strategy table; the strategy
key is taken from ``Config.checkers[kind]``, falling back to
``Config.checker``.
"""

from typing import Any, Callable

from loguru import logger

from trustgate.checkers.base import UserChecker
from trustgate.checkers.default import UserDefaultChecker
from trustgate.checkers.group import GroupChecker, GroupDefaultChecker, GroupQueryChecker
from trustgate.checkers.query import UserQueryChecker
from trustgate.checkers.role import RoleChecker, RoleDefaultChecker, RoleQueryChecker
from trustgate.config import get_config
from trustgate.exceptions import CheckerConfigurationError
from trustgate.types import Group, Role, Subject

USER = "user"
ROLE = "role"
GROUP = "group"

CHECKER_BASES: dict[str, type] = {
    USER: UserChecker,
    ROLE: RoleChecker,
    GROUP: GroupChecker,
}


def _base_for(kind: str) -> type:
    base = CHECKER_BASES.get(kind)
    if base is None:
        raise CheckerConfigurationError(
            f"Unknown checker kind '{kind}', expected one of {', '.join(CHECKER_BASES)}"
        )
    return base


class CheckerRegistry:
    """Registry for checker strategies, keyed by kind and name."""

    _checkers: dict[str, dict[str, type]] = {kind: {} for kind in CHECKER_BASES}

    @classmethod
    def register(cls, key: str, kind: str = USER) -> Callable[[type], type]:
        """Decorator to register a checker implementation.

        Usage:
            @CheckerRegistry.register("ldap")
            class LdapChecker(UserChecker):
                ...
        """

        def decorator(checker_class: type) -> type:
            cls.add(key, checker_class, kind)
            return checker_class

        return decorator

    @classmethod
    def add(cls, key: str, checker_class: type, kind: str = USER) -> None:
        """Register a checker class under a key.

        Raises:
            CheckerConfigurationError: If the kind is unknown or the class does
                not extend the kind's base checker.
        """
        base = _base_for(kind)
        if not isinstance(checker_class, type) or not issubclass(checker_class, base):
            raise CheckerConfigurationError(
                f"{kind.capitalize()} checker '{key}' must extend {base.__name__}, "
                f"got {checker_class!r}"
            )
        cls._checkers[kind][key] = checker_class
        logger.debug(f"Registered {kind} checker '{key}': {checker_class.__name__}")

    @classmethod
    def get(cls, key: str, kind: str = USER) -> type | None:
        """Get a checker class by key."""
        _base_for(kind)
        return cls._checkers[kind].get(key)

    @classmethod
    def remove(cls, key: str, kind: str = USER) -> None:
        """Remove a checker registration."""
        cls._checkers.get(kind, {}).pop(key, None)

    @classmethod
    def create(cls, key: str, model: Any, kind: str = USER) -> Any:
        """Create a checker instance for a subject, role or group.

        Raises:
            CheckerConfigurationError: If no checker is registered under the key.
        """
        checker_class = cls.get(key, kind)
        if checker_class is None:
            raise CheckerConfigurationError(
                f"Unknown {kind} checker '{key}', available: "
                f"{', '.join(cls.available_checkers(kind))}"
            )
        return checker_class(model)

    @classmethod
    def available_checkers(cls, kind: str = USER) -> list[str]:
        """Get list of registered checker keys."""
        return list(cls._checkers.get(kind, {}).keys())


def register_checker(key: str, checker_class: type, kind: str = USER) -> None:
    """Register a custom checker strategy."""
    CheckerRegistry.add(key, checker_class, kind)


def checker_key(kind: str, checker: str | None = None) -> str:
    """Strategy key for a kind: explicit, per-kind config, then global config."""
    if checker:
        return checker
    config = get_config()
    return config.checkers.get(kind) or config.checker


def get_user_checker(subject: Subject, checker: str | None = None) -> UserChecker:
    """Return the checker for a subject according to the configuration.

    Args:
        subject: The subject to check.
        checker: Strategy key, defaults to ``Config.checkers["user"]`` or
            ``Config.checker``.

    Returns:
        A checker bound to the subject.
    """
    return CheckerRegistry.create(checker_key(USER, checker), subject, USER)


def get_role_checker(role: Role, checker: str | None = None) -> RoleChecker:
    """Return the checker for a role according to the configuration."""
    return CheckerRegistry.create(checker_key(ROLE, checker), role, ROLE)


def get_group_checker(group: Group, checker: str | None = None) -> GroupChecker:
    """Return the checker for a group according to the configuration."""
    return CheckerRegistry.create(checker_key(GROUP, checker), group, GROUP)


CheckerRegistry.add("default", UserDefaultChecker, USER)
CheckerRegistry.add("query", UserQueryChecker, USER)
CheckerRegistry.add("default", RoleDefaultChecker, ROLE)
CheckerRegistry.add("query", RoleQueryChecker, ROLE)
CheckerRegistry.add("default", GroupDefaultChecker, GROUP)
CheckerRegistry.add("query", GroupQueryChecker, GROUP)
