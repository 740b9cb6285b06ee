"""FastAPI dependencies for role, permission and ability checks."""

import inspect
from enum import Enum
from typing import Any, Callable

from fastapi import Depends, HTTPException, Request, status
from loguru import logger

from trustgate.checkers.manager import get_user_checker
from trustgate.helpers import split_names, standardize
from trustgate.types import Subject

SubjectResolver = Callable[[Request, str | None], Any]

REQUIRE_ALL = "require_all"
GUARD_PREFIX = "guard:"

# Global subject resolver - will be set by the application
_subject_resolver: SubjectResolver | None = None


def set_subject_resolver(resolver: SubjectResolver | None) -> None:
    """Set the callable that returns the authenticated subject of a request.

    Args:
        resolver: Sync or async callable taking the request and the guard
            name (None for the default guard) and returning a Subject, or
            None for a guest.
    """
    global _subject_resolver
    _subject_resolver = resolver


async def get_current_subject(request: Request, guard: str | None = None) -> Subject | None:
    """Get the subject authenticated by a guard for the current request.

    Returns:
        The subject, or None for a guest.

    Raises:
        RuntimeError: If no subject resolver was installed.
    """
    if _subject_resolver is None:
        raise RuntimeError("Subject resolver not initialized")

    subject = _subject_resolver(request, guard)
    if inspect.isawaitable(subject):
        subject = await subject
    return subject


def parse_options(options: str | None) -> dict[str, Any]:
    """Parse a pipe-delimited option string such as ``"require_all|guard:api"``.

    Returns:
        Dict with ``require_all`` (bool) and ``guard`` (str or None).
    """
    parsed: dict[str, Any] = {"require_all": False, "guard": None}
    for part in split_names(options or ""):
        if part == REQUIRE_ALL:
            parsed["require_all"] = True
        elif part.startswith(GUARD_PREFIX):
            parsed["guard"] = part[len(GUARD_PREFIX) :] or None
    return parsed


def _names(value: Any) -> list[str]:
    if isinstance(value, str) and not isinstance(value, Enum):
        return split_names(value)
    return standardize(value, to_list=True)


def _guarded_subject(guard: str | None) -> Callable:
    async def current_subject(request: Request) -> Subject | None:
        return await get_current_subject(request, guard)

    return current_subject


def _unauthenticated() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
    )


def _forbidden(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=detail,
    )


def require_role(roles: Any, options: str | None = "") -> Callable:
    """Create a dependency that requires one (or all) of the given roles.

    Args:
        roles: Pipe-delimited role names, an enum member, or a list.
        options: Pipe-delimited options, ``require_all`` and ``guard:<name>``.

    Returns:
        Dependency function returning the subject when authorized.
    """
    role_names = _names(roles)
    parsed = parse_options(options)

    async def role_checker(subject: Subject | None = Depends(_guarded_subject(parsed["guard"]))) -> Subject:
        if subject is None:
            raise _unauthenticated()

        if not get_user_checker(subject).has_role(role_names, parsed["require_all"]):
            logger.warning(
                f"Role denied: subject {subject.id} lacks {'all' if parsed['require_all'] else 'any'} "
                f"of roles {role_names} (guard={parsed['guard']})"
            )
            raise _forbidden(f"Missing required role: {'|'.join(role_names)}")

        return subject

    return role_checker


def require_permission(permissions: Any, options: str | None = "") -> Callable:
    """Create a dependency that requires one (or all) of the given permissions.

    Args:
        permissions: Pipe-delimited permission names, an enum member, or a list.
        options: Pipe-delimited options, ``require_all`` and ``guard:<name>``.

    Returns:
        Dependency function returning the subject when authorized.
    """
    permission_names = _names(permissions)
    parsed = parse_options(options)

    async def permission_checker(
        subject: Subject | None = Depends(_guarded_subject(parsed["guard"])),
    ) -> Subject:
        if subject is None:
            raise _unauthenticated()

        if not get_user_checker(subject).has_permission(permission_names, parsed["require_all"]):
            logger.warning(
                f"Permission denied: subject {subject.id} lacks "
                f"{'all' if parsed['require_all'] else 'any'} of permissions "
                f"{permission_names} (guard={parsed['guard']})"
            )
            raise _forbidden(f"Missing required permission: {'|'.join(permission_names)}")

        return subject

    return permission_checker


def require_ability(roles: Any, permissions: Any, options: str | None = "") -> Callable:
    """Create a dependency that checks roles and permissions together.

    Without ``require_all`` one matching role or permission is enough;
    with it every role and every permission is required.

    Args:
        roles: Pipe-delimited role names, an enum member, or a list.
        permissions: Pipe-delimited permission names, an enum member, or a list.
        options: Pipe-delimited options, ``require_all`` and ``guard:<name>``.

    Returns:
        Dependency function returning the subject when authorized.
    """
    role_names = _names(roles)
    permission_names = _names(permissions)
    parsed = parse_options(options)

    async def ability_checker(subject: Subject | None = Depends(_guarded_subject(parsed["guard"]))) -> Subject:
        if subject is None:
            raise _unauthenticated()

        checker = get_user_checker(subject)
        if not checker.has_ability(
            role_names, permission_names, {"validate_all": parsed["require_all"]}
        ):
            logger.warning(
                f"Ability denied: subject {subject.id} roles={role_names} "
                f"permissions={permission_names} require_all={parsed['require_all']} "
                f"(guard={parsed['guard']})"
            )
            raise _forbidden("Insufficient role or permission")

        return subject

    return ability_checker
