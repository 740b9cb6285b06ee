"""Ability resolution: combined role and permission checks."""

from typing import TYPE_CHECKING, Any, Mapping, NamedTuple

from loguru import logger

from trustgate.exceptions import InvalidOptionError
from trustgate.helpers import standardize
from trustgate.types import AbilityMap, AbilityResult, NameInput, ReturnType

if TYPE_CHECKING:
    from trustgate.checkers.base import CapabilitySource


class OptionSpec(NamedTuple):
    """Accepted values and default for a single option."""

    available: tuple[Any, ...]
    default: Any


ABILITY_OPTIONS: dict[str, OptionSpec] = {
    "validate_all": OptionSpec(available=(False, True), default=False),
    "return_type": OptionSpec(
        available=(ReturnType.BOOLEAN.value, ReturnType.ARRAY.value, ReturnType.BOTH.value),
        default=ReturnType.BOOLEAN.value,
    ),
}


def _is_member(value: Any, available: tuple[Any, ...]) -> bool:
    # Equal and of the same type: 1 is not True, "true" is not True
    return any(value == candidate and isinstance(value, type(candidate)) for candidate in available)


def validate_and_set_options(
    options: Mapping[str, Any] | None,
    schema: Mapping[str, OptionSpec],
) -> dict[str, Any]:
    """Fill in defaults and validate option values against a schema.

    Keys missing from ``options`` (or set to None) take the schema default.
    Keys not in the schema are passed through untouched.

    Args:
        options: Caller supplied options.
        schema: Accepted values and default per option.

    Returns:
        A new dict with every schema key set.

    Raises:
        InvalidOptionError: If a present value is not an accepted value.
    """
    result = dict(options or {})

    for option, spec in schema.items():
        if result.get(option) is None:
            result[option] = spec.default
            continue

        if not _is_member(result[option], spec.available):
            raise InvalidOptionError(option, result[option], list(spec.available))

    return result


def resolve_ability(
    roles: NameInput,
    permissions: NameInput,
    options: Mapping[str, Any] | None,
    source: "CapabilitySource",
) -> AbilityResult:
    """Check roles and permissions of a subject together.

    Args:
        roles: Role name(s) to check.
        permissions: Permission name(s) to check.
        options: ``validate_all`` (True/False) and ``return_type``
            ("boolean", "array" or "both").
        source: Capability source answering ``has_role`` and
            ``has_permission``.

    Returns:
        A bool for "boolean", an AbilityMap for "array", or a tuple of
        the aggregate bool and the AbilityMap for "both".

    Raises:
        InvalidOptionError: If an option value is not accepted.
        UnsupportedIdentifierError: If a name cannot be normalized.
    """
    role_names = standardize(roles, to_list=True)
    permission_names = standardize(permissions, to_list=True)

    options = validate_and_set_options(options, ABILITY_OPTIONS)
    validate_all = options["validate_all"]
    return_type = options["return_type"]

    if return_type == ReturnType.BOOLEAN:
        has_roles = source.has_role(role_names, validate_all)
        has_permissions = source.has_permission(permission_names, validate_all)

        if validate_all:
            return has_roles and has_permissions
        return has_roles or has_permissions

    checked_roles: dict[str, bool] = {}
    checked_permissions: dict[str, bool] = {}
    for role in role_names:
        checked_roles[role] = source.has_role(role)
    for permission in permission_names:
        checked_permissions[permission] = source.has_permission(permission)

    results = list(checked_roles.values()) + list(checked_permissions.values())
    if validate_all:
        aggregate = False not in results
    else:
        aggregate = True in results

    logger.debug(
        f"Ability resolved: roles={checked_roles} permissions={checked_permissions} "
        f"validate_all={validate_all} aggregate={aggregate}"
    )

    ability_map: AbilityMap = {"roles": checked_roles, "permissions": checked_permissions}
    if return_type == ReturnType.ARRAY:
        return ability_map
    return aggregate, ability_map
