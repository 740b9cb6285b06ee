"""Name normalization for roles, groups and permissions."""

from enum import Enum
from typing import Any

from trustgate.exceptions import UnsupportedIdentifierError
from trustgate.types import EnumLike, Identifier, PlainName

NAME_DELIMITER = "|"


def to_identifier(value: Any, allow_enum: bool = True) -> Identifier:
    """Tag a single name as a plain string or an enum member.

    Args:
        value: A string or enum member.
        allow_enum: Whether enum members are accepted.

    Returns:
        The tagged identifier.

    Raises:
        UnsupportedIdentifierError: If the value cannot be used as a name.
    """
    # str-mixin enums are also str instances, so check Enum first
    if isinstance(value, Enum):
        if not allow_enum:
            raise UnsupportedIdentifierError(value)
        return EnumLike(value)
    if isinstance(value, str):
        return PlainName(value)
    raise UnsupportedIdentifierError(value)


def render_identifier(identifier: Identifier) -> str:
    """Render a tagged identifier to its canonical string form.

    Enum members backed by a string or integer render their value,
    any other member renders its symbolic name.
    """
    if isinstance(identifier, PlainName):
        return identifier.name
    value = identifier.member.value
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return str(value)
    return identifier.member.name


def standardize(value: Any, to_list: bool = False, allow_enum: bool = True) -> str | list[str]:
    """Convert a name, enum member or sequence of those into plain strings.

    Order and duplicates are preserved.

    Args:
        value: A string, an enum member, or a list/tuple of either.
        to_list: Wrap a single name in a list.
        allow_enum: Whether enum members are accepted.

    Returns:
        A list of names for sequence input or when ``to_list`` is set,
        otherwise the single name.

    Raises:
        UnsupportedIdentifierError: If any element cannot be rendered.
    """
    if isinstance(value, (list, tuple)):
        return [render_identifier(to_identifier(item, allow_enum)) for item in value]

    name = render_identifier(to_identifier(value, allow_enum))
    return [name] if to_list else name


def split_names(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Split a pipe-delimited name list such as ``"admin|editor"``.

    Empty segments are dropped. Lists are flattened element-wise.
    """
    if isinstance(value, (list, tuple)):
        names: list[str] = []
        for item in value:
            names.extend(split_names(item))
        return names
    if not isinstance(value, str):
        raise UnsupportedIdentifierError(value)
    return [part.strip() for part in value.split(NAME_DELIMITER) if part.strip()]
