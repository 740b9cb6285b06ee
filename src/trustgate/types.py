"""Core type definitions for TrustGate."""

from dataclasses import dataclass
from enum import Enum
from typing import TypedDict, Union

from pydantic import BaseModel, Field


class ReturnType(str, Enum):
    """Result shape of an ability check."""

    BOOLEAN = "boolean"
    ARRAY = "array"
    BOTH = "both"


class AbilityMap(TypedDict):
    """Individual results of an ability check, keyed by name."""

    roles: dict[str, bool]
    permissions: dict[str, bool]


AbilityResult = Union[bool, AbilityMap, tuple[bool, AbilityMap]]


# ============================================
# Identifiers
# ============================================


@dataclass(frozen=True)
class PlainName:
    """An identifier given as a plain string."""

    name: str


@dataclass(frozen=True)
class EnumLike:
    """An identifier given as an enum member."""

    member: Enum


Identifier = Union[PlainName, EnumLike]

# Accepted input forms for role, group and permission names
NameInput = Union[str, Enum, list[Union[str, Enum]], tuple[Union[str, Enum], ...]]


# ============================================
# Subject Model
# ============================================


class Permission(BaseModel):
    """A named permission."""

    name: str
    display_name: str | None = None
    description: str | None = None


class Role(BaseModel):
    """A named role carrying a set of permissions."""

    name: str
    display_name: str | None = None
    description: str | None = None
    permissions: list[Permission] = Field(default_factory=list)

    def effective_permission_names(self) -> list[str]:
        return _unique(permission.name for permission in self.permissions)


class Group(BaseModel):
    """A group of subjects sharing roles and permissions."""

    name: str
    display_name: str | None = None
    description: str | None = None
    roles: list[Role] = Field(default_factory=list)
    permissions: list[Permission] = Field(default_factory=list)

    def effective_role_names(self) -> list[str]:
        return _unique(role.name for role in self.roles)

    def effective_permission_names(self) -> list[str]:
        """Group permissions followed by those granted through its roles."""
        names = [permission.name for permission in self.permissions]
        for role in self.roles:
            names.extend(role.effective_permission_names())
        return _unique(names)


class Subject(BaseModel):
    """An authenticated subject and its assignments."""

    id: int | str | None = None
    name: str | None = None
    roles: list[Role] = Field(default_factory=list)
    groups: list[Group] = Field(default_factory=list)
    permissions: list[Permission] = Field(default_factory=list)

    def effective_role_names(self) -> list[str]:
        """Names of direct roles followed by roles inherited from groups."""
        names = [role.name for role in self.roles]
        for group in self.groups:
            names.extend(group.effective_role_names())
        return _unique(names)

    def effective_group_names(self) -> list[str]:
        """Names of the groups the subject belongs to."""
        return _unique(group.name for group in self.groups)

    def effective_permission_names(self) -> list[str]:
        """Direct, role-granted and group-granted permission names."""
        names = [permission.name for permission in self.permissions]
        for role in self.roles:
            names.extend(role.effective_permission_names())
        for group in self.groups:
            names.extend(group.effective_permission_names())
        return _unique(names)


def _unique(names) -> list[str]:
    return list(dict.fromkeys(names))
