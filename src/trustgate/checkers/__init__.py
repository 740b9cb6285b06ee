"""Checker strategies for TrustGate."""

from trustgate.checkers.base import CapabilitySource, UserChecker
from trustgate.checkers.default import UserDefaultChecker
from trustgate.checkers.group import GroupChecker, GroupDefaultChecker, GroupQueryChecker
from trustgate.checkers.manager import (
    CheckerRegistry,
    get_group_checker,
    get_role_checker,
    get_user_checker,
    register_checker,
)
from trustgate.checkers.query import UserQueryChecker
from trustgate.checkers.role import RoleChecker, RoleDefaultChecker, RoleQueryChecker

__all__ = [
    "CapabilitySource",
    "CheckerRegistry",
    "GroupChecker",
    "GroupDefaultChecker",
    "GroupQueryChecker",
    "RoleChecker",
    "RoleDefaultChecker",
    "RoleQueryChecker",
    "UserChecker",
    "UserDefaultChecker",
    "UserQueryChecker",
    "get_group_checker",
    "get_role_checker",
    "get_user_checker",
    "register_checker",
]
