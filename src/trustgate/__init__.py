"""TrustGate - role, group and permission checks for authenticated subjects."""

__version__ = "0.1.0"

import loguru

# Silent until the application opts in via setup_logger
loguru.logger.disable("trustgate")

from trustgate.ability import ABILITY_OPTIONS, resolve_ability, validate_and_set_options
from trustgate.checkers import (
    CapabilitySource,
    CheckerRegistry,
    GroupChecker,
    RoleChecker,
    UserChecker,
    UserDefaultChecker,
    UserQueryChecker,
    get_group_checker,
    get_role_checker,
    get_user_checker,
    register_checker,
)
from trustgate.config import Config
from trustgate.exceptions import (
    AccessControlError,
    CheckerConfigurationError,
    InvalidOptionError,
    UnsupportedIdentifierError,
)
from trustgate.helpers import standardize
from trustgate.logger import setup_logger
from trustgate.types import Group, Permission, ReturnType, Role, Subject

__all__ = [
    "__version__",
    "Config",
    "setup_logger",
    # Resolution
    "ABILITY_OPTIONS",
    "resolve_ability",
    "standardize",
    "validate_and_set_options",
    # Checkers
    "CapabilitySource",
    "CheckerRegistry",
    "GroupChecker",
    "RoleChecker",
    "UserChecker",
    "UserDefaultChecker",
    "UserQueryChecker",
    "get_group_checker",
    "get_role_checker",
    "get_user_checker",
    "register_checker",
    # Errors
    "AccessControlError",
    "CheckerConfigurationError",
    "InvalidOptionError",
    "UnsupportedIdentifierError",
    # Types
    "Group",
    "Permission",
    "ReturnType",
    "Role",
    "Subject",
]
