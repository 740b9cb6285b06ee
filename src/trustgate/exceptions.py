"""Access control exceptions."""

from typing import Any


class AccessControlError(Exception):
    """Base access control exception."""

    pass


class InvalidOptionError(AccessControlError, ValueError):
    """Raised when an ability option has a value outside its accepted set."""

    def __init__(self, option: str, value: Any, available: list[Any] | None = None):
        self.option = option
        self.value = value
        self.available = available or []
        message = f"Invalid value {value!r} for option '{option}'"
        if self.available:
            message += f", expected one of {self.available!r}"
        super().__init__(message)


class UnsupportedIdentifierError(AccessControlError, TypeError):
    """Raised when a role, group or permission name cannot be rendered as a string."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Unsupported identifier of type {type(value).__name__}: {value!r}"
        )


class CheckerConfigurationError(AccessControlError, RuntimeError):
    """Raised when a checker strategy is unknown or does not extend UserChecker."""

    pass

