"""Checker that reads the subject's assignments on every query."""

from trustgate.checkers.base import UserChecker


class UserQueryChecker(UserChecker):
    """Checker without memoization.

    Every query walks the subject model again, so changes to the
    subject's roles, groups or permissions are visible immediately.
    """

    def get_current_user_roles(self) -> list[str]:
        return self.subject.effective_role_names()

    def get_current_user_groups(self) -> list[str]:
        return self.subject.effective_group_names()

    def get_current_user_permissions(self) -> list[str]:
        return self.subject.effective_permission_names()

    def flush_cache(self) -> None:
        pass
