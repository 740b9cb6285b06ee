"""Default checker memoizing the subject's resolved names."""

from trustgate.checkers.base import UserChecker
from trustgate.config import get_config
from trustgate.types import Subject


class UserDefaultChecker(UserChecker):
    """Checker that resolves names once and reuses them until flushed."""

    def __init__(self, subject: Subject, cache_enabled: bool | None = None) -> None:
        super().__init__(subject)
        self.cache_enabled = get_config().cache_enabled if cache_enabled is None else cache_enabled
        self._roles: list[str] | None = None
        self._groups: list[str] | None = None
        self._permissions: list[str] | None = None

    def get_current_user_roles(self) -> list[str]:
        if not self.cache_enabled:
            return self.subject.effective_role_names()
        if self._roles is None:
            self._roles = self.subject.effective_role_names()
        return self._roles

    def get_current_user_groups(self) -> list[str]:
        if not self.cache_enabled:
            return self.subject.effective_group_names()
        if self._groups is None:
            self._groups = self.subject.effective_group_names()
        return self._groups

    def get_current_user_permissions(self) -> list[str]:
        if not self.cache_enabled:
            return self.subject.effective_permission_names()
        if self._permissions is None:
            self._permissions = self.subject.effective_permission_names()
        return self._permissions

    def flush_cache(self) -> None:
        self._roles = None
        self._groups = None
        self._permissions = None
