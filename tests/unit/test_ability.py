"""Unit tests for option validation and ability resolution."""

from enum import Enum

import pytest

from trustgate.ability import (
    ABILITY_OPTIONS,
    OptionSpec,
    resolve_ability,
    validate_and_set_options,
)
from trustgate.checkers.query import UserQueryChecker
from trustgate.exceptions import InvalidOptionError, UnsupportedIdentifierError
from trustgate.types import Permission, ReturnType, Role, Subject


class RoleName(str, Enum):
    ADMIN = "admin"
    EDITOR = "editor"


class RecordingSource:
    """Capability source backed by fixed name sets, recording every call."""

    def __init__(self, roles=(), permissions=(), empty_list_result=True):
        self.roles = set(roles)
        self.permissions = set(permissions)
        self.empty_list_result = empty_list_result
        self.role_calls = []
        self.permission_calls = []

    def _check(self, names, owned, require_all):
        if isinstance(names, str):
            return names in owned
        if not names:
            return self.empty_list_result
        if require_all:
            return all(name in owned for name in names)
        return any(name in owned for name in names)

    def has_role(self, name, require_all=False):
        self.role_calls.append((name, require_all))
        return self._check(name, self.roles, require_all)

    def has_group(self, name, require_all=False):
        return False

    def has_permission(self, name, require_all=False):
        self.permission_calls.append((name, require_all))
        return self._check(name, self.permissions, require_all)

    def flush_cache(self):
        pass


@pytest.fixture
def source():
    return RecordingSource(roles={"admin"}, permissions={"edit"})


class TestValidateAndSetOptions:
    """Test validate_and_set_options function."""

    def test_defaults_filled(self):
        assert validate_and_set_options({}, ABILITY_OPTIONS) == {
            "validate_all": False,
            "return_type": "boolean",
        }

    def test_none_options(self):
        result = validate_and_set_options(None, ABILITY_OPTIONS)
        assert result["validate_all"] is False
        assert result["return_type"] == "boolean"

    def test_none_value_takes_default(self):
        result = validate_and_set_options({"validate_all": None}, ABILITY_OPTIONS)
        assert result["validate_all"] is False

    def test_valid_values_kept(self):
        result = validate_and_set_options(
            {"validate_all": True, "return_type": "both"}, ABILITY_OPTIONS
        )
        assert result == {"validate_all": True, "return_type": "both"}

    def test_enum_return_type_accepted(self):
        result = validate_and_set_options({"return_type": ReturnType.ARRAY}, ABILITY_OPTIONS)
        assert result["return_type"] == "array"

    def test_unknown_keys_pass_through(self):
        result = validate_and_set_options({"guard": "api", "extra": [1]}, ABILITY_OPTIONS)
        assert result["guard"] == "api"
        assert result["extra"] == [1]

    def test_input_not_mutated(self):
        options = {"validate_all": True}
        validate_and_set_options(options, ABILITY_OPTIONS)
        assert options == {"validate_all": True}

    def test_invalid_return_type(self):
        with pytest.raises(InvalidOptionError) as exc_info:
            validate_and_set_options({"return_type": "xml"}, ABILITY_OPTIONS)
        assert exc_info.value.option == "return_type"
        assert exc_info.value.value == "xml"

    @pytest.mark.parametrize("value", [1, 0, "true", "yes"])
    def test_validate_all_requires_bool(self, value):
        """Values merely equal to True/False are rejected."""
        with pytest.raises(InvalidOptionError):
            validate_and_set_options({"validate_all": value}, ABILITY_OPTIONS)

    def test_invalid_option_is_value_error(self):
        with pytest.raises(ValueError):
            validate_and_set_options({"return_type": "BOOLEAN"}, ABILITY_OPTIONS)

    def test_custom_schema(self):
        schema = {"mode": OptionSpec(available=("fast", "slow"), default="fast")}
        assert validate_and_set_options({}, schema) == {"mode": "fast"}
        with pytest.raises(InvalidOptionError):
            validate_and_set_options({"mode": "medium"}, schema)


class TestResolveBoolean:
    """Test the boolean result shape."""

    def test_any_mode_role_matches(self, source):
        assert resolve_ability(["admin", "editor"], ["delete"], {}, source) is True

    def test_any_mode_nothing_matches(self, source):
        assert resolve_ability(["editor"], ["delete"], {}, source) is False

    def test_all_mode_missing_role(self, source):
        options = {"validate_all": True}
        assert resolve_ability(["admin", "editor"], ["edit"], options, source) is False

    def test_all_mode_everything_matches(self, source):
        options = {"validate_all": True}
        assert resolve_ability("admin", "edit", options, source) is True

    def test_one_combined_call_per_list(self, source):
        resolve_ability(["admin", "editor"], ["edit", "delete"], {"validate_all": True}, source)
        assert source.role_calls == [(["admin", "editor"], True)]
        assert source.permission_calls == [(["edit", "delete"], True)]

    def test_single_string_normalized_to_list(self, source):
        resolve_ability("admin", "edit", {}, source)
        assert source.role_calls == [(["admin"], False)]
        assert source.permission_calls == [(["edit"], False)]

    def test_enum_names(self, source):
        assert resolve_ability(RoleName.ADMIN, [], {"validate_all": True}, source) is True

    @pytest.mark.parametrize(
        "roles, permissions",
        [
            (["editor"], ["delete"]),
            (["admin"], ["delete"]),
            (["editor"], ["edit"]),
        ],
    )
    def test_adding_satisfied_requirement_never_denies(self, source, roles, permissions):
        before = resolve_ability(roles, permissions, {}, source)
        after_role = resolve_ability(roles + ["admin"], permissions, {}, source)
        after_permission = resolve_ability(roles, permissions + ["edit"], {}, source)
        assert after_role >= before
        assert after_permission >= before
        assert after_role is True
        assert after_permission is True


class TestResolveArray:
    """Test the array and both result shapes."""

    def test_array_scenario(self, source):
        result = resolve_ability(
            ["admin", "editor"],
            ["edit", "delete"],
            {"validate_all": False, "return_type": "array"},
            source,
        )
        assert result == {
            "roles": {"admin": True, "editor": False},
            "permissions": {"edit": True, "delete": False},
        }

    def test_both_scenario_validate_all(self, source):
        aggregate, ability_map = resolve_ability(
            ["admin", "editor"],
            ["edit", "delete"],
            {"validate_all": True, "return_type": "both"},
            source,
        )
        assert aggregate is False
        assert ability_map == {
            "roles": {"admin": True, "editor": False},
            "permissions": {"edit": True, "delete": False},
        }

    def test_both_any_mode(self, source):
        aggregate, _ = resolve_ability(
            ["editor"], ["edit"], {"return_type": "both"}, source
        )
        assert aggregate is True

    def test_both_all_mode_satisfied(self, source):
        aggregate, _ = resolve_ability(
            "admin", "edit", {"validate_all": True, "return_type": ReturnType.BOTH}, source
        )
        assert aggregate is True

    def test_items_queried_individually(self, source):
        resolve_ability(["admin", "editor"], ["edit"], {"return_type": "array"}, source)
        assert source.role_calls == [("admin", False), ("editor", False)]
        assert source.permission_calls == [("edit", False)]

    def test_order_follows_input(self, source):
        result = resolve_ability(
            ["editor", "admin", "viewer"], [], {"return_type": "array"}, source
        )
        assert list(result["roles"]) == ["editor", "admin", "viewer"]

    def test_duplicates_collapse_into_one_key(self, source):
        result = resolve_ability(
            ["admin", RoleName.ADMIN, "admin"], [], {"return_type": "array"}, source
        )
        assert result["roles"] == {"admin": True}
        assert len(source.role_calls) == 3

    def test_empty_array(self, source):
        result = resolve_ability([], [], {"return_type": "array"}, source)
        assert result == {"roles": {}, "permissions": {}}

    def test_empty_both_validate_all(self, source):
        aggregate, ability_map = resolve_ability(
            [], [], {"validate_all": True, "return_type": "both"}, source
        )
        assert aggregate is True
        assert ability_map == {"roles": {}, "permissions": {}}

    def test_empty_both_any_mode(self, source):
        aggregate, _ = resolve_ability([], [], {"validate_all": False, "return_type": "both"}, source)
        assert aggregate is False


class TestResolveErrors:
    """Test failures during resolution."""

    def test_invalid_return_type_raises_before_querying(self, source):
        with pytest.raises(InvalidOptionError):
            resolve_ability(["admin"], ["edit"], {"return_type": "xml"}, source)
        assert source.role_calls == []
        assert source.permission_calls == []

    def test_invalid_identifier(self, source):
        with pytest.raises(UnsupportedIdentifierError):
            resolve_ability([1, 2], ["edit"], {}, source)


class TestBooleanAndArrayDivergence:
    """The boolean path asks about whole lists, the array/both path about single names."""

    def test_empty_requirements_differ_in_any_mode(self):
        source = RecordingSource(roles={"admin"}, permissions={"edit"}, empty_list_result=True)
        boolean_result = resolve_ability([], [], {}, source)
        aggregate, _ = resolve_ability([], [], {"return_type": "both"}, source)
        assert boolean_result is True
        assert aggregate is False

    def test_empty_roles_with_missing_permission(self):
        """An empty role list satisfies the boolean "any" check on its own."""
        source = RecordingSource(roles={"admin"}, permissions={"edit"}, empty_list_result=True)
        assert resolve_ability([], ["delete"], {}, source) is True
        aggregate, _ = resolve_ability([], ["delete"], {"return_type": "both"}, source)
        assert aggregate is False

    def test_boolean_path_depends_on_source_for_empty_lists(self):
        source = RecordingSource(empty_list_result=False)
        assert resolve_ability([], [], {}, source) is False

    def test_with_query_checker(self):
        subject = Subject(id=7, roles=[Role(name="admin")], permissions=[Permission(name="edit")])
        checker = UserQueryChecker(subject)
        assert resolve_ability([], [], {}, checker) is True
        assert resolve_ability([], [], {"return_type": "both"}, checker)[0] is False
