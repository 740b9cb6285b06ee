"""Pytest configuration for TrustGate tests."""

import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

import pytest

from trustgate.types import Group, Permission, Role, Subject


@pytest.fixture
def mock_config():
    """Create a configuration for testing."""
    from trustgate.config import Config

    return Config(checker="default", cache_enabled=True, log_level="DEBUG")


@pytest.fixture
def admin_subject():
    """Subject with role admin and permission edit only."""
    return Subject(
        id=1,
        name="alice",
        roles=[Role(name="admin")],
        permissions=[Permission(name="edit")],
    )


@pytest.fixture
def staff_subject():
    """Subject with direct, role-granted and group-granted assignments."""
    writer = Role(
        name="writer",
        permissions=[Permission(name="posts.create"), Permission(name="posts.edit")],
    )
    moderator = Role(name="moderator", permissions=[Permission(name="comments.delete")])
    return Subject(
        id=2,
        name="bob",
        roles=[writer],
        groups=[
            Group(
                name="staff",
                roles=[moderator],
                permissions=[Permission(name="reports.view")],
            )
        ],
        permissions=[Permission(name="profile.update")],
    )
