"""Pytest configuration file for setting up test environment."""

import sys
from pathlib import Path

import pytest

# Add the backend directory to Python path so tests can import talentgate
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from talentgate.common import PermissionConfig, Role, User  # noqa: E402

RESTRICTED_ROLES = [Role.ASSOCIATE]
PRIVILEGED_ROLES = [Role.AGENCY_ADMIN, Role.MANAGER, Role.LEAD_RECRUITER]


def make_user(
    role: Role,
    config: PermissionConfig | None = None,
    user_id: str = "u-test",
) -> User:
    """Build a user with the given role and permission config."""
    return User(
        id=user_id,
        name="Test User",
        email="test.user@flowdot.ai",
        role=role,
        permissions_config=config,
    )


@pytest.fixture
def default_config() -> PermissionConfig:
    """Create a deny-all permission config."""
    return PermissionConfig.default()


@pytest.fixture
def associate(default_config: PermissionConfig) -> User:
    """Create an associate holding the deny-all config."""
    return make_user(Role.ASSOCIATE, default_config)


@pytest.fixture
def bare_associate() -> User:
    """Create an associate without any permission config."""
    return make_user(Role.ASSOCIATE)


@pytest.fixture(autouse=True)
def _clean_provisioning_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep provisioning defaults independent from the host environment."""
    for var in ("LOGGING_LEVEL", "EMAIL_DOMAIN", "AVATAR_BASE_URL"):
        monkeypatch.delenv(var, raising=False)
