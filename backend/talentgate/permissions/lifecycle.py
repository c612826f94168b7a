"""Provisioning helpers for users and their permission configs.

Every function here returns a new value; committing it to the registry is
left to :class:`talentgate.session.Session`.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from talentgate.common import Capability, PermissionConfig, Role, User
from talentgate.config import AppConfig

if TYPE_CHECKING:
    from talentgate.common import PermissionSection

LOGGER = logging.getLogger(__name__)

DEFAULT_USER_NAME = "New Member"


def create_default_config() -> PermissionConfig:
    """Return the deny-all permission config for a new associate."""
    return PermissionConfig.default()


def toggle_permission(
    config: PermissionConfig,
    section: PermissionSection | str,
    capability: Capability | str,
) -> PermissionConfig:
    """Flip exactly one capability, leaving every other entry unchanged.

    :param config: The config to start from, left untouched
    :param section: The permission section
    :param capability: The capability key within ``section``
    :return: A new config
    :raises InvalidCapabilityError: If the pair is not part of the vocabulary
    """
    resolved = Capability.lookup(section, capability)
    return config.with_value(resolved, not config.get(resolved))


def generate_user_id() -> str:
    """Generate a fresh user identifier."""
    return f"u{uuid.uuid4().hex}"


def create_user(
    name: str | None,
    role: Role | str,
    config: PermissionConfig | None = None,
    *,
    parent: User | None = None,
    app_config: AppConfig | None = None,
) -> User:
    """Create a new user with a freshly generated identity.

    The permission config is attached only for ``ASSOCIATE`` users, who get
    the deny-all config when none is given. For any other role the config
    is discarded.

    :param name: Display name of the new user, ``New Member`` when blank
    :param role: Role of the new user
    :param config: Permission config for an ``ASSOCIATE``
    :param parent: The user provisioning the new one, recorded as its parent
    :param app_config: Configuration for email and avatar derivation
    :return: The new user, not yet registered anywhere
    :raises ValueError: If the role is unknown
    """
    name = (name or "").strip() or DEFAULT_USER_NAME

    role = Role.parse(role)
    app_config = app_config or AppConfig()

    if role.is_restricted:
        config = config if config is not None else create_default_config()
    elif config is not None:
        LOGGER.debug("Ignoring permission config for new %s %s", role.name, name)
        config = None

    user_id = generate_user_id()
    user = User(
        id=user_id,
        name=name,
        email=app_config.email_for(name),
        role=role,
        avatar=app_config.avatar_for(user_id),
        parent_user_id=parent.id if parent else None,
        permissions_config=config,
    )
    LOGGER.info("Created %s user %s (%s)", role.name, user.id, user.email)
    return user
