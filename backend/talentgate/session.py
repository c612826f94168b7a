"""Session context owning the user registry and the current user selection."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from talentgate.common import PermissionConfig, Role, User
from talentgate.config import AppConfig
from talentgate.errors import UnknownUserError
from talentgate.permissions import (
    Preset,
    apply_preset,
    create_default_config,
    create_user,
    guard,
    is_allowed,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from talentgate.common import Capability, PermissionSection

LOGGER = logging.getLogger(__name__)


def seed_users(app_config: AppConfig | None = None) -> list[User]:
    """Build the demo roster of an agency workspace.

    :param app_config: Configuration for email and avatar derivation
    :return: A lead recruiter, a sourcing associate and an agency admin
    """
    app_config = app_config or AppConfig()
    return [
        User(
            id="u1",
            name="Sarah Jenkins",
            email=f"sarah@{app_config.email_domain}",
            role=Role.LEAD_RECRUITER,
            avatar=app_config.avatar_for("1"),
        ),
        User(
            id="u2",
            name="Mike Ross",
            email=f"mike@{app_config.email_domain}",
            role=Role.ASSOCIATE,
            parent_user_id="u1",
            avatar=app_config.avatar_for("2"),
            permissions_config=apply_preset(create_default_config(), Preset.SOURCING),
        ),
        User(
            id="u3",
            name="Jessica Pearson",
            email=f"jessica@{app_config.email_domain}",
            role=Role.AGENCY_ADMIN,
            avatar=app_config.avatar_for("3"),
        ),
    ]


class Session:
    """Holds the registered users and which of them is currently active.

    The registry is append-only and does not deduplicate users. All reads
    and writes go through a lock so a session can be shared between threads.
    """

    def __init__(
        self,
        users: Iterable[User],
        current_user_id: str | None = None,
        app_config: AppConfig | None = None,
    ) -> None:
        """Create a new session.

        :param users: Initial registry contents, must not be empty
        :param current_user_id: Id of the active user, the first user by default
        :param app_config: Configuration used when provisioning users
        :raises ValueError: If no users are given
        :raises UnknownUserError: If ``current_user_id`` is not registered
        """
        self._users = list(users)
        if not self._users:
            msg = "A session needs at least one user"
            raise ValueError(msg)

        self._lock = threading.Lock()
        self.app_config = app_config or AppConfig()
        self._current_user = (
            self._users[0]
            if current_user_id is None
            else self._find_user(current_user_id)
        )

    @classmethod
    def seeded(cls, app_config: AppConfig | None = None) -> Session:
        """Create a session over the demo roster with the lead recruiter active."""
        return cls(seed_users(app_config), app_config=app_config)

    @property
    def current_user(self) -> User:
        """The currently active user."""
        with self._lock:
            return self._current_user

    @property
    def users(self) -> tuple[User, ...]:
        """Snapshot of every registered user, in registration order."""
        with self._lock:
            return tuple(self._users)

    def get_user(self, user_id: str) -> User:
        """Return the registered user with the given id.

        :raises UnknownUserError: If no such user is registered
        """
        with self._lock:
            return self._find_user(user_id)

    def set_current_user(self, user: User | str) -> User:
        """Switch the active user.

        :param user: The user to activate, or its id
        :return: The newly active user
        :raises UnknownUserError: If the user is not registered
        """
        user_id = user.id if isinstance(user, User) else user
        with self._lock:
            self._current_user = self._find_user(user_id)
            LOGGER.info(
                "Switched current user to %s (%s)",
                self._current_user.id,
                self._current_user.role.name,
            )
            return self._current_user

    def add_user(self, user: User) -> None:
        """Append a user to the registry without any uniqueness checks."""
        with self._lock:
            self._users.append(user)
        LOGGER.info("Registered user %s (%s)", user.id, user.role.name)

    def provision_user(
        self,
        name: str,
        role: Role | str,
        config: PermissionConfig | None = None,
    ) -> User:
        """Create a user owned by the current user and register it.

        :param name: Display name of the new user
        :param role: Role of the new user
        :param config: Permission config, kept only for an ``ASSOCIATE``
        :return: The registered user
        """
        user = create_user(
            name,
            role,
            config,
            parent=self.current_user,
            app_config=self.app_config,
        )
        self.add_user(user)
        return user

    def is_allowed(
        self,
        section: PermissionSection | Capability | str,
        capability: Capability | str | None = None,
    ) -> bool:
        """Check a capability for the current user."""
        return is_allowed(self.current_user, section, capability)

    def guard(
        self,
        section: PermissionSection | str,
        capability: Capability | str,
        authorized_view: Any,
        fallback_view: Any = None,
        *,
        lazy: bool = False,
    ) -> Any:
        """Choose a guarded view for the current user."""
        return guard(
            self.current_user,
            section,
            capability,
            authorized_view,
            fallback_view,
            lazy=lazy,
        )

    def _find_user(self, user_id: str) -> User:
        for user in self._users:
            if user.id == user_id:
                return user
        msg = f"No user registered with id {user_id!r}"
        raise UnknownUserError(msg)
