"""Permission resolution: the single funnel every capability check goes through."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from talentgate.common.schema import Capability

if TYPE_CHECKING:
    from talentgate.common import PermissionSection, User

LOGGER = logging.getLogger(__name__)


def is_allowed(
    user: User,
    section: PermissionSection | Capability | str,
    capability: Capability | str | None = None,
) -> bool:
    """Check whether a user may use a capability.

    Roles above ``ASSOCIATE`` are always allowed. An ``ASSOCIATE`` is allowed
    only when their permission config grants the capability; a missing
    config denies everything.

    Either ``is_allowed(user, "evaluation", "can_view_pii")`` or
    ``is_allowed(user, Capability.VIEW_PII)`` may be used.

    :param user: The user to check
    :param section: The permission section, or a Capability
    :param capability: The capability key within ``section``
    :return: True if the capability is allowed, False otherwise
    :raises InvalidCapabilityError: If the pair is not part of the vocabulary
    """
    resolved = Capability.lookup(section, capability)

    if not user.role.is_restricted:
        return True

    if user.permissions_config is None:
        LOGGER.debug("User %s has no permission config, denying %s", user.id, resolved.key)
        return False

    allowed = user.permissions_config.get(resolved)
    LOGGER.debug(
        "User %s %s %s.%s",
        user.id,
        "granted" if allowed else "denied",
        resolved.section,
        resolved.key,
    )
    return allowed


def is_any_allowed(user: User, *capabilities: Capability) -> bool:
    """Check whether a user may use at least one of the given capabilities."""
    return any(is_allowed(user, capability) for capability in capabilities)


def allowed_capabilities(user: User) -> frozenset[Capability]:
    """Return every capability the user may use."""
    return frozenset(capability for capability in Capability if is_allowed(user, capability))
