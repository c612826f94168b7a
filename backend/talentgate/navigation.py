"""Navigation affordances derived from the permission resolver."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING

from talentgate.common import Capability
from talentgate.permissions import is_any_allowed

if TYPE_CHECKING:
    from talentgate.common import User

LOGGER = logging.getLogger(__name__)


class View(StrEnum):
    """Top-level views of the workspace."""

    INTERVIEWS = "interviews"
    LISTS = "lists"
    SETTINGS = "settings"


DEFAULT_VIEW = View.INTERVIEWS


def can_view_lists(user: User) -> bool:
    """Lists are shown to users holding either sourcing capability."""
    return is_any_allowed(
        user,
        Capability.CREATE_LISTS,
        Capability.VIEW_LIST_ANALYTICS,
    )


def can_manage_team(user: User) -> bool:
    """Team management is reserved for roles above ``ASSOCIATE``."""
    return not user.role.is_restricted


def available_views(user: User) -> tuple[View, ...]:
    """Return the views a user may navigate to, in sidebar order."""
    return tuple(
        view for view in View if view is not View.LISTS or can_view_lists(user)
    )


def resolve_view(user: User, requested: View | str) -> View:
    """Return the requested view, or the default one if it is not available.

    :param user: The user navigating
    :param requested: The view the user asked for
    :return: The view to show
    :raises ValueError: If ``requested`` does not name a view
    """
    requested = View(requested)
    if requested in available_views(user):
        return requested

    LOGGER.debug(
        "View %s not available for user %s, redirecting to %s",
        requested,
        user.id,
        DEFAULT_VIEW,
    )
    return DEFAULT_VIEW
