"""Fundamental user data model for the agency workspace."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .roles import Role
from .schema import PermissionConfig

LOGGER = logging.getLogger(__name__)


class User(BaseModel):
    """A member of an agency workspace.

    A permission config is only meaningful for ``ASSOCIATE`` users. One passed
    for any other role is dropped on construction, since privileged roles are
    never restricted by fine-grained permissions.

    :param id: Unique identifier of the user
    :param name: Display name
    :param email: Contact email
    :param role: The user's role in the agency
    :param avatar: Optional avatar image URL
    :param parent_user_id: Id of the user who invited this one, if any
    :param permissions_config: Fine-grained permissions for an ``ASSOCIATE``
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    role: Role
    avatar: str | None = None
    parent_user_id: str | None = None
    permissions_config: PermissionConfig | None = None

    @field_validator("role", mode="before")
    @classmethod
    def _parse_role(cls, value: Any) -> Any:
        if isinstance(value, Role | int | str):
            return Role.parse(value)
        return value

    @model_validator(mode="before")
    @classmethod
    def _drop_config_for_privileged_roles(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("permissions_config") is None:
            return data

        try:
            role = Role.parse(data.get("role"))
        except (TypeError, ValueError):
            # left for field validation to report
            return data

        if role.is_restricted:
            return data

        LOGGER.warning(
            "Discarding permission config for %s user %s",
            role.name,
            data.get("id"),
        )
        return {**data, "permissions_config": None}
