"""Role hierarchy for agency members."""

from __future__ import annotations

from enum import IntEnum


class Role(IntEnum):
    """Agency roles, lower values carry more privilege.

    Only ``ASSOCIATE`` is restricted by fine-grained permissions, every other
    role is granted every capability.
    """

    AGENCY_ADMIN = 0
    MANAGER = 1
    LEAD_RECRUITER = 2
    ASSOCIATE = 3

    def check_permission(self, required_role: Role) -> bool:
        """Check if the current role is at least as privileged as the required role.

        :param required_role: The least privileged role that is accepted
        :return: True if the current role has permission, False otherwise
        """
        return self.value <= required_role.value

    @property
    def is_restricted(self) -> bool:
        """Whether access for this role is read from a permission config."""
        return self is Role.ASSOCIATE

    @property
    def label(self) -> str:
        """Human readable role name, e.g. ``LEAD RECRUITER``."""
        return self.name.replace("_", " ", 1)

    @classmethod
    def parse(cls, value: Role | int | str) -> Role:
        """Convert a role name or integer value into a Role.

        :param value: A Role, its integer value, or its name (case-insensitive)
        :return: The matching Role
        :raises ValueError: If the value does not name a role
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper().replace(" ", "_")]
            except KeyError as e:
                msg = f"Unknown role: {value}"
                raise ValueError(msg) from e
        return cls(value)
