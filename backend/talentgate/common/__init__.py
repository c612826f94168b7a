"""Common data models for the application."""

from .roles import Role
from .schema import (
    ActionPermissions,
    Capability,
    EvaluationPermissions,
    OperationsPermissions,
    PermissionConfig,
    PermissionSection,
    SourcingPermissions,
)
from .user import User

__all__ = [
    "ActionPermissions",
    "Capability",
    "EvaluationPermissions",
    "OperationsPermissions",
    "PermissionConfig",
    "PermissionSection",
    "Role",
    "SourcingPermissions",
    "User",
]
