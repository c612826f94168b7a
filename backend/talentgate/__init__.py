"""Role and capability based access control for agency workspaces."""

from .common import Capability, PermissionConfig, PermissionSection, Role, User
from .config import AppConfig, configure_logging, load_config_from_env
from .errors import InvalidCapabilityError, UnknownPresetError, UnknownUserError
from .permissions import (
    Guard,
    Preset,
    apply_preset,
    create_default_config,
    create_user,
    guard,
    is_allowed,
    toggle_permission,
)
from .session import Session

__all__ = [
    "AppConfig",
    "Capability",
    "Guard",
    "InvalidCapabilityError",
    "PermissionConfig",
    "PermissionSection",
    "Preset",
    "Role",
    "Session",
    "UnknownPresetError",
    "UnknownUserError",
    "User",
    "apply_preset",
    "configure_logging",
    "create_default_config",
    "create_user",
    "guard",
    "is_allowed",
    "load_config_from_env",
    "toggle_permission",
]
