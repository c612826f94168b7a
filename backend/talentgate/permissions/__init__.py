"""Permission resolution, guards and provisioning helpers."""

from .guard import Guard, guard
from .lifecycle import (
    create_default_config,
    create_user,
    generate_user_id,
    toggle_permission,
)
from .presets import Preset, apply_preset
from .resolver import allowed_capabilities, is_allowed, is_any_allowed

__all__ = [
    "Guard",
    "Preset",
    "allowed_capabilities",
    "apply_preset",
    "create_default_config",
    "create_user",
    "generate_user_id",
    "guard",
    "is_allowed",
    "is_any_allowed",
    "toggle_permission",
]
