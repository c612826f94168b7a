"""Named permission bundles applied in one step."""

from __future__ import annotations

from enum import StrEnum

from talentgate.common.schema import Capability, PermissionConfig
from talentgate.errors import UnknownPresetError


class Preset(StrEnum):
    """Predefined permission profiles for new associates.

    :cvar SOURCING: Sourcing specialist, may build and analyse candidate lists
    :cvar REVIEWER: Reviewer, may view results summaries and deep analytics
    :cvar CUSTOM: No preset, permissions are toggled by hand
    """

    SOURCING = "SOURCING"
    REVIEWER = "REVIEWER"
    CUSTOM = "CUSTOM"

    @property
    def capabilities(self) -> frozenset[Capability]:
        """Capabilities the preset grants on top of the deny-all config."""
        return _PRESET_CAPABILITIES[self]

    @classmethod
    def parse(cls, value: Preset | str) -> Preset:
        """Convert a preset name (case-insensitive) into a Preset.

        :raises UnknownPresetError: If the name is not a preset
        """
        try:
            return cls(value.upper())
        except (AttributeError, ValueError) as e:
            msg = f"Unknown permission preset: {value!r}"
            raise UnknownPresetError(msg) from e


_PRESET_CAPABILITIES = {
    Preset.SOURCING: frozenset(
        {Capability.CREATE_LISTS, Capability.VIEW_LIST_ANALYTICS},
    ),
    Preset.REVIEWER: frozenset(
        {Capability.VIEW_RESULTS_SUMMARY, Capability.VIEW_DEEP_ANALYTICS},
    ),
    Preset.CUSTOM: frozenset(),
}


def apply_preset(config: PermissionConfig, preset: Preset | str) -> PermissionConfig:
    """Apply a preset to a permission config.

    ``SOURCING`` and ``REVIEWER`` start over from the deny-all config, so
    capabilities toggled by hand are discarded. ``CUSTOM`` keeps ``config``
    as it is.

    :param config: The config currently being edited
    :param preset: The preset or its name
    :return: A new config
    :raises UnknownPresetError: If the preset name is unknown
    """
    preset = Preset.parse(preset)
    if preset is Preset.CUSTOM:
        return config.model_copy(deep=True)
    return PermissionConfig.from_capabilities(preset.capabilities)
