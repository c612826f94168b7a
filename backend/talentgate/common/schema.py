"""Permission schema: sections, capabilities and the permission config model.

The vocabulary is closed. Every capability is a member of :class:`Capability`
bound to exactly one :class:`PermissionSection`, and a
:class:`PermissionConfig` always carries a value for every one of them.
"""

from __future__ import annotations

from enum import Enum, StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, StrictBool

from talentgate.errors import InvalidCapabilityError

if TYPE_CHECKING:
    from collections.abc import Iterable


class PermissionSection(StrEnum):
    """Named groups of related capabilities."""

    SOURCING = "sourcing"
    OPERATIONS = "operations"
    EVALUATION = "evaluation"
    ACTION = "action"


class Capability(Enum):
    """A single boolean permission, tagged with the section that owns it.

    :ivar section: The section the capability belongs to
    :ivar key: The capability key within its section
    :ivar label: Label shown next to the capability in the permission checklist
    """

    CREATE_LISTS = (PermissionSection.SOURCING, "can_create_lists", "Can Create Lists")
    VIEW_LIST_ANALYTICS = (
        PermissionSection.SOURCING,
        "can_view_list_analytics",
        "View List Analytics",
    )
    CREATE_INTERVIEWS = (
        PermissionSection.OPERATIONS,
        "can_create_interviews",
        "Create Interviews",
    )
    MANAGE_ACTIVE_INTERVIEWS = (
        PermissionSection.OPERATIONS,
        "can_manage_active_interviews",
        "Manage Active Interviews",
    )
    INVITE_CANDIDATES = (
        PermissionSection.OPERATIONS,
        "can_invite_candidates",
        "Invite Candidates",
    )
    VIEW_RESULTS_SUMMARY = (
        PermissionSection.EVALUATION,
        "can_view_results_summary",
        "View Results Summary (Charts)",
    )
    VIEW_DEEP_ANALYTICS = (
        PermissionSection.EVALUATION,
        "can_view_deep_analytics",
        "View Deep Analytics (Details)",
    )
    VIEW_PII = (PermissionSection.EVALUATION, "can_view_pii", "View PII (Phone/Email)")
    HIRE_REJECT = (PermissionSection.ACTION, "can_hire_reject", "Can Hire/Reject")

    def __init__(self, section: PermissionSection, key: str, label: str) -> None:
        self.section = section
        self.key = key
        self.label = label

    @classmethod
    def in_section(cls, section: PermissionSection | str) -> tuple[Capability, ...]:
        """Return the capabilities owned by a section, in declaration order.

        :param section: The section or its string value
        :raises InvalidCapabilityError: If the section is unknown
        """
        section = _parse_section(section)
        return tuple(capability for capability in cls if capability.section is section)

    @classmethod
    def lookup(
        cls,
        section: PermissionSection | Capability | str,
        key: Capability | str | None = None,
    ) -> Capability:
        """Resolve a ``(section, key)`` pair into a Capability.

        A bare Capability may be passed as the only argument.

        :param section: The section, its string value, or a Capability
        :param key: The capability key or member within ``section``
        :return: The matching Capability
        :raises InvalidCapabilityError: If the pair is not part of the vocabulary
        """
        if isinstance(section, Capability):
            if key is not None and key != section and key != section.key:
                msg = f"Capability {section.name} does not match key {key!r}"
                raise InvalidCapabilityError(msg)
            return section

        section = _parse_section(section)

        if isinstance(key, Capability):
            if key.section is not section:
                msg = f"Capability {key.key} does not belong to section {section}"
                raise InvalidCapabilityError(msg)
            return key

        capability = _CAPABILITIES_BY_PAIR.get((section, key))
        if capability is None:
            msg = f"Capability {key!r} does not belong to section {section}"
            raise InvalidCapabilityError(msg)
        return capability


_CAPABILITIES_BY_PAIR = {
    (capability.section, capability.key): capability for capability in Capability
}


def _parse_section(section: PermissionSection | str) -> PermissionSection:
    try:
        return PermissionSection(section)
    except ValueError as e:
        msg = f"Unknown permission section: {section!r}"
        raise InvalidCapabilityError(msg) from e


class _SectionPermissions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class SourcingPermissions(_SectionPermissions):
    """Capabilities for building and analysing candidate lists."""

    can_create_lists: StrictBool
    can_view_list_analytics: StrictBool


class OperationsPermissions(_SectionPermissions):
    """Capabilities for running interviews."""

    can_create_interviews: StrictBool
    can_manage_active_interviews: StrictBool
    can_invite_candidates: StrictBool


class EvaluationPermissions(_SectionPermissions):
    """Capabilities for viewing interview results and candidate details."""

    can_view_results_summary: StrictBool
    can_view_deep_analytics: StrictBool
    can_view_pii: StrictBool


class ActionPermissions(_SectionPermissions):
    """Capabilities for acting on candidates."""

    can_hire_reject: StrictBool


class PermissionConfig(BaseModel):
    """Fine-grained permission set held by an ``ASSOCIATE``.

    Every section and every key is required, so a partial or unknown-keyed
    payload fails validation instead of silently granting or denying.
    Instances are frozen; the ``with_*`` helpers return new configs.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    sourcing: SourcingPermissions
    operations: OperationsPermissions
    evaluation: EvaluationPermissions
    action: ActionPermissions

    @classmethod
    def default(cls) -> PermissionConfig:
        """Build the deny-all config."""
        return cls(
            sourcing=SourcingPermissions(
                can_create_lists=False,
                can_view_list_analytics=False,
            ),
            operations=OperationsPermissions(
                can_create_interviews=False,
                can_manage_active_interviews=False,
                can_invite_candidates=False,
            ),
            evaluation=EvaluationPermissions(
                can_view_results_summary=False,
                can_view_deep_analytics=False,
                can_view_pii=False,
            ),
            action=ActionPermissions(can_hire_reject=False),
        )

    @classmethod
    def from_capabilities(cls, granted: Iterable[Capability]) -> PermissionConfig:
        """Build a config granting exactly the given capabilities."""
        granted = frozenset(granted)
        return cls.model_validate(
            {
                section.value: {
                    capability.key: capability in granted
                    for capability in Capability.in_section(section)
                }
                for section in PermissionSection
            },
        )

    @classmethod
    def from_dict(cls, data: dict[str, dict[str, bool]]) -> PermissionConfig:
        """Validate a nested ``{section: {key: bool}}`` mapping.

        :raises pydantic.ValidationError: If any section or key is missing or unknown
        """
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, dict[str, bool]]:
        """Dump the config as a nested ``{section: {key: bool}}`` mapping."""
        return self.model_dump()

    def get(self, capability: Capability) -> bool:
        """Return the stored value for a capability."""
        return getattr(getattr(self, capability.section.value), capability.key)

    def with_value(self, capability: Capability, value: bool) -> PermissionConfig:
        """Return a copy with one capability set to ``value``."""
        section = getattr(self, capability.section.value)
        return self.model_copy(
            update={
                capability.section.value: section.model_copy(
                    update={capability.key: value},
                ),
            },
        )

    def granted(self) -> frozenset[Capability]:
        """Return every capability set to True."""
        return frozenset(capability for capability in Capability if self.get(capability))
