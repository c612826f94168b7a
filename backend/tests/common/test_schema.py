"""Tests for the permission schema."""

import pytest
from pydantic import ValidationError

from talentgate.common import Capability, PermissionConfig, PermissionSection
from talentgate.errors import InvalidCapabilityError

EXPECTED_KEYS = {
    PermissionSection.SOURCING: {"can_create_lists", "can_view_list_analytics"},
    PermissionSection.OPERATIONS: {
        "can_create_interviews",
        "can_manage_active_interviews",
        "can_invite_candidates",
    },
    PermissionSection.EVALUATION: {
        "can_view_results_summary",
        "can_view_deep_analytics",
        "can_view_pii",
    },
    PermissionSection.ACTION: {"can_hire_reject"},
}


def test_capability_vocabulary() -> None:
    """Test that every section owns exactly its closed set of keys."""
    for section, keys in EXPECTED_KEYS.items():
        assert {c.key for c in Capability.in_section(section)} == keys
    assert len(Capability) == 9


def test_config_fields_match_capabilities(default_config: PermissionConfig) -> None:
    """Test that the config model and the capability enum describe the same keys."""
    assert set(default_config.to_dict()) == {s.value for s in PermissionSection}
    for section, keys in EXPECTED_KEYS.items():
        assert set(default_config.to_dict()[section.value]) == keys


def test_default_config_denies_everything(default_config: PermissionConfig) -> None:
    """Test that the default config is all False."""
    assert default_config.granted() == frozenset()
    for section in default_config.to_dict().values():
        assert not any(section.values())


def test_lookup() -> None:
    """Test resolving section and key pairs."""
    assert Capability.lookup("evaluation", "can_view_pii") is Capability.VIEW_PII
    assert (
        Capability.lookup(PermissionSection.ACTION, "can_hire_reject")
        is Capability.HIRE_REJECT
    )
    assert Capability.lookup(Capability.CREATE_LISTS) is Capability.CREATE_LISTS
    assert (
        Capability.lookup("sourcing", Capability.CREATE_LISTS)
        is Capability.CREATE_LISTS
    )


@pytest.mark.parametrize(
    ("section", "key"),
    [
        ("sourcing", "can_view_pii"),
        ("evaluation", "can_create_lists"),
        ("billing", "can_view_invoices"),
        ("action", "can_fire"),
        ("operations", None),
        ("evaluation", Capability.HIRE_REJECT),
    ],
)
def test_lookup_invalid_pair(section: str, key: object) -> None:
    """Test that pairs outside the vocabulary are rejected."""
    with pytest.raises(InvalidCapabilityError):
        Capability.lookup(section, key)


def test_labels() -> None:
    """Test checklist labels."""
    assert Capability.VIEW_PII.label == "View PII (Phone/Email)"
    assert Capability.HIRE_REJECT.label == "Can Hire/Reject"


def test_from_dict_requires_every_key(default_config: PermissionConfig) -> None:
    """Test that partial configs are rejected."""
    data = default_config.to_dict()
    del data["evaluation"]["can_view_pii"]
    with pytest.raises(ValidationError):
        PermissionConfig.from_dict(data)

    data = default_config.to_dict()
    del data["action"]
    with pytest.raises(ValidationError):
        PermissionConfig.from_dict(data)


def test_from_dict_rejects_unknown_keys(default_config: PermissionConfig) -> None:
    """Test that unknown sections and keys are rejected."""
    data = default_config.to_dict()
    data["sourcing"]["can_delete_lists"] = True
    with pytest.raises(ValidationError):
        PermissionConfig.from_dict(data)

    data = default_config.to_dict()
    data["billing"] = {}
    with pytest.raises(ValidationError):
        PermissionConfig.from_dict(data)


def test_from_dict_rejects_non_booleans(default_config: PermissionConfig) -> None:
    """Test that capability values must be real booleans."""
    data = default_config.to_dict()
    data["action"]["can_hire_reject"] = "yes"
    with pytest.raises(ValidationError):
        PermissionConfig.from_dict(data)


def test_from_dict_round_trip(default_config: PermissionConfig) -> None:
    """Test that a dumped config validates back to an equal config."""
    config = default_config.with_value(Capability.VIEW_PII, True)
    assert PermissionConfig.from_dict(config.to_dict()) == config


def test_with_value_leaves_original_untouched(default_config: PermissionConfig) -> None:
    """Test that configs are immutable values."""
    updated = default_config.with_value(Capability.CREATE_INTERVIEWS, True)

    assert updated.get(Capability.CREATE_INTERVIEWS)
    assert not default_config.get(Capability.CREATE_INTERVIEWS)
    assert updated.granted() == {Capability.CREATE_INTERVIEWS}


def test_config_is_frozen(default_config: PermissionConfig) -> None:
    """Test that configs cannot be mutated in place."""
    with pytest.raises(ValidationError):
        default_config.sourcing.can_create_lists = True


def test_from_capabilities() -> None:
    """Test building a config from granted capabilities."""
    config = PermissionConfig.from_capabilities(
        [Capability.VIEW_PII, Capability.HIRE_REJECT],
    )
    assert config.granted() == {Capability.VIEW_PII, Capability.HIRE_REJECT}
