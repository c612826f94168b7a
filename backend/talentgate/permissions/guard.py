"""Rendering guards built on top of the permission resolver.

A guard picks between an authorized view and a fallback view and returns the
chosen one exactly as given. With ``lazy=True`` views are zero-argument
callables and only the chosen one is called. ``None`` is the empty view.

Guards gate visibility only. They are not an enforcement boundary for
privileged writes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from talentgate.common.schema import Capability

from .resolver import is_allowed

if TYPE_CHECKING:
    from talentgate.common import PermissionSection, User


def _choose(allowed: bool, authorized_view: Any, fallback_view: Any, lazy: bool) -> Any:
    view = authorized_view if allowed else fallback_view
    if lazy and view is not None:
        return view()
    return view


def guard(
    user: User,
    section: PermissionSection | str,
    capability: Capability | str,
    authorized_view: Any,
    fallback_view: Any = None,
    *,
    lazy: bool = False,
) -> Any:
    """Return ``authorized_view`` if the capability is allowed, else ``fallback_view``.

    :param user: The user the view is rendered for
    :param section: The permission section
    :param capability: The capability key within ``section``
    :param authorized_view: View shown when the capability is allowed
    :param fallback_view: View shown otherwise, the empty view by default
    :param lazy: Treat views as zero-argument callables and call the chosen one
    :return: The chosen view, or the result of calling it when ``lazy``
    :raises InvalidCapabilityError: If the pair is not part of the vocabulary
    """
    return _choose(
        is_allowed(user, section, capability),
        authorized_view,
        fallback_view,
        lazy,
    )


@dataclass(frozen=True)
class Guard:
    """A reusable set of capabilities that must all be allowed.

    Combining guards with ``&`` behaves like nesting them: each requirement
    has to pass on its own.

    :param requirements: Capabilities required to render the authorized view
    """

    requirements: tuple[Capability, ...]

    def __post_init__(self) -> None:
        """Reject guards that would allow everything."""
        if not self.requirements:
            msg = "A guard needs at least one capability"
            raise ValueError(msg)

    @classmethod
    def require(
        cls,
        section: PermissionSection | Capability | str,
        capability: Capability | str | None = None,
    ) -> Guard:
        """Create a guard for a single capability."""
        return cls((Capability.lookup(section, capability),))

    @classmethod
    def all_of(cls, *capabilities: Capability) -> Guard:
        """Create a guard requiring every given capability."""
        return cls(tuple(Capability.lookup(capability) for capability in capabilities))

    def __and__(self, other: object) -> Guard:
        if not isinstance(other, Guard):
            return NotImplemented
        return Guard(self.requirements + other.requirements)

    def allows(self, user: User) -> bool:
        """Check whether every requirement is allowed for the user."""
        return all(is_allowed(user, capability) for capability in self.requirements)

    def render(
        self,
        user: User,
        authorized_view: Any,
        fallback_view: Any = None,
        *,
        lazy: bool = False,
    ) -> Any:
        """Return ``authorized_view`` if the guard allows the user, else ``fallback_view``."""
        return _choose(self.allows(user), authorized_view, fallback_view, lazy)
