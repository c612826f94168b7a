"""Custom exceptions for the access-control engine."""


class InvalidCapabilityError(ValueError):
    """Raised when a section or capability is outside the permission vocabulary.

    Also raised when a capability is requested under a section it does not
    belong to, so misuse surfaces in testing instead of reading as a denial.
    """

    pass


class UnknownPresetError(ValueError):
    """Raised when a permission preset name is not recognized."""

    pass


class UnknownUserError(LookupError):
    """Raised when a session is asked for a user id it does not hold."""

    pass
