"""Custom exception hierarchy for rolecalc.

Every error raised by the engine derives from :class:`RoleCalcError` so a
host application can catch them in one place, while ``error_type`` gives a
stable machine-readable tag for audit logs.
"""

from __future__ import annotations


class RoleCalcError(Exception):
    """Base exception for all rolecalc errors."""

    error_type: str = "internal_error"

    def __init__(self, message: str = "An internal error occurred") -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(RoleCalcError, ValueError):
    """Invalid construction options."""

    error_type = "configuration_error"


class InheritanceDepthError(RoleCalcError):
    """Closure computation did not reach a fixed point within the depth limit.

    Raised for inheritance chains deeper than the limit.
    """

    error_type = "inheritance_depth_exceeded"

    def __init__(self, role: str, limit: int) -> None:
        self.role = role
        self.limit = limit
        super().__init__(
            f"could not flatten roles: inheritance depth of {limit} levels was exceeded"
        )


class InvalidRolesError(RoleCalcError, TypeError):
    """A role collection was falsy or of an unsupported shape."""

    error_type = "invalid_roles"
