"""Core exception hierarchy for docreflect.

All docreflect exceptions inherit from DocReflectError for easy exception
handling. Only lookup failures are meant to reach callers; everything that
describes missing or malformed documentation is absorbed by the core and
rendered as degraded output instead.
"""

from __future__ import annotations

# ============================================================================
# Base Exception
# ============================================================================


class DocReflectError(Exception):
    """Base exception for all docreflect errors.

    Catch this to handle all docreflect errors.
    """

    pass


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(DocReflectError):
    """Raised when configuration is invalid or missing.

    Examples
    --------
    Example usage::

        raise ConfigurationError("logging", "unknown format 'xml'")
    """

    def __init__(self, component: str, reason: str) -> None:
        """Initialize configuration error.

        Args
        ----
            component: Name of the configuration section that is invalid
            reason: Explanation of what's wrong
        """
        super().__init__(f"Configuration error in '{component}': {reason}")
        self.component = component
        self.reason = reason


# ============================================================================
# Lookup Errors
# ============================================================================


class ResourceNotFoundError(DocReflectError):
    """Raised when a required resource cannot be found.

    Examples
    --------
    Example usage::

        raise ResourceNotFoundError("module", "myapp.services", ["myapp.models"])
    """

    def __init__(
        self, resource_type: str, resource_id: str, available: list[str] | None = None
    ) -> None:
        """Initialize resource not found error.

        Args
        ----
            resource_type: Type of resource (e.g., "module", "class", "member")
            resource_id: Identifier of the missing resource
            available: List of available resources (optional)
        """
        msg = f"{resource_type.title()} '{resource_id}' not found"
        if available:
            msg += f". Available: {', '.join(available[:5])}"
            if len(available) > 5:
                msg += f" ... and {len(available) - 5} more"
        super().__init__(msg)
        self.resource_type = resource_type
        self.resource_id = resource_id
        self.available = available


class MemberNotFoundError(ResourceNotFoundError):
    """Raised when a named member does not exist on the inspected type.

    This is the one lookup failure surfaced to callers: it indicates a
    programming error in the caller rather than a documentation gap.

    Examples
    --------
    Example usage::

        raise MemberNotFoundError("UserService", "reed", ["read", "write"])
    """

    def __init__(
        self, type_name: str, member_name: str, available: list[str] | None = None
    ) -> None:
        """Initialize member not found error.

        Args
        ----
            type_name: Name of the class that was searched
            member_name: Name of the missing member
            available: Member names that do exist (optional)
        """
        super().__init__("member", f"{type_name}.{member_name}", available)
        self.type_name = type_name
        self.member_name = member_name


# ============================================================================
# Metadata Errors
# ============================================================================


class DefaultValueUnavailableError(DocReflectError):
    """Raised when an optional parameter's default value cannot be read.

    Natively implemented routines declare optional parameters without exposing
    the literal default. The signature builder absorbs this error and simply
    omits the default suffix.
    """

    def __init__(self, parameter: str) -> None:
        super().__init__(f"Cannot determine default value for parameter '{parameter}'")
        self.parameter = parameter


__all__ = [
    "ConfigurationError",
    "DefaultValueUnavailableError",
    "DocReflectError",
    "MemberNotFoundError",
    "ResourceNotFoundError",
]
