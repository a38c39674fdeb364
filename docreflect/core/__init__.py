"""docreflect core: descriptors, signature building and fragment extraction."""

from docreflect.core.exceptions import (
    ConfigurationError,
    DocReflectError,
    MemberNotFoundError,
    ResourceNotFoundError,
)
from docreflect.core.resolver import ResolveError, resolve_class, resolve_function, resolve_target

__all__ = [
    "ConfigurationError",
    "DocReflectError",
    "MemberNotFoundError",
    "ResolveError",
    "ResourceNotFoundError",
    "resolve_class",
    "resolve_function",
    "resolve_target",
]
