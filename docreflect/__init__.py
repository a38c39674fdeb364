"""docreflect - documentation and call signatures through runtime introspection.

Signatures are rebuilt from reflective metadata and backfilled from
structured XML fragments embedded in docstrings.
"""

try:
    from importlib.metadata import version

    __version__ = version("docreflect")
except Exception:
    __version__ = "0.0.0.dev0"  # Fallback for development installs

from docreflect.core.docs import (
    INFORMATION_NOT_AVAILABLE,
    DocExtractor,
    MemberHandle,
    ParameterHandle,
    ReflectionDocGenerator,
    build_signature,
    extract_fragment,
)
from docreflect.core.exceptions import DocReflectError, MemberNotFoundError

__all__ = [
    "INFORMATION_NOT_AVAILABLE",
    "DocExtractor",
    "DocReflectError",
    "MemberHandle",
    "MemberNotFoundError",
    "ParameterHandle",
    "ReflectionDocGenerator",
    "__version__",
    "build_signature",
    "extract_fragment",
]
