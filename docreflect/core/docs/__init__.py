"""Reflective documentation extraction for docreflect.

This package extracts signatures and structured comment fragments from
code artifacts (classes, methods, free functions) through introspection.
"""

from docreflect.core.docs.extractors import DocExtractor
from docreflect.core.docs.fragments import extract_fragment, find_fragment
from docreflect.core.docs.generators import ReflectionDocGenerator
from docreflect.core.docs.models import (
    INFORMATION_NOT_AVAILABLE,
    FragmentFound,
    FragmentResult,
    FragmentUnavailable,
    MemberHandle,
    ParameterHandle,
)
from docreflect.core.docs.signatures import build_signature

__all__ = [
    "INFORMATION_NOT_AVAILABLE",
    "DocExtractor",
    "FragmentFound",
    "FragmentResult",
    "FragmentUnavailable",
    "MemberHandle",
    "ParameterHandle",
    "ReflectionDocGenerator",
    "build_signature",
    "extract_fragment",
    "find_fragment",
]
