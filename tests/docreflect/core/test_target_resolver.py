"""Tests for dotted path resolution."""

from collections import OrderedDict

import pytest
import sample_api

from docreflect.core.exceptions import DocReflectError
from docreflect.core.resolver import (
    ResolveError,
    resolve_class,
    resolve_function,
    resolve_target,
)


class TestResolveClass:
    """Tests for resolve_class."""

    def test_stdlib_class(self):
        """Test resolving a standard library class."""
        assert resolve_class("collections.OrderedDict") is OrderedDict

    def test_test_module_class(self):
        """Test resolving a class from an importable module."""
        assert resolve_class("sample_api.UserService") is sample_api.UserService

    def test_requires_dotted_path(self):
        """Test that bare names are rejected."""
        with pytest.raises(ResolveError, match="full module path"):
            resolve_class("UserService")

    def test_missing_module(self):
        """Test that unknown top-level modules fail."""
        with pytest.raises(ResolveError, match="not found"):
            resolve_class("no_such_package_xyz.Thing")

    def test_missing_attribute(self):
        """Test that missing classes list what is available."""
        with pytest.raises(ResolveError) as exc_info:
            resolve_class("sample_api.Missing")
        assert "UserService" in exc_info.value.reason

    def test_not_a_class(self):
        """Test that functions are not accepted as classes."""
        with pytest.raises(ResolveError, match="is not a class"):
            resolve_class("sample_api.merge")

    def test_is_docreflect_error(self):
        """Test that resolve errors share the package root exception."""
        assert issubclass(ResolveError, DocReflectError)


class TestResolveFunction:
    """Tests for resolve_function."""

    def test_function(self):
        """Test resolving a module-level function."""
        assert resolve_function("sample_api.merge") is sample_api.merge

    def test_not_callable(self):
        """Test that data attributes are rejected."""
        with pytest.raises(ResolveError, match="is not callable"):
            resolve_function("sample_api.__doc__")


class TestResolveTarget:
    """Tests for resolve_target."""

    def test_member_path(self):
        """Test that Class.member paths give the owner and member name."""
        assert resolve_target("sample_api.UserService.read") == (sample_api.UserService, "read")

    def test_function_path(self):
        """Test that module.function paths give the function."""
        assert resolve_target("sample_api.render") == (None, sample_api.render)

    def test_member_is_not_checked(self):
        """Test that member existence is left to the extractor."""
        assert resolve_target("sample_api.UserService.reed") == (sample_api.UserService, "reed")
