"""Tests for the HTML documentation generator."""

import sample_api

from docreflect.core.config.models import RenderingConfig
from docreflect.core.docs.extractors import DocExtractor
from docreflect.core.docs.generators import HR, ReflectionDocGenerator
from docreflect.core.docs.models import INFORMATION_NOT_AVAILABLE


class TestClassInfo:
    """Test class description rendering."""

    def test_class_description(self):
        """Test that the class comment's description fragment is returned."""
        generator = ReflectionDocGenerator()
        assert generator.class_info(sample_api.UserService) == (
            "<description><p>Facade over the <code>users</code> table.</p></description>"
        )

    def test_class_without_fragments(self):
        """Test that undocumented classes render the sentinel."""
        generator = ReflectionDocGenerator()
        assert generator.class_info(sample_api.AdminService) == INFORMATION_NOT_AVAILABLE

    def test_horizontal_rule(self):
        """Test that with_hr appends a horizontal rule."""
        generator = ReflectionDocGenerator()
        assert generator.class_info(sample_api.UserService, with_hr=True).endswith(HR)


class TestClassDocumentation:
    """Test full class documentation pages."""

    def test_page_lists_public_members(self):
        """Test signatures, descriptions and examples of public members."""
        page = ReflectionDocGenerator().class_documentation(sample_api.UserService)

        assert page.startswith("<description><p>Facade over")
        assert "<h2>Class API</h2>" in page
        assert (
            "<li><code>public str UserService::read( $id, $options = NULL) "
            "throws <exception>NotFoundException</exception></code>"
            "<description><p>Reads the record with the given <code>id</code>.</p></description>"
            "<pre><example>service.read(42)</example></pre></li>"
        ) in page
        assert page.endswith("</ul>")

    def test_private_members_are_skipped(self):
        """Test that members with an empty signature are left out."""
        page = ReflectionDocGenerator().class_documentation(sample_api.UserService)
        assert "__purge" not in page
        assert "protected UserService::_refresh()" in page

    def test_exceptions_listed_when_configured(self):
        """Test that include_exceptions adds the exception fragment."""
        generator = ReflectionDocGenerator(RenderingConfig(include_exceptions=True))
        page = generator.class_documentation(sample_api.UserService)
        assert "<pre><exception>NotFoundException</exception></pre></li>" in page

    def test_configured_horizontal_rule(self):
        """Test that the configured default applies when with_hr is not given."""
        generator = ReflectionDocGenerator(RenderingConfig(with_hr=True))
        assert generator.class_documentation(sample_api.Repository).endswith(HR)
        assert not generator.class_documentation(sample_api.Repository, with_hr=False).endswith(HR)


class TestMemberRendering:
    """Test single member helpers."""

    def test_method_signatures(self):
        """Test the unordered list of public signatures."""
        listing = ReflectionDocGenerator().method_signatures(sample_api.Repository)
        assert listing == (
            "<ul>\n<li><code>abstract public bytes Repository::load( str $key)</code></li>\n</ul>"
        )

    def test_method_info(self):
        """Test signature line followed by the raw comment."""
        handle = DocExtractor.describe_method(sample_api.UserService, "_refresh")
        assert ReflectionDocGenerator.method_info(handle) == (
            "protected UserService::_refresh()\nReload cached rows."
        )

    def test_method_fragment_wrapping(self):
        """Test that fragments are wrapped in the given markup."""
        handle = DocExtractor.describe_method(sample_api.UserService, "read")
        assert ReflectionDocGenerator.method_fragment(handle, "example", "<pre>", "</pre>") == (
            "<pre><example>service.read(42)</example></pre>"
        )

    def test_method_fragment_sentinel(self):
        """Test that absent fragments are wrapped sentinels."""
        handle = DocExtractor.describe_method(sample_api.UserService, "limit")
        assert ReflectionDocGenerator.method_fragment(handle, "example", "<p>", "</p>") == (
            f"<p>{INFORMATION_NOT_AVAILABLE}</p>"
        )

    def test_function_signature(self):
        """Test free routine rendering."""
        assert ReflectionDocGenerator.function_signature(sample_api.merge) == "merge( $left, $right)"
