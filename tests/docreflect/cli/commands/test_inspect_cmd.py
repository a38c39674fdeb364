"""Tests for the inspect command group."""

import json

import pytest
import yaml
from typer.testing import CliRunner

from docreflect.cli.main import app


@pytest.fixture
def runner(tmp_path, monkeypatch):
    """CLI runner working in an empty directory so no project config is found."""
    monkeypatch.chdir(tmp_path)
    return CliRunner()


class TestSignatureCommand:
    """Tests for `docreflect inspect signature`."""

    def test_method_signature(self, runner):
        """Test the signature of a documented method."""
        result = runner.invoke(app, ["inspect", "signature", "sample_api.UserService.read"])

        assert result.exit_code == 0
        assert result.stdout.strip() == (
            "public str UserService::read( $id, $options = NULL) "
            "throws <exception>NotFoundException</exception>"
        )

    def test_function_signature_as_json(self, runner):
        """Test JSON output for a free function."""
        result = runner.invoke(app, ["--json", "inspect", "signature", "sample_api.merge"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "target": "sample_api.merge",
            "signature": "merge( $left, $right)",
        }

    def test_builtin_function(self, runner):
        """Test a natively implemented function."""
        result = runner.invoke(app, ["inspect", "signature", "builtins.len"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "len( $obj)"

    def test_private_member(self, runner):
        """Test that private members print a notice instead of a signature."""
        result = runner.invoke(
            app, ["inspect", "signature", "sample_api.UserService._UserService__purge"]
        )

        assert result.exit_code == 0
        assert "private" in result.output

    def test_unknown_member(self, runner):
        """Test that a missing member fails with exit code 1."""
        result = runner.invoke(app, ["inspect", "signature", "sample_api.UserService.reed"])

        assert result.exit_code == 1
        assert "✗" in result.output

    def test_unresolvable_module(self, runner):
        """Test that an unknown module fails with exit code 1."""
        result = runner.invoke(app, ["inspect", "signature", "no_such_package_xyz.func"])

        assert result.exit_code == 1


class TestFragmentCommand:
    """Tests for `docreflect inspect fragment`."""

    def test_example_fragment(self, runner):
        """Test printing a single fragment."""
        result = runner.invoke(
            app, ["inspect", "fragment", "sample_api.UserService.read", "example"]
        )

        assert result.exit_code == 0
        assert result.stdout.strip() == "<example>service.read(42)</example>"

    def test_missing_fragment(self, runner):
        """Test that absent fragments print the sentinel."""
        result = runner.invoke(app, ["inspect", "fragment", "sample_api.merge", "description"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "Information not available"

    def test_fragment_as_yaml(self, runner):
        """Test YAML output for a function fragment."""
        result = runner.invoke(
            app, ["--yaml", "inspect", "fragment", "sample_api.render", "exception"]
        )

        assert result.exit_code == 0
        assert yaml.safe_load(result.stdout) == {
            "target": "sample_api.render",
            "fragment": "exception",
            "content": "<exception>TemplateError</exception>",
        }


class TestInfoCommand:
    """Tests for `docreflect inspect info`."""

    def test_signature_and_comment(self, runner):
        """Test the signature line followed by the raw comment."""
        result = runner.invoke(app, ["inspect", "info", "sample_api.UserService._refresh"])

        assert result.exit_code == 0
        assert result.stdout == "protected UserService::_refresh()\nReload cached rows.\n"

    def test_undocumented_function_as_json(self, runner):
        """Test that a missing comment is reported as an empty string."""
        result = runner.invoke(app, ["--json", "inspect", "info", "sample_api.merge"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["signature"] == "merge( $left, $right)"
        assert payload["comment"] == ""
