# ABOUTME: Unit tests for enterprise scope resolution
# ABOUTME: Tests flag precedence over defaultEnterprise and resource name helpers

"""Tests for the resolver module."""

import pytest

from android_management_cli.config import Config
from android_management_cli.errors import MissingScope
from android_management_cli.resolver import child_name, resolve_enterprise, resource_id


class TestResolveEnterprise:
    """Tests for resolve_enterprise."""

    def test_explicit_wins(self):
        config = Config({"defaultEnterprise": "enterprises/DEFAULT"})

        assert resolve_enterprise("enterprises/OTHER", config) == "enterprises/OTHER"

    def test_explicit_is_verbatim(self):
        """The flag value is not normalised."""
        assert resolve_enterprise("LC03trycps", Config()) == "LC03trycps"

    def test_default_fallback(self):
        config = Config({"defaultEnterprise": "enterprises/DEFAULT"})

        assert resolve_enterprise(None, config) == "enterprises/DEFAULT"
        assert resolve_enterprise("", config) == "enterprises/DEFAULT"

    def test_missing_scope(self):
        with pytest.raises(MissingScope) as exc_info:
            resolve_enterprise(None, Config())

        assert "--enterprise-name" in str(exc_info.value)
        assert "defaultEnterprise" in str(exc_info.value)


class TestResourceNames:
    """Tests for resource name helpers."""

    def test_resource_id(self):
        assert resource_id("enterprises/E1/devices/dev1") == "dev1"
        assert resource_id("enterprises/E1/") == "E1"
        assert resource_id("dev1") == "dev1"
        assert resource_id(None) == ""

    def test_child_name(self):
        assert child_name("enterprises/E1", "policies", "default") == "enterprises/E1/policies/default"
