# ABOUTME: Smoke tests to catch import errors and basic module-level issues
# ABOUTME: These tests ensure all modules can be imported without errors

"""Smoke tests for catching import and syntax errors.

These tests verify that all modules can be imported successfully,
catching issues like:
- Missing imports
- Syntax errors
- Module-level runtime errors
"""

import importlib

import pytest


class TestModuleImports:
    """Test that all modules can be imported without errors."""

    @pytest.mark.parametrize(
        "module_path",
        [
            "android_management_cli",
            "android_management_cli.api",
            "android_management_cli.config",
            "android_management_cli.errors",
            "android_management_cli.formatting",
            "android_management_cli.logging_config",
            "android_management_cli.resolver",
            "android_management_cli.validators",
            "android_management_cli.wizard",
            "android_management_cli.cli",
            "android_management_cli.cli.commands.base",
            "android_management_cli.cli.commands.config",
            "android_management_cli.cli.commands.devices",
            "android_management_cli.cli.commands.enrollment_tokens",
            "android_management_cli.cli.commands.enterprises",
            "android_management_cli.cli.commands.operations",
            "android_management_cli.cli.commands.policies",
            "android_management_cli.cli.commands.signup",
        ],
    )
    def test_module_import(self, module_path):
        """Test that core modules can be imported."""
        try:
            importlib.import_module(module_path)
        except Exception as e:
            pytest.fail(f"Failed to import {module_path}: {e}")


class TestLogging:
    """Test logging setup."""

    def test_debug_switch(self, monkeypatch):
        import logging

        from android_management_cli.logging_config import setup_logging

        monkeypatch.setenv("AMDM_DEBUG", "1")
        setup_logging()
        assert logging.getLogger().level == logging.DEBUG

        monkeypatch.setenv("AMDM_DEBUG", "0")
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_single_rich_handler(self):
        import logging

        from rich.logging import RichHandler

        from android_management_cli.logging_config import setup_logging

        setup_logging()
        setup_logging()

        handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
