# ABOUTME: Android Management CLI package
# ABOUTME: Command-line client for the Android Management API

"""Android Management CLI."""

__version__ = "1.0.0"
