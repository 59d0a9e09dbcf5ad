"""CLI commands for the Android Management CLI."""
