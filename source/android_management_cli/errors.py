# ABOUTME: Error types for the Android Management CLI
# ABOUTME: Local config/setup failures, flag validation, scope resolution and API errors

"""Error taxonomy for the Android Management CLI."""

from typing import Any


class AmdmError(Exception):
    """Base class for every expected failure of the CLI."""


class ConfigCorrupt(AmdmError):
    """The configuration file exists but is not a JSON object."""


class ConfigWriteError(AmdmError):
    """The configuration file could not be written."""


class SetupAborted(AmdmError):
    """Interactive setup was cancelled or the input stream closed."""


class MissingScope(AmdmError):
    """No enterprise was passed and no default enterprise is configured."""


class ValidationError(AmdmError):
    """A flag value failed its validator."""


class RemoteError(AmdmError):
    """A call to the Android Management API failed."""

    def __init__(self, status: int | None, message: str, details: Any = None):
        super().__init__(message)
        self.status = status
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"{self.status}: {self.message}"
