# ABOUTME: Shared command plumbing for Android Management API commands
# ABOUTME: Declarative flag descriptors and the parse, validate, resolve, call, format sequence

"""Base classes for API-backed commands."""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from cleo.commands.command import Command
from cleo.helpers import option
from cleo.io.inputs.option import Option
from rich.console import Console
from rich.markup import escape

from android_management_cli.api import AndroidManagementClient
from android_management_cli.config import Config
from android_management_cli.errors import MissingScope, RemoteError, ValidationError
from android_management_cli.formatting import ResourceView, render_details, save_response
from android_management_cli.resolver import resolve_enterprise

logger = logging.getLogger(__name__)


@dataclass
class Flag:
    """Declarative description of one command-line flag."""

    name: str
    shortcut: str | None = None
    description: str = ""
    required: bool = False
    default: Any = None
    validator: Callable[[str], bool | str] | None = None
    is_flag: bool = False

    def to_option(self) -> Option:
        if self.is_flag:
            return option(self.name, self.shortcut, description=self.description, flag=True)
        description = f"Required. {self.description}" if self.required else self.description
        return option(self.name, self.shortcut, description=description, flag=False, default=self.default)


ENTERPRISE_FLAG = Flag(
    "enterprise-name",
    "e",
    "Name of the Android Enterprise (e.g. enterprises/LC03trycps). Skip if 'defaultEnterprise' is set in config.",
)


def check_flags(flags: list[Flag], values: dict[str, Any]) -> None:
    """Check required flags and run validators.

    Raises:
        ValidationError: On the first missing or invalid value.
    """
    for flag in flags:
        value = values.get(flag.name)
        if flag.required and (value is None or value == ""):
            raise ValidationError(f"Missing required option '--{flag.name}'.")
        if flag.validator and value not in (None, False, ""):
            result = flag.validator(value)
            if result is not True:
                raise ValidationError(f"--{flag.name}: {result}")


def load_json_file(path: str) -> dict[str, Any]:
    """Read a JSON request body from disk.

    Raises:
        ValidationError: If the file is missing or does not hold a JSON object.
    """
    try:
        with open(path, encoding="utf-8") as f:
            body = json.load(f)
    except OSError as e:
        raise ValidationError(f"Couldn't read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValidationError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(body, dict):
        raise ValidationError(f"{path} must contain a JSON object")
    return body


class ApiCommand(Command):
    """A command issuing exactly one Android Management API request."""

    flags: ClassVar[list[Flag]] = []
    scoped: ClassVar[bool] = True
    failure_message: ClassVar[str] = "Request failed"

    def __init__(self, config: Config, client: AndroidManagementClient):
        self.config = config
        self.client = client
        self.console = Console(soft_wrap=True)
        self.options = [flag.to_option() for flag in self.all_flags()]
        super().__init__()

    @classmethod
    def all_flags(cls) -> list[Flag]:
        if cls.scoped:
            return [*cls.flags, ENTERPRISE_FLAG]
        return list(cls.flags)

    def flag_values(self) -> dict[str, Any]:
        return {flag.name: self.option(flag.name) for flag in self.all_flags()}

    def handle(self) -> int:
        """Validate flags, resolve the enterprise, then run the request."""
        self.console = Console(soft_wrap=True)
        error_console = Console(stderr=True, soft_wrap=True)

        try:
            values = self.flag_values()
            check_flags(self.all_flags(), values)
            enterprise = resolve_enterprise(values.get("enterprise-name"), self.config) if self.scoped else None
            logger.debug("Running '%s' against %s", self.name, enterprise or "project")
            return self.run_request(values, enterprise)
        except ValidationError as e:
            error_console.print(f"\n[red]{escape(str(e))}[/red]\n")
            return 1
        except MissingScope as e:
            error_console.print(f"\n[red]{escape(str(e))}[/red]\n")
            return 1
        except RemoteError as e:
            error_console.print(f"\n[red]{self.failure_message}:[/red] {escape(str(e))}")
            if e.details:
                error_console.print(f"Details: {escape(str(e.details))}")
            error_console.print()
            return 1

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        raise NotImplementedError

    def show_resource(self, view: ResourceView, resource: dict[str, Any], local_id: str, save: bool) -> int:
        """Print a resource's detail fields, optionally saving the raw response."""
        render_details(self.console, view, resource, f"'{local_id}' details:")
        if not save:
            self.console.print("[dim]Response may be long. Use '--save' flag to save it to a file.[/dim]\n")
            return 0

        try:
            path = save_response(resource, local_id, view.save_suffix)
        except OSError as e:
            Console(stderr=True, soft_wrap=True).print(f"[red]Couldn't save response: {e}[/red]")
            return 1
        self.console.print(f"[green]Full response saved to '{path.name}'[/green]\n")
        return 0
