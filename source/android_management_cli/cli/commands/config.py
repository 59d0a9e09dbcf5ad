# ABOUTME: Config command for inspecting and updating the CLI configuration file
# ABOUTME: Implements key=value updates, display and validation of ~/.amdm_config.json

"""Config command - Update configuration for the CLI tool."""

from cleo.commands.command import Command
from cleo.helpers import option
from rich import box
from rich.console import Console
from rich.table import Table

from android_management_cli.config import Config
from android_management_cli.errors import ConfigWriteError
from android_management_cli.validators import ConfigValidator, validate_key_value


class ConfigCommand(Command):
    """Update configuration for the CLI tool."""

    name = "config"
    description = "Update configuration for the CLI tool."
    options = [
        option(
            "add",
            "a",
            description='Add a new key-value pair to the config file (e.g., "defaultEnterprise=enterprises/LC01ro7nu8")',
            flag=False,
            default=None,
        ),
        option("show", "s", description="Show the current configuration", flag=True),
        option("validate", None, description="Validate the current configuration", flag=True),
    ]

    def __init__(self, config: Config):
        self.config = config
        super().__init__()

    def handle(self) -> int:
        """Execute the config command."""
        console = Console(soft_wrap=True)
        error_console = Console(stderr=True, soft_wrap=True)

        pair = self.option("add")
        if pair is not None:
            return self._add(pair, console, error_console)
        if self.option("show"):
            return self._show(console)
        if self.option("validate"):
            return self._validate(console)

        console.print("[yellow]No options provided. Use --add to specify key-value pairs.[/yellow]")
        return 0

    def _add(self, pair: str, console: Console, error_console: Console) -> int:
        result = validate_key_value(pair)
        if result is not True:
            error_console.print(f"[red]{result}[/red]")
            return 1

        key, _, value = pair.partition("=")
        key, value = key.strip(), value.strip()
        self.config.set(key, value)

        try:
            self.config.save()
        except ConfigWriteError as e:
            error_console.print(f"\n[red]Error: {e}[/red]\n")
            return 1

        console.print(f"[green]Configuration updated:[/green] {key} = {value}")
        return 0

    def _show(self, console: Console) -> int:
        data = self.config.to_dict()
        if not data:
            console.print("\n[yellow]Configuration is empty.[/yellow]\n")
            return 0

        table = Table(title=str(self.config.path), box=box.ROUNDED, show_header=True, header_style="bold cyan")
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Value")
        for key, value in data.items():
            table.add_row(key, str(value))

        console.print()
        console.print(table)
        console.print()
        return 0

    def _validate(self, console: Console) -> int:
        result = ConfigValidator.validate_config(self.config.to_dict())

        if result.valid:
            console.print(f"\n[green]{result}[/green]")
        else:
            console.print(f"\n[red]{result}[/red]")
        for error in result.errors:
            console.print(f"  [red]✗[/red]  {error}")
        for warning in result.warnings:
            console.print(f"  [yellow]⚠[/yellow]  {warning}")
        console.print()
        return 0 if result.valid else 1
