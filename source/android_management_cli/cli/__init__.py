# ABOUTME: CLI module for the Android Management CLI
# ABOUTME: Registers commands and runs first-run setup before dispatching

"""Command-line interface for the Android Management CLI."""

import sys

from cleo.application import Application
from rich.console import Console

from android_management_cli import __version__
from android_management_cli.api import AndroidManagementClient
from android_management_cli.config import Config
from android_management_cli.errors import AmdmError
from android_management_cli.logging_config import setup_logging
from android_management_cli.wizard import ensure_ready

from .commands.config import ConfigCommand
from .commands.devices import (
    DevicesClearAppDataCommand,
    DevicesDeleteCommand,
    DevicesGetCommand,
    DevicesListCommand,
    DevicesLockCommand,
    DevicesRebootCommand,
    DevicesRelinquishOwnershipCommand,
    DevicesResetPasswordCommand,
    DevicesStartLostModeCommand,
    DevicesStopLostModeCommand,
    DevicesUpdateCommand,
)
from .commands.enrollment_tokens import (
    EnrollmentTokensAddCommand,
    EnrollmentTokensDeleteCommand,
    EnrollmentTokensGetCommand,
    EnrollmentTokensListCommand,
)
from .commands.enterprises import (
    EnterprisesBindCommand,
    EnterprisesDeleteCommand,
    EnterprisesGetCommand,
    EnterprisesListCommand,
    EnterprisesPatchCommand,
)
from .commands.operations import OperationsCancelCommand, OperationsGetCommand, OperationsListCommand
from .commands.policies import PoliciesDeleteCommand, PoliciesGetCommand, PoliciesListCommand, PoliciesPatchCommand
from .commands.signup import CreateSignupUrlCommand

APP_NAME = "android-management-cli"

API_COMMANDS = [
    CreateSignupUrlCommand,
    # Enterprises
    EnterprisesBindCommand,
    EnterprisesListCommand,
    EnterprisesGetCommand,
    EnterprisesDeleteCommand,
    EnterprisesPatchCommand,
    # Policies
    PoliciesPatchCommand,
    PoliciesListCommand,
    PoliciesGetCommand,
    PoliciesDeleteCommand,
    # Enrollment tokens
    EnrollmentTokensAddCommand,
    EnrollmentTokensListCommand,
    EnrollmentTokensGetCommand,
    EnrollmentTokensDeleteCommand,
    # Devices
    DevicesListCommand,
    DevicesGetCommand,
    DevicesUpdateCommand,
    DevicesDeleteCommand,
    DevicesResetPasswordCommand,
    DevicesRebootCommand,
    DevicesLockCommand,
    DevicesRelinquishOwnershipCommand,
    DevicesClearAppDataCommand,
    DevicesStartLostModeCommand,
    DevicesStopLostModeCommand,
    # Operations
    OperationsListCommand,
    OperationsGetCommand,
    OperationsCancelCommand,
]


def create_application(config: Config, client: AndroidManagementClient) -> Application:
    """Create the CLI application."""
    application = Application(APP_NAME, __version__)

    application.add(ConfigCommand(config))
    for command_class in API_COMMANDS:
        application.add(command_class(config, client))

    return application


def main():
    """Main entry point for the CLI."""
    setup_logging()

    try:
        config = Config.load()
        ensure_ready(config)
    except AmdmError as e:
        Console(stderr=True, soft_wrap=True).print(f"\n[red]Error: {e}[/red]\n")
        sys.exit(1)

    client = AndroidManagementClient(config.service_account_key)
    application = create_application(config, client)
    application.run()


if __name__ == "__main__":
    main()
