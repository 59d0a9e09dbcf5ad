# ABOUTME: Operation commands for device operations queued in an Android Enterprise
# ABOUTME: Implements list, get and cancel subcommands

"""Operations commands - Manage operations queued in your Android Enterprise."""

from typing import Any

from android_management_cli.cli.commands.base import ApiCommand, Flag
from android_management_cli.formatting import OPERATION_VIEW, render_table
from android_management_cli.resolver import child_name
from android_management_cli.validators import validate_no_spaces

DEVICE_FLAG = Flag(
    "device",
    "d",
    "ID of the device the operation is queued for. Run 'devices list' command to get ID of the device.",
    required=True,
    validator=validate_no_spaces,
)

OPERATION_ID_FLAG = Flag(
    "id",
    "i",
    "ID of the operation. Run 'operations list' command to get ID of the operation.",
    required=True,
    validator=validate_no_spaces,
)


def operation_name(enterprise: str, values: dict[str, Any]) -> str:
    return child_name(child_name(enterprise, "devices", values["device"]), "operations", values["id"])


class OperationsListCommand(ApiCommand):
    name = "operations list"
    description = "List operations queued for a device in your Android Enterprise."
    failure_message = "Couldn't get operations"
    flags = [DEVICE_FLAG]

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        response = self.client.list_operations(f"{child_name(enterprise, 'devices', values['device'])}/operations")
        render_table(self.console, OPERATION_VIEW, response.get("operations"))
        return 0


class OperationsGetCommand(ApiCommand):
    name = "operations get"
    description = "Get operation details. Run 'operations list' command to get ID of the operation."
    failure_message = "Couldn't get operation"
    flags = [DEVICE_FLAG, OPERATION_ID_FLAG, Flag("save", None, "Save full operation response to a file.", is_flag=True)]

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        response = self.client.get_operation(operation_name(enterprise, values))
        return self.show_resource(OPERATION_VIEW, response, values["id"], values["save"])


class OperationsCancelCommand(ApiCommand):
    name = "operations cancel"
    description = "Cancel operation queued in your Android Enterprise."
    failure_message = "Couldn't cancel operation"
    flags = [DEVICE_FLAG, OPERATION_ID_FLAG]

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        self.client.cancel_operation(operation_name(enterprise, values))
        self.console.print(f"\n[blue]'{values['id']}' operation successfully canceled.[/blue]\n")
        return 0
