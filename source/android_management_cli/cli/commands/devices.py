# ABOUTME: Device commands for managing devices enrolled in an Android Enterprise
# ABOUTME: Implements list, get, update, delete and the remote device command subcommands

"""Devices commands - Manage Android devices enrolled to your Android Enterprise."""

from typing import Any, ClassVar

from android_management_cli.api import CommandType
from android_management_cli.cli.commands.base import ApiCommand, Flag
from android_management_cli.errors import ValidationError
from android_management_cli.formatting import DEVICE_VIEW, render_table
from android_management_cli.resolver import child_name, resource_id
from android_management_cli.validators import validate_device_state, validate_duration, validate_no_spaces

DEVICE_NAME_FLAG = Flag(
    "name",
    None,
    "Name (ID) of the device. Run 'devices list' command to get name (ID) of the device.",
    required=True,
    validator=validate_no_spaces,
)


class DevicesListCommand(ApiCommand):
    name = "devices list"
    description = "List devices enrolled to your Android Enterprise."
    failure_message = "Couldn't get devices"

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        response = self.client.list_devices(enterprise)
        render_table(
            self.console,
            DEVICE_VIEW,
            response.get("devices"),
            hint="Use 'devices get --name <Name (ID)>' to get all information about specific device.",
        )
        return 0


class DevicesGetCommand(ApiCommand):
    name = "devices get"
    description = "Get device details. Run 'devices list' command to get name (ID) of the device."
    failure_message = "Couldn't get device"
    flags = [DEVICE_NAME_FLAG, Flag("save", None, "Save full device details response to a file.", is_flag=True)]

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        response = self.client.get_device(child_name(enterprise, "devices", values["name"]))
        return self.show_resource(DEVICE_VIEW, response, values["name"], values["save"])


class DevicesUpdateCommand(ApiCommand):
    name = "devices update"
    description = "Update device policy and state. Run 'devices list' command to get name (ID) of the device."
    failure_message = "Couldn't update device"
    flags = [
        DEVICE_NAME_FLAG,
        Flag(
            "policy-name",
            "p",
            "ID of the policy to enforce on the device. Run 'policies list' command to get IDs of the policies.",
            validator=validate_no_spaces,
        ),
        Flag(
            "state",
            "s",
            "Update device state. You can set 'active' or 'disabled'.",
            validator=validate_device_state,
        ),
    ]

    @staticmethod
    def build_patch(values: dict[str, Any], enterprise: str) -> tuple[dict[str, Any], list[str]]:
        """Build the patch body and its update mask."""
        if not values["policy-name"] and not values["state"]:
            raise ValidationError("Please specify either '--policy-name' or '--state'.")

        body: dict[str, Any] = {}
        update_mask = []
        if values["policy-name"]:
            body["policyName"] = child_name(enterprise, "policies", values["policy-name"])
            update_mask.append("policyName")
        if values["state"]:
            body["state"] = values["state"].upper()
            update_mask.append("state")
        return body, update_mask

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        body, update_mask = self.build_patch(values, enterprise)
        self.client.patch_device(child_name(enterprise, "devices", values["name"]), body, update_mask)
        self.console.print(f"\n[blue]'{values['name']}' device updated successfully.[/blue]\n")
        return 0


class DevicesDeleteCommand(ApiCommand):
    name = "devices delete"
    description = "Delete (unenroll) a device from your Android Enterprise."
    failure_message = "Couldn't delete device"
    flags = [DEVICE_NAME_FLAG]

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        self.client.delete_device(child_name(enterprise, "devices", values["name"]))
        self.console.print(f"\n[green]{values['name']} device successfully deleted.[/green]\n")
        return 0


class DeviceCommand(ApiCommand):
    """Issue a remote command to a device."""

    command_type: ClassVar[CommandType]
    flags = [DEVICE_NAME_FLAG]

    def params(self, values: dict[str, Any]) -> dict[str, Any]:
        return {}

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        params = self.params(values)
        operation = self.client.issue_command(
            child_name(enterprise, "devices", values["name"]), self.command_type, params
        )

        self.console.print(f"\n[blue]{self.command_type.value} command sent to '{values['name']}' device.[/blue]")
        operation_id = resource_id(operation.get("name"))
        if operation_id:
            self.console.print(
                f"Run 'operations get --device {values['name']} --id {operation_id}' to follow its progress.",
                highlight=False,
            )
        self.console.print()
        return 0


class DevicesRebootCommand(DeviceCommand):
    name = "devices reboot"
    description = "Reboot the device. Only supported on fully managed devices running Android 7.0 or higher."
    failure_message = "Couldn't reboot device"
    command_type = CommandType.REBOOT


class DevicesLockCommand(DeviceCommand):
    name = "devices lock"
    description = "Lock the device, as if the lock screen timeout had expired."
    failure_message = "Couldn't lock device"
    command_type = CommandType.LOCK
    flags = [
        DEVICE_NAME_FLAG,
        Flag("duration", None, "Duration for which the command is valid, e.g. 600s.", validator=validate_duration),
    ]

    def params(self, values: dict[str, Any]) -> dict[str, Any]:
        return {"duration": values["duration"]} if values["duration"] else {}


class DevicesResetPasswordCommand(DeviceCommand):
    name = "devices reset-password"
    description = "Reset the user's password."
    failure_message = "Couldn't reset device password"
    command_type = CommandType.RESET_PASSWORD
    flags = [
        DEVICE_NAME_FLAG,
        Flag("new-password", None, "The new password. Leave empty to clear the password."),
        Flag("require-entry", None, "Don't allow other admins to change the password again.", is_flag=True),
        Flag("lock-now", None, "Lock the device after the password is reset.", is_flag=True),
    ]

    def params(self, values: dict[str, Any]) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if values["new-password"]:
            params["newPassword"] = values["new-password"]
        reset_flags = []
        if values["require-entry"]:
            reset_flags.append("REQUIRE_ENTRY")
        if values["lock-now"]:
            reset_flags.append("LOCK_NOW")
        if reset_flags:
            params["resetPasswordFlags"] = reset_flags
        return params


class DevicesRelinquishOwnershipCommand(DeviceCommand):
    name = "devices relinquish-ownership"
    description = "Remove the work profile and all policies from a company-owned device, keeping personal apps."
    failure_message = "Couldn't relinquish device ownership"
    command_type = CommandType.RELINQUISH_OWNERSHIP


class DevicesClearAppDataCommand(DeviceCommand):
    name = "devices clear-app-data"
    description = "Clear the application data of the given apps."
    failure_message = "Couldn't clear app data"
    command_type = CommandType.CLEAR_APP_DATA
    flags = [
        DEVICE_NAME_FLAG,
        Flag(
            "packages",
            None,
            "Comma separated package names to clear (e.g. com.example.app,com.example.other).",
            required=True,
            validator=validate_no_spaces,
        ),
    ]

    def params(self, values: dict[str, Any]) -> dict[str, Any]:
        packages = [package for package in values["packages"].split(",") if package]
        return {"clearAppsDataParams": {"packageNames": packages}}


class DevicesStartLostModeCommand(DeviceCommand):
    name = "devices start-lost-mode"
    description = "Put the device into lost mode, locking it and showing contact details."
    failure_message = "Couldn't start lost mode"
    command_type = CommandType.START_LOST_MODE
    flags = [
        DEVICE_NAME_FLAG,
        Flag("message", None, "Message displayed on the locked device.", required=True),
        Flag("phone", None, "Phone number called when the owner button is tapped."),
        Flag("email", None, "Email address displayed on the device."),
        Flag("address", None, "Street address displayed on the device."),
        Flag("organization", None, "Organization name displayed on the device."),
    ]

    def params(self, values: dict[str, Any]) -> dict[str, Any]:
        lost_mode: dict[str, Any] = {"lostMessage": {"defaultMessage": values["message"]}}
        if values["phone"]:
            lost_mode["lostPhoneNumber"] = {"defaultMessage": values["phone"]}
        if values["email"]:
            lost_mode["lostEmailAddress"] = values["email"]
        if values["address"]:
            lost_mode["lostStreetAddress"] = {"defaultMessage": values["address"]}
        if values["organization"]:
            lost_mode["lostOrganization"] = {"defaultMessage": values["organization"]}
        return {"startLostModeParams": lost_mode}


class DevicesStopLostModeCommand(DeviceCommand):
    name = "devices stop-lost-mode"
    description = "Take the device out of lost mode."
    failure_message = "Couldn't stop lost mode"
    command_type = CommandType.STOP_LOST_MODE

    def params(self, values: dict[str, Any]) -> dict[str, Any]:
        return {"stopLostModeParams": {}}
