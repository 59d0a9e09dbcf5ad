# ABOUTME: Policy commands for managing Android Enterprise policies
# ABOUTME: Implements patch, list, get and delete subcommands

"""Policies commands - Manage Android policies."""

from typing import Any

from android_management_cli.cli.commands.base import ApiCommand, Flag, load_json_file
from android_management_cli.formatting import POLICY_VIEW, render_table
from android_management_cli.resolver import child_name
from android_management_cli.validators import validate_existing_file, validate_no_spaces

POLICY_ID_FLAG = Flag(
    "id",
    "i",
    "ID of the policy. Run 'policies list' command to get IDs of the policies.",
    required=True,
    validator=validate_no_spaces,
)


class PoliciesPatchCommand(ApiCommand):
    name = "policies patch"
    description = "Add/update a policy."
    failure_message = "Couldn't add policy"
    flags = [
        Flag(
            "id",
            "i",
            "ID of the policy, to reference in enrollment token or when adding to a device.",
            required=True,
            validator=validate_no_spaces,
        ),
        Flag("file", "f", "Path to policy JSON file.", required=True, validator=validate_existing_file),
    ]

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        body = load_json_file(values["file"])
        response = self.client.patch_policy(child_name(enterprise, "policies", values["id"]), body)

        self.console.print(f"\n[blue]'{values['id']}' policy successfully added/updated.[/blue]\n")
        self.console.print_json(data=response)
        self.console.print()
        return 0


class PoliciesListCommand(ApiCommand):
    name = "policies list"
    description = "List policies available in your Android Enterprise."
    failure_message = "Couldn't get policies"

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        response = self.client.list_policies(enterprise)
        render_table(self.console, POLICY_VIEW, response.get("policies"))
        return 0


class PoliciesGetCommand(ApiCommand):
    name = "policies get"
    description = "Get policy details. Run 'policies list' command to get ID of the policy."
    failure_message = "Couldn't get policy"
    flags = [POLICY_ID_FLAG, Flag("save", None, "Save full policy response to a file.", is_flag=True)]

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        response = self.client.get_policy(child_name(enterprise, "policies", values["id"]))
        return self.show_resource(POLICY_VIEW, response, values["id"], values["save"])


class PoliciesDeleteCommand(ApiCommand):
    name = "policies delete"
    description = "Delete policy from your Android Enterprise. Run 'policies list' command to get ID of the policy."
    failure_message = "Couldn't delete policy"
    flags = [POLICY_ID_FLAG]

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        self.client.delete_policy(child_name(enterprise, "policies", values["id"]))
        self.console.print(f"\n[green]{values['id']} policy successfully deleted.[/green]\n")
        return 0
