# ABOUTME: Enrollment token commands for enrolling devices into an Android Enterprise
# ABOUTME: Implements add, list, get and delete subcommands

"""Enrollment-tokens commands - Manage enrollment tokens."""

from typing import Any

from android_management_cli.cli.commands.base import ApiCommand, Flag
from android_management_cli.formatting import ENROLLMENT_TOKEN_VIEW, render_table
from android_management_cli.resolver import child_name, resource_id
from android_management_cli.validators import validate_duration, validate_no_spaces

ENROLL_URL = "https://enterprise.google.com/android/enroll?et={token}"

TOKEN_ID_FLAG = Flag(
    "id",
    "i",
    "ID of the enrollment token. Run 'enrollment-tokens list' command to get IDs.",
    required=True,
    validator=validate_no_spaces,
)


class EnrollmentTokensAddCommand(ApiCommand):
    name = "enrollment-tokens add"
    description = "Create a enrollment token to enroll device to your Android Enterprise."
    failure_message = "Couldn't create enrollment token"
    flags = [
        Flag("name", None, "Name of the enrollment token.", required=True, validator=validate_no_spaces),
        Flag(
            "policy-id",
            "p",
            "ID of the policy applied to enrolled devices.",
            default="default",
            validator=validate_no_spaces,
        ),
        Flag("byod", None, "Allow enrolling personally owned (BYOD) devices.", is_flag=True),
        Flag(
            "duration",
            None,
            "How long the token is valid, e.g. 3600s (API default 1 hour).",
            validator=validate_duration,
        ),
    ]

    def build_body(self, values: dict[str, Any], enterprise: str) -> dict[str, Any]:
        body: dict[str, Any] = {
            "name": values["name"],
            "policyName": child_name(enterprise, "policies", values["policy-id"] or "default"),
        }
        if values["byod"]:
            body["allowPersonalUsage"] = "PERSONAL_USAGE_ALLOWED"
        if values["duration"]:
            body["duration"] = values["duration"]
        return body

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        response = self.client.create_enrollment_token(enterprise, self.build_body(values, enterprise))

        self.console.print()
        self.console.print("[blue]Enrollment token successfully created.[/blue]")
        self.console.print()
        self.console.print("Open this URL on Android device:")
        self.console.print(ENROLL_URL.format(token=response.get("value")), highlight=False)
        if response.get("expirationTimestamp"):
            self.console.print(f"[dim]Expires at {response['expirationTimestamp']}[/dim]")
        self.console.print()
        return 0


class EnrollmentTokensListCommand(ApiCommand):
    name = "enrollment-tokens list"
    description = "List active enrollment tokens of your Android Enterprise."
    failure_message = "Couldn't get enrollment tokens"

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        response = self.client.list_enrollment_tokens(enterprise)
        render_table(self.console, ENROLLMENT_TOKEN_VIEW, response.get("enrollmentTokens"))
        return 0


class EnrollmentTokensGetCommand(ApiCommand):
    name = "enrollment-tokens get"
    description = "Get enrollment token details."
    failure_message = "Couldn't get enrollment token"
    flags = [TOKEN_ID_FLAG, Flag("save", None, "Save full enrollment token response to a file.", is_flag=True)]

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        response = self.client.get_enrollment_token(child_name(enterprise, "enrollmentTokens", values["id"]))
        return self.show_resource(
            ENROLLMENT_TOKEN_VIEW, response, resource_id(response.get("name")) or values["id"], values["save"]
        )


class EnrollmentTokensDeleteCommand(ApiCommand):
    name = "enrollment-tokens delete"
    description = "Delete an enrollment token so it can no longer be used."
    failure_message = "Couldn't delete enrollment token"
    flags = [TOKEN_ID_FLAG]

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        self.client.delete_enrollment_token(child_name(enterprise, "enrollmentTokens", values["id"]))
        self.console.print(f"\n[green]{values['id']} enrollment token successfully deleted.[/green]\n")
        return 0
