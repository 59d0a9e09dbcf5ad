# ABOUTME: Enterprise commands for binding and managing Android Enterprises
# ABOUTME: Implements bind, list, get, delete and patch subcommands

"""Enterprises commands - Manage Android Enterprises bound to your Google Cloud project."""

from typing import Any

import questionary

from android_management_cli.cli.commands.base import ApiCommand, Flag, load_json_file
from android_management_cli.formatting import ENTERPRISE_VIEW, render_table
from android_management_cli.resolver import resource_id
from android_management_cli.validators import validate_existing_file, validate_not_empty


class EnterprisesBindCommand(ApiCommand):
    name = "enterprises bind"
    description = "Bind registered Android Enterprise to your Google Cloud project."
    scoped = False
    failure_message = "Couldn't bind Android Enterprise"
    flags = [
        Flag(
            "signup-url-name",
            None,
            "Signup URL name from 'create-signup-url' command. Prompted when omitted.",
            validator=validate_not_empty,
        ),
        Flag(
            "enterprise-token",
            None,
            "Enterprise token from the callback URL. Prompted when omitted.",
            validator=validate_not_empty,
        ),
    ]

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        signup_url_name = values["signup-url-name"] or questionary.text(
            "Enter the signup URL name from 'create-signup-url' command:",
            validate=lambda x: validate_not_empty(x) is True or "Signup URL name can't be empty.",
        ).ask()
        if not signup_url_name:
            self.console.print("\n[yellow]Bind cancelled.[/yellow]\n")
            return 1

        enterprise_token = values["enterprise-token"] or questionary.text(
            "Enter the enterprise token from the callback URL:",
            validate=lambda x: validate_not_empty(x) is True or "Enterprise token can't be empty.",
        ).ask()
        if not enterprise_token:
            self.console.print("\n[yellow]Bind cancelled.[/yellow]\n")
            return 1

        response = self.client.create_enterprise(
            self.config.project_id, signup_url_name.strip(), enterprise_token.strip()
        )

        self.console.print()
        self.console.print(f"[green]✓ Android Enterprise bound:[/green] {response.get('name')}")
        self.console.print(
            f"Run [cyan]amdm config --add \"defaultEnterprise={response.get('name')}\"[/cyan] "
            "to use it by default."
        )
        self.console.print()
        return 0


class EnterprisesListCommand(ApiCommand):
    name = "enterprises list"
    description = "List Android Enterprises bound to your Google Cloud project."
    scoped = False
    failure_message = "Couldn't get enterprises"

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        response = self.client.list_enterprises(self.config.project_id)
        render_table(self.console, ENTERPRISE_VIEW, response.get("enterprises"))
        return 0


class EnterprisesGetCommand(ApiCommand):
    name = "enterprises get"
    description = "Get Android Enterprise details."
    failure_message = "Couldn't get enterprise"
    flags = [Flag("save", None, "Save full enterprise response to a file.", is_flag=True)]

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        response = self.client.get_enterprise(enterprise)
        return self.show_resource(ENTERPRISE_VIEW, response, resource_id(enterprise), values["save"])


class EnterprisesDeleteCommand(ApiCommand):
    name = "enterprises delete"
    description = "Delete an Android Enterprise. All its devices are unenrolled."
    failure_message = "Couldn't delete enterprise"
    flags = [Flag("force", None, "Skip the confirmation prompt.", is_flag=True)]

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        if not values["force"]:
            confirmed = questionary.confirm(
                f"Delete '{enterprise}'? Devices enrolled in it will be wiped or unmanaged.", default=False
            ).ask()
            if not confirmed:
                self.console.print("\n[yellow]Delete cancelled.[/yellow]\n")
                return 1

        self.client.delete_enterprise(enterprise)
        self.console.print(f"\n[green]{enterprise} enterprise successfully deleted.[/green]\n")
        return 0


class EnterprisesPatchCommand(ApiCommand):
    name = "enterprises patch"
    description = "Update an Android Enterprise from a JSON file."
    failure_message = "Couldn't update enterprise"
    flags = [
        Flag("file", "f", "Path to enterprise JSON file.", required=True, validator=validate_existing_file),
        Flag("update-mask", None, "Comma separated fields to update (e.g. enterpriseDisplayName,primaryColor)."),
    ]

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        body = load_json_file(values["file"])
        response = self.client.patch_enterprise(enterprise, body, values["update-mask"])

        self.console.print(f"\n[blue]'{enterprise}' enterprise successfully updated.[/blue]\n")
        self.console.print_json(data=response)
        self.console.print()
        return 0
