# ABOUTME: Signup URL command for registering a new Android Enterprise
# ABOUTME: Creates a signup URL for the configured Google Cloud project

"""Create-signup-url command."""

from typing import Any

from android_management_cli.cli.commands.base import ApiCommand, Flag
from android_management_cli.validators import validate_callback_url


class CreateSignupUrlCommand(ApiCommand):
    name = "create-signup-url"
    description = "Create a signup URL for Android Management."
    scoped = False
    failure_message = "Couldn't create signup URL"
    flags = [
        Flag(
            "callback-url",
            None,
            "Override the callback URL stored in config for this signup URL.",
            validator=validate_callback_url,
        ),
    ]

    def run_request(self, values: dict[str, Any], enterprise: str | None) -> int:
        callback_url = values["callback-url"] or self.config.callback_url
        response = self.client.create_signup_url(self.config.project_id, callback_url)

        self.console.print()
        self.console.print(f"[blue]Signup URL name:[/blue] {response.get('name')}")
        self.console.print(f"[blue]Signup URL:[/blue] {response.get('url')}")
        self.console.print()
        self.console.print(
            "Save signup URL name, because you'll need this to create (bind) Android Enterprise. "
            "Use 'enterprises bind' command to bind it to your Google Cloud project."
        )
        self.console.print()
        return 0
