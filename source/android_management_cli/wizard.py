# ABOUTME: First-run setup wizard and credential health check
# ABOUTME: Prompts for missing settings, validates them and persists the configuration

"""Interactive setup for the Android Management CLI."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import questionary
from rich.console import Console

from android_management_cli.config import (
    CALLBACK_URL,
    DEFAULT_CALLBACK_URL,
    PROJECT_ID,
    SERVICE_ACCOUNT_KEY,
    Config,
)
from android_management_cli.errors import SetupAborted
from android_management_cli.validators import (
    validate_callback_url,
    validate_existing_file,
    validate_project_id,
)

logger = logging.getLogger(__name__)


def absolute_path(value: str) -> str:
    return str(Path(value.strip()).resolve())


@dataclass
class PromptStep:
    """One prompt of the setup sequence."""

    key: str
    message: str
    validate: Callable[[str], bool | str]
    default: str = ""
    normalize: Callable[[str], str] = str.strip


SERVICE_ACCOUNT_STEP = PromptStep(
    key=SERVICE_ACCOUNT_KEY,
    message="Enter the path to your service account key file:",
    validate=validate_existing_file,
    normalize=absolute_path,
)

SETUP_STEPS = [
    SERVICE_ACCOUNT_STEP,
    PromptStep(
        key=PROJECT_ID,
        message="Enter your Google Cloud project ID:",
        validate=validate_project_id,
    ),
    PromptStep(
        key=CALLBACK_URL,
        message=(
            "Enter the callback URL. This URL is used during signup URL creation "
            f"(default: {DEFAULT_CALLBACK_URL}):"
        ),
        validate=validate_callback_url,
        default=DEFAULT_CALLBACK_URL,
    ),
]

Asker = Callable[[PromptStep], str | None]


def ask_text(step: PromptStep) -> str | None:
    """Prompt for one step in the terminal."""
    return questionary.text(step.message, validate=step.validate, default=step.default).unsafe_ask()


def _answer(step: PromptStep, ask: Asker) -> str:
    try:
        answer = ask(step)
    except (KeyboardInterrupt, EOFError) as e:
        raise SetupAborted("Setup cancelled.") from e

    if answer is None:
        raise SetupAborted("Setup cancelled.")
    if not answer.strip() and step.default:
        answer = step.default

    result = step.validate(answer)
    if result is not True:
        raise SetupAborted(f"Invalid value for {step.key}: {result}")
    return step.normalize(answer)


class InteractiveSetup:
    """Collect the required settings and save them."""

    def __init__(self, config: Config, ask: Asker = ask_text, console: Console | None = None):
        self.config = config
        self.ask = ask
        self.console = console or Console()

    def run(self) -> Config:
        """Prompt for every setup step, merge the answers and save once.

        Raises:
            SetupAborted: If a prompt is cancelled or its input stream closes.
        """
        logger.debug("Running setup, missing fields: %s", self.config.missing_fields())
        self.console.print("\n[bold cyan]Android Management CLI setup[/bold cyan]")
        self.console.print("─" * 30)

        answers = {step.key: _answer(step, self.ask) for step in SETUP_STEPS}

        self.config.update(answers)
        self.config.save()
        self.console.print(f"\n[green]✓ Configuration saved to {self.config.path}[/green]\n")
        return self.config


class CredentialHealthCheck:
    """Re-prompt for the service account key when the stored path has gone away."""

    def __init__(self, config: Config, ask: Asker = ask_text, console: Console | None = None):
        self.config = config
        self.ask = ask
        self.console = console or Console()

    def is_healthy(self) -> bool:
        key_path = self.config.service_account_key
        return bool(key_path) and Path(key_path).exists()

    def run(self) -> Config:
        if self.is_healthy():
            return self.config

        logger.debug("Service account key missing: %s", self.config.service_account_key)
        self.console.print(
            f"\n[yellow]Service account key file not found: {self.config.service_account_key}[/yellow]"
        )
        self.config.set(SERVICE_ACCOUNT_KEY, _answer(SERVICE_ACCOUNT_STEP, self.ask))
        self.config.save()
        self.console.print("[green]✓ Service account key updated.[/green]\n")
        return self.config


def ensure_ready(config: Config, ask: Asker = ask_text, console: Console | None = None) -> Config:
    """Run setup when required fields are missing, then the credential check."""
    if not config.is_complete:
        InteractiveSetup(config, ask=ask, console=console).run()
    return CredentialHealthCheck(config, ask=ask, console=console).run()
