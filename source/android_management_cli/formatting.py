# ABOUTME: Response formatting for Android Management resources
# ABOUTME: Renders list responses as rich tables and single resources as field dumps

"""Response formatting for CLI commands."""

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from android_management_cli.resolver import resource_id

Extractor = Callable[[dict[str, Any]], Any]

OWNERSHIP_LABELS = {
    "PERSONALLY_OWNED": "BYOD",
    "COMPANY_OWNED": "Company-owned",
}


def pick(*path: str) -> Extractor:
    """Build an extractor reading a nested field, e.g. pick("hardwareInfo", "brand")."""

    def extract(resource: dict[str, Any]) -> Any:
        value: Any = resource
        for key in path:
            if not isinstance(value, dict):
                return None
            value = value.get(key)
        return value

    return extract


def pick_id(*path: str) -> Extractor:
    """Build an extractor returning the trailing ID of a resource name field."""
    extract = pick(*path)
    return lambda resource: resource_id(extract(resource))


def ownership_label(ownership: str | None) -> str:
    return OWNERSHIP_LABELS.get(ownership or "", "Unspecified")


@dataclass
class ResourceView:
    """Declares how a resource type is summarised and detailed."""

    title: str
    columns: list[tuple[str, Extractor]]
    details: list[tuple[str, Extractor]] = field(default_factory=list)
    empty_message: str = "Nothing to show."
    save_suffix: str = "details"


def _text(value: Any) -> str:
    if value is None or value == "":
        return "-"
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def build_table(view: ResourceView, resources: list[dict[str, Any]]) -> Table:
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan")
    for header, _ in view.columns:
        table.add_column(header)
    for resource in resources:
        table.add_row(*[_text(extract(resource)) for _, extract in view.columns])
    return table


def render_table(
    console: Console, view: ResourceView, resources: list[dict[str, Any]] | None, hint: str | None = None
) -> None:
    """Print a list response as a table, or the view's advisory when it is empty."""
    console.print()
    if not resources:
        console.print(f"[yellow]{view.empty_message}[/yellow]")
        console.print()
        return

    console.print(f"[blue]{view.title}:[/blue]")
    if hint:
        console.print(f"[dim]{hint}[/dim]")
    console.print()
    console.print(build_table(view, resources))
    console.print()


def detail_rows(view: ResourceView, resource: dict[str, Any]) -> list[tuple[str, str]]:
    return [(label, _text(extract(resource))) for label, extract in view.details]


def render_details(console: Console, view: ResourceView, resource: dict[str, Any], heading: str) -> None:
    """Print a single resource as ordered label/value lines."""
    console.print()
    console.print(f"[blue]{heading}[/blue]")
    console.print()
    if not view.details:
        console.print_json(data=resource)
        return
    width = max(len(label) for label, _ in view.details) + 1
    for label, value in detail_rows(view, resource):
        console.print(f"[blue]{label + ':':<{width}}[/blue] {value}", highlight=False)
    console.print()


def save_response(resource: dict[str, Any], local_id: str, suffix: str, directory: Path | None = None) -> Path:
    """Write the raw response as pretty-printed JSON named after the resource ID."""
    path = (directory or Path.cwd()) / f"{local_id}-{suffix}.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(resource, f, indent=2)
    return path


ENTERPRISE_VIEW = ResourceView(
    title="Enterprises",
    columns=[("Name (ID)", pick("name")), ("Display name", pick("enterpriseDisplayName"))],
    details=[
        ("Name", pick("name")),
        ("Display name", pick("enterpriseDisplayName")),
        ("Primary color", pick("primaryColor")),
        ("Enabled notifications", pick("enabledNotificationTypes")),
        ("Pub/Sub topic", pick("pubsubTopic")),
        ("Contact email", pick("contactInfo", "contactEmail")),
        ("Data protection officer", pick("contactInfo", "dataProtectionOfficerName")),
    ],
    empty_message="No enterprises bound. Use 'create-signup-url' and 'enterprises bind' commands to bind one.",
    save_suffix="enterprise-details",
)

POLICY_VIEW = ResourceView(
    title="Policies",
    columns=[("ID", pick_id("name")), ("Version", pick("version"))],
    empty_message="No policies available. Use 'policies patch' command to add a policy.",
    save_suffix="policy-details",
)

ENROLLMENT_TOKEN_VIEW = ResourceView(
    title="Enrollment tokens",
    columns=[
        ("ID", pick_id("name")),
        ("Policy", pick_id("policyName")),
        ("Expiration", pick("expirationTimestamp")),
        ("Personal usage", pick("allowPersonalUsage")),
    ],
    details=[
        ("Name", pick("name")),
        ("Value", pick("value")),
        ("Policy name", pick("policyName")),
        ("Duration", pick("duration")),
        ("Expiration", pick("expirationTimestamp")),
        ("Personal usage", pick("allowPersonalUsage")),
        ("One time only", pick("oneTimeOnly")),
    ],
    empty_message="No active enrollment tokens. Use 'enrollment-tokens add' command to create one.",
    save_suffix="enrollment-token-details",
)

DEVICE_VIEW = ResourceView(
    title="Devices",
    columns=[
        ("Name (ID)", pick_id("name")),
        ("Ownership", lambda device: ownership_label(device.get("ownership"))),
        ("Last report time", pick("lastStatusReportTime")),
        ("Applied policy (ID)", pick_id("appliedPolicyName")),
    ],
    details=[
        ("Name", pick("name")),
        ("Management mode", pick("managementMode")),
        ("State", pick("state")),
        ("Enrollment time", pick("enrollmentTime")),
        ("Last status report", pick("lastStatusReportTime")),
        ("Policy name", pick("policyName")),
        ("Enrollment token name", pick("enrollmentTokenName")),
        ("Brand", pick("hardwareInfo", "brand")),
        ("CPU", pick("hardwareInfo", "hardware")),
        ("Manufacturer", pick("hardwareInfo", "manufacturer")),
        ("Model", pick("hardwareInfo", "model")),
        ("Serial number", pick("hardwareInfo", "serialNumber")),
        ("Ownership", lambda device: ownership_label(device.get("ownership"))),
    ],
    empty_message=(
        "No devices enrolled. Use 'enrollment-tokens add' command to add a enrollment token "
        "and use it to enroll device."
    ),
    save_suffix="device-details",
)

OPERATION_VIEW = ResourceView(
    title="Operations",
    columns=[
        ("Name (ID)", pick_id("name")),
        ("Type", pick("metadata", "type")),
        ("Sent", pick("metadata", "createTime")),
        ("Done", pick("done")),
    ],
    details=[
        ("Name", pick("name")),
        ("Type", pick("metadata", "type")),
        ("Sent", pick("metadata", "createTime")),
        ("Duration", pick("metadata", "duration")),
        ("Done", pick("done")),
        ("Error", pick("error", "message")),
    ],
    empty_message="No operations available.",
    save_suffix="operation-details",
)
