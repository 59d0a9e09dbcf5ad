# ABOUTME: Enterprise scope resolution and resource name helpers
# ABOUTME: Picks the explicit --enterprise-name over the configured default

"""Resource name resolution shared by every enterprise-scoped command."""

from android_management_cli.config import Config
from android_management_cli.errors import MissingScope

MISSING_SCOPE_MESSAGE = (
    "Please use '--enterprise-name' (e.g. enterprises/LC03trycps) or specify defaultEnterprise in config "
    "(amdm config --add \"defaultEnterprise=enterprises/LC03trycps\")."
)


def resolve_enterprise(explicit: str | None, config: Config) -> str:
    """Resolve the enterprise a command acts against.

    The explicit value is returned verbatim; callers pass fully-qualified
    names such as ``enterprises/LC03trycps``.

    Raises:
        MissingScope: If neither the flag nor ``defaultEnterprise`` is set.
    """
    if explicit:
        return explicit
    if config.default_enterprise:
        return config.default_enterprise
    raise MissingScope(MISSING_SCOPE_MESSAGE)


def resource_id(name: str | None) -> str:
    """Return the trailing segment of a resource name."""
    if not name:
        return ""
    return name.rstrip("/").split("/")[-1]


def child_name(parent: str, collection: str, child_id: str) -> str:
    """Compose ``<parent>/<collection>/<id>``."""
    return f"{parent}/{collection}/{child_id}"
