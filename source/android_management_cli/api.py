# ABOUTME: Android Management API client wrapper
# ABOUTME: Builds the authenticated discovery client and maps each CLI operation to one API request

"""Android Management API access for CLI commands."""

import logging
from enum import Enum
from typing import Any

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient import discovery
from googleapiclient.errors import HttpError

from android_management_cli.errors import RemoteError

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/androidmanagement"]
API_NAME = "androidmanagement"
API_VERSION = "v1"


class CommandType(str, Enum):
    """Device command types accepted by devices.issueCommand."""

    LOCK = "LOCK"
    RESET_PASSWORD = "RESET_PASSWORD"
    REBOOT = "REBOOT"
    RELINQUISH_OWNERSHIP = "RELINQUISH_OWNERSHIP"
    CLEAR_APP_DATA = "CLEAR_APP_DATA"
    START_LOST_MODE = "START_LOST_MODE"
    STOP_LOST_MODE = "STOP_LOST_MODE"


def build_service(service_account_key: str) -> Any:
    """Build an authenticated Android Management API resource."""
    try:
        credentials = service_account.Credentials.from_service_account_file(service_account_key, scopes=SCOPES)
    except (OSError, ValueError) as e:
        raise RemoteError(None, f"Couldn't load service account key {service_account_key}: {e}") from e

    logger.debug("Building %s %s client with key %s", API_NAME, API_VERSION, service_account_key)
    return discovery.build(API_NAME, API_VERSION, credentials=credentials, cache_discovery=False)


def to_remote_error(error: HttpError) -> RemoteError:
    """Convert a googleapiclient HttpError into a RemoteError."""
    status = getattr(error.resp, "status", None)
    message = getattr(error, "reason", None) or str(error)
    details = getattr(error, "error_details", None) or None
    return RemoteError(int(status) if status is not None else None, message, details)


class AndroidManagementClient:
    """Thin wrapper issuing exactly one API request per method."""

    def __init__(self, service_account_key: str | None = None, service: Any = None):
        """Initialize the client.

        Args:
            service_account_key: Path to the service account JSON key.
            service: Prebuilt discovery resource (skips credential loading).
        """
        self.service_account_key = service_account_key
        self._service = service

    @property
    def service(self) -> Any:
        if self._service is None:
            if not self.service_account_key:
                raise RemoteError(None, "No service account key configured.")
            self._service = build_service(self.service_account_key)
        return self._service

    def _execute(self, request: Any) -> dict[str, Any]:
        try:
            response = request.execute()
        except HttpError as e:
            raise to_remote_error(e) from e
        except GoogleAuthError as e:
            raise RemoteError(None, f"Authentication failed: {e}") from e
        except (OSError, httplib2.HttpLib2Error) as e:
            raise RemoteError(None, f"Connection failed: {e}") from e
        return response or {}

    # Signup URLs and enterprises

    def create_signup_url(self, project_id: str, callback_url: str) -> dict[str, Any]:
        return self._execute(self.service.signupUrls().create(projectId=project_id, callbackUrl=callback_url))

    def create_enterprise(self, project_id: str, signup_url_name: str, enterprise_token: str) -> dict[str, Any]:
        return self._execute(
            self.service.enterprises().create(
                projectId=project_id,
                signupUrlName=signup_url_name,
                enterpriseToken=enterprise_token,
                body={},
            )
        )

    def list_enterprises(self, project_id: str) -> dict[str, Any]:
        return self._execute(self.service.enterprises().list(projectId=project_id))

    def get_enterprise(self, name: str) -> dict[str, Any]:
        return self._execute(self.service.enterprises().get(name=name))

    def delete_enterprise(self, name: str) -> dict[str, Any]:
        return self._execute(self.service.enterprises().delete(name=name))

    def patch_enterprise(self, name: str, body: dict[str, Any], update_mask: str | None = None) -> dict[str, Any]:
        kwargs = {"name": name, "body": body}
        if update_mask:
            kwargs["updateMask"] = update_mask
        return self._execute(self.service.enterprises().patch(**kwargs))

    # Policies

    def patch_policy(self, name: str, body: dict[str, Any]) -> dict[str, Any]:
        return self._execute(self.service.enterprises().policies().patch(name=name, body=body))

    def list_policies(self, parent: str) -> dict[str, Any]:
        return self._execute(self.service.enterprises().policies().list(parent=parent))

    def get_policy(self, name: str) -> dict[str, Any]:
        return self._execute(self.service.enterprises().policies().get(name=name))

    def delete_policy(self, name: str) -> dict[str, Any]:
        return self._execute(self.service.enterprises().policies().delete(name=name))

    # Enrollment tokens

    def create_enrollment_token(self, parent: str, body: dict[str, Any]) -> dict[str, Any]:
        return self._execute(self.service.enterprises().enrollmentTokens().create(parent=parent, body=body))

    def list_enrollment_tokens(self, parent: str) -> dict[str, Any]:
        return self._execute(self.service.enterprises().enrollmentTokens().list(parent=parent))

    def get_enrollment_token(self, name: str) -> dict[str, Any]:
        return self._execute(self.service.enterprises().enrollmentTokens().get(name=name))

    def delete_enrollment_token(self, name: str) -> dict[str, Any]:
        return self._execute(self.service.enterprises().enrollmentTokens().delete(name=name))

    # Devices

    def list_devices(self, parent: str) -> dict[str, Any]:
        return self._execute(self.service.enterprises().devices().list(parent=parent))

    def get_device(self, name: str) -> dict[str, Any]:
        return self._execute(self.service.enterprises().devices().get(name=name))

    def patch_device(self, name: str, body: dict[str, Any], update_mask: list[str]) -> dict[str, Any]:
        return self._execute(
            self.service.enterprises().devices().patch(name=name, body=body, updateMask=",".join(update_mask))
        )

    def delete_device(self, name: str) -> dict[str, Any]:
        return self._execute(self.service.enterprises().devices().delete(name=name))

    def issue_command(self, name: str, command_type: CommandType, params: dict[str, Any] | None = None) -> dict:
        """Issue a device command and return the resulting long-running operation."""
        body = {"type": command_type.value}
        body.update(params or {})
        return self._execute(self.service.enterprises().devices().issueCommand(name=name, body=body))

    # Device operations

    def list_operations(self, name: str) -> dict[str, Any]:
        return self._execute(self.service.enterprises().devices().operations().list(name=name))

    def get_operation(self, name: str) -> dict[str, Any]:
        return self._execute(self.service.enterprises().devices().operations().get(name=name))

    def cancel_operation(self, name: str) -> dict[str, Any]:
        return self._execute(self.service.enterprises().devices().operations().cancel(name=name))
