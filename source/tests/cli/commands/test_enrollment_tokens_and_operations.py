# ABOUTME: Tests for enrollment-tokens and operations commands
# ABOUTME: Checks request bodies and resource names built from flags

"""Tests for enrollment-tokens and operations commands."""

from cleo.testers.command_tester import CommandTester

from android_management_cli.cli.commands.enrollment_tokens import (
    EnrollmentTokensAddCommand,
    EnrollmentTokensDeleteCommand,
    EnrollmentTokensGetCommand,
    EnrollmentTokensListCommand,
)
from android_management_cli.cli.commands.operations import (
    OperationsCancelCommand,
    OperationsGetCommand,
    OperationsListCommand,
)


class TestEnrollmentTokens:
    """Tests for enrollment-tokens commands."""

    def test_add_defaults_to_default_policy(self, config, client, capsys):
        client.create_enrollment_token.return_value = {"value": "ABCDEF"}
        tester = CommandTester(EnrollmentTokensAddCommand(config, client))

        assert tester.execute("--name kiosk-token") == 0

        client.create_enrollment_token.assert_called_once_with(
            "enterprises/LC03trycps", {"name": "kiosk-token", "policyName": "enterprises/LC03trycps/policies/default"}
        )
        assert "https://enterprise.google.com/android/enroll?et=ABCDEF" in capsys.readouterr().out

    def test_add_byod_with_duration(self, config, client):
        client.create_enrollment_token.return_value = {"value": "ABCDEF"}
        tester = CommandTester(EnrollmentTokensAddCommand(config, client))

        assert tester.execute("--name byod-token --policy-id kiosk --byod --duration 3600s") == 0

        client.create_enrollment_token.assert_called_once_with(
            "enterprises/LC03trycps",
            {
                "name": "byod-token",
                "policyName": "enterprises/LC03trycps/policies/kiosk",
                "allowPersonalUsage": "PERSONAL_USAGE_ALLOWED",
                "duration": "3600s",
            },
        )

    def test_add_requires_name(self, config, client, capsys):
        tester = CommandTester(EnrollmentTokensAddCommand(config, client))

        assert tester.execute("--byod") == 1
        client.create_enrollment_token.assert_not_called()
        assert "Missing required option '--name'" in capsys.readouterr().err

    def test_list_empty(self, config, client, capsys):
        client.list_enrollment_tokens.return_value = {}
        tester = CommandTester(EnrollmentTokensListCommand(config, client))

        assert tester.execute("") == 0
        assert "No active enrollment tokens" in capsys.readouterr().out

    def test_get(self, config, client, capsys):
        client.get_enrollment_token.return_value = {
            "name": "enterprises/LC03trycps/enrollmentTokens/tok1",
            "value": "ABCDEF",
        }
        tester = CommandTester(EnrollmentTokensGetCommand(config, client))

        assert tester.execute("--id tok1") == 0
        client.get_enrollment_token.assert_called_once_with("enterprises/LC03trycps/enrollmentTokens/tok1")
        assert "ABCDEF" in capsys.readouterr().out

    def test_delete(self, config, client):
        tester = CommandTester(EnrollmentTokensDeleteCommand(config, client))

        assert tester.execute("--id tok1") == 0
        client.delete_enrollment_token.assert_called_once_with("enterprises/LC03trycps/enrollmentTokens/tok1")


class TestOperations:
    """Tests for operations commands."""

    def test_list(self, config, client, capsys):
        client.list_operations.return_value = {
            "operations": [
                {
                    "name": "enterprises/LC03trycps/devices/dev1/operations/op1",
                    "metadata": {"type": "REBOOT"},
                    "done": True,
                }
            ]
        }
        tester = CommandTester(OperationsListCommand(config, client))

        assert tester.execute("--device dev1") == 0

        client.list_operations.assert_called_once_with("enterprises/LC03trycps/devices/dev1/operations")
        out = capsys.readouterr().out
        assert "op1" in out
        assert "REBOOT" in out

    def test_get(self, config, client):
        client.get_operation.return_value = {"name": "enterprises/LC03trycps/devices/dev1/operations/op1"}
        tester = CommandTester(OperationsGetCommand(config, client))

        assert tester.execute("--device dev1 --id op1") == 0
        client.get_operation.assert_called_once_with("enterprises/LC03trycps/devices/dev1/operations/op1")

    def test_cancel_requires_id(self, config, client, capsys):
        tester = CommandTester(OperationsCancelCommand(config, client))

        assert tester.execute("--device dev1") == 1
        client.cancel_operation.assert_not_called()
        assert "Missing required option '--id'" in capsys.readouterr().err
