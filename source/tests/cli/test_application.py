# ABOUTME: Tests for the CLI application wiring
# ABOUTME: Command registration, multi-word dispatch and the entry point's setup handling

"""Tests for the CLI application."""

from unittest.mock import patch

import pytest
from cleo.testers.application_tester import ApplicationTester

from android_management_cli.cli import API_COMMANDS, create_application, main
from android_management_cli.errors import SetupAborted


class TestCreateApplication:
    """Tests for create_application."""

    def test_all_commands_registered(self, config, client):
        application = create_application(config, client)

        assert application.has("config")
        for command_class in API_COMMANDS:
            assert application.has(command_class.name), f"{command_class.name} not registered"

    @pytest.mark.parametrize(
        "name",
        [
            "create-signup-url",
            "enterprises bind",
            "policies patch",
            "enrollment-tokens add",
            "devices list",
            "devices update",
            "devices reboot",
            "operations cancel",
        ],
    )
    def test_command_surface(self, config, client, name):
        assert create_application(config, client).has(name)

    def test_dispatches_multi_word_command(self, config, client, capsys):
        client.list_devices.return_value = {}
        application = create_application(config, client)
        application.auto_exits(False)

        status = ApplicationTester(application).execute("devices list -e enterprises/E9")

        assert status == 0
        client.list_devices.assert_called_once_with("enterprises/E9")
        assert "No devices enrolled" in capsys.readouterr().out

    def test_unknown_option_fails(self, config, client):
        application = create_application(config, client)
        application.auto_exits(False)

        status = ApplicationTester(application).execute("devices list --bogus")

        assert status != 0
        client.list_devices.assert_not_called()


class TestMain:
    """Tests for the entry point."""

    def test_setup_aborted_exits_1(self, capsys):
        with patch("android_management_cli.cli.ensure_ready", side_effect=SetupAborted("Setup cancelled.")):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        assert "Setup cancelled." in capsys.readouterr().err

    def test_corrupt_config_exits_1(self, tmp_path, capsys):
        config_file = tmp_path / "broken.json"
        config_file.write_text("{broken")

        with patch("android_management_cli.cli.Config.CONFIG_FILE", config_file):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        assert "not valid JSON" in capsys.readouterr().err

    def test_error_message_not_wrapped_for_long_paths(self, tmp_path, capsys):
        config_dir = tmp_path / ("nested-directory-" * 6)
        config_dir.mkdir()
        config_file = config_dir / "broken.json"
        config_file.write_text("{broken")

        with patch("android_management_cli.cli.Config.CONFIG_FILE", config_file):
            with pytest.raises(SystemExit):
                main()

        assert f"Configuration file {config_file} is not valid JSON" in capsys.readouterr().err
