# ABOUTME: Tests for the config command
# ABOUTME: Covers key=value updates, display and validation of the config file

"""Tests for the config command."""

import json

from cleo.testers.command_tester import CommandTester

from android_management_cli.cli.commands.config import ConfigCommand
from android_management_cli.config import Config


class TestConfigAdd:
    """Tests for 'config --add'."""

    def test_add_saves_pair(self, config, capsys):
        tester = CommandTester(ConfigCommand(config))

        assert tester.execute('--add "defaultEnterprise=enterprises/E2"') == 0

        saved = json.loads(config.path.read_text())
        assert saved["defaultEnterprise"] == "enterprises/E2"
        assert saved["projectId"] == "my-project"
        assert "defaultEnterprise = enterprises/E2" in capsys.readouterr().out

    def test_value_may_contain_equals(self, config):
        tester = CommandTester(ConfigCommand(config))

        assert tester.execute('--add "callbackUrl=https://example.com/?a=b"') == 0
        assert config.get("callbackUrl") == "https://example.com/?a=b"

    def test_malformed_pair(self, config, capsys):
        tester = CommandTester(ConfigCommand(config))

        assert tester.execute("--add novalue") == 1
        assert not config.path.exists()
        assert 'amdm config --add "key=value"' in capsys.readouterr().err


class TestConfigShowAndValidate:
    """Tests for 'config --show' and 'config --validate'."""

    def test_no_options(self, config, capsys):
        tester = CommandTester(ConfigCommand(config))

        assert tester.execute("") == 0
        assert "No options provided" in capsys.readouterr().out

    def test_show(self, config, capsys):
        tester = CommandTester(ConfigCommand(config))

        assert tester.execute("--show") == 0
        assert "my-project" in capsys.readouterr().out

    def test_show_empty(self, tmp_path, capsys):
        tester = CommandTester(ConfigCommand(Config(path=tmp_path / "c.json")))

        assert tester.execute("--show") == 0
        assert "Configuration is empty" in capsys.readouterr().out

    def test_validate_passes(self, config, capsys):
        tester = CommandTester(ConfigCommand(config))

        assert tester.execute("--validate") == 0
        assert "Validation passed" in capsys.readouterr().out

    def test_validate_fails(self, tmp_path, capsys):
        tester = CommandTester(ConfigCommand(Config({"projectId": "p1"}, path=tmp_path / "c.json")))

        assert tester.execute("--validate") == 1
        assert "serviceAccountKey" in capsys.readouterr().out
