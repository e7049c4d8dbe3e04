"""
Test suite for the command-line interface.
"""

import json

import pytest
import yaml

from sim_commander.cli.commands import parse_args
from sim_commander.main import main


@pytest.fixture
def quiet_config(tmp_path):
    """Config file that keeps log output off the captured streams."""
    path = tmp_path / "quiet.yaml"
    path.write_text(yaml.safe_dump({"app": {"log_to_console": False}}), encoding="utf-8")
    return str(path)


def run_cli(capsys, quiet_config, *argv):
    exit_code = main(["--config", quiet_config, *argv])
    captured = capsys.readouterr()
    return exit_code, captured.out, captured.err


@pytest.mark.cli
class TestArgumentParsing:
    def test_run_takes_several_instructions(self):
        args = parse_args(["--run", "list apps", "take screenshot", "--stop-on-error"])

        assert args.run == ["list apps", "take screenshot"]
        assert args.stop_on_error is True

    def test_help_topic_defaults(self):
        assert parse_args(["--help-topic"]).help_topic == "help"
        assert parse_args([]).help_topic is None

    def test_actions_are_exclusive(self):
        with pytest.raises(SystemExit):
            parse_args(["--parse", "tap at 1, 2", "--list-commands"])


@pytest.mark.cli
class TestCliCommands:
    def test_parse(self, capsys, quiet_config):
        exit_code, out, _ = run_cli(capsys, quiet_config, "--parse", "tap at 100, 200")

        assert exit_code == 0
        assert "Command:    tap" in out
        assert "Type:       tap" in out

    def test_parse_json(self, capsys, quiet_config):
        exit_code, out, _ = run_cli(capsys, quiet_config, "--json", "--parse", "launch app com.apple.mobilesafari")

        payload = json.loads(out)
        assert exit_code == 0
        assert payload["type"] == "launchApp"
        assert payload["parameters"] == {"bundle_id": "com.apple.mobilesafari"}
        assert payload["confidence"] == 0.9

    def test_parse_unknown(self, capsys, quiet_config):
        exit_code, _, err = run_cli(capsys, quiet_config, "--parse", "list simulatrs")

        assert exit_code == 1
        assert "Did you mean one of these?" in err

    def test_parse_unknown_json(self, capsys, quiet_config):
        exit_code, out, _ = run_cli(capsys, quiet_config, "--json", "--parse", "list simulatrs")

        payload = json.loads(out)
        assert exit_code == 1
        assert payload["type"] == "command_not_found"
        assert "list simulators" in payload["suggestions"]

    def test_run_single(self, capsys, quiet_config):
        exit_code, out, _ = run_cli(capsys, quiet_config, "--run", "list apps")

        assert exit_code == 0
        assert "✅ Success" in out
        assert "listApps" in out

    def test_run_sequence_json(self, capsys, quiet_config):
        exit_code, out, _ = run_cli(
            capsys, quiet_config, "--json", "--run", "create session with iPhone 15", "tap at 1, 2"
        )

        payload = json.loads(out)
        assert exit_code == 0
        assert payload["success"] is True
        assert [item["data"]["command"] for item in payload["data"]] == ["createSimulatorSession", "tap"]

    def test_run_unknown(self, capsys, quiet_config):
        exit_code, _, err = run_cli(capsys, quiet_config, "--run", "juggle flaming torches")

        assert exit_code == 1
        assert "Could not understand the instruction" in err

    def test_suggest(self, capsys, quiet_config):
        exit_code, out, _ = run_cli(capsys, quiet_config, "--suggest", "list sim")

        assert exit_code == 0
        assert "list simulators" in out.splitlines()

    def test_list_commands(self, capsys, quiet_config):
        exit_code, out, _ = run_cli(capsys, quiet_config, "--list-commands")

        assert exit_code == 0
        assert "tap: Tap the screen at the given coordinates" in out
        assert "required: x, y" in out

    def test_list_commands_json(self, capsys, quiet_config):
        exit_code, out, _ = run_cli(capsys, quiet_config, "--json", "--list-commands")

        commands = json.loads(out)
        assert exit_code == 0
        assert "approve permissions" in [c["command"] for c in commands]

    def test_help_category(self, capsys, quiet_config):
        exit_code, out, _ = run_cli(capsys, quiet_config, "--help-topic", "ui")

        assert exit_code == 0
        assert "Available commands:" in out
        assert "• swipe" in out

    def test_default_is_contextual_help(self, capsys, quiet_config):
        exit_code, out, _ = run_cli(capsys, quiet_config)

        assert exit_code == 0
        assert out.startswith("No active simulator session")

    def test_help_with_active_session(self, capsys, quiet_config):
        exit_code, out, _ = run_cli(capsys, quiet_config, "--help-topic", "--active-session")

        assert exit_code == 0
        assert out.startswith("Active simulator session detected")

    def test_missing_config_file(self, capsys, tmp_path):
        exit_code = main(["--config", str(tmp_path / "missing.yaml"), "--list-commands"])

        assert exit_code == 1
        assert "Configuration error" in capsys.readouterr().err
