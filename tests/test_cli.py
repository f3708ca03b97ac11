"""
Tests for the command-line interface

Tests cover:
- Argument parsing
- Config subcommands
- Channel validation before launching the UI
"""
import json

import pytest

from huddle.cli import main, parse_value, setup_argument_parser


class TestArgumentParser:
    """Tests for argument parsing"""

    def test_defaults(self):
        args = setup_argument_parser().parse_args([])
        assert args.command is None
        assert args.channel is None
        assert args.log_level is None

    def test_run_options(self):
        args = setup_argument_parser().parse_args(["--channel", "random", "--name", "ada", "--log-level", "debug"])
        assert args.channel == "random"
        assert args.name == "ada"
        assert args.log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(SystemExit):
            setup_argument_parser().parse_args(["--log-level", "loud"])

    def test_config_requires_operation(self):
        with pytest.raises(SystemExit):
            setup_argument_parser().parse_args(["config"])

    @pytest.mark.parametrize("raw,expected", [
        ("false", False),
        ("42", 42),
        ('["a", "b"]', ["a", "b"]),
        ("hello there", "hello there"),
    ])
    def test_parse_value(self, raw, expected):
        assert parse_value(raw) == expected


class TestConfigCommands:
    """Tests for huddle config"""

    def test_show(self, capsys):
        assert main(["config", "show"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["editor"]["placeholder"] == "Write something..."

    def test_get(self, capsys):
        assert main(["config", "get", "workspace.default_channel"]) == 0
        assert json.loads(capsys.readouterr().out) == "general"

    def test_get_unknown(self):
        assert main(["config", "get", "workspace.nope"]) == 1

    def test_set(self, config_manager):
        assert main(["config", "set", "editor.show_toolbar", "false"]) == 0
        assert config_manager.config.editor.show_toolbar is False

    def test_set_string_value(self, config_manager):
        assert main(["config", "set", "editor.placeholder", "Say something"]) == 0
        assert config_manager.config.editor.placeholder == "Say something"

    def test_set_unknown_key(self):
        assert main(["config", "set", "editor.nope", "1"]) == 1

    def test_set_invalid_value(self):
        assert main(["config", "set", "editor.max_image_bytes", "lots"]) == 1

    def test_reset(self, config_manager):
        config_manager.set_config("editor.placeholder", "changed")
        assert main(["config", "reset"]) == 0
        assert config_manager.config.editor.placeholder == "Write something..."


class TestRunCommand:
    """Tests for launching the UI"""

    def test_unknown_channel(self, capsys):
        assert main(["--channel", "nowhere"]) == 2
        assert "Unknown channel" in capsys.readouterr().out

    def test_runs_app(self, monkeypatch):
        launched = {}

        def fake_run(self):
            launched["channel"] = self.channel
            launched["name"] = self.display_name

        monkeypatch.setattr("huddle.tui.app.HuddleApp.run", fake_run)
        monkeypatch.setattr("huddle.utils.logging.LogManager.use_tui_handler", lambda self: None)
        assert main(["--channel", "random", "--name", "ada"]) == 0
        assert launched == {"channel": "random", "name": "ada"}
