"""Tests for the command line runner."""

import json

import pytest
import yaml

from pattern_showcase.cli.main import main, parse_args


@pytest.fixture(autouse=True)
def _isolate_logging(restore_root_logging):
    yield


class TestParseArgs:
    """Test argument parsing."""

    def test_run_command(self):
        args = parse_args(["run", "observer"])

        assert args.command == "run"
        assert args.demo == "observer"

    def test_list_defaults_to_table(self):
        assert parse_args(["list"]).format == "table"

    def test_command_is_required(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_args([])

        assert exc_info.value.code == 2


class TestMain:
    """Test command execution and exit status."""

    def test_run_single_demo(self, capsys):
        exit_code = main(["run", "decorator"])

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == [
            "Basic Coffee costs $2.00",
            "Basic Coffee + Milk + Sugar costs $2.70",
        ]

    def test_run_all_prints_headings_in_order(self, capsys):
        exit_code = main(["run", "all"])

        lines = capsys.readouterr().out.splitlines()
        headings = [line for line in lines if line.startswith("===")]
        assert exit_code == 0
        assert headings == [
            "=== Observer ===",
            "=== Strategy ===",
            "=== Singleton ===",
            "=== Factory Method ===",
            "=== Adapter ===",
            "=== Decorator ===",
        ]

    def test_run_unknown_demo_fails(self, capsys):
        exit_code = main(["run", "visitor"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert "Unrecognized demo type: 'visitor'" in captured.err
        assert captured.out == ""

    def test_draw_known_shape(self, capsys):
        assert main(["draw", "CIRCLE"]) == 0
        assert capsys.readouterr().out == "Drawing a Circle\n"

    def test_draw_unknown_shape_fails(self, capsys):
        exit_code = main(["draw", "triangle"])

        assert exit_code == 1
        assert "Unrecognized shape type: 'triangle'" in capsys.readouterr().err

    def test_list_json(self, capsys):
        assert main(["list", "--format", "json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert [demo["name"] for demo in data["demos"]] == [
            "observer",
            "strategy",
            "singleton",
            "factory",
            "adapter",
            "decorator",
        ]

    def test_list_yaml(self, capsys):
        assert main(["list", "--format", "yaml"]) == 0

        data = yaml.safe_load(capsys.readouterr().out)
        assert data["demos"][0]["title"] == "Observer"

    def test_list_table(self, capsys):
        assert main(["list"]) == 0

        out = capsys.readouterr().out
        assert out.splitlines()[0].split() == ["NAME", "PATTERN", "DESCRIPTION"]
        assert "Factory Method" in out

    def test_config_file_controls_run_all_order(self, capsys, tmp_path):
        config_file = tmp_path / "showcase.yaml"
        config_file.write_text("demo_order:\n  - factory\n  - adapter\n")

        exit_code = main(["--config", str(config_file), "run", "all"])

        lines = capsys.readouterr().out.splitlines()
        assert exit_code == 0
        assert [line for line in lines if line.startswith("===")] == [
            "=== Factory Method ===",
            "=== Adapter ===",
        ]

    def test_missing_config_file_fails(self, capsys, tmp_path):
        exit_code = main(["--config", str(tmp_path / "missing.json"), "list"])

        assert exit_code == 1
        assert "Configuration file not found" in capsys.readouterr().err

    def test_directory_config_fails(self, capsys, tmp_path):
        exit_code = main(["--config", str(tmp_path), "list"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.err.startswith("Error: Failed to read configuration file")
        assert captured.out == ""

    def test_non_utf8_config_fails(self, capsys, tmp_path):
        config_file = tmp_path / "showcase.yaml"
        config_file.write_bytes(b"demo_order: [\xff\xfe]\n")

        exit_code = main(["--config", str(config_file), "list"])

        assert exit_code == 1
        assert capsys.readouterr().err.startswith("Error: ")

    def test_unknown_name_in_demo_order_fails_before_any_output(self, capsys, tmp_path):
        config_file = tmp_path / "showcase.yaml"
        config_file.write_text("demo_order:\n  - factory\n  - visitor\n")

        exit_code = main(["--config", str(config_file), "run", "all"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Unrecognized demo type: 'visitor'" in captured.err

    def test_log_level_override_keeps_stdout_clean(self, capsys):
        exit_code = main(["--log-level", "DEBUG", "run", "factory"])

        captured = capsys.readouterr()
        assert exit_code == 0
        assert captured.out.splitlines() == ["Drawing a Circle", "Drawing a Square"]
