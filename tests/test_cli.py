"""Tests for the pushwire CLI."""

import json
from pathlib import Path

from click.testing import CliRunner

from pushwire import __version__
from pushwire.cli import cli
from tests.conftest import sample_ruleset


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "pushwire" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args_prints_usage(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


class TestDecodeCommand:
    def test_decode_action_from_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "action"], input='"dont_notify"')
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["value"] == "dont_notify"

    def test_decode_ruleset_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "rules.json"
        path.write_text(json.dumps(sample_ruleset()))
        result = cli_runner.invoke(cli, ["decode", "ruleset", str(path)])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "override: 2" in result.output

    def test_decode_failure_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "key_id"], input='"ed25519:AB:CD"')
        assert result.exit_code == 1
        assert "TOO_MANY_SEPARATORS" in result.output

    def test_invalid_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "action"], input="{oops")
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "INVALID_JSON"

    def test_unknown_payload_type_rejected_by_click(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "bogus"], input="{}")
        assert result.exit_code == 2

    def test_examples_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "--examples"])
        assert result.exit_code == 0
        assert "pushwire decode ruleset" in result.output


class TestNormalizeCommand:
    def test_quiet_prints_canonical_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "normalize", "ruleset"], input=json.dumps({"room": []})
        )
        assert result.exit_code == 0
        canonical = json.loads(result.output)
        assert list(canonical) == ["content", "override", "room", "sender", "underride"]

    def test_reordered_tweak(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "normalize", "action"], input='{"value": "ring", "set_tweak": "sound"}'
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == {"set_tweak": "sound", "value": "ring"}

    def test_invalid_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["normalize", "action"], input="nope")
        assert result.exit_code == 1
        assert "INVALID_JSON" in result.output


class TestKeyIdCommand:
    def test_builds_key_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "key-id", "signed_curve25519", "AAAAHQ"])
        assert result.exit_code == 0
        assert json.loads(result.output) == "signed_curve25519:AAAAHQ"

    def test_rejects_colon_in_device_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["key-id", "ed25519", "AB:CD"])
        assert result.exit_code == 1
        assert "INVALID_DEVICE_ID" in result.output

    def test_rejects_unknown_algorithm(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["key-id", "rot13", "DEV"])
        assert result.exit_code == 2


def test_types_command(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "types"])
    assert result.exit_code == 0
    assert "ruleset" in json.loads(result.output)["data"]["value"]


def test_config_file_controls_indent(cli_runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "pushwire.toml"
    config.write_text("[output]\nindent = 0\n")
    result = cli_runner.invoke(
        cli, ["-c", str(config), "-q", "decode", "action"], input='{"set_tweak": "sound"}'
    )
    assert result.exit_code == 0
    assert result.output.strip() == '{"set_tweak": "sound"}'
