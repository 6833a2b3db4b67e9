from __future__ import annotations

import json
from pathlib import Path

import pytest

pytest.importorskip("rich_click")
pytest.importorskip("rich")

from click.testing import CliRunner

import leaseweb
from leaseweb.cli.main import cli


def _env(tmp_path: Path) -> dict[str, str | None]:
    return {
        "LEASEWEB_API_KEY": None,
        "LEASEWEB_PROFILE": None,
        "LW_CONFIG_DIR": str(tmp_path),
        "FORCE_COLOR": None,
    }


def test_no_args_shows_help(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, [], env=_env(tmp_path))
    assert result.exit_code == 0
    assert "dedicated-servers" in result.output
    assert "invoices" in result.output


def test_version_flag(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["--version"], env=_env(tmp_path))
    assert result.exit_code == 0
    assert result.output.strip() == f"lw version {leaseweb.__version__}"


def test_version_command_human_output(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["version"], env=_env(tmp_path))
    assert result.exit_code == 0
    assert result.stdout == f"lw version {leaseweb.__version__}\n"


def test_version_command_json_output(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["-o", "json", "version"], env=_env(tmp_path))
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["version"] == leaseweb.__version__
    assert "pythonVersion" in payload


def test_completion_prints_script(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["completion", "bash"], env=_env(tmp_path))
    assert result.exit_code == 0
    assert result.stdout == 'eval "$(_LW_COMPLETE=bash_source lw)"\n'


def test_completion_rejects_unknown_shell(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["completion", "tcsh"], env=_env(tmp_path))
    assert result.exit_code == 2


def test_config_path_reports_location(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli, ["config", "path", "--output", "jsonline"], env=_env(tmp_path)
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {"path": str(tmp_path / "config.yaml"), "exists": False}


def test_subcommand_help_does_not_need_api_key(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["ds", "list", "--help"], env=_env(tmp_path))
    assert result.exit_code == 0
    assert "--limit" in result.output


def test_invalid_output_format_is_usage_error(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["-o", "xml", "version"], env=_env(tmp_path))
    assert result.exit_code == 2
