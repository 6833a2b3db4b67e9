from __future__ import annotations

import os
from pathlib import Path

import pytest

pytest.importorskip("rich_click")
pytest.importorskip("platformdirs")

import yaml
from click.testing import CliRunner

from leaseweb.cli.config import CLIConfig, ProfileConfig, load_config, mask_key, write_config
from leaseweb.cli.errors import CLIError
from leaseweb.cli.main import cli


def _env(tmp_path: Path) -> dict[str, str | None]:
    return {
        "LEASEWEB_API_KEY": None,
        "LEASEWEB_PROFILE": None,
        "LW_CONFIG_DIR": str(tmp_path),
        "COLUMNS": "120",
        "FORCE_COLOR": None,
    }


def test_mask_key() -> None:
    assert mask_key("KEY12345678") == "KEY1***5678"
    assert mask_key("short") == "*****"
    assert mask_key("12345678") == "********"
    assert mask_key("") == ""


def test_load_config_missing_file_is_empty(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "config.yaml")
    assert cfg.default_profile is None
    assert cfg.profiles == {}


def test_load_config_ignores_unknown_keys_and_blank_default(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "default_profile: ''\nextra: 1\nprofiles:\n  prod:\n    api_key: abc\n    note: x\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.default_profile is None
    assert cfg.profiles["prod"].api_key == "abc"


def test_load_config_rejects_malformed_file(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("profiles: [1, 2]\n", encoding="utf-8")
    with pytest.raises(CLIError) as excinfo:
        load_config(path)
    assert excinfo.value.exit_code == 2
    assert excinfo.value.error_type == "config_error"


def test_write_config_round_trip_and_permissions(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.yaml"
    write_config(
        path, CLIConfig(default_profile="prod", profiles={"prod": ProfileConfig(api_key="k")})
    )
    assert yaml.safe_load(path.read_text(encoding="utf-8")) == {
        "default_profile": "prod",
        "profiles": {"prod": {"api_key": "k"}},
    }
    assert load_config(path).profiles["prod"].api_key == "k"
    if os.name == "posix":
        assert path.stat().st_mode & 0o077 == 0


def test_config_init_single_profile_becomes_default(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli, ["config", "init"], input="prod\nKEY12345678\ndone\n", env=_env(tmp_path)
    )
    assert result.exit_code == 0, result.output
    assert 'Profile "prod" saved.' in result.output
    assert "Configuration written to" in result.output
    saved = yaml.safe_load((tmp_path / "config.yaml").read_text(encoding="utf-8"))
    assert saved == {"default_profile": "prod", "profiles": {"prod": {"api_key": "KEY12345678"}}}


def test_config_init_prompts_for_default_with_several_profiles(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli,
        ["config", "init"],
        input="a\nkey-aaaaaaaa\nb\nkey-bbbbbbbb\ndone\nb\n",
        env=_env(tmp_path),
    )
    assert result.exit_code == 0, result.output
    cfg = load_config(tmp_path / "config.yaml")
    assert cfg.default_profile == "b"
    assert set(cfg.profiles) == {"a", "b"}


def test_config_init_skips_profile_without_key(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli, ["config", "init"], input="prod\n\ndone\n", env=_env(tmp_path)
    )
    assert result.exit_code == 0, result.output
    assert "Skipping profile" in result.output
    assert load_config(tmp_path / "config.yaml").profiles == {}


def test_config_show_lists_masked_profiles(tmp_path: Path) -> None:
    write_config(
        tmp_path / "config.yaml",
        CLIConfig(
            default_profile="prod",
            profiles={
                "prod": ProfileConfig(api_key="KEY12345678"),
                "test": ProfileConfig(api_key="tiny"),
            },
        ),
    )
    result = CliRunner().invoke(cli, ["config", "show"], env=_env(tmp_path))
    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert lines[0] == f"Config file: {tmp_path / 'config.yaml'}"
    assert lines[1] == "Default profile: prod"
    assert lines[2] == "Active profile: prod"
    assert lines[4].split() == ["PROFILE", "API", "KEY", "DEFAULT"]
    assert lines[5].split() == ["prod", "KEY1***5678", "*"]
    assert lines[6].split() == ["test", "****"]
    assert "KEY12345678" not in result.output


def test_config_show_active_profile_follows_flag(tmp_path: Path) -> None:
    write_config(
        tmp_path / "config.yaml",
        CLIConfig(default_profile="prod", profiles={"prod": ProfileConfig(api_key="k")}),
    )
    result = CliRunner().invoke(cli, ["-p", "staging", "config", "show"], env=_env(tmp_path))
    assert result.exit_code == 0
    assert "Active profile: staging" in result.stdout


def test_config_show_without_profiles(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["config", "show"], env=_env(tmp_path))
    assert result.exit_code == 0
    assert result.stdout == ""
    assert "No profiles configured" in result.output


def test_malformed_config_exits_with_config_error(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text("profiles: [1, 2]\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["config", "show"], env=_env(tmp_path))
    assert result.exit_code == 2
    assert "Invalid config file" in result.output
