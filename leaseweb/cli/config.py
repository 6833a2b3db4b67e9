"""
Profile configuration stored as YAML.

    default_profile: prod
    profiles:
      prod:
        api_key: "..."
"""

from __future__ import annotations

import os
from contextlib import suppress
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import config_error


class ProfileConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    api_key: str = ""


class CLIConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    default_profile: str | None = None
    profiles: dict[str, ProfileConfig] = Field(default_factory=dict)


def load_config(path: Path) -> CLIConfig:
    if not path.exists():
        return CLIConfig()
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise config_error(f"Could not read config file {path}: {exc}") from exc
    if raw is None:
        return CLIConfig()
    try:
        cfg = CLIConfig.model_validate(raw)
    except ValidationError as exc:
        raise config_error(f"Invalid config file {path}: {exc.errors()[0]['msg']}") from exc
    if cfg.default_profile == "":
        cfg.default_profile = None
    return cfg


def write_config(path: Path, cfg: CLIConfig) -> None:
    path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
    payload = cfg.model_dump(exclude_none=True)
    path.write_text(
        yaml.safe_dump(payload, sort_keys=False, default_flow_style=False), encoding="utf-8"
    )
    if os.name == "posix":
        with suppress(OSError):
            path.chmod(0o600)


def mask_key(key: str) -> str:
    if len(key) <= 8:
        return "*" * len(key)
    return key[:4] + "*" * (len(key) - 8) + key[-4:]
