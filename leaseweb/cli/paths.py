from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lw"
CONFIG_DIR_ENV = "LW_CONFIG_DIR"


@dataclass(frozen=True, slots=True)
class CliPaths:
    config_dir: Path

    @property
    def config_path(self) -> Path:
        return self.config_dir / "config.yaml"


def get_paths() -> CliPaths:
    override = os.getenv(CONFIG_DIR_ENV, "").strip()
    if override:
        return CliPaths(config_dir=Path(override).expanduser())
    return CliPaths(config_dir=Path(user_config_dir(APP_NAME)))
