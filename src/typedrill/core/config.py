from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from typedrill.core.errors import ConfigError
from typedrill.core.models.enums import MatchPolicy


class TrainerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    camel_case: bool = False
    text_path: Path = Path("text.txt")
    audio_dir: Path = Path("audio")
    sound: bool = True

    @property
    def policy(self) -> MatchPolicy:
        return MatchPolicy.STRICT if self.camel_case else MatchPolicy.RELAXED

    def with_overrides(self, **overrides: Any) -> TrainerConfig:
        """Return a copy with every non-None override applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        if not values:
            return self
        return self.model_validate({**self.model_dump(), **values})


def config_dir() -> Path:
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "typedrill"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "typedrill"
    if os.name == "nt":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "typedrill"
    return Path.home() / ".config" / "typedrill"


def config_path() -> Path:
    return config_dir() / "config.yaml"


def load_config(path: Path | None = None) -> TrainerConfig:
    """Read trainer defaults from YAML, falling back to built-in defaults.

    A missing file is not an error. A file that exists but cannot be parsed, or
    that holds unknown keys, raises ConfigError.
    """
    path = path or config_path()
    if not path.exists():
        return TrainerConfig()
    yaml = YAML(typ="safe")
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.load(handle)
    except (OSError, YAMLError) as exc:
        raise ConfigError(f"Failed to read config file {path}.") from exc
    if data is None:
        return TrainerConfig()
    if not isinstance(data, dict):
        raise ConfigError("Config file must be a mapping at the top level.")
    try:
        return TrainerConfig.model_validate(data)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
            for error in exc.errors()
        )
        raise ConfigError(f"Invalid config file {path}: {details}") from exc
