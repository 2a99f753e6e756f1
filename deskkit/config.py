"""Settings for deskkit, loaded from defaults, a YAML file and the environment."""

import os
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "DESKKIT_"
DEFAULT_CONFIG_FILE = Path("~/.config/deskkit/config.yaml")


@dataclass(frozen=True)
class Settings:
    """Defaults used by the file operations and text helpers."""

    encoding: str = "utf-8"
    max_load_attempts: int = 20
    save_dialog_title: str = "Save File"
    open_dialog_title: str = "Open File"
    file_filter: str = "All files (*.*)"
    not_found_title: str = "File Not Found"
    edit_padding: int = 8
    log_level: str = "WARNING"


def _coerce(name: str, value: Any, target: type) -> Any:
    if target is int and not isinstance(value, int):
        try:
            return int(str(value).strip())
        except ValueError:
            raise ValueError(f"Setting '{name}' must be an integer, got {value!r}")
    if target is str:
        return str(value)
    return value


def _config_path(config_file: Optional[Union[str, Path]]) -> Path:
    if config_file:
        return Path(config_file).expanduser()
    env_path = os.getenv(f"{ENV_PREFIX}CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_FILE.expanduser()


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open('r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data


def load_settings(config_file: Optional[Union[str, Path]] = None) -> Settings:
    """
    Build settings from defaults, then a YAML file, then DESKKIT_* variables.

    A `.env` file in the working directory is honoured through python-dotenv.
    Missing config files are fine; unknown keys are logged and skipped.
    """
    load_dotenv()

    types = {f.name: f.type for f in fields(Settings)}
    overrides: Dict[str, Any] = {}

    path = _config_path(config_file)
    if path.is_file():
        logger.debug(f"Reading settings from {path}")
        for key, value in _read_yaml(path).items():
            if key not in types:
                logger.warning(f"Ignoring unknown setting '{key}' in {path}")
                continue
            overrides[key] = _coerce(key, value, types[key])

    for name, target in types.items():
        value = os.getenv(f"{ENV_PREFIX}{name.upper()}")
        if value is not None:
            overrides[name] = _coerce(name, value, target)

    return replace(Settings(), **overrides)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
