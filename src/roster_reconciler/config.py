import os
from pathlib import Path
from typing import Optional

import yaml

CONFIG_ENV_VAR = "ROSTER_RECONCILER_CONFIG"
CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "roster_reconciler.yml"


class RRConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.reconciliation = data.get("reconciliation", {}) or {}
        self.debug = bool(data.get("debug", False))


def resolve_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return CONFIG_PATH


def load_config(path: Optional[Path] = None) -> 'RRConfig':
    """
    Read the YAML config.

    An explicitly requested file must exist. The default location is optional:
    an installed package without a checkout runs on built-in defaults.
    """
    explicit = path is not None or bool(os.environ.get(CONFIG_ENV_VAR))
    config_path = Path(path) if path is not None else resolve_config_path()

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return RRConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return RRConfig(data)


_config_cache = None


def get_config() -> 'RRConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config_cache() -> None:
    global _config_cache
    _config_cache = None
