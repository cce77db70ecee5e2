"""
Runtime configuration for passmgr.

Values come from environment variables with defaults. Argon2 cost parameters
are deliberately absent: they are part of the vault format (see crypto.kdf).

Usage:
    from passmgr.config import get_config
    cfg = get_config()
    print(cfg.vault_path)    # Path("vault.json") or $PASSMGR_VAULT
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_UPDATE_URL = "https://api.github.com/repos/ftfour/passmgr/releases/latest"


class ConfigError(ValueError):
    """An environment variable holds a value passmgr cannot use."""


@dataclass(frozen=True)
class Config:
    vault_path: Path = Path("vault.json")
    update_url: str = DEFAULT_UPDATE_URL
    update_timeout: float = 5.0
    log_level: str = "WARNING"


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None


def _env_log_level(name: str, default: str) -> str:
    level = (os.environ.get(name) or default).upper()
    # getLevelName maps known names to ints and anything else to "Level X"
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{name} must be a logging level name, got {level!r}")
    return level


def load_config() -> Config:
    """Build a Config from the current environment."""
    return Config(
        vault_path=Path(os.environ.get("PASSMGR_VAULT") or "vault.json"),
        update_url=os.environ.get("PASSMGR_UPDATE_URL") or DEFAULT_UPDATE_URL,
        update_timeout=_env_float("PASSMGR_UPDATE_TIMEOUT", 5.0),
        log_level=_env_log_level("PASSMGR_LOG_LEVEL", "WARNING"),
    )


_config: Config | None = None


def get_config() -> Config:
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached config (for testing)."""
    global _config
    _config = None
