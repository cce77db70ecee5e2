import argparse

from pathlib import Path

from passmgr.config import get_config
from passmgr.utils.errors import VaultNotFound


def vault_path(args: argparse.Namespace) -> Path:
    """Vault file from -f/--file, else the configured default."""
    file = getattr(args, "file", None)
    return Path(file) if file else get_config().vault_path


def require_vault(args: argparse.Namespace) -> Path:
    """Like vault_path, but fails before any password prompt if the file is missing."""
    path = vault_path(args)
    if not path.exists():
        raise VaultNotFound(f"File {str(path)!r} not found. Please run 'init' first.")
    return path
