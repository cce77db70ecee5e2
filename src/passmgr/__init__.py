"""Offline password manager: one Argon2id + AES-256-GCM encrypted JSON vault."""

__version__ = "0.1.0"
