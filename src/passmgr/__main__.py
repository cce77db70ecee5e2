#!/usr/bin/env python3
"""
passmgr - minimal offline password manager (single encrypted JSON vault)

Vault file (JSON, one per vault):
    {
      "version": 1,
      "salt": "<base64, 16 bytes>",
      "blob": "<base64, nonce(12) || ciphertext || tag(16)>"
    }

The blob decrypts to the entries document:
    {"entries": {"<key>": {"login": "...", "notes": null, "password": "..."}}}

Commands:
  init                 Create a new vault (refuses to overwrite)
  add <key> <login>    Add or replace an entry
  list                 Show all saved keys
  get <key>            Display an entry
  remove <key>         Delete an entry
  rename <key> <new>   Move an entry to a new key
  rotate-master        Re-encrypt under a new master password and salt
  check-update         Ask the release feed whether a newer version exists

Security choices:
  - Key: Argon2id(password, salt) -> 32 bytes via argon2-cffi (t=2, m=15000 KiB, p=1)
  - AEAD: AES-256-GCM via cryptography.hazmat, fresh 12-byte nonce per save
  - Salt is fixed for the life of a vault; only rotate-master replaces it,
    together with all ciphertext.
"""
from __future__ import annotations

import logging
import sys

from passmgr.config import ConfigError, get_config
from passmgr.ui.cli import build_parser
from passmgr.utils.errors import VaultError
from passmgr.utils.update import UpdateCheckError


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        level = logging.DEBUG if args.verbose else get_config().log_level
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        args.func(args)
    except (ConfigError, VaultError, UpdateCheckError) as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
