import argparse
import logging
import os

from pathlib import Path
from typing import Callable, TypeVar

from passmgr.crypto.envelope import decrypt_vault, encrypt_vault
from passmgr.storage.container import decode, encode
from passmgr.storage.vaultfile import load_container, save_container
from passmgr.ui.prompts import ask_entry_password, ask_master, ask_new_master, ask_notes
from passmgr.utils.errors import EntryNotFound, InvalidInput, VaultExists, VaultNotFound
from passmgr.utils.helper import require_vault, vault_path
from passmgr.utils.models import Container, Record, RecordCollection, SALT_LEN, VAULT_VERSION

logger = logging.getLogger(__name__)

T = TypeVar("T")


def create_vault(password: str, collection: RecordCollection | None = None) -> Container:
    """New container under a fresh salt; empty unless a collection is given."""
    salt = os.urandom(SALT_LEN)
    blob = encrypt_vault(collection if collection is not None else RecordCollection(), password, salt)
    return encode(VAULT_VERSION, salt, blob)


def open_vault(container: Container, password: str) -> RecordCollection:
    salt, blob = decode(container)
    return decrypt_vault(blob, password, salt)


def save_vault(collection: RecordCollection, password: str, existing_salt: bytes, version: int) -> Container:
    """Re-encrypt under the vault's existing salt. The salt is never regenerated here."""
    blob = encrypt_vault(collection, password, existing_salt)
    return encode(version, existing_salt, blob)


def with_vault(path: Path, password: str, action: Callable[[RecordCollection], T], *, write: bool = False) -> T:
    """open -> action -> (save) pipeline shared by every command.

    If ``action`` raises, nothing is written.
    """
    container = load_container(path)
    if container is None:
        raise VaultNotFound(f"File {str(path)!r} not found. Please run 'init' first.")
    salt, blob = decode(container)
    collection = decrypt_vault(blob, password, salt)
    result = action(collection)
    if write:
        save_container(path, save_vault(collection, password, salt, container.version))
    return result


def cmd_init(args: argparse.Namespace) -> None:
    path = vault_path(args)
    if path.exists():
        raise VaultExists(f"File {str(path)!r} already exists. Not overwriting.")
    password = ask_new_master(args)
    if password is None:
        raise InvalidInput("Passwords do not match.")
    save_container(path, create_vault(password))
    logger.info("initialized vault at %s", path)
    print(f"[+] Vault created: {path}")


def cmd_add(args: argparse.Namespace) -> None:
    path = require_vault(args)
    master = ask_master(args)

    def insert(collection: RecordCollection) -> None:
        record = Record(login=args.login, secret=ask_entry_password(args.password), notes=ask_notes(args.notes))
        if collection.insert(args.key, record) is not None:
            logger.info("replacing existing entry %r", args.key)

    with_vault(path, master, insert, write=True)
    print(f"[+] Entry added: {args.key}")


def cmd_ls(args: argparse.Namespace) -> None:
    path = require_vault(args)
    names = with_vault(path, ask_master(args), lambda c: c.names())
    if not names:
        print("(empty)")
        return
    print("List of saved entries:")
    for name in names:
        print(f"  - {name}")


def cmd_get(args: argparse.Namespace) -> None:
    path = require_vault(args)

    def lookup(collection: RecordCollection) -> Record:
        record = collection.get(args.key)
        if record is None:
            raise EntryNotFound(f"Entry {args.key!r} not found.")
        return record

    record = with_vault(path, ask_master(args), lookup)
    print(f"Entry: {args.key}")
    print(f"Login: {record.login}")
    print(f"Password: {record.secret}")
    if record.notes is not None:
        print(f"Notes: {record.notes}")
