import argparse
import logging

from passmgr import __version__
from passmgr.config import get_config
from passmgr.storage.vaultfile import save_container
from passmgr.ui.prompts import ask_master, ask_new_master
from passmgr.utils.core import create_vault, with_vault
from passmgr.utils.errors import EntryNotFound, InvalidInput, VaultExists
from passmgr.utils.helper import require_vault
from passmgr.utils.models import RecordCollection
from passmgr.utils.update import check_for_update

logger = logging.getLogger(__name__)


def cmd_rm(args: argparse.Namespace) -> None:
    def remove(collection: RecordCollection) -> None:
        if collection.remove(args.key) is None:
            raise EntryNotFound(f"Entry {args.key!r} not found.")

    with_vault(require_vault(args), ask_master(args), remove, write=True)
    print(f"[+] Removed: {args.key}")


def cmd_rename(args: argparse.Namespace) -> None:
    def rename(collection: RecordCollection) -> None:
        if args.new_key in collection:
            raise VaultExists(f"Entry {args.new_key!r} already exists.")
        record = collection.remove(args.key)
        if record is None:
            raise EntryNotFound(f"Entry {args.key!r} not found.")
        collection.insert(args.new_key, record)

    with_vault(require_vault(args), ask_master(args), rename, write=True)
    print(f"[+] Renamed {args.key} -> {args.new_key}")


def cmd_rotate_master(args: argparse.Namespace) -> None:
    """Re-encrypt every entry under a new master password and a fresh salt.

    The old salt and all ciphertext produced under it are discarded together,
    so no blob ever outlives the key it was written with.
    """
    path = require_vault(args)
    collection = with_vault(path, ask_master(args, "Current master password: "), lambda c: c)
    new_password = ask_new_master(args, "new_passphrase")
    if new_password is None:
        raise InvalidInput("Passwords do not match.")
    save_container(path, create_vault(new_password, collection))
    logger.info("rotated master key for %s", path)
    print("[+] Master key rotated.")


def cmd_check_update(args: argparse.Namespace) -> None:
    cfg = get_config()
    status = check_for_update(__version__, cfg.update_url, timeout=cfg.update_timeout)
    if status.update_available:
        print(f"[+] New version available: {status.latest} (installed {status.current})")
    else:
        print(f"[+] Already up to date ({status.current}).")
