import argparse

from passmgr import __version__
from passmgr.utils.core import cmd_add, cmd_get, cmd_init, cmd_ls
from passmgr.utils.maintain import cmd_check_update, cmd_rename, cmd_rm, cmd_rotate_master


def _vault_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("-f", "--file", help="Path to the vault file (default: $PASSMGR_VAULT or vault.json)")
    p.add_argument("--passphrase", help="Master password (prompted if omitted)")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="passmgr", description="A simple offline password manager")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_init = sub.add_parser("init", help="Create a new vault")
    _vault_args(p_init)
    p_init.set_defaults(func=cmd_init)

    p_add = sub.add_parser("add", help="Add an entry (replaces an existing one with the same key)")
    _vault_args(p_add)
    p_add.add_argument("key", help="Unique key name for the entry")
    p_add.add_argument("login", help="Login or username")
    p_add.add_argument("-p", "--password", help="Entry password (prompted if omitted)")
    p_add.add_argument("-n", "--notes", help="Optional notes")
    p_add.set_defaults(func=cmd_add)

    p_ls = sub.add_parser("list", help="Show all saved keys")
    _vault_args(p_ls)
    p_ls.set_defaults(func=cmd_ls)

    p_get = sub.add_parser("get", help="Display an entry")
    _vault_args(p_get)
    p_get.add_argument("key", help="Key name of the entry")
    p_get.set_defaults(func=cmd_get)

    p_rm = sub.add_parser("remove", help="Delete an entry")
    _vault_args(p_rm)
    p_rm.add_argument("key", help="Key name of the entry")
    p_rm.set_defaults(func=cmd_rm)

    p_ren = sub.add_parser("rename", help="Move an entry to a new key")
    _vault_args(p_ren)
    p_ren.add_argument("key", help="Current key name")
    p_ren.add_argument("new_key", help="New key name")
    p_ren.set_defaults(func=cmd_rename)

    p_rot = sub.add_parser("rotate-master", help="Re-encrypt the vault under a new master password")
    _vault_args(p_rot)
    p_rot.add_argument("--new-passphrase", help="New master password (prompted if omitted)")
    p_rot.set_defaults(func=cmd_rotate_master)

    p_upd = sub.add_parser("check-update", help="Check the release feed for a newer version")
    p_upd.set_defaults(func=cmd_check_update)

    return p
