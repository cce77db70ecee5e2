"""Interactive input for the CLI. The vault core only ever sees the returned strings."""
import argparse
import getpass


def ask_master(args: argparse.Namespace, prompt: str = "Master password: ") -> str:
    if getattr(args, "passphrase", None):
        return args.passphrase
    return getpass.getpass(prompt)


def ask_new_master(args: argparse.Namespace, attr: str = "passphrase") -> str | None:
    """New master password, entered twice. None when the two entries differ."""
    given = getattr(args, attr, None)
    if given:
        return given
    first = getpass.getpass("Enter master password: ")
    second = getpass.getpass("Confirm password: ")
    if first != second:
        return None
    return first


def ask_entry_password(given: str | None) -> str:
    if given is not None:
        return given
    return getpass.getpass("Password for new entry: ")


def ask_notes(given: str | None) -> str | None:
    """Empty notes, given or typed, mean no notes at all."""
    if given is not None:
        return given or None
    text = input("Add a note? (press Enter to skip): ").strip()
    return text or None
