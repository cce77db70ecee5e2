import json

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from passmgr.utils.errors import CorruptPlaintext

SALT_LEN = 16
NONCE_LEN = 12
KEY_LEN = 32

VAULT_VERSION = 1
SUPPORTED_VERSIONS = (VAULT_VERSION,)


@dataclass(frozen=True)
class Record:
    login: str
    secret: str
    notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        # "password" is the on-disk field name; missing notes stay null
        return {"login": self.login, "password": self.secret, "notes": self.notes}

    @staticmethod
    def from_dict(obj: Any) -> "Record":
        if not isinstance(obj, dict):
            raise CorruptPlaintext("record is not an object")
        login = obj.get("login")
        secret = obj.get("password")
        notes = obj.get("notes")
        if not isinstance(login, str) or not isinstance(secret, str):
            raise CorruptPlaintext("record is missing login or password")
        if notes is not None and not isinstance(notes, str):
            raise CorruptPlaintext("record notes must be text or null")
        return Record(login=login, secret=secret, notes=notes)


class RecordCollection:
    """Decrypted vault contents: unique name -> Record, always sorted by name.

    The serialized form is canonical (sorted keys, compact separators), so the
    same contents always produce the same plaintext bytes.
    """

    def __init__(self, entries: Optional[Dict[str, Record]] = None) -> None:
        self._entries: Dict[str, Record] = dict(entries or {})

    def insert(self, name: str, record: Record) -> Optional[Record]:
        """Store ``record`` under ``name``, returning the record it replaced."""
        previous = self._entries.get(name)
        self._entries[name] = record
        return previous

    def remove(self, name: str) -> Optional[Record]:
        return self._entries.pop(name, None)

    def get(self, name: str) -> Optional[Record]:
        return self._entries.get(name)

    def names(self) -> List[str]:
        return sorted(self._entries)

    def items(self) -> List[tuple[str, Record]]:
        return [(name, self._entries[name]) for name in self.names()]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordCollection):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"RecordCollection(names={self.names()!r})"

    def to_bytes(self) -> bytes:
        entries = {name: rec.to_dict() for name, rec in self.items()}
        return json.dumps({"entries": entries}, ensure_ascii=False, sort_keys=True, separators=(",", ":")).encode("utf-8")

    @staticmethod
    def from_bytes(b: bytes) -> "RecordCollection":
        try:
            obj = json.loads(b.decode("utf-8"))
        except (ValueError, RecursionError) as exc:
            raise CorruptPlaintext(f"plaintext is not valid JSON: {exc}") from exc
        if not isinstance(obj, dict) or not isinstance(obj.get("entries"), dict):
            raise CorruptPlaintext("plaintext has no entries object")
        return RecordCollection({name: Record.from_dict(rec) for name, rec in obj["entries"].items()})


@dataclass(frozen=True)
class Container:
    """On-disk vault document: version tag plus base64 salt and blob."""

    version: int
    salt: str
    blob: str

    def to_dict(self) -> Dict[str, Any]:
        return {"version": self.version, "salt": self.salt, "blob": self.blob}
