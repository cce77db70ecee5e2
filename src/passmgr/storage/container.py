import base64
import binascii
import json
import logging

from typing import Any, Tuple

from passmgr.utils.errors import InvalidEncoding, UnsupportedVersion
from passmgr.utils.models import Container, SALT_LEN, SUPPORTED_VERSIONS

logger = logging.getLogger(__name__)


def encode(version: int, salt: bytes, envelope: bytes) -> Container:
    return Container(
        version=version,
        salt=base64.b64encode(salt).decode("ascii"),
        blob=base64.b64encode(envelope).decode("ascii"),
    )


def _b64d(field: str, value: str) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncoding(f"{field} is not valid base64") from exc


def decode(container: Container) -> Tuple[bytes, bytes]:
    """Container -> (salt, envelope). The envelope's own layout is not checked here."""
    if container.version not in SUPPORTED_VERSIONS:
        raise UnsupportedVersion(f"Unsupported vault version: {container.version}")
    salt = _b64d("salt", container.salt)
    if len(salt) != SALT_LEN:
        raise InvalidEncoding(f"salt must decode to {SALT_LEN} bytes, got {len(salt)}")
    blob = _b64d("blob", container.blob)
    return salt, blob


def to_json(container: Container) -> str:
    return json.dumps(container.to_dict(), indent=2)


def from_json(text: str | bytes) -> Container:
    try:
        obj: Any = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise InvalidEncoding(f"vault file is not valid JSON: {exc}") from exc
    if not isinstance(obj, dict):
        raise InvalidEncoding("vault file is not a JSON object")
    version, salt, blob = obj.get("version"), obj.get("salt"), obj.get("blob")
    # bool is an int subclass; a true/false version is still malformed
    if not isinstance(version, int) or isinstance(version, bool):
        raise InvalidEncoding("vault file has no integer version")
    if not isinstance(salt, str) or not isinstance(blob, str):
        raise InvalidEncoding("vault file is missing salt or blob")
    logger.debug("parsed container version=%d", version)
    return Container(version=version, salt=salt, blob=blob)
