import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from passmgr.utils.errors import AuthenticationFailure, MalformedBlob
from passmgr.utils.models import NONCE_LEN


def aead_encrypt(key: bytes | bytearray, plaintext: bytes) -> bytes:
    """AES-256-GCM under a fresh random nonce -> nonce || ciphertext || tag."""
    nonce = os.urandom(NONCE_LEN)
    aesgcm = AESGCM(key)
    return nonce + aesgcm.encrypt(nonce, plaintext, None)


def split_blob(blob: bytes) -> tuple[bytes, bytes]:
    if len(blob) < NONCE_LEN:
        raise MalformedBlob(f"blob too short: {len(blob)} bytes, need at least {NONCE_LEN}")
    return blob[:NONCE_LEN], blob[NONCE_LEN:]


def aead_decrypt(key: bytes | bytearray, blob: bytes) -> bytes:
    nonce, ct = split_blob(blob)
    aesgcm = AESGCM(key)
    try:
        return aesgcm.decrypt(nonce, ct, None)
    except InvalidTag as exc:
        raise AuthenticationFailure("decryption failed (bad password or corrupted file)") from exc
