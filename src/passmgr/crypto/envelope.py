"""Encrypt and decrypt a whole RecordCollection under the master password.

Envelope layout::

    [ nonce (12 bytes) | AES-256-GCM ciphertext | tag (16 bytes) ]

The key is derived per call and wiped before returning.
"""
import logging

from passmgr.crypto.aead import aead_decrypt, aead_encrypt, split_blob
from passmgr.crypto.kdf import derive_key_buffer, wipe
from passmgr.utils.models import RecordCollection

logger = logging.getLogger(__name__)


def encrypt_vault(collection: RecordCollection, password: str, salt: bytes) -> bytes:
    key = derive_key_buffer(password, salt)
    try:
        pt = collection.to_bytes()
        blob = aead_encrypt(key, pt)
    finally:
        wipe(key)
    logger.debug("encrypted %d entries into %d-byte envelope", len(collection), len(blob))
    return blob


def decrypt_vault(blob: bytes, password: str, salt: bytes) -> RecordCollection:
    # reject short blobs before paying for key derivation
    split_blob(blob)
    key = derive_key_buffer(password, salt)
    try:
        pt = aead_decrypt(key, blob)
    finally:
        wipe(key)
    collection = RecordCollection.from_bytes(pt)
    logger.debug("decrypted envelope with %d entries", len(collection))
    return collection
