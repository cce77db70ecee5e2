import logging

from argon2.exceptions import HashingError
from argon2.low_level import hash_secret_raw, Type as Argon2Type

from passmgr.utils.errors import DerivationFailure, InvalidInput
from passmgr.utils.models import KEY_LEN, SALT_LEN

logger = logging.getLogger(__name__)

# Part of the vault format: they are not stored in the container, so changing
# them makes every existing vault undecryptable.
TIME_COST = 2
MEMORY_COST_KiB = 15000
PARALLELISM = 1


def derive_key_buffer(password: str, salt: bytes) -> bytearray:
    """Argon2id(password, salt) -> 32-byte mutable buffer the caller must wipe."""
    if not password:
        raise InvalidInput("password cannot be empty")
    if len(salt) != SALT_LEN:
        raise InvalidInput(f"salt must be {SALT_LEN} bytes, got {len(salt)}")
    logger.debug("deriving key (t=%d, m=%d KiB, p=%d)", TIME_COST, MEMORY_COST_KiB, PARALLELISM)
    try:
        raw = hash_secret_raw(
            secret=password.encode("utf-8"),
            salt=bytes(salt),
            time_cost=TIME_COST,
            memory_cost=MEMORY_COST_KiB,
            parallelism=PARALLELISM,
            hash_len=KEY_LEN,
            type=Argon2Type.ID,
        )
    except HashingError as exc:
        raise DerivationFailure(f"argon2 derive failed: {exc}") from exc
    return bytearray(raw)


def derive_key(password: str, salt: bytes) -> bytes:
    key = derive_key_buffer(password, salt)
    try:
        return bytes(key)
    finally:
        wipe(key)


def wipe(buf: bytearray) -> None:
    for i in range(len(buf)):
        buf[i] = 0
