"""Exception types raised by the vault core and its command layer.

Every failure caused by untrusted file contents surfaces as a ``VaultError``
subclass. Wrong master password and tampered ciphertext both raise
``AuthenticationFailure``; the two cases are not told apart.
"""


class VaultError(ValueError):
    """Base class for every vault failure."""


class InvalidInput(VaultError):
    """Empty or malformed input handed to key derivation."""


class DerivationFailure(VaultError):
    """Argon2 rejected its own parameters."""


class MalformedBlob(VaultError):
    """Envelope shorter than the nonce."""


class AuthenticationFailure(VaultError):
    """Tag check failed: bad password or corrupted file."""


class CorruptPlaintext(VaultError):
    """Plaintext authenticated but is not a valid record collection."""


class InvalidEncoding(VaultError):
    """Container fields are not valid base64 or the document is not a container."""


class UnsupportedVersion(VaultError):
    """Container carries a format version this build cannot read."""


class VaultNotFound(VaultError):
    pass


class VaultExists(VaultError):
    pass


class EntryNotFound(VaultError, KeyError):
    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""
