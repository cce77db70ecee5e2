"""Tests for Argon2id key derivation."""

import pytest

from passmgr.crypto import kdf
from passmgr.crypto.kdf import derive_key, derive_key_buffer, wipe
from passmgr.utils.errors import DerivationFailure, InvalidInput


class TestDeriveKey:
    def test_deterministic(self, zero_salt):
        assert derive_key("secret", zero_salt) == derive_key("secret", zero_salt)

    def test_known_answer(self, zero_salt):
        # Argon2id v0x13, t=2, m=15000 KiB, p=1, no pre-hash; any change here
        # makes every existing vault unreadable
        expected = bytes.fromhex("d6ed66272a466b4837bf00dc2616988f25e45b4191f443b16b260d416841f885")
        assert derive_key("secret", zero_salt) == expected

    def test_cost_parameters(self):
        assert (kdf.TIME_COST, kdf.MEMORY_COST_KiB, kdf.PARALLELISM) == (2, 15000, 1)

    def test_key_length(self, zero_salt):
        assert len(derive_key("secret", zero_salt)) == 32

    def test_salt_changes_key(self, zero_salt):
        assert derive_key("secret", zero_salt) != derive_key("secret", b"\x01" * 16)

    def test_password_changes_key(self, zero_salt):
        assert derive_key("secret", zero_salt) != derive_key("wrong", zero_salt)

    def test_unicode_password(self, zero_salt):
        assert len(derive_key("päss \U0001f511", zero_salt)) == 32

    def test_empty_password_rejected(self, zero_salt):
        with pytest.raises(InvalidInput, match="empty"):
            derive_key("", zero_salt)

    @pytest.mark.parametrize("salt", [b"", b"short", bytes(32)])
    def test_wrong_salt_length_rejected(self, salt):
        with pytest.raises(InvalidInput, match="salt"):
            derive_key("secret", salt)

    def test_bad_parameters_raise_derivation_failure(self, monkeypatch, zero_salt):
        monkeypatch.setattr(kdf, "MEMORY_COST_KiB", 1)
        with pytest.raises(DerivationFailure):
            derive_key("secret", zero_salt)


class TestKeyBuffer:
    def test_buffer_matches_bytes(self, fast_kdf, zero_salt):
        buf = derive_key_buffer("secret", zero_salt)
        assert isinstance(buf, bytearray)
        assert bytes(buf) == derive_key("secret", zero_salt)

    def test_wipe_zeroes_buffer(self, fast_kdf, zero_salt):
        buf = derive_key_buffer("secret", zero_salt)
        wipe(buf)
        assert buf == bytearray(32)
