"""Tests for encrypter.py module."""

import pytest

from keysmith import (
    CipherContext,
    DecryptionError,
    Encrypter,
    EncryptionProvider,
    KdfConfig,
    build_context,
    decrypt_with_context,
    derive_key_hex,
    encrypt_with_password,
)

FAST = KdfConfig(rounds=2)


class ReversingProvider(EncryptionProvider):
    """Toy backend used to check provider substitution."""

    def perform_encryption(self, plain_text: str, context: CipherContext) -> str:
        return plain_text[::-1].encode().hex()

    def perform_decryption(self, cipher_text: str, context: CipherContext) -> str:
        return bytes.fromhex(cipher_text).decode()[::-1]


class TestEncrypter:
    """Tests for the Encrypter facade."""

    def test_encrypter(self) -> None:
        """Test the derive, build, encrypt pipeline end to end."""
        pbkdf_key_hex = derive_key_hex("password", "salt", 2)
        enc = Encrypter(build_context(pbkdf_key_hex))
        result = enc.encrypt("secret nuke codes")
        assert result != ""
        assert len(result) == 66

    def test_round_trip(self) -> None:
        """Test that decrypt inverts encrypt."""
        enc = Encrypter.from_password("password", "salt", FAST)
        assert enc.decrypt(enc.encrypt("secret nuke codes")) == "secret nuke codes"

    def test_empty_string(self) -> None:
        """Test encrypting the empty string."""
        enc = Encrypter.from_password("password", "salt", FAST)
        ciphertext = enc.encrypt("")
        assert len(ciphertext) == 32
        assert enc.decrypt(ciphertext) == ""

    def test_from_password_nonce(self) -> None:
        """Test that the nonce comes from the password-derived hex."""
        enc = Encrypter.from_password("password", "salt", FAST)
        assert enc.context.nonce == b"e1d9c16aa681"
        assert enc.context.derived_key_hex == "e1d9c16aa681708a45f5c7c4e215ceb66e011a2e"

    def test_from_password_random_source(self) -> None:
        """Test that an injected source makes encryption reproducible."""
        a = Encrypter.from_password("password", "salt", FAST, random_source=lambda n: bytes(n))
        b = Encrypter.from_password("password", "salt", FAST, random_source=lambda n: bytes(n))
        assert a.encrypt("m") == b.encrypt("m")

    def test_from_password_respects_config(self) -> None:
        """Test that the KDF config reaches derivation."""
        config = KdfConfig(rounds=3, prf="sha256", key_size=32)
        enc = Encrypter.from_password("password", "salt", config)
        expected = derive_key_hex("password", "salt", 3, prf="sha256", key_size=32)
        assert enc.context.derived_key_hex == expected
        assert len(enc.context.derived_key_hex) == 64

    def test_same_password_contexts_incompatible(self) -> None:
        """Test that the random cipher key isolates contexts."""
        a = Encrypter.from_password("password", "salt", FAST)
        b = Encrypter.from_password("password", "salt", FAST)
        with pytest.raises(DecryptionError):
            b.decrypt(a.encrypt("secret nuke codes"))

    def test_custom_provider(self) -> None:
        """Test that an alternative backend can be substituted."""
        enc = Encrypter(build_context("0" * 40), ReversingProvider())
        assert enc.encrypt("abc") == b"cba".hex()
        assert enc.decrypt(b"cba".hex()) == "abc"


class TestPasswordHelpers:
    """Tests for module-level password helpers."""

    def test_encrypt_with_password(self) -> None:
        """Test that the returned context decrypts the result."""
        ciphertext, context = encrypt_with_password("secret nuke codes", "password", "salt", FAST)
        assert len(ciphertext) == 66
        assert decrypt_with_context(ciphertext, context) == "secret nuke codes"

    def test_decrypt_with_wrong_context(self) -> None:
        """Test that a context from the same password is not enough."""
        ciphertext, _ = encrypt_with_password("secret nuke codes", "password", "salt", FAST)
        _, other = encrypt_with_password("", "password", "salt", FAST)
        with pytest.raises(DecryptionError):
            decrypt_with_context(ciphertext, other)
