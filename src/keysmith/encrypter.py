"""Encrypter - Main entry point for keysmith."""

from __future__ import annotations

import logging

from .crypto import (
    AesGcmSivEncryptionProvider,
    CipherContext,
    CipherContextBuilder,
    EncryptionProvider,
    derive_key_hex,
)
from .types import KdfConfig, RandomSource

logger = logging.getLogger("keysmith")


class Encrypter:
    """Encrypts and decrypts strings under one cipher context.

    Example:
        ```python
        encrypter = Encrypter.from_password("password", "salt", KdfConfig(rounds=2))
        ciphertext = encrypter.encrypt("secret nuke codes")
        assert encrypter.decrypt(ciphertext) == "secret nuke codes"
        ```
    """

    def __init__(
        self,
        context: CipherContext,
        provider: EncryptionProvider | None = None,
    ) -> None:
        """Initialize the encrypter.

        Args:
            context: The cipher context every call runs against.
            provider: The AEAD backend. Defaults to AES-256-GCM-SIV.
        """
        self._context = context
        self._provider = provider or AesGcmSivEncryptionProvider()

    @classmethod
    def from_password(
        cls,
        password: str,
        salt: str,
        config: KdfConfig | None = None,
        random_source: RandomSource | None = None,
        provider: EncryptionProvider | None = None,
    ) -> Encrypter:
        """Derive key material from a password and build an encrypter.

        Args:
            password: The password.
            salt: The salt.
            config: Key derivation settings. Defaults to KdfConfig().
            random_source: Optional random byte source for the cipher key.
            provider: Optional AEAD backend.

        Returns:
            An Encrypter bound to a freshly built cipher context.
        """
        config = config or KdfConfig()
        logger.debug("Building encrypter from password (%d rounds)", config.rounds)
        hash_key = derive_key_hex(
            password,
            salt,
            config.rounds,
            prf=config.prf,
            key_size=config.key_size,
        )
        context = CipherContextBuilder(random_source).build(hash_key)
        return cls(context, provider)

    @property
    def context(self) -> CipherContext:
        """The cipher context this encrypter is bound to."""
        return self._context

    def encrypt(self, plain_text: str) -> str:
        """Encrypt a string.

        Args:
            plain_text: The UTF-8 plaintext.

        Returns:
            Lowercase hex ciphertext of length ``2 * (len(bytes) + 16)``.

        Raises:
            EncryptionError: If the AEAD operation fails.
        """
        return self._provider.perform_encryption(plain_text, self._context)

    def decrypt(self, cipher_text: str) -> str:
        """Decrypt a hex ciphertext produced under this encrypter's context.

        Args:
            cipher_text: Hex ciphertext followed by the tag.

        Returns:
            The UTF-8 plaintext.

        Raises:
            DecryptionError: If decoding or authentication fails.
        """
        return self._provider.perform_decryption(cipher_text, self._context)


def encrypt_with_password(
    plain_text: str,
    password: str,
    salt: str,
    config: KdfConfig | None = None,
) -> tuple[str, CipherContext]:
    """Encrypt a string under a fresh context built from a password.

    The cipher key is random, so the returned context is required to
    decrypt the result; re-deriving from the password is not enough.

    Args:
        plain_text: The UTF-8 plaintext.
        password: The password.
        salt: The salt.
        config: Key derivation settings.

    Returns:
        Tuple of (hex ciphertext, cipher context).
    """
    encrypter = Encrypter.from_password(password, salt, config)
    return encrypter.encrypt(plain_text), encrypter.context


def decrypt_with_context(cipher_text: str, context: CipherContext) -> str:
    """Decrypt a hex ciphertext with the context it was produced under."""
    return AesGcmSivEncryptionProvider().perform_decryption(cipher_text, context)
