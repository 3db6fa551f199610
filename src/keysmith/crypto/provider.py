"""Authenticated encryption providers for keysmith."""

from __future__ import annotations

import hmac
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..errors import DecryptionError, EncryptionError
from .buffer import AeadBuffer
from .constants import AES_GCM_SIV_TAG_SIZE
from .context import CipherContext
from .utils import HexDecodeError, from_hex, to_hex

logger = logging.getLogger("keysmith")

# Builds the workspace for a plaintext of the given length
BufferFactory = Callable[[int], AeadBuffer]

# Associated data is always empty
ASSOCIATED_DATA = b""


class EncryptionProvider(ABC):
    """Abstract base class for AEAD backends."""

    @abstractmethod
    def perform_encryption(self, plain_text: str, context: CipherContext) -> str:
        """Encrypt a plaintext string.

        Args:
            plain_text: The UTF-8 plaintext.
            context: The cipher context to encrypt with.

        Returns:
            Lowercase hex of ciphertext followed by the tag.
        """
        pass  # pragma: no cover

    @abstractmethod
    def perform_decryption(self, cipher_text: str, context: CipherContext) -> str:
        """Decrypt a hex ciphertext string.

        Args:
            cipher_text: Hex of ciphertext followed by the tag.
            context: The cipher context the ciphertext was produced with.

        Returns:
            The UTF-8 plaintext.
        """
        pass  # pragma: no cover


def _aes_block(key: bytes, block: bytes) -> bytes:
    encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
    return encryptor.update(block) + encryptor.finalize()


def empty_message_tag(context: CipherContext) -> bytes:
    """Compute the AES-GCM-SIV tag for an empty message and empty AAD.

    Per RFC 8452, POLYVAL over a single all-zero length block is zero, so
    the tag reduces to encrypting ``nonce || 0^32`` under the
    per-nonce message encryption key.

    Args:
        context: The cipher context.

    Returns:
        The 16-byte tag.
    """
    # Message encryption key: first halves of AES_K(le32(i) || nonce), i = 2..5
    encryption_key = b"".join(
        _aes_block(context.key, i.to_bytes(4, "little") + context.nonce)[:8] for i in range(2, 6)
    )
    return _aes_block(encryption_key, context.nonce + bytes(4))


class AesGcmSivEncryptionProvider(EncryptionProvider):
    """AES-256-GCM-SIV backend working on a fresh AeadBuffer per call.

    Example:
        ```python
        provider = AesGcmSivEncryptionProvider()
        ciphertext = provider.perform_encryption("secret nuke codes", context)
        ```
    """

    def __init__(self, buffer_factory: BufferFactory | None = None) -> None:
        """Initialize the provider.

        Args:
            buffer_factory: Builds the buffer for a plaintext length.
                Defaults to a buffer reserving room for the tag.
        """
        self._buffer_factory = buffer_factory or AeadBuffer.for_plaintext

    def perform_encryption(self, plain_text: str, context: CipherContext) -> str:
        """Encrypt a plaintext string in place.

        Args:
            plain_text: The UTF-8 plaintext.
            context: The cipher context to encrypt with.

        Returns:
            Lowercase hex of ciphertext followed by the 16-byte tag.

        Raises:
            EncryptionError: If the AEAD operation fails.
        """
        data = plain_text.encode("utf-8")
        try:
            buffer = self._buffer_factory(len(data))
            buffer.extend_from_slice(data)
            self._encrypt_in_place(buffer, context)
        except Exception as e:
            logger.debug("Encryption failed: %s", e, exc_info=True)
            raise EncryptionError(f"Failed to encrypt due to {e}") from e

        logger.debug("Encrypted %d plaintext bytes", len(data))
        return to_hex(buffer.as_bytes())

    def perform_decryption(self, cipher_text: str, context: CipherContext) -> str:
        """Decrypt and authenticate a hex ciphertext string.

        Args:
            cipher_text: Hex of ciphertext followed by the 16-byte tag.
            context: The cipher context the ciphertext was produced with.

        Returns:
            The UTF-8 plaintext.

        Raises:
            DecryptionError: If decoding or authentication fails.
        """
        try:
            data = from_hex(cipher_text)
        except HexDecodeError as e:
            raise DecryptionError(f"Ciphertext is not valid hex: {e}") from e

        if len(data) < AES_GCM_SIV_TAG_SIZE:
            raise DecryptionError(
                f"Ciphertext too short: {len(data)} bytes, "
                f"expected at least {AES_GCM_SIV_TAG_SIZE}"
            )

        buffer = AeadBuffer(data)
        try:
            self._decrypt_in_place(buffer, context)
            plaintext = buffer.as_bytes().decode("utf-8")
        except InvalidTag as e:
            logger.debug("Ciphertext failed authentication")
            raise DecryptionError("Decryption failed: authentication tag mismatch") from e
        except UnicodeDecodeError as e:
            raise DecryptionError(f"Decrypted data is not valid UTF-8: {e}") from e
        except Exception as e:
            logger.debug("Decryption failed: %s", e, exc_info=True)
            raise DecryptionError(f"Decryption failed: {e}") from e

        logger.debug("Decrypted %d plaintext bytes", len(buffer))
        return plaintext

    def _encrypt_in_place(self, buffer: AeadBuffer, context: CipherContext) -> None:
        """Replace the buffer's plaintext with ciphertext and append the tag."""
        length = len(buffer)
        if length == 0:
            # AESGCMSIV rejects zero-length data
            sealed = empty_message_tag(context)
        else:
            sealed = context.cipher.encrypt(context.nonce, buffer.as_bytes(), ASSOCIATED_DATA)
        buffer.overwrite(0, sealed[:length])
        buffer.extend_from_slice(sealed[length:])

    def _decrypt_in_place(self, buffer: AeadBuffer, context: CipherContext) -> None:
        """Verify the tag, replace ciphertext with plaintext and drop the tag."""
        length = len(buffer) - AES_GCM_SIV_TAG_SIZE
        if length == 0:
            if not hmac.compare_digest(buffer.as_bytes(), empty_message_tag(context)):
                raise InvalidTag()
            plaintext = b""
        else:
            plaintext = context.cipher.decrypt(context.nonce, buffer.as_bytes(), ASSOCIATED_DATA)
        buffer.overwrite(0, plaintext)
        buffer.truncate(length)
