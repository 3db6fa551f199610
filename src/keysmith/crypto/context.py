"""AES-256-GCM-SIV cipher context construction for keysmith."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers.aead import AESGCMSIV

from ..errors import CipherConfigurationError, NonceTooShortError
from ..types import RandomSource
from .constants import AEAD_ALGORITHM, AES_GCM_SIV_NONCE_SIZE, AES_KEY_SIZE

logger = logging.getLogger("keysmith")


@dataclass(frozen=True)
class CipherContext:
    """Key, nonce and algorithm needed to run AEAD operations.

    The key is random per context and is not derived from the password;
    only the nonce is bound to the password-derived material. Output of
    one context can therefore only be decrypted with that same context.

    Attributes:
        key: The 32-byte AES-256 key.
        nonce: The 12-byte nonce.
        algorithm: The AEAD algorithm identifier.
        derived_key_hex: The hex string the nonce was taken from.
    """

    key: bytes = field(repr=False)
    nonce: bytes
    algorithm: str = AEAD_ALGORITHM
    derived_key_hex: str = field(default="", repr=False)
    _cipher: AESGCMSIV = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.key) != AES_KEY_SIZE:
            raise CipherConfigurationError(
                f"Invalid key length: {len(self.key)} bytes, expected {AES_KEY_SIZE}"
            )
        if len(self.nonce) < AES_GCM_SIV_NONCE_SIZE:
            raise NonceTooShortError(AES_GCM_SIV_NONCE_SIZE, len(self.nonce))
        if len(self.nonce) > AES_GCM_SIV_NONCE_SIZE:
            raise CipherConfigurationError(
                f"Invalid nonce length: {len(self.nonce)} bytes, expected {AES_GCM_SIV_NONCE_SIZE}"
            )
        try:
            cipher = AESGCMSIV(self.key)
        except UnsupportedAlgorithm as e:
            raise CipherConfigurationError(
                f"{AEAD_ALGORITHM} is not supported by this OpenSSL build: {e}"
            ) from e
        object.__setattr__(self, "_cipher", cipher)

    @property
    def cipher(self) -> AESGCMSIV:
        """The AES-256-GCM-SIV instance keyed with this context's key."""
        return self._cipher


def nonce_from_hex(derived_key_hex: str) -> bytes:
    """Take the nonce from the raw bytes of a derived-key hex string.

    The hex string is not decoded; its UTF-8 byte representation is used.

    Args:
        derived_key_hex: Hex-encoded derived key material.

    Returns:
        The first 12 bytes of the string's byte representation.

    Raises:
        NonceTooShortError: If fewer than 12 bytes are available.
    """
    raw = derived_key_hex.encode("utf-8")
    if len(raw) < AES_GCM_SIV_NONCE_SIZE:
        raise NonceTooShortError(AES_GCM_SIV_NONCE_SIZE, len(raw))
    return raw[:AES_GCM_SIV_NONCE_SIZE]


class CipherContextBuilder:
    """Builds cipher contexts from password-derived key material.

    Each build draws a fresh 256-bit key from the random source; the
    nonce comes from the derived-key hex string.
    """

    def __init__(self, random_source: RandomSource | None = None) -> None:
        """Initialize the builder.

        Args:
            random_source: Callable returning n secure random bytes.
                Defaults to ``os.urandom``.
        """
        self._random_source = random_source or os.urandom

    def generate_key(self) -> bytes:
        """Draw a fresh AES-256 key from the random source.

        Raises:
            CipherConfigurationError: If the source returns the wrong length.
        """
        key = bytes(self._random_source(AES_KEY_SIZE))
        if len(key) != AES_KEY_SIZE:
            raise CipherConfigurationError(
                f"Random source returned {len(key)} bytes, expected {AES_KEY_SIZE}"
            )
        return key

    def build(self, derived_key_hex: str) -> CipherContext:
        """Build a cipher context.

        Args:
            derived_key_hex: Hex-encoded derived key material.

        Returns:
            An immutable CipherContext.

        Raises:
            NonceTooShortError: If the hex string is shorter than 12 bytes.
            CipherConfigurationError: If the cipher cannot be constructed.
        """
        key = self.generate_key()
        nonce = nonce_from_hex(derived_key_hex)
        context = CipherContext(key=key, nonce=nonce, derived_key_hex=derived_key_hex)
        logger.debug("Built %s cipher context", context.algorithm)
        return context


def build_context(
    derived_key_hex: str,
    random_source: RandomSource | None = None,
) -> CipherContext:
    """Build a cipher context with a one-off builder.

    Args:
        derived_key_hex: Hex-encoded derived key material.
        random_source: Optional random byte source for the cipher key.

    Returns:
        An immutable CipherContext.
    """
    return CipherContextBuilder(random_source).build(derived_key_hex)
