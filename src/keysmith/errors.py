"""Error hierarchy for keysmith."""

from __future__ import annotations


class KeysmithError(Exception):
    """Base exception for all keysmith errors."""

    pass


class DerivationError(KeysmithError):
    """PBKDF2 key derivation failure."""

    pass


class CipherConfigurationError(KeysmithError):
    """Cipher context could not be constructed."""

    pass


class NonceTooShortError(CipherConfigurationError):
    """Nonce source holds fewer bytes than the cipher requires.

    Attributes:
        required: The number of bytes the nonce needs.
        available: The number of bytes the source provided.
    """

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(f"Nonce is too short: got {available} bytes, expected {required}")


class BufferCapacityError(KeysmithError):
    """AEAD buffer would grow beyond its capacity."""

    pass


class EncryptionError(KeysmithError):
    """Authenticated encryption failure.

    Indicates a programming or configuration defect, never a transient
    condition. Callers should not retry.
    """

    pass


class DecryptionError(KeysmithError):
    """Ciphertext could not be decoded or failed authentication.

    CRITICAL: A tag mismatch indicates the ciphertext was tampered with or
    belongs to a different cipher context.
    """

    pass
