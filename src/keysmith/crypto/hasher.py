"""PBKDF2-HMAC key derivation for keysmith."""

from __future__ import annotations

import logging

from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..constants import DEFAULT_PRF, KEY_BUFF_SIZE
from ..errors import DerivationError
from ..types import PrfLike, resolve_prf, validate_rounds
from .utils import to_hex

logger = logging.getLogger("keysmith")


def new_key_buffer(size: int = KEY_BUFF_SIZE) -> bytearray:
    """Allocate a zeroed key buffer.

    Args:
        size: Length in bytes of the key material to derive.

    Returns:
        A zero-filled bytearray of the given size.

    Raises:
        ValueError: If size is not positive.
    """
    if size < 1:
        raise ValueError(f"Key buffer size must be positive, got {size}")
    return bytearray(size)


class HashProvider:
    """Derives fixed-size key material with PBKDF2-HMAC.

    The output size is fixed by the caller-owned key buffer handed to the
    constructor; every derivation overwrites that buffer. The PRF is a
    strategy parameter so other hash families can be swapped in without
    touching the derivation itself.

    Example:
        ```python
        hasher = HashProvider(new_key_buffer())
        key = hasher.pbkdf2_gen("password", "salt", 2)
        ```
    """

    def __init__(self, key_buffer: bytearray, prf: PrfLike = DEFAULT_PRF) -> None:
        """Initialize the hash provider.

        Args:
            key_buffer: Caller-owned buffer receiving the derived key.
            prf: Hash family the HMAC is built over. Defaults to SHA-512.

        Raises:
            ValueError: If the buffer is empty or the PRF is unknown.
        """
        if len(key_buffer) == 0:
            raise ValueError("Key buffer must not be empty")
        self._key = key_buffer
        self._prf = resolve_prf(prf)

    @property
    def key_size(self) -> int:
        """Length in bytes of the derived key material."""
        return len(self._key)

    @property
    def prf_name(self) -> str:
        """Name of the hash family in use."""
        return self._prf.name

    def pbkdf2_gen(self, password: str, salt: str, rounds: int) -> bytes:
        """Derive key material from a password and salt.

        Args:
            password: The password, UTF-8 encoded before use.
            salt: The salt, UTF-8 encoded before use.
            rounds: PBKDF2 iteration count.

        Returns:
            A copy of the derived key, also left in the key buffer.

        Raises:
            ValueError: If rounds is out of range.
            DerivationError: If the PBKDF2/HMAC construction fails.
        """
        validate_rounds(rounds)
        logger.debug(
            "Deriving %d-byte key with PBKDF2-HMAC-%s (%d rounds)",
            self.key_size,
            self.prf_name,
            rounds,
        )
        try:
            kdf = PBKDF2HMAC(
                algorithm=self._prf,
                length=self.key_size,
                salt=salt.encode("utf-8"),
                iterations=rounds,
            )
            derived = kdf.derive(password.encode("utf-8"))
        except Exception as e:
            logger.debug("PBKDF2 derivation failed: %s", e, exc_info=True)
            raise DerivationError(f"PBKDF2 derivation failed: {e}") from e

        self._key[:] = derived
        return bytes(self._key)


def derive_key(
    password: str,
    salt: str,
    rounds: int,
    prf: PrfLike = DEFAULT_PRF,
    key_size: int = KEY_BUFF_SIZE,
) -> bytes:
    """Derive key material into a fresh buffer.

    Args:
        password: The password.
        salt: The salt.
        rounds: PBKDF2 iteration count.
        prf: Hash family the HMAC is built over.
        key_size: Length in bytes of the derived key.

    Returns:
        The derived key bytes.
    """
    return HashProvider(new_key_buffer(key_size), prf).pbkdf2_gen(password, salt, rounds)


def derive_key_hex(
    password: str,
    salt: str,
    rounds: int,
    prf: PrfLike = DEFAULT_PRF,
    key_size: int = KEY_BUFF_SIZE,
) -> str:
    """Derive key material and return it as lowercase hex."""
    return to_hex(derive_key(password, salt, rounds, prf, key_size))
