"""Type definitions for keysmith."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum

from cryptography.hazmat.primitives import hashes

from .constants import DEFAULT_PBKDF2_ROUNDS, DEFAULT_PRF, KEY_BUFF_SIZE, MAX_PBKDF2_ROUNDS

# Callable returning n cryptographically secure random bytes
RandomSource = Callable[[int], bytes]


class PrfAlgorithm(str, Enum):
    """Hash families usable as the PBKDF2 pseudo-random function."""

    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        """Return the matching ``cryptography`` hash instance."""
        return _PRF_HASHES[self]()


_PRF_HASHES: dict[PrfAlgorithm, Callable[[], hashes.HashAlgorithm]] = {
    PrfAlgorithm.SHA256: hashes.SHA256,
    PrfAlgorithm.SHA384: hashes.SHA384,
    PrfAlgorithm.SHA512: hashes.SHA512,
}

# A PRF may be given as an enum member, its name, or a hash instance
PrfLike = PrfAlgorithm | str | hashes.HashAlgorithm


def resolve_prf(prf: PrfLike) -> hashes.HashAlgorithm:
    """Resolve a PRF choice to a ``cryptography`` hash instance.

    Args:
        prf: A PrfAlgorithm member, its string value, or a HashAlgorithm.

    Returns:
        The hash algorithm instance to build the HMAC over.

    Raises:
        ValueError: If the PRF name is unknown.
    """
    if isinstance(prf, hashes.HashAlgorithm):
        return prf
    if isinstance(prf, PrfAlgorithm):
        return prf.hash_algorithm()
    try:
        return PrfAlgorithm(prf.lower()).hash_algorithm()
    except (AttributeError, ValueError):
        supported = ", ".join(p.value for p in PrfAlgorithm)
        raise ValueError(f"Unsupported PRF: {prf!r}. Expected one of: {supported}") from None


def validate_rounds(rounds: int) -> None:
    """Validate a PBKDF2 round count.

    Args:
        rounds: The round count to validate.

    Raises:
        ValueError: If rounds is not a positive unsigned 32-bit integer.
    """
    if isinstance(rounds, bool) or not isinstance(rounds, int):
        raise ValueError(f"Rounds must be an integer, got {type(rounds).__name__}")
    if rounds < 1 or rounds > MAX_PBKDF2_ROUNDS:
        raise ValueError(f"Rounds must be between 1 and {MAX_PBKDF2_ROUNDS}, got {rounds}")


@dataclass
class KdfConfig:
    """Configuration for password-based key derivation.

    Attributes:
        rounds: PBKDF2 work factor.
        prf: Hash family the HMAC is built over.
        key_size: Length in bytes of the derived key material.
    """

    rounds: int = DEFAULT_PBKDF2_ROUNDS
    prf: PrfLike = DEFAULT_PRF
    key_size: int = KEY_BUFF_SIZE

    def __post_init__(self) -> None:
        validate_rounds(self.rounds)
        resolve_prf(self.prf)
        if self.key_size < 1:
            raise ValueError(f"Key size must be positive, got {self.key_size}")

    @classmethod
    def from_env(
        cls,
        prefix: str = "KEYSMITH_",
        environ: Mapping[str, str] | None = None,
    ) -> KdfConfig:
        """Build a configuration from environment variables.

        Reads ``<prefix>ROUNDS``, ``<prefix>PRF`` and ``<prefix>KEY_SIZE``;
        unset variables fall back to the defaults.

        Args:
            prefix: Variable name prefix.
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            The resulting KdfConfig.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        return cls(
            rounds=int(env.get(f"{prefix}ROUNDS", DEFAULT_PBKDF2_ROUNDS)),
            prf=env.get(f"{prefix}PRF", DEFAULT_PRF),
            key_size=int(env.get(f"{prefix}KEY_SIZE", KEY_BUFF_SIZE)),
        )
