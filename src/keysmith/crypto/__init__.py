"""Cryptographic operations for keysmith."""

from .buffer import AeadBuffer
from .constants import (
    AEAD_ALGORITHM,
    AES_GCM_SIV_NONCE_SIZE,
    AES_GCM_SIV_TAG_SIZE,
    AES_KEY_SIZE,
)
from .context import CipherContext, CipherContextBuilder, build_context, nonce_from_hex
from .hasher import HashProvider, derive_key, derive_key_hex, new_key_buffer
from .provider import AesGcmSivEncryptionProvider, EncryptionProvider, empty_message_tag
from .utils import HexDecodeError, from_hex, to_hex

__all__ = [
    "AEAD_ALGORITHM",
    "AES_GCM_SIV_NONCE_SIZE",
    "AES_GCM_SIV_TAG_SIZE",
    "AES_KEY_SIZE",
    "AeadBuffer",
    "AesGcmSivEncryptionProvider",
    "CipherContext",
    "CipherContextBuilder",
    "EncryptionProvider",
    "HashProvider",
    "HexDecodeError",
    "build_context",
    "derive_key",
    "derive_key_hex",
    "empty_message_tag",
    "from_hex",
    "new_key_buffer",
    "nonce_from_hex",
    "to_hex",
]
