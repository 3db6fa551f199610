"""keysmith - password-based authenticated encryption.

Derives key material from a password with PBKDF2-HMAC, builds an
AES-256-GCM-SIV cipher context and encrypts UTF-8 strings to hex.

Example:
    ```python
    from keysmith import CipherContextBuilder, Encrypter, derive_key_hex

    hash_key = derive_key_hex("password", "salt", 2)
    context = CipherContextBuilder().build(hash_key)

    encrypter = Encrypter(context)
    ciphertext = encrypter.encrypt("secret nuke codes")
    print(encrypter.decrypt(ciphertext))
    ```
"""

from .constants import DEFAULT_PBKDF2_ROUNDS, DEFAULT_PRF, KEY_BUFF_SIZE
from .crypto import (
    AeadBuffer,
    AesGcmSivEncryptionProvider,
    CipherContext,
    CipherContextBuilder,
    EncryptionProvider,
    HashProvider,
    build_context,
    derive_key,
    derive_key_hex,
    new_key_buffer,
)
from .encrypter import Encrypter, decrypt_with_context, encrypt_with_password
from .errors import (
    BufferCapacityError,
    CipherConfigurationError,
    DecryptionError,
    DerivationError,
    EncryptionError,
    KeysmithError,
    NonceTooShortError,
)
from .types import KdfConfig, PrfAlgorithm

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "Encrypter",
    "HashProvider",
    "CipherContext",
    "CipherContextBuilder",
    "EncryptionProvider",
    "AesGcmSivEncryptionProvider",
    "AeadBuffer",
    # Functions
    "build_context",
    "decrypt_with_context",
    "derive_key",
    "derive_key_hex",
    "encrypt_with_password",
    "new_key_buffer",
    # Constants
    "DEFAULT_PBKDF2_ROUNDS",
    "DEFAULT_PRF",
    "KEY_BUFF_SIZE",
    # Configuration
    "KdfConfig",
    "PrfAlgorithm",
    # Errors
    "KeysmithError",
    "DerivationError",
    "CipherConfigurationError",
    "NonceTooShortError",
    "BufferCapacityError",
    "EncryptionError",
    "DecryptionError",
    # Version
    "__version__",
]
