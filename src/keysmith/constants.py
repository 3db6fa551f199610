"""Default configuration constants for keysmith."""

# PBKDF2 settings
DEFAULT_PBKDF2_ROUNDS = 600_000
DEFAULT_PRF = "sha512"

# Size in bytes of the derived key material
KEY_BUFF_SIZE = 20

# PBKDF2 round counts are unsigned 32-bit integers
MAX_PBKDF2_ROUNDS = 2**32 - 1
