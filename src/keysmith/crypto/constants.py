"""Cryptographic constants for keysmith."""

# AEAD algorithm identifier
AEAD_ALGORITHM = "AES-256-GCM-SIV"

# AES-256-GCM-SIV constants
AES_KEY_SIZE = 32
AES_GCM_SIV_NONCE_SIZE = 12
AES_GCM_SIV_TAG_SIZE = 16

# AES block size, used for RFC 8452 key derivation
AES_BLOCK_SIZE = 16
