"""Cryptographic constants for the PrivateBin client."""

# Per-paste random values
IV_SIZE = 16
SALT_SIZE = 8
SECRET_SIZE = 32

# Key sizes AES itself can run with
AES_KEY_SIZES = (128, 192, 256)
