"""AES block cipher with ECB and CBC modes over 128-bit integer blocks, in pure Python."""

__version__ = "0.1.0"

__all__ = ["aes", "cbc", "ecb", "field", "key_schedule"]