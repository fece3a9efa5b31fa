"""AES in Electronic Code Book (ECB) mode over 128-bit integer blocks."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .aes import aes_128, aes_192, aes_256

__all__ = ["aes_128_ecb", "aes_192_ecb", "aes_256_ecb"]

_BlockFn = Callable[[bytes, int, bool], int]


def _ecb(block_fn: _BlockFn, key: bytes, blocks: Iterable[int], encrypt: bool) -> list[int]:
    return [block_fn(key, block, encrypt) for block in blocks]


def aes_128_ecb(key: bytes, blocks: Iterable[int], encrypt: bool) -> list[int]:
    """Encrypt or decrypt each block independently with a 16-byte key."""
    return _ecb(aes_128, key, blocks, encrypt)


def aes_192_ecb(key: bytes, blocks: Iterable[int], encrypt: bool) -> list[int]:
    """Encrypt or decrypt each block independently with a 24-byte key."""
    return _ecb(aes_192, key, blocks, encrypt)


def aes_256_ecb(key: bytes, blocks: Iterable[int], encrypt: bool) -> list[int]:
    """Encrypt or decrypt each block independently with a 32-byte key."""
    return _ecb(aes_256, key, blocks, encrypt)