"""AES in Cipher Block Chaining (CBC) mode over 128-bit integer blocks."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .aes import BLOCK_SIZE, aes_128, aes_192, aes_256

__all__ = ["aes_128_cbc", "aes_192_cbc", "aes_256_cbc"]

_BlockFn = Callable[[bytes, int, bool], int]


def _cbc(
    block_fn: _BlockFn, key: bytes, blocks: Iterable[int], iv: int, encrypt: bool
) -> list[int]:
    if not 0 <= iv < 1 << (8 * BLOCK_SIZE):
        raise ValueError("iv must be an unsigned 128-bit integer")
    out: list[int] = []
    previous = iv
    for block in blocks:
        if encrypt:
            previous = block_fn(key, block ^ previous, True)
            out.append(previous)
        else:
            out.append(block_fn(key, block, False) ^ previous)
            previous = block
    return out


def aes_128_cbc(key: bytes, blocks: Iterable[int], iv: int, encrypt: bool) -> list[int]:
    """Encrypt or decrypt chained blocks with a 16-byte key and an IV."""
    return _cbc(aes_128, key, blocks, iv, encrypt)


def aes_192_cbc(key: bytes, blocks: Iterable[int], iv: int, encrypt: bool) -> list[int]:
    """Encrypt or decrypt chained blocks with a 24-byte key and an IV."""
    return _cbc(aes_192, key, blocks, iv, encrypt)


def aes_256_cbc(key: bytes, blocks: Iterable[int], iv: int, encrypt: bool) -> list[int]:
    """Encrypt or decrypt chained blocks with a 32-byte key and an IV."""
    return _cbc(aes_256, key, blocks, iv, encrypt)