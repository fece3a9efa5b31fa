"""The AES block cipher (FIPS 197) on single 128-bit blocks."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import xor

from .field import INV_SBOX, SBOX, gf_mult
from .key_schedule import WORD_SIZE, expand_key

__all__ = ["BLOCK_SIZE", "cipher", "inv_cipher", "aes_128", "aes_192", "aes_256"]

BLOCK_SIZE = 16
_BLOCK_WORDS = BLOCK_SIZE // WORD_SIZE

# The state is stored column by column: byte (row r, column c) sits at r + 4 * c.
_SHIFT_ROWS = tuple(
    r + WORD_SIZE * ((c + r) % _BLOCK_WORDS)
    for c in range(_BLOCK_WORDS)
    for r in range(WORD_SIZE)
)
_INV_SHIFT_ROWS = tuple(
    r + WORD_SIZE * ((c - r) % _BLOCK_WORDS)
    for c in range(_BLOCK_WORDS)
    for r in range(WORD_SIZE)
)

_MIX_MATRIX = ((2, 3, 1, 1), (1, 2, 3, 1), (1, 1, 2, 3), (3, 1, 1, 2))
_INV_MIX_MATRIX = (
    (0x0E, 0x0B, 0x0D, 0x09),
    (0x09, 0x0E, 0x0B, 0x0D),
    (0x0D, 0x09, 0x0E, 0x0B),
    (0x0B, 0x0D, 0x09, 0x0E),
)

_PRODUCTS = {
    factor: bytes(gf_mult(factor, value) for value in range(256))
    for row in _MIX_MATRIX + _INV_MIX_MATRIX
    for factor in row
}


def _sub_bytes(state: bytes, table: bytes) -> bytes:
    return state.translate(table)


def _permute(state: bytes, order: Sequence[int]) -> bytes:
    return bytes(state[i] for i in order)


def _mix_columns(state: bytes, matrix: Sequence[Sequence[int]]) -> bytes:
    out = bytearray()
    for start in range(0, BLOCK_SIZE, WORD_SIZE):
        column = state[start : start + WORD_SIZE]
        for row in matrix:
            out.append(
                reduce(xor, (_PRODUCTS[f][v] for f, v in zip(row, column)), 0)
            )
    return bytes(out)


def _add_round_key(state: bytes, round_key: bytes) -> bytes:
    return bytes(s ^ k for s, k in zip(state, round_key))


def _round_keys(words: Sequence[bytes]) -> list[bytes]:
    words = [bytes(w) for w in words]
    if any(len(w) != WORD_SIZE for w in words):
        raise ValueError(f"round-key words hold {WORD_SIZE} bytes each")
    if len(words) % _BLOCK_WORDS or len(words) < 2 * _BLOCK_WORDS:
        raise ValueError(
            f"expected a whole number of round keys (at least two), got {len(words)} words"
        )
    return [
        b"".join(words[i : i + _BLOCK_WORDS])
        for i in range(0, len(words), _BLOCK_WORDS)
    ]


def _check_block(block: bytes) -> bytes:
    block = bytes(block)
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"a block holds {BLOCK_SIZE} bytes, got {len(block)}")
    return block


def cipher(block: bytes, round_keys: Sequence[bytes]) -> bytes:
    """Encrypt one 16-byte block with an expanded key schedule."""
    state = _check_block(block)
    keys = _round_keys(round_keys)

    state = _add_round_key(state, keys[0])
    for round_key in keys[1:-1]:
        state = _sub_bytes(state, SBOX)
        state = _permute(state, _SHIFT_ROWS)
        state = _mix_columns(state, _MIX_MATRIX)
        state = _add_round_key(state, round_key)
    state = _sub_bytes(state, SBOX)
    state = _permute(state, _SHIFT_ROWS)
    return _add_round_key(state, keys[-1])


def inv_cipher(block: bytes, round_keys: Sequence[bytes]) -> bytes:
    """Decrypt one 16-byte block with an expanded key schedule."""
    state = _check_block(block)
    keys = _round_keys(round_keys)

    state = _add_round_key(state, keys[-1])
    for round_key in reversed(keys[1:-1]):
        state = _permute(state, _INV_SHIFT_ROWS)
        state = _sub_bytes(state, INV_SBOX)
        state = _add_round_key(state, round_key)
        state = _mix_columns(state, _INV_MIX_MATRIX)
    state = _permute(state, _INV_SHIFT_ROWS)
    state = _sub_bytes(state, INV_SBOX)
    return _add_round_key(state, keys[0])


def _run(key: bytes, data: int, encrypt: bool, key_size: int) -> int:
    key = bytes(key)
    if len(key) != key_size:
        raise ValueError(f"expected a {key_size}-byte key, got {len(key)} bytes")
    if not 0 <= data < 1 << (8 * BLOCK_SIZE):
        raise ValueError("data must be an unsigned 128-bit integer")
    words = expand_key(key)
    block = data.to_bytes(BLOCK_SIZE, "big")
    result = cipher(block, words) if encrypt else inv_cipher(block, words)
    return int.from_bytes(result, "big")


def aes_128(key: bytes, data: int, encrypt: bool) -> int:
    """Encrypt or decrypt a 128-bit integer block with a 16-byte key."""
    return _run(key, data, encrypt, 16)


def aes_192(key: bytes, data: int, encrypt: bool) -> int:
    """Encrypt or decrypt a 128-bit integer block with a 24-byte key."""
    return _run(key, data, encrypt, 24)


def aes_256(key: bytes, data: int, encrypt: bool) -> int:
    """Encrypt or decrypt a 128-bit integer block with a 32-byte key."""
    return _run(key, data, encrypt, 32)