"""AES key expansion (FIPS 197, section 5.2)."""

from __future__ import annotations

from .field import sbox

__all__ = ["WORD_SIZE", "ROUNDS", "rot_word", "sub_word", "expand_key"]

WORD_SIZE = 4
BLOCK_WORDS = 4

# Number of rounds for each supported key length in bytes.
ROUNDS = {16: 10, 24: 12, 32: 14}

_RCON = (0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36)


def _check_word(word: bytes) -> bytes:
    word = bytes(word)
    if len(word) != WORD_SIZE:
        raise ValueError(f"a word holds {WORD_SIZE} bytes, got {len(word)}")
    return word


def rot_word(word: bytes) -> bytes:
    """Rotate a word one byte to the left: [a0, a1, a2, a3] -> [a1, a2, a3, a0]."""
    word = _check_word(word)
    return word[1:] + word[:1]


def sub_word(word: bytes) -> bytes:
    """Apply the S-box to every byte of a word."""
    return bytes(sbox(b) for b in _check_word(word))


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def expand_key(key: bytes) -> list[bytes]:
    """Expand a 16, 24 or 32 byte key into the 4 * (rounds + 1) round-key words."""
    key = bytes(key)
    try:
        rounds = ROUNDS[len(key)]
    except KeyError:
        raise ValueError(
            f"AES keys are 16, 24 or 32 bytes long, got {len(key)}"
        ) from None

    nk = len(key) // WORD_SIZE
    total = BLOCK_WORDS * (rounds + 1)
    words = [key[i : i + WORD_SIZE] for i in range(0, len(key), WORD_SIZE)]

    for i in range(nk, total):
        temp = words[i - 1]
        if i % nk == 0:
            temp = _xor(sub_word(rot_word(temp)), bytes((_RCON[i // nk - 1], 0, 0, 0)))
        elif nk > 6 and i % nk == 4:
            temp = sub_word(temp)
        words.append(_xor(words[i - nk], temp))
    return words