# rijndael-blocks

A small, dependency-free implementation of the AES block cipher (FIPS 197)
with 128, 192 and 256-bit keys, plus the ECB and CBC modes of operation.
Blocks are handled as unsigned 128-bit integers in big-endian order, and
keys as byte strings of 16, 24 or 32 bytes.

This package is meant for study and experimentation. It is not hardened
against timing attacks; use a vetted library for production work.

## Installation

```
pip install .
```

## Single blocks

```python
from rijndael_blocks.aes import aes_128

key = bytes(range(16))
plaintext = 0x00112233445566778899AABBCCDDEEFF

ciphertext = aes_128(key, plaintext, True)
assert ciphertext == 0x69C4E0D86A7B0430D8CDB78070B4C55A
assert aes_128(key, ciphertext, False) == plaintext
```

The third argument selects encryption (`True`) or decryption (`False`).
`aes_192` and `aes_256` work the same way with 24 and 32-byte keys.

A `ValueError` is raised when the key has the wrong length for the
function, or when the block is not an unsigned 128-bit integer.

## Modes of operation

ECB processes each block on its own:

```python
from rijndael_blocks.ecb import aes_128_ecb

blocks = [0x6BC1BEE22E409F96E93D7E117393172A, 0xAE2D8A571E03AC9C9EB76FAC45AF8E51]
encrypted = aes_128_ecb(key, blocks, True)
assert aes_128_ecb(key, encrypted, False) == blocks
```

CBC chains blocks together from an initialisation vector:

```python
from rijndael_blocks.cbc import aes_128_cbc

iv = 0x000102030405060708090A0B0C0D0E0F
encrypted = aes_128_cbc(key, blocks, iv, True)
assert aes_128_cbc(key, encrypted, iv, False) == blocks
```

`aes_192_ecb`, `aes_256_ecb`, `aes_192_cbc` and `aes_256_cbc` follow the
same pattern. Each accepts any iterable of blocks and returns a list; an
empty input gives an empty list. The CBC functions raise `ValueError` if
the IV is not an unsigned 128-bit integer.

## What it does not do

There is no padding, no other mode (CTR, GCM and so on), no handling of
byte strings or files, and no command-line tool. Input must already be a
sequence of whole 128-bit blocks given as integers.

## Building blocks

The lower layers are public too:

- `rijndael_blocks.field` – the `SBOX` and `INV_SBOX` tables and the
  functions `sbox`, `inv_sbox`, `xtimes` and `gf_mult` (arithmetic in
  GF(2^8)); each raises `ValueError` for a value outside 0..255.
- `rijndael_blocks.key_schedule` – `rot_word`, `sub_word` and
  `expand_key`, which turns a 16, 24 or 32-byte key into the list of
  4-byte round-key words (44, 52 or 60 of them). `ROUNDS` maps key length
  to the number of rounds.
- `rijndael_blocks.aes` – `cipher` and `inv_cipher`, which run the rounds
  on a 16-byte block given the words from `expand_key` and return the
  resulting 16 bytes.

```python
from rijndael_blocks.aes import cipher, inv_cipher
from rijndael_blocks.key_schedule import expand_key

words = expand_key(bytes(range(16)))
block = bytes.fromhex("00112233445566778899aabbccddeeff")
out = cipher(block, words)
assert out.hex() == "69c4e0d86a7b0430d8cdb78070b4c55a"
assert inv_cipher(out, words) == block
```

## Running the tests

```
pip install ".[test]"
pytest
```