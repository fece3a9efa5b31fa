"""Byte-level arithmetic in GF(2^8) and the AES substitution boxes."""

from __future__ import annotations

__all__ = ["SBOX", "INV_SBOX", "sbox", "inv_sbox", "xtimes", "gf_mult"]

# Reduction term for the AES polynomial x^8 + x^4 + x^3 + x + 1.
_REDUCTION = 0x1B

SBOX = bytes.fromhex(
    "637c777bf26b6fc53001672bfed7ab76"
    "ca82c97dfa5947f0add4a2af9ca472c0"
    "b7fd9326363ff7cc34a5e5f171d83115"
    "04c723c31896059a071280e2eb27b275"
    "09832c1a1b6e5aa0523bd6b329e32f84"
    "53d100ed20fcb15b6acbbe394a4c58cf"
    "d0efaafb434d338545f9027f503c9fa8"
    "51a3408f929d38f5bcb6da2110fff3d2"
    "cd0c13ec5f974417c4a77e3d645d1973"
    "60814fdc222a908846eeb814de5e0bdb"
    "e0323a0a4906245cc2d3ac629195e479"
    "e7c8376d8dd54ea96c56f4ea657aae08"
    "ba78252e1ca6b4c6e8dd741f4bbd8b8a"
    "703eb5664803f60e613557b986c11d9e"
    "e1f8981169d98e949b1e87e9ce5528df"
    "8ca1890dbfe6426841992d0fb054bb16"
)

INV_SBOX = bytes.fromhex(
    "52096ad53036a538bf40a39e81f3d7fb"
    "7ce339829b2fff87348e4344c4dee9cb"
    "547b9432a6c2233dee4c950b42fac34e"
    "082ea16628d924b2765ba2496d8bd125"
    "72f8f66486689816d4a45ccc5d65b692"
    "6c704850fdedb9da5e154657a78d9d84"
    "90d8ab008cbcd30af7e45805b8b34506"
    "d02c1e8fca3f0f02c1afbd0301138a6b"
    "3a9111414f67dcea97f2cfcef0b4e673"
    "96ac7422e7ad3585e2f937e81c75df6e"
    "47f11a711d29c5896fb7620eaa18be1b"
    "fc563e4bc6d279209adbc0fe78cd5af4"
    "1fdda8338807c731b11210592780ec5f"
    "60517fa919b54a0d2de57a9f93c99cef"
    "a0e03b4dae2af5b0c8ebbb3c83539961"
    "172b047eba77d626e169146355210c7d"
)


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value {value!r} is not a byte (0..255)")
    return value


def sbox(byte: int) -> int:
    """Return the AES S-box substitution of a byte."""
    return SBOX[_check_byte(byte)]


def inv_sbox(byte: int) -> int:
    """Return the inverse AES S-box substitution of a byte."""
    return INV_SBOX[_check_byte(byte)]


def xtimes(b: int) -> int:
    """Multiply a field element by x, reducing modulo the AES polynomial."""
    _check_byte(b)
    shifted = (b << 1) & 0xFF
    return shifted ^ _REDUCTION if b & 0x80 else shifted


def gf_mult(b: int, c: int) -> int:
    """Multiply two elements of GF(2^8) as used by AES."""
    _check_byte(b)
    _check_byte(c)
    product = 0
    while c:
        if c & 1:
            product ^= b
        b = xtimes(b)
        c >>= 1
    return product