"""SHA-256 message digest."""

from __future__ import annotations

import logging
import struct
from collections.abc import Iterator

__all__ = ["hash_hex"]

_log = logging.getLogger(__name__)

_MASK = 0xFFFFFFFF

# First 32 bits of the fractional parts of the cube roots of the first 64 primes.
_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_INITIAL_STATE = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


def _ch(x: int, y: int, z: int) -> int:
    return (x & y) ^ (~x & z)


def _maj(x: int, y: int, z: int) -> int:
    return (x & y) ^ (x & z) ^ (y & z)


def _big_sigma0(x: int) -> int:
    return _rotr(x, 2) ^ _rotr(x, 13) ^ _rotr(x, 22)


def _big_sigma1(x: int) -> int:
    return _rotr(x, 6) ^ _rotr(x, 11) ^ _rotr(x, 25)


def _small_sigma0(x: int) -> int:
    return _rotr(x, 7) ^ _rotr(x, 18) ^ (x >> 3)


def _small_sigma1(x: int) -> int:
    return _rotr(x, 17) ^ _rotr(x, 19) ^ (x >> 10)


def _pad(message: bytes) -> bytes:
    """Append the 1 bit, zero fill and the 64-bit big-endian bit length."""
    bit_length = (len(message) * 8) & 0xFFFFFFFFFFFFFFFF
    zeros = b"\x00" * ((55 - len(message)) % 64)
    return message + b"\x80" + zeros + bit_length.to_bytes(8, "big")


def _blocks(data: bytes) -> Iterator[bytes]:
    return (data[offset:offset + 64] for offset in range(0, len(data), 64))


def _schedule(block: bytes) -> list[int]:
    words = list(struct.unpack(">16I", block))
    for j in range(16, 64):
        words.append(
            (_small_sigma1(words[j - 2]) + words[j - 7]
             + _small_sigma0(words[j - 15]) + words[j - 16]) & _MASK
        )
    return words


def _compress(state: list[int], block: bytes) -> list[int]:
    a, b, c, d, e, f, g, h = state
    for k, w in zip(_K, _schedule(block)):
        temp1 = (h + _big_sigma1(e) + _ch(e, f, g) + k + w) & _MASK
        temp2 = (_big_sigma0(a) + _maj(a, b, c)) & _MASK
        h, g, f, e = g, f, e, (d + temp1) & _MASK
        d, c, b, a = c, b, a, (temp1 + temp2) & _MASK
    return [(x + y) & _MASK for x, y in zip(state, (a, b, c, d, e, f, g, h))]


def hash_hex(text: str | bytes) -> str:
    """Return the SHA-256 digest of *text* as 64 lowercase hex digits.

    A ``str`` is hashed as its UTF-8 bytes.
    """
    data = text.encode("utf-8", "surrogateescape") if isinstance(text, str) else bytes(text)
    padded = _pad(data)
    _log.debug("hashing %d bytes (%d after padding)", len(data), len(padded))

    state = list(_INITIAL_STATE)
    for block in _blocks(padded):
        state = _compress(state, block)

    digest = "".join(f"{word:08x}" for word in state)
    _log.debug("digest %s", digest)
    return digest