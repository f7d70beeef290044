"""Base64URL encoding without padding, as used in JWT segments."""

from __future__ import annotations

import base64
import logging

__all__ = ["encode", "decode"]

_log = logging.getLogger(__name__)

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}
_TO_URL = str.maketrans("+/", "-_")
_FROM_URL = str.maketrans("-_", "+/")


def _as_bytes(text: str | bytes) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8", "surrogateescape")
    return bytes(text)


def encode(text: str | bytes) -> str:
    """Encode *text* as Base64URL with no ``=`` padding.

    A ``str`` is encoded from its UTF-8 bytes.
    """
    encoded = base64.b64encode(_as_bytes(text)).decode("ascii")
    result = encoded.rstrip("=").translate(_TO_URL)
    _log.debug("base64url encode -> %s", result)
    return result


def decode(text: str) -> str:
    """Decode Base64URL *text*.

    Both the URL-safe and the standard alphabet are accepted. Decoding stops
    at the first character outside the alphabet (padding included) and any
    incomplete trailing byte is dropped. Bytes that are not valid UTF-8 are
    kept as surrogate escapes, so ``encode`` restores them exactly.
    """
    out = bytearray()
    acc = 0
    bits = 0
    for char in text.translate(_FROM_URL):
        value = _INDEX.get(char)
        if value is None:
            break
        acc = (acc << 6) | value
        bits += 6
        if bits >= 8:
            bits -= 8
            out.append((acc >> bits) & 0xFF)
            acc &= (1 << bits) - 1
    result = bytes(out).decode("utf-8", "surrogateescape")
    _log.debug("base64url decode -> %r", result)
    return result