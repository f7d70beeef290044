"""Saving and loading RSA key pairs with an integrity checksum."""

from __future__ import annotations

import logging
from pathlib import Path

from .bigint import BigInt
from .rsa import RSAPrivateKey, RSAPublicKey
from .sha256 import hash_hex

__all__ = ["KeyIntegrityError", "save_keys", "load_keys"]

_log = logging.getLogger(__name__)

PRIVATE_FILE = "rsa_private.key"
PUBLIC_FILE = "rsa_public.key"
_HASH_PREFIX = "hash="


class KeyIntegrityError(ValueError):
    """The stored private key does not match its checksum."""


def _read_lines(path: Path) -> list[str]:
    with path.open("r", encoding="utf-8", newline="") as handle:
        lines = handle.read().split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _split_pair(line: str, what: str) -> tuple[BigInt, BigInt]:
    first, separator, second = line.partition(";")
    if not separator:
        raise ValueError(f"{what} key line has no ';' separator")
    return BigInt(first), BigInt(second)


def save_keys(
    public_key: RSAPublicKey,
    private_key: RSAPrivateKey,
    directory: str | Path = ".",
) -> None:
    """Write both keys into *directory*; the private key gets a SHA-256 checksum."""
    folder = Path(directory)
    content = f"{private_key.d};{private_key.n}"
    with (folder / PRIVATE_FILE).open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(f"{content}\n{_HASH_PREFIX}{hash_hex(content)}\n")
    with (folder / PUBLIC_FILE).open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(f"{public_key.e};{public_key.n}\n")
    _log.debug("keys saved to %s", folder)


def load_keys(directory: str | Path = ".") -> tuple[RSAPublicKey, RSAPrivateKey]:
    """Read the key pair from *directory*.

    Raises FileNotFoundError when a key file is missing, KeyIntegrityError
    when the private key fails its checksum and ValueError when a file is
    malformed.
    """
    folder = Path(directory)
    private_lines = _read_lines(folder / PRIVATE_FILE)
    public_lines = _read_lines(folder / PUBLIC_FILE)

    if len(private_lines) < 2:
        raise ValueError("private key file needs a key line and a hash line")
    private_line, hash_line = private_lines[0], private_lines[1]
    if hash_line != _HASH_PREFIX + hash_hex(private_line):
        raise KeyIntegrityError("private key checksum mismatch; the key is damaged")

    d, private_n = _split_pair(private_line, "private")

    if not public_lines:
        raise ValueError("public key file is empty")
    e, public_n = _split_pair(public_lines[0], "public")

    return RSAPublicKey(e=e, n=public_n), RSAPrivateKey(d=d, n=private_n)