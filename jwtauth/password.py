"""Password hashing for stored credentials."""

from __future__ import annotations

from .sha256 import hash_hex

__all__ = ["hash_password"]


def hash_password(password: str) -> str:
    """Return the SHA-256 hex digest (64 characters) of *password*."""
    return hash_hex(password)