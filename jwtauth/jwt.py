"""JSON Web Tokens signed with RS256 over the package's own RSA keys."""

from __future__ import annotations

import logging
import re
import time
from enum import Enum

from .base64url import decode, encode
from .bigint import BigInt
from .rsa import RSAPrivateKey, RSAPublicKey, sign, verify
from .sha256 import hash_hex

__all__ = [
    "TokenError",
    "create_access_token",
    "create_refresh_token",
    "verify_access_token",
    "verify_refresh_token",
]

_log = logging.getLogger(__name__)

_HEADER_JSON = '{"alg":"RS256","typ":"JWT"}'
_SUB_MARKER = '"sub":"'
_EXP_MARKER = '"exp":'
_EXP_NUMBER = re.compile(r"\s*\+?(\d+)")


class TokenError(ValueError):
    """A token is malformed, wrongly signed, of the wrong type or expired."""


class _TokenType(str, Enum):
    ACCESS = "access"
    REFRESH = "refresh"


def _create_token(
    subject: str,
    expiration_seconds: int,
    private_key: RSAPrivateKey,
    kind: _TokenType,
) -> str:
    if expiration_seconds < 0:
        raise ValueError("expiration_seconds must not be negative")
    header = encode(_HEADER_JSON)
    now = int(time.time())
    expires = now + expiration_seconds
    payload_json = (
        f'{{"sub":"{subject}","iat":{now},"exp":{expires},"typ":"{kind.value}"}}'
    )
    message = f"{header}.{encode(payload_json)}"
    digest = hash_hex(message)
    signature = sign(BigInt(digest, 16), private_key)
    token = f"{message}.{encode(signature.to_string(16))}"
    _log.debug("created %s token for %s: %s", kind.value, subject, token)
    return token


def _split(token: str) -> tuple[str, str, str]:
    first = token.find(".")
    if first < 0:
        raise TokenError("token has no header separator")
    second = token.find(".", first + 1)
    if second < 0:
        raise TokenError("token has no signature separator")
    return token[:first], token[first + 1:second], token[second + 1:]


def _extract_subject(payload: str) -> str:
    position = payload.find(_SUB_MARKER)
    if position < 0:
        raise TokenError("token payload has no subject")
    start = position + len(_SUB_MARKER)
    end = payload.find('"', start)
    return payload[start:] if end < 0 else payload[start:end]


def _extract_expiry(payload: str) -> int:
    position = payload.find(_EXP_MARKER)
    if position < 0:
        raise TokenError("token payload has no expiry")
    start = position + len(_EXP_MARKER)
    ends = [index for index in (payload.find(",", start), payload.find("}", start)) if index >= 0]
    text = payload[start:min(ends)] if ends else payload[start:]
    match = _EXP_NUMBER.match(text)
    if match is None:
        raise TokenError(f"token expiry is not a number: {text!r}")
    return int(match.group(1))


def _verify_token(token: str, public_key: RSAPublicKey, kind: _TokenType) -> str:
    header_b64, payload_b64, signature_b64 = _split(token)
    message = f"{header_b64}.{payload_b64}"
    expected_hash = hash_hex(message)

    try:
        signature = BigInt(decode(signature_b64), 16)
    except ValueError as error:
        raise TokenError("token signature is not valid hex") from error

    if not verify(expected_hash, signature, public_key):
        raise TokenError(f"{kind.value} token signature is invalid")

    payload = decode(payload_b64)
    _log.debug("decoded payload %s", payload)
    if f'"typ":"{kind.value}"' not in payload:
        raise TokenError(f"token is not a {kind.value} token")

    if _SUB_MARKER not in payload or _EXP_MARKER not in payload:
        raise TokenError("token payload lacks subject or expiry")
    subject = _extract_subject(payload)
    expires = _extract_expiry(payload)

    now = int(time.time())
    if now > expires:
        raise TokenError(f"{kind.value} token expired at {expires}")
    return subject


def create_access_token(
    subject: str, expiration_seconds: int, private_key: RSAPrivateKey
) -> str:
    """Create an access token for *subject* valid for *expiration_seconds*."""
    return _create_token(subject, expiration_seconds, private_key, _TokenType.ACCESS)


def create_refresh_token(
    subject: str, expiration_seconds: int, private_key: RSAPrivateKey
) -> str:
    """Create a refresh token for *subject* valid for *expiration_seconds*."""
    return _create_token(subject, expiration_seconds, private_key, _TokenType.REFRESH)


def verify_access_token(token: str, public_key: RSAPublicKey) -> str:
    """Return the subject of a valid access token; raise TokenError otherwise."""
    return _verify_token(token, public_key, _TokenType.ACCESS)


def verify_refresh_token(token: str, public_key: RSAPublicKey) -> str:
    """Return the subject of a valid refresh token; raise TokenError otherwise."""
    return _verify_token(token, public_key, _TokenType.REFRESH)