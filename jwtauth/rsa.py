"""Textbook RSA: key generation, encryption and signatures."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .bigint import BigInt

__all__ = [
    "RSAPublicKey",
    "RSAPrivateKey",
    "is_probable_prime",
    "mod_inverse",
    "generate_keys",
    "encrypt",
    "decrypt",
    "sign",
    "verify",
]

_log = logging.getLogger(__name__)

_rng = random.SystemRandom()

_DEFAULT_EXPONENT = 65537
_HASH_HEX_LENGTH = 64


@dataclass(frozen=True)
class RSAPublicKey:
    """Public exponent *e* and modulus *n*."""

    e: BigInt
    n: BigInt


@dataclass(frozen=True)
class RSAPrivateKey:
    """Private exponent *d* and modulus *n*."""

    d: BigInt
    n: BigInt


def is_probable_prime(n: BigInt | int, iterations: int = 10) -> bool:
    """Miller-Rabin test with *iterations* random witnesses."""
    n = BigInt(n)
    if n <= 1:
        return False
    if n == 2 or n == 3:
        return True
    if (n % 2).is_zero():
        return False

    n_minus_one = n - 1
    d = n_minus_one
    r = 0
    while (d % 2).is_zero():
        d = d // 2
        r += 1

    highest_witness = min(10001, int(n) - 2)
    for _ in range(iterations):
        a = BigInt(_rng.randint(2, highest_witness))
        x = BigInt.mod_pow(a, d, n)
        if x == 1 or x == n_minus_one:
            continue
        for _ in range(r - 1):
            x = BigInt.mod_pow(x, 2, n)
            if x == n_minus_one:
                break
        else:
            return False
    return True


def _random_candidate(bit_length: int) -> BigInt:
    """A random decimal number with one digit per four requested bits."""
    digit_count = len(range(0, bit_length, 4))
    digits = "".join(str(_rng.randrange(10)) for _ in range(digit_count))
    return BigInt(digits)


def _random_prime(bit_length: int, exclude: BigInt | None = None) -> BigInt:
    while True:
        candidate = _random_candidate(bit_length)
        if is_probable_prime(candidate) and candidate != exclude:
            return candidate


def mod_inverse(a: BigInt | int, m: BigInt | int) -> BigInt:
    """Return x with ``a * x ≡ 1 (mod m)`` by the extended Euclidean algorithm.

    Raises ValueError when *a* has no inverse modulo *m*.
    """
    modulus = BigInt(m)
    current, divisor = BigInt(a), modulus
    x0, x1 = BigInt(0), BigInt(1)
    while current > 1:
        if divisor.is_zero():
            raise ValueError(f"{a} has no inverse modulo {m}")
        quotient = current // divisor
        current, divisor = divisor, current % divisor
        x0, x1 = x1 - quotient * x0, x0
    if x1 < 0:
        x1 = x1 + modulus
    return x1


def generate_keys(bit_length: int = 64) -> tuple[RSAPublicKey, RSAPrivateKey]:
    """Generate a key pair from two distinct random primes."""
    _log.debug("generating RSA keys, bit length %d", bit_length)
    p = _random_prime(bit_length)
    q = _random_prime(bit_length, exclude=p)

    n = p * q
    phi = (p - 1) * (q - 1)
    e = BigInt(_DEFAULT_EXPONENT)
    while BigInt.gcd(e, phi) != 1:
        e = e + 2

    d = mod_inverse(e, phi)
    _log.debug("n=%s e=%s", n, e)
    return RSAPublicKey(e=e, n=n), RSAPrivateKey(d=d, n=n)


def encrypt(message: BigInt, key: RSAPublicKey) -> BigInt:
    """Return ``message ** e mod n``."""
    return BigInt.mod_pow(message, key.e, key.n)


def decrypt(cipher: BigInt, key: RSAPrivateKey) -> BigInt:
    """Return ``cipher ** d mod n``."""
    return BigInt.mod_pow(cipher, key.d, key.n)


def sign(hash_value: BigInt, key: RSAPrivateKey) -> BigInt:
    """Return the signature ``hash ** d mod n``."""
    signature = BigInt.mod_pow(hash_value, key.d, key.n)
    _log.debug("signature %s", signature.to_string(16))
    return signature


def verify(message_hash_hex: str, signature: BigInt, key: RSAPublicKey) -> bool:
    """Check that *signature* recovers *message_hash_hex* (64 hex digits)."""
    recovered = BigInt.mod_pow(signature, key.e, key.n).to_string(16)
    recovered = recovered.rjust(_HASH_HEX_LENGTH, "0")
    valid = recovered == message_hash_hex
    _log.debug("signature valid: %s", valid)
    return valid