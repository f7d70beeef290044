"""Signed integers of arbitrary size with C-style truncating division."""

from __future__ import annotations

from typing import Union

__all__ = ["BigInt"]

_DECIMAL_DIGITS = frozenset("0123456789")
_HEX_VALUES = {char: value for value, char in enumerate("0123456789abcdef")}
_HEX_VALUES.update({char.upper(): value for char, value in _HEX_VALUES.items() if char.isalpha()})
_DIGITS = "0123456789abcdef"
_SUPPORTED_BASES = (10, 16)

Operand = Union["BigInt", int]


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _truncating_mod(a: int, b: int) -> int:
    return a - _truncating_div(a, b) * b


def _parse_decimal(text: str) -> int:
    negative = text.startswith("-")
    body = text[1:] if negative else text
    digits = "".join(char for char in body if char in _DECIMAL_DIGITS)
    value = int(digits) if digits else 0
    return -value if negative else value


def _parse_hex(text: str) -> int:
    negative = text.startswith("-")
    body = text[1:] if negative else text
    value = 0
    for char in body:
        digit = _HEX_VALUES.get(char)
        if digit is None:
            raise ValueError(f"invalid character in hex string: {char!r}")
        value = value * 16 + digit
    return -value if negative else value


class BigInt:
    """An immutable signed integer.

    Division truncates toward zero and the remainder takes the sign of the
    dividend. Decimal parsing skips any character that is not a digit;
    hexadecimal parsing rejects such characters.
    """

    __slots__ = ("_value",)

    def __init__(self, value: BigInt | int | str = 0, base: int = 10) -> None:
        if base not in _SUPPORTED_BASES:
            raise ValueError(f"unsupported base: {base}")
        if isinstance(value, BigInt):
            self._value = value._value
        elif isinstance(value, int):
            self._value = int(value)
        elif isinstance(value, str):
            self._value = _parse_hex(value) if base == 16 else _parse_decimal(value)
        else:
            raise TypeError(f"cannot build BigInt from {type(value).__name__}")

    @staticmethod
    def _coerce(other: object) -> int | None:
        if isinstance(other, BigInt):
            return other._value
        if isinstance(other, int):
            return int(other)
        return None

    def to_string(self, base: int = 10) -> str:
        """Render the number in base 10 or 16 (lowercase digits)."""
        if base not in _SUPPORTED_BASES:
            raise ValueError(f"unsupported base: {base}")
        magnitude = abs(self._value)
        if magnitude == 0:
            return "0"
        chars = []
        while magnitude:
            magnitude, digit = divmod(magnitude, base)
            chars.append(_DIGITS[digit])
        if self._value < 0:
            chars.append("-")
        return "".join(reversed(chars))

    def __str__(self) -> str:
        return self.to_string(10)

    def __repr__(self) -> str:
        return f"BigInt({self.to_string(10)!r})"

    def __add__(self, other: Operand) -> BigInt:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return BigInt(self._value + value)

    def __sub__(self, other: Operand) -> BigInt:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return BigInt(self._value - value)

    def __mul__(self, other: Operand) -> BigInt:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return BigInt(self._value * value)

    def __floordiv__(self, other: Operand) -> BigInt:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return BigInt(_truncating_div(self._value, value))

    def __mod__(self, other: Operand) -> BigInt:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return BigInt(_truncating_mod(self._value, value))

    def __neg__(self) -> BigInt:
        return BigInt(-self._value)

    def __eq__(self, other: object) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value == value

    def __lt__(self, other: Operand) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value < value

    def __le__(self, other: Operand) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value <= value

    def __gt__(self, other: Operand) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value > value

    def __ge__(self, other: Operand) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value >= value

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def is_zero(self) -> bool:
        """True when the number is zero."""
        return self._value == 0

    def is_negative(self) -> bool:
        """True when the number is below zero."""
        return self._value < 0

    @staticmethod
    def mod_pow(base: Operand, exp: Operand, mod: Operand) -> BigInt:
        """Return ``base ** |exp|`` reduced by *mod* with square-and-multiply."""
        modulus = int(BigInt(mod))
        current = _truncating_mod(int(BigInt(base)), modulus)
        remaining = abs(int(BigInt(exp)))
        result = 1
        while remaining:
            if remaining & 1:
                result = _truncating_mod(result * current, modulus)
            current = _truncating_mod(current * current, modulus)
            remaining >>= 1
        return BigInt(result)

    @staticmethod
    def gcd(a: Operand, b: Operand) -> BigInt:
        """Greatest common divisor by Euclid's algorithm."""
        x, y = int(BigInt(a)), int(BigInt(b))
        while y:
            x, y = y, _truncating_mod(x, y)
        return BigInt(x)