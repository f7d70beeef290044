import math

import pytest

from jwtauth.bigint import BigInt

SAMPLES = [0, 1, -1, 7, -7, 10, 99, -100, 123456789012345678901234567890, -98765432109876543210]


@pytest.mark.parametrize("value", SAMPLES)
def test_decimal_string_round_trip(value):
    assert BigInt(str(value)).to_string() == str(value)
    assert str(BigInt(value)) == str(value)


@pytest.mark.parametrize("value", SAMPLES)
def test_hex_round_trip(value):
    text = BigInt(value).to_string(16)
    assert BigInt(text, 16) == value


def test_hex_parse_accepts_mixed_case_and_renders_lowercase():
    assert BigInt("DeadBeef", 16).to_string(16) == "deadbeef"
    assert int(BigInt("ff", 16)) == int("ff", 16)


def test_negative_hex():
    assert BigInt("-1a", 16) == -int("1a", 16)
    assert BigInt("-1a", 16).to_string(16) == "-1a"


def test_decimal_parse_skips_non_digits():
    assert BigInt("12a3") == BigInt("123")
    assert BigInt("") == BigInt(0)


def test_negative_zero_is_zero():
    zero = BigInt("-0")
    assert zero.to_string() == "0"
    assert not zero.is_negative()
    assert zero.is_zero()


def test_invalid_hex_character():
    with pytest.raises(ValueError):
        BigInt("12g", 16)


def test_unsupported_base():
    with pytest.raises(ValueError):
        BigInt("10", 8)
    with pytest.raises(ValueError):
        BigInt(5).to_string(2)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", [1, -1, 3, -3, 10, 987654321])
def test_arithmetic_matches_int(a, b):
    x, y = BigInt(a), BigInt(b)
    assert x + y == a + b
    assert x - y == a - b
    assert x * y == a * b
    assert -x == -a


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", [1, -1, 2, -2, 3, -7, 1000])
def test_division_truncates_toward_zero(a, b):
    q = BigInt(a) // BigInt(b)
    r = BigInt(a) % BigInt(b)
    assert q * b + r == a
    assert abs(int(r)) < abs(b)
    assert int(r) == 0 or (int(r) < 0) == (a < 0)
    assert abs(int(q)) == abs(a) // abs(b)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        BigInt(5) // BigInt(0)
    with pytest.raises(ZeroDivisionError):
        BigInt(5) % BigInt(0)


def test_comparisons():
    values = sorted(SAMPLES)
    wrapped = [BigInt(v) for v in values]
    assert sorted(wrapped) == wrapped
    for low, high in zip(wrapped, wrapped[1:]):
        assert low < high
        assert low <= high
        assert high > low
        assert high >= low
        assert low != high


def test_hash_consistent_with_equality():
    assert hash(BigInt("42")) == hash(BigInt(42))
    assert len({BigInt(3), BigInt("3"), BigInt("3", 16)}) == 1


def test_is_negative_and_is_zero():
    assert BigInt(-5).is_negative()
    assert not BigInt(5).is_negative()
    assert not BigInt(5).is_zero()


@pytest.mark.parametrize(
    "base, exp, mod",
    [(4, 13, 497), (2, 100, 1000000007), (65537, 12345, 99991), (7, 0, 13)],
)
def test_mod_pow_matches_pow(base, exp, mod):
    assert BigInt.mod_pow(BigInt(base), BigInt(exp), BigInt(mod)) == pow(base, exp, mod)


def test_mod_pow_zero_modulus():
    with pytest.raises(ZeroDivisionError):
        BigInt.mod_pow(BigInt(3), BigInt(2), BigInt(0))


@pytest.mark.parametrize("a, b", [(48, 18), (17, 5), (0, 9), (65537, 65536), (2**40, 2**35 * 3)])
def test_gcd_matches_math(a, b):
    assert BigInt.gcd(BigInt(a), BigInt(b)) == math.gcd(a, b)


def test_repr_round_trip():
    value = BigInt("-123456")
    assert repr(value) == "BigInt('-123456')"