import hashlib

import pytest

from jwtauth.sha256 import hash_hex


def test_empty_string_vector():
    assert hash_hex("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_abc_vector():
    assert hash_hex("abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


@pytest.mark.parametrize("length", [1, 54, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_padding_boundaries_match_reference(length):
    message = "x" * length
    assert hash_hex(message) == hashlib.sha256(message.encode()).hexdigest()


def test_unicode_is_hashed_as_utf8():
    message = "пароль ключ"
    assert hash_hex(message) == hashlib.sha256(message.encode("utf-8")).hexdigest()


def test_bytes_input_matches_reference():
    data = bytes(range(256))
    assert hash_hex(data) == hashlib.sha256(data).hexdigest()


def test_str_and_bytes_agree():
    assert hash_hex("header.payload") == hash_hex(b"header.payload")


def test_output_is_64_lowercase_hex_digits():
    digest = hash_hex("some message")
    assert len(digest) == 64
    assert set(digest) <= set("0123456789abcdef")


def test_deterministic_and_sensitive():
    assert hash_hex("message") == hash_hex("message")
    assert hash_hex("message") != hash_hex("message.")