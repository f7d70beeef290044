import pytest

from jwtauth.bigint import BigInt
from jwtauth.keystorage import KeyIntegrityError, load_keys, save_keys
from jwtauth.rsa import RSAPrivateKey, RSAPublicKey
from jwtauth.sha256 import hash_hex

PUBLIC = RSAPublicKey(e=BigInt(17), n=BigInt(3233))
PRIVATE = RSAPrivateKey(d=BigInt(2753), n=BigInt(3233))


def test_round_trip(tmp_path):
    save_keys(PUBLIC, PRIVATE, tmp_path)
    public, private = load_keys(tmp_path)
    assert public == PUBLIC
    assert private == PRIVATE


def test_private_file_layout(tmp_path):
    save_keys(PUBLIC, PRIVATE, tmp_path)
    text = (tmp_path / "rsa_private.key").read_text()
    assert text == "2753;3233\nhash=" + hash_hex("2753;3233") + "\n"


def test_public_file_layout(tmp_path):
    save_keys(PUBLIC, PRIVATE, tmp_path)
    assert (tmp_path / "rsa_public.key").read_text() == "17;3233\n"


def test_tampered_private_key_detected(tmp_path):
    save_keys(PUBLIC, PRIVATE, tmp_path)
    path = tmp_path / "rsa_private.key"
    path.write_text(path.read_text().replace("2753;", "2755;", 1))
    with pytest.raises(KeyIntegrityError):
        load_keys(tmp_path)


def test_missing_files(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_keys(tmp_path)


def test_missing_public_file(tmp_path):
    save_keys(PUBLIC, PRIVATE, tmp_path)
    (tmp_path / "rsa_public.key").unlink()
    with pytest.raises(FileNotFoundError):
        load_keys(tmp_path)


def test_private_line_without_separator(tmp_path):
    save_keys(PUBLIC, PRIVATE, tmp_path)
    (tmp_path / "rsa_private.key").write_text("abc\nhash=" + hash_hex("abc") + "\n")
    with pytest.raises(ValueError):
        load_keys(tmp_path)


def test_private_file_without_hash_line(tmp_path):
    save_keys(PUBLIC, PRIVATE, tmp_path)
    (tmp_path / "rsa_private.key").write_text("2753;3233\n")
    with pytest.raises(ValueError):
        load_keys(tmp_path)


def test_public_line_without_separator(tmp_path):
    save_keys(PUBLIC, PRIVATE, tmp_path)
    (tmp_path / "rsa_public.key").write_text("17 3233\n")
    with pytest.raises(ValueError):
        load_keys(tmp_path)