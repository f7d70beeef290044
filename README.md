# jwtauth

A small, dependency-free toolkit for issuing and checking RS256-style JSON Web
Tokens. Every building block is included:

- `jwtauth.sha256`: a SHA-256 implementation. `hash_hex` returns the digest as 64 lowercase hex digits.
- `jwtauth.base64url`: Base64URL `encode` and `decode` with no `=` padding.
- `jwtauth.password`: `hash_password` returns the SHA-256 hex digest of a password.
- `jwtauth.bigint`: `BigInt`, an immutable signed integer. Division truncates toward zero. It provides `mod_pow` and `gcd`.
- `jwtauth.rsa`: textbook RSA. It has `generate_keys`, `sign`, `verify`, `encrypt`, `decrypt`, `is_probable_prime` and `mod_inverse`, plus the `RSAPublicKey` and `RSAPrivateKey` dataclasses.
- `jwtauth.jwt`: creates and verifies access and refresh tokens. Verification failures raise `TokenError`.
- `jwtauth.keystorage`: `save_keys` and `load_keys` write and read the two key files. The private key file carries a SHA-256 checksum, and a mismatch raises `KeyIntegrityError`.
- `jwtauth.database`: `Database`, a SQLite store for users (`User`) and for revoked (blacklisted) tokens.

The RSA has no padding and the keys are small. This package is for learning and
experiments. Do not use it to protect anything of value.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from jwtauth.rsa import generate_keys
from jwtauth.jwt import (
    create_access_token,
    create_refresh_token,
    verify_access_token,
    TokenError,
)

public, private = generate_keys(256)

access = create_access_token("alice", 900, private)
refresh = create_refresh_token("alice", 7 * 24 * 3600, private)

subject = verify_access_token(access, public)     # "alice"

try:
    verify_access_token(refresh, public)           # wrong token type
except TokenError as err:
    print("rejected:", err)
```

The verify functions return the token's subject. They raise `TokenError` in
these cases:

- the token is malformed
- the signature does not match
- the token is of the wrong type
- the token has expired

### Keeping keys on disk

```python
from jwtauth.keystorage import save_keys, load_keys

save_keys(public, private, "keys")    # writes rsa_private.key and rsa_public.key
public, private = load_keys("keys")   # KeyIntegrityError if the private key was altered
```

`load_keys` can raise three errors:

- `FileNotFoundError` when a key file is missing.
- `KeyIntegrityError` when the private key fails its checksum.
- `ValueError` when a file is malformed.

Both functions use the current directory when none is given.

### Users and revoked tokens

```python
from jwtauth.database import Database

password = "password"

with Database("users.db") as db:
    db.add_user("alice", password)         # False if the name is already taken
    user = db.get_user("alice")            # User(id=..., username="alice", password=<sha256 hex>) or None
    db.blacklist_token(refresh, 1_900_000_000)
    db.is_token_blacklisted(refresh)       # True
    db.cleanup_blacklist()                 # number of expired entries removed
```

## What it does not do

This package is a library only and has no command to run. It contains no HTTP
server and no routes for registration, login, token refresh or logout. Those
flows are left to the application, which combines `Database`, the token
functions and the key storage.