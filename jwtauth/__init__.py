"""RS256-style JWT issuing and verification built on self-contained SHA-256, Base64URL and RSA, with key storage and a SQLite user store."""

__version__ = "0.1.0"
__all__ = ["base64url", "bigint", "database", "jwt", "keystorage", "password", "rsa", "sha256"]