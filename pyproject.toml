[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jwtauth"
version = "0.1.0"
description = "Self-contained RS256-style JWT issuing and verification with textbook RSA, SHA-256, key storage and a SQLite user store"
requires-python = ">=3.10"
dependencies = []
keywords = ["jwt", "rsa", "sha256", "base64url", "authentication", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Internet :: WWW/HTTP :: Session",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jwtauth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
