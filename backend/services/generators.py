"""
Generator Service - Hashes, passwords and UUIDs for the utility panels
"""

from __future__ import annotations

import hashlib
import secrets
import string
import uuid

from models.generators import PasswordOptions

HASH_ALGORITHMS = ("md5", "sha256", "sha512")

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

MIN_PASSWORD_LENGTH = 4
MAX_UUID_COUNT = 100


def generate_hash(text: str, algorithm: str) -> str:
    """Hex digest of the UTF-8 text; raises ValueError for unknown algorithms"""
    name = algorithm.lower()
    if name not in HASH_ALGORITHMS:
        raise ValueError(f"Unsupported algorithm: {algorithm}")
    return hashlib.new(name, text.encode("utf-8")).hexdigest()


def generate_password(options: PasswordOptions) -> str:
    """Random password drawn from the selected character classes"""
    if options.length < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password length must be at least {MIN_PASSWORD_LENGTH} characters")

    charset = ""
    if options.include_uppercase:
        charset += UPPERCASE
    if options.include_lowercase:
        charset += LOWERCASE
    if options.include_numbers:
        charset += NUMBERS
    if options.include_symbols:
        charset += SYMBOLS
    if not charset:
        raise ValueError("At least one character type must be selected")

    return "".join(secrets.choice(charset) for _ in range(options.length))


def generate_uuids(count: int = 1) -> list[str]:
    """Random (version 4) UUIDs"""
    if not 1 <= count <= MAX_UUID_COUNT:
        raise ValueError(f"Count must be between 1 and {MAX_UUID_COUNT}")
    return [str(uuid.uuid4()) for _ in range(count)]
