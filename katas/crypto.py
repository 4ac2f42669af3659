"""Diffie-Hellman key exchange and the square code cipher."""

from __future__ import annotations

import math
import re
import secrets

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]+")
_RANDOM_BITS = 63


def private_key(p: int) -> int:
    """Pick a random private key for the prime modulus ``p``.

    Draws below 2 are replaced by 2.
    """
    value = secrets.randbits(_RANDOM_BITS) % p
    return 2 if value < 2 else value


def public_key(private: int, p: int, g: int) -> int:
    """Public key ``g ** private mod p``."""
    return pow(g, private, p)


def secret_key(private: int, public: int, p: int) -> int:
    """Shared value from one's own private key and the other side's public key."""
    return pow(public, private, p)


def new_pair(p: int, g: int) -> tuple[int, int]:
    """Generate a (private, public) key pair."""
    private = private_key(p)
    return private, public_key(private, p, g)


def prepare_string(message: str) -> str:
    """Drop everything but ASCII letters and digits, and lowercase the rest."""
    return _NON_ALPHANUMERIC.sub("", message).lower()


def find_rect_size(size: int) -> tuple[int, int]:
    """Smallest (columns, rows) with columns * rows >= size and 0 <= columns - rows <= 1."""
    if size <= 0:
        return 0, 0
    columns = math.isqrt(size - 1) + 1
    rows = columns - 1 if columns * (columns - 1) >= size else columns
    return columns, rows


def encode(message: str) -> str:
    """Encode ``message`` with the square code.

    The normalised text is laid out in rows, padded with spaces, and read
    column by column; columns are separated by single spaces.
    """
    text = prepare_string(message)
    columns, rows = find_rect_size(len(text))
    padded = text.ljust(columns * rows)
    return " ".join(padded[column::columns] for column in range(columns))