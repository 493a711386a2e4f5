"""Diffie-Hellman key exchange over plain integers."""

import secrets


def private_key(prime: int) -> int:
    """Random private key in [2, prime)."""
    if prime <= 2:
        raise ValueError("prime must be greater than 2")
    return secrets.randbelow(prime - 2) + 2


def public_key(prime: int, base: int, private: int) -> int:
    return pow(base, private, prime)


def secret(prime: int, public: int, private: int) -> int:
    return pow(public, private, prime)
