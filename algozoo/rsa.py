"""Textbook RSA with small integer keys."""

from __future__ import annotations

from dataclasses import dataclass
from math import gcd


def modpow(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent % modulus`` by square-and-multiply."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    result = 1
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


def private_exponent(e: int, phi: int) -> int:
    """Return the smallest positive ``d`` with ``e * d % phi == 1``."""
    if phi <= 1:
        raise ValueError("phi must be greater than 1")
    if gcd(e, phi) != 1:
        raise ValueError("e must be coprime to phi")
    return pow(e, -1, phi)


@dataclass(frozen=True)
class KeyPair:
    """An RSA modulus with its public and private exponents."""

    n: int
    e: int
    d: int

    def encrypt(self, message: int) -> int:
        """Encrypt an integer message with the public exponent."""
        return modpow(message, self.e, self.n)

    def decrypt(self, ciphertext: int) -> int:
        """Decrypt an integer ciphertext with the private exponent."""
        return modpow(ciphertext, self.d, self.n)


def generate_keypair(p: int, q: int, e: int = 5) -> KeyPair:
    """Build a key pair from the primes ``p`` and ``q`` and public exponent ``e``."""
    n = p * q
    phi = (p - 1) * (q - 1)
    return KeyPair(n=n, e=e, d=private_exponent(e, phi))