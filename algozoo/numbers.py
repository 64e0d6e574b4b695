"""Elementary number theory: primality, factorials, Fibonacci numbers, gcd and lcm."""

from __future__ import annotations


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime, using trial division by odd numbers."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    divisor = 3
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer ``n``."""
    if n < 0:
        raise ValueError("factorial is only defined for non-negative integers")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("fibonacci is only defined for non-negative indices")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def _truncated_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend, as with truncating division."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's algorithm."""
    if a < b:
        a, b = b, a
    while b:
        a, b = b, _truncated_mod(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of ``a`` and ``b``.

    Raises ZeroDivisionError when both arguments are zero.
    """
    divisor = gcd(a, b)
    if divisor == 0:
        raise ZeroDivisionError("lcm of 0 and 0 is undefined")
    product = a * b
    quotient = abs(product) // abs(divisor)
    return quotient if (product < 0) == (divisor < 0) else -quotient