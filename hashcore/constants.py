# constants.py
# Derives the SHA-2 initial hash values and round constants (FIPS 180-4,
# sections 4.2 and 5.3) from the fractional parts of prime roots.
#
# Everything is computed with integer arithmetic so the words are exact for
# both 32-bit and 64-bit variants.

import math


def first_primes(count: int) -> list:
    primes = []
    candidate = 2
    while len(primes) < count:
        if all(candidate % p for p in primes if p * p <= candidate):
            primes.append(candidate)
        candidate += 1
    return primes


def _icbrt(n: int) -> int:
    """Floor of the cube root of a non-negative integer."""
    if n < 2:
        return n
    x = 1 << ((n.bit_length() + 2) // 3)
    while True:
        y = (2 * x + n // (x * x)) // 3
        if y >= x:
            return x
        x = y


def sqrt_words(count: int, bits: int) -> tuple:
    """First ``bits`` bits of the fractional square roots of the first primes."""
    mask = (1 << bits) - 1
    return tuple(math.isqrt(p << (2 * bits)) & mask for p in first_primes(count))


def cbrt_words(count: int, bits: int) -> tuple:
    """First ``bits`` bits of the fractional cube roots of the first primes."""
    mask = (1 << bits) - 1
    return tuple(_icbrt(p << (3 * bits)) & mask for p in first_primes(count))
