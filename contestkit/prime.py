"""Primality tests, factorisation and a sieve of Eratosthenes."""

from math import isqrt

__all__ = ["is_prime", "prime_factorize", "Eratosthenes"]


def is_prime(n: int) -> bool:
    """Return whether ``n`` is prime, by trial division."""
    if n < 2:
        return False
    return all(n % i for i in range(2, isqrt(n) + 1))


def prime_factorize(x: int) -> list[tuple[int, int]]:
    """Return ``(prime, exponent)`` pairs of ``x`` in increasing order."""
    factors = []
    n = x
    for i in range(2, isqrt(x) + 1):
        if n % i:
            continue
        exponent = 0
        while n % i == 0:
            exponent += 1
            n //= i
        factors.append((i, exponent))
    if n != 1:
        factors.append((n, 1))
    return factors


class Eratosthenes:
    """Precomputed primality of every integer from 0 to ``n``."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("sieve bound must be at least 1")
        sieve = [True] * (n + 1)
        sieve[0] = sieve[1] = False
        for p in range(2, isqrt(n) + 1):
            if sieve[p]:
                sieve[p * p :: p] = [False] * len(range(p * p, n + 1, p))
        self._sieve = sieve

    def is_prime(self, n: int) -> bool:
        """Return whether ``n`` is prime; ``n`` must lie within the sieve."""
        if not 0 <= n < len(self._sieve):
            raise IndexError(f"{n} is outside the sieve")
        return self._sieve[n]

    def get_primes(self, start: int, stop: int) -> list[int]:
        """Return the primes in ``range(start, stop)``."""
        return [k for k in range(start, stop) if self.is_prime(k)]