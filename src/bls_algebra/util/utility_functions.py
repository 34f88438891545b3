"""Utility functions."""

from math import isqrt


def is_prime(n: int) -> bool:
    """Check whether `n` is prime by trial division.

    Example:
        >>> is_prime(2)
        True
        >>> is_prime(9)
        False
        >>> is_prime(1)
        False
    """
    if n < 2:  # noqa: PLR2004
        return False
    if n == 2:  # noqa: PLR2004
        return True
    if n % 2 == 0:
        return False
    return all(n % i != 0 for i in range(3, isqrt(n) + 1, 2))


def extended_euclidean_algorithm(a: int, b: int) -> tuple[int, int, int]:
    """Compute the greatest common divisor of `a` and `b` together with its Bézout coefficients.

    Args:
        a (int): The first integer.
        b (int): The second integer.

    Returns:
        The tuple `(gcd, s, t)` such that `s * a + t * b == gcd`.

    Example:
        >>> extended_euclidean_algorithm(7, 3)
        (1, 1, -2)
    """
    remainder, next_remainder = a, b
    s, next_s = 1, 0
    t, next_t = 0, 1
    while next_remainder != 0:
        quotient = remainder // next_remainder
        remainder, next_remainder = next_remainder, remainder - quotient * next_remainder
        s, next_s = next_s, s - quotient * next_s
        t, next_t = next_t, t - quotient * next_t
    return remainder, s, t


def factorise(n: int) -> list[tuple[int, int]]:
    """Factorise `n` by trial division.

    The powers of 2 are removed first, then odd divisors `i = 3, 5, 7, ...` are tried while `i * i <= n`. Whatever
    is left after the trial range is larger than 1 only if it is prime.

    Args:
        n (int): The integer to factorise.

    Returns:
        The list of pairs `(prime, exponent)` with `prod(prime**exponent) == n`, in increasing order of the primes.
        The list is empty if `n < 2`.

    Example:
        >>> factorise(360)
        [(2, 3), (3, 2), (5, 1)]
        >>> factorise(1)
        []
    """
    factors = []
    if n < 2:  # noqa: PLR2004
        return factors

    exponent = 0
    while n % 2 == 0:
        n //= 2
        exponent += 1
    if exponent > 0:
        factors.append((2, exponent))

    i = 3
    while i * i <= n:
        if n % i == 0:
            exponent = 0
            while n % i == 0:
                n //= i
                exponent += 1
            factors.append((i, exponent))
        i += 2

    if n > 1:
        factors.append((n, 1))

    return factors
