from math import prod

import pytest

from bls_algebra.util.utility_functions import extended_euclidean_algorithm, factorise, is_prime


@pytest.mark.parametrize(
    ("n", "expected"),
    [
        (-7, False),
        (0, False),
        (1, False),
        (2, True),
        (3, True),
        (4, False),
        (5, True),
        (9, False),
        (25, False),
        (49, False),
        (97, True),
        (7919, True),
        (7917, False),
    ],
)
def test_is_prime(n, expected):
    assert is_prime(n) == expected


@pytest.mark.parametrize(
    ("a", "b", "expected_gcd"),
    [
        (7, 3, 1),
        (5, 4, 1),
        (240, 46, 2),
        (9, 3, 3),
        (17, 1, 1),
        (13, 0, 13),
    ],
)
def test_extended_euclidean_algorithm(a, b, expected_gcd):
    gcd, s, t = extended_euclidean_algorithm(a, b)

    assert gcd == expected_gcd
    assert s * a + t * b == gcd


@pytest.mark.parametrize(
    ("n", "expected"),
    [
        (0, []),
        (1, []),
        (2, [(2, 1)]),
        (6, [(2, 1), (3, 1)]),
        (8, [(2, 3)]),
        (9, [(3, 2)]),
        (13, [(13, 1)]),
        (360, [(2, 3), (3, 2), (5, 1)]),
        (1001, [(7, 1), (11, 1), (13, 1)]),
        (2 * 7919, [(2, 1), (7919, 1)]),
        (3**4 * 101**2, [(3, 4), (101, 2)]),
    ],
)
def test_factorise(n, expected):
    factors = factorise(n)

    assert factors == expected
    assert all(is_prime(prime) for prime, _ in factors)
    if n >= 2:  # noqa: PLR2004
        assert prod(prime**exponent for prime, exponent in factors) == n
