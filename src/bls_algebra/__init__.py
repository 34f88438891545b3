"""bls_algebra: exact arithmetic in prime fields and on Short-Weierstrass elliptic curves.

The `bls_algebra` package provides the algebraic substrate used by pairing-friendly-curve schemes such as BLS
signatures: arithmetic in F_p, elliptic curves y^2 = x^3 + a*x + b over F_p with their group order and its
factorisation, and the group law on their points, including the exact order of a point.

Usage example:
    Compute the order of a point on y^2 = x^3 + 2 over F_5:

    >>> from bls_algebra.elliptic_curves.elliptic_curve import EllipticCurve
    >>> from bls_algebra.fields.prime_field import PrimeField
    >>>
    >>> Fq = PrimeField(5)
    >>> curve = EllipticCurve(field=Fq, a=Fq(0), b=Fq(2))
    >>> curve.group_order_factors
    ((2, 1), (3, 1))
    >>> curve.create_point(x=Fq(3), y=Fq(2)).order
    3

Logging:
    Modules log the expensive computations (point counting, factorisation, point orders) at `DEBUG` level through
    loggers named after the modules. No handler is configured by the package.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
