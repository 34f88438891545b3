"""elliptic_curves package.

This package provides Short-Weierstrass elliptic curves over finite fields and their group law.

Modules:
    - elliptic_curve: Contains the EllipticCurve class, which counts and factorises the order of E(F_q).
    - ec_point: Contains the ECPoint class for point negation, addition, doubling, scalar multiplication and order
    computation.

Usage example:
    >>> from bls_algebra.elliptic_curves.elliptic_curve import EllipticCurve
    >>> from bls_algebra.fields.prime_field import PrimeField
    >>>
    >>> Fq = PrimeField(5)
    >>> curve = EllipticCurve(field=Fq, a=0, b=2)
    >>> curve.group_order, curve.r
    (6, 3)
    >>> P = curve.create_point(3, 2)
    >>> P.double(), P.order
    (ECPoint(3, 3), 3)
"""
