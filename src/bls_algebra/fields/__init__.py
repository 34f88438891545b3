"""fields package.

This package provides the finite fields over which the elliptic curves of `bls_algebra` are defined.

Modules:
    - field: Contains the Field and FieldElement protocols, the capability sets required by the elliptic curve
    arithmetic.
    - prime_field: Contains the PrimeField and PrimeFieldElement classes for arithmetic in F_p.

Usage example:
    >>> from bls_algebra.fields.prime_field import PrimeField
    >>> Fq = PrimeField(7)
    >>> Fq(3) * Fq(5)
    PrimeFieldElement(1, F_7)
    >>> Fq(3).multiplicative_inverse()
    PrimeFieldElement(5, F_7)
"""
