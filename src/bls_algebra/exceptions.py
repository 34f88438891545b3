"""Errors raised by the field and elliptic curve arithmetic.

Every error derives from `BlsAlgebraError` and from the built-in exception that best describes it, so callers
can catch either the package hierarchy or the built-in.
"""


class BlsAlgebraError(Exception):
    """Base class for all errors raised by bls_algebra."""


class ConstructionError(BlsAlgebraError, ValueError):
    """A field, curve or point could not be constructed from the given arguments."""


class InvalidArgumentError(ConstructionError):
    """A required argument is missing or does not belong to the expected field."""


class NonPrimeCharacteristicError(ConstructionError):
    """The characteristic requested for a prime field is not prime."""


class InvalidCurveError(ConstructionError):
    """The curve coefficients define a singular curve: 4*A^3 + 27*B^2 == 0."""


class InvalidPointError(ConstructionError):
    """A point that was required to lie on the curve does not satisfy the curve equation."""


class FieldMismatchError(BlsAlgebraError, ValueError):
    """A binary operation was attempted between elements of fields with different characteristic."""


class DivisionByZeroError(BlsAlgebraError, ZeroDivisionError):
    """The multiplicative inverse of zero was requested."""


class UnsupportedFieldError(BlsAlgebraError, NotImplementedError):
    """The operation is only available over prime fields (extension degree 1)."""


class ArithmeticInvariantViolation(BlsAlgebraError, ArithmeticError):  # noqa: N818
    """An algebraic invariant failed to hold, e.g. gcd(characteristic, value) != 1 in a prime field."""
