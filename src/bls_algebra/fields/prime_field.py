"""Arithmetic in the prime field F_p."""

from dataclasses import dataclass
from typing import Self

from bls_algebra.exceptions import (
    ArithmeticInvariantViolation,
    DivisionByZeroError,
    FieldMismatchError,
    InvalidArgumentError,
    NonPrimeCharacteristicError,
)
from bls_algebra.util.utility_functions import extended_euclidean_algorithm, is_prime


@dataclass(frozen=True)
class PrimeField:
    """The prime field F_p.

    The field is a factory and validator for `PrimeFieldElement` instances. Calling the field on an integer is the
    same as `from_int`:

        >>> Fq = PrimeField(5)
        >>> Fq(7) == Fq.from_int(2)
        True

    Attributes:
        characteristic (int): The prime `p`.
    """

    characteristic: int

    def __post_init__(self):
        """Check that the characteristic is a prime integer."""
        if not isinstance(self.characteristic, int) or isinstance(self.characteristic, bool):
            msg = f"The characteristic must be an integer, got: {self.characteristic!r}"
            raise InvalidArgumentError(msg)
        if not is_prime(self.characteristic):
            msg = f"The characteristic must be a prime number, got: {self.characteristic}"
            raise NonPrimeCharacteristicError(msg)

    @property
    def extension_degree(self) -> int:
        """The degree of F_p over itself: always 1."""
        return 1

    def zero(self) -> "PrimeFieldElement":
        """The additive identity of F_p."""
        return PrimeFieldElement(self, 0)

    def one(self) -> "PrimeFieldElement":
        """The multiplicative identity of F_p."""
        return PrimeFieldElement(self, 1)

    def from_int(self, value: int) -> "PrimeFieldElement":
        """Return the class of `value` modulo `p`."""
        return PrimeFieldElement(self, value)

    def is_valid(self, x) -> bool:
        """Check that `x` is an element of this field with value in `[0, p)`."""
        return (
            isinstance(x, PrimeFieldElement)
            and x.field.characteristic == self.characteristic
            and 0 <= x.value < self.characteristic
        )

    def __call__(self, value: int) -> "PrimeFieldElement":
        return self.from_int(value)

    def __repr__(self):
        return f"PrimeField({self.characteristic})"


@dataclass(frozen=True, eq=False, repr=False)
class PrimeFieldElement:
    """Element of the prime field F_p.

    The value is always stored as the least non-negative residue modulo `p`. Binary operations accept another
    element of a field with the same characteristic, or an integer which is lifted to the field first.

    Attributes:
        field (PrimeField): The field the element belongs to.
        value (int): The canonical representative in `[0, p)`.
    """

    field: PrimeField
    value: int

    def __post_init__(self):
        """Reduce the value modulo the characteristic."""
        if self.field is None:
            msg = "The field of an element cannot be None"
            raise InvalidArgumentError(msg)
        if not isinstance(self.value, int):
            msg = f"The value of an element must be an integer, got: {self.value!r}"
            raise InvalidArgumentError(msg)
        object.__setattr__(self, "value", self.value % self.field.characteristic)

    @property
    def is_zero(self) -> bool:
        """Whether the element is the additive identity."""
        return self.value == 0

    def to_int(self) -> int:
        """Return the canonical representative of the element."""
        return self.value

    def add(self, other: Self | int) -> Self:
        """Return `self + other`."""
        other = self._coerce(other)
        return PrimeFieldElement(self.field, self.value + other.value)

    def sub(self, other: Self | int) -> Self:
        """Return `self - other`."""
        other = self._coerce(other)
        return PrimeFieldElement(self.field, self.value - other.value)

    def multiply(self, other: Self | int) -> Self:
        """Return `self * other`."""
        other = self._coerce(other)
        return PrimeFieldElement(self.field, self.value * other.value)

    def additive_inverse(self) -> Self:
        """Return `-self`."""
        return PrimeFieldElement(self.field, -self.value)

    def multiplicative_inverse(self) -> Self:
        """Return `self^-1`.

        The inverse is computed with the extended Euclidean algorithm on `(p, value)`: the Bézout coefficient of
        `value` is its inverse modulo `p`.

        Raises:
            DivisionByZeroError: If `self` is zero.
            ArithmeticInvariantViolation: If `gcd(p, value) != 1`, which means that `p` is not prime.
        """
        if self.is_zero:
            msg = "Cannot compute the multiplicative inverse of zero"
            raise DivisionByZeroError(msg)

        gcd, _, coefficient = extended_euclidean_algorithm(self.field.characteristic, self.value)
        if gcd != 1:
            msg = (
                f"The inverse of {self.value} does not exist: gcd({self.field.characteristic}, {self.value}) = {gcd}. "
                "The characteristic of the field is not prime."
            )
            raise ArithmeticInvariantViolation(msg)

        return PrimeFieldElement(self.field, coefficient)

    def power(self, exponent: int) -> Self:
        """Return `self^exponent`.

        Conventions:
            - `x^0 = 1` for every `x`, zero included.
            - `0^e = 0` for `e > 0`.
            - `x^-e = (x^-1)^e`, so a negative exponent on zero raises `DivisionByZeroError`.

        The positive case is computed by square-and-multiply, reading the bits of the exponent from the least
        significant one.
        """
        if not isinstance(exponent, int):
            msg = f"The exponent must be an integer, got: {exponent!r}"
            raise TypeError(msg)
        if exponent < 0:
            return self.multiplicative_inverse().power(-exponent)
        if exponent == 0:
            return self.field.one()
        if self.is_zero:
            return self.field.zero()

        modulus = self.field.characteristic
        base = self.value
        result = 1
        while exponent > 0:
            if exponent & 1:
                result = (result * base) % modulus
            base = (base * base) % modulus
            exponent >>= 1

        return PrimeFieldElement(self.field, result)

    def equals(self, other) -> bool:
        """Check whether `self` and `other` have the same characteristic and value."""
        return isinstance(other, PrimeFieldElement) and self == other

    def _coerce(self, other: Self | int) -> Self:
        """Lift integers to the field and check that elements share the characteristic of `self`."""
        if isinstance(other, int):
            return self.field.from_int(other)
        if not isinstance(other, PrimeFieldElement):
            msg = f"Expected PrimeFieldElement or int, got: {type(other).__name__}"
            raise TypeError(msg)
        if other.field.characteristic != self.field.characteristic:
            msg = (
                f"Field mismatch: other is from prime field {other.field.characteristic}, "
                f"current prime field {self.field.characteristic}"
            )
            raise FieldMismatchError(msg)
        return other

    def __add__(self, other):
        if not isinstance(other, PrimeFieldElement | int):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, PrimeFieldElement | int):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self.field.from_int(other).sub(self)

    def __mul__(self, other):
        if not isinstance(other, PrimeFieldElement | int):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, PrimeFieldElement | int):
            return NotImplemented
        return self.multiply(self._coerce(other).multiplicative_inverse())

    def __rtruediv__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self.field.from_int(other).multiply(self.multiplicative_inverse())

    def __neg__(self):
        return self.additive_inverse()

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented
        return self.power(exponent)

    def __eq__(self, other):
        if not isinstance(other, PrimeFieldElement):
            return NotImplemented
        return self.field.characteristic == other.field.characteristic and self.value == other.value

    def __hash__(self):
        return hash((self.field.characteristic, self.value))

    def __int__(self):
        return self.value

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"PrimeFieldElement({self.value}, F_{self.field.characteristic})"
