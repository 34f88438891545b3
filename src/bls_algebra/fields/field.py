"""Capability sets shared by fields and their elements.

The elliptic curve arithmetic is written against these protocols rather than a concrete class, so any element type
that provides the operations below can be used as the coordinate type of a curve.
"""

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class FieldElement(Protocol):
    """Element of a finite field.

    Implementations are immutable: every operation returns a new element.
    """

    def add(self, other: Self) -> Self:
        """Return `self + other`."""
        ...

    def sub(self, other: Self) -> Self:
        """Return `self - other`."""
        ...

    def multiply(self, other: Self) -> Self:
        """Return `self * other`."""
        ...

    def additive_inverse(self) -> Self:
        """Return `-self`."""
        ...

    def multiplicative_inverse(self) -> Self:
        """Return `self^-1`. Fails if `self` is zero."""
        ...

    def power(self, exponent: int) -> Self:
        """Return `self^exponent`. Negative exponents go through the multiplicative inverse."""
        ...

    @property
    def is_zero(self) -> bool:
        """Whether `self` is the additive identity."""
        ...

    def equals(self, other: Self) -> bool:
        """Structural equality."""
        ...

    def __add__(self, other: Self) -> Self: ...

    def __sub__(self, other: Self) -> Self: ...

    def __mul__(self, other: Self) -> Self: ...

    def __truediv__(self, other: Self) -> Self: ...

    def __neg__(self) -> Self: ...

    def __pow__(self, exponent: int) -> Self: ...


@runtime_checkable
class Field[T: FieldElement](Protocol):
    """Finite field acting as factory and validator for its elements."""

    @property
    def characteristic(self) -> int:
        """The characteristic `p` of the field."""
        ...

    @property
    def extension_degree(self) -> int:
        """The degree of the field over its prime subfield."""
        ...

    def zero(self) -> T:
        """The additive identity."""
        ...

    def one(self) -> T:
        """The multiplicative identity."""
        ...

    def from_int(self, value: int) -> T:
        """Lift the integer `value` to the field."""
        ...

    def is_valid(self, x: T) -> bool:
        """Whether `x` is a canonical element of this field."""
        ...
