"""Points of a Short-Weierstrass elliptic curve and the group law in affine coordinates."""

import logging
from functools import cached_property
from typing import TYPE_CHECKING, Self

from bls_algebra.exceptions import InvalidArgumentError
from bls_algebra.fields.field import FieldElement

if TYPE_CHECKING:
    from bls_algebra.elliptic_curves.elliptic_curve import EllipticCurve

_logger = logging.getLogger(__name__)


class ECPoint[T: FieldElement]:
    """A point of the elliptic curve E: y^2 = x^3 + a*x + b.

    Points are immutable: the group operations return new points. Finite points are not checked against the curve
    equation when they are built, see `EllipticCurve.create_point`.

    Attributes:
        curve (EllipticCurve): The curve the point belongs to.
        is_infinity (bool): Whether the point is the point at infinity.
        x (FieldElement | None): The x-coordinate of the point, `None` for the point at infinity.
        y (FieldElement | None): The y-coordinate of the point, `None` for the point at infinity.
    """

    def __init__(self, curve: "EllipticCurve[T]", x: T | None = None, y: T | None = None, infinity: bool = False):
        """Initialise a point of `curve`.

        Args:
            curve (EllipticCurve): The curve the point belongs to.
            x (FieldElement | None): The x-coordinate of the point. Ignored if `infinity` is `True`.
            y (FieldElement | None): The y-coordinate of the point. Ignored if `infinity` is `True`.
            infinity (bool): Whether the point is the point at infinity. Defaults to `False`.
        """
        if curve is None:
            msg = "The curve of a point cannot be None"
            raise InvalidArgumentError(msg)
        if not infinity and (x is None or y is None):
            msg = f"A finite point needs both coordinates: x = {x}, y = {y}"
            raise InvalidArgumentError(msg)

        self._curve = curve
        self._is_infinity = infinity
        self._x = None if infinity else x
        self._y = None if infinity else y

    @property
    def curve(self) -> "EllipticCurve[T]":
        return self._curve

    @property
    def is_infinity(self) -> bool:
        return self._is_infinity

    @property
    def x(self) -> T | None:
        return self._x

    @property
    def y(self) -> T | None:
        return self._y

    @cached_property
    def order(self) -> int:
        """The order of the point.

        By Lagrange's theorem the order of the point divides the group order `n`. For every prime `q` dividing `n`,
        the order is reduced to `n/q` as long as `(n/q) * self` is still the point at infinity. The reductions for
        different primes are independent, so the order in which the primes are processed does not matter.
        """
        if self.is_infinity:
            return 1

        order = self.curve.group_order
        for prime, exponent in self.curve.group_order_factors:
            for _ in range(exponent):
                candidate = order // prime
                if not self.multiply(candidate).is_infinity:
                    break
                order = candidate

        _logger.debug("Order of %r: %d", self, order)
        return order

    def negate(self) -> Self:
        """Return `-self`."""
        if self.is_infinity:
            return self.curve.infinity
        return ECPoint(self.curve, self.x, -self.y)

    def add(self, other: Self) -> Self:
        """Return `self + other`.

        The point at infinity is the identity. If the two points share the same x-coordinate, they are either
        opposite (and the sum is the point at infinity) or equal (and the sum is `self.double()`). Otherwise the sum
        is computed from the slope of the chord through the two points.
        """
        if not isinstance(other, ECPoint):
            msg = f"Expected ECPoint, got: {type(other).__name__}"
            raise TypeError(msg)
        if self.is_infinity:
            return other
        if other.is_infinity:
            return self

        if self.x == other.x:
            if self.y == -other.y:
                return self.curve.infinity
            return self.double()

        slope = (other.y - self.y) / (other.x - self.x)
        x3 = slope * slope - self.x - other.x
        y3 = slope * (self.x - x3) - self.y

        return ECPoint(self.curve, x3, y3)

    def double(self) -> Self:
        """Return `2 * self`.

        The tangent at a point with `y == 0` is vertical, so its double is the point at infinity.
        """
        if self.is_infinity or self.y.is_zero:
            return self.curve.infinity

        x_squared = self.x.power(2)
        slope = (x_squared + x_squared + x_squared + self.curve.a) / (self.y + self.y)
        x3 = slope * slope - self.x - self.x
        y3 = slope * (self.x - x3) - self.y

        return ECPoint(self.curve, x3, y3)

    def multiply(self, scalar: int) -> Self:
        """Return `scalar * self` computed with double-and-add.

        The bits of `scalar` are read from the least significant one: at each step the addend is doubled, and it is
        added to the result if the current bit is set. Negative scalars multiply the negation of `self`.
        """
        if not isinstance(scalar, int):
            msg = f"The scalar must be an integer, got: {scalar!r}"
            raise TypeError(msg)
        if scalar == 0:
            return self.curve.infinity
        if scalar < 0:
            return self.negate().multiply(-scalar)

        result = self.curve.infinity
        addend = self
        while scalar > 0:
            if scalar & 1:
                result = result.add(addend)
            addend = addend.double()
            scalar >>= 1

        return result

    def equals(self, other) -> bool:
        """Check whether `self` and `other` are the same point."""
        return isinstance(other, ECPoint) and self == other

    def __neg__(self):
        return self.negate()

    def __add__(self, other):
        if not isinstance(other, ECPoint):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, ECPoint):
            return NotImplemented
        return self.add(other.negate())

    def __mul__(self, scalar):
        if not isinstance(scalar, int):
            return NotImplemented
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, ECPoint):
            return NotImplemented
        if self.is_infinity or other.is_infinity:
            return self.is_infinity and other.is_infinity
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        if self.is_infinity:
            return 0
        return hash((self.x, self.y))

    def __repr__(self):
        if self.is_infinity:
            return "ECPoint(infinity)"
        return f"ECPoint({self.x}, {self.y})"
