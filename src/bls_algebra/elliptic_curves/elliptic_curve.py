"""Short-Weierstrass elliptic curves E: y^2 = x^3 + a*x + b over a finite field."""

import logging
from collections.abc import Iterator
from functools import cached_property

from bls_algebra.elliptic_curves.ec_point import ECPoint
from bls_algebra.exceptions import InvalidArgumentError, InvalidCurveError, InvalidPointError, UnsupportedFieldError
from bls_algebra.fields.field import Field, FieldElement
from bls_algebra.util.utility_functions import factorise

_logger = logging.getLogger(__name__)


class EllipticCurve[T: FieldElement]:
    """The elliptic curve E: y^2 = x^3 + a*x + b over a field F.

    The group order, its factorisation, the largest prime factor `r` and the point at infinity are computed the
    first time they are accessed and cached for the lifetime of the curve. Counting the points is linear in the
    characteristic of the field, so it is only practical for small fields.

    Attributes:
        field (Field): The field F over which the curve is defined.
        a (FieldElement): The `a` coefficient in the Short-Weierstrass equation of the curve.
        b (FieldElement): The `b` coefficient in the Short-Weierstrass equation of the curve.
    """

    def __init__(self, field: Field[T], a: T | int, b: T | int):
        """Initialise the elliptic curve E(F).

        Args:
            field (Field): The field over which the curve is defined.
            a (FieldElement | int): The `a` coefficient of the curve. Integers are lifted to `field`.
            b (FieldElement | int): The `b` coefficient of the curve. Integers are lifted to `field`.

        Raises:
            InvalidArgumentError: If `field` or one of the coefficients is missing, or if a coefficient is not an
                element of `field`.
            InvalidCurveError: If the curve is singular.
        """
        if field is None:
            msg = "The field of the curve cannot be None"
            raise InvalidArgumentError(msg)
        self._field = field
        self._a = self._to_field_element(a, "a")
        self._b = self._to_field_element(b, "b")
        self._check_smoothness()

    @property
    def field(self) -> Field[T]:
        return self._field

    @property
    def a(self) -> T:
        return self._a

    @property
    def b(self) -> T:
        return self._b

    @property
    def discriminant(self) -> T:
        """The quantity `4*a^3 + 27*b^2`, which vanishes if and only if the curve is singular."""
        return self.field.from_int(4) * self.a.power(3) + self.field.from_int(27) * self.b.power(2)

    @cached_property
    def group_order(self) -> int:
        """The number of points of E(F), point at infinity included.

        For every `x` in F, the number of points with abscissa `x` is read off `z = x^3 + a*x + b`:
            - one point if `z == 0`,
            - two points if `z` is a quadratic residue, i.e., `z^((p-1)/2) == 1` (Euler's criterion),
            - no point otherwise.

        Raises:
            UnsupportedFieldError: If the extension degree of the field is not 1.
        """
        self._check_prime_field("Group order enumeration")

        characteristic = self.field.characteristic
        residue_exponent = (characteristic - 1) // 2
        one = self.field.one()

        _logger.debug("Counting the points of %r", self)
        total_points = 1
        for i in range(characteristic):
            rhs = self.evaluate_rhs(self.field.from_int(i))
            if rhs.is_zero:
                total_points += 1
            elif rhs.power(residue_exponent) == one:
                total_points += 2
        _logger.debug("Group order of %r: %d", self, total_points)

        return total_points

    @cached_property
    def group_order_factors(self) -> tuple[tuple[int, int], ...]:
        """The factorisation of the group order as pairs `(prime, exponent)`, in increasing order of the primes."""
        factors = tuple(factorise(self.group_order))
        _logger.debug("Factorisation of the group order of %r: %s", self, factors)
        return factors

    @cached_property
    def r(self) -> int:
        """The largest prime dividing the group order, or 1 if the group order is smaller than 2."""
        return max((prime for prime, _ in self.group_order_factors), default=1)

    @cached_property
    def infinity(self) -> ECPoint[T]:
        """The point at infinity of the curve."""
        return ECPoint(self, infinity=True)

    def evaluate_rhs(self, x: T) -> T:
        """Return `x^3 + a*x + b`."""
        return x.power(3) + self.a * x + self.b

    def is_on_curve(self, point: ECPoint[T] | None) -> bool:
        """Check whether `point` satisfies the equation of the curve.

        `None` is not on the curve, the point at infinity always is. A finite point whose coordinates are not
        elements of the field of the curve is not on the curve.
        """
        if point is None:
            return False
        if point.is_infinity:
            return True
        if not (self.field.is_valid(point.x) and self.field.is_valid(point.y)):
            return False
        return point.y * point.y == self.evaluate_rhs(point.x)

    def create_point(self, x: T | int, y: T | int, validate: bool = False) -> ECPoint[T]:
        """Create the finite point `(x, y)` on the curve.

        By default the coordinates are not checked against the curve equation: the caller is responsible for only
        building points that lie on the curve, as the group law silently returns meaningless results otherwise.

        Args:
            x (FieldElement | int): The x-coordinate of the point. Integers are lifted to the field of the curve.
            y (FieldElement | int): The y-coordinate of the point. Integers are lifted to the field of the curve.
            validate (bool): If `True`, check that `(x, y)` lies on the curve. Defaults to `False`.

        Raises:
            InvalidPointError: If `validate` is `True` and `(x, y)` is not on the curve.
        """
        point = ECPoint(self, self._to_field_element(x, "x"), self._to_field_element(y, "y"))
        if validate and not self.is_on_curve(point):
            msg = f"The point {point} is not on the curve {self}"
            raise InvalidPointError(msg)
        return point

    def points(self) -> Iterator[ECPoint[T]]:
        """Enumerate the points of E(F).

        The point at infinity comes first, followed by the finite points in increasing order of `x` and then `y`.

        Raises:
            UnsupportedFieldError: If the extension degree of the field is not 1.
        """
        self._check_prime_field("Point enumeration")

        characteristic = self.field.characteristic
        square_roots = {}
        for i in range(characteristic):
            y = self.field.from_int(i)
            square_roots.setdefault(y.power(2), []).append(y)

        yield self.infinity
        for i in range(characteristic):
            x = self.field.from_int(i)
            for y in square_roots.get(self.evaluate_rhs(x), []):
                yield ECPoint(self, x, y)

    def _to_field_element(self, value: T | int, name: str) -> T:
        if value is None:
            msg = f"The value of {name} cannot be None"
            raise InvalidArgumentError(msg)
        if isinstance(value, int):
            return self.field.from_int(value)
        if not self.field.is_valid(value):
            msg = f"The value of {name} is not an element of {self.field}: {value!r}"
            raise InvalidArgumentError(msg)
        return value

    def _check_smoothness(self):
        # In characteristic 2 the partial derivative 2y vanishes identically: y^2 = x^3 + a*x + b is always singular
        if self.field.characteristic == 2:  # noqa: PLR2004
            msg = "Short-Weierstrass curves over fields of characteristic 2 are singular"
            raise InvalidCurveError(msg)
        if self.discriminant.is_zero:
            msg = f"The curve is singular: 4*a^3 + 27*b^2 == 0 for a = {self.a}, b = {self.b}"
            raise InvalidCurveError(msg)

    def _check_prime_field(self, operation: str):
        if self.field.extension_degree != 1:
            msg = (
                f"{operation} is supported only for prime fields (extension degree 1), "
                f"got extension degree {self.field.extension_degree}"
            )
            raise UnsupportedFieldError(msg)

    def __repr__(self):
        return f"EllipticCurve(y^2 = x^3 + {self.a}*x + {self.b} over {self.field})"
