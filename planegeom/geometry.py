"""Points and free vectors in the plane

A point doubles as a free vector: the difference of two points is the vector between them, and
every vector operation (magnitude, direction, etc.) applies to a point taken as a vector from the
origin. Equality is tolerance-based (see PlanarAlgebra.equals), so instances aren't hashable.
"""

import itertools
import logging
import math
import operator
from typing import Any, Callable, Iterable, Iterator, Sequence, TypeVar

import attrs
from expression import Result
import numpy as np

from planegeom import (
    DIMENSIONS,
    EPSILON,
    ArrayDimensionalityError,
    DimensionalityError,
    DimensionIndexError,
    NumericCastError,
    unsafe_extract_result,
)
from planegeom.numeric_types import NumberLike, cast_to_float, is_number_like, unsafe_cast_to_float
from planegeom.robust import orient2d
from planegeom.tolerance import HALF_TURN, feq, normalize_bearing

__all__ = ["NumericPoint", "PlanarAlgebra", "Point"]

_P = TypeVar("_P", bound="PlanarAlgebra")


def _is_number_like(_, attribute: attrs.Attribute, value: Any) -> None:
    if not is_number_like(value):
        raise TypeError(f"Value for {attribute.name} isn't number-like, but {type(value).__name__}")


def _check_index(index: Any) -> int:
    i = operator.index(index)
    if i < 0 or i >= DIMENSIONS:
        raise DimensionIndexError(f"{i} is out-of-bounds [0, {DIMENSIONS}) for a point in the plane")
    return i


class PlanarAlgebra:
    """
    The operations on a point which need nothing beyond ordered arithmetic of its coordinates.

    Implementations provide attributes x and y and accept them positionally in the constructor.
    """

    __slots__ = ()

    DIMENSIONS = DIMENSIONS

    @classmethod
    def generate(cls: type[_P], generator: Callable[[int], Any]) -> _P:
        """Build a point by calling the given function once per dimension index, 0 then 1."""
        return cls(*(generator(i) for i in range(DIMENSIONS)))

    def nth(self, index: int) -> Any:
        match _check_index(index):
            case 0:
                return self.x
            case 1:
                return self.y

    val = nth

    def set_nth(self, index: int, value: Any) -> None:
        """Mutate the coordinate at the given dimension index, in place."""
        match _check_index(index):
            case 0:
                self.x = value
            case 1:
                self.y = value

    def __getitem__(self, index: int) -> Any:
        return self.nth(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set_nth(index, value)

    def __len__(self) -> int:
        return DIMENSIONS

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y

    def as_tuple(self) -> tuple[Any, Any]:
        return self.x, self.y

    def as_list(self) -> list[Any]:
        return [self.x, self.y]

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    def copy(self: _P) -> _P:
        return type(self)(self.x, self.y)

    def equals(self, other: "PlanarAlgebra", eps: float = EPSILON) -> bool:
        """
        Determine whether both coordinate differences are within the given tolerance.

        This relation isn't transitive: a and b may each be within tolerance of c without
        being within tolerance of each other.
        """
        return abs(self.x - other.x) <= eps and abs(self.y - other.y) <= eps

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlanarAlgebra):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, PlanarAlgebra):
            return NotImplemented
        return not self.equals(other)

    __hash__ = None # type: ignore[assignment]

    def add(self: _P, other: "PlanarAlgebra") -> _P:
        return type(self)(self.x + other.x, self.y + other.y)

    def sub(self: _P, other: "PlanarAlgebra") -> _P:
        """Vector from the other point to this one"""
        return type(self)(self.x - other.x, self.y - other.y)

    comp = sub

    def kproduct(self: _P, k: NumberLike) -> _P:
        return type(self)(self.x * k, self.y * k)

    def neg(self: _P) -> _P:
        return self.kproduct(-1)

    def __add__(self: _P, other: object) -> _P:
        if not isinstance(other, PlanarAlgebra):
            return NotImplemented
        return self.add(other)

    def __sub__(self: _P, other: object) -> _P:
        if not isinstance(other, PlanarAlgebra):
            return NotImplemented
        return self.sub(other)

    def __mul__(self: _P, k: object) -> _P:
        if not is_number_like(k):
            return NotImplemented
        return self.kproduct(k)

    __rmul__ = __mul__

    def __neg__(self: _P) -> _P:
        return self.neg()

    def dot_product(self, other: "PlanarAlgebra") -> Any:
        return self.x * other.x + self.y * other.y

    def cross_product(self, other: "PlanarAlgebra") -> Any:
        """
        Scalar (z-component) cross product

        Positive when turning counter-clockwise from this vector to the other, negative when
        clockwise, and zero when the two are collinear.
        """
        return self.x * other.y - self.y * other.x

    def square_magnitude(self) -> Any:
        return self.x * self.x + self.y * self.y

    square_length = square_magnitude

    def square_distance(self, other: "PlanarAlgebra") -> Any:
        return self.sub(other).square_magnitude()


@attrs.define(eq=False)
class NumericPoint(PlanarAlgebra):
    """Point with coordinates of any ordered numeric type (e.g., int or numpy integer), without trigonometry"""
    x = attrs.field(validator=_is_number_like) # type: NumberLike
    y = attrs.field(validator=_is_number_like) # type: NumberLike

    def to_point(self) -> Result["Point", str]:
        return Point.from_numbers(self.x, self.y)


@attrs.define(eq=False)
class Point(PlanarAlgebra):
    """
    Point (or free vector) in the plane with floating-point coordinates

    Coordinates are always stored as double-precision Python floats, whatever numeric type they
    were given as (e.g. numpy.float32); use NumericPoint to keep the original scalar type.
    """
    x = attrs.field(converter=unsafe_cast_to_float) # type: float
    y = attrs.field(converter=unsafe_cast_to_float) # type: float

    @classmethod
    def from_numbers(cls, x: Any, y: Any) -> Result["Point", str]:
        """Build a point through a checked cast of each coordinate, with failure as a value rather than an exception."""
        return cast_to_float(x).bind(lambda fx: cast_to_float(y).map(lambda fy: cls(fx, fy)))

    @classmethod
    def unsafe_from_numbers(cls, x: Any, y: Any) -> "Point":
        return unsafe_extract_result(cls.from_numbers(x, y).map_error(NumericCastError))

    @classmethod
    def from_array(cls, array: Sequence[NumberLike] | np.ndarray) -> "Point":
        arr = np.asarray(array)
        if arr.shape != (DIMENSIONS, ):
            raise ArrayDimensionalityError(f"Need a 1D array of {DIMENSIONS} values to make a point, but got shape {arr.shape}")
        return cls(arr[0], arr[1])

    @classmethod
    def from_tuple(cls, coordinates: tuple[NumberLike, NumberLike]) -> "Point":
        if len(coordinates) != DIMENSIONS:
            raise DimensionalityError(f"Need {DIMENSIONS} values to make a point, but got {len(coordinates)}")
        x, y = coordinates
        return cls(x, y)

    @classmethod
    def from_sequence(cls, values: Iterable[NumberLike]) -> "Point":
        """Build a point from the first two values; any further values are ignored."""
        head = list(itertools.islice(values, DIMENSIONS))
        if len(head) < DIMENSIONS:
            raise DimensionalityError(f"Need at least {DIMENSIONS} values to make a point, but got {len(head)}")
        return cls(*head)

    @classmethod
    def component(cls, magnitude: float, direction: float) -> "Point":
        """Vector of the given magnitude pointing along the given bearing (radians)"""
        return cls(magnitude * math.cos(direction), magnitude * math.sin(direction))

    @staticmethod
    def reverse_direction(direction: float) -> float:
        return direction - HALF_TURN if direction >= HALF_TURN else direction + HALF_TURN

    @staticmethod
    def deflection_angle(bearing1: float, bearing2: float) -> float:
        """
        Signed turning angle at a joint, from a line with incoming bearing bearing1 onto a line
        with outgoing bearing bearing2; zero for straight continuation.
        """
        return HALF_TURN - normalize_bearing(bearing2 - Point.reverse_direction(bearing1))

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, other: PlanarAlgebra) -> float:
        return self.sub(other).magnitude()

    def unit_vector(self, eps: float = EPSILON) -> "Point":
        mag = self.magnitude()
        if feq(mag, 0.0, eps=eps):
            logging.debug("Magnitude of %s is within tolerance (%s) of zero; dividing by the tolerance instead", self, eps)
            mag = eps
        return Point(self.x / mag, self.y / mag)

    def project(self, target: PlanarAlgebra) -> float:
        """Length of the scalar projection of this vector onto the target's direction"""
        return self.dot_product(Point(target.x, target.y).unit_vector())

    def direction(self) -> float:
        """Bearing (radians, counter-clockwise from the positive x-axis) in [0, 2*pi)"""
        return normalize_bearing(math.atan2(self.y, self.x))

    def extend(self, magnitude: float, angle: float, from_end: bool) -> "Point":
        """
        Vector of the given magnitude, at the given angle from this one taken as a directed segment.

        The angle is measured from the back bearing: this vector's own direction when measuring
        from the segment's start, or its reverse when measuring from the end.
        """
        back = self.direction()
        if from_end:
            back = Point.reverse_direction(back)
        return Point.component(magnitude, normalize_bearing(back + angle))

    def deflect(self, magnitude: float, deflection: float, from_end: bool) -> "Point":
        return self.extend(magnitude, HALF_TURN - deflection, from_end)

    def orientation2d(self, a: PlanarAlgebra, b: PlanarAlgebra) -> float:
        """
        Robust sign test of this point relative to the directed line from a to b

        Negative when (a, b, self) turns left (counter-clockwise), positive when it turns right,
        exactly zero when the three are collinear.
        """
        return orient2d(self.as_tuple(), b.as_tuple(), a.as_tuple())

    def closest_point_on_segment(self, a: PlanarAlgebra, b: PlanarAlgebra, eps: float = EPSILON) -> "Point":
        """Point of the segment [a, b] nearest to this one; a itself when the segment has no length"""
        start = Point(a.x, a.y)
        ab = Point(b.x - a.x, b.y - a.y)
        if feq(ab.x, 0.0, eps=eps) and feq(ab.y, 0.0, eps=eps):
            return start
        u = self.sub(start).dot_product(ab) / ab.square_magnitude()
        if u < 0:
            return start
        if u > 1:
            return Point(b.x, b.y)
        return start.add(ab.kproduct(u))

    def distance_to_segment(self, a: PlanarAlgebra, b: PlanarAlgebra, eps: float = EPSILON) -> float:
        return self.distance(self.closest_point_on_segment(a, b, eps=eps))

    def square_distance_to_segment(self, a: PlanarAlgebra, b: PlanarAlgebra, eps: float = EPSILON) -> float:
        return self.square_distance(self.closest_point_on_segment(a, b, eps=eps))
