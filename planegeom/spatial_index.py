"""Adapter contract through which spatial indices address points by dimension index rather than field name"""

from typing import Any, Callable, Iterable, Protocol, TypeVar, runtime_checkable

import attrs

from planegeom.geometry import Point

__all__ = ["Envelope", "SpatialPoint", "coordinates", "generate_point", "square_distance_between"]

_S = TypeVar("_S", bound="SpatialPoint")


@runtime_checkable
class SpatialPoint(Protocol):
    """A point of fixed dimension count, built and read one dimension index at a time"""

    DIMENSIONS: int

    @classmethod
    def generate(cls: type[_S], generator: Callable[[int], Any]) -> _S:
        ...

    def nth(self, index: int) -> Any:
        ...


def generate_point(point_type: type[_S], generator: Callable[[int], Any]) -> _S:
    return point_type.generate(generator)


def coordinates(point: SpatialPoint) -> tuple[Any, ...]:
    return tuple(point.nth(i) for i in range(point.DIMENSIONS))


def square_distance_between(a: SpatialPoint, b: SpatialPoint) -> Any:
    if a.DIMENSIONS != b.DIMENSIONS:
        raise ValueError(f"Dimension count mismatch: {a.DIMENSIONS} != {b.DIMENSIONS}")
    return sum((a.nth(i) - b.nth(i)) ** 2 for i in range(a.DIMENSIONS))


@attrs.define(frozen=True, kw_only=True)
class Envelope:
    """Axis-aligned bounding box of a collection of points"""
    lower = attrs.field(validator=attrs.validators.instance_of(Point)) # type: Point
    upper = attrs.field(validator=attrs.validators.instance_of(Point)) # type: Point

    @classmethod
    def from_points(cls, points: Iterable[SpatialPoint]) -> "Envelope":
        points = list(points)
        if not points:
            raise ValueError("Cannot build an envelope from no points")
        return cls(
            lower=Point.generate(lambda i: min(p.nth(i) for p in points)),
            upper=Point.generate(lambda i: max(p.nth(i) for p in points)),
        )

    def contains_point(self, point: SpatialPoint) -> bool:
        return all(self.lower.nth(i) <= point.nth(i) <= self.upper.nth(i) for i in range(Point.DIMENSIONS))

    def merged(self, other: "Envelope") -> "Envelope":
        return Envelope.from_points([self.lower, self.upper, other.lower, other.upper])

    def square_distance_to_point(self, point: SpatialPoint) -> float:
        """Squared distance from the point to the nearest point of the box; zero when inside"""
        nearest = Point.generate(lambda i: min(max(point.nth(i), self.lower.nth(i)), self.upper.nth(i)))
        return square_distance_between(nearest, point)
