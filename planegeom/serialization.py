"""Wire forms of a point

A point is written as a record with fields x and y, both as floats, so integer-valued coordinates
still carry a fractional part, e.g. {"x":1.0,"y":2.0}. A point may be read from that record form or
from a plain 2-element sequence (e.g. [1.0,2.0]); both forms decode to the same value.

JSON output is strict: NaN and infinite coordinates are rejected rather than written as the
nonstandard NaN and Infinity tokens. Reading accepts those tokens, as the json module does.
"""

import json
import logging
from typing import Any, Mapping

from expression import Result

from planegeom import X_KEY, Y_KEY, SerializationError, unsafe_extract_result
from planegeom.geometry import PlanarAlgebra, Point
from planegeom.utilities import wrap_error_message, wrap_exception

__all__ = [
    "from_json",
    "from_record",
    "to_json",
    "to_record",
    "unsafe_from_json",
    "unsafe_from_record",
    ]


def to_record(point: PlanarAlgebra) -> Mapping[str, float]:
    return {X_KEY: float(point.x), Y_KEY: float(point.y)}


def from_record(obj: Any) -> Result[Point, str]:
    """Decode a point from either the record form or the 2-element sequence form."""
    match obj:
        case {"x": x, "y": y}:
            return Point.from_numbers(x, y)
        case [x, y]:
            return Point.from_numbers(x, y)
        case _:
            return Result.Error(
                f"Need a mapping with keys '{X_KEY}' and '{Y_KEY}' or a sequence of 2 numbers, but got {type(obj).__name__}: {obj!r}"
            )


def unsafe_from_record(obj: Any) -> Point:
    return unsafe_extract_result(from_record(obj).map_error(SerializationError))


def to_json(point: PlanarAlgebra) -> str:
    """Compact JSON text of the record form; a non-finite coordinate has no standard JSON form, so it's an error."""
    try:
        return json.dumps(to_record(point), separators=(",", ":"), allow_nan=False)
    except ValueError as e:
        raise SerializationError(f"Cannot write point with non-finite coordinate as JSON: {point}") from e


@wrap_error_message("Cannot parse JSON")
@wrap_exception((json.JSONDecodeError, UnicodeDecodeError, TypeError))
def _parse_json(text: str | bytes) -> Any:
    return json.loads(text)


def from_json(text: str | bytes) -> Result[Point, str]:
    parsed = _parse_json(text).bind(from_record)
    if parsed.is_error():
        logging.debug("Failed to decode point from JSON (%s): %s", text, parsed.error)
    return parsed


def unsafe_from_json(text: str | bytes) -> Point:
    return unsafe_extract_result(from_json(text).map_error(SerializationError))
