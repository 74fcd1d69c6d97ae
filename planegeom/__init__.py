"""Points and free vectors in the plane, with numerically careful operations on them"""

from typing import *

from expression import Result, result

__all__ = [
    "DIMENSIONS",
    "EPSILON",
    "X_KEY",
    "Y_KEY",
    "ArrayDimensionalityError",
    "ConfigurationValueError",
    "DimensionIndexError",
    "DimensionalityError",
    "NumericCastError",
    "PlanegeomException",
    "SerializationError",
    "unsafe_extract_result",
    ]


# Number of coordinates of every point; index 0 is x and index 1 is y.
DIMENSIONS = 2

# Absolute tolerance for coordinate comparison, applied per component.
EPSILON = 1e-10

X_KEY = "x"
Y_KEY = "y"


_E = TypeVar('_E', bound=BaseException)
_R = TypeVar('_R', covariant=True)


def unsafe_extract_result(res: Result[_R, _E]) -> _R:
    match res:
        case result.Result(tag="ok", ok=r):
            return r
        case result.Result(tag="error", error=e):
            if isinstance(e, BaseException):
                raise e
            raise ValueError(e)
        case unexpected:
            raise TypeError(f"Unexpected result type ({type(unexpected).__name__}), not expression.Result")


class PlanegeomException(BaseException):
    "General base for exceptional situations related to the specifics of this project"
    pass


class DimensionalityError(PlanegeomException):
    """Error subtype for when one or more dimensions of an object are unexpected"""
    pass


class ArrayDimensionalityError(DimensionalityError):
    """Error subtype to represent an error in array dimensionality"""


class DimensionIndexError(DimensionalityError, IndexError):
    """Error subtype for addressing a coordinate other than 0 (x) or 1 (y); always a caller bug"""


class NumericCastError(PlanegeomException):
    "Exception subtype for when a value can't be represented as the target numeric type"
    pass


class SerializationError(PlanegeomException):
    """Exception subtype for when a wire-form record can't be decoded as a point"""
    pass


class ConfigurationValueError(PlanegeomException):
    "Exception subtype for when something's wrong with a config file value"
    pass
