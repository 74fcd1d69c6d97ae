"""Groupings of numeric types and tools for working with them"""

import logging
import numbers
from typing import *

from expression import Result
import numpy as np

from planegeom import NumericCastError, unsafe_extract_result
from planegeom.utilities import wrap_error_message, wrap_exception

__all__ = [
    "FloatLike",
    "IntegerLike",
    "NumberLike",
    "cast_to_float",
    "is_number_like",
    "unsafe_cast_to_float",
    ]


FloatLike = Union[float, np.float16, np.float32, np.float64]
IntegerLike = Union[int, np.int8, np.uint8, np.int16, np.uint16, np.int32, np.uint32, np.int64, np.uint64]
NumberLike = Union[IntegerLike, FloatLike]


def is_number_like(obj: Any) -> bool:
    """Determine whether the given object is an ordered (real) number, excluding Booleans."""
    # Boolean is a subtype of int, and numpy's Boolean registers as neither int nor Real.
    if isinstance(obj, (bool, np.bool_)):
        return False
    return isinstance(obj, numbers.Real)


@wrap_error_message("Cannot represent value as float")
@wrap_exception((OverflowError, TypeError, ValueError))
def _float_of(value: NumberLike) -> float:
    return float(value)


def cast_to_float(value: Any) -> Result[float, str]:
    """Checked cast of a number-like value to float, failing for non-numbers and unrepresentable values."""
    if not is_number_like(value):
        logging.debug("Refusing float cast of non-number-like value of type %s", type(value).__name__)
        return Result.Error(f"Value ({value!r}) (type={type(value).__name__}) is not number-like!")
    return _float_of(value)


def unsafe_cast_to_float(value: Any) -> float:
    return unsafe_extract_result(cast_to_float(value).map_error(NumericCastError))
