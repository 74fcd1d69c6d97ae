"""Decorators for turning exception-raising functions into Result-returning ones"""

import functools
from typing import Callable, Optional, ParamSpec, TypeVar

from expression import Result, compose, curry_flip

__all__ = ["wrap_error_message", "wrap_exception"]

_A = TypeVar("_A")
_P = ParamSpec("_P")

_Exception = TypeVar("_Exception", bound=Exception)


@curry_flip(1)
def wrap_exception(
    fun: Callable[_P, _A],
    exc: type[_Exception] | tuple[type[_Exception], ...] = Exception,
) -> Callable[_P, Result[_A, _Exception]]:
    """
    Catch the given exception type(s) from the decorated function, returning them as Result.Error.

    Any other exception propagates. For instance, a float conversion which may overflow:

        @wrap_exception((OverflowError, TypeError, ValueError))
        def to_float(value) -> float:
            return float(value)
    """
    @functools.wraps(fun)
    def _caught(*args: _P.args, **kwargs: _P.kwargs) -> Result[_A, _Exception]:
        try:
            value = fun(*args, **kwargs)
        except exc as e:
            return Result.Error(e)
        return Result.Ok(value)

    return _caught


@curry_flip(1)
def wrap_error_message(
    fun: Callable[_P, Result[_A, _Exception]],
    context: Optional[str] = None,
) -> Callable[_P, Result[_A, str]]:
    """Render the error of the decorated function's Result as text, prefixed with the context if given."""
    def describe(e: _Exception) -> str:
        return str(e) if context is None else f"{context}: {e}"
    return compose(fun, lambda res: res.map_error(describe))
