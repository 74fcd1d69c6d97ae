"""Tests for the Result-returning decorators"""

from expression import Result
import pytest

from planegeom.utilities import wrap_error_message, wrap_exception


@wrap_exception(ZeroDivisionError)
def _inverse(x: float) -> float:
    return 1 / x


@wrap_error_message("Cannot invert")
@wrap_exception(ZeroDivisionError)
def _described_inverse(x: float) -> float:
    return 1 / x


def test_caught_exception_becomes_error():
    assert _inverse(4) == Result.Ok(0.25)
    match _inverse(0):
        case Result(tag="error", error=err):
            assert isinstance(err, ZeroDivisionError)
        case unexpected:
            pytest.fail(f"Expected error result but got {unexpected}")


def test_other_exceptions_propagate():
    with pytest.raises(TypeError):
        _inverse("4")


def test_error_message_carries_context():
    assert _described_inverse(2) == Result.Ok(0.5)
    match _described_inverse(0):
        case Result(tag="error", error=msg):
            assert msg.startswith("Cannot invert: ")
        case unexpected:
            pytest.fail(f"Expected error result but got {unexpected}")
