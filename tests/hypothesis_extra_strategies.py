"""Extra hypothesis strategies for generation of examples of custom types"""

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from planegeom import unsafe_extract_result
from planegeom.geometry import NumericPoint, Point

# Keep coordinates moderate so that squares and products stay far from overflow.
COORDINATE_BOUND = 1e6


def gen_coordinate(bound: float = COORDINATE_BOUND) -> SearchStrategy[float]:
    return st.floats(min_value=-bound, max_value=bound, allow_nan=False, allow_infinity=False)


def gen_point(bound: float = COORDINATE_BOUND) -> SearchStrategy[Point]:
    return st.builds(Point, gen_coordinate(bound), gen_coordinate(bound))


def gen_nonzero_point(min_magnitude: float = 1e-3, bound: float = COORDINATE_BOUND) -> SearchStrategy[Point]:
    return gen_point(bound).filter(lambda p: p.magnitude() >= min_magnitude)


def gen_integer_point(max_abs: int = 1000) -> SearchStrategy[NumericPoint]:
    gen_int = st.integers(min_value=-max_abs, max_value=max_abs)
    return st.builds(NumericPoint, gen_int, gen_int)


def gen_bearing() -> SearchStrategy[float]:
    return st.floats(min_value=0, max_value=6.283185307179586, exclude_max=True)


@st.composite
def gen_exactly_collinear_triple(draw, max_abs: int = 1000):
    """Integer-valued points a, b, and c = a + k * (b - a), all exactly representable as floats"""
    a = draw(gen_integer_point(max_abs))
    b = draw(gen_integer_point(max_abs))
    k = draw(st.integers(min_value=-10, max_value=10))
    c = a.add(b.sub(a).kproduct(k))
    return tuple(unsafe_extract_result(p.to_point()) for p in (a, b, c))
