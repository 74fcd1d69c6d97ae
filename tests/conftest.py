"""Test fixtures"""

import pytest

from planegeom.geometry import Point


@pytest.fixture
def segment_start():
    return Point(16.82295, 10.44635)


@pytest.fixture
def segment_end():
    return Point(28.99656, 15.76452)
