import pytest

from core.utils import EPSILON, clamp, float_is_equal, is_within_range


@pytest.mark.parametrize("a, b, expected", [
    (1.0, 1.0, True),
    (1.0, 1.000009, True),
    (1.000009, 1.0, True),
    (1.0, 1.00002, False),
    (-3.5, -3.50002, False),
])
def test_float_is_equal(a, b, expected):
    assert float_is_equal(a, b) is expected


def test_float_is_equal_is_symmetric_at_threshold():
    assert not float_is_equal(0.0, EPSILON * 2)
    assert not float_is_equal(EPSILON * 2, 0.0)


@pytest.mark.parametrize("value, expected", [(-1, 0), (0, 0), (5, 5), (10, 10), (11, 10)])
def test_clamp(value, expected):
    assert clamp(0, 10, value) == expected


@pytest.mark.parametrize("value, expected", [(-1, False), (0, True), (7, True), (10, True), (11, False)])
def test_is_within_range(value, expected):
    assert is_within_range(0, 10, value) is expected
