import pytest

from contestkit.binary_search import lower_bound, upper_bound


@pytest.mark.parametrize(
    ("data", "key", "expected"),
    [
        ([1, 2, 3, 4, 5, 6, 7, 8], 3, 2),
        ([1, 2, 4, 5, 6, 7, 8], 3, 2),
        ([1, 2, 3, 3, 3, 4, 5, 6, 7, 8], 3, 2),
        ([1, 2, 3, 4, 5, 6, 7, 8], 9, 8),
        ([1, 2, 3, 4, 5, 6, 7, 8], 0, 0),
    ],
)
def test_lower_bound(data, key, expected):
    assert lower_bound(data, key) == expected


@pytest.mark.parametrize(
    ("data", "key", "expected"),
    [
        ([1, 2, 3, 4, 5, 6, 7, 8], 3, 3),
        ([1, 2, 4, 5, 6, 7, 8], 3, 2),
        ([1, 2, 3, 3, 3, 4, 5, 6, 7, 8], 3, 5),
        ([1, 2, 3, 4, 5, 6, 7, 8], 9, 8),
        ([1, 2, 3, 4, 5, 6, 7, 8], 0, 0),
    ],
)
def test_upper_bound(data, key, expected):
    assert upper_bound(data, key) == expected


def test_empty_sequence():
    assert lower_bound([], 5) == 0
    assert upper_bound([], 5) == 0


def test_bounds_enclose_equal_run():
    data = [1, 2, 3, 3, 3, 4, 5, 6, 7, 8]
    lo, hi = lower_bound(data, 3), upper_bound(data, 3)
    assert data[lo:hi] == [3, 3, 3]