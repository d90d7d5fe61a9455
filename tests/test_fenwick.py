import pytest

from contestkit.fenwick import FenwickTree

VALUES = [5, 3, 7, 9, 6, 4, 1, 2]


@pytest.fixture
def tree():
    t = FenwickTree(len(VALUES))
    for position, value in enumerate(VALUES, start=1):
        t.add(position, value)
    return t


def test_prefix_sums_match_list_sums(tree):
    for i in range(len(VALUES) + 1):
        assert tree.sum(i) == sum(VALUES[:i])


def test_sum_of_zero_is_zero(tree):
    assert tree.sum(0) == 0


def test_range_sums_match_slices(tree):
    for start in range(1, len(VALUES) + 1):
        for end in range(start, len(VALUES) + 2):
            assert tree.sum_range(start, end) == sum(VALUES[start - 1 : end - 1])


def test_add_updates_later_prefixes(tree):
    before = [tree.sum(i) for i in range(len(VALUES) + 1)]
    tree.add(3, 10)
    after = [tree.sum(i) for i in range(len(VALUES) + 1)]
    assert after[:3] == before[:3]
    assert [a - b for a, b in zip(after[3:], before[3:])] == [10] * (len(VALUES) - 2)


def test_len():
    assert len(FenwickTree(8)) == 8


def test_add_at_zero_raises():
    with pytest.raises(IndexError):
        FenwickTree(4).add(0, 1)


def test_sum_past_end_raises(tree):
    with pytest.raises(IndexError):
        tree.sum(len(VALUES) + 1)


def test_sum_range_from_zero_raises(tree):
    with pytest.raises(IndexError):
        tree.sum_range(0, 3)


def test_add_past_end_has_no_effect():
    t = FenwickTree(3)
    t.add(5, 7)
    assert t.sum(3) == 0