import pytest

from contestkit.run_length import run_length_decoding, run_length_encoding


@pytest.mark.parametrize(
    "text",
    ["aabbbbbccddeeeeeff", "a", "abcd", "aaaaaaaaaaaaaaaaaaaaaa"],
)
def test_round_trip(text):
    assert run_length_decoding(run_length_encoding(text)) == text


def test_empty_string():
    assert run_length_encoding("") == []
    assert run_length_decoding([]) == ""


def test_runs_are_maximal():
    pairs = run_length_encoding("aabbbbbccddeeeeeff")
    assert all(a[0] != b[0] for a, b in zip(pairs, pairs[1:]))
    assert sum(count for _, count in pairs) == len("aabbbbbccddeeeeeff")


def test_distinct_characters_give_unit_runs():
    assert run_length_encoding("abcd") == [("a", 1), ("b", 1), ("c", 1), ("d", 1)]