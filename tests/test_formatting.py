from contestkit.formatting import display


def test_display_numbers():
    assert display([1, 2, 3, 4]) == "1 2 3 4"


def test_display_strings():
    assert display(["Hello", "World"]) == "Hello World"


def test_display_empty():
    assert display([]) == ""


def test_display_splits_back():
    values = [10, 20, 30]
    assert [int(part) for part in display(values).split(" ")] == values