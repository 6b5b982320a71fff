import pytest

from booky.selection import SelectionCursor


@pytest.mark.parametrize("length", [1, 2, 3, 7])
def test_next_cycles_back(length):
    for start in range(length):
        cursor = SelectionCursor(start)
        for _ in range(length):
            cursor.select_next(length)
        assert cursor.selected == start


@pytest.mark.parametrize("length", [1, 2, 3, 7])
def test_previous_cycles_back(length):
    for start in range(length):
        cursor = SelectionCursor(start)
        for _ in range(length):
            cursor.select_previous(length)
        assert cursor.selected == start


def test_empty_list_keeps_nothing_selected():
    cursor = SelectionCursor()
    cursor.select_next(0)
    assert cursor.selected is None
    cursor.select_previous(0)
    assert cursor.selected is None


def test_first_move_selects_top():
    cursor = SelectionCursor()
    cursor.select_next(3)
    assert cursor.selected == 0
    cursor = SelectionCursor()
    cursor.select_previous(3)
    assert cursor.selected == 0


def test_wraparound():
    cursor = SelectionCursor(2)
    cursor.select_next(3)
    assert cursor.selected == 0
    cursor.select_previous(3)
    assert cursor.selected == 2


@pytest.mark.parametrize("removed, length, expected", [
    (0, 2, 0),
    (0, 0, None),
    (1, 2, 0),
    (2, 2, 1),
    (3, 3, 2),
])
def test_reclamp_after_removal(removed, length, expected):
    cursor = SelectionCursor(removed)
    cursor.reclamp_after_removal(removed, length)
    assert cursor.selected == expected


def test_clamp():
    cursor = SelectionCursor(5)
    cursor.clamp(3)
    assert cursor.selected == 2
    cursor.clamp(0)
    assert cursor.selected is None
    cursor.clamp(4)
    assert cursor.selected == 0
