"""Tests for the bounding Window."""

import pytest

from frontier.errors import WindowUndefinedError
from frontier.geometry import Coord, Window


def test_empty_window_has_no_extent():
    window = Window()

    assert window.is_empty
    assert window.size is None
    assert window.count() == 0
    assert list(window) == []
    assert str(window) == "(empty)"

    with pytest.raises(WindowUndefinedError):
        window.contains((0, 0))
    with pytest.raises(WindowUndefinedError):
        window.on_border((0, 0))
    with pytest.raises(WindowUndefinedError):
        _ = window.min_coord


def test_include_grows_dynamic_window():
    window = Window()
    window.include((2, 3))
    assert window.min_coord == (2, 3)
    assert window.max_coord == (2, 3)

    window.include((-1, 5))
    assert window.min_coord == Coord(-1, 3)
    assert window.max_coord == Coord(2, 5)
    assert window.size == Coord(4, 3)
    assert window.count() == 12
    assert str(window) == "(-1,3)-(2,5)"


def test_fixed_window_ignores_include_and_resize():
    window = Window.of_size(3, 2)
    assert window.fixed

    window.include((10, 10))
    window.resize([])
    window.clear()

    assert window.min_coord == (0, 0)
    assert window.max_coord == (2, 1)
    assert window.count() == 6


def test_resize_recomputes_from_scratch():
    window = Window()
    window.include((5, 5))
    window.include((9, 9))

    # Negative coordinates must be handled as well
    window.resize([(-3, -2), (1, 4)])
    assert window.min_coord == (-3, -2)
    assert window.max_coord == (1, 4)

    window.resize([])
    assert window.is_empty


def test_iteration_is_row_major_and_restartable():
    window = Window.between((0, 0), (1, 1))
    expected = [(0, 0), (1, 0), (0, 1), (1, 1)]

    assert list(window) == expected
    # A second pass yields the same sequence
    assert list(window) == expected
    assert len(window) == 4


def test_between_normalises_corners():
    window = Window.between((3, 0), (0, 2))
    assert window.min_coord == (0, 0)
    assert window.max_coord == (3, 2)


def test_contains_and_on_border():
    window = Window.between((0, 0), (2, 2))

    assert window.contains((1, 1))
    assert not window.contains((3, 1))
    assert not window.on_border((1, 1))
    assert window.on_border((0, 1))
    assert window.on_border((2, 2))


def test_invalid_windows_are_rejected():
    with pytest.raises(ValueError):
        Window.of_size(0, 3)
    with pytest.raises(ValueError):
        Window(min_coord=(0, 0))


def test_copy_is_independent():
    window = Window()
    window.include((1, 1))
    clone = window.copy()
    clone.include((4, 4))

    assert window.max_coord == (1, 1)
    assert clone.max_coord == (4, 4)
    assert clone != window
