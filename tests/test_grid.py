"""Tests for SpatialGrid."""

import random

import pytest

from frontier.errors import InvalidValueError, OutOfBoundsError, WindowUndefinedError
from frontier.geometry import Coord, Window
from frontier.grid import SpatialGrid, boolean_grid, char_grid


def make_letters() -> SpatialGrid[str]:
    return char_grid(["ab", "cd", "ef"])


def test_boolean_grid_counts_default_cells():
    grid = boolean_grid(["#.#", ".#.", "#.#"])

    assert len(grid) == 5
    assert grid.count(True) == 5
    # 9 window cells minus 5 stored entries
    assert grid.count(False) == 4
    assert grid.count_if(lambda c: not grid.get(c)) == 4


def test_count_only_adds_implicit_cells_for_default():
    grid = char_grid(["a.", ".a"])

    assert grid.count("a") == 2
    assert grid.count(".") == 2
    assert grid.count("z") == 0
    with pytest.raises(InvalidValueError):
        grid.count(None)


def test_get_returns_default_and_last_write():
    grid: SpatialGrid[int] = SpatialGrid(0)

    assert grid.get((4, 4)) == 0
    assert grid.get((4, 4), 7) == 7

    assert grid.set((1, 2), 5) is None
    assert grid.set((1, 2), 6) == 5
    assert grid.get(Coord(1, 2)) == 6
    # Reads far outside the window never fail
    assert grid.get((-100, 100)) == 0


def test_set_rejects_none():
    grid: SpatialGrid[int] = SpatialGrid(0)
    with pytest.raises(InvalidValueError):
        grid.set((0, 0), None)
    assert grid.window.is_empty


def test_window_tracks_live_keys_under_random_mutation():
    rng = random.Random(7)
    grid: SpatialGrid[int] = SpatialGrid(0)

    for step in range(300):
        coord = (rng.randint(-5, 5), rng.randint(-5, 5))
        if rng.random() < 0.55:
            grid.set(coord, step + 1)
        else:
            grid.unset(coord)

        keys = list(grid.keys())
        if not keys:
            assert grid.window.is_empty
            continue
        xs = [c.x for c in keys]
        ys = [c.y for c in keys]
        assert grid.window.min_coord == (min(xs), min(ys))
        assert grid.window.max_coord == (max(xs), max(ys))


def test_unset_only_shrinks_on_border_removal():
    grid: SpatialGrid[str] = SpatialGrid(".")
    for coord in [(0, 0), (5, 5), (2, 2), (3, 1)]:
        grid.set(coord, "x")

    assert grid.unset((2, 2)) == "x"
    assert grid.window.max_coord == (5, 5)

    grid.unset((5, 5))
    assert grid.window.min_coord == (0, 0)
    assert grid.window.max_coord == (3, 1)

    assert grid.unset((9, 9)) is None


def test_unset_all_resizes_once():
    grid = make_letters()
    grid.unset_all([(0, 0), (1, 0), (0, 1)])
    assert grid.window.min_coord == (0, 1)

    grid.unset_all(list(grid.keys()))
    assert grid.window.is_empty
    assert len(grid) == 0


def test_update_applies_function_to_current_value():
    grid: SpatialGrid[int] = SpatialGrid(0)

    assert grid.update((1, 1), lambda v: v + 1) is None
    assert grid.get((1, 1)) == 1
    assert grid.update((1, 1), lambda v: v + 1) == 1
    assert grid.get((1, 1)) == 2


def test_neighbours_on_dynamic_grid_are_not_filtered():
    grid: SpatialGrid[str] = SpatialGrid(".")
    grid.set((0, 0), "x")

    assert len(grid.get_neighbours((0, 0))) == 4
    assert len(grid.get_neighbours((0, 0), diagonals=True)) == 8


def test_neighbours_on_fixed_grid_stay_inside():
    grid: SpatialGrid[str] = SpatialGrid(".", width=3, height=3)

    assert grid.get_neighbours((0, 0)) == [Coord(1, 0), Coord(0, 1)]
    assert len(grid.get_neighbours((1, 1), diagonals=True)) == 8
    assert grid.get_neighbours((1, 1), predicate=lambda c: c.x == 1) == [Coord(1, 0), Coord(1, 2)]

    with pytest.raises(OutOfBoundsError):
        grid.get_neighbours((3, 0))


def test_neighbours_without_extent_fail():
    grid: SpatialGrid[str] = SpatialGrid(".")
    with pytest.raises(WindowUndefinedError):
        grid.get_neighbours((0, 0))


def test_rotate_clockwise_and_back():
    grid = make_letters()

    assert grid.rotate(1).to_rows() == ["eca", "fdb"]
    assert grid.rotate(3).to_rows() == ["bdf", "ace"]
    assert grid.rotate(-1).to_rows() == grid.rotate(3).to_rows()
    assert grid.rotate(2).to_rows() == ["fe", "dc", "ba"]

    rotated = grid
    for _ in range(4):
        rotated = rotated.rotate(1)
    assert dict(rotated.items()) == dict(grid.items())


def test_rotate_keeps_minimum_corner():
    grid: SpatialGrid[str] = SpatialGrid(".")
    grid.set((10, 10), "a")
    grid.set((11, 10), "b")

    rotated = grid.rotate(1)
    assert rotated.get((10, 10)) == "a"
    assert rotated.get((10, 11)) == "b"
    assert not rotated.fixed


def test_rotate_fixed_grid_swaps_dimensions():
    grid: SpatialGrid[str] = SpatialGrid(".", width=3, height=2)
    grid.set((0, 0), "x")

    rotated = grid.rotate(1)
    assert rotated.fixed
    assert rotated.size == (2, 3)
    assert rotated.get((1, 0)) == "x"


def test_flip_both_axes():
    grid = char_grid(["ab", "cd"])

    assert grid.flip(horizontal=True).to_rows() == ["ba", "dc"]
    assert grid.flip(horizontal=False).to_rows() == ["cd", "ab"]
    assert dict(grid.flip(True).flip(True).items()) == dict(grid.items())
    assert dict(grid.flip(False).flip(False).items()) == dict(grid.items())


def test_extract_relative_from_fixed_grid():
    grid: SpatialGrid[int] = SpatialGrid(0, width=4, height=4)
    grid.set((1, 1), 1)
    grid.set((2, 2), 2)
    grid.set((3, 3), 3)

    part = grid.extract((1, 1), (2, 2), relative=True)
    assert part.fixed
    assert part.window.min_coord == (0, 0)
    assert part.window.max_coord == (1, 1)
    assert dict(part.items()) == {Coord(0, 0): 1, Coord(1, 1): 2}

    absolute = grid.extract((1, 1), (2, 2))
    assert dict(absolute.items()) == {Coord(1, 1): 1, Coord(2, 2): 2}


def test_extract_then_insert_reproduces_rectangle():
    grid: SpatialGrid[str] = SpatialGrid(".", width=4, height=4)
    grid.set((1, 1), "a")
    grid.set((2, 3), "b")
    grid.set((0, 0), "c")

    target: SpatialGrid[str] = SpatialGrid(".", width=4, height=4)
    target.set_region(Window.of_size(4, 4), "z")

    part = grid.extract((1, 1), (2, 3), relative=True)
    target.insert((1, 1), part)

    for coord in Window.between((1, 1), (2, 3)):
        assert target.get(coord) == grid.get(coord)
        assert target.has_value(coord) == grid.has_value(coord)
    # Outside the rectangle nothing changed
    assert target.get((0, 0)) == "z"
    assert target.get((3, 3)) == "z"


@pytest.mark.parametrize("relative", [True, False])
def test_extract_then_insert_on_dynamic_grid(relative):
    grid: SpatialGrid[str] = SpatialGrid(".")
    grid.set((0, 0), "c")
    grid.set((2, 2), "a")

    target: SpatialGrid[str] = SpatialGrid(".")
    target.set_region(Window.between((0, 0), (4, 4)), "z")

    # The rectangle's top-left cell (1, 1) holds nothing
    part = grid.extract((1, 1), (3, 3), relative=relative)
    assert not part.fixed
    assert part.size == (3, 3)
    target.insert((1, 1), part)

    for coord in Window.between((1, 1), (3, 3)):
        assert target.get(coord) == grid.get(coord)
        assert target.has_value(coord) == grid.has_value(coord)
    assert target.get((0, 0)) == "z"
    assert target.get((4, 4)) == "z"


def test_insert_overwrites_including_absent_cells():
    destination: SpatialGrid[str] = SpatialGrid(".")
    for coord in [(0, 0), (1, 0), (5, 5)]:
        destination.set(coord, "q")

    destination.insert((0, 0), char_grid(["a.", ".b"]))

    assert destination.get((0, 0)) == "a"
    assert not destination.has_value((1, 0))
    assert destination.get((1, 1)) == "b"
    assert destination.get((5, 5)) == "q"


def test_insert_columns_and_rows_shift_entries():
    grid = char_grid(["abc"])
    grid.insert_columns(1, 2)
    assert grid.to_rows() == ["a..bc"]

    # Shifting every entry must not clobber cells that still have to move
    grid = char_grid(["abc"])
    grid.insert_columns(0, 1)
    assert dict(grid.items()) == {Coord(1, 0): "a", Coord(2, 0): "b", Coord(3, 0): "c"}

    grid = char_grid(["a", "b"])
    grid.insert_rows(1, 1)
    assert grid.to_rows() == ["a", ".", "b"]


def test_fix_and_unfix_window():
    grid: SpatialGrid[int] = SpatialGrid(0)
    with pytest.raises(WindowUndefinedError):
        grid.fix_window()

    grid.set((1, 1), 1)
    grid.set((2, 2), 2)
    grid.fix_window()
    assert grid.fixed

    grid.set((5, 5), 5)
    assert grid.window.max_coord == (2, 2)

    grid.unfix_window()
    assert not grid.fixed
    assert grid.window.min_coord == (1, 1)
    assert grid.window.max_coord == (5, 5)


def test_rows_out_with_special_cells():
    grid = char_grid(["ab", ".c"])

    assert grid.to_rows() == ["ab", ".c"]
    assert grid.to_rows(special={(0, 0): "@"}) == ["@b", ".c"]
    assert str(grid) == "ab\n.c"
    assert SpatialGrid(".").to_rows() == []


def test_lookup_helpers():
    grid = char_grid([".a", "a."])

    assert sorted(grid.find("a")) == [Coord(0, 1), Coord(1, 0)]
    assert grid.relative((1, 1)) == (1, 1)
    assert grid.contains((1, 1))
    assert list(grid) == [(0, 0), (1, 0), (0, 1), (1, 1)]

    copy = grid.copy()
    copy.set((0, 0), "z")
    assert not grid.has_value((0, 0))
