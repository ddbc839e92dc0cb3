import pytest
from pyrsistent import pvector

from identicon.components import Cell
from identicon.state import Image
from identicon.systems.filter import filter_odd_squares
from identicon.systems.grid import grid_system
from identicon.systems.hash import hash_input


def test_filter_odd_squares_elixir() -> None:
    image = filter_odd_squares(grid_system(hash_input("elixir")))
    assert image.grid is not None
    assert [cell.index for cell in image.grid] == [
        0, 4, 5, 6, 8, 9, 10, 11, 13, 14, 15, 19, 20, 22, 24
    ]  # fmt: skip


@pytest.mark.parametrize("text", ["", "elixir", "identicon", "python"])
def test_filter_polarity(text: str) -> None:
    full = grid_system(hash_input(text))
    filtered = filter_odd_squares(full)
    assert full.grid is not None and filtered.grid is not None
    kept = set(filtered.grid)
    assert all(cell.value % 2 == 0 for cell in kept)
    assert all(cell.value % 2 == 1 for cell in full.grid if cell not in kept)


def test_filter_preserves_order() -> None:
    full = grid_system(hash_input("identicon"))
    filtered = filter_odd_squares(full)
    assert filtered.grid is not None
    indices = [cell.index for cell in filtered.grid]
    assert indices == sorted(indices)


def test_filter_all_odd_is_empty() -> None:
    grid = pvector(Cell(value, index) for index, value in enumerate([1, 3, 5, 3, 1]))
    image = filter_odd_squares(Image(grid=grid))
    assert image.grid == pvector()


def test_filter_all_even_keeps_everything() -> None:
    grid = pvector(Cell(value, index) for index, value in enumerate([0, 2, 4, 2, 0]))
    image = filter_odd_squares(Image(grid=grid))
    assert image.grid == grid


def test_filter_requires_grid() -> None:
    with pytest.raises(ValueError):
        filter_odd_squares(hash_input("elixir"))
