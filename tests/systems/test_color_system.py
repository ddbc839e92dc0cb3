import pytest
from pyrsistent import pvector

from identicon.state import Image
from identicon.systems.color import color_system
from identicon.systems.hash import hash_input


def test_pick_color_elixir() -> None:
    image = color_system(hash_input("elixir"))
    assert image.color == (116, 181, 101)


def test_pick_color_keeps_other_fields() -> None:
    before = hash_input("elixir")
    after = color_system(before)
    assert after.hash_bytes == before.hash_bytes
    assert after.grid is None and after.pixel_map is None
    # Input record is untouched
    assert before.color is None


def test_pick_color_exactly_three_bytes() -> None:
    image = color_system(Image(hash_bytes=pvector([1, 2, 3])))
    assert image.color == (1, 2, 3)


@pytest.mark.parametrize("hash_bytes", [[], [1], [1, 2]])
def test_pick_color_too_short_raises(hash_bytes: list[int]) -> None:
    with pytest.raises(ValueError):
        color_system(Image(hash_bytes=pvector(hash_bytes)))
