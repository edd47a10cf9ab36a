import random

import numpy as np
import pytest

from predpreysim.errors import ConfigurationError, OutOfBoundsError
from predpreysim.field import Field, FieldSnapshot
from predpreysim.location import Location


class Token:
    def __init__(self, kind):
        self.kind = kind


@pytest.mark.parametrize("depth,width", [(0, 5), (5, 0), (-1, 3)])
def test_non_positive_dimensions_raise_configuration_error(depth, width):
    with pytest.raises(ConfigurationError):
        Field(depth, width)


@pytest.mark.parametrize(
    "loc,expected",
    [
        (Location(0, 0), 3),
        (Location(0, 2), 5),
        (Location(2, 2), 8),
        (Location(4, 4), 3),
    ],
)
def test_adjacent_locations_count(loc, expected):
    field = Field(5, 5)
    neighbours = field.adjacent_locations(loc)
    assert len(neighbours) == expected
    assert loc not in neighbours
    assert len(set(neighbours)) == expected
    for n in neighbours:
        assert field.in_bounds(n)
        assert max(abs(n.row - loc.row), abs(n.col - loc.col)) == 1


def test_adjacent_locations_without_rng_is_stable():
    field = Field(5, 5)
    assert field.adjacent_locations(Location(2, 2)) == field.adjacent_locations(Location(2, 2))
    assert field.adjacent_locations(Location(2, 2))[0] == Location(1, 1)


def test_shuffled_adjacent_locations_reproducible_for_seed():
    field = Field(5, 5)
    a = field.adjacent_locations(Location(2, 2), random.Random(3))
    b = field.adjacent_locations(Location(2, 2), random.Random(3))
    assert a == b
    assert sorted(a, key=lambda l: (l.row, l.col)) == field.adjacent_locations(Location(2, 2))


def test_single_cell_field_has_no_neighbours():
    field = Field(1, 1)
    assert field.adjacent_locations(Location(0, 0), random.Random(1)) == []
    assert field.free_adjacent_location(Location(0, 0)) is None


def test_place_get_and_clear():
    field = Field(2, 3)
    token = Token("prey")
    loc = Location(1, 2)
    field.place(token, loc)
    assert field.get_object_at(loc) is token
    field.clear_location(loc)
    assert field.get_object_at(loc) is None
    field.clear_location(loc)  # idempotent
    assert field.get_object_at(loc) is None


def test_clear_empties_every_cell():
    field = Field(3, 3)
    for loc in field.locations():
        field.place(Token("prey"), loc)
    field.clear()
    assert all(field.get_object_at(loc) is None for loc in field.locations())


@pytest.mark.parametrize("loc", [Location(-1, 0), Location(0, -1), Location(3, 0), Location(0, 4)])
def test_out_of_bounds_queries_raise(loc):
    field = Field(3, 4)
    with pytest.raises(OutOfBoundsError):
        field.get_object_at(loc)
    with pytest.raises(OutOfBoundsError):
        field.place(Token("prey"), loc)
    with pytest.raises(OutOfBoundsError):
        field.adjacent_locations(loc)


def test_free_adjacent_location_skips_occupied_cells():
    field = Field(3, 3)
    center = Location(1, 1)
    for loc in field.adjacent_locations(center):
        if loc != Location(2, 0):
            field.place(Token("prey"), loc)
    assert field.free_adjacent_locations(center) == [Location(2, 0)]
    assert field.free_adjacent_location(center, random.Random(0)) == Location(2, 0)

    field.place(Token("predator"), Location(2, 0))
    assert field.free_adjacent_location(center) is None


def test_free_adjacent_location_is_first_in_neighbour_order():
    field = Field(3, 3)
    rng_a, rng_b = random.Random(11), random.Random(11)
    order = field.adjacent_locations(Location(1, 1), rng_a)
    assert field.free_adjacent_location(Location(1, 1), rng_b) == order[0]


def test_snapshot_counts_and_kinds():
    field = Field(2, 2)
    field.place(Token("prey"), Location(0, 0))
    field.place(Token("prey"), Location(1, 1))
    field.place(Token("predator"), Location(0, 1))
    snap = field.snapshot()

    assert isinstance(snap, FieldSnapshot)
    assert (snap.depth, snap.width) == (2, 2)
    assert snap.counts() == {"prey": 2, "predator": 1}
    assert snap.kind_at(Location(0, 1)) == "predator"
    assert snap.kind_at(Location(1, 0)) is None
    assert dict(snap.occupied()) == {
        Location(0, 0): "prey",
        Location(0, 1): "predator",
        Location(1, 1): "prey",
    }
    np.testing.assert_array_equal(snap.grid, np.array([[1, 2], [0, 1]], dtype=np.int8))


def test_snapshot_is_detached_from_field():
    field = Field(2, 2)
    before = field.snapshot()
    field.place(Token("prey"), Location(0, 0))
    after = field.snapshot()
    assert before != after
    assert before == Field(2, 2).snapshot()
    with pytest.raises(ValueError):
        after.grid[0, 0] = 0
