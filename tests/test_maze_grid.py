import pytest

from mazegen.errors import ConfigError
from mazegen.maze import DOWN, LEFT, RIGHT, UP, Grid


def test_cells_carry_their_array_position():
    g = Grid(4, 3)
    for x in range(4):
        for y in range(3):
            c = g.cells[x][y]
            assert (c.x, c.y) == (x, y)
            assert not (c.top_open or c.left_open or c.visited)
    assert g.cell_count == 12


@pytest.mark.parametrize("w,h", [(0, 5), (5, 0), (0, 0), (-1, 3)])
def test_zero_dimension_raises_config_error(w, h):
    with pytest.raises(ConfigError):
        Grid(w, h)


def test_neighbor_lookup_stops_at_edges():
    g = Grid(3, 2)
    assert g.neighbor((0, 0), LEFT) is None
    assert g.neighbor((0, 0), UP) is None
    assert g.neighbor((0, 0), RIGHT) == (1, 0)
    assert g.neighbor((0, 0), DOWN) == (0, 1)
    assert g.neighbor((2, 1), RIGHT) is None
    assert g.neighbor((2, 1), DOWN) is None
    assert g.neighbor((2, 1), LEFT) == (1, 1)
    assert g.neighbor((2, 1), UP) == (2, 0)


def test_single_cell_grid_has_no_neighbors():
    g = Grid(1, 1)
    assert all(g.neighbor((0, 0), d) is None for d in (LEFT, UP, RIGHT, DOWN))


def test_open_wall_sets_flag_on_owning_cell():
    g = Grid(3, 3)
    g.open_wall((1, 0), (2, 0))
    assert g.cells[2][0].left_open
    assert not g.cells[1][0].left_open
    g.open_wall((1, 2), (1, 1))
    assert g.cells[1][2].top_open
    assert not g.cells[1][1].top_open
    assert g.is_open((2, 0), (1, 0))
    assert g.is_open((1, 1), (1, 2))
    assert not g.is_open((0, 0), (0, 1))


@pytest.mark.parametrize("a,b", [((0, 0), (1, 1)), ((0, 0), (0, 2)), ((1, 1), (1, 1))])
def test_open_wall_rejects_non_adjacent_cells(a, b):
    g = Grid(3, 3)
    with pytest.raises(ValueError):
        g.open_wall(a, b)


def test_clear_cell_opens_both_owned_walls():
    g = Grid(3, 3)
    g.clear_cell((1, 1))
    c = g[(1, 1)]
    assert c.top_open and c.left_open
    assert not c.visited
