import numpy as np
import pytest

from eddycore.grid import Grid


def test_uniform_shapes():
    grid = Grid.uniform(4, 3, 5, 2, 10.0)
    assert grid.shape == (8, 7, 9)
    assert grid.xy_shape == (8, 7)
    assert grid.z_pos.shape == grid.shape
    assert grid.j33.shape == grid.shape
    assert grid.k_min == 2


def test_interior_selects_non_halo_cells():
    grid = Grid.uniform(4, 3, 5, 2, 10.0)
    field = np.zeros(grid.shape)
    field[grid.interior()] = 1.0
    assert field.sum() == 4 * 3 * 5
    assert field[grid.interior()].shape == (4, 3, 5)
    assert field[0, :, :].sum() == 0.0
    assert field[:, :, -1].sum() == 0.0


def test_uniform_vertical_positions():
    dz = 10.0
    grid = Grid.uniform(2, 2, 4, 1, dz)
    column = grid.z_pos[0, 0, :]
    assert column[grid.k_min] == pytest.approx(0.5 * dz)
    assert np.allclose(np.diff(column), dz)
    assert np.all(grid.z_pos == grid.z_pos[:1, :1, :])
    assert column[0] < 0.0


def test_surface_half_height_from_metric():
    dz = 8.0
    grid = Grid.uniform(2, 2, 3, 1, dz)
    z1 = 0.5 / (grid.dz_inv * grid.j33[1, 1, grid.k_min])
    assert z1 == pytest.approx(grid.z_pos[1, 1, grid.k_min])


def test_no_halo_interior_is_whole_array():
    grid = Grid.uniform(3, 3, 3, 0, 1.0)
    field = np.arange(27.0).reshape(grid.shape)
    assert np.array_equal(field[grid.interior()], field)


@pytest.mark.parametrize(
    "args",
    [
        (0, 2, 2, 1, 1.0),
        (2, -1, 2, 1, 1.0),
        (2, 2, 2, -1, 1.0),
        (2, 2, 2, 1, 0.0),
        (2, 2, 2, 1, -3.0),
        (2.5, 2, 2, 1, 1.0),
    ],
)
def test_uniform_rejects_bad_arguments(args):
    with pytest.raises(ValueError):
        Grid.uniform(*args)


def test_rejects_mismatched_arrays():
    with pytest.raises(ValueError):
        Grid(nx=2, ny=2, nz=2, nh=1, z_pos=np.zeros((4, 4, 3)), j33=np.ones((4, 4, 4)), dz_inv=1.0)