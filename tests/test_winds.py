import numpy as np
import pytest

from eddycore.grid import Grid
from eddycore.params import HydroCoreParams
from eddycore.winds import apply_theta_perturbation, geostrophic_momentum


@pytest.fixture
def grid():
    return Grid.uniform(3, 3, 6, 1, 10.0)


WIND_PARAMS = HydroCoreParams(
    u_g=5.0, v_g=-3.0, z_ug=25.0, z_vg=45.0, ug_grad=0.01, vg_grad=0.02
)


def test_momentum_below_reference_heights(grid):
    rho = np.full(grid.shape, 1.2)
    u, v, w = geostrophic_momentum(WIND_PARAMS, grid.z_pos, rho)
    below_u = grid.z_pos < WIND_PARAMS.z_ug
    below_v = grid.z_pos < WIND_PARAMS.z_vg
    np.testing.assert_allclose(u[below_u] / rho[below_u], 5.0)
    np.testing.assert_allclose(v[below_v] / rho[below_v], -3.0)
    assert not w.any()


def test_momentum_grows_linearly_above_reference(grid):
    rho = np.ones(grid.shape)
    u, v, _ = geostrophic_momentum(WIND_PARAMS, grid.z_pos, rho)
    above = grid.z_pos >= WIND_PARAMS.z_ug
    z = grid.z_pos[above]
    np.testing.assert_allclose(u[above] - 5.0, WIND_PARAMS.ug_grad * (z - WIND_PARAMS.z_ug))
    column = u[1, 1, :]
    assert np.all(np.diff(column) >= 0.0)
    assert column[-1] > column[0]


def test_momentum_shape_mismatch(grid):
    with pytest.raises(ValueError):
        geostrophic_momentum(WIND_PARAMS, grid.z_pos, np.ones((2, 2, 2)))


def _fields(grid):
    rho = np.full(grid.shape, 1.2)
    return rho, rho * 300.0


def test_perturbation_off_returns_copy(grid):
    rho, rho_theta = _fields(grid)
    out = apply_theta_perturbation(HydroCoreParams(), grid, rho, rho_theta)
    np.testing.assert_array_equal(out, rho_theta)
    out[0, 0, 0] = -1.0
    assert rho_theta[0, 0, 0] == pytest.approx(360.0)


def test_perturbation_bounded_and_localised(grid):
    params = HydroCoreParams(theta_perturbation_switch=1, theta_height=25.0, theta_amplitude=0.5)
    rho, rho_theta = _fields(grid)
    original = rho_theta.copy()
    out = apply_theta_perturbation(params, grid, rho, rho_theta, np.random.default_rng(7))
    np.testing.assert_array_equal(rho_theta, original)

    inner = grid.interior()
    perturbed = np.zeros(grid.shape, dtype=bool)
    perturbed[inner] = grid.z_pos[inner] <= params.theta_height
    delta = out / rho - 300.0
    assert np.all(np.abs(delta[perturbed]) <= params.theta_amplitude)
    assert np.any(delta[perturbed] != 0.0)
    np.testing.assert_array_equal(out[~perturbed], original[~perturbed])


def test_perturbation_reproducible_with_seed(grid):
    params = HydroCoreParams(theta_perturbation_switch=1, theta_height=100.0, theta_amplitude=1.0)
    rho, rho_theta = _fields(grid)
    a = apply_theta_perturbation(params, grid, rho, rho_theta, np.random.default_rng(3))
    b = apply_theta_perturbation(params, grid, rho, rho_theta, np.random.default_rng(3))
    np.testing.assert_array_equal(a, b)


def test_perturbation_shape_mismatch(grid):
    params = HydroCoreParams(theta_perturbation_switch=1)
    with pytest.raises(ValueError):
        apply_theta_perturbation(params, grid, np.ones((2, 2, 2)), np.ones(grid.shape))