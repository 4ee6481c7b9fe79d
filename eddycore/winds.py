"""Initial geostrophic momentum and optional potential-temperature perturbations."""

from __future__ import annotations

import numpy as np

from eddycore.grid import Grid
from eddycore.params import HydroCoreParams


def _linear_above(base: float, gradient: float, height: float, z: np.ndarray) -> np.ndarray:
    return np.where(z < height, base, base + gradient * (z - height))


def geostrophic_momentum(
    params: HydroCoreParams, z_pos, rho_base
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return the (rho*u, rho*v, rho*w) momentum of the geostrophic wind.

    Each wind component is constant below its reference height and grows
    linearly with its gradient above it; vertical momentum is zero.
    """
    z = np.asarray(z_pos, dtype=np.float64)
    rho = np.asarray(rho_base, dtype=np.float64)
    if z.shape != rho.shape:
        raise ValueError(f"z_pos has shape {z.shape} but rho_base has shape {rho.shape}")
    u = _linear_above(params.u_g, params.ug_grad, params.z_ug, z) * rho
    v = _linear_above(params.v_g, params.vg_grad, params.z_vg, z) * rho
    w = np.zeros_like(rho)
    return u, v, w


def apply_theta_perturbation(
    params: HydroCoreParams,
    grid: Grid,
    rho,
    rho_theta,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Return ``rho_theta`` with random potential-temperature perturbations added.

    When ``theta_perturbation_switch`` is 1, every interior cell at or below
    ``theta_height`` gets a uniform perturbation in
    ``theta_amplitude * [-1, 1)`` added to its potential temperature. Halo
    cells and cells above the height are left unchanged. The input array is
    not modified.
    """
    rho = np.asarray(rho, dtype=np.float64)
    result = np.array(rho_theta, dtype=np.float64)
    for name, array in (("rho", rho), ("rho_theta", result)):
        if array.shape != grid.shape:
            raise ValueError(f"{name} has shape {array.shape}, expected {grid.shape}")
    if params.theta_perturbation_switch != 1:
        return result

    rng = np.random.default_rng() if rng is None else rng
    inner = grid.interior()
    rho_in = rho[inner]
    field = result[inner]
    noise = 2.0 * params.theta_amplitude * (rng.random(field.shape) - 0.5)
    mask = grid.z_pos[inner] <= params.theta_height
    field[mask] = (field[mask] / rho_in[mask] + noise[mask]) * rho_in[mask]
    result[inner] = field
    return result