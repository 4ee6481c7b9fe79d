"""Halo-padded computational grid shared by the hydro-core fields."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def _positive_int(value: int, name: str, minimum: int) -> int:
    if isinstance(value, bool) or int(value) != value or value < minimum:
        raise ValueError(f"{name} must be an integer >= {minimum}, got {value!r}")
    return int(value)


@dataclass(frozen=True, eq=False)
class Grid:
    """Local grid of ``nx`` x ``ny`` x ``nz`` cells surrounded by ``nh`` halo cells.

    Three-dimensional arrays have shape ``(nx + 2*nh, ny + 2*nh, nz + 2*nh)``
    and are indexed ``[i, j, k]`` with ``k`` the vertical direction.
    ``z_pos`` holds the cell-centre heights, ``j33`` the vertical metric
    term of the coordinate transform and ``dz_inv`` the inverse of the
    computational vertical spacing.
    """

    nx: int
    ny: int
    nz: int
    nh: int
    z_pos: np.ndarray
    j33: np.ndarray
    dz_inv: float

    def __post_init__(self) -> None:
        _positive_int(self.nx, "nx", 1)
        _positive_int(self.ny, "ny", 1)
        _positive_int(self.nz, "nz", 1)
        _positive_int(self.nh, "nh", 0)
        for name in ("z_pos", "j33"):
            array = getattr(self, name)
            if np.shape(array) != self.shape:
                raise ValueError(f"{name} has shape {np.shape(array)}, expected {self.shape}")
        if not self.dz_inv > 0.0:
            raise ValueError(f"dz_inv must be positive, got {self.dz_inv!r}")

    @classmethod
    def uniform(cls, nx: int, ny: int, nz: int, nh: int, dz: float) -> Grid:
        """Build a flat grid with uniform vertical spacing ``dz``.

        Cell centres of the first interior level sit at ``dz/2`` above the
        ground; halo cells continue the same spacing below and above.
        """
        nx = _positive_int(nx, "nx", 1)
        ny = _positive_int(ny, "ny", 1)
        nz = _positive_int(nz, "nz", 1)
        nh = _positive_int(nh, "nh", 0)
        if not dz > 0.0:
            raise ValueError(f"dz must be positive, got {dz!r}")
        shape = (nx + 2 * nh, ny + 2 * nh, nz + 2 * nh)
        levels = (np.arange(shape[2], dtype=np.float64) - nh + 0.5) * dz
        z_pos = np.broadcast_to(levels, shape).copy()
        j33 = np.ones(shape, dtype=np.float64)
        return cls(nx=nx, ny=ny, nz=nz, nh=nh, z_pos=z_pos, j33=j33, dz_inv=1.0 / dz)

    @property
    def shape(self) -> tuple[int, int, int]:
        """Shape of a halo-padded three-dimensional field."""
        pad = 2 * self.nh
        return (self.nx + pad, self.ny + pad, self.nz + pad)

    @property
    def xy_shape(self) -> tuple[int, int]:
        """Shape of a halo-padded two-dimensional (surface) field."""
        pad = 2 * self.nh
        return (self.nx + pad, self.ny + pad)

    @property
    def k_min(self) -> int:
        """Vertical index of the lowest interior level."""
        return self.nh

    def interior(self) -> tuple[slice, slice, slice]:
        """Return the index slices selecting the non-halo cells of a field."""
        nh = self.nh
        return (
            slice(nh, nh + self.nx),
            slice(nh, nh + self.ny),
            slice(nh, nh + self.nz),
        )