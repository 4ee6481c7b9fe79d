"""Summary metrics of a field's state, formatted for the run log."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

# Sentinels the running extrema start from; a value must beat them to be recorded.
_MAX_START = -1.0e16
_MIN_START = 1.0e16

_HEADER_RULE = "-" * 105


@dataclass(frozen=True)
class FieldSummary:
    """Extrema, their locations, mean and corruption counts of one field.

    Locations are ``(i, j, k)`` indices. ``count`` includes non-finite cells,
    and the mean is the sum of the finite values divided by ``count``.
    """

    max_value: float
    max_loc: tuple[int, int, int]
    min_value: float
    min_loc: tuple[int, int, int]
    mean: float
    nan_count: int
    inf_count: int
    count: int

    @property
    def corrupted(self) -> bool:
        """True when the field holds any NaN or infinite value."""
        return self.nan_count > 0 or self.inf_count > 0

    def format(self, rank: int = 0, size: int = 1) -> str:
        """Return the one-line log entry of this summary for ``rank`` of ``size``."""
        if self.corrupted:
            return (
                f"Rank {rank}/{size}: ****CORRUPTED*** --- (#NaN, #Inf)/ [#cells] = "
                f"({self.nan_count}, {self.inf_count})/[{self.count}]"
            )
        mi, mj, mk = self.max_loc
        ni, nj, nk = self.min_loc
        return (
            f"Rank {rank}/{size}: {self.max_value:16.8f} \t ({mi},{mj},{mk})\t |  "
            f"{self.min_value:16.8f} \t ({ni},{nj},{nk})\t | {self.mean:16.8f} "
        )


def _location(flat_index: int, shape: tuple[int, ...]) -> tuple[int, int, int]:
    i, j, k = np.unravel_index(flat_index, shape)
    return int(i), int(j), int(k)


def summarize_field(field, rho=None, flux_conservative: bool = False) -> FieldSummary:
    """Summarize a three-dimensional field.

    When ``flux_conservative`` is true the field holds rho times a quantity,
    and the quantity itself (field times 1/rho) is summarized. Cells are
    visited in ``[i, j, k]`` order with ``k`` fastest; ties keep the first
    location found.
    """
    data = np.asarray(field, dtype=np.float64)
    if data.ndim != 3:
        raise ValueError(f"field must be three-dimensional, got shape {data.shape}")
    if data.size == 0:
        raise ValueError("cannot summarize an empty field")
    if flux_conservative:
        if rho is None:
            raise ValueError("a flux-conservative summary needs the density field")
        density = np.asarray(rho, dtype=np.float64)
        if density.shape != data.shape:
            raise ValueError(f"rho has shape {density.shape}, expected {data.shape}")
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            values = data * (1.0 / density)
    else:
        values = data

    finite = np.isfinite(values)
    nan_count = int(np.count_nonzero(np.isnan(values)))
    inf_count = int(np.count_nonzero(np.isinf(values)))

    max_value, max_loc = _MAX_START, (0, 0, 0)
    min_value, min_loc = _MIN_START, (0, 0, 0)
    total = 0.0
    if finite.any():
        high = np.where(finite, values, -np.inf)
        low = np.where(finite, values, np.inf)
        max_index = int(np.argmax(high))
        min_index = int(np.argmin(low))
        if high.flat[max_index] > _MAX_START:
            max_value = float(high.flat[max_index])
            max_loc = _location(max_index, values.shape)
        if low.flat[min_index] < _MIN_START:
            min_value = float(low.flat[min_index])
            min_loc = _location(min_index, values.shape)
        total = float(values[finite].sum())

    return FieldSummary(
        max_value=max_value,
        max_loc=max_loc,
        min_value=min_value,
        min_loc=min_loc,
        mean=total / values.size,
        nan_count=nan_count,
        inf_count=inf_count,
        count=int(values.size),
    )


def format_header() -> str:
    """Return the column header that opens a state log dump."""
    return (
        "Field \t|\t max\t     --(i,j,k)\t\t |\t  min\t     --(i,j,k)\t\t |\t mean\n"
        f"{_HEADER_RULE}\n"
        "********-----\n Model Fields -\n ********-----\n"
    )