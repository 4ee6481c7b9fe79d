# eddycore

`eddycore` holds building blocks for setting up a compressible large-eddy
simulation of the atmospheric boundary layer:

- `eddycore.params`: the run parameters (`HydroCoreParams`), read and
  range-checked from a mapping. A value that cannot be read or that lies out
  of range raises `ParameterError`.
- `eddycore.fields`: the layout of the prognostic fields (`FieldIndex`,
  `N_HYDRO`, `RHO_INDEX_BS`, `THETA_INDEX_BS`) and their output names
  (`field_name`, `forcing_name`, `tke_field_names`, `tau_field_names`,
  `moisture_field_names`, `moisture_tau_field_names`).
- `eddycore.grid`: a halo-padded grid (`Grid`, with `Grid.uniform` and
  `Grid.interior`).
- `eddycore.winds`: the initial geostrophic momentum (`geostrophic_momentum`)
  and optional random potential-temperature perturbations
  (`apply_theta_perturbation`).
- `eddycore.report`: a readable listing of the parameters in use
  (`describe_parameters`).
- `eddycore.statelog`: per-field state summaries for run logs
  (`summarize_field`, `FieldSummary`, `format_header`).

## Installation

```
pip install .
```

Install the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Parameters

`HydroCoreParams.from_mapping(values)` takes parameters by their
configuration names, such as `"stabilityScheme"` or `"U_g"`. Values may be
numbers or numeric strings. It handles input as follows:

- A key that is missing keeps its default.
- Keys that are not parameters are ignored.
- The values of a sub-model that is switched off are not read. For example,
  the `lsf_*` values are ignored while `lsfSelector` is 0, and the moisture
  values are ignored while `moistureSelector` is 0.

`HydroCoreParams.parameter_names()` lists every key that is understood. Note
that `hydroBCs` accepts only the value 2. When the large-scale forcing and its
subsidence terms are both switched on, `lsf_num_phi_vars` is 5; otherwise it
is 0.

`describe_parameters(params)` returns one `key = value  # description` line
per parameter, grouped under `#` section headings.

## Example

```python
import numpy as np

from eddycore.grid import Grid
from eddycore.params import HydroCoreParams
from eddycore.report import describe_parameters
from eddycore.statelog import format_header, summarize_field
from eddycore.winds import apply_theta_perturbation, geostrophic_momentum

params = HydroCoreParams.from_mapping({
    "hydroBCs": 2,
    "U_g": 10.0,
    "thetaPerturbationSwitch": 1,
    "thetaHeight": 200.0,
    "thetaAmplitude": 0.5,
})
grid = Grid.uniform(nx=16, ny=16, nz=32, nh=3, dz=20.0)

rho = np.full(grid.shape, 1.16)
rho_u, rho_v, rho_w = geostrophic_momentum(params, grid.z_pos, rho)
rho_theta = apply_theta_perturbation(
    params, grid, rho, rho * 300.0, rng=np.random.default_rng(0)
)

print(describe_parameters(params))
print(format_header(), end="")
inner = grid.interior()
summary = summarize_field(rho_theta[inner], rho[inner], flux_conservative=True)
print("theta\t" + summary.format(rank=0, size=1))
```

## Grid

`Grid.uniform(nx, ny, nz, nh, dz)` builds a flat grid. The first interior
level sits at `dz/2`, and the halo cells continue the same spacing. Fields
have shape `Grid.shape`, which is `(nx + 2*nh, ny + 2*nh, nz + 2*nh)`, and are
indexed `[i, j, k]` with `k` vertical. `Grid.interior()` returns the slices of
the non-halo cells.

## Initial winds

`geostrophic_momentum` returns `(rho*u, rho*v, rho*w)`. Each horizontal
component is constant below its reference height (`z_Ug`, `z_Vg`) and grows
linearly with `Ug_grad` or `Vg_grad` above it. The vertical momentum is zero.

`apply_theta_perturbation` returns a copy of `rho_theta`. When
`thetaPerturbationSwitch` is 1, every interior cell at or below `thetaHeight`
gets a uniform perturbation in `thetaAmplitude * [-1, 1)` added to its
potential temperature.

## Diagnostics

`summarize_field(field, rho, flux_conservative)` works on a three-dimensional
array. It returns a `FieldSummary` holding:

- the maximum and minimum values, with their `(i, j, k)` positions
- the mean, which is the sum of the finite values divided by the cell count
- the counts of NaN and infinite cells

When `flux_conservative` is set, the field is multiplied by `1/rho` first.
`FieldSummary.corrupted` is true when any cell is not finite, and
`FieldSummary.format(rank, size)` then reports the counts instead of the
values. `format_header()` returns the column header of a log dump.

## What this package does not do

This package covers parameters, field layout, the grid, initial winds and
diagnostics. It does not provide:

- physical constants or Coriolis terms
- hydrostatic base-state profiles (the density and `rho*theta` fields above
  must come from the caller)
- an initial surface-layer state
- a driver that owns the fields and steps a simulation

It also has no command-line program, and it does no file input or output.