"""Names and indices of the prognostic and diagnostic hydro-core fields."""

from __future__ import annotations

from enum import IntEnum


class FieldIndex(IntEnum):
    """Position of each prognostic field in the hydro-core field block."""

    RHO = 0
    U = 1
    V = 2
    W = 3
    THETA = 4


#: Index of the density base state in the base-state block.
RHO_INDEX_BS = 0
#: Index of the (rho*theta) base state in the base-state block.
THETA_INDEX_BS = 1

#: Number of prognostic fields carried by the hydro core.
N_HYDRO = len(FieldIndex)

_FIELD_NAMES = ("rho", "u", "v", "w", "theta", "phi")

# Order of the components in the sub-grid stress block.
_TAU_NAMES = (
    "Tau11",
    "Tau21",
    "Tau31",
    "Tau32",
    "Tau22",
    "Tau33",
    "TauTH1",
    "TauTH2",
    "TauTH3",
)

_MOISTURE_NAMES = ("qv", "ql", "qr")
_MOISTURE_TAU_BASES = ("TauQv", "TauQl")


def field_name(index: int) -> str:
    """Return the output name of the field at ``index`` in the field block."""
    if isinstance(index, bool) or not 0 <= int(index) < len(_FIELD_NAMES) or int(index) != index:
        raise ValueError(f"no hydro-core field at index {index!r}")
    return _FIELD_NAMES[int(index)]


def forcing_name(index: int) -> str:
    """Return the output name of the right-hand-side forcing of a field."""
    return f"F_{field_name(index)}"


def _check_count(count: int, limit: int | None, what: str) -> int:
    if isinstance(count, bool) or int(count) != count or count < 0:
        raise ValueError(f"{what} must be a non-negative integer, got {count!r}")
    if limit is not None and count > limit:
        raise ValueError(f"{what} must not exceed {limit}, got {count!r}")
    return int(count)


def tke_field_names(count: int) -> list[str]:
    """Return the names of ``count`` prognostic sub-grid TKE fields."""
    n = _check_count(count, None, "TKE field count")
    return [f"TKE_{i}" for i in range(n)]


def tau_field_names() -> list[str]:
    """Return the names of the sub-grid stress and heat-flux fields, in block order."""
    return list(_TAU_NAMES)


def moisture_field_names(nvars: int) -> list[str]:
    """Return the names of the first ``nvars`` moisture species."""
    n = _check_count(nvars, len(_MOISTURE_NAMES), "moisture species count")
    return list(_MOISTURE_NAMES[:n])


def moisture_tau_field_names(nvars: int) -> list[str]:
    """Return the sub-grid flux field names of ``nvars`` moisture species.

    Each species has one flux per spatial direction, numbered 1 to 3.
    """
    n = _check_count(nvars, len(_MOISTURE_TAU_BASES), "moisture species count")
    return [f"{base}{direction}" for base in _MOISTURE_TAU_BASES[:n] for direction in (1, 2, 3)]