"""Run-time parameters of the hydro core, read and range-checked from a mapping."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, NamedTuple

FLT_MAX = 3.4028234663852886e38
FLT_MIN = 1.1754943508222875e-38


class ParameterError(ValueError):
    """A parameter value could not be read or lies outside its allowed range."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(f"{name}: {message}")
        self.name = name


class _Spec(NamedTuple):
    key: str
    attr: str
    kind: type
    low: float
    high: float
    requires: tuple[str, ...] = ()


_IDEAL = ("surflayer_idealsine",)
_LSF = ("lsf_selector",)
_MOIST = ("moisture_selector",)
_MOIST_IDEAL = ("moisture_selector", "surflayer_idealsine")

_SPECS: tuple[_Spec, ...] = (
    _Spec("hydroBCs", "hydro_bcs", int, 2, 2),
    _Spec("hydroForcingWrite", "hydro_forcing_write", int, 0, 1),
    _Spec("hydroForcingLog", "hydro_forcing_log", int, 0, 1),
    _Spec("hydroSubGridWrite", "hydro_subgrid_write", int, 0, 1),
    _Spec("pgfSelector", "pgf_selector", int, 0, 1),
    _Spec("buoyancySelector", "buoyancy_selector", int, 0, 1),
    _Spec("coriolisSelector", "coriolis_selector", int, 0, 2),
    _Spec("coriolisLatitude", "coriolis_latitude", float, -90.0, 90.0),
    _Spec("turbulenceSelector", "turbulence_selector", int, 0, 1),
    _Spec("TKESelector", "tke_selector", int, 0, 1),
    _Spec("TKEAdvSelector", "tke_adv_selector", int, 0, 6),
    _Spec("TKEAdvSelector_b_hyb", "tke_adv_b_hyb", float, 0.0, 1.0),
    _Spec("c_s", "c_s", float, 1e-6, 1e6),
    _Spec("c_k", "c_k", float, 1e-6, 1e6),
    _Spec("advectionSelector", "advection_selector", int, 0, 6),
    _Spec("b_hyb", "b_hyb", float, 0.0, 1.0),
    _Spec("diffusionSelector", "diffusion_selector", int, 0, 1),
    _Spec("nu_0", "nu_0", float, 0.0, FLT_MAX),
    _Spec("surflayerSelector", "surflayer_selector", int, 0, 2),
    _Spec("surflayer_z0", "surflayer_z0", float, 1e-6, 1e0),
    _Spec("surflayer_z0t", "surflayer_z0t", float, 1e-6, 1e1),
    _Spec("surflayer_tr", "surflayer_tr", float, -1e1, 1e1),
    _Spec("surflayer_wth", "surflayer_wth", float, -5e0, 5e0),
    _Spec("surflayer_idealsine", "surflayer_idealsine", int, 0, 1),
    _Spec("surflayer_ideal_ts", "surflayer_ideal_ts", float, 0.0, 1e5, _IDEAL),
    _Spec("surflayer_ideal_te", "surflayer_ideal_te", float, 0.0, 1e5, _IDEAL),
    _Spec("surflayer_ideal_amp", "surflayer_ideal_amp", float, 0.0, 1e3, _IDEAL),
    _Spec("surflayer_stab", "surflayer_stab", int, 0, 1),
    _Spec("lsfSelector", "lsf_selector", int, 0, 1),
    _Spec("lsf_w_surf", "lsf_w_surf", float, -1e4, 1e4, _LSF),
    _Spec("lsf_w_lev1", "lsf_w_lev1", float, -1e4, 1e4, _LSF),
    _Spec("lsf_w_lev2", "lsf_w_lev2", float, -1e4, 1e4, _LSF),
    _Spec("lsf_w_zlev1", "lsf_w_zlev1", float, 0.0, 1e4, _LSF),
    _Spec("lsf_w_zlev2", "lsf_w_zlev2", float, 0.0, 1e4, _LSF),
    _Spec("lsf_th_surf", "lsf_th_surf", float, -1e4, 1e4, _LSF),
    _Spec("lsf_th_lev1", "lsf_th_lev1", float, -1e4, 1e4, _LSF),
    _Spec("lsf_th_lev2", "lsf_th_lev2", float, -1e4, 1e4, _LSF),
    _Spec("lsf_th_zlev1", "lsf_th_zlev1", float, 0.0, 1e4, _LSF),
    _Spec("lsf_th_zlev2", "lsf_th_zlev2", float, 0.0, 1e4, _LSF),
    _Spec("lsf_qv_surf", "lsf_qv_surf", float, -1e4, 1e4, _LSF),
    _Spec("lsf_qv_lev1", "lsf_qv_lev1", float, -1e4, 1e4, _LSF),
    _Spec("lsf_qv_lev2", "lsf_qv_lev2", float, -1e4, 1e4, _LSF),
    _Spec("lsf_qv_zlev1", "lsf_qv_zlev1", float, 0.0, 1e4, _LSF),
    _Spec("lsf_qv_zlev2", "lsf_qv_zlev2", float, 0.0, 1e4, _LSF),
    _Spec("lsf_horMnSubTerms", "lsf_hor_mn_sub_terms", int, 0, 1, _LSF),
    _Spec("lsf_freq", "lsf_freq", float, 1e-3, 1e3, _LSF),
    _Spec("moistureSelector", "moisture_selector", int, 0, 1),
    _Spec("moistureNvars", "moisture_nvars", int, 0, 2, _MOIST),
    _Spec("moistureAdvSelectorQv", "moisture_adv_selector_qv", int, 0, 6, _MOIST),
    _Spec("moistureAdvSelectorQv_b", "moisture_adv_selector_qv_b", float, 0.0, 1.0, _MOIST),
    _Spec("moistureAdvSelectorQi", "moisture_adv_selector_qi", int, 0, 2, _MOIST),
    _Spec("moistureSGSturb", "moisture_sgs_turb", int, 0, 1, _MOIST),
    _Spec("moistureCond", "moisture_cond", int, 1, 3, _MOIST),
    _Spec("moistureCondTscale", "moisture_cond_tscale", float, 1e-4, 1000.0, _MOIST),
    _Spec("moistureCondBasePres", "moisture_cond_base_pres", int, 0, 1, _MOIST),
    _Spec("moistureMPcallTscale", "moisture_mp_call_tscale", float, 1e-4, 1000.0, _MOIST),
    _Spec("surflayer_wq", "surflayer_wq", float, -5e0, 5e0, _MOIST),
    _Spec("surflayer_qr", "surflayer_qr", float, -1e1, 1e1, _MOIST),
    _Spec("surflayer_qskin_input", "surflayer_qskin_input", int, 0, 1, _MOIST),
    _Spec("surflayer_ideal_qts", "surflayer_ideal_qts", float, 0.0, 1e5, _MOIST_IDEAL),
    _Spec("surflayer_ideal_qte", "surflayer_ideal_qte", float, 0.0, 1e5, _MOIST_IDEAL),
    _Spec("surflayer_ideal_qamp", "surflayer_ideal_qamp", float, 0.0, 1e3, _MOIST_IDEAL),
    _Spec("filterSelector", "filter_selector", int, 0, 1),
    _Spec("filter_6th_coeff", "filter_6th_coeff", float, 0.0, 1.0),
    _Spec("dampingLayerSelector", "damping_layer_selector", int, 0, 1),
    _Spec("dampingLayerDepth", "damping_layer_depth", float, 0.0, FLT_MAX),
    _Spec("stabilityScheme", "stability_scheme", int, 0, 4),
    _Spec("temp_grnd", "temp_grnd", float, FLT_MIN, FLT_MAX),
    _Spec("pres_grnd", "pres_grnd", float, FLT_MIN, FLT_MAX),
    _Spec("zStableBottom", "z_stable_bottom", float, 0.0, FLT_MAX),
    _Spec("stableGradient", "stable_gradient", float, FLT_MIN, FLT_MAX),
    _Spec("zStableBottom2", "z_stable_bottom2", float, 0.0, FLT_MAX),
    _Spec("stableGradient2", "stable_gradient2", float, FLT_MIN, FLT_MAX),
    _Spec("zStableBottom3", "z_stable_bottom3", float, 0.0, FLT_MAX),
    _Spec("stableGradient3", "stable_gradient3", float, FLT_MIN, FLT_MAX),
    _Spec("U_g", "u_g", float, -FLT_MAX, FLT_MAX),
    _Spec("V_g", "v_g", float, -FLT_MAX, FLT_MAX),
    _Spec("z_Ug", "z_ug", float, 0.0, FLT_MAX),
    _Spec("z_Vg", "z_vg", float, 0.0, FLT_MAX),
    _Spec("Ug_grad", "ug_grad", float, -1e2, 1e2),
    _Spec("Vg_grad", "vg_grad", float, -1e2, 1e2),
    _Spec("thetaPerturbationSwitch", "theta_perturbation_switch", int, 0, 1),
    _Spec("thetaHeight", "theta_height", float, 0.0, FLT_MAX),
    _Spec("thetaAmplitude", "theta_amplitude", float, 0.0, 2.0),
    _Spec("physics_oneRKonly", "physics_one_rk_only", int, 0, 1),
)


def _convert(spec: _Spec, raw: Any) -> int | float:
    try:
        if spec.kind is int:
            if isinstance(raw, str):
                value: int | float = int(raw.strip())
            elif isinstance(raw, float):
                if not raw.is_integer():
                    raise ValueError(raw)
                value = int(raw)
            else:
                value = int(raw)
        else:
            value = float(raw.strip()) if isinstance(raw, str) else float(raw)
    except (TypeError, ValueError) as exc:
        kind = "an integer" if spec.kind is int else "a number"
        raise ParameterError(spec.key, f"expected {kind}, got {raw!r}") from exc
    if not spec.low <= value <= spec.high:
        raise ParameterError(
            spec.key, f"value {value!r} outside allowed range [{spec.low}, {spec.high}]"
        )
    return value


@dataclass(frozen=True)
class HydroCoreParams:
    """Complete set of hydro-core parameters with their defaults."""

    hydro_bcs: int = 0
    hydro_forcing_write: int = 0
    hydro_forcing_log: int = 0
    hydro_subgrid_write: int = 0
    pgf_selector: int = 1
    buoyancy_selector: int = 1
    coriolis_selector: int = 0
    coriolis_latitude: float = 54.0
    turbulence_selector: int = 0
    tke_selector: int = 0
    tke_adv_selector: int = 0
    tke_adv_b_hyb: float = 0.0
    c_s: float = 0.18
    c_k: float = 0.10
    advection_selector: int = 0
    b_hyb: float = 0.8
    diffusion_selector: int = 0
    nu_0: float = 1.0
    surflayer_selector: int = 0
    surflayer_z0: float = 0.1
    surflayer_z0t: float = 0.1
    surflayer_tr: float = 0.0
    surflayer_wth: float = 0.0
    surflayer_idealsine: int = 0
    surflayer_ideal_ts: float = 0.0
    surflayer_ideal_te: float = 0.0
    surflayer_ideal_amp: float = 0.1
    surflayer_wq: float = 0.0
    surflayer_qr: float = 0.0
    surflayer_qskin_input: int = 0
    surflayer_ideal_qts: float = 0.0
    surflayer_ideal_qte: float = 0.0
    surflayer_ideal_qamp: float = 0.1
    surflayer_stab: int = 0
    lsf_selector: int = 0
    lsf_w_surf: float = 0.0
    lsf_w_lev1: float = 0.0
    lsf_w_lev2: float = 0.0
    lsf_w_zlev1: float = 100.0
    lsf_w_zlev2: float = 200.0
    lsf_th_surf: float = 0.0
    lsf_th_lev1: float = 0.0
    lsf_th_lev2: float = 0.0
    lsf_th_zlev1: float = 100.0
    lsf_th_zlev2: float = 200.0
    lsf_qv_surf: float = 0.0
    lsf_qv_lev1: float = 0.0
    lsf_qv_lev2: float = 0.0
    lsf_qv_zlev1: float = 100.0
    lsf_qv_zlev2: float = 200.0
    lsf_hor_mn_sub_terms: int = 0
    lsf_freq: float = 1.0
    moisture_selector: int = 0
    moisture_nvars: int = 0
    moisture_adv_selector_qv: int = 0
    moisture_adv_selector_qv_b: float = 0.0
    moisture_adv_selector_qi: int = 0
    moisture_sgs_turb: int = 0
    moisture_cond: int = 1
    moisture_cond_tscale: float = 1.0
    moisture_cond_base_pres: int = 0
    moisture_mp_call_tscale: float = 1.0
    filter_selector: int = 0
    filter_6th_coeff: float = 0.12
    damping_layer_selector: int = 0
    damping_layer_depth: float = 100.0
    stability_scheme: int = 0
    temp_grnd: float = 300.0
    pres_grnd: float = 1.0e5
    z_stable_bottom: float = 1000.0
    stable_gradient: float = 0.1
    z_stable_bottom2: float = 1100.0
    stable_gradient2: float = 0.03
    z_stable_bottom3: float = 1500.0
    stable_gradient3: float = 0.03
    u_g: float = 0.0
    v_g: float = 0.0
    z_ug: float = 10000.0
    z_vg: float = 10000.0
    ug_grad: float = 0.0
    vg_grad: float = 0.0
    theta_perturbation_switch: int = 0
    theta_height: float = 0.0
    theta_amplitude: float = 0.0
    physics_one_rk_only: int = 1

    @property
    def lsf_num_phi_vars(self) -> int:
        """Number of slab-mean profiles kept for the large-scale subsidence terms."""
        if self.lsf_selector > 0 and self.lsf_hor_mn_sub_terms == 1:
            return 5
        return 0

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> HydroCoreParams:
        """Read parameters keyed by their configuration names.

        Missing keys keep their defaults. Parameters that belong to a
        disabled sub-model (for example the large-scale forcing values while
        ``lsfSelector`` is 0) are not read. Keys that are not hydro-core
        parameters are ignored. Values may be numbers or numeric strings.
        """
        defaults = {f.name: f.default for f in fields(cls)}
        chosen: dict[str, Any] = {}
        for spec in _SPECS:
            if any(chosen.get(dep, defaults[dep]) <= 0 for dep in spec.requires):
                continue
            if spec.key in values:
                chosen[spec.attr] = _convert(spec, values[spec.key])
        return cls(**chosen)

    @classmethod
    def parameter_names(cls) -> list[str]:
        """Return every configuration key understood by :meth:`from_mapping`."""
        return [spec.key for spec in _SPECS]