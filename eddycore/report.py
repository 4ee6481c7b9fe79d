"""Human-readable listing of the hydro-core parameters in use."""

from __future__ import annotations

from eddycore.params import HydroCoreParams

_Entry = tuple[str, str, str]  # (configuration key, attribute, description)

_CORE: tuple[tuple[str, tuple[_Entry, ...]], ...] = (
    ("----------: Boundary Conditions Set ---", (
        ("hydroBCs", "hydro_bcs", "Selector for hydro BC set. 2= periodicHorizVerticalAbl"),
        ("hydroForcingWrite", "hydro_forcing_write",
         "Switch for dumping hydroFldsFrhs for prognositic fields. 0 = off, 1=on"),
        ("hydroSubGridWrite", "hydro_subgrid_write", "Switch for dumping Tauij fields. 0 = off, 1=on"),
        ("hydroForcingLog", "hydro_forcing_log", "Switch for logging Frhs summary metrics. 0 = off, 1=on"),
    )),
    ("----------: PRESSURE GRADIENT FORCE ---", (
        ("pgfSelector", "pgf_selector", "Pressure Gradient Force (pgf) selector: 0=off, 1=on"),
    )),
    ("----------: BUOYANCY ---", (
        ("buoyancySelector", "buoyancy_selector", "Buoyancy force  selector: 0=off, 1=on"),
    )),
    ("----------: CORIOLIS ---", (
        ("coriolisSelector", "coriolis_selector",
         "Corilis force selector: 0= none, 1= horiz. terms, 2= horiz. & vert. terms"),
        ("coriolisLatitude", "coriolis_latitude",
         "Charactersitc latitude in degrees from equator of the LES domain"),
    )),
    ("----------: TURBULENCE ---", (
        ("turbulenceSelector", "turbulence_selector", "turbulence scheme selector: 0= none, 1= Lilly/Smagorinsky "),
        ("TKESelector", "tke_selector", "Prognostic TKE selector: 0= none, 1= Prognostic"),
        ("TKEAdvSelector", "tke_adv_selector", "advection scheme for SGSTKE equation"),
        ("TKEAdvSelector_b_hyb", "tke_adv_b_hyb", "hybrid advection scheme parameter"),
        ("c_s", "c_s", "Smagorinsky model constant used for turbulenceSelector = 1 and TKESelector = 0"),
        ("c_k", "c_k", "Lilly model constant used for turbulenceSelector = 1 and TKESelector > 0"),
    )),
    ("----------: ADVECTION ---", (
        ("advectionSelector", "advection_selector",
         "advection scheme selector: 0= 1st-order upwind, 1= 3rd-order QUICK, "
         "2= hybrid 3rd-4th order, 3= hybrid 5th-6th order"),
        ("b_hyb", "b_hyb",
         "hybrid advection scheme parameter: 0.0= lower-order upwind, "
         "1.0=higher-order cetered, 0.0 < b_hyb < 1.0 = hybrid"),
    )),
    ("----------: DIFFUSION ---", (
        ("diffusionSelector", "diffusion_selector", "diffusivity selector: 0= none, 1= const."),
        ("nu_0", "nu_0", "constant diffusivity used when diffusionSelector = 1"),
    )),
    ("----------: SURFACE LAYER ---", (
        ("surflayerSelector", "surflayer_selector", "surfacelayer selector: 0= off, 1,2= on"),
        ("surflayer_z0", "surflayer_z0", "roughness length (momentum) when surflayerSelector > 0"),
        ("surflayer_z0t", "surflayer_z0t", "roughness length (temperature) when surflayerSelector > 0"),
        ("surflayer_wth", "surflayer_wth",
         "kinematic sensible heat flux at the surface when surflayerSelector = 1"),
        ("surflayer_wq", "surflayer_wq", "kinematic latent heat flux at the surface when surflayerSelector = 1"),
        ("surflayer_tr", "surflayer_tr",
         "temperature rate at the surface when surflayerSelector = 2 (>0 for warming; <0 for cooling)"),
        ("surflayer_qr", "surflayer_qr",
         "moisture rate at the surface when surflayerSelector = 2 (>0 for warming; <0 for cooling)"),
        ("surflayer_qskin_input", "surflayer_qskin_input",
         "selector to use file input (restart) value for qskin under surflayerSelector == 2"),
        ("surflayer_idealsine", "surflayer_idealsine",
         "selector for idealized sinusoidal surface heat flux or skin temperature forcing: 0= off, 1= on"),
        ("surflayer_ideal_ts", "surflayer_ideal_ts",
         "start time in seconds for the idealized sinusoidal surface forcing"),
        ("surflayer_ideal_te", "surflayer_ideal_te",
         "end time in seconds for the idealized sinusoidal surface forcing"),
        ("surflayer_ideal_amp", "surflayer_ideal_amp",
         "maximum amplitude of the idealized sinusoidal surface forcing"),
        ("surflayer_ideal_qts", "surflayer_ideal_qts",
         "start time in seconds for the idealized sinusoidal surface forcing (qv)"),
        ("surflayer_ideal_qte", "surflayer_ideal_qte",
         "end time in seconds for the idealized sinusoidal surface forcing (qv)"),
        ("surflayer_ideal_qamp", "surflayer_ideal_qamp",
         "maximum amplitude of the idealized sinusoidal surface forcing (qv)"),
        ("surflayer_stab", "surflayer_stab", "exchange coeffcient stability correction selector: 0= on, 1= off"),
    )),
)

_LSF: tuple[_Entry, ...] = (
    ("lsf_w_surf", "lsf_w_surf", "large-scale forcing to w at the first specified level"),
    ("lsf_w_lev1", "lsf_w_lev1", "large-scale forcing w at height 1"),
    ("lsf_w_lev2", "lsf_w_lev2", "large-scale forcing w at height 2"),
    ("lsf_w_zlev1", "lsf_w_zlev1", "large-scale forcing w height 1"),
    ("lsf_w_zlev2", "lsf_w_zlev2", "large-scale forcing w height 2"),
    ("lsf_th_surf", "lsf_th_surf", "large-scale forcing to theta at the first specified level"),
    ("lsf_th_lev1", "lsf_th_lev1", "large-scale forcing theta at height 1"),
    ("lsf_th_lev2", "lsf_th_lev2", "large-scale forcing theta at height 2"),
    ("lsf_th_zlev1", "lsf_th_zlev1", "large-scale forcing theta height 1"),
    ("lsf_th_zlev2", "lsf_th_zlev2", "large-scale forcing theta height 2"),
    ("lsf_qv_surf", "lsf_qv_surf", "large-scale forcing to qv at the first specified level"),
    ("lsf_qv_lev1", "lsf_qv_lev1", "large-scale forcing qv at height 1"),
    ("lsf_qv_lev2", "lsf_qv_lev2", "large-scale forcing qv at height 2"),
    ("lsf_qv_zlev1", "lsf_qv_zlev1", "large-scale forcing qv height 1"),
    ("lsf_qv_zlev2", "lsf_qv_zlev2", "large-scale forcing qv height 2"),
    ("lsf_horMnSubTerms", "lsf_hor_mn_sub_terms", "large-scale subsidence terms Switch: 0= off, 1= on"),
    ("lsf_freq", "lsf_freq", "large-scale forcing frequency (seconds)"),
)

_MOISTURE: tuple[_Entry, ...] = (
    ("moistureNvars", "moisture_nvars", "number of moisture species"),
    ("moistureAdvSelectorQv", "moisture_adv_selector_qv", "water vapor advection scheme selector"),
    ("moistureAdvSelectorQv_b", "moisture_adv_selector_qv_b", "hybrid advection scheme parameter for water vapor"),
    ("moistureAdvSelectorQi", "moisture_adv_selector_qi",
     "moisture advection scheme selector for non-qv fields (non-oscillatory schemes)"),
    ("moistureSGSturb", "moisture_sgs_turb", "selector to apply sub-grid scale diffusion to moisture fields"),
    ("moistureCond", "moisture_cond", "selector to apply condensation to moisture fields"),
    ("moistureCondTscale", "moisture_cond_tscale", "relaxation time in seconds"),
    ("moistureCondBasePres", "moisture_cond_base_pres", "selector to use base pressure for microphysics"),
    ("moistureMPcallTscale", "moisture_mp_call_tscale", "time scale for microphysics to be called (in seconds)"),
)

_TAIL: tuple[tuple[str, tuple[_Entry, ...]], ...] = (
    ("----------: EXPLICIT FILTERS ---", (
        ("filterSelector", "filter_selector", "explicit filter selector: 0= off, 1= on"),
        ("filter_6th_coeff", "filter_6th_coeff", "6th-order filter factor: 0.0=off, 1.0=full"),
    )),
    ("----------: RAYLEIGH DAMPING LAYER ---", (
        ("dampingLayerSelector", "damping_layer_selector", "Rayleigh damping layer selector: 0= off, 1= on."),
        ("dampingLayerDepth", "damping_layer_depth", "Rayleigh damping layer depth in meters"),
    )),
    ("----------: BASE-STATE ---", (
        ("stabilityScheme", "stability_scheme",
         "Scheme used to set hydrostatic, stability-dependent Base-State EOS fields"),
        ("temp_grnd", "temp_grnd",
         "Air Temperature (K) at the ground used to set hydrostatic Base-State EOS fields"),
        ("pres_grnd", "pres_grnd", "Pressure (Pa) at the ground used to set hydrostatic Base-State EOS fields"),
        ("zStableBottom", "z_stable_bottom", "Height (m) of the first stable upper-layer when stabilityScheme = 1 or 2"),
        ("stableGradient", "stable_gradient",
         "Vertical gradient (K/m) of the first stable upper-layer when stabilityScheme = 1 or 2"),
        ("zStableBottom2", "z_stable_bottom2", "Height (m) of the second stable upper-layer when stabilityScheme = 2"),
        ("zStableBottom3", "z_stable_bottom3", "Height (m) of the third stable upper-layer when stabilityScheme = 2"),
        ("stableGradient2", "stable_gradient2",
         "Vertical gradient (K/m) of the second stable upper-layer when stabilityScheme = 2"),
        ("stableGradient3", "stable_gradient3",
         "Vertical gradient (K/m) of the third stable upper-layer when stabilityScheme = 2"),
        ("U_g", "u_g", "Zonal (West-East) component of the geostrophic wind (m/s)."),
        ("V_g", "v_g", "Meridional (South-North) component of the geostrophic wind (m/s)."),
        ("z_Ug", "z_ug", "Height (m) above ground for linear geostrophic wind gradient (zonal component)."),
        ("z_Vg", "z_vg", "Height (m) above ground for linear geostrophic wind gradient (meridional component)."),
        ("Ug_grad", "ug_grad", "U_g gradient above z_Ug (ms-1/m)."),
        ("Vg_grad", "vg_grad", "V_g gradient above z_Vg (ms-1/m)."),
        ("thetaPerturbationSwitch", "theta_perturbation_switch",
         "Switch to include initial theta perturbations: 0=off, 1=on"),
        ("thetaHeight", "theta_height", "Height below which to include initial theta perturbations: (meters)"),
        ("thetaAmplitude", "theta_amplitude", "Maximum amplitude for theta perturbations: thetaAmplitude*[-1,+1] K"),
        ("physics_oneRKonly", "physics_one_rk_only",
         "selector to apply physics RHS forcing only at the latest RK stage: 0= off, 1= on"),
    )),
)


def _parameter_line(params: HydroCoreParams, entry: _Entry) -> str:
    key, attr, description = entry
    return f"{key} = {getattr(params, attr)!r}  # {description}"


def _sections(params: HydroCoreParams):
    yield "HYDRO_CORE parameters---", ()
    yield "----------: HYDRO_CORE Submodule Selectors ---", ()
    yield from _CORE
    lsf_entries = (("lsfSelector", "lsf_selector", "large-scale forcings selector: 0= off, 1= on"),)
    if params.lsf_selector > 0:
        lsf_entries += _LSF
    yield "----------: LARGE-SCALE FORCINGS MODEL ---", lsf_entries
    moist_entries = (("moistureSelector", "moisture_selector", "moisture selector: 0= off, 1= on"),)
    if params.moisture_selector > 0:
        moist_entries += _MOISTURE
    yield "----------: MOISTURE ---", moist_entries
    yield from _TAIL


def describe_parameters(params: HydroCoreParams) -> str:
    """Return a listing of every parameter in use, grouped by sub-model.

    Section headings are comment lines starting with ``#``; each parameter
    line reads ``key = value  # description``. The large-scale forcing and
    moisture details are listed only when those sub-models are enabled.
    """
    lines: list[str] = []
    for heading, entries in _sections(params):
        lines.append(f"# {heading}")
        lines.extend(_parameter_line(params, entry) for entry in entries)
    return "\n".join(lines) + "\n"