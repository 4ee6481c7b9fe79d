import math

import pytest

from eddycore.params import HydroCoreParams, ParameterError


def test_defaults_from_empty_mapping():
    params = HydroCoreParams.from_mapping({})
    assert params == HydroCoreParams()
    assert params.pgf_selector == 1
    assert params.coriolis_latitude == 54.0
    assert params.b_hyb == 0.8
    assert params.temp_grnd == 300.0
    assert params.pres_grnd == 1.0e5
    assert params.physics_one_rk_only == 1
    assert params.lsf_num_phi_vars == 0


def test_reads_values_by_configuration_name():
    params = HydroCoreParams.from_mapping(
        {"hydroBCs": 2, "coriolisSelector": 2, "coriolisLatitude": -30.5, "U_g": 7.5, "stabilityScheme": 2}
    )
    assert params.hydro_bcs == 2
    assert params.coriolis_selector == 2
    assert params.coriolis_latitude == -30.5
    assert params.u_g == 7.5
    assert params.stability_scheme == 2


def test_string_values_are_parsed():
    params = HydroCoreParams.from_mapping({"advectionSelector": " 3 ", "c_s": "0.2"})
    assert params.advection_selector == 3
    assert params.c_s == pytest.approx(0.2)


def test_integral_float_accepted_for_integer():
    params = HydroCoreParams.from_mapping({"TKESelector": 1.0})
    assert params.tke_selector == 1
    assert isinstance(params.tke_selector, int)


@pytest.mark.parametrize(
    "key, value",
    [
        ("hydroBCs", 0),
        ("coriolisSelector", 3),
        ("coriolisLatitude", 91.0),
        ("b_hyb", 1.5),
        ("surflayer_z0", 2.0),
        ("thetaAmplitude", 2.5),
        ("temp_grnd", 0.0),
        ("stableGradient", -0.1),
        ("Ug_grad", -200.0),
        ("nu_0", math.nan),
    ],
)
def test_out_of_range_values_raise(key, value):
    with pytest.raises(ParameterError) as info:
        HydroCoreParams.from_mapping({key: value})
    assert info.value.name == key


@pytest.mark.parametrize("value", ["abc", 1.5, None])
def test_unparseable_integer_raises(value):
    with pytest.raises(ParameterError):
        HydroCoreParams.from_mapping({"filterSelector": value})


def test_parameter_error_is_value_error():
    with pytest.raises(ValueError):
        HydroCoreParams.from_mapping({"c_k": 0.0})


def test_lsf_values_ignored_when_disabled():
    params = HydroCoreParams.from_mapping({"lsf_w_surf": 5.0, "lsf_freq": 1e9})
    assert params.lsf_w_surf == 0.0
    assert params.lsf_freq == 1.0


def test_lsf_values_read_when_enabled():
    params = HydroCoreParams.from_mapping(
        {"lsfSelector": 1, "lsf_w_surf": 5.0, "lsf_horMnSubTerms": 1, "lsf_freq": 2.0}
    )
    assert params.lsf_w_surf == 5.0
    assert params.lsf_freq == 2.0
    assert params.lsf_num_phi_vars == 5


def test_lsf_range_checked_when_enabled():
    with pytest.raises(ParameterError):
        HydroCoreParams.from_mapping({"lsfSelector": 1, "lsf_w_zlev1": -1.0})


def test_moisture_values_depend_on_selector():
    off = HydroCoreParams.from_mapping({"moistureNvars": 2, "surflayer_wq": 0.1})
    assert off.moisture_nvars == 0
    assert off.surflayer_wq == 0.0
    on = HydroCoreParams.from_mapping({"moistureSelector": 1, "moistureNvars": 2, "surflayer_wq": 0.1})
    assert on.moisture_nvars == 2
    assert on.surflayer_wq == 0.1


def test_moisture_condition_range():
    with pytest.raises(ParameterError):
        HydroCoreParams.from_mapping({"moistureSelector": 1, "moistureCond": 0})


def test_idealized_sine_values_depend_on_switch():
    off = HydroCoreParams.from_mapping({"surflayer_ideal_te": 3600.0})
    assert off.surflayer_ideal_te == 0.0
    on = HydroCoreParams.from_mapping({"surflayer_idealsine": 1, "surflayer_ideal_te": 3600.0})
    assert on.surflayer_ideal_te == 3600.0


def test_moist_idealized_values_need_both_switches():
    values = {"moistureSelector": 1, "surflayer_ideal_qamp": 0.5}
    assert HydroCoreParams.from_mapping(values).surflayer_ideal_qamp == 0.1
    values["surflayer_idealsine"] = 1
    assert HydroCoreParams.from_mapping(values).surflayer_ideal_qamp == 0.5


def test_unknown_keys_ignored():
    params = HydroCoreParams.from_mapping({"someOtherModuleParam": 42})
    assert params == HydroCoreParams()


def test_parameter_names_cover_all_reads():
    names = HydroCoreParams.parameter_names()
    assert "hydroBCs" in names
    assert "physics_oneRKonly" in names
    assert len(names) == len(set(names))