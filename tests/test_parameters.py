import math

import pytest

from chipvoice.parameters import (
    ParameterKind,
    ParameterSpec,
    default_values,
    parameter_specs,
)


def _spec(pid):
    return next(spec for spec in parameter_specs() if spec.id == pid)


def test_ids_are_unique():
    ids = [spec.id for spec in parameter_specs()]
    assert len(ids) == len(set(ids))


def test_first_and_last_ids_follow_declaration_order():
    specs = parameter_specs()
    assert specs[0].id == "isAdvancedPanelOpen_raw"
    assert specs[-1].id == "finePitchSequenceMode_raw"


def test_default_values_match_specs():
    defaults = default_values()
    assert set(defaults) == {spec.id for spec in parameter_specs()}
    for spec in parameter_specs():
        assert defaults[spec.id] == spec.default


def test_source_defaults():
    defaults = default_values()
    assert defaults["maxPoly"] == 8.0
    assert defaults["bendRange"] == 2.0
    assert defaults["vibratoRate"] == pytest.approx(0.15)
    assert defaults["vibratoIgnoresWheel_raw"] == 1.0
    assert defaults["isVolumeSequenceEnabled_raw"] == 0.0


def test_defaults_lie_within_range():
    for spec in parameter_specs():
        assert spec.minimum <= spec.default <= spec.maximum


def test_oscillator_choices():
    osc = _spec("osc")
    assert osc.kind is ParameterKind.CHOICE
    assert osc.choices == ("Pulse/Square", "Triangle", "Noise")
    assert osc.maximum == len(osc.choices) - 1


def test_choice_ranges_match_choice_count():
    for spec in parameter_specs():
        if spec.kind is ParameterKind.CHOICE:
            assert spec.minimum == 0.0
            assert spec.maximum == len(spec.choices) - 1


def test_sweep_initial_pitch_range():
    spec = _spec("sweepInitialPitch")
    assert spec.kind is ParameterKind.INT
    assert (spec.minimum, spec.maximum) == (-24.0, 24.0)


def test_clamp_keeps_defaults():
    for spec in parameter_specs():
        assert spec.clamp(spec.default) == pytest.approx(spec.default)


def test_clamp_is_idempotent():
    for spec in parameter_specs():
        for raw in (-100.0, spec.minimum, spec.default, spec.maximum, 100.0):
            once = spec.clamp(raw)
            assert spec.clamp(once) == pytest.approx(once)


def test_clamp_limits_to_range():
    for spec in parameter_specs():
        assert spec.clamp(-1e9) == pytest.approx(spec.minimum)
        assert spec.clamp(1e9) == pytest.approx(spec.maximum)


def test_clamp_bool_gives_zero_or_one():
    spec = _spec("isAdvancedPanelOpen_raw")
    assert spec.clamp(0.7) == 1.0
    assert spec.clamp(0.2) == 0.0


def test_clamp_int_rounds_to_whole():
    spec = _spec("bendRange")
    result = spec.clamp(3.4)
    assert result == 3.0
    assert float(result).is_integer()


def test_clamp_choice_rounds_to_index():
    spec = _spec("duty")
    assert spec.clamp(1.6) == 2.0
    assert spec.clamp(5) == spec.maximum


def test_clamp_float_without_step_is_unchanged_inside_range():
    spec = _spec("gain")
    assert spec.clamp(0.3333) == 0.3333


def test_clamp_float_snaps_to_step():
    spec = _spec("attack")
    snapped = spec.clamp(1.23456)
    steps = (snapped - spec.minimum) / spec.step
    assert math.isclose(steps, round(steps), abs_tol=1e-6)
    assert abs(snapped - 1.23456) <= spec.step / 2 + 1e-9


def test_clamp_rejects_nan():
    with pytest.raises(ValueError):
        _spec("gain").clamp(float("nan"))


def test_spec_is_immutable():
    spec = _spec("gain")
    with pytest.raises(AttributeError):
        spec.default = 0.1  # type: ignore[misc]
    assert spec.default == 0.5
    assert default_values()["gain"] == 0.5


def test_custom_spec_clamp():
    spec = ParameterSpec("x", "X", ParameterKind.FLOAT, 1.0, 2.0, 1.5, step=0.5)
    assert spec.clamp(1.6) == 1.5
    assert spec.clamp(3.0) == 2.0