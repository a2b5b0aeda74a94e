import pytest

from chipvoice.frame_sequence import FrameSequence
from chipvoice.parameters import default_values
from chipvoice.settings import (
    ArpeggioIntervalType,
    FinePitchSequenceMode,
    MonophonicBehavior,
    NoiseAlgorithm,
    SequenceKind,
    Settings,
    VoiceType,
)


def test_defaults_match_parameter_defaults():
    settings = Settings()
    for name, value in default_values().items():
        assert settings[name] == value


def test_default_accessors():
    settings = Settings()
    assert settings.oscillator_type() is VoiceType.PULSE
    assert settings.is_monophonic() is False
    assert settings.is_advanced_panel_open() is False
    assert settings.vibrato_ignores_wheel() is True
    assert settings.noise_algorithm() is NoiseAlgorithm.INFINITE_2
    assert settings.fine_pitch_sequence_mode() is FinePitchSequenceMode.FINE
    assert settings.monophonic_behavior() is MonophonicBehavior.LEGATO
    assert settings.arpeggio_interval_type() is ArpeggioIntervalType.ONE_FRAME


def test_values_passed_to_constructor():
    settings = Settings({"osc": 2, "maxPoly": 1, "isDutySequenceEnabled_raw": 1})
    assert settings.oscillator_type() is VoiceType.NOISE
    assert settings.is_monophonic() is True
    assert settings.is_duty_sequence_enabled() is True
    assert settings.is_volume_sequence_enabled() is False


def test_setitem_clamps_to_range():
    settings = Settings()
    settings["bendRange"] = 100
    assert settings["bendRange"] == 24
    settings["sweepInitialPitch"] = -100
    assert settings["sweepInitialPitch"] == -24


def test_unknown_parameter_raises():
    settings = Settings()
    with pytest.raises(KeyError):
        settings["nope"]
    with pytest.raises(KeyError):
        settings["nope"] = 1
    with pytest.raises(KeyError):
        Settings({"nope": 1})


@pytest.mark.parametrize(
    "kind, low, high",
    [
        (SequenceKind.VOLUME, 0, 15),
        (SequenceKind.COARSE_PITCH, -64, 63),
        (SequenceKind.FINE_PITCH, -64, 63),
        (SequenceKind.DUTY, 0, 2),
    ],
)
def test_sequence_kind_ranges(kind, low, high):
    settings = Settings()
    settings.set_sequence(kind, FrameSequence(sequence=[low, high]), f"{low}, {high}")
    assert settings.sequence_string(kind) == f"{low}, {high}"
    with pytest.raises(ValueError):
        settings.set_sequence(kind, FrameSequence(sequence=[high + 1]), str(high + 1))
    with pytest.raises(ValueError):
        settings.set_sequence(kind, FrameSequence(sequence=[low - 1]), str(low - 1))
    assert settings.sequence_string(kind) == f"{low}, {high}"


def test_set_sequence_stores_sequence_and_text():
    settings = Settings()
    seq = FrameSequence(sequence=[15, 10, 5], release_sequence_start_index=3)
    settings.set_sequence("volume", seq, "15, 10, 5")
    assert settings.sequence(SequenceKind.VOLUME) is seq
    assert settings.sequence_string("volume") == "15, 10, 5"
    assert settings.sequence_string(SequenceKind.DUTY) == ""


def test_set_sequence_rejects_out_of_range_value():
    settings = Settings()
    with pytest.raises(ValueError):
        settings.set_sequence(SequenceKind.DUTY, FrameSequence(sequence=[0, 3]), "0, 3")
    assert settings.sequence_string(SequenceKind.DUTY) == ""


def test_invalid_sequence_kind_raises():
    settings = Settings()
    with pytest.raises(ValueError):
        settings.sequence("pan")
    with pytest.raises(ValueError):
        settings.set_sequence("pan", FrameSequence(), "")


def test_xml_root_and_tags():
    text = Settings().to_xml()
    assert text.startswith("<root>")
    assert "<volumeEnv" in text
    assert "<dutyEnv" in text


def test_from_xml_wrong_root_raises():
    with pytest.raises(ValueError):
        Settings.from_xml("<other/>")


def test_from_xml_malformed_raises():
    with pytest.raises(ValueError):
        Settings.from_xml("<root>")


def test_from_xml_without_params_keeps_defaults():
    restored = Settings.from_xml("<root><dutyEnv>0, 1</dutyEnv></root>")
    assert restored["maxPoly"] == default_values()["maxPoly"]
    assert restored.sequence_string(SequenceKind.DUTY) == "0, 1"
    assert restored.sequence_string(SequenceKind.VOLUME) == ""