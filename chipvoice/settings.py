"""Synthesiser settings: parameter values, enumerations and custom sequences."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from enum import Enum, IntEnum

from chipvoice.frame_sequence import FrameSequence
from chipvoice.parameters import default_values, parameter_specs

_log = logging.getLogger(__name__)


class VoiceType(IntEnum):
    PULSE = 0
    TRIANGLE = 1
    NOISE = 2


class MonophonicBehavior(IntEnum):
    LEGATO = 0
    ARPEGGIO_UP = 1
    ARPEGGIO_DOWN = 2
    NON_LEGATO = 3


class ArpeggioIntervalType(IntEnum):
    ONE_FRAME = 0
    TWO_FRAMES = 1
    THREE_FRAMES = 2
    NINETY_SIXTH = 3
    SIXTY_FOURTH = 4
    FORTY_EIGHTH = 5
    THIRTY_SECOND = 6
    TWENTY_FOURTH = 7
    SLIDER = 8


class PulseDuty(IntEnum):
    DUTY_12_5 = 0
    DUTY_25 = 1
    DUTY_50 = 2


class NoiseAlgorithm(IntEnum):
    INFINITE_2 = 0
    LONG = 1
    SHORT = 2


class FinePitchSequenceMode(IntEnum):
    FINE = 0
    FINE_16 = 1


class EnvelopePhase(IntEnum):
    ATTACK = 0
    DECAY = 1
    SUSTAIN = 2
    RELEASE = 3


class SequenceKind(Enum):
    """The custom sequences a voice can follow, with their legal value ranges."""

    VOLUME = "volume"
    COARSE_PITCH = "coarsePitch"
    FINE_PITCH = "finePitch"
    DUTY = "duty"

    @property
    def value_range(self) -> tuple[int, int]:
        """Return the inclusive (minimum, maximum) value of a frame."""
        return _RANGES[self]

    @property
    def xml_tag(self) -> str:
        """Return the element name used for this sequence in saved state."""
        return f"{self.value}Env"


_RANGES = {
    SequenceKind.VOLUME: (0, 15),
    SequenceKind.COARSE_PITCH: (-64, 63),
    SequenceKind.FINE_PITCH: (-64, 63),
    SequenceKind.DUTY: (0, 2),
}

_SPECS = {spec.id: spec for spec in parameter_specs()}
_STATE_TAG = "Params"


class Settings:
    """Raw parameter values together with the four custom sequences."""

    def __init__(self, values: Mapping[str, float] | None = None) -> None:
        self._values = default_values()
        for name, value in (values or {}).items():
            self[name] = value
        self._sequences = {kind: FrameSequence() for kind in SequenceKind}
        self._sequence_strings = {kind: "" for kind in SequenceKind}

    def __getitem__(self, name: str) -> float:
        try:
            return self._values[name]
        except KeyError:
            raise KeyError(f"unknown parameter {name!r}") from None

    def __setitem__(self, name: str, value: float) -> None:
        spec = _SPECS.get(name)
        if spec is None:
            raise KeyError(f"unknown parameter {name!r}")
        self._values[name] = spec.clamp(value)

    # accessors

    def oscillator_type(self) -> VoiceType:
        return VoiceType(int(self["osc"]))

    def is_monophonic(self) -> bool:
        return int(self["maxPoly"]) == 1

    def is_advanced_panel_open(self) -> bool:
        return self["isAdvancedPanelOpen_raw"] > 0.5

    def noise_algorithm(self) -> NoiseAlgorithm:
        return NoiseAlgorithm(int(self["noiseAlgorithm_raw"]))

    def vibrato_ignores_wheel(self) -> bool:
        return self["vibratoIgnoresWheel_raw"] > 0.5

    def is_volume_sequence_enabled(self) -> bool:
        return self["isVolumeSequenceEnabled_raw"] > 0.5

    def is_coarse_pitch_sequence_enabled(self) -> bool:
        return self["isCoarsePitchSequenceEnabled_raw"] > 0.5

    def is_fine_pitch_sequence_enabled(self) -> bool:
        return self["isFinePitchSequenceEnabled_raw"] > 0.5

    def is_duty_sequence_enabled(self) -> bool:
        return self["isDutySequenceEnabled_raw"] > 0.5

    def fine_pitch_sequence_mode(self) -> FinePitchSequenceMode:
        return FinePitchSequenceMode(int(self["finePitchSequenceMode_raw"]))

    def monophonic_behavior(self) -> MonophonicBehavior:
        return MonophonicBehavior(int(self["monophonicBehavior_raw"]))

    def arpeggio_interval_type(self) -> ArpeggioIntervalType:
        return ArpeggioIntervalType(int(self["arpeggioIntervalType_raw"]))

    # sequences

    def sequence(self, kind: SequenceKind | str) -> FrameSequence:
        """Return the frame sequence of the given kind."""
        return self._sequences[SequenceKind(kind)]

    def sequence_string(self, kind: SequenceKind | str) -> str:
        """Return the text the sequence of the given kind was defined by."""
        return self._sequence_strings[SequenceKind(kind)]

    def set_sequence(
        self, kind: SequenceKind | str, sequence: FrameSequence, text: str
    ) -> None:
        """Install a parsed sequence and its source text.

        Raises ValueError for an unknown kind or a value outside the kind's range.
        """
        kind = SequenceKind(kind)
        low, high = kind.value_range
        bad = [value for value in sequence.sequence if not low <= value <= high]
        if bad:
            raise ValueError(
                f"{kind.value} sequence value {bad[0]} outside {low}..{high}"
            )
        self._sequences[kind] = sequence
        self._sequence_strings[kind] = text

    # persistence

    def to_xml(self) -> str:
        """Serialise parameter values and sequence strings to an XML document."""
        root = ET.Element("root")
        state = ET.SubElement(root, _STATE_TAG)
        for name, value in self._values.items():
            ET.SubElement(state, "PARAM", id=name, value=repr(value))
        for kind in SequenceKind:
            ET.SubElement(root, kind.xml_tag).text = self._sequence_strings[kind]
        return ET.tostring(root, encoding="unicode")

    @classmethod
    def from_xml(cls, text: str) -> Settings:
        """Restore settings saved by ``to_xml``.

        Parameter values and sequence strings are restored. The strings are not
        re-parsed here, so each sequence starts empty until ``set_sequence`` is
        called with its parsed form.
        """
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            raise ValueError(f"malformed settings document: {exc}") from exc
        if root.tag != "root":
            raise ValueError(f"unexpected root element {root.tag!r}")

        settings = cls()
        state = root.find(_STATE_TAG)
        if state is None:
            _log.warning("Saved plugin parameters are incompatible")
        else:
            for param in state.iter("PARAM"):
                name = param.get("id")
                raw = param.get("value")
                if name not in _SPECS or raw is None:
                    continue
                try:
                    settings[name] = float(raw)
                except ValueError:
                    _log.warning("ignoring unreadable value %r for %s", raw, name)

        for kind in SequenceKind:
            element = root.find(kind.xml_tag)
            if element is None:
                continue
            if element.text:
                settings._sequence_strings[kind] = element.text
            else:
                _log.info("%s entry found, but it holds no text", kind.xml_tag)
        return settings