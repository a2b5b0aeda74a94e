"""Definitions of the synthesiser's automatable parameters."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class ParameterKind(Enum):
    """How a parameter's raw value is interpreted."""

    BOOL = "bool"
    CHOICE = "choice"
    FLOAT = "float"
    INT = "int"


@dataclass(frozen=True)
class ParameterSpec:
    """One parameter: identifier, display name, range and default raw value."""

    id: str
    name: str
    kind: ParameterKind
    minimum: float
    maximum: float
    default: float
    step: float = 0.0
    skew: float = 1.0
    choices: tuple[str, ...] = ()

    def clamp(self, value: float) -> float:
        """Return the nearest legal raw value for this parameter."""
        value = float(value)
        if math.isnan(value):
            raise ValueError(f"parameter {self.id!r} cannot take NaN")

        if self.kind is ParameterKind.BOOL:
            return 1.0 if value >= 0.5 else 0.0

        if self.kind in (ParameterKind.CHOICE, ParameterKind.INT):
            value = float(round(value)) if math.isfinite(value) else value
            return min(max(value, self.minimum), self.maximum)

        if self.step > 0 and math.isfinite(value):
            value = self.minimum + self.step * round((value - self.minimum) / self.step)
        return min(max(value, self.minimum), self.maximum)


def _bool(pid: str, name: str, default: bool) -> ParameterSpec:
    return ParameterSpec(pid, name, ParameterKind.BOOL, 0.0, 1.0, 1.0 if default else 0.0)


def _choice(pid: str, name: str, choices: tuple[str, ...], default: int) -> ParameterSpec:
    return ParameterSpec(
        pid, name, ParameterKind.CHOICE, 0.0, float(len(choices) - 1), float(default),
        step=1.0, choices=choices,
    )


def _int(pid: str, name: str, minimum: int, maximum: int, default: int) -> ParameterSpec:
    return ParameterSpec(
        pid, name, ParameterKind.INT, float(minimum), float(maximum), float(default), step=1.0
    )


def _float(
    pid: str,
    name: str,
    minimum: float,
    maximum: float,
    default: float,
    step: float = 0.0,
    skew: float = 1.0,
) -> ParameterSpec:
    return ParameterSpec(
        pid, name, ParameterKind.FLOAT, minimum, maximum, default, step=step, skew=skew
    )


_SPECS: tuple[ParameterSpec, ...] = (
    # Meta
    _bool("isAdvancedPanelOpen_raw", "Advanced", False),
    _choice(
        "colorScheme",
        "Color Scheme",
        ("YMCK", "YMCK Dark", "Japan", "Worldwide", "Monotone", "Mono Dark"),
        0,
    ),
    # Basic
    _choice("osc", "OSC Type", ("Pulse/Square", "Triangle", "Noise"), 0),
    _float("gain", "Gain", 0.0, 1.0, 0.5),
    _float("maxPoly", "Max Poly", 1.0, 64.0, 8.0, step=1.0, skew=1.0),
    # ADSR
    _float("attack", "Attack", 0.0, 5.0, 0.0, step=0.001, skew=0.5),
    _float("decay", "Decay", 0.0, 5.0, 0.0, step=0.001, skew=0.5),
    _float("suslevel", "Sustain", 0.0, 1.0, 1.0),
    _float("release", "Release", 0.0, 5.0, 0.0, step=0.001, skew=0.5),
    # Monophonic
    _choice(
        "monophonicBehavior_raw",
        "Behavior",
        ("Legato", "Arpeggio Up", "Arpeggio Down", "Non-legato"),
        0,
    ),
    _choice(
        "arpeggioIntervalType_raw",
        "Interval",
        ("1 frame", "2 frames", "3 frames", "96th", "64th", "48th", "32nd", "24th", "Slider"),
        0,
    ),
    _float("arpeggioIntervalSliderValue", "Interval", 0.001, 0.3, 0.001, step=0.001, skew=0.5),
    _float("portamentoTime", "Portamento Time", 0.0, 1.0, 0.0),
    # Bend
    _int("bendRange", "Bend Range", 0, 24, 2),
    # Vibrato
    _float("vibratoRate", "Rate", 0.01, 1.0, 0.15, step=0.001, skew=0.5),
    _float("vibratoDepth", "Depth", 0.0, 2.0, 0.0),
    _float("vibratoDelay", "Delay", 0.0, 1.0, 0.3),
    _bool("vibratoIgnoresWheel_raw", "Ignores Wheel", True),
    # Sweep
    _int("sweepInitialPitch", "Ini.Pitch", -24, 24, 0),
    _float("sweepTime", "Time", 0.01, 5.0, 0.1, step=0.001, skew=0.5),
    # Pulse
    _choice("duty", "Duty", ("12.5%", "25%", "50%"), 0),
    # Noise
    _choice(
        "noiseAlgorithm_raw",
        "Algorithm",
        ("4bit Pure Random", "1bit Long Cycle", "1bit Short Cycle"),
        0,
    ),
    _bool("restrictsToNESFrequency_raw", "Restricts to NES frequency", False),
    # Sequences
    _bool("isVolumeSequenceEnabled_raw", "Enabled", False),
    _bool("isCoarsePitchSequenceEnabled_raw", "Enabled", False),
    _bool("isFinePitchSequenceEnabled_raw", "Enabled", False),
    _bool("isDutySequenceEnabled_raw", "Enabled", False),
    _choice("finePitchSequenceMode_raw", "Mode", ("Fine8", "Fine16"), 0),
)


def parameter_specs() -> tuple[ParameterSpec, ...]:
    """Return every parameter specification in declaration order."""
    return _SPECS


def default_values() -> dict[str, float]:
    """Return a mapping from parameter id to its default raw value."""
    return {spec.id: spec.default for spec in _SPECS}