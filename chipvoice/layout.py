"""Editor panel geometry and the visibility and enablement of its sections."""

from __future__ import annotations

from dataclasses import dataclass

from chipvoice.settings import VoiceType

_TOTAL_WIDTH = 640
_TOP_MARGIN = 10
_LEFT_MARGIN = 10
_BOTTOM_MARGIN = 20
_HALF_COMPONENT_WIDTH = 300
_FULL_COMPONENT_WIDTH = 620
_SECTION_SEPARATOR_HEIGHT = 16
_VERTICAL_SEPARATOR_WIDTH = 16
_COMPONENT_MARGIN = 2
_INDEX_HEIGHT = 22
_GENERIC_CONTROL_HEIGHT = 28
_CUSTOM_ENVELOPE_HEIGHT = 56

_BASIC_HEIGHT = _COMPONENT_MARGIN * 2 + _GENERIC_CONTROL_HEIGHT * 2
_MONO_HEIGHT = _COMPONENT_MARGIN * 2 + _INDEX_HEIGHT + _CUSTOM_ENVELOPE_HEIGHT
_TONE_SPECIFIC_HEIGHT = _COMPONENT_MARGIN * 2 + _INDEX_HEIGHT + _GENERIC_CONTROL_HEIGHT
_ENVELOPE_HEIGHT = _COMPONENT_MARGIN * 2 + _INDEX_HEIGHT + _GENERIC_CONTROL_HEIGHT * 4
_BEND_HEIGHT = _COMPONENT_MARGIN * 2 + _INDEX_HEIGHT + _GENERIC_CONTROL_HEIGHT
_SWEEP_HEIGHT = _COMPONENT_MARGIN * 2 + _INDEX_HEIGHT + _GENERIC_CONTROL_HEIGHT * 2
_VIBRATO_HEIGHT = _COMPONENT_MARGIN * 2 + _INDEX_HEIGHT + _GENERIC_CONTROL_HEIGHT * 4
_ADVANCED_HEIGHT = _COMPONENT_MARGIN * 2 + _INDEX_HEIGHT + _CUSTOM_ENVELOPE_HEIGHT * 4

_DUTY_OVERRIDE_WARNING = "Overridden by Duty Envelope"


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in panel pixels."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class PanelState:
    """Which sections are shown and which accept input."""

    pulse_visible: bool
    noise_visible: bool
    mono_visible: bool
    envelope_enabled: bool
    pulse_enabled: bool

    @property
    def pulse_warning(self) -> str:
        """Text shown on the pulse section when the duty sequence overrides it."""
        return "" if self.pulse_enabled else _DUTY_OVERRIDE_WARNING


def total_height(is_advanced_open: bool, is_monophonic: bool) -> int:
    """Return the editor's height for the given panel options."""
    height = (
        _TOP_MARGIN
        + _BASIC_HEIGHT
        + _SECTION_SEPARATOR_HEIGHT
        + _TONE_SPECIFIC_HEIGHT
        + _ENVELOPE_HEIGHT
        + _BEND_HEIGHT
        + _BOTTOM_MARGIN
    )
    if is_advanced_open:
        height += _SECTION_SEPARATOR_HEIGHT + _ADVANCED_HEIGHT
    if is_monophonic:
        height += _MONO_HEIGHT
    return height


def total_width() -> int:
    """Return the editor's fixed width."""
    return _TOTAL_WIDTH


def separator_y() -> int:
    """Return the vertical position of the line below the basic section."""
    return _TOP_MARGIN + _BASIC_HEIGHT + _SECTION_SEPARATOR_HEIGHT // 2


def component_bounds(is_monophonic: bool) -> dict[str, Rect]:
    """Return the bounds of every section, keyed by section name.

    The monophonic section is present only when ``is_monophonic`` is true.
    Pulse and noise sections share one place; only one is shown at a time.
    """
    bounds: dict[str, Rect] = {}
    x = _LEFT_MARGIN
    y = _TOP_MARGIN
    width = _HALF_COMPONENT_WIDTH

    bounds["basic"] = Rect(x, y, _FULL_COMPONENT_WIDTH, _BASIC_HEIGHT)
    y += _BASIC_HEIGHT + _SECTION_SEPARATOR_HEIGHT

    if is_monophonic:
        bounds["mono"] = Rect(x, y, _FULL_COMPONENT_WIDTH, _MONO_HEIGHT)
        y += _MONO_HEIGHT

    left_y = right_y = y

    bounds["pulse"] = Rect(x, left_y, width, _TONE_SPECIFIC_HEIGHT)
    bounds["noise"] = Rect(x, left_y, width, _TONE_SPECIFIC_HEIGHT)
    left_y += _TONE_SPECIFIC_HEIGHT
    bounds["envelope"] = Rect(x, left_y, width, _ENVELOPE_HEIGHT)
    left_y += _ENVELOPE_HEIGHT
    bounds["bend"] = Rect(x, left_y, width, _BEND_HEIGHT)
    left_y += _BEND_HEIGHT

    x = _LEFT_MARGIN + _HALF_COMPONENT_WIDTH + _VERTICAL_SEPARATOR_WIDTH
    bounds["sweep"] = Rect(x, right_y, width, _SWEEP_HEIGHT)
    right_y += _SWEEP_HEIGHT
    bounds["vibrato"] = Rect(x, right_y, width, _VIBRATO_HEIGHT)
    right_y += _VIBRATO_HEIGHT

    advanced_y = max(left_y, right_y) + _SECTION_SEPARATOR_HEIGHT
    bounds["advanced"] = Rect(
        _LEFT_MARGIN, advanced_y, _FULL_COMPONENT_WIDTH, _ADVANCED_HEIGHT
    )
    return bounds


def panel_state(
    oscillator_type: VoiceType | int,
    is_monophonic: bool,
    volume_sequence_enabled: bool,
    duty_sequence_enabled: bool,
) -> PanelState:
    """Work out section visibility and enablement from the current settings.

    An enabled volume sequence disables the envelope section; an enabled duty
    sequence disables the pulse section.
    """
    kind = int(oscillator_type)
    return PanelState(
        pulse_visible=kind == VoiceType.PULSE,
        noise_visible=kind == VoiceType.NOISE,
        mono_visible=bool(is_monophonic),
        envelope_enabled=not volume_sequence_enabled,
        pulse_enabled=not duty_sequence_enabled,
    )