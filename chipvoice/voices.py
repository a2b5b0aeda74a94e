"""Tonal voices: pitch, bend, vibrato, legato and arpeggio handling."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from chipvoice.frame_sequence import FrameSequence
from chipvoice.settings import (
    EnvelopePhase,
    FinePitchSequenceMode,
    PulseDuty,
    SequenceKind,
    Settings,
)

NUM_NOTE_BUFFER = 10
MODULATION_CONTROLLER = 1
PITCH_WHEEL_CENTRE = 8192

_TRIANGLE_LEVELS = (
    1, 2, 3, 4, 5, 6, 7, 8,
    8, 7, 6, 5, 4, 3, 2, 1,
    0, -1, -2, -3, -4, -5, -6, -7,
    -7, -6, -5, -4, -3, -2, -1, 0,
)

_DUTY_RATES = {
    PulseDuty.DUTY_12_5: 0.25,
    PulseDuty.DUTY_25: 0.50,
    PulseDuty.DUTY_50: 1.00,
}


def note_to_hertz(note_number: float, frequency_of_a: float = 440.0) -> float:
    """Return the frequency of a (possibly fractional) MIDI note number."""
    return frequency_of_a * 2.0 ** ((note_number - 69) / 12.0)


class TonalVoice(ABC):
    """Common behaviour of the pitched voices (pulse and triangle)."""

    def __init__(self, settings: Settings, sample_rate: float = 44100.0) -> None:
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        self.settings = settings
        self.sample_rate = float(sample_rate)

        self.note_number = 0
        self.velocity = 0.0
        self.angle_delta = 0.0
        self.envelope_phase = EnvelopePhase.ATTACK
        self.current_volume_sequence_frame = 0

        self.current_bend_amount = 0.0
        self.current_auto_bend_amount = 0.0
        self.auto_bend_delta = 0.0

        self.vibrato_count = 0
        self.current_mod_wheel_value = 0.0

        self.current_coarse_pitch_sequence_frame = 0
        self.current_fine_pitch_sequence_frame = 0

        self.note_buffer: list[int] = []
        self.retire_buffer: list[int] = []
        self.primary_midi_channel = 1

        self.portamento_time = 0.0

        self.current_arpeggio_frame = 0
        self.arpeggio_frame_timer = 0.0
        self.arpeggio_frame_length = 0.0

    # note lifecycle

    def start_note(
        self, midi_note_number: int, velocity: float, pitch_wheel_position: int
    ) -> None:
        """Begin a note and reset every per-note state."""
        self.note_number = midi_note_number
        self.velocity = velocity
        self.envelope_phase = EnvelopePhase.ATTACK
        self.current_volume_sequence_frame = 0

        self.pitch_wheel_moved(pitch_wheel_position)
        self.current_coarse_pitch_sequence_frame = 0
        self.current_fine_pitch_sequence_frame = 0
        self.vibrato_count = 0

        initial_pitch = self.settings["sweepInitialPitch"]
        sweep_time = self.settings["sweepTime"]
        self.current_auto_bend_amount = initial_pitch
        self.auto_bend_delta = -1.0 * initial_pitch / (sweep_time * self.sample_rate)

        self.portamento_time = 0.0
        self.current_arpeggio_frame = 0
        self.arpeggio_frame_timer = 0.0
        self.arpeggio_frame_length = 0.0
        self.note_buffer = []
        self.retire_buffer = []

    def advance_control_frame(self) -> None:
        """Step the pitch sequences by one control frame."""
        self.current_coarse_pitch_sequence_frame = self._sequence(
            SequenceKind.COARSE_PITCH
        ).next_index_of(self.current_coarse_pitch_sequence_frame)
        self.current_fine_pitch_sequence_frame = self._sequence(
            SequenceKind.FINE_PITCH
        ).next_index_of(self.current_fine_pitch_sequence_frame)

    def calculate_angle_delta(self) -> float:
        """Recompute and return the phase increment per sample, in radians."""
        note_mod = 0
        fine_pitch = 0.0

        if self.settings.is_coarse_pitch_sequence_enabled():
            note_mod = self._sequence(SequenceKind.COARSE_PITCH).value_at(
                self.current_coarse_pitch_sequence_frame
            )

        if self.settings.is_fine_pitch_sequence_enabled():
            raw = self._sequence(SequenceKind.FINE_PITCH).value_at(
                self.current_fine_pitch_sequence_frame
            )
            mode = self.settings.fine_pitch_sequence_mode()
            if mode is FinePitchSequenceMode.FINE_16:
                fine_pitch = raw / 16.0
            elif mode is FinePitchSequenceMode.FINE:
                fine_pitch = raw / 8.0

        by_wheel = 1.0 if self.settings.vibrato_ignores_wheel() else self.current_mod_wheel_value
        vibrato = self.settings["vibratoDepth"] * math.sin(self.vibrato_phase()) * by_wheel

        note = (
            self.note_number
            + note_mod
            + self.current_bend_amount
            + self.current_auto_bend_amount
            + vibrato
            + fine_pitch
        )
        cycles_per_sample = note_to_hertz(note) / self.sample_rate
        self.angle_delta = cycles_per_sample * 2.0 * math.pi
        return self.angle_delta

    def pitch_wheel_moved(self, amount: int) -> None:
        """Convert a 14-bit pitch wheel position into a bend in semitones."""
        self.current_bend_amount = (
            self.settings["bendRange"] * (amount - PITCH_WHEEL_CENTRE) / PITCH_WHEEL_CENTRE
        )

    def controller_moved(self, controller: int, amount: int) -> None:
        """React to a MIDI control change; only modulation is used."""
        if controller == MODULATION_CONTROLLER:
            self.current_mod_wheel_value = amount / 127.0

    # legato

    def set_legato_mode(self, time: float, midi_channel: int) -> None:
        self.portamento_time = time
        self.primary_midi_channel = midi_channel

    def add_legato_note(self, midi_note_number: int, velocity: float) -> None:
        """Switch to a new note without restarting; glide if portamento is set."""
        if len(self.note_buffer) >= NUM_NOTE_BUFFER:
            return
        previous = self.note_number
        self.note_number = midi_note_number
        self.velocity = velocity

        if self.portamento_time > 0:
            self.current_auto_bend_amount = float(previous - midi_note_number)
            self.auto_bend_delta = (
                -1.0 * self.current_auto_bend_amount / (self.portamento_time * self.sample_rate)
            )

    def remove_legato_note(self, midi_note_number: int) -> int:
        """Return 0 when the released note is the sounding one, else 1."""
        return 0 if midi_note_number == self.note_number else 1

    # arpeggio

    def set_arpeggio_mode(self, interval: float, midi_channel: int) -> None:
        """Enable arpeggio with ``interval`` seconds per step."""
        self.arpeggio_frame_length = interval
        self.arpeggio_frame_timer = 0.0
        self.current_arpeggio_frame = 0
        self.note_buffer = [self.note_number]
        self.primary_midi_channel = midi_channel

    def add_arpeggio_note_ascending(self, midi_note_number: int) -> None:
        if len(self.note_buffer) >= NUM_NOTE_BUFFER:
            return
        position = next(
            (i for i, note in enumerate(self.note_buffer) if note > midi_note_number),
            len(self.note_buffer),
        )
        self.note_buffer.insert(position, midi_note_number)

    def add_arpeggio_note_descending(self, midi_note_number: int) -> None:
        if len(self.note_buffer) >= NUM_NOTE_BUFFER:
            return
        position = next(
            (i for i, note in enumerate(self.note_buffer) if note < midi_note_number),
            len(self.note_buffer),
        )
        self.note_buffer.insert(position, midi_note_number)

    def remove_arpeggio_note(self, midi_note_number: int) -> int:
        """Schedule a note's removal and return how many notes will remain.

        The removal itself happens at the next arpeggio step.
        """
        if not self.note_buffer:
            return 0
        self.retire_buffer.append(midi_note_number)
        return len(self.note_buffer) - len(self.retire_buffer)

    def is_arpeggio_enabled(self) -> bool:
        return self.arpeggio_frame_length > 0

    # per-sample progression

    def vibrato_phase(self) -> float:
        """Return the current vibrato phase in radians (0 during the delay)."""
        seconds = self.vibrato_count / self.sample_rate
        delay = self.settings["vibratoDelay"]
        rate = self.settings["vibratoRate"]
        if seconds < delay:
            return 0.0
        return math.fmod(seconds - delay, rate) / rate * 2.0 * math.pi

    def on_frame_advanced(self) -> None:
        """Advance vibrato, automatic bend and arpeggio by one sample."""
        self.vibrato_count += 1

        self.current_auto_bend_amount += self.auto_bend_delta
        if self.auto_bend_delta > 0:
            if self.current_auto_bend_amount > 0:
                self.current_auto_bend_amount = 0.0
                self.auto_bend_delta = 0.0
        elif self.current_auto_bend_amount < 0:
            self.current_auto_bend_amount = 0.0
            self.auto_bend_delta = 0.0

        if not self.is_arpeggio_enabled():
            return

        self.arpeggio_frame_timer += 1.0 / self.sample_rate
        if self.arpeggio_frame_timer < self.arpeggio_frame_length:
            return

        # Retirements are held back during release so the arpeggio keeps playing.
        if not self.is_in_release_phase():
            for target in self.retire_buffer:
                if target in self.note_buffer:
                    self.note_buffer.remove(target)
            self.retire_buffer = []

        current = self._arpeggio_note(self.current_arpeggio_frame)
        # A slot emptied by retirement reads as 0 and also moves the step on.
        if current == self.note_number or current == 0:
            self.current_arpeggio_frame += 1
            if self.current_arpeggio_frame >= len(self.note_buffer):
                self.current_arpeggio_frame = 0

        self.note_number = self._arpeggio_note(self.current_arpeggio_frame)

        while self.arpeggio_frame_timer >= self.arpeggio_frame_length:
            self.arpeggio_frame_timer -= self.arpeggio_frame_length

    def is_in_release_phase(self) -> bool:
        if self.settings.is_volume_sequence_enabled():
            return self._sequence(SequenceKind.VOLUME).is_in_release(
                self.current_volume_sequence_frame
            )
        return self.envelope_phase == EnvelopePhase.RELEASE

    @abstractmethod
    def voltage_for_angle(self, angle: float) -> float:
        """Return the waveform's output level at phase ``angle`` (radians)."""

    # helpers

    def _sequence(self, kind: SequenceKind) -> FrameSequence:
        return self.settings.sequence(kind)

    def _arpeggio_note(self, index: int) -> int:
        if 0 <= index < len(self.note_buffer):
            return self.note_buffer[index]
        return 0


class PulseVoice(TonalVoice):
    """Pulse wave with selectable duty, optionally driven by a duty sequence."""

    def __init__(self, settings: Settings, sample_rate: float = 44100.0) -> None:
        super().__init__(settings, sample_rate)
        self.current_duty = PulseDuty.DUTY_50
        self.current_duty_sequence_frame = 0

    def start_note(
        self, midi_note_number: int, velocity: float, pitch_wheel_position: int
    ) -> None:
        super().start_note(midi_note_number, velocity, pitch_wheel_position)
        self.current_duty_sequence_frame = 0
        self.current_duty = PulseDuty(int(self.settings["duty"]))

    def voltage_for_angle(self, angle: float) -> float:
        rate = _DUTY_RATES.get(self.current_duty, 1.0)
        return -1.0 if angle < rate * math.pi else 1.0

    def advance_control_frame(self) -> None:
        super().advance_control_frame()
        if self.settings.is_duty_sequence_enabled():
            duty_sequence = self._sequence(SequenceKind.DUTY)
            self.current_duty_sequence_frame = duty_sequence.next_index_of(
                self.current_duty_sequence_frame
            )
            self.current_duty = PulseDuty(
                duty_sequence.value_at(self.current_duty_sequence_frame)
            )


class TriangleVoice(TonalVoice):
    """Stepped 4-bit triangle wave."""

    def voltage_for_angle(self, angle: float) -> float:
        step = int(32 * angle / (2.0 * math.pi))
        if not 0 <= step < len(_TRIANGLE_LEVELS):
            raise ValueError(f"angle {angle} outside one cycle")
        return (_TRIANGLE_LEVELS[step] - 0.5) / 7.5