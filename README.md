# chipvoice

A small model of 8-bit style voices. It covers pulse and triangle waveforms
whose pitch and duty follow per-frame sequences. On top of that come pitch
bend, automatic bend (sweep), vibrato, legato portamento and arpeggio. It also
holds the synthesiser's parameter set and works out the geometry of its editor
panel.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `chipvoice.parameters`

- `parameter_specs()` returns every parameter as a `ParameterSpec`, in
  declaration order. Each spec has an id, a display name, a `ParameterKind`
  (`BOOL`, `CHOICE`, `FLOAT`, `INT`), a range, a default, a step, a skew and,
  for choices, the choice labels.
- `ParameterSpec.clamp(value)` returns the nearest legal raw value:
  - booleans become 0.0 or 1.0;
  - choices and ints are rounded and then clamped;
  - stepped floats snap to their step.

  NaN raises `ValueError`.
- `default_values()` maps each parameter id to its default raw value.

### `chipvoice.frame_sequence`

`FrameSequence` holds a list of per-frame values. It has `is_looped`,
`loop_start_index` and `release_sequence_start_index`.

- `value_at(index)` returns 0 when the index is out of range.
- `next_index_of(current)` steps the way a voice does once per frame. In the
  held part it loops back to the loop start or holds the last frame. In the
  release part it moves forward and returns `FrameSequence.SHOULD_RETIRE`
  (65535) after the last frame.
- `is_in_release(index)` tells whether an index lies in the release part.

### `chipvoice.settings`

`Settings` holds raw parameter values, indexed by parameter id:

- `settings["gain"]` reads a value;
- `settings["gain"] = 0.3` clamps and stores it;
- unknown ids raise `KeyError`.

It also holds the four custom sequences of `SequenceKind`: `VOLUME`,
`COARSE_PITCH`, `FINE_PITCH` and `DUTY`.

- `sequence(kind)` and `sequence_string(kind)` return a sequence and the text
  it was defined by.
- `set_sequence(kind, sequence, text)` installs both. It raises `ValueError`
  when a value lies outside the kind's range: 0..15 for volume, -64..63 for
  coarse and fine pitch, 0..2 for duty.
- Accessors such as `oscillator_type()`, `is_monophonic()`,
  `is_duty_sequence_enabled()` and `fine_pitch_sequence_mode()` return plain
  booleans or the enums `VoiceType`, `MonophonicBehavior`,
  `ArpeggioIntervalType`, `PulseDuty`, `NoiseAlgorithm` and
  `FinePitchSequenceMode`. `EnvelopePhase` names the envelope phases.
- `to_xml()` saves the parameter values and sequence strings.
  `Settings.from_xml(text)` restores them and raises `ValueError` for
  malformed documents.

### `chipvoice.voices`

- `note_to_hertz(note_number, frequency_of_a=440.0)` converts a fractional
  MIDI note number to a frequency.
- `TonalVoice` is the abstract base. Per-note operations:
  - `start_note`, `pitch_wheel_moved`, and `controller_moved` (controller 1
    is the modulation wheel);
  - `advance_control_frame`, and `calculate_angle_delta`, which returns the
    phase increment per sample.
- Legato: `set_legato_mode`, `add_legato_note` and `remove_legato_note`.
  Portamento is an automatic bend from the previous note.
- Arpeggio: `set_arpeggio_mode`, `add_arpeggio_note_ascending`,
  `add_arpeggio_note_descending` and `remove_arpeggio_note`. The buffer holds
  at most 10 notes, and removals take effect at the next arpeggio step.
- `on_frame_advanced()` advances vibrato, automatic bend and arpeggio by one
  sample.
- `PulseVoice` outputs a pulse at duty 12.5%, 25% or 50%. It follows the duty
  sequence when that is enabled.
- `TriangleVoice` outputs a 32-step, 4-bit triangle.

### `chipvoice.layout`

- `total_width()` and `total_height(is_advanced_open, is_monophonic)` give the
  editor size.
- `separator_y()` gives the position of the line under the basic section.
- `component_bounds(is_monophonic)` maps section names to `Rect`s.
- `panel_state(...)` returns a `PanelState`. It tells which sections are
  visible and enabled, and gives the pulse section's warning text.

## Example

```python
from chipvoice.parameters import default_values
from chipvoice.settings import Settings
from chipvoice.voices import PulseVoice, note_to_hertz

settings = Settings(default_values())
voice = PulseVoice(settings, 44100.0)
voice.start_note(69, 1.0, 8192)

print(note_to_hertz(69, 440.0))     # 440.0
print(voice.voltage_for_angle(0.1)) # -1.0: low part of the default 12.5% pulse
```

## What it does not do

- It does not render audio buffers, handle MIDI streams or allocate voices.
- It does not model the ADSR amplitude envelope or a noise voice.
- It draws no editor window. `chipvoice.layout` only computes positions and
  states.
- It does not parse sequence text such as `"1, 2x2, 3to4in2 [5, 6]|7, 8"`.
  Sequences are given to `Settings.set_sequence` already built as
  `FrameSequence` objects. `Settings.from_xml` restores sequence strings but
  leaves the sequences themselves empty.