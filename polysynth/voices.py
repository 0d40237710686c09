"""Synthesiser parameters and the allocation of MIDI notes to voices."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import enum

from .envelope import Envelope
from .filter import FilterType
from .midi import MidiHandler

MIDI_NOTES = 128


def note_to_frequency_table() -> list[int]:
    """Whole-hertz frequency of every MIDI note, equal temperament at A4 = 440 Hz."""
    return [int(440 * 2 ** ((note - 69) / 12.0)) for note in range(MIDI_NOTES)]


class WaveShape(enum.IntEnum):
    """Oscillator waveform."""

    SQU = 0
    SAW = 1
    TRI = 2
    SIN = 3
    NOI = 4


@dataclass
class SynthParams:
    """User-adjustable sound parameters."""

    wave_shape: WaveShape = WaveShape.SAW
    duty_cycle: float = 0.5
    lfo_frequency: float = 20.0
    lfo_step_size: int = 0
    lfo_wave_shape: WaveShape = WaveShape.SQU
    lfo_pitch_mod_amount: float = 0.0
    lfo_amp_mod_amount: float = 0.0
    lfo_filter_mod_amount: float = 0.0
    cutoff: int = 20000
    cutoff_step_size: int = 0
    q: float = 1.0
    dist_amount: float = 2.20
    filter_type: FilterType = FilterType.LPF
    attack: int = 1
    decay: int = 1
    sustain: float = 0.5
    release: int = 1
    envelope_pitch_mod_amount: float = 0.0
    envelope_amp_mod_amount: float = 1.0
    envelope_filter_mod_amount: float = 0.0


class VoiceAllocator(MidiHandler):
    """Assigns incoming notes to the first free voice and drives its envelope.

    One voice exists per envelope. A note arriving when every voice is busy
    is dropped.
    """

    def __init__(self, envelopes: Sequence[Envelope]) -> None:
        super().__init__()
        self.envelopes = list(envelopes)
        if not self.envelopes:
            raise ValueError("at least one voice is needed")
        count = len(self.envelopes)
        self.frequencies = [0] * count
        self.active_notes = [0] * count
        self.available = [True] * count
        self._table = note_to_frequency_table()
        self.note = 0
        self.velocity = 0
        self.note_frequency = 0
        self.control = 0
        self.control_value = 0
        self.pitchbend = 0

    def note_on(self, note: int, velocity: int) -> None:
        self.note = note & 0x7F
        self.note_frequency = self._table[self.note]
        self.velocity = velocity & 0x7F
        for voice, free in enumerate(self.available):
            if free:
                self.frequencies[voice] = self.note_frequency
                self.active_notes[voice] = self.note
                self.envelopes[voice].trigger()
                self.available[voice] = False
                return

    def note_off(self, note: int, velocity: int) -> None:
        self.note = note & 0x7F
        self.velocity = velocity & 0x7F
        for voice, active in enumerate(self.active_notes):
            if active == self.note:
                self.available[voice] = True
                self.active_notes[voice] = 0
                self.envelopes[voice].release()
                return

    def control_change(self, control: int, value: int) -> None:
        self.control = control
        self.control_value = value

    def pitch_bend(self, lsb: int, msb: int) -> None:
        # The high byte only contributes whether it is below 7.
        self.pitchbend = (lsb & 0x7F) | int((msb & 0x7F) < 7)

    def system_reset(self) -> None:
        self.note = 0
        self.velocity = 0
        self.control = 0
        self.control_value = 0
        self.pitchbend = 0