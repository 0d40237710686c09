"""Text layout of the parameter pages shown on the synthesiser display."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .filter import FilterType
from .voices import SynthParams, WaveShape

LINE_HEIGHT = 30
"""Vertical distance between text rows, in pixels."""

VALUE_COLUMN = 300
"""Horizontal position of parameter values, in pixels."""


class Page(enum.Enum):
    """Which group of parameters the display shows."""

    INIT = enum.auto()
    START = enum.auto()
    OSC = enum.auto()
    FILTER = enum.auto()
    ADSR = enum.auto()
    ADSR_MOD = enum.auto()
    LFO = enum.auto()
    LFO_MOD = enum.auto()
    FX = enum.auto()


@dataclass(frozen=True)
class TextLine:
    """A string drawn left-aligned at a pixel position."""

    x: int
    y: int
    text: str


def _amount(value: float) -> str:
    return f"{value:.2f}"


def _rows(title: str, fields: list[tuple[str, str]]) -> list[TextLine]:
    lines = [TextLine(0, 0, title)]
    for row, (label, value) in enumerate(fields, start=2):
        lines.append(TextLine(0, row * LINE_HEIGHT, label))
        lines.append(TextLine(VALUE_COLUMN, row * LINE_HEIGHT, value))
    return lines


def render_page(page: Page, params: SynthParams) -> list[TextLine]:
    """The text lines that make up ``page`` for the given parameters."""
    if page in (Page.INIT, Page.START):
        return []
    if page is Page.OSC:
        return _rows("Oscillator Parameters", [
            ("Wave Shape:", WaveShape(params.wave_shape).name),
            ("Duty Cycle:", _amount(params.duty_cycle)),
        ])
    if page is Page.LFO:
        return _rows("LFO Parameters", [
            ("Frequency:", _amount(params.lfo_frequency)),
            ("Step Size:", str(int(params.lfo_step_size))),
            ("Wave Shape:", WaveShape(params.lfo_wave_shape).name),
            ("Duty Cycle:", _amount(params.duty_cycle)),
        ])
    if page is Page.LFO_MOD:
        return _rows("LFO Modulation Destinations", [
            ("Pitch:", _amount(params.lfo_pitch_mod_amount)),
            ("Filter:", _amount(params.lfo_filter_mod_amount)),
            ("Amp:", _amount(params.lfo_amp_mod_amount)),
        ])
    if page is Page.ADSR:
        return _rows("Envelope Parameters", [
            ("Attack:", str(int(params.attack))),
            ("Decay:", str(int(params.decay))),
            ("Sustain:", _amount(params.sustain)),
            ("Release:", str(int(params.release))),
        ])
    if page is Page.ADSR_MOD:
        return _rows("ADSR Modulation Destinations", [
            ("Pitch:", _amount(params.envelope_pitch_mod_amount)),
            ("Filter:", _amount(params.envelope_filter_mod_amount)),
            ("Amp:", _amount(params.envelope_amp_mod_amount)),
        ])
    if page is Page.FILTER:
        return _rows("Filter Parameters", [
            ("Cutoff:", str(int(params.cutoff))),
            ("Step Size:", str(int(params.cutoff_step_size))),
            ("Q:", _amount(params.q)),
            ("Filter Type:", FilterType(params.filter_type).name),
        ])
    return _rows("Effect Parameters", [
        ("Distortion:", _amount(params.dist_amount)),
    ])