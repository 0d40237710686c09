# polysynth

Building blocks for a small polyphonic synthesizer that renders audio in
blocks at 48 kHz: envelopes, a voice mixer, a modulated biquad filter, a
MIDI byte-stream parser, note-to-voice allocation, a seesaw I2C register
client and the text layout of the parameter pages.

Everything is plain Python with no dependencies outside the standard
library.

## Modules

- `polysynth.envelope`: `Envelope` is an ADSR envelope whose values run
  from 0 to 1. Its current phase is `Envelope.stage`, one of
  `Stage.ATTACK`, `Stage.DECAY`, `Stage.SUSTAIN` and `Stage.RELEASE`.
  `trigger()` and `release()` mark a request that takes effect on the
  first frame of the next block. If both are pending, the trigger wins.
  `render(attack, decay, sustain, release)` returns the next block of
  values, 512 by default (`BLOCK_FRAMES`). Times are in milliseconds, and
  `sustain` is the level held after the decay. `reset()` returns the
  envelope to silence.
- `polysynth.mixer`: `mix_voices(voices, envelopes, envelope_amount, lfo, lfo_amount)`
  adds any number of voices together. Each voice is scaled by its own
  envelope, and the sum is then scaled by the LFO. The result is clipped
  to 16-bit integers. The scale factors are recomputed every
  `CONTROL_PERIOD` (11) frames, and only when a modulation amount is
  non-zero. A zero voice sample repeats that voice's previous scaled
  sample. Every sequence must have the same length, or `ValueError` is
  raised.
- `polysynth.filter`: `BiquadFilter(freq_table)` is a single-stage biquad
  filter. `FilterType` selects `LPF`, `BPF` or `HPF`.
  `process(samples, cutoff, q, lfo, lfo_amount, envelope, envelope_amount, drive, filter_type)`
  filters one block. The LFO and the envelope shift the cutoff through
  `freq_table`: an entry minus 20 is added to the cutoff, and the entry
  is indexed by value × amount × 26860. The output is multiplied by
  `drive` and saturates at ±32767. The filter keeps its history between
  calls, and `reset()` clears it. A table index out of range, or a `q` of
  zero, raises `ValueError`.
- `polysynth.midi`: `MidiParser(handler, channel)` turns bytes passed to
  `feed(data)` into calls on a `MidiHandler`. It handles running status.
  `channel` is 0–15, or `None` to listen on every channel. The messages
  passed on are note on, note off, control change and pitch bend. A note
  on with velocity 0 is passed on as a note off. The byte `0xFF` calls
  `system_reset()`. The base `MidiHandler` only counts the calls it
  receives. `message_length(status)` gives the number of data bytes
  after a status byte, or `None` for unsupported messages.
- `polysynth.voices`: `VoiceAllocator(envelopes)` is a `MidiHandler`
  with one voice per envelope.
  - A note on goes to the first free voice. It sets that voice's entry
    in `frequencies` and triggers its envelope. When every voice is busy,
    the note is dropped.
  - A note off frees the voice playing that note and releases its
    envelope.

  `note_to_frequency_table()` gives the whole-hertz frequency of all 128
  MIDI notes, with A4 at 440 Hz. `SynthParams` holds the patch settings
  with their defaults, and `WaveShape` names the waveforms.
- `polysynth.seesaw`: `Seesaw(bus, address)` reads and writes seesaw
  registers. A register is addressed by module base and function, and
  `register_address(module, function)` builds the 16-bit address. A
  transfer that raises `OSError` is tried once more.
  - `I2CBus` is an in-memory bus that stores written bytes.
  - To reach real devices, subclass it and override `write_register` and
    `read_register`.
- `polysynth.screen`: `render_page(page, params)` returns the
  `TextLine`s (x, y, text) of a `Page` for a `SynthParams`. The `INIT`
  and `START` pages are empty.

## Example

```python
from polysynth.envelope import Envelope
from polysynth.filter import BiquadFilter, FilterType
from polysynth.midi import MidiParser
from polysynth.mixer import mix_voices
from polysynth.voices import VoiceAllocator

envelopes = [Envelope() for _ in range(4)]
allocator = VoiceAllocator(envelopes)
parser = MidiParser(allocator, None)  # None: listen on every channel

parser.feed(bytes([0x90, 60, 100]))  # note on, middle C
print(allocator.frequencies)         # [261, 0, 0, 0]

env_blocks = [e.render(10, 50, 0.5, 200) for e in envelopes]
frames = len(env_blocks[0])
voices = [[1000] * frames] + [[0] * frames] * 3
lfo = [0.0] * frames

mixed = mix_voices(voices, env_blocks, 1.0, lfo, 0.0)
lowpass = BiquadFilter([20.0])       # no cutoff modulation used here
out = lowpass.process(mixed, 20000, 1.0, lfo, 0.0, env_blocks[0], 0.0, 2.2, FilterType.LPF)
```

## What it does not do

The package has no oscillators and no LFO waveform generator. The voice
and LFO sample blocks have to come from elsewhere. It does not open an
audio device, read MIDI from a port, or draw on a display. `render_page`
only lays out text lines. There is no command-line program.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```