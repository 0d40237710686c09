"""Polyphonic synthesizer building blocks: envelopes, mixer, biquad filter, MIDI parsing, voice allocation, seesaw I2C access and display page layout."""

__version__ = "0.1.0"