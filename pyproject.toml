[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polysynth"
version = "0.1.0"
description = "Polyphonic synthesizer building blocks: ADSR envelopes, voice mixer, biquad filter, MIDI parsing, voice allocation and display page layout"
requires-python = ">=3.10"
dependencies = []
keywords = ["synthesizer", "audio", "midi", "adsr", "biquad", "filter", "dsp", "seesaw", "i2c"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["polysynth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
