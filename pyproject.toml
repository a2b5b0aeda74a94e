[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chipvoice"
version = "0.1.0"
description = "Chiptune voice model: pulse and triangle waveforms, frame sequences, bend, vibrato, legato, arpeggio, settings and panel layout"
requires-python = ">=3.10"
dependencies = []
keywords = ["chiptune", "8bit", "synthesizer", "nes", "arpeggio", "envelope"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chipvoice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
