"""Chiptune voice model: parameters, frame sequences, settings, tonal voices and panel layout."""

__version__ = "0.1.0"