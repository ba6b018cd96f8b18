"""Yearly per-editor edit statistics from MusicBrainz database dumps."""

__version__ = "1.0.0"
