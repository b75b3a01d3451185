"""Diagnostics, completion and hover for the EDL event description language."""

__version__ = "0.1.0"
