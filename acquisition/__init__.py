"""Tactical Target Acquisition - timed nearest-target challenges over HTTP."""

__version__ = "0.1.0"
