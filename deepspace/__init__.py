"""Spacecraft, orbital and launch-vehicle simulation with scripted mission control."""

__version__ = "0.2.0"