"""Deterministic location-based coin cache game engine."""

__version__ = "0.1.0"
