"""Helpers for identifiers, string handling, byte conversion and time formatting."""

__version__ = "1.0.0"
__all__ = ["utils"]