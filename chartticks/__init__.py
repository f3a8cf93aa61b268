"""Tick generation and formatting for chart axes: aligned floats and calendar-aware timestamps."""

__version__ = "0.2.1"

__all__ = ["base", "span", "aligned_floats", "timestamps", "tick"]