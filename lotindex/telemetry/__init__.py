"""Telemetry helpers.

This package emits phase-level run events for CLI commands.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
