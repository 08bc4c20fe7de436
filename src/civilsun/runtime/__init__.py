"""Runtime collaborators that feed the sunrise/sunset engine."""

from .clock import Clock, ClockSnapshot, FixedClock, SystemClock

__all__ = [
    "Clock",
    "ClockSnapshot",
    "FixedClock",
    "SystemClock",
]
