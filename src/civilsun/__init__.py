"""Civil sunrise and sunset times from a closed-form solar position model."""

from .core.daylight import (
    CIVIL_ZENITH,
    Daylight,
    GeoPosition,
    SunEvent,
    SunEventKind,
    SunEvents,
    compute_sun_events,
)
from .core.errors import (
    InvalidDate,
    InvalidLatitude,
    InvalidLongitude,
    InvalidPosition,
    PolarUndefined,
    SunError,
)
from .core.julian import CalendarDate

__version__ = "0.1.0"

__all__ = [
    "CIVIL_ZENITH",
    "CalendarDate",
    "Daylight",
    "GeoPosition",
    "InvalidDate",
    "InvalidLatitude",
    "InvalidLongitude",
    "InvalidPosition",
    "PolarUndefined",
    "SunError",
    "SunEvent",
    "SunEventKind",
    "SunEvents",
    "compute_sun_events",
]
