"""Sunrise and sunset for one observer on one day.

The hour angle at which the sun's center crosses the zenith threshold is
converted into minutes after local midnight. Values are returned raw: an
event can land before 00:00 or after 24:00 when longitude and timezone
offset disagree, and it is up to the caller to wrap it.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from math import acos, cos, degrees, isfinite, radians, tan
import logging

from .errors import InvalidLatitude, InvalidLongitude, PolarUndefined
from .julian import CalendarDate, julian_century, julian_day_number
from .solar import SolarParameters, solar_parameters

logger = logging.getLogger(__name__)

# 90 degrees plus 34' of refraction and 16' of solar semi-diameter
CIVIL_ZENITH = 90.833

MINUTES_PER_DAY = 1440


@dataclass(frozen=True)
class GeoPosition:
  latitude: float
  longitude: float

  def __post_init__(self):
    if not (isfinite(self.latitude) and -90.0 <= self.latitude <= 90.0):
      raise InvalidLatitude(f"latitude must be within [-90, 90]: {self.latitude}")
    if not (isfinite(self.longitude) and -180.0 <= self.longitude <= 180.0):
      raise InvalidLongitude(f"longitude must be within [-180, 180]: {self.longitude}")


class SunEventKind(str, Enum):
  SUNRISE = "sunrise"
  SUNSET = "sunset"


@dataclass(frozen=True)
class SunEvent:
  kind: SunEventKind
  minutes: float

  @property
  def hour(self) -> int:
    return int(self.minutes // 60)

  @property
  def minute(self) -> int:
    return int(self.minutes % 60)

  def clock(self) -> str:
    """HH:MM of the raw minute count; negative counts keep a leading minus."""
    sign = "-" if self.minutes < 0 else ""
    hours, minutes = divmod(int(abs(self.minutes)), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


@dataclass(frozen=True)
class SunEvents:
  sunrise: SunEvent
  sunset: SunEvent
  solar_noon: float
  hour_angle: float
  solar: SolarParameters

  @property
  def day_length(self) -> float:
    return self.sunset.minutes - self.sunrise.minutes


def hour_angle(latitude: float, declination: float, zenith: float = CIVIL_ZENITH) -> float:
  """Hour angle in degrees (always positive) at which the sun reaches `zenith`.

  Raises PolarUndefined when the sun never crosses `zenith` that day.
  """
  lat = radians(latitude)
  decl = radians(declination)
  denom = cos(lat) * cos(decl)
  if abs(denom) < 1e-12:
    # at the pole the sun's altitude is the declination seen from that hemisphere
    altitude = declination if latitude > 0 else -declination
    raise PolarUndefined(latitude, declination, float("-inf") if altitude > 90.0 - zenith else float("inf"))
  cos_ha = cos(radians(zenith)) / denom - tan(lat) * tan(decl)
  if not -1.0 <= cos_ha <= 1.0:
    raise PolarUndefined(latitude, declination, cos_ha)
  return degrees(acos(cos_ha))


def utc_minutes_from_midnight(longitude: float, eqtime: float, ha: float) -> float:
  """UTC minutes of the event for a signed hour angle: +ha for sunrise, -ha for sunset."""
  return 720.0 - 4.0 * (longitude + ha) - eqtime


def normalize_minutes(minutes: float) -> tuple[float, int]:
  """Wrap minutes into [0, 1440) and return them with the day shift applied."""
  shift = int(minutes // MINUTES_PER_DAY)
  return minutes - shift * MINUTES_PER_DAY, shift


def compute_sun_events(
  d: CalendarDate,
  position: GeoPosition,
  timezone_offset_minutes: float = 0.0,
  zenith: float = CIVIL_ZENITH,
) -> SunEvents:
  # the date is local; move the evaluation instant to UT before taking the century
  jdn = julian_day_number(d) - timezone_offset_minutes / MINUTES_PER_DAY
  solar = solar_parameters(julian_century(jdn))
  logger.debug(
    f"jdn={jdn:.5f} declination={solar.declination:.5f} "
    f"eqtime={solar.equation_of_time:.4f}min"
  )

  ha = hour_angle(position.latitude, solar.declination, zenith)
  eqtime = solar.equation_of_time
  sunrise = utc_minutes_from_midnight(position.longitude, eqtime, ha) + timezone_offset_minutes
  sunset = utc_minutes_from_midnight(position.longitude, eqtime, -ha) + timezone_offset_minutes
  noon = utc_minutes_from_midnight(position.longitude, eqtime, 0.0) + timezone_offset_minutes
  logger.debug(f"hour_angle={ha:.5f} sunrise={sunrise:.3f} sunset={sunset:.3f}")

  return SunEvents(
    sunrise=SunEvent(SunEventKind.SUNRISE, sunrise),
    sunset=SunEvent(SunEventKind.SUNSET, sunset),
    solar_noon=noon,
    hour_angle=ha,
    solar=solar,
  )


@dataclass
class Daylight:
  position: GeoPosition
  timezone_offset_minutes: float = 0.0
  zenith: float = CIVIL_ZENITH

  def events(self, d: date, hour: float = 12.0) -> SunEvents:
    return compute_sun_events(
      CalendarDate.from_date(d, hour), self.position, self.timezone_offset_minutes, self.zenith
    )

  def localize(self, d: date, event: SunEvent) -> datetime:
    """Event as an aware datetime at the observer's fixed offset; rolls over the date if needed."""
    tz = timezone(timedelta(minutes=self.timezone_offset_minutes))
    return datetime(d.year, d.month, d.day, tzinfo=tz) + timedelta(minutes=event.minutes)

  def sunrise_sunset(self, d: date) -> tuple[datetime, datetime]:
    ev = self.events(d)
    return self.localize(d, ev.sunrise), self.localize(d, ev.sunset)
