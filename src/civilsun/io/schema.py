from datetime import date, datetime

from pydantic import BaseModel

from ..core.daylight import GeoPosition, SunEvents


class SunTimesRecord(BaseModel):
  day: date
  latitude: float
  longitude: float
  timezone_offset_minutes: float
  sunrise: str
  sunset: str
  sunrise_at: datetime
  sunset_at: datetime
  sunrise_minutes: float
  sunset_minutes: float
  solar_noon_minutes: float
  day_length_minutes: float
  declination_deg: float
  equation_of_time_min: float


def build_record(
  day: date,
  position: GeoPosition,
  offset_minutes: float,
  events: SunEvents,
  sunrise_at: datetime,
  sunset_at: datetime,
) -> SunTimesRecord:
  return SunTimesRecord(
    day=day,
    latitude=position.latitude,
    longitude=position.longitude,
    timezone_offset_minutes=offset_minutes,
    sunrise=sunrise_at.strftime("%H:%M"),
    sunset=sunset_at.strftime("%H:%M"),
    sunrise_at=sunrise_at,
    sunset_at=sunset_at,
    sunrise_minutes=events.sunrise.minutes,
    sunset_minutes=events.sunset.minutes,
    solar_noon_minutes=events.solar_noon,
    day_length_minutes=events.day_length,
    declination_deg=events.solar.declination,
    equation_of_time_min=events.solar.equation_of_time,
  )
