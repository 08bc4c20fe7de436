"""Gregorian calendar dates and their Julian Day / Julian century coordinates."""

from dataclasses import dataclass
from datetime import date, datetime
import math

from .errors import InvalidDate

J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
  return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
  if month == 2 and is_leap_year(year):
    return 29
  return _DAYS_IN_MONTH[month - 1]


@dataclass(frozen=True)
class CalendarDate:
  """A civil date in the observer's local calendar.

  `hour` is the fractional local hour of day the solar parameters are
  evaluated at; noon keeps the approximation centered on the daylight span.
  """
  year: int
  month: int
  day: int
  hour: float = 12.0

  def __post_init__(self):
    if not 1 <= self.month <= 12:
      raise InvalidDate(f"month out of range: {self.month}")
    if not 1 <= self.day <= days_in_month(self.year, self.month):
      raise InvalidDate(f"day out of range for {self.year:04d}-{self.month:02d}: {self.day}")
    if not (math.isfinite(self.hour) and 0.0 <= self.hour <= 24.0):
      raise InvalidDate(f"hour of day out of range: {self.hour}")

  @classmethod
  def from_date(cls, d: date, hour: float = 12.0) -> "CalendarDate":
    return cls(d.year, d.month, d.day, hour)

  @classmethod
  def from_datetime(cls, dt: datetime) -> "CalendarDate":
    hour = dt.hour + dt.minute / 60.0 + dt.second / 3600.0 + dt.microsecond / 3_600_000_000.0
    return cls(dt.year, dt.month, dt.day, hour)

  def to_date(self) -> date:
    return date(self.year, self.month, self.day)

  def day_of_year(self) -> int:
    return sum(days_in_month(self.year, m) for m in range(1, self.month)) + self.day


def julian_day_number(d: CalendarDate) -> float:
  # Meeus, Astronomical Algorithms ch. 7, proleptic Gregorian
  year, month = d.year, d.month
  if month <= 2:
    year -= 1
    month += 12
  century = math.floor(year / 100)
  b = 2 - century + math.floor(century / 4)
  jdn = math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + d.day + b - 1524.5
  return jdn + d.hour / 24.0


def julian_century(jdn: float) -> float:
  return (jdn - J2000) / DAYS_PER_CENTURY
