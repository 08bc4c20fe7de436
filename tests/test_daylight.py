import math
from datetime import date, datetime, timedelta, timezone

import pytest

from civilsun.core.daylight import (
  CIVIL_ZENITH,
  Daylight,
  GeoPosition,
  SunEvent,
  SunEventKind,
  compute_sun_events,
  hour_angle,
  normalize_minutes,
  utc_minutes_from_midnight,
)
from civilsun.core.errors import InvalidLatitude, InvalidLongitude, PolarUndefined
from civilsun.core.julian import CalendarDate

VORONEZH = GeoPosition(51.671667, 39.210556)


def test_voronezh_new_year_utc():
  ev = compute_sun_events(CalendarDate(2024, 1, 1), VORONEZH, 0)
  assert ev.sunrise.kind is SunEventKind.SUNRISE
  assert ev.sunset.kind is SunEventKind.SUNSET
  assert ev.sunrise.minutes == pytest.approx(329.67, abs=0.5)
  assert ev.sunset.minutes == pytest.approx(803.31, abs=0.5)
  assert ev.sunrise.clock() == "05:29"
  assert ev.sunset.clock() == "13:23"
  assert ev.hour_angle == pytest.approx(59.205, abs=0.01)


def test_voronezh_new_year_moscow_time():
  ev = compute_sun_events(CalendarDate(2024, 1, 1), VORONEZH, 180)
  assert ev.sunrise.minutes == pytest.approx(509.67, abs=0.5)
  assert ev.sunset.minutes == pytest.approx(983.31, abs=0.5)
  assert ev.sunrise.hour == 8
  assert ev.sunset.hour == 16


def test_equator_on_march_equinox():
  ev = compute_sun_events(CalendarDate(2024, 3, 20), GeoPosition(0.0, 0.0), 0)
  eqtime = ev.solar.equation_of_time
  assert ev.hour_angle == pytest.approx(90.833, abs=0.01)
  assert ev.sunrise.minutes == pytest.approx(720.0 - 4.0 * ev.hour_angle - eqtime)
  assert ev.sunset.minutes == pytest.approx(720.0 + 4.0 * ev.hour_angle - eqtime)
  # noon is pushed late by the equation of time, about -7.5 min in late March
  assert ev.sunrise.minutes == pytest.approx(360.0, abs=10.0)
  assert ev.sunset.minutes == pytest.approx(1080.0, abs=15.0)
  assert ev.sunrise.clock().startswith("06:0")
  # refraction and the solar disk add a few minutes to an otherwise 12 h day
  assert ev.day_length == pytest.approx(720.0, abs=10.0)
  assert ev.day_length > 720.0


def test_equator_midpoint_does_not_depend_on_longitude():
  noons = []
  for lon in (-150.0, -60.0, 0.0, 45.0, 120.0, 179.0):
    ev = compute_sun_events(CalendarDate(2024, 9, 22), GeoPosition(0.0, lon), 0)
    assert ev.day_length == pytest.approx(720.0, abs=10.0)
    midpoint = (ev.sunrise.minutes + ev.sunset.minutes) / 2
    assert midpoint == pytest.approx(ev.solar_noon)
    noons.append(midpoint + 4.0 * lon)
  assert max(noons) - min(noons) < 0.1


@pytest.mark.parametrize("lat", [-59.0, -45.0, -20.0, 0.0, 20.0, 45.0, 59.0])
@pytest.mark.parametrize("month", [1, 3, 6, 9, 12])
def test_sunrise_precedes_noon_precedes_sunset(lat, month):
  ev = compute_sun_events(CalendarDate(2024, month, 15), GeoPosition(lat, 13.4), 60)
  assert ev.sunrise.minutes < ev.solar_noon < ev.sunset.minutes


def test_daylight_grows_with_latitude_in_northern_summer():
  lengths = [
    compute_sun_events(CalendarDate(2024, 6, 21), GeoPosition(lat, 0.0)).day_length
    for lat in range(0, 61, 10)
  ]
  assert lengths == sorted(lengths)
  assert len(set(lengths)) == len(lengths)


def test_daylight_shrinks_with_latitude_in_northern_winter():
  lengths = [
    compute_sun_events(CalendarDate(2024, 12, 21), GeoPosition(lat, 0.0)).day_length
    for lat in range(0, 61, 10)
  ]
  assert lengths == sorted(lengths, reverse=True)


def test_southern_hemisphere_mirrors_season():
  june = [
    compute_sun_events(CalendarDate(2024, 6, 21), GeoPosition(-lat, 0.0)).day_length
    for lat in range(0, 61, 10)
  ]
  assert june == sorted(june, reverse=True)


def test_deterministic():
  a = compute_sun_events(CalendarDate(2024, 7, 4), GeoPosition(40.7128, -74.006), -240)
  b = compute_sun_events(CalendarDate(2024, 7, 4), GeoPosition(40.7128, -74.006), -240)
  assert a == b
  assert a.sunrise.minutes == b.sunrise.minutes
  assert a.sunset.minutes == b.sunset.minutes


def test_timezone_offset_is_added():
  pos = GeoPosition(0.5, 10.0)
  utc = compute_sun_events(CalendarDate(2024, 5, 1), pos, 0)
  local = compute_sun_events(CalendarDate(2024, 5, 1), pos, 120)
  assert local.sunrise.minutes - utc.sunrise.minutes == pytest.approx(120.0, abs=0.25)
  assert local.sunset.minutes - utc.sunset.minutes == pytest.approx(120.0, abs=0.25)


def test_minutes_are_not_wrapped():
  # far west with a strongly positive offset pushes sunset past local midnight
  ev = compute_sun_events(CalendarDate(2024, 6, 21), GeoPosition(30.0, -170.0), 14 * 60)
  assert ev.sunset.minutes > 1440
  wrapped, shift = normalize_minutes(ev.sunset.minutes)
  assert 0 <= wrapped < 1440
  assert shift == 1


def test_normalize_minutes():
  assert normalize_minutes(100.0) == (100.0, 0)
  assert normalize_minutes(-30.0) == (1410.0, -1)
  assert normalize_minutes(1500.0) == (60.0, 1)


def test_hour_angle_at_equinox_equator():
  ha = hour_angle(0.0, 0.0)
  assert ha == pytest.approx(90.833)
  # a 90 degree zenith with zero declination is exactly six hours from noon
  assert hour_angle(0.0, 0.0, zenith=90.0) == pytest.approx(90.0)
  assert hour_angle(45.0, 0.0, zenith=90.0) == pytest.approx(90.0)


def test_sign_flips_only_in_time_conversion():
  assert utc_minutes_from_midnight(0.0, 0.0, 90.0) == pytest.approx(360.0)
  assert utc_minutes_from_midnight(0.0, 0.0, -90.0) == pytest.approx(1080.0)
  assert utc_minutes_from_midnight(15.0, -2.0, 0.0) == pytest.approx(662.0)


def test_larger_zenith_lengthens_the_day():
  pos = GeoPosition(48.85, 2.35)
  civil = compute_sun_events(CalendarDate(2024, 4, 10), pos, 120)
  geometric = compute_sun_events(CalendarDate(2024, 4, 10), pos, 120, zenith=90.0)
  twilight = compute_sun_events(CalendarDate(2024, 4, 10), pos, 120, zenith=96.0)
  assert geometric.day_length < civil.day_length < twilight.day_length
  assert CIVIL_ZENITH == 90.833


@pytest.mark.parametrize("lat", [90.0, -90.0])
def test_poles_raise_polar_undefined(lat):
  with pytest.raises(PolarUndefined) as excinfo:
    compute_sun_events(CalendarDate(2024, 6, 21), GeoPosition(lat, 0.0))
  assert excinfo.value.polar_day == (lat > 0)


def test_polar_day_and_night():
  with pytest.raises(PolarUndefined) as day:
    compute_sun_events(CalendarDate(2024, 6, 21), GeoPosition(80.0, 15.0), 60)
  assert day.value.polar_day
  assert day.value.cos_hour_angle < -1.0
  with pytest.raises(PolarUndefined) as night:
    compute_sun_events(CalendarDate(2024, 12, 21), GeoPosition(80.0, 15.0), 60)
  assert not night.value.polar_day
  assert night.value.cos_hour_angle > 1.0
  assert not math.isnan(night.value.cos_hour_angle)
  assert "polar night" in str(night.value)


def test_high_latitude_still_defined_off_season():
  ev = compute_sun_events(CalendarDate(2024, 3, 20), GeoPosition(80.0, 15.0), 60)
  assert ev.sunrise.minutes < ev.sunset.minutes


@pytest.mark.parametrize("lat", [90.0001, -91.0, float("nan"), float("inf")])
def test_invalid_latitude(lat):
  with pytest.raises(InvalidLatitude):
    GeoPosition(lat, 0.0)


@pytest.mark.parametrize("lon", [180.5, -181.0, float("nan")])
def test_invalid_longitude(lon):
  with pytest.raises(InvalidLongitude):
    GeoPosition(0.0, lon)


def test_daylight_localizes_to_fixed_offset():
  dl = Daylight(VORONEZH, timezone_offset_minutes=180)
  sunrise, sunset = dl.sunrise_sunset(date(2024, 1, 1))
  assert sunrise.utcoffset() == timedelta(hours=3)
  assert sunrise.date() == date(2024, 1, 1)
  assert (sunrise.hour, sunrise.minute) == (8, 29)
  assert (sunset.hour, sunset.minute) == (16, 23)
  assert sunrise.astimezone(timezone.utc).hour == 5


def test_daylight_rolls_over_date():
  dl = Daylight(GeoPosition(30.0, -170.0), timezone_offset_minutes=14 * 60)
  _, sunset = dl.sunrise_sunset(date(2024, 6, 21))
  assert sunset.date() == date(2024, 6, 22)
  assert sunset.tzinfo is not None
  assert isinstance(sunset, datetime)


def test_clock_of_raw_minutes_outside_the_day():
  assert SunEvent(SunEventKind.SUNRISE, -90.0).clock() == "-01:30"
  assert SunEvent(SunEventKind.SUNSET, 1510.0).clock() == "25:10"
  assert SunEvent(SunEventKind.SUNSET, 0.0).clock() == "00:00"
