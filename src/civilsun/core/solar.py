"""Solar coordinates as polynomials of the Julian century (NOAA / Meeus low precision).

Every function takes the Julian century `t` since J2000.0 and returns degrees,
except `orbit_eccentricity` (unitless) and `equation_of_time` (minutes).
"""

from dataclasses import dataclass
from math import asin, cos, degrees, radians, sin, tan


def mean_solar_longitude(t: float) -> float:
  return (280.46646 + t * (36000.76983 + 0.0003032 * t)) % 360.0


def mean_solar_anomaly(t: float) -> float:
  return 357.52911 + t * (35999.05029 - 0.0001537 * t)


def orbit_eccentricity(t: float) -> float:
  return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def equation_of_center(t: float) -> float:
  m = radians(mean_solar_anomaly(t))
  return (
    sin(m) * (1.914602 - t * (0.004817 + 0.000014 * t))
    + sin(2 * m) * (0.019993 - 0.000101 * t)
    + sin(3 * m) * 0.000289
  )


def true_longitude(t: float) -> float:
  return mean_solar_longitude(t) + equation_of_center(t)


def _ascending_node(t: float) -> float:
  return 125.04 - 1934.136 * t


def apparent_longitude(t: float) -> float:
  omega = radians(_ascending_node(t))
  return true_longitude(t) - 0.00569 - 0.00478 * sin(omega)


def mean_obliquity(t: float) -> float:
  seconds = 21.448 - t * (46.8150 + t * (0.00059 - t * 0.001813))
  return 23.0 + (26.0 + seconds / 60.0) / 60.0


def obliquity_correction(t: float) -> float:
  omega = radians(_ascending_node(t))
  return mean_obliquity(t) + 0.00256 * cos(omega)


def solar_declination(t: float) -> float:
  eps = radians(obliquity_correction(t))
  lam = radians(apparent_longitude(t))
  return degrees(asin(sin(eps) * sin(lam)))


def equation_of_time(t: float) -> float:
  """Apparent minus mean solar time, in minutes."""
  eps = radians(obliquity_correction(t))
  l0 = radians(mean_solar_longitude(t))
  e = orbit_eccentricity(t)
  m = radians(mean_solar_anomaly(t))

  y = tan(eps / 2.0) ** 2
  sin2l0 = sin(2.0 * l0)
  cos2l0 = cos(2.0 * l0)
  sin4l0 = sin(4.0 * l0)
  sinm = sin(m)
  sin2m = sin(2.0 * m)

  etime = (
    y * sin2l0
    - 2.0 * e * sinm
    + 4.0 * e * y * sinm * cos2l0
    - 0.5 * y * y * sin4l0
    - 1.25 * e * e * sin2m
  )
  return 4.0 * degrees(etime)


@dataclass(frozen=True)
class SolarParameters:
  julian_century: float
  mean_longitude: float
  mean_anomaly: float
  eccentricity: float
  equation_of_center: float
  true_longitude: float
  apparent_longitude: float
  obliquity_correction: float
  declination: float
  equation_of_time: float


def solar_parameters(t: float) -> SolarParameters:
  return SolarParameters(
    julian_century=t,
    mean_longitude=mean_solar_longitude(t),
    mean_anomaly=mean_solar_anomaly(t),
    eccentricity=orbit_eccentricity(t),
    equation_of_center=equation_of_center(t),
    true_longitude=true_longitude(t),
    apparent_longitude=apparent_longitude(t),
    obliquity_correction=obliquity_correction(t),
    declination=solar_declination(t),
    equation_of_time=equation_of_time(t),
  )
