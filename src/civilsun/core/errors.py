"""Errors raised by the sunrise/sunset engine."""


class SunError(ValueError):
  """Base class for every input the engine refuses to compute."""


class InvalidDate(SunError):
  pass


class InvalidPosition(SunError):
  pass


class InvalidLatitude(InvalidPosition):
  pass


class InvalidLongitude(InvalidPosition):
  pass


class PolarUndefined(SunError):
  """The sun never crosses the zenith threshold on this day at this latitude.

  `cos_hour_angle` is the arc-cosine argument that fell outside [-1, 1]:
  above 1 the sun stays below the threshold (polar night), below -1 it
  stays above it (polar day).
  """

  def __init__(self, latitude: float, declination: float, cos_hour_angle: float):
    self.latitude = latitude
    self.declination = declination
    self.cos_hour_angle = cos_hour_angle
    kind = "polar day" if self.polar_day else "polar night"
    super().__init__(
      f"no sunrise or sunset at latitude {latitude:.4f} "
      f"(declination {declination:.4f}): {kind}"
    )

  @property
  def polar_day(self) -> bool:
    return self.cos_hour_angle < 0
