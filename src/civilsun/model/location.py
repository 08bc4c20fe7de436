from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field

from ..core.daylight import CIVIL_ZENITH, GeoPosition

DEFAULT_CONFIG = Path(__file__).parent.parent / "config" / "locations.yaml"


class LocationConfig(BaseModel):
  latitude: float = Field(ge=-90.0, le=90.0)
  longitude: float = Field(ge=-180.0, le=180.0)
  timezone_offset_minutes: Optional[float] = Field(default=None, gt=-1440.0, lt=1440.0)
  zenith: float = Field(default=CIVIL_ZENITH, gt=0.0, lt=180.0)

  def to_position(self) -> GeoPosition:
    return GeoPosition(self.latitude, self.longitude)


class SunConfig(BaseModel):
  default_location: Optional[str] = None
  locations: Dict[str, LocationConfig] = {}

  def resolve(self, name: Optional[str] = None) -> LocationConfig:
    key = name or self.default_location
    if key is None:
      raise KeyError("no location given and no default_location configured")
    if key not in self.locations:
      known = ", ".join(sorted(self.locations)) or "none"
      raise KeyError(f"unknown location '{key}' (known: {known})")
    return self.locations[key]


def load_config(path: Optional[str] = None) -> SunConfig:
  source = Path(path) if path else DEFAULT_CONFIG
  raw = yaml.safe_load(source.read_text(encoding="utf-8")) or {}
  return SunConfig(**raw)
