import dataclasses
import logging
import sys

import click
import yaml
from pydantic import ValidationError

from ..core.daylight import CIVIL_ZENITH, Daylight, GeoPosition, SunEvent, normalize_minutes
from ..core.errors import SunError
from ..io.schema import build_record
from ..model.location import load_config
from ..runtime.clock import SystemClock

logger = logging.getLogger(__name__)


def format_event(event: SunEvent) -> str:
  wrapped, shift = normalize_minutes(event.minutes)
  text = dataclasses.replace(event, minutes=wrapped).clock()
  if shift:
    text += f" ({shift:+d}d)"
  return text


def _fail(message: str):
  click.echo(f"ERROR: {message}", err=True)
  sys.exit(1)


@click.command()
@click.option("--latitude", type=float, envvar="CIVILSUN_LATITUDE", help="Latitude in degrees, north positive")
@click.option("--longitude", type=float, envvar="CIVILSUN_LONGITUDE", help="Longitude in degrees, east positive")
@click.option("--location", "location_name", help="Named location from the locations file; excludes --latitude/--longitude")
@click.option("--config", type=click.Path(exists=True, dir_okay=False), help="Locations YAML file (default: bundled)")
@click.option("--date", "day", type=click.DateTime(formats=["%Y-%m-%d"]), help="Date to compute (default: today)")
@click.option(
  "--offset",
  type=click.FloatRange(-1440, 1440, min_open=True, max_open=True),
  help="Local minus UTC offset in minutes (default: system timezone)",
)
@click.option(
  "--zenith",
  type=click.FloatRange(0, 180, min_open=True, max_open=True),
  help=f"Solar zenith angle at rise/set (default: {CIVIL_ZENITH})",
)
@click.option("--now", "at_current_time", is_flag=True, help="Evaluate the sun at the current time of day, not local noon")
@click.option("-s", "--simple", is_flag=True, help="Only print the two times")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON record")
@click.option("-v", "--verbose", is_flag=True, help="Log intermediate solar parameters")
@click.pass_context
def main(ctx, latitude, longitude, location_name, config, day, offset, zenith, at_current_time, simple, as_json, verbose):
  """Print the civil sunrise and sunset for a location.

  Examples:
      civilsun --latitude 51.671667 --longitude 39.210556

      civilsun --location greenwich --date 2024-06-21 -s
  """
  logging.basicConfig(
    level=logging.DEBUG if verbose else logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
  )

  # read the wall clock once; everything below works from this snapshot
  clock = (ctx.obj or {}).get("clock") or SystemClock()
  snapshot = clock.snapshot(day.date() if day is not None else None)

  loc = None
  if location_name and (latitude is not None or longitude is not None):
    _fail("--location cannot be combined with --latitude/--longitude")
  if latitude is None and longitude is None:
    try:
      loc = load_config(config).resolve(location_name)
    except KeyError as e:
      _fail(e.args[0])
    except (ValidationError, yaml.YAMLError) as e:
      _fail(f"invalid locations file: {e}")
    latitude, longitude = loc.latitude, loc.longitude
  elif latitude is None or longitude is None:
    _fail("--latitude and --longitude must be given together")

  if offset is None:
    if loc is not None and loc.timezone_offset_minutes is not None:
      offset = loc.timezone_offset_minutes
    else:
      offset = snapshot.offset_minutes
  if zenith is None:
    zenith = loc.zenith if loc is not None else CIVIL_ZENITH

  hour = snapshot.calendar_date().hour if at_current_time else 12.0
  logger.debug(f"snapshot={snapshot.at.isoformat()} offset={offset}min zenith={zenith} hour={hour:.3f}")

  try:
    daylight = Daylight(GeoPosition(latitude, longitude), offset, zenith)
    events = daylight.events(snapshot.local_date, hour)
  except SunError as e:
    _fail(str(e))

  if as_json:
    record = build_record(
      snapshot.local_date,
      daylight.position,
      offset,
      events,
      daylight.localize(snapshot.local_date, events.sunrise),
      daylight.localize(snapshot.local_date, events.sunset),
    )
    click.echo(record.model_dump_json(indent=2))
  elif simple:
    click.echo(format_event(events.sunrise))
    click.echo(format_event(events.sunset))
  else:
    at = click.style("at", fg="bright_blue")
    on = click.style("on", fg="bright_magenta")
    bullet = click.style("-", fg="bright_yellow")
    click.echo(f"{at} ({latitude}, {longitude}) {on} {snapshot.local_date.strftime('%d.%m.%Y')}:")
    click.echo(f" {bullet} sunrise: {format_event(events.sunrise)}")
    click.echo(f" {bullet} sunset: {format_event(events.sunset)}")


if __name__ == "__main__":
  main()
