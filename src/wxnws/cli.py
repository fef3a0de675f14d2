"""Command-line entry point for wxnws."""

from __future__ import annotations

import json
import logging

import click

from wxnws.client import NwsClient
from wxnws.config import get_log_level
from wxnws.errors import NwsError
from wxnws.radar.crawler import files_to_dataframe, newest_file
from wxnws.radar.types import RadarType


def _client(ctx: click.Context) -> NwsClient:
    return ctx.obj["client_factory"](ctx.obj["user_agent"])


@click.group()
@click.option("--user-agent", default=None, help="User-Agent header; defaults to WXNWS_USER_AGENT.")
@click.pass_context
def main(ctx: click.Context, user_agent: str | None) -> None:
    """Query api.weather.gov and the RIDGE II radar archive."""

    logging.basicConfig(level=get_log_level(), format="%(levelname)s:%(name)s:%(message)s")
    ctx.ensure_object(dict)
    ctx.obj.setdefault("client_factory", NwsClient)
    ctx.obj["user_agent"] = user_agent


@main.command()
def types() -> None:
    """List the radar product codes."""

    for radar_type in RadarType.values():
        click.echo(radar_type.value)


@main.command()
@click.argument("site")
@click.argument("product", type=click.Choice([t.value for t in RadarType], case_sensitive=False))
@click.option("--newest", is_flag=True, help="Only show the most recently modified file.")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of a table.")
@click.pass_context
def radar(ctx: click.Context, site: str, product: str, newest: bool, as_json: bool) -> None:
    """List the files published for SITE and PRODUCT."""

    try:
        files = _client(ctx).radar(site, RadarType.from_code(product.upper()))
    except NwsError as exc:
        raise click.ClickException(str(exc)) from exc
    if newest:
        latest = newest_file(files)
        if latest is None:
            raise click.ClickException("Listing has no dated files")
        files = [latest]
    if as_json:
        click.echo(json.dumps([item.to_dict() for item in files], indent=2))
        return
    df = files_to_dataframe(files)
    click.echo(df[["name", "last_modified", "size_unit", "size_value"]].to_string(index=False))


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("lat", type=float)
@click.argument("lon", type=float)
@click.pass_context
def point(ctx: click.Context, lat: float, lon: float) -> None:
    """Show the forecast office and grid cell for LAT LON."""

    try:
        result = _client(ctx).points(lat, lon)
    except NwsError as exc:
        raise click.ClickException(str(exc)) from exc
    location = result.relative_location
    click.echo(f"{location.city}, {location.state}: {result.grid_id} {result.grid_x},{result.grid_y}")
    click.echo(f"Radar station: {result.radar_station}")


@main.command()
@click.argument("station")
@click.option("--require-qc", is_flag=True, help="Only accept quality-controlled data.")
@click.pass_context
def latest(ctx: click.Context, station: str, require_qc: bool) -> None:
    """Show the latest observation for STATION."""

    try:
        obs = _client(ctx).stations_observations_latest(station, require_qc=require_qc or None)
    except NwsError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"{obs.timestamp} {obs.text_description}")
    temp = obs.temperature
    if temp.value is not None:
        click.echo(f"Temperature: {temp.value:.1f} {temp.unit_code or ''}".rstrip())
    if obs.raw_message:
        click.echo(obs.raw_message)
