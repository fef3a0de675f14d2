"""Example runner that lists the newest reflectivity file for a radar site."""

from __future__ import annotations

from wxnws.client import NwsClient
from wxnws.radar import RadarType, files_to_dataframe, newest_file


def run_example() -> None:
    """
    Look up the radar serving a point and print its latest BREF file.
    """

    client = NwsClient("wxnws-example (you@example.com)")
    point = client.points(41.48, -81.81)
    files = client.radar(point.radar_station, RadarType.BREF)
    print(files_to_dataframe(files).tail())
    latest = newest_file(files)
    if latest is not None:
        print(f"Newest: {latest.url} ({latest.size})")


if __name__ == "__main__":
    run_example()
