import pytest


def listing_html(rows: list[tuple[str, str, str]], parent_href: str = "/data/RIDGEII/L2/KCLE/") -> str:
    """Render an nginx-style autoindex table from (name, modified, size) rows."""

    body = []
    for name, modified, size in rows:
        href = parent_href if name == "Parent Directory" else name
        body.append(
            f'<tr><td><a href="{href}">{name}</a></td>'
            f'<td align="right">{modified}</td>'
            f'<td align="right">{size}</td></tr>'
        )
    return (
        "<html><head><title>Index of /dir</title></head><body>"
        "<h1>Index of /dir</h1><table>"
        "<tr><th>Name</th><th>Last modified</th><th>Size</th></tr>"
        + "".join(body)
        + "</table></body></html>"
    )


@pytest.fixture
def make_listing():
    return listing_html


@pytest.fixture
def station_payload() -> dict:
    return {
        "@id": "https://api.weather.gov/stations/KCLE",
        "@type": "wx:ObservationStation",
        "geometry": "POINT(-81.85 41.4)",
        "elevation": {"unitCode": "wmoUnit:m", "value": 234.09},
        "stationIdentifier": "KCLE",
        "name": "Cleveland-Hopkins International Airport",
        "timeZone": "America/New_York",
        "forecast": "https://api.weather.gov/zones/forecast/OHZ011",
        "county": "https://api.weather.gov/zones/county/OHC035",
        "fireWeatherZone": "https://api.weather.gov/zones/fire/OHZ011",
    }


@pytest.fixture
def observation_payload() -> dict:
    return {
        "@id": "https://api.weather.gov/stations/KCLE/observations/2024-01-12T08:51:00+00:00",
        "@type": "wx:ObservationStation",
        "geometry": "POINT(-81.85 41.4)",
        "elevation": {"unitCode": "wmoUnit:m", "value": 234},
        "station": "https://api.weather.gov/stations/KCLE",
        "timestamp": "2024-01-12T08:51:00+00:00",
        "rawMessage": "KCLE 120851Z 24012KT 10SM OVC035 M02/M07 A2992",
        "textDescription": "Cloudy",
        "icon": None,
        "presentWeather": [
            {"intensity": "light", "modifier": None, "weather": "snow", "rawString": "-SN", "inVicinity": None}
        ],
        "temperature": {"unitCode": "wmoUnit:degC", "value": -2.0, "qualityControl": "V"},
        "dewpoint": {"unitCode": "wmoUnit:degC", "value": -7.0, "qualityControl": "V"},
        "windDirection": {"unitCode": "wmoUnit:degree_(angle)", "value": 240},
        "windSpeed": {"unitCode": "wmoUnit:km_h-1", "value": 22.2},
        "windGust": {"unitCode": "wmoUnit:km_h-1", "value": None},
        "barometricPressure": {"unitCode": "wmoUnit:Pa", "value": 101320},
        "seaLevelPressure": {"unitCode": "wmoUnit:Pa", "value": None},
        "visibility": {"unitCode": "wmoUnit:m", "value": 16090},
        "relativeHumidity": {"unitCode": "wmoUnit:percent", "value": 68.5},
        "cloudLayers": [{"base": {"unitCode": "wmoUnit:m", "value": 1070}, "amount": "OVC"}],
    }


@pytest.fixture
def point_payload() -> dict:
    return {
        "@id": "https://api.weather.gov/points/41.48,-81.81",
        "@type": "wx:Point",
        "geometry": "POINT(-81.81 41.48)",
        "cwa": "CLE",
        "forecastOffice": "https://api.weather.gov/offices/CLE",
        "gridId": "CLE",
        "gridX": "79",
        "gridY": 67,
        "forecast": "https://api.weather.gov/gridpoints/CLE/79,67/forecast",
        "forecastHourly": "https://api.weather.gov/gridpoints/CLE/79,67/forecast/hourly",
        "forecastGridData": "https://api.weather.gov/gridpoints/CLE/79,67",
        "observationStations": "https://api.weather.gov/gridpoints/CLE/79,67/stations",
        "relativeLocation": {
            "city": "Lakewood",
            "state": "OH",
            "geometry": "POINT(-81.8 41.48)",
            "distance": {"unitCode": "wmoUnit:m", "value": 812.3},
            "bearing": {"unitCode": "wmoUnit:degree_(angle)", "value": 263},
        },
        "forecastZone": "https://api.weather.gov/zones/forecast/OHZ011",
        "county": "https://api.weather.gov/zones/county/OHC035",
        "fireWeatherZone": "https://api.weather.gov/zones/fire/OHZ011",
        "timeZone": "America/New_York",
        "radarStation": "KCLE",
    }


@pytest.fixture
def gridpoint_payload() -> dict:
    return {
        "@id": "https://api.weather.gov/gridpoints/CLE/79,67",
        "@type": "wx:Gridpoint",
        "geometry": "POLYGON((-81.82 41.47,-81.81 41.49,-81.79 41.48,-81.82 41.47))",
        "updateTime": "2024-01-12T08:00:00+00:00",
        "validTimes": "2024-01-12T02:00:00+00:00/P7DT23H",
        "elevation": {"unitCode": "wmoUnit:m", "value": 180.1},
        "forecastOffice": "https://api.weather.gov/offices/CLE",
        "gridId": "CLE",
        "gridX": 79,
        "gridY": "67",
        "temperature": {
            "uom": "wmoUnit:degC",
            "values": [
                {"validTime": "2024-01-12T08:00:00+00:00/PT1H", "value": -2.2},
                {"validTime": "2024-01-12T09:00:00+00:00/PT2H", "value": -1.7},
            ],
        },
        "skyCover": {
            "uom": "wmoUnit:percent",
            "values": [
                {"validTime": "2024-01-12T08:00:00+00:00/PT3H", "value": 100},
            ],
        },
        "windGust": {"uom": "wmoUnit:km_h-1", "values": [{"validTime": "2024-01-12T08:00:00+00:00/PT1H", "value": None}]},
        "weather": {
            "values": [
                {
                    "validTime": "2024-01-12T08:00:00+00:00/PT6H",
                    "value": [
                        {
                            "coverage": "chance",
                            "weather": "snow_showers",
                            "intensity": "light",
                            "visibility": {"unitCode": "wmoUnit:km", "value": None},
                            "attributes": [],
                        }
                    ],
                }
            ]
        },
        "hazards": {
            "values": [
                {
                    "validTime": "2024-01-12T08:00:00+00:00/PT12H",
                    "value": [{"phenomenon": "WW", "significance": "Y", "event_number": 3}],
                }
            ]
        },
    }
