import json
from datetime import datetime, timezone

import pytest

from wxnws.errors import UnknownRadarTypeError
from wxnws.radar.types import FileSize, RadarType, RemoteFile, SizeUnit
from wxnws.radar.urls import build_radar_url


def test_radar_type_codes_round_trip():
    variants = RadarType.values()
    assert len(variants) == 14
    for variant in variants:
        assert RadarType.from_code(str(variant)) is variant


def test_radar_type_raw_codes_keep_underscore():
    assert str(RadarType.BREF_RAW) == "BREF_RAW"
    assert str(RadarType.BVEL_RAW) == "BVEL_RAW"


@pytest.mark.parametrize("text", ["bref", "BREF ", "NOPE", ""])
def test_unknown_radar_type_names_value(text):
    with pytest.raises(UnknownRadarTypeError) as excinfo:
        RadarType.from_code(text)
    assert excinfo.value.text == text
    assert repr(text) in str(excinfo.value)


def test_radar_type_serializes_as_code():
    assert json.dumps({"product": RadarType.CREF}) == '{"product": "CREF"}'


def test_build_radar_url():
    url = build_radar_url("KCLE", RadarType.BREF_RAW, root="https://mrms.test/L2/")
    assert url == "https://mrms.test/L2/KCLE/BREF_RAW/"
    assert build_radar_url("KCLE", "HVIL", root="https://mrms.test/L2") == "https://mrms.test/L2/KCLE/HVIL/"


def test_build_radar_url_rejects_unknown_product():
    with pytest.raises(UnknownRadarTypeError):
        build_radar_url("KCLE", "XYZ", root="https://mrms.test/L2")


def test_file_size_keeps_printed_value():
    size = FileSize.kilobytes(1.5)
    assert size.unit is SizeUnit.KILOBYTES
    assert size.value == 1.5
    assert size.to_bytes() == pytest.approx(1536.0)
    assert str(size) == "1.5K"
    assert str(FileSize.bytes(200.0)) == "200"
    assert FileSize.gigabytes(2.0).to_dict() == {"unit": "G", "value": 2.0}


def test_remote_file_name_and_dict():
    directory = RemoteFile("https://mrms.test/L2/KCLE/")
    assert directory.name == "KCLE/"
    assert directory.to_dict() == {"url": "https://mrms.test/L2/KCLE/", "last_modified": None, "size": None}

    dated = RemoteFile(
        "https://mrms.test/L2/KCLE/BREF/a.tar",
        datetime(2024, 1, 12, 8, 30, tzinfo=timezone.utc),
        FileSize.megabytes(3.0),
    )
    assert dated.name == "a.tar"
    assert dated.to_dict()["last_modified"] == "2024-01-12T08:30:00+00:00"


@pytest.mark.parametrize("url", ["https://example.test/", "https://example.test", "http://[::1]:8080/"])
def test_remote_file_name_for_site_root(url):
    assert RemoteFile(url).name == "/"
