import os

import pytest

from wxnws.client import NwsClient
from wxnws.radar.crawler import newest_file
from wxnws.radar.types import RadarType


def _integration_enabled() -> bool:
    return os.environ.get("WXNWS_RUN_INTEGRATION", "").lower() in {"1", "true", "yes"}


def _require_integration():
    if not _integration_enabled():
        pytest.skip("Integration tests disabled; set WXNWS_RUN_INTEGRATION=1 to enable")


@pytest.mark.integration
@pytest.mark.parametrize("radar_type", [RadarType.BREF, RadarType.CREF])
def test_live_listing_has_dated_files(radar_type: RadarType):
    _require_integration()

    client = NwsClient(os.environ.get("WXNWS_USER_AGENT", "wxnws-integration"))
    files = client.radar("KCLE", radar_type)
    assert files
    latest = newest_file(files)
    assert latest is not None
    assert latest.url.startswith(client.radar_root)
