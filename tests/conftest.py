"""Shared test fixtures for the modem exporter tests."""

from unittest.mock import MagicMock

import pytest
import requests

from modem_exporter.hilink import Session, TrafficStatistics

MODEM_URL = "http://192.168.8.1"

SESSION_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<response>
<SesInfo>SessionID=Abc123SessionCookieValue</SesInfo>
<TokInfo>Tok0987VerificationTokenValue</TokInfo>
</response>"""

TRAFFIC_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<response>
<CurrentConnectTime>10</CurrentConnectTime>
<CurrentUpload>100</CurrentUpload>
<CurrentDownload>200</CurrentDownload>
<CurrentDownloadRate>0</CurrentDownloadRate>
<CurrentUploadRate>0</CurrentUploadRate>
<TotalUpload>500000</TotalUpload>
<TotalDownload>900000</TotalDownload>
<TotalConnectTime>3600</TotalConnectTime>
<showtraffic>1</showtraffic>
</response>"""

NO_RIGHTS_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<error>
<code>125</code>
<message>no rights</message>
</error>"""


def make_response(content, status_code=200):
    """Build a fake requests.Response with the given body."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = content
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Server Error"
        )
    return resp


@pytest.fixture
def session():
    return Session(
        session_cookie="SessionID=Abc123SessionCookieValue",
        verification_token="Tok0987VerificationTokenValue",
    )


@pytest.fixture
def stats():
    return TrafficStatistics(
        current_upload=100,
        current_download=200,
        current_connect_time=10,
        total_upload=500000,
        total_download=900000,
        total_connect_time=3600,
    )
