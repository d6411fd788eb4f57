"""Huawei HiLink web API: session tokens, XML envelopes and traffic counters."""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, Callable

import requests

from .errors import ApiError, ParseError, TransportError

log = logging.getLogger("modem_exporter.hilink")

SESSION_PATH = "/api/webserver/SesTokInfo"
TRAFFIC_STATISTICS_PATH = "/api/monitoring/traffic-statistics"

TOKEN_HEADER = "__RequestVerificationToken"

UINT64_MAX = 2**64 - 1

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


@dataclass(frozen=True)
class Session:
    """Credentials for one scrape; never reused across scrapes."""

    session_cookie: str
    verification_token: str


@dataclass(frozen=True)
class TrafficStatistics:
    current_upload: int
    current_download: int
    current_connect_time: int
    total_upload: int
    total_download: int
    total_connect_time: int


# Device element name for each TrafficStatistics field.
TRAFFIC_FIELDS = {
    "current_upload": "CurrentUpload",
    "current_download": "CurrentDownload",
    "current_connect_time": "CurrentConnectTime",
    "total_upload": "TotalUpload",
    "total_download": "TotalDownload",
    "total_connect_time": "TotalConnectTime",
}


# ── Response envelope ──

@dataclass(frozen=True)
class Response:
    value: Any


@dataclass(frozen=True)
class Error:
    code: int
    message: str


Envelope = Response | Error


def parse_envelope(root: ET.Element, parse_value: Callable[[ET.Element], Any]) -> Envelope:
    """Decode a <response> or <error> document into an Envelope."""
    if root.tag == "response":
        return Response(parse_value(root))
    if root.tag == "error":
        raw_code = (root.findtext("code") or "").strip()
        try:
            code = int(raw_code)
        except ValueError:
            raise ParseError(f"invalid error code {raw_code!r}") from None
        return Error(code=code, message=root.findtext("message") or "")
    raise ParseError(f"unexpected root element <{root.tag}>")


def unwrap(envelope: Envelope) -> Any:
    """Return the response value, or raise ApiError for an error envelope."""
    if isinstance(envelope, Response):
        return envelope.value
    if isinstance(envelope, Error):
        raise ApiError(envelope.code, envelope.message)
    raise TypeError(f"not an envelope: {envelope!r}")


# ── Transport ──

def build_request(fields: dict) -> bytes:
    """Serialize POST fields as <request><Field>value</Field>...</request>."""
    root = ET.Element("request")
    for name, value in fields.items():
        ET.SubElement(root, name).text = str(value)
    return (XML_DECLARATION + ET.tostring(root, encoding="unicode")).encode("utf-8")


def _headers(session: Session | None) -> dict:
    if session is None:
        return {}
    return {
        "Cookie": session.session_cookie,
        TOKEN_HEADER: session.verification_token,
    }


def _parse_xml(content: bytes) -> ET.Element:
    try:
        return ET.fromstring(content)
    except ET.ParseError as e:
        raise ParseError(f"malformed XML: {e}") from e


def get(base_url: str, path: str, session: Session | None = None, timeout: int = 10) -> ET.Element:
    """GET an API path and return the parsed XML root."""
    url = f"{base_url}{path}"
    try:
        r = requests.get(url, headers=_headers(session), timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise TransportError(f"GET {url} failed: {e}") from e
    return _parse_xml(r.content)


def post(base_url: str, path: str, fields: dict, session: Session | None = None,
         timeout: int = 10) -> ET.Element:
    """POST a <request> document to an API path and return the parsed XML root."""
    url = f"{base_url}{path}"
    headers = _headers(session)
    headers["Content-Type"] = "application/xml"
    try:
        r = requests.post(url, data=build_request(fields), headers=headers, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise TransportError(f"POST {url} failed: {e}") from e
    return _parse_xml(r.content)


# ── API calls ──

def acquire_session(base_url: str, timeout: int = 10) -> Session:
    """Fetch a fresh session cookie and verification token."""
    root = get(base_url, SESSION_PATH, timeout=timeout)
    cookie = (root.findtext("SesInfo") or "").strip()
    token = (root.findtext("TokInfo") or "").strip()
    if not cookie or not token:
        raise ParseError("session response lacks SesInfo/TokInfo")
    log.info("Session OK (token: %s...)", token[:8])
    return Session(session_cookie=cookie, verification_token=token)


def _parse_counter(root: ET.Element, tag: str) -> int:
    text = root.findtext(tag)
    if text is None:
        raise ParseError(f"missing <{tag}>")
    try:
        value = int(text.strip())
    except ValueError:
        raise ParseError(f"<{tag}> is not an integer: {text!r}") from None
    if not 0 <= value <= UINT64_MAX:
        raise ParseError(f"<{tag}> out of range: {value}")
    return value


def parse_traffic_statistics(root: ET.Element) -> TrafficStatistics:
    return TrafficStatistics(**{
        field: _parse_counter(root, tag) for field, tag in TRAFFIC_FIELDS.items()
    })


def fetch_statistics(base_url: str, session: Session, timeout: int = 10) -> TrafficStatistics:
    """Query the traffic counters with an authenticated GET."""
    root = get(base_url, TRAFFIC_STATISTICS_PATH, session=session, timeout=timeout)
    return unwrap(parse_envelope(root, parse_traffic_statistics))
