"""OpenMetrics rendering of a TrafficStatistics snapshot.

Two metric families are exposed:

    modem_transferred_bytes{period, direction}     gauge
    modem_connect_duration_seconds_total{period}   counter

Label values come from the Period and Direction enums, and samples are
emitted in the order of their cross-product so the output is stable.
"""

import itertools
from enum import Enum

from prometheus_client import CollectorRegistry
from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily
from prometheus_client.openmetrics.exposition import CONTENT_TYPE_LATEST, generate_latest
from prometheus_client.registry import Collector

from .errors import EncodingError
from .hilink import TrafficStatistics


class Period(Enum):
    SESSION = "session"
    TOTAL = "total"


class Direction(Enum):
    UPLOAD = "upload"
    DOWNLOAD = "download"


TRANSFERRED_FIELDS = {
    (Period.SESSION, Direction.UPLOAD): "current_upload",
    (Period.SESSION, Direction.DOWNLOAD): "current_download",
    (Period.TOTAL, Direction.UPLOAD): "total_upload",
    (Period.TOTAL, Direction.DOWNLOAD): "total_download",
}

CONNECT_TIME_FIELDS = {
    Period.SESSION: "current_connect_time",
    Period.TOTAL: "total_connect_time",
}


class TrafficCollector(Collector):
    """Exposes one TrafficStatistics snapshot; registered per scrape."""

    def __init__(self, stats: TrafficStatistics):
        self._stats = stats

    def collect(self):
        transferred = GaugeMetricFamily(
            "modem_transferred", "Transferred bytes",
            labels=["period", "direction"], unit="bytes",
        )
        for period, direction in itertools.product(Period, Direction):
            value = getattr(self._stats, TRANSFERRED_FIELDS[(period, direction)])
            transferred.add_metric([period.value, direction.value], value)
        yield transferred

        duration = CounterMetricFamily(
            "modem_connect_duration", "Connected duration",
            labels=["period"], unit="seconds",
        )
        for period in Period:
            duration.add_metric([period.value], getattr(self._stats, CONNECT_TIME_FIELDS[period]))
        yield duration


def encode(stats: TrafficStatistics) -> str:
    """Render stats as an OpenMetrics text document."""
    registry = CollectorRegistry()
    registry.register(TrafficCollector(stats))
    try:
        return generate_latest(registry).decode("utf-8")
    except Exception as e:
        raise EncodingError(f"failed to encode metrics: {e}") from e
