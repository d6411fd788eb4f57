"""One scrape: fresh session, traffic counters, OpenMetrics text."""

import logging

from . import hilink
from .metrics import encode

log = logging.getLogger("modem_exporter.exporter")


def gather_metrics(base_url: str, timeout: int = 10) -> str:
    """Run the full pipeline against the modem. Errors propagate unchanged."""
    session = hilink.acquire_session(base_url, timeout=timeout)
    stats = hilink.fetch_statistics(base_url, session, timeout=timeout)
    log.debug(
        "Traffic: session %d/%d bytes up/down, total %d/%d bytes up/down",
        stats.current_upload, stats.current_download,
        stats.total_upload, stats.total_download,
    )
    return encode(stats)
