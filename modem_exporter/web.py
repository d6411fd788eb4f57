"""Flask app exposing the Prometheus scrape endpoint."""

import logging

from flask import Flask, Response

from .config import ConfigManager
from .errors import ModemError
from .exporter import gather_metrics
from .metrics import CONTENT_TYPE_LATEST

log = logging.getLogger("modem_exporter.web")

app = Flask(__name__)

_config_manager = None


def init_config(config_manager):
    """Set the config manager used by the scrape handler."""
    global _config_manager
    _config_manager = config_manager


def _get_config():
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def describe_error(error: Exception) -> str:
    """Human-readable body for a failed scrape."""
    return f"{type(error).__name__}: {error}\n"


@app.route("/metrics")
def metrics():
    config = _get_config()
    try:
        body = gather_metrics(
            config.get_modem_url(), timeout=config.get("request_timeout")
        )
    except ModemError as e:
        log.warning("Scrape failed: %s", e)
        # Failures are reported in-band; the status stays 200.
        return Response(describe_error(e), status=200, mimetype="text/plain")
    except Exception as e:
        log.exception("Unexpected scrape failure")
        return Response(describe_error(e), status=200, mimetype="text/plain")
    return Response(body, status=200, content_type=CONTENT_TYPE_LATEST)
