"""Main entrypoint: config, logging and the waitress server."""

import logging
import os

from waitress import serve

from . import web
from .config import ConfigManager

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger("modem_exporter.main")


def main():
    data_dir = os.environ.get("DATA_DIR", "/data")
    config_mgr = ConfigManager(data_dir)
    config = config_mgr.get_all()

    logging.getLogger().setLevel(config["log_level"].upper())

    log.info("Modem exporter starting")
    log.info("Modem: %s (timeout: %ds)", config["modem_url"], config["request_timeout"])

    web.init_config(config_mgr)

    log.info("Serving /metrics on %s:%d", config["listen_host"], config["web_port"])
    serve(web.app, host=config["listen_host"], port=config["web_port"], threads=4, _quiet=True)


if __name__ == "__main__":
    main()
