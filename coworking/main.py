"""Command that serves the coworking API until it receives SIGINT or SIGTERM."""

from __future__ import annotations

import logging
import os
import re
import signal
import sys
import threading
from collections.abc import Mapping, Sequence
from pathlib import Path

from dotenv import load_dotenv
from werkzeug.serving import make_server

from coworking.web.server import create_app

log = logging.getLogger(__name__)

_PORT_PATTERN = re.compile(r"[+-]?\d+")


class ConfigError(Exception):
    """The environment does not describe a usable configuration."""


def read_port(environ: Mapping[str, str]) -> int:
    """Return the port named by PORT in ``environ``."""
    text = environ.get("PORT", "")
    if not text:
        raise ConfigError("Environment variable PORT is required")
    if not _PORT_PATTERN.fullmatch(text):
        raise ConfigError(f"Invalid PORT value: {text}")
    return int(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the API; the command takes no arguments."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    env_file = Path(".env")
    if env_file.is_file():
        load_dotenv(env_file)
    else:
        log.info("No .env file found in root, using environment variables")

    try:
        port = read_port(os.environ)
    except ConfigError as exc:
        log.error("%s", exc)
        return 1

    try:
        server = make_server("0.0.0.0", port, create_app(), threaded=True)
    except (OSError, OverflowError) as exc:
        log.error("http server error: %s", exc)
        return 1

    shutting_down = threading.Event()

    def request_shutdown(signum, frame) -> None:
        if shutting_down.is_set():
            raise KeyboardInterrupt
        shutting_down.set()
        log.info("Shutting down gracefully, press Ctrl+C again to force")
        threading.Thread(target=server.shutdown, daemon=True).start()

    previous = {
        sig: signal.signal(sig, request_shutdown)
        for sig in (signal.SIGINT, signal.SIGTERM)
    }
    try:
        server.serve_forever()
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
        server.server_close()

    log.info("Server exiting")
    log.info("Graceful shutdown complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())