import logging
import os

DEFAULT_PORT = 8080

logger = logging.getLogger(__name__)


def get_port(environ=None):
    """Port to listen on, taken from ``PORT`` when it holds a valid TCP port."""
    environ = os.environ if environ is None else environ
    raw = environ.get("PORT", "").strip()
    if not raw:
        return DEFAULT_PORT

    try:
        port = int(raw)
    except ValueError:
        logger.warning("Ignoring PORT=%r: not an integer, using %d", raw, DEFAULT_PORT)
        return DEFAULT_PORT

    if not 0 < port < 65536:
        logger.warning("Ignoring PORT=%d: out of range, using %d", port, DEFAULT_PORT)
        return DEFAULT_PORT
    return port
