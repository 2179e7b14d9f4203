#!/usr/bin/env python3
import argparse
import logging
import socket
import sys

import uvicorn

from app.config import get_port
from app.main import app

logger = logging.getLogger("serve")


def bind(host, port):
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as exc:
        sock.close()
        logger.error("Cannot listen on %s:%d: %s", host, port, exc)
        sys.exit(1)
    return sock


def serve(host, port):
    sock = bind(host, port)
    logger.info("Server running on port %d", port)
    # uvicorn installs its own SIGINT/SIGTERM handlers
    server = uvicorn.Server(uvicorn.Config(app, log_level="warning"))
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    server.run(sockets=[sock])


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    p = argparse.ArgumentParser()

    p.add_argument("--host", default="0.0.0.0")
    p.add_argument("--port", type=int, default=get_port())

    args = p.parse_args()

    serve(args.host, args.port)
