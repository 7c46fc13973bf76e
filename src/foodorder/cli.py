"""Command-line entry point: pick a port and serve the storefront with uvicorn."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
from typing import Iterable, Sequence

import uvicorn

from foodorder.api.main import create_app
from foodorder.infrastructure.observability.logging_config import configure_logging

logger = logging.getLogger(__name__)

BIND_HOST = "0.0.0.0"
CANDIDATE_PORTS = range(8080, 8091)


class PortUnavailableError(Exception):
    pass


def _parse_port(raw_port: str | None) -> int | None:
    if raw_port is None:
        return None
    try:
        port = int(raw_port)
    except ValueError:
        return None
    if not 1 <= port <= 65535:
        return None
    return port


def _can_bind(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
        except OSError:
            return False
    return True


def _ephemeral_port(host: str) -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind((host, 0))
        return sock.getsockname()[1]


def select_port(
    raw_port: str | None,
    candidates: Iterable[int] = CANDIDATE_PORTS,
    host: str = BIND_HOST,
) -> int:
    """Use the requested port if it parses, else the first free candidate.

    Falls back to an OS-assigned port when every candidate is busy and raises
    ``PortUnavailableError`` only when nothing can be bound at all.
    """
    port = _parse_port(raw_port)
    if port is not None:
        logger.info("using_requested_port", extra={"port": port})
        return port
    if raw_port is not None:
        logger.warning("invalid_port_argument", extra={"port": raw_port})

    for candidate in candidates:
        if _can_bind(host, candidate):
            logger.info("found_available_port", extra={"port": candidate})
            return candidate
        logger.info("port_busy", extra={"port": candidate})

    try:
        port = _ephemeral_port(host)
    except OSError as exc:
        raise PortUnavailableError(f"no port could be bound on {host}") from exc
    logger.info("using_ephemeral_port", extra={"port": port})
    return port


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Online food ordering web server.")
    parser.add_argument(
        "port",
        nargs="?",
        default=None,
        help="Port to listen on. Defaults to the first free port in 8080-8090.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging()

    try:
        port = select_port(args.port)
    except PortUnavailableError:
        logger.exception("startup_failed")
        return 1

    app = create_app(port=port)
    logger.info("server_starting", extra={"port": port})
    logger.info(f"menu: http://localhost:{port}/menu, orders: http://localhost:{port}/orders")
    uvicorn.run(app, host=BIND_HOST, port=port, log_config=None, access_log=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
