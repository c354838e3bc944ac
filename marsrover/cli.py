"""Command-line entry points: the HTTP server and a greeting."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from wsgiref.simple_server import make_server

from dotenv import load_dotenv

from marsrover.container import build_container, create_router

log = logging.getLogger(__name__)

DEFAULT_PORT = "8080"


def main(argv: Sequence[str] | None = None) -> int:
    """Load ``.env`` from the working directory and serve the API on $PORT."""
    argparse.ArgumentParser(
        prog="mars-rover-http",
        description="Serve the mission control HTTP API on $PORT (default 8080).",
    ).parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    env_file = Path(".env")
    try:
        if not env_file.is_file():
            raise FileNotFoundError(env_file)
        load_dotenv(env_file)
    except OSError:
        log.error("Error loading .env file")
        return 1

    port = os.environ.get("PORT") or DEFAULT_PORT
    router = create_router(build_container())

    log.info("Starting server on port %s", port)
    try:
        with make_server("", int(port), router) as server:
            server.serve_forever()
    except (OSError, ValueError, OverflowError) as err:
        log.error("%s", err)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


def hello(argv: Sequence[str] | None = None) -> int:
    """Print a greeting."""
    print("Hello, Mars Rover!")
    return 0


if __name__ == "__main__":
    sys.exit(main())