from __future__ import annotations

import argparse
from pathlib import Path

import uvicorn

from docpage.logging import configure_logging
from docpage.server.settings import get_settings


def parse_args() -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Serve a markdown document as HTML with a table of contents.")
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port to listen on (default: {settings.port})")
    parser.add_argument("--log-file", type=Path, default=None, help="Optional file to mirror log output into")
    parser.add_argument("--verbose", action="store_true", default=settings.verbose, help="Enable debug logging")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logger = configure_logging(verbose=args.verbose, log_file=args.log_file)
    logger.info("Server is running on port %s", args.port)
    uvicorn.run("docpage.server.api:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
