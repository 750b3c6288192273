#!/usr/bin/env python3
"""
Artifact Store CLI - serve a store directory over HTTP
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import uvicorn

from artifact_store.infrastructure.config import Settings, get_settings
from artifact_store.infrastructure.logging import get_logger
from artifact_store.interfaces.http.rest import create_app


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    defaults = get_settings()
    parser = argparse.ArgumentParser(
        prog="artifact-store",
        description="Serve project/version artifacts from a state directory",
    )
    parser.add_argument(
        "--state-dir",
        type=str,
        default=str(defaults.state_dir),
        help=f"Store root holding one directory per project (default: {defaults.state_dir})",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=defaults.host,
        help=f"Bind address (default: {defaults.host})",
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        default=defaults.port,
        help=f"Bind port (default: {defaults.port})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Logging level (default: {defaults.log_level})",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        default=defaults.log_format,
        choices=["text", "json"],
        help=f"Logging format (default: {defaults.log_format})",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    return get_settings().model_copy(
        update={
            "state_dir": Path(args.state_dir),
            "host": args.host,
            "port": args.port,
            "log_level": args.log_level,
            "log_format": args.log_format,
        }
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = build_settings(args)
    app = create_app(settings)

    logger = get_logger(__name__)
    logger.info("Listening", host=settings.host, port=settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


def entry_point():
    sys.exit(main())


if __name__ == "__main__":
    entry_point()
