"""CLI command to launch the move recommendation server."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from service.config import DEFAULT_CONFIG_PATH, ServerConfig
from service.server import create_app


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve tic-tac-toe move recommendations over HTTP.")
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help="Path to server config JSON (defaults are used if the default path is absent)",
    )
    parser.add_argument("--host", type=str, default=None, help="Bind address")
    parser.add_argument("--port", type=int, default=None, help="Listen port")
    parser.add_argument("--log-level", type=str, default=None, help="Python logging level")
    return parser.parse_args()


def load_config(args: argparse.Namespace) -> ServerConfig:
    if args.config == DEFAULT_CONFIG_PATH and not Path(args.config).exists():
        config = ServerConfig()
    else:
        config = ServerConfig.from_json(args.config)
    if args.host is not None:
        config.host = args.host
    if args.port is not None:
        config.port = args.port
    if args.log_level is not None:
        config.log_level = args.log_level
    return config


def main() -> None:
    args = parse_args()
    config = load_config(args)
    logging.basicConfig(level=getattr(logging, config.log_level.upper(), logging.INFO))
    logger = logging.getLogger("ttt.serve")

    logger.info("Listening on %s:%d", config.host, config.port)
    app = create_app(config)
    app.run(host=config.host, port=config.port)


if __name__ == "__main__":
    main()
