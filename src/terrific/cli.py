"""CLI entry point for the Terrific proxy server."""

from __future__ import annotations

import argparse
import logging
import os
import socket
import sys
from pathlib import Path


def main() -> None:
    """Main CLI entry point for the Terrific proxy server."""
    parser = argparse.ArgumentParser(
        prog="terrific",
        description="Terrific — aggregation proxy for news, listing and video providers",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Server bind address (overrides config)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=None,
        help="Server port (overrides config and PORT)",
    )
    parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=None,
        help="Number of worker processes",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Terrific {_get_version()}",
    )

    args = parser.parse_args()

    from terrific.config.settings import load_settings

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        # The app factory runs in the server process and reads the file from here.
        os.environ["TERRIFIC_CONFIG"] = str(config_path.resolve())
    settings = load_settings()

    log_level = (args.log_level or settings.observability.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    host = args.host or settings.server.host
    port = args.port or settings.server.port
    workers = args.workers or settings.server.workers
    if args.log_level:
        os.environ["TERRIFIC_OBSERVABILITY__LOG_LEVEL"] = args.log_level

    _check_port(host, port)

    import uvicorn

    uvicorn.run(
        "terrific.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        workers=workers if not args.reload else 1,
        reload=args.reload,
        log_level=log_level.lower(),
    )


def _check_port(host: str, port: int) -> None:
    """Exit with a readable message if the port is already taken."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind((host if host != "0.0.0.0" else "127.0.0.1", port))
    except OSError:
        print(f"\n  ERROR: Port {port} is already in use!", file=sys.stderr)
        print(f"  Run 'lsof -i :{port}' to find the process, or pass --port.\n", file=sys.stderr)
        sys.exit(1)
    finally:
        sock.close()


def _get_version() -> str:
    """Get the package version."""
    try:
        from terrific import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    main()
