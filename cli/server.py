#!/usr/bin/env python3
"""CLI for running the legal documents API server."""

import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger("legaldocs.server")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Serve sectioned legal documents with per-session disclosure state"
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)"
    )
    parser.add_argument(
        "-p", "--port",
        type=int,
        default=8000,
        help="Port to bind to (default: 8000)"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker processes; sessions live in process memory, so only 1 is accepted"
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Log level (default: info)"
    )
    return parser


def main():
    parser = build_parser()
    args = parser.parse_args()

    if args.workers != 1:
        parser.error(
            f"--workers {args.workers} is not supported: disclosure sessions are "
            "held in one process, so run a single worker"
        )

    logging.basicConfig(level=args.log_level.upper())
    mode = "reload" if args.reload else "single worker"
    logger.info(f"Serving legal documents on http://{args.host}:{args.port} ({mode})")

    try:
        import uvicorn
        uvicorn.run(
            "legaldocs.web.app:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            workers=1,
            log_level=args.log_level,
        )
    except KeyboardInterrupt:
        print("\nServer stopped", file=sys.stderr)
        sys.exit(0)


if __name__ == "__main__":
    main()
