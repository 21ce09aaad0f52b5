"""CLI launcher for the Snake Graph server."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-graph",
        description="Battlesnake server built on a per-turn board model.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- serve ---
    serve_p = sub.add_parser("serve", help="Run the HTTP server.")
    serve_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    serve_p.add_argument("--host", type=str, default="0.0.0.0")
    serve_p.add_argument("--port", type=int, default=8000)
    serve_p.add_argument(
        "--log-level", type=str, default="info",
        choices=["debug", "info", "warning", "error"],
    )

    # --- init-config ---
    init_p = sub.add_parser(
        "init-config", help="Write a default config file.",
    )
    init_p.add_argument("path", help="Destination JSON file.")

    return parser


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from snake_graph.config import SnakeConfig
    from snake_graph.server.app import create_app

    config = (
        SnakeConfig.load(args.config) if args.config else SnakeConfig()
    )
    logging.getLogger().setLevel(args.log_level.upper())
    logger.info("Serving on %s:%d", args.host, args.port)
    uvicorn.run(
        create_app(config),
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    from snake_graph.config import SnakeConfig

    SnakeConfig().save(args.path)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-graph`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "serve": _run_serve,
        "init-config": _run_init_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
