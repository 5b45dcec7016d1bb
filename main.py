#!/usr/bin/env python
"""CLI for the Prism topic analysis pipeline."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator

from prism_analysis.config import create_from_config, load_config, resolve_config_path
from prism_analysis.errors import PrismError

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    topic: str | None = None
    config: Path
    log: bool = False
    log_dir: str = "logs"
    serve: bool = False
    host: str = "127.0.0.1"
    port: int = 8000

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def _log_overrides(args: CLIArgs) -> tuple[bool | None, str | None]:
    """Turn --log/--log-dir into config overrides (None keeps the config value)."""
    return (args.log if args.log else None, args.log_dir if args.log_dir != "logs" else None)


async def run(args: CLIArgs) -> None:
    """Analyze one topic and print the result as JSON.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    log_override, log_dir_override = _log_overrides(args)
    pipeline, run_logger = create_from_config(
        config,
        log_override=log_override,
        log_dir_override=log_dir_override,
    )

    logger.info(f"Analyzing: {args.topic}")
    logger.info(f"Config: {args.config}")

    result = await pipeline.run(args.topic)
    print(json.dumps({"topic": args.topic, **result.to_dict()}, indent=2))

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nRun log written to: {run_logger.last_log_path}")


def serve(args: CLIArgs) -> None:
    """Serve the HTTP API with uvicorn."""
    import uvicorn

    from prism_analysis.api import create_app

    log_override, log_dir_override = _log_overrides(args)
    app = create_app(
        config=load_config(args.config),
        log_override=log_override,
        log_dir_override=log_dir_override,
    )
    uvicorn.run(app, host=args.host, port=args.port)


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Multi-perspective analysis of a topic.")
    parser.add_argument(
        "topic",
        nargs="?",
        help="Topic to analyze (omit with --serve)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: $PRISM_CONFIG or the bundled default.yaml)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Enable intermediate pipeline logging to JSON file",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        default=False,
        help="Serve the HTTP API instead of running a single analysis",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind address for --serve")
    parser.add_argument("--port", type=int, default=8000, help="Port for --serve")

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else resolve_config_path()

    try:
        args = CLIArgs(
            topic=ns.topic,
            config=config_path,
            log=ns.log,
            log_dir=ns.log_dir,
            serve=ns.serve,
            host=ns.host,
            port=ns.port,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    if args.serve:
        serve(args)
        return

    if not args.topic:
        parser.error("a topic is required unless --serve is given")

    try:
        asyncio.run(run(args))
    except PrismError as e:
        logger.error(f"Analysis failed: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
