"""CLI entry point for pingmole.

Runs one batch: locate, load, ping, and print the ranked table. Settings
come from an optional YAML file (``--config``); command-line flags override
file values. Durations on the command line are in milliseconds.

Examples:
    ```bash
    python -m pingmole
    pingmole -p wireguard -d 1000 -c 8
    pingmole --rtt 60 --sort-by rtt-mean --log-level INFO
    pingmole --log-level DEBUG --log-format json
    pingmole --latitude 52.52 --longitude 13.405 --source api
    pingmole --config pingmole.yaml
    ```
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

from rich.console import Console

from pingmole.app import Pingmole, PingmoleConfig
from pingmole.catalog.configs import CatalogSource
from pingmole.core.exceptions import PingmoleError
from pingmole.core.logger import Logger, StructuredFormatter
from pingmole.core.yaml import load_yaml
from pingmole.models.constants import Protocol, SortBy


logger = Logger("pingmole.cli")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Every value flag defaults to ``None`` so that only flags given
    explicitly override the configuration file.
    """
    parser = argparse.ArgumentParser(
        prog="pingmole",
        description="Find the VPN relays with the lowest round-trip time",
    )

    parser.add_argument(
        "-p",
        "--protocol",
        choices=[p.value for p in Protocol],
        help="Only ping relays of this protocol (default: all)",
    )
    parser.add_argument(
        "-d",
        "--distance",
        type=float,
        help="Only ping relays closer than this many km (default: 500)",
    )
    parser.add_argument(
        "-r",
        "--rtt",
        type=float,
        help="Only show relays with a mean RTT up to this many ms (default: no limit)",
    )
    parser.add_argument(
        "-c",
        "--count",
        type=int,
        help="Number of probes per relay (default: 4)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Per-probe connect timeout in ms (default: 750)",
    )
    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        help="Interval between probes to the same relay in ms (default: 1000)",
    )
    parser.add_argument(
        "-s",
        "--sort-by",
        choices=[s.value for s in SortBy],
        help="Column to sort the results by (default: rtt-median)",
    )
    parser.add_argument(
        "--latitude",
        type=float,
        help="Your latitude; skips the location lookup (requires --longitude)",
    )
    parser.add_argument(
        "--longitude",
        type=float,
        help="Your longitude; skips the location lookup (requires --latitude)",
    )
    parser.add_argument(
        "--source",
        choices=[s.value for s in CatalogSource],
        help="Where to read the relay list from (default: auto)",
    )
    parser.add_argument(
        "--relays-file",
        type=Path,
        help="Relay cache file (default: the VPN client's cache for this platform)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level (default: WARNING)",
    )
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        default="text",
        help="Log record layout: key=value text or one JSON object per line (default: text)",
    )

    args = parser.parse_args(argv)
    if (args.latitude is None) != (args.longitude is None):
        parser.error("--latitude and --longitude must be given together")
    return args


def setup_logging(level: str, log_format: str = "text") -> None:
    """Configure the root logger with structured formatting.

    Installs a ``StructuredFormatter`` on a stderr handler so that both
    ``Logger`` records and plain ``logging.getLogger()`` records share the
    ``level name message key=value ...`` layout, or one JSON object per
    line when *log_format* is ``"json"``.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter(json_output=log_format == "json"))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level))


def _ms(value: float | None) -> float | None:
    return None if value is None else value / 1_000.0


def _apply_cli_overrides(data: dict[str, Any], args: argparse.Namespace) -> dict[str, Any]:
    """Merge explicitly given flags into a configuration dictionary."""
    overrides: dict[str, dict[str, Any]] = {
        "location": {"latitude": args.latitude, "longitude": args.longitude},
        "catalog": {"source": args.source, "path": args.relays_file},
        "filters": {
            "distance": args.distance,
            "protocol": args.protocol,
            "rtt": _ms(args.rtt),
        },
        "probe": {
            "count": args.count,
            "timeout": _ms(args.timeout),
            "interval": _ms(args.interval),
        },
        "report": {"sort_by": args.sort_by},
    }

    # An explicit relay file means that file, not a fallback to the API
    if args.relays_file is not None and args.source is None:
        overrides["catalog"]["source"] = CatalogSource.FILE.value

    for section, values in overrides.items():
        given = {k: v for k, v in values.items() if v is not None}
        if given:
            current = data.get(section) or {}
            data[section] = {**current, **given}
    return data


def build_config(args: argparse.Namespace) -> PingmoleConfig:
    """Build the validated configuration from the file and the flags.

    Raises:
        FileNotFoundError: If ``--config`` names a missing file.
        ConfigurationError: If the file cannot be read or the merged
            configuration is invalid.
    """
    data = load_yaml(args.config) if args.config is not None else {}
    return PingmoleConfig.from_dict(_apply_cli_overrides(data, args))


async def main(argv: list[str] | None = None) -> int:
    """Parse args, run one batch, and print the results.

    Returns:
        Exit code: 0 for success, 1 for failure.
    """
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_format)

    try:
        config = build_config(args)
    except (PingmoleError, FileNotFoundError) as e:
        logger.error("config_failed", error=str(e))
        return 1

    try:
        with Console(stderr=True).status("Starting", spinner="dots") as status:
            app = Pingmole(config, on_stage=status.update)
            reporter = await app.run()
    except PingmoleError as e:
        logger.error("run_failed", error=str(e))
        return 1

    reporter.report()
    logger.info("run_completed", relays=len(reporter.timed))
    return 0


def cli() -> None:
    """Synchronous entry point for console_scripts."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("interrupted")
        sys.exit(130)


if __name__ == "__main__":
    cli()
