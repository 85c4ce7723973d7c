"""Command line interface for the weather app."""

import argparse
import sys
from typing import List, Optional

import structlog
from pydantic import ValidationError

from weather_app.config.config import get_config
from weather_app.exceptions.cli import UsageError
from weather_app.exceptions.orchestration import WorkflowError
from weather_app.models.query.workflow import ExitCode
from weather_app.services.orchestration_service import WeatherOrchestrator
from weather_app.utils.logging_config import setup_logging

logger = structlog.get_logger(__name__)

MAX_CITY_ARG_LENGTH = 63


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser(prog_name: Optional[str] = None) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=prog_name,
        description="Look up the current weather for a place name.",
    )
    parser.add_argument("city", nargs="*", help="Place name, e.g. New York")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help="Override the configured log level",
    )
    return parser


def join_city(parts: List[str]) -> str:
    """Join positional arguments into one place name, truncated to MAX_CITY_ARG_LENGTH."""
    return " ".join(parts)[:MAX_CITY_ARG_LENGTH]


def main(argv: Optional[List[str]] = None, prog_name: Optional[str] = None) -> int:
    parser = build_parser(prog_name)
    try:
        args = parser.parse_args(argv)
        if not args.city:
            raise UsageError("a city name is required")
    except UsageError as e:
        print(parser.format_usage().rstrip(), file=sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        return int(ExitCode.USAGE)

    try:
        settings = get_config()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        print(f"Error: Invalid configuration: {problems}", file=sys.stderr)
        return int(ExitCode.CONFIG)

    setup_logging(level=args.log_level)

    orchestrator = WeatherOrchestrator(api_key=settings.geoapify_api_key)
    try:
        orchestrator.run(join_city(args.city))
    except WorkflowError as e:
        logger.debug("Exiting after failure", stage=e.stage, exit_code=e.exit_code)
        print(f"Error: {e.reason}", file=sys.stderr)
        return e.exit_code

    return int(ExitCode.SUCCESS)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
