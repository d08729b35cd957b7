from typing import List, Optional
import argparse
import logging

from .console.menu import ClinicConsole
from .core.config import LOG_LEVELS, settings

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clinic-scheduler",
        description="In-memory clinic scheduling console",
    )
    parser.add_argument(
        "--log-level",
        default=settings.get_log_level,
        type=str.upper,
        choices=LOG_LEVELS,
        help=f"Logging level (default: {settings.get_log_level})",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{settings.APP_NAME} {settings.VERSION}",
    )
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(level=args.log_level, format=settings.LOG_FORMAT)

    logger.info(f"Starting {settings.APP_NAME} {settings.VERSION}...")
    ClinicConsole().run()
    logger.info(f"Shutting down {settings.APP_NAME}...")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
