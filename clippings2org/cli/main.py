"""Main CLI entry point for clippings2org."""

import logging
import sys

from ..config import get_config_value
from ..logging_config import setup_logging
from .parsers import create_parser

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI application."""
    parser = create_parser()

    args = parser.parse_args(argv)

    level_name = args.log_level or str(get_config_value("log_level", "INFO")).upper()
    setup_logging(level=level_name, log_file=args.log_file)

    try:
        args.func(args)
    except Exception as e:
        logger.error("Unhandled exception: %s", e, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
