"""Convert command handler for the clippings2org CLI."""

import logging
import sys
from pathlib import Path

from ...core import Clippings2Org
from ...exceptions import MalformedRecordError, MissingSourceError
from ..utils.common import build_render_options, get_clippings_file_cli
from ..utils.formatters import format_conversion_summary

logger = logging.getLogger(__name__)


def handle_convert(args):
    """Handle the 'convert' command."""
    logger.info("Starting 'convert' command.")

    clippings_file = get_clippings_file_cli(args)
    options = build_render_options(args)

    try:
        result = Clippings2Org(clippings_file, options).process()
    except MissingSourceError as e:
        logger.critical("Error: %s", e)
        sys.exit(1)
    except MalformedRecordError as e:
        logger.critical("Malformed clippings file, no outline written: %s", e)
        sys.exit(1)

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(result.document, encoding="utf-8")
        except OSError as e:
            logger.critical("Could not write outline to %s: %s", output_path, e)
            sys.exit(1)
        logger.info("Outline written to %s", output_path)
        print(format_conversion_summary(result.stats, clippings_file, output_path))
    else:
        sys.stdout.write(result.document)
