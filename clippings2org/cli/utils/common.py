"""Common utility functions for CLI commands."""

import logging
from pathlib import Path

from ...config import get_clippings_file_path, get_render_options, load_config
from ...renderer import RenderOptions

logger = logging.getLogger(__name__)


def get_clippings_file_cli(args) -> Path:
    """Get the clippings file from args, falling back to the configured path."""
    if getattr(args, "file", None):
        logger.debug("Using clippings file from command line argument: %s", args.file)
        return Path(args.file).expanduser()

    clippings_file = get_clippings_file_path()
    logger.debug("Using clippings file from configuration: %s", clippings_file)
    return clippings_file


def build_render_options(args) -> RenderOptions:
    """Merge renderer options from configuration with command-line overrides."""
    options = get_render_options(load_config())
    overrides = {}
    if getattr(args, "include_date", None) is not None:
        overrides["include_date"] = args.include_date
    if getattr(args, "pdf_links", None) is not None:
        overrides["include_pdf_links"] = args.pdf_links
    if getattr(args, "pdf_folder", None) is not None:
        overrides["include_pdf_folder"] = args.pdf_folder

    if overrides:
        logger.debug("Command-line overrides for rendering: %s", overrides)
        options = options.model_copy(update=overrides)
    return options
