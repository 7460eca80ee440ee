"""Configuration command handler for the clippings2org CLI."""

import logging
import sys

from ...config import (
    coerce_config_value,
    get_config_dir,
    get_config_file_path,
    get_config_value,
    list_config,
    set_config_value,
)
from ...exceptions import ValidationError
from ..utils.formatters import format_config

logger = logging.getLogger(__name__)


def handle_configure(args):
    """Handle the 'config' command and its subcommands."""
    if not getattr(args, "config_command", None):
        # Default to 'show' if no subcommand specified
        args.config_command = "show"

    if args.config_command == "show":
        handle_config_show(args)
    elif args.config_command == "set":
        handle_config_set(args)
    elif args.config_command == "paths":
        handle_config_paths(args)
    else:
        logger.error(f"Unknown config subcommand: {args.config_command}")
        sys.exit(1)


def handle_config_show(_):
    """Show current configuration."""
    logger.info("Showing current configuration")
    print(format_config(list_config()))
    print(f"\nConfiguration directory: {get_config_dir()}")


def handle_config_set(args):
    """Set a configuration value."""
    try:
        value = coerce_config_value(args.key, args.value)
    except ValidationError as e:
        logger.error(str(e))
        print(f"Error: {e}")
        sys.exit(1)

    if set_config_value(args.key, value):
        logger.info(f"Configuration value set: {args.key} = {value}")
        print(f"Configuration updated: {args.key} = {value}")
    else:
        logger.error(f"Failed to set configuration value: {args.key}")
        print("Error: Failed to update configuration.")
        sys.exit(1)


def handle_config_paths(_):
    """Show configuration paths."""
    print("\n--- Application Paths ---")
    print(f"Configuration directory: {get_config_dir()}")
    print(f"Configuration file: {get_config_file_path()}")
    print(f"Clippings file: {get_config_value('clippings_file_path')}")
