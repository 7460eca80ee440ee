"""Command-line argument parsers for clippings2org."""

import argparse

from .. import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        description="Convert Kindle clippings ('My Clippings.txt') into an Org-mode outline.", prog="clippings2org"
    )

    # Global options
    _setup_global_options(parser)

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    _setup_convert_command(subparsers)
    _setup_config_command(subparsers)
    _setup_version_command(subparsers)

    return parser


def _setup_global_options(parser):
    """Set up global options for the CLI."""
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}", help="Show program's version number and exit."
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Set the logging level (default: from config, INFO if unset).",
    )
    parser.add_argument(
        "--log-file", type=str, default=None, help="Log output to a specified file in addition to the console."
    )


def _setup_convert_command(subparsers):
    """Set up the convert command and its options."""
    from .commands.convert import handle_convert

    parser_convert = subparsers.add_parser("convert", help="Convert a clippings file into an Org outline")
    parser_convert.add_argument(
        "file",
        type=str,
        nargs="?",
        default=None,
        help="Path to the 'My Clippings.txt' file (default: clippings_file_path from config)",
    )
    parser_convert.add_argument(
        "--output", "-o", type=str, help="Write the outline to a file instead of standard output."
    )
    parser_convert.add_argument(
        "--include-date",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Add a property drawer with each entry's date (default: from config).",
    )
    parser_convert.add_argument(
        "--pdf-links",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Add a PDF link line for each entry with a page (default: from config).",
    )
    parser_convert.add_argument(
        "--pdf-folder", type=str, default=None, help="Folder prefix for PDF links (default: from config)."
    )
    parser_convert.set_defaults(func=handle_convert)


def _setup_config_command(subparsers):
    """Set up the config command and its subcommands."""
    from .commands.config import handle_configure

    parser_config = subparsers.add_parser("config", help="Configure the application")
    config_subparsers = parser_config.add_subparsers(dest="config_command", help="Configuration commands")

    # Config show subcommand
    parser_config_show = config_subparsers.add_parser("show", help="Show current configuration")
    parser_config_show.set_defaults(func=handle_configure)

    # Config set subcommand
    parser_config_set = config_subparsers.add_parser("set", help="Set a configuration value")
    parser_config_set.add_argument("key", type=str, help="Configuration key to set")
    parser_config_set.add_argument("value", type=str, help="Value to set")
    parser_config_set.set_defaults(func=handle_configure)

    # Config paths subcommand
    parser_config_paths = config_subparsers.add_parser("paths", help="Show configuration paths")
    parser_config_paths.set_defaults(func=handle_configure)

    parser_config.set_defaults(func=handle_configure)


def _setup_version_command(subparsers):
    """Set up the version command."""
    from .commands.version import handle_version

    parser_version = subparsers.add_parser("version", help="Show version information")
    parser_version.set_defaults(func=handle_version)
