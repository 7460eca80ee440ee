"""Version command handler for the clippings2org CLI."""

import sys

from ... import __version__


def handle_version(_):
    """Show version information."""
    print(f"clippings2org v{__version__}")
    print(f"Python: {sys.version.split()[0]}")
    print(f"Platform: {sys.platform}")
