"""Output formatting utilities for CLI commands."""


def format_conversion_summary(stats, clippings_file, output_file) -> str:
    """Format the conversion summary for display."""
    output = ["\n--- Conversion Summary ---"]
    output.append(f"Clippings File: {clippings_file}")
    output.append(f"Outline File: {output_file}")
    output.append(f"Titles: {stats.titles}")
    output.append(f"Total Clippings: {stats.total_entries}")
    output.append(f"Highlights and Notes: {stats.highlights}")
    output.append(f"Bookmarks: {stats.bookmarks}")
    return "\n".join(output)


def format_config(config: dict) -> str:
    """Format configuration values as ``key: value`` lines."""
    output = ["\n--- Current Configuration ---"]
    for key, value in config.items():
        output.append(f"{key}: {value}")
    return "\n".join(output)
